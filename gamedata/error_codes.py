class ErrorCodes:
    FORMAT_ERROR = "GD_FORMAT_ERROR"
    ARGUMENT_ERROR = "GD_ARGUMENT_ERROR"
    NOT_FOUND = "GD_NOT_FOUND"
    INVALID_STATE = "GD_INVALID_STATE"
    AMBIGUOUS_CONFIGURATION = "GD_AMBIGUOUS_CONFIGURATION"
    PRECONDITION_FAILED = "GD_PRECONDITION_FAILED"
    DATA_CORRUPTION = "GD_DATA_CORRUPTION"
