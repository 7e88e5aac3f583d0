from gamedata.error_codes import ErrorCodes

class AppException(Exception):
    def __init__(self, error_code, status_message, details=None):
        super().__init__(status_message)
        self.error_code = error_code
        self.status_message = status_message
        self.details = details if details is not None else {}

class FormatException(AppException):
    def __init__(self, status_message="Malformed text", details=None):
        super().__init__(
            error_code=ErrorCodes.FORMAT_ERROR,
            status_message=status_message,
            details=details
        )

class ArgumentException(AppException):
    def __init__(self, status_message="Invalid argument", details=None):
        super().__init__(
            error_code=ErrorCodes.ARGUMENT_ERROR,
            status_message=status_message,
            details=details
        )

class NotFoundException(AppException):
    def __init__(self, status_message="Resource not found", details=None):
        super().__init__(
            error_code=ErrorCodes.NOT_FOUND,
            status_message=status_message,
            details=details
        )

class InvalidStateException(AppException):
    def __init__(self, status_message="Invalid state", details=None, error_code=ErrorCodes.INVALID_STATE):
        super().__init__(
            error_code=error_code,
            status_message=status_message,
            details=details
        )

class AmbiguousConfigurationException(InvalidStateException):
    def __init__(self, status_message="More than one configuration matches", details=None):
        super().__init__(
            status_message=status_message,
            details=details,
            error_code=ErrorCodes.AMBIGUOUS_CONFIGURATION
        )

class PreconditionException(AppException):
    def __init__(self, status_message="Precondition failed", details=None):
        super().__init__(
            error_code=ErrorCodes.PRECONDITION_FAILED,
            status_message=status_message,
            details=details
        )

class DataCorruptionException(AppException):
    def __init__(self, status_message="Stored data is corrupt", details=None):
        super().__init__(
            error_code=ErrorCodes.DATA_CORRUPTION,
            status_message=status_message,
            details=details
        )


def require(value, name):
    """Raise PreconditionException when a required collaborator or query object is missing."""
    if value is None:
        raise PreconditionException(f"{name} is required.", details={'argument': name})
    return value
