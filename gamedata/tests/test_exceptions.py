import pytest
from gamedata.exceptions import (
    AppException,
    FormatException,
    ArgumentException,
    NotFoundException,
    InvalidStateException,
    AmbiguousConfigurationException,
    PreconditionException,
    DataCorruptionException,
    require
)
from gamedata.error_codes import ErrorCodes

def test_app_exception_instantiation():
    details = {"field": "value"}
    exc = AppException(error_code="TEST_001", status_message="Test message", details=details)

    assert exc.error_code == "TEST_001"
    assert exc.status_message == "Test message"
    assert exc.details == details
    assert str(exc) == "Test message"

def test_app_exception_defaults():
    exc = AppException(error_code="TEST_002", status_message="Default test")
    assert exc.details == {}

def test_format_exception():
    exc = FormatException(status_message="Bad braces")
    assert exc.error_code == ErrorCodes.FORMAT_ERROR
    assert exc.status_message == "Bad braces"
    with pytest.raises(FormatException):
        raise exc

def test_argument_exception():
    exc = ArgumentException(status_message="Bad pair", details={"pair": "a"})
    assert exc.error_code == ErrorCodes.ARGUMENT_ERROR
    assert exc.details == {"pair": "a"}
    with pytest.raises(ArgumentException):
        raise exc

def test_not_found_exception():
    exc = NotFoundException(status_message="No configuration")
    assert exc.error_code == ErrorCodes.NOT_FOUND
    assert exc.status_message == "No configuration"
    with pytest.raises(NotFoundException):
        raise exc

def test_invalid_state_exception():
    exc = InvalidStateException(status_message="Not linear")
    assert exc.error_code == ErrorCodes.INVALID_STATE
    with pytest.raises(InvalidStateException):
        raise exc

def test_ambiguous_configuration_is_an_invalid_state():
    exc = AmbiguousConfigurationException(status_message="Two matches")
    assert exc.error_code == ErrorCodes.AMBIGUOUS_CONFIGURATION
    with pytest.raises(InvalidStateException):
        raise exc

def test_data_corruption_exception():
    exc = DataCorruptionException()
    assert exc.error_code == ErrorCodes.DATA_CORRUPTION
    assert exc.status_message == "Stored data is corrupt"

def test_require_returns_value():
    value = object()
    assert require(value, "value") is value
    assert require(0, "zero") == 0

def test_require_raises_precondition_for_none():
    with pytest.raises(PreconditionException) as excinfo:
        require(None, "rng")
    assert excinfo.value.error_code == ErrorCodes.PRECONDITION_FAILED
    assert str(excinfo.value) == "rng is required."
    assert excinfo.value.details == {"argument": "rng"}

# Test raising and catching base AppException
def test_subclasses_are_caught_as_app_exception():
    with pytest.raises(AppException) as excinfo:
        raise NotFoundException(status_message="Missing")
    assert excinfo.value.error_code == ErrorCodes.NOT_FOUND
