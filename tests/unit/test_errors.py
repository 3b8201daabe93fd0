import pytest

from assetlink.exceptions import (
    ApplicationError,
    ConfigurationError,
    DuplicateParticipantError,
    ElementNotFoundError,
    RemoteCommunicationError,
    TypeMismatchError,
    UnknownParticipantError,
    UnsupportedOperationError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        ConfigurationError,
        DuplicateParticipantError,
        ElementNotFoundError,
        RemoteCommunicationError,
        TypeMismatchError,
        UnknownParticipantError,
        UnsupportedOperationError,
    ],
)
def test_all_errors_share_base_and_default_message(error_type):
    error = error_type()

    assert isinstance(error, ApplicationError)
    assert str(error)


def test_keyword_arguments_become_attributes():
    error = TypeMismatchError("bad type", expected=int, actual=str)

    assert str(error) == "bad type"
    assert error.expected is int
    assert error.actual is str


def test_duplicate_participant_is_configuration_error():
    assert issubclass(DuplicateParticipantError, ConfigurationError)


def test_configuration_error_helpers():
    assert str(ConfigurationError.missing_value("hostname")) == "hostname is missing or empty"
    assert str(ConfigurationError.missing_value("hostname", "set AAS_HOSTNAME")) == "hostname is missing or empty: set AAS_HOSTNAME"
    assert str(ConfigurationError.invalid_value("port", 0, "Must be positive")) == "Invalid value for port: 0. Must be positive"


def test_element_not_found_is_key_error_without_quoting():
    error = ElementNotFoundError("No element at 'X'")

    assert isinstance(error, KeyError)
    assert str(error) == "No element at 'X'"


def test_configuration_error_helpers_keep_context():
    error = ConfigurationError.invalid_value("listening_port", -1)

    assert error.param_name == "listening_port"
    assert error.value == -1
