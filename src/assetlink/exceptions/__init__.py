"""Errors raised while resolving, reading and writing connected properties.

Every error derives from ``ApplicationError``, whose keyword arguments become
attributes, e.g. ``TypeMismatchError(expected=int, actual=str).expected``.
Raised without a message, an error uses its class docstring.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ApplicationError):
    """Configuration is invalid or missing."""

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        suffix = f": {context}" if context else ""
        return cls(f"{param_name} is missing or empty{suffix}", param_name=param_name)

    @classmethod
    def invalid_value(cls, param_name: str, value: Any, reason: str = "") -> "ConfigurationError":
        suffix = f". {reason}" if reason else ""
        return cls(f"Invalid value for {param_name}: {value!r}{suffix}", param_name=param_name, value=value)


class DuplicateParticipantError(ConfigurationError):
    """A supplier or consumer with that name is already registered."""


class TypeMismatchError(ApplicationError):
    """Runtime value type disagrees with the declared type."""


class UnknownParticipantError(ApplicationError):
    """A write filter targeted a consumer that is not registered."""


class RemoteCommunicationError(ApplicationError):
    """Communication with the remote endpoint failed."""


class UnsupportedOperationError(ApplicationError):
    """No handler is installed for this operation."""


class ElementNotFoundError(ApplicationError, KeyError):
    """Submodel element path does not resolve."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DuplicateParticipantError",
    "ElementNotFoundError",
    "RemoteCommunicationError",
    "TypeMismatchError",
    "UnknownParticipantError",
    "UnsupportedOperationError",
]
