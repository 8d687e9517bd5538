"""
mesh-quai Exceptions

Custom exception classes for the mesh-quai middleware.
"""

from typing import Optional


class MeshQuaiException(Exception):
    """Base exception for mesh-quai."""
    pass


class ConfigurationError(MeshQuaiException):
    """
    Configuration error.

    Attributes:
        field: Name of the environment variable that failed.
        value: Offending raw text, when there was any.
    """

    def __init__(self, message: str, field: str, value: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.value = value


class MissingFieldError(ConfigurationError):
    """A required environment variable was empty."""

    def __init__(self, field: str):
        super().__init__(f"{field} must be populated", field)


class InvalidEnumValueError(ConfigurationError):
    """A value was outside its allowed set."""

    def __init__(self, field: str, value: str, kind: str):
        super().__init__(f"{value} is not a valid {kind}", field, value)
        self.kind = kind


class ConfigParseError(ConfigurationError):
    """Text could not be parsed into its target type."""

    def __init__(
        self,
        field: str,
        value: str,
        label: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        message = f"unable to parse {label or field} {value}"
        if reason:
            message = f"{reason}: {message}"
        super().__init__(message, field, value)
        self.reason = reason


class InvalidAddressError(MeshQuaiException):
    """Invalid address format."""
    pass
