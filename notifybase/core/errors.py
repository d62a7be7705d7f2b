"""
Argument Errors.

Every failure surfaced by the property registry is an InvalidArgumentError.
Callers tell the cases apart through `reason`, not through the class.
"""
from enum import Enum
from typing import Optional


class ArgumentErrorReason(Enum):
    """Why an argument was rejected."""
    INVALID_NAME = "invalid_name"
    MISSING_TYPE = "missing_type"
    UNSUPPORTED_TYPE = "unsupported_type"
    DUPLICATE_NAME = "duplicate_name"
    INCOMPATIBLE_VALUE = "incompatible_value"
    NOT_REGISTERED = "not_registered"


class InvalidArgumentError(ValueError):
    """
    Raised when an argument passed to a registry operation is not valid.

    Args:
        message: Human readable description.
        reason: Which check failed.
        argument: Name of the offending parameter.
    """

    def __init__(self, message: str, reason: ArgumentErrorReason, argument: Optional[str] = None):
        super().__init__(message)
        self.reason = reason
        self.argument = argument


class ArgumentNoneError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str, reason: ArgumentErrorReason = ArgumentErrorReason.MISSING_TYPE):
        super().__init__(f"Argument '{argument}' must not be None.", reason, argument)
