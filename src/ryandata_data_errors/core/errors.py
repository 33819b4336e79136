"""Package error classes.

These classes provide package-specific error handling for rule registration,
error queries and change notification.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_data_errors"

ARGUMENT_ERROR = "argument_error"


class DataErrorsArgumentError(PydanticCustomError):
    """Raised when an operation receives a missing or malformed argument.

    Inherits from PydanticCustomError (and therefore ValueError) so callers
    can treat it like any other Pydantic validation failure. The error context
    always carries the package name and the offending argument.
    """

    @classmethod
    def for_argument(
        cls,
        argument: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> DataErrorsArgumentError:
        """Build an argument error.

        Args:
            argument: Name of the offending argument.
            message: Human readable description of the problem.
            context: Additional context merged into the error context.

        Returns:
            DataErrorsArgumentError instance.
        """
        ctx = {
            "package": PACKAGE_NAME,
            "argument": argument,
            **(context or {}),
        }
        return cls(ARGUMENT_ERROR, message, ctx)

    @property
    def argument(self) -> str | None:
        """Name of the offending argument, if recorded."""
        return (self.context or {}).get("argument")


def require_property_name(property_name: Any, argument: str = "property_name") -> str:
    """Check that a property name is a non-blank string.

    Args:
        property_name: Value to check.
        argument: Argument name reported in the error.

    Returns:
        The property name unchanged.

    Raises:
        DataErrorsArgumentError: If the name is None, not a string, or blank.
    """
    if not isinstance(property_name, str) or not property_name.strip():
        raise DataErrorsArgumentError.for_argument(argument, "Property name can not be null.")
    return property_name
