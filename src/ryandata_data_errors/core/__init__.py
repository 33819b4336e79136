"""Core error types shared by the rule and validator modules."""

from __future__ import annotations

from ryandata_data_errors.core.errors import (
    ARGUMENT_ERROR,
    PACKAGE_NAME,
    DataErrorsArgumentError,
    require_property_name,
)

__all__ = [
    "ARGUMENT_ERROR",
    "PACKAGE_NAME",
    "DataErrorsArgumentError",
    "require_property_name",
]
