"""Rule models and lifecycle enumerations."""

from __future__ import annotations

from ryandata_data_errors.models.enums import DEFAULT_CAPACITY, ValidatorState
from ryandata_data_errors.models.rule import PropertyErrorRule

__all__ = [
    "DEFAULT_CAPACITY",
    "PropertyErrorRule",
    "ValidatorState",
]
