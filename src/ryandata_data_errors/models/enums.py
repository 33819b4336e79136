"""Validator lifecycle enumerations."""

from __future__ import annotations

from enum import Enum


class ValidatorState(str, Enum):
    """Lifecycle state of a NotifyDataErrorInfo instance."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


# Initial rule map sizing hint used when no capacity is given
DEFAULT_CAPACITY = 3
