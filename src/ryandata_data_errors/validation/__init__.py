"""Rule registration, evaluation and change notification.

This module provides the NotifyDataErrorInfo base class together with the
rule lists and event it is built from.
"""

from ryandata_data_errors.validation.base import NotifyDataErrorInfo
from ryandata_data_errors.validation.events import ErrorsChangedEvent
from ryandata_data_errors.validation.members import name_of
from ryandata_data_errors.validation.rules import (
    PropertyRules,
    add_rule,
    add_rules,
    any_fails,
)

__all__ = [
    "NotifyDataErrorInfo",
    "ErrorsChangedEvent",
    "PropertyRules",
    "add_rule",
    "add_rules",
    "any_fails",
    "name_of",
]
