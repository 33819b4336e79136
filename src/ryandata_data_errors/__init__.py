"""ryandata-data-errors: per-property validation rules for data-bound objects.

This package provides a base class for data objects that declare their
validation rules once and report errors on demand:
- Rules are predicate/message pairs registered per property
- Errors are queried through has_errors / get_errors
- Subscribers are told when a property's errors may have changed

Quick Start:
    >>> from ryandata_data_errors import NotifyDataErrorInfo
    >>> class Person(NotifyDataErrorInfo):
    ...     def __init__(self) -> None:
    ...         self.name = ""
    ...         super().__init__(can_validate=True)
    ...
    ...     def set_error_rules(self) -> None:
    ...         (
    ...             self.rule_for("name")
    ...             .add_rule(lambda: not self.name, "Name is required")
    ...             .add_rule(lambda: len(self.name) < 2, "Name is too short")
    ...         )
    >>> person = Person()
    >>> person.has_errors
    True
    >>> person.get_errors_messages("name")
    ['Name is required', 'Name is too short']

    # Listen for changes
    >>> person.errors_changed += lambda sender, name: print(f"{name} changed")
    >>> person.raise_property_errors("name")
    name changed
"""

from __future__ import annotations

from ryandata_data_errors.core import (
    PACKAGE_NAME,
    DataErrorsArgumentError,
)
from ryandata_data_errors.models import (
    DEFAULT_CAPACITY,
    PropertyErrorRule,
    ValidatorState,
)
from ryandata_data_errors.protocols import (
    ErrorsChangedHandler,
    NotifyDataErrorInfoProtocol,
)
from ryandata_data_errors.validation import (
    ErrorsChangedEvent,
    NotifyDataErrorInfo,
    PropertyRules,
    add_rule,
    add_rules,
    any_fails,
    name_of,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "DataErrorsArgumentError",
    # Models
    "DEFAULT_CAPACITY",
    "PropertyErrorRule",
    "ValidatorState",
    # Protocols
    "ErrorsChangedHandler",
    "NotifyDataErrorInfoProtocol",
    # Validation
    "NotifyDataErrorInfo",
    "ErrorsChangedEvent",
    "PropertyRules",
    "add_rule",
    "add_rules",
    "any_fails",
    "name_of",
]
