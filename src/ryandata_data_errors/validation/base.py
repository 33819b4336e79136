"""Data error info base class.

Provides NotifyDataErrorInfo, a base class for data objects that declare
per-property validation rules and report them through the has-errors /
get-errors contract used by data-binding frameworks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from abstract_validation_base import ValidationResult

from ryandata_data_errors.core.errors import DataErrorsArgumentError, require_property_name
from ryandata_data_errors.models.enums import DEFAULT_CAPACITY, ValidatorState
from ryandata_data_errors.validation.events import ErrorsChangedEvent
from ryandata_data_errors.validation.members import name_of
from ryandata_data_errors.validation.rules import PropertyRules

logger = logging.getLogger(__name__)


class NotifyDataErrorInfo(ABC):
    """Abstract base class for objects that validate their own properties.

    Subclasses implement set_error_rules(), which is called exactly once
    from __init__ and registers rules through rule_for(). Predicates are
    usually closures over the object's own fields and are evaluated every
    time errors are queried.

    Validation is off until can_validate is set to True. Property setters
    call raise_property_errors() so subscribers of errors_changed can
    re-query the error state.

    Example:
        class Person(NotifyDataErrorInfo):
            def __init__(self) -> None:
                self._age = 0
                super().__init__(can_validate=True)

            @property
            def age(self) -> int:
                return self._age

            @age.setter
            def age(self, value: int) -> None:
                self._age = value
                self.raise_property_errors("age")

            def set_error_rules(self) -> None:
                self.rule_for(Person.age).add_rule(
                    lambda: self._age < 0, "Age must be non-negative"
                )

        person = Person()
        person.age = -1
        person.get_errors_messages("age")  # ["Age must be non-negative"]
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, can_validate: bool = False) -> None:
        """Initialize the rule set and run set_error_rules().

        Args:
            capacity: Expected number of validated properties. Sizing hint
                only; it has no effect on behavior.
            can_validate: Initial value of can_validate.

        Raises:
            DataErrorsArgumentError: If capacity is not a non-negative int.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise DataErrorsArgumentError.for_argument(
                "capacity", "Capacity must be a non-negative integer."
            )

        self.capacity = capacity
        self.can_validate = can_validate
        self.errors_changed = ErrorsChangedEvent()
        self._validation_rules: dict[str, PropertyRules] = {}
        self._state = ValidatorState.UNINITIALIZED

        self.set_error_rules()
        self._compact_rules()
        self._state = ValidatorState.READY

    @abstractmethod
    def set_error_rules(self) -> None:
        """Define the rules of the properties to validate."""
        ...

    def _compact_rules(self) -> None:
        """Finish the one-time setup phase.

        Python lists carry no reserved capacity worth trimming, so this only
        records the shape of the final rule set.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s rule set ready: %d properties, %d rules",
                type(self).__name__,
                len(self._validation_rules),
                sum(len(rules) for rules in self._validation_rules.values()),
            )

    # =========================================================================
    # Registration
    # =========================================================================

    def rule_for(self, property_name: str | property) -> PropertyRules:
        """Initialize or get the set of rules of a property.

        Args:
            property_name: Property name, or a property object taken from the
                class (e.g. ``Person.age``) whose name is resolved.

        Returns:
            The rule list for the property, created empty on first access.

        Raises:
            DataErrorsArgumentError: If the name is blank or the property
                object can not be resolved to a name.
        """
        if isinstance(property_name, str) or property_name is None:
            name = require_property_name(property_name)
        else:
            name = name_of(property_name)

        rules = self._validation_rules.get(name)
        if rules is None:
            rules = PropertyRules()
            self._validation_rules[name] = rules
        return rules

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> ValidatorState:
        """Lifecycle state of this validator."""
        return self._state

    @property
    def rules(self) -> Mapping[str, PropertyRules]:
        """Read-only view of the rule set, keyed by property name."""
        return MappingProxyType(self._validation_rules)

    @property
    def has_errors(self) -> bool:
        """Check if the object has validation errors.

        Stops at the first failing rule. No rule is evaluated while
        can_validate is False.
        """
        if not self.can_validate or not self._validation_rules:
            return False

        return any(rules.any_fails() for rules in self._validation_rules.values())

    def property_has_errors(self, property_name: str) -> bool:
        """Check if a property of the object has validation errors.

        Args:
            property_name: Name of the property.

        Returns:
            True if any rule of the property fails. Unregistered properties
            have no errors.

        Raises:
            DataErrorsArgumentError: If property_name is blank.
        """
        require_property_name(property_name)

        if not self.can_validate:
            return False

        rules = self._validation_rules.get(property_name)
        return rules.any_fails() if rules else False

    def get_errors_messages(self, property_name: str) -> list[str] | None:
        """Get the messages of all failed rules of a property.

        Each rule of the property is evaluated exactly once.

        Args:
            property_name: Name of the property.

        Returns:
            Messages in registration order, or None when validation is off,
            the property has no rules, or no rule fails.

        Raises:
            DataErrorsArgumentError: If property_name is blank.
        """
        require_property_name(property_name)

        if not self.can_validate:
            return None

        rules = self._validation_rules.get(property_name)
        if not rules:
            return None

        messages = rules.failing_messages()
        return messages or None

    def get_errors(self, property_name: str) -> Iterable[str] | None:
        """Get the messages of all failed rules of a property.

        Same result as get_errors_messages(), typed for data-binding
        consumers that only iterate.
        """
        return self.get_errors_messages(property_name)

    def error_properties(self) -> list[str]:
        """Get the names of all properties that currently have errors.

        Returns:
            Property names in registration order.
        """
        if not self.can_validate:
            return []
        return [name for name, rules in self._validation_rules.items() if rules.any_fails()]

    def to_validation_result(self) -> ValidationResult:
        """Snapshot the current errors as a ValidationResult.

        Returns:
            ValidationResult with one error per failing rule. Valid when
            validation is off or nothing fails.
        """
        result = ValidationResult(is_valid=True)
        if not self.can_validate:
            return result

        for name, rules in self._validation_rules.items():
            for message in rules.failing_messages():
                result.add_error(name, message)
        return result

    # =========================================================================
    # Notification
    # =========================================================================

    def raise_property_errors(self, property_name: str) -> None:
        """Notify subscribers that the errors of a property changed.

        Args:
            property_name: Name of the property.

        Raises:
            DataErrorsArgumentError: If property_name is blank.
        """
        require_property_name(property_name)
        self.errors_changed.notify(self, property_name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(properties={list(self._validation_rules)!r}, "
            f"can_validate={self.can_validate!r}, state={self._state.value!r})"
        )

