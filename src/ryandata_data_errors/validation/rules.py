"""Per-property rule lists.

Provides PropertyRules, the ordered rule list handed out by
NotifyDataErrorInfo.rule_for(), plus the functional helpers it delegates to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from ryandata_data_errors.core.errors import DataErrorsArgumentError
from ryandata_data_errors.models.rule import PropertyErrorRule


class PropertyRules(list[PropertyErrorRule]):
    """Ordered set of rules for a single property.

    Supports chaining so a property's rules can be declared in one expression:

        (
            self.rule_for("name")
            .add_rule(lambda: not self.name, "Name is required")
            .add_rule(lambda: len(self.name) > 50, "Name is too long")
        )
    """

    def add_rule(self, fail_with: Callable[[], bool], message: str) -> PropertyRules:
        """Add a rule to the set. See :func:`add_rule`."""
        return add_rule(self, fail_with, message)

    def add_rules(self, rules: Iterable[PropertyErrorRule]) -> PropertyRules:
        """Add a collection of rules to the set. See :func:`add_rules`."""
        return add_rules(self, rules)

    def any_fails(self) -> bool:
        """Check whether any rule in the set currently fails."""
        return any_fails(self)

    def failing_messages(self) -> list[str]:
        """Messages of every failing rule, in registration order.

        Every predicate is evaluated exactly once.
        """
        return [rule.message for rule in self if rule.fails()]


def add_rule(
    rules: list[PropertyErrorRule], fail_with: Callable[[], bool], message: str
) -> Any:
    """Add a rule to the set of rules of a property.

    Args:
        rules: Rule list to append to.
        fail_with: Predicate returning True while the property is invalid.
        message: Message to show when the rule fails.

    Returns:
        The same rule list, for chaining.

    Raises:
        DataErrorsArgumentError: If fail_with or message is None. The list
            is not modified.
    """
    if fail_with is None:
        raise DataErrorsArgumentError.for_argument("fail_with", "FailWith action can not be null.")
    if message is None:
        raise DataErrorsArgumentError.for_argument("message", "Rule message can not be null.")

    rules.append(PropertyErrorRule(fail_with, message))
    return rules


def add_rules(rules: list[PropertyErrorRule], batch: Iterable[PropertyErrorRule]) -> Any:
    """Add a collection of rules to the set of rules of a property.

    Args:
        rules: Rule list to append to.
        batch: Rules to append, in order. An empty batch is ignored.

    Returns:
        The same rule list, for chaining.

    Raises:
        DataErrorsArgumentError: If batch is None or contains anything other
            than PropertyErrorRule. The list is not modified.
    """
    if batch is None:
        raise DataErrorsArgumentError.for_argument("rules", "Set of rules can not be null.")

    pending = list(batch)
    for index, rule in enumerate(pending):
        if not isinstance(rule, PropertyErrorRule):
            raise DataErrorsArgumentError.for_argument(
                "rules",
                "Set of rules contains an item that is not a PropertyErrorRule.",
                {"index": index},
            )

    if pending:
        rules.extend(pending)
    return rules


def any_fails(rules: Iterable[PropertyErrorRule]) -> bool:
    """Test whether any rule fails, stopping at the first failure.

    Args:
        rules: Rules to test, in order.

    Returns:
        True if a rule fails, False otherwise (including for no rules).
    """
    return any(rule.fails() for rule in rules)
