"""Property error rule model."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from ryandata_data_errors.core.errors import DataErrorsArgumentError


class PropertyErrorRule(BaseModel):
    """A rule for property validation, with a message.

    ``fail_with`` is a zero-argument predicate that returns True while the
    property value is invalid. ``message`` is what gets reported when it does.

    Example:
        rule = PropertyErrorRule(lambda: person.age < 0, "Age must be non-negative")
        if rule.fails():
            print(rule.message)
    """

    model_config = ConfigDict(frozen=True)

    fail_with: Callable[[], bool]
    message: str

    def __init__(self, fail_with: Callable[[], bool], message: str) -> None:
        if fail_with is None:
            raise DataErrorsArgumentError.for_argument(
                "fail_with", "FailWith action can not be null."
            )
        if message is None:
            raise DataErrorsArgumentError.for_argument("message", "Rule message can not be null.")
        super().__init__(fail_with=fail_with, message=message)

    def fails(self) -> bool:
        """Evaluate the rule condition. Exceptions from the predicate propagate."""
        return bool(self.fail_with())
