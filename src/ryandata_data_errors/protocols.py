from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_data_errors.validation.events import ErrorsChangedEvent


class ErrorsChangedHandler(Protocol):
    """Callback attached to an errors-changed event."""

    def __call__(self, sender: Any, property_name: str) -> None:
        """Handle an errors-changed notification.

        Args:
            sender: Object whose error state changed.
            property_name: Name of the property whose errors may have changed.
        """
        ...


@runtime_checkable
class NotifyDataErrorInfoProtocol(Protocol):
    """Protocol consumed by data-binding frameworks.

    Implementations expose whether the object has errors, the error messages
    of a property, and an event raised when a property's errors change.
    """

    errors_changed: ErrorsChangedEvent

    @property
    def has_errors(self) -> bool:
        """Whether the object currently has validation errors."""
        ...

    def get_errors(self, property_name: str) -> Iterable[str] | None:
        """Get the error messages of a property.

        Args:
            property_name: Name of the property.

        Returns:
            Messages of all failing rules, or None when there are none.
        """
        ...
