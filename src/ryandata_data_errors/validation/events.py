"""Errors-changed event.

An explicit observer list that notifies subscribers when the error state of
a property may have changed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from ryandata_data_errors.core.errors import DataErrorsArgumentError
from ryandata_data_errors.protocols import ErrorsChangedHandler

logger = logging.getLogger(__name__)


class ErrorsChangedEvent:
    """Ordered collection of errors-changed handlers.

    Handlers are called synchronously, in attachment order, with
    ``(sender, property_name)``. A handler attached twice is called twice.

    Example:
        event = ErrorsChangedEvent()
        event += lambda sender, name: print(f"{name} changed")
        event.notify(model, "age")
    """

    def __init__(self) -> None:
        self._handlers: list[ErrorsChangedHandler] = []

    def add(self, handler: ErrorsChangedHandler) -> None:
        """Attach a handler.

        Raises:
            DataErrorsArgumentError: If handler is None or not callable.
        """
        if handler is None or not callable(handler):
            raise DataErrorsArgumentError.for_argument("handler", "Handler must be callable.")
        self._handlers.append(handler)

    def remove(self, handler: ErrorsChangedHandler) -> None:
        """Detach the most recently attached occurrence of a handler.

        Unknown handlers are ignored.
        """
        for i in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[i] == handler:
                self._handlers.pop(i)
                return

    def notify(self, sender: Any, property_name: str) -> None:
        """Call every attached handler.

        Iterates over a snapshot, so handlers may attach or detach during
        notification without affecting the current round. Handler exceptions
        propagate and stop delivery to later handlers.
        """
        handlers = tuple(self._handlers)
        logger.debug("Errors changed for %s: notifying %d handler(s)", property_name, len(handlers))
        for handler in handlers:
            handler(sender, property_name)

    def clear(self) -> None:
        """Detach all handlers."""
        self._handlers.clear()

    @property
    def handlers(self) -> list[ErrorsChangedHandler]:
        """Get copy of handlers list."""
        return self._handlers.copy()

    def __iadd__(self, handler: ErrorsChangedHandler) -> ErrorsChangedEvent:
        self.add(handler)
        return self

    def __isub__(self, handler: ErrorsChangedHandler) -> ErrorsChangedEvent:
        self.remove(handler)
        return self

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)

    def __iter__(self) -> Iterator[ErrorsChangedHandler]:
        return iter(tuple(self._handlers))
