"""A single-slot callback that can be registered and invoked."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

A = TypeVar("A")
R = TypeVar("R")


class Callback(Generic[A, R]):
    """Holds at most one handler; invoking with no handler returns the default.

    While a handler runs it is detached from the slot, so a re-entrant
    invocation from inside the handler yields the default value.
    """

    def __init__(self, default: Any = None) -> None:
        self._default = default
        self._handler: Optional[Callable[[A], R]] = None

    def on(self, f: Callable[[A], R]) -> None:
        """Register ``f`` as the handler, replacing any previous one."""
        self._handler = f

    def invoke(self, args: A) -> R:
        """Call the handler with ``args`` and return its result."""
        handler = self._handler
        if handler is None:
            return self._default
        self._handler = None
        try:
            return handler(args)
        finally:
            self._handler = handler