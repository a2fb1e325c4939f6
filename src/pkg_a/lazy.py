"""Thread-safe lazily initialised values."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """Compute a value once, on first access, and share it read-only.

    Concurrent first callers block on a lock while exactly one of them runs
    the initialiser. A failing initialiser caches nothing, so the next
    :meth:`get` tries again.

    Example:
        >>> calls = []
        >>> value = Lazy(lambda: calls.append(1) or "ready")
        >>> value.is_initialised()
        False
        >>> value.get(), value.get()
        ('ready', 'ready')
        >>> len(calls)
        1
    """

    __slots__ = ("_init", "_lock", "_value")

    def __init__(self, init: Callable[[], T]) -> None:
        self._init = init
        self._lock = threading.Lock()
        self._value: object = _UNSET

    def get(self) -> T:
        """Return the value, running the initialiser on first access."""
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._init()
                    self._value = value
        return value  # type: ignore[return-value]

    def is_initialised(self) -> bool:
        """Report whether the initialiser has completed."""
        return self._value is not _UNSET

    def __repr__(self) -> str:
        if self.is_initialised():
            return f"Lazy({self._value!r})"
        return "Lazy(<uninitialised>)"


__all__ = ["Lazy"]
