"""Callable Protocols the greeting use case and the CLI depend on.

Adapters are plain module-level functions; they satisfy these Protocols
structurally, so the composition root can swap them without subclassing.
"""

from __future__ import annotations

from typing import Protocol


class WriteLine(Protocol):
    """Deliver one finished output line (the newline is the adapter's job)."""

    def __call__(self, line: str) -> None: ...


class StartLogging(Protocol):
    """Bring up the logging runtime; report whether it is running afterwards."""

    def __call__(self) -> bool: ...


__all__ = [
    "StartLogging",
    "WriteLine",
]
