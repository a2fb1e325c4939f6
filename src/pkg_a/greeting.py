"""Pure greeting functions with no I/O or framework dependencies."""

from __future__ import annotations

from .either import Either, Left, Right
from .lazy import Lazy

GREETING: Lazy[str] = Lazy(lambda: "Hello")


def greet(name: str) -> str:
    r"""Return the greeting for ``name``.

    Every string is accepted, including the empty string; no validation is
    applied. The first call initialises :data:`GREETING`.

    Args:
        name: Name to greet.

    Returns:
        ``"{GREETING}, {name}!"``.

    Example:
        >>> greet("world")
        'Hello, world!'
        >>> greet("")
        'Hello, !'
    """
    return f"{GREETING.get()}, {name}!"


def greet_either(name: Either[str, str]) -> str:
    """Unwrap either variant of ``name`` and delegate to :func:`greet`.

    Args:
        name: :class:`Left` or :class:`Right` wrapping the name.

    Returns:
        Same result as ``greet(name.value)``.

    Raises:
        TypeError: If ``name`` is neither a Left nor a Right.

    Example:
        >>> greet_either(Left("world")) == greet_either(Right("world")) == greet("world")
        True
    """
    if isinstance(name, (Left, Right)):
        return greet(name.value)
    raise TypeError(f"Expected Left or Right, got {type(name).__name__}")


__all__ = [
    "GREETING",
    "greet",
    "greet_either",
]
