"""Two-variant container used to pass a name in either of two forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Left(Generic[L]):
    """Left variant, used for a name borrowed from the caller.

    Example:
        >>> Left("world").value
        'world'
    """

    value: L


@dataclass(frozen=True, slots=True)
class Right(Generic[R]):
    """Right variant, used for a name handed over to the callee.

    Example:
        >>> Right("world").value
        'world'
    """

    value: R


Either = Union[Left[L], Right[R]]
"""Either a :class:`Left` or a :class:`Right`."""


__all__ = ["Either", "Left", "Right"]
