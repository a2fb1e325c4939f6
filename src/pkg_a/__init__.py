"""Greeting library: a single greeting function over a lazily initialised constant."""

from __future__ import annotations

from .either import Either, Left, Right
from .greeting import GREETING, greet, greet_either
from .lazy import Lazy

__all__ = [
    "GREETING",
    "Either",
    "Lazy",
    "Left",
    "Right",
    "greet",
    "greet_either",
]
