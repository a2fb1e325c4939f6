"""Application layer: ports and the greeting use case."""

from __future__ import annotations

from .ports import StartLogging, WriteLine
from .use_cases import announce

__all__ = [
    "StartLogging",
    "WriteLine",
    "announce",
]
