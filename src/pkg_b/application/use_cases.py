"""Greeting use case shared by the bare invocation and ``pkg-b hello``."""

from __future__ import annotations

from ..domain.behaviors import DEFAULT_NAME, build_banner
from .ports import WriteLine


def announce(write_line: WriteLine, name: str = DEFAULT_NAME) -> str:
    """Build the banner for ``name`` and hand it to ``write_line``.

    Returns the line that was written so callers can log or assert on it.

    Example:
        >>> lines: list[str] = []
        >>> announce(lines.append)
        '[pkg-b] Hello, Nix!'
        >>> lines
        ['[pkg-b] Hello, Nix!']
    """
    line = build_banner(name)
    write_line(line)
    return line


__all__ = ["announce"]
