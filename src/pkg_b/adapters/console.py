"""Standard-output adapter for finished banner lines."""

from __future__ import annotations

import click


def echo_line(line: str) -> None:
    """Write ``line`` and a newline to stdout through Click.

    Example:
        >>> echo_line("[pkg-b] Hello, Nix!")
        [pkg-b] Hello, Nix!
    """
    click.echo(line)


__all__ = ["echo_line"]
