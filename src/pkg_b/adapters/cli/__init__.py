"""rich-click command-line interface for ``pkg-b``."""

from __future__ import annotations

from .commands import cli_hello, cli_info
from .context import CLIContext, get_cli_context
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "cli",
    "cli_hello",
    "cli_info",
    "get_cli_context",
    "main",
]
