"""Console script target.

Kept outside ``adapters`` so the CLI never imports the composition root.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``pkg-b`` with production adapters and return the exit code."""
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
