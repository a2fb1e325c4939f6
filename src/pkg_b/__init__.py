"""``pkg-b``: prints ``[pkg-b] Hello, Nix!`` using the ``pkg_a`` greeting library."""

from __future__ import annotations

from .__init__conf__ import print_info
from .domain.behaviors import (
    APP_NAME,
    DEFAULT_NAME,
    build_banner,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_NAME",
    "build_banner",
    "print_info",
]
