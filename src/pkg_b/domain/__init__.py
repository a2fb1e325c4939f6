"""Domain layer: the startup banner built on the ``pkg_a`` greeting library."""

from __future__ import annotations

from .behaviors import (
    APP_NAME,
    DEFAULT_NAME,
    build_banner,
    format_banner,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_NAME",
    "build_banner",
    "format_banner",
]
