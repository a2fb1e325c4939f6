"""Composition root: binds the application ports to concrete adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.console import echo_line
from ..adapters.logging.setup import start_logging

if TYPE_CHECKING:
    from ..application.ports import StartLogging, WriteLine

    _assert_write_line: WriteLine = echo_line
    _assert_start_logging: StartLogging = start_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Adapters the CLI hands to the greeting use case.

    Tests swap single ports with :func:`dataclasses.replace`.
    """

    write_line: WriteLine
    start_logging: StartLogging


def build_production() -> AppServices:
    """Banner to stdout, logs through lib_log_rich."""
    return AppServices(write_line=echo_line, start_logging=start_logging)


__all__ = [
    "AppServices",
    "build_production",
]
