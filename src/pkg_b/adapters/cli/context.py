"""Per-invocation state shared between the root group and its subcommands."""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

if TYPE_CHECKING:
    from pkg_b.composition import AppServices

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as held by ``lib_cli_exit_tools.config``."""


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What a subcommand needs from the root group."""

    services: AppServices
    traceback: bool = False
    logging_active: bool = False

    def job(self, command: str) -> AbstractContextManager[object]:
        """Bind ``command`` to log records while it runs, if logging is up."""
        if not self.logging_active:
            return nullcontext()
        return lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command})


def store_cli_context(ctx: click.Context, cli_context: CLIContext) -> None:
    """Swap the services factory in ``ctx.obj`` for the resolved context."""
    ctx.obj = cli_context


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the context stored by the root group.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Invoke subcommands through the root group.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Copy the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
