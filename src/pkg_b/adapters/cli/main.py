"""Exit-code boundary shared by the console script and ``python -m pkg_b``."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from pkg_b import __init__conf__

from .context import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from pkg_b.composition import AppServices

#: Characters of a failure message printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
#: Characters printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _report_failure(exc: BaseException) -> int:
    """Render ``exc`` on stderr and translate it into a process exit code."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        # ``lib_cli_exit_tools.run_cli`` has no ``obj`` parameter, hence the direct call.
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - every failure becomes an exit code here
        return _report_failure(exc)
    return 0


def _stop_logging() -> None:
    # lib_log_rich only allows shutdown from the main thread.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``pkg-b`` and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put ``lib_cli_exit_tools.config`` back as it was
            before the run.
        services_factory: Zero-argument callable returning
            :class:`~pkg_b.composition.AppServices`, normally ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from pkg_b.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        [pkg-b] Hello, Nix!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous_state = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        _stop_logging()


__all__ = ["TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT", "main"]
