"""Root ``pkg-b`` command group.

A bare ``pkg-b`` prints the banner and returns before anything else runs:
no logging runtime, no configuration, no environment lookups. Subcommands
get a started logging runtime when lib_log_rich accepts its settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from pkg_b import __init__conf__
from pkg_b.application.use_cases import announce

from .commands import cli_hello, cli_info
from .context import CLICK_CONTEXT_SETTINGS, CLIContext, apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from pkg_b.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Print the banner, or prepare the context for a subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from pkg_b.composition import build_production
        >>> CliRunner().invoke(cli, [], obj=build_production).stdout
        '[pkg-b] Hello, Nix!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click types obj as Any
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        announce(services.write_line)
        return

    store_cli_context(
        ctx,
        CLIContext(services=services, traceback=traceback, logging_active=services.start_logging()),
    )


cli.add_command(cli_hello)
cli.add_command(cli_info)


__all__ = ["cli"]
