"""Subcommands: ``hello`` greets a name, ``info`` shows package metadata."""

from __future__ import annotations

import logging

import rich_click as click

from pkg_b import __init__conf__
from pkg_b.application.use_cases import announce
from pkg_b.domain.behaviors import DEFAULT_NAME

from ..context import CLICK_CONTEXT_SETTINGS, get_cli_context

logger = logging.getLogger(__name__)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False, default=DEFAULT_NAME)
@click.pass_context
def cli_hello(ctx: click.Context, name: str) -> None:
    """Print ``[pkg-b] Hello, NAME!``; NAME defaults to Nix."""
    cli_context = get_cli_context(ctx)
    with cli_context.job("hello"):
        line = announce(cli_context.services.write_line, name)
        logger.debug("Printed %r", line)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print name, version and homepage of the installed package."""
    with get_cli_context(ctx).job("info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_hello", "cli_info"]
