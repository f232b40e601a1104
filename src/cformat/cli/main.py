# topmark:header:start
#
#   project      : CFormat
#   file         : main.py
#   file_relpath : src/cformat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``cformat`` command group.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``CFORMAT_LOG_LEVEL`` and always goes to
  stderr, so stdout carries nothing but command output.
"""

from __future__ import annotations

import click

from cformat.cli.cli_types import ColorMode
from cformat.cli.commands.conversions import conversions_command
from cformat.cli.commands.format_cmd import format_command
from cformat.cli.commands.parse import parse_command
from cformat.cli.commands.version import version_command
from cformat.cli.console import ClickConsole
from cformat.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from cformat.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CFormat: C printf formatting from the command line.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the CFormat CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'cformat format FORMAT [ARGS]...' to render a template.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(parse_command)

cli.add_command(conversions_command)

if __name__ == "__main__":
    cli()
