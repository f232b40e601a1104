# topmark:header:start
#
#   project      : CFormat
#   file         : format_cmd.py
#   file_relpath : src/cformat/cli/commands/format_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat `format` command.

Renders a template with command-line arguments, in the manner of printf(1):

    cformat format '%-8s|%6.2f\\n' pi 3.14159

Unlike printf(1), the template is not reused for surplus arguments and
missing arguments are an error rather than zero or empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cformat.cli.arguments import convert_cli_arguments, decode_escapes
from cformat.cli.errors import CFormatConfigError, from_format_error
from cformat.cli.options import policy_options, policy_overrides
from cformat.config.io import ConfigError, load_policy
from cformat.config.logging import get_logger
from cformat.core.engine import render_elements
from cformat.core.errors import FormatError
from cformat.core.parser import parse

if TYPE_CHECKING:
    from pathlib import Path

    from cformat.cli.console import ClickConsole
    from cformat.config.logging import CFormatLogger
    from cformat.config.policy import (
        CompactTrailingZeros,
        FloatRounding,
        FormatPolicy,
        NegativeWidth,
    )

logger: CFormatLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Render FORMAT with ARGS, like printf(1).",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("template", metavar="FORMAT")
@click.argument("raw_arguments", metavar="[ARGS]...", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--no-escapes",
    "no_escapes",
    is_flag=True,
    help="Take FORMAT literally instead of decoding backslash escapes.",
)
@click.option(
    "-n",
    "--newline",
    is_flag=True,
    help="Append a newline to the output.",
)
@policy_options
def format_command(
    *,
    template: str,
    raw_arguments: tuple[str, ...],
    no_escapes: bool,
    newline: bool,
    negative_width: NegativeWidth | None,
    compact_zeros: CompactTrailingZeros | None,
    rounding: FloatRounding | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Render FORMAT with ARGS.

    Args:
        template (str): The printf template.
        raw_arguments (tuple[str, ...]): Words to convert into arguments.
        no_escapes (bool): Skip backslash-escape decoding of the template.
        newline (bool): Append a newline to the output.
        negative_width (NegativeWidth | None): Policy override.
        compact_zeros (CompactTrailingZeros | None): Policy override.
        rounding (FloatRounding | None): Policy override.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    try:
        policy: FormatPolicy = load_policy(
            config_files=config_files,
            discover=not no_config,
            overrides=policy_overrides(
                negative_width=negative_width,
                compact_zeros=compact_zeros,
                rounding=rounding,
            ),
        )
    except ConfigError as exc:
        raise CFormatConfigError(str(exc)) from exc

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.note(f"policy: {policy.to_dict()}")

    if not no_escapes:
        template = decode_escapes(template)

    try:
        elements = parse(template)
        arguments = convert_cli_arguments(elements, raw_arguments)
        output: str = render_elements(elements, arguments, policy)
    except FormatError as exc:
        raise from_format_error(exc) from exc

    console.print(output, nl=newline)
