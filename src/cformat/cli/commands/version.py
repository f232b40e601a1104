# topmark:header:start
#
#   project      : CFormat
#   file         : version.py
#   file_relpath : src/cformat/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat `version` command.

Prints the CFormat version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from cformat.cli.cli_types import OutputFormat
from cformat.cli.options import output_format_option
from cformat.constants import CFORMAT_VERSION

if TYPE_CHECKING:
    from cformat.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of CFormat.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of CFormat.

    Args:
        output_format (OutputFormat | None): Text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": CFORMAT_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("CFormat version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CFORMAT_VERSION, bold=True)}")
    else:
        console.print(console.styled(CFORMAT_VERSION, bold=True))
