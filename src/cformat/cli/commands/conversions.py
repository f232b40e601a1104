# topmark:header:start
#
#   project      : CFormat
#   file         : conversions.py
#   file_relpath : src/cformat/cli/commands/conversions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat `conversions` command.

Lists the conversion characters the parser accepts and what they produce.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from cformat.cli.cli_types import OutputFormat
from cformat.cli.options import output_format_option
from cformat.core.specifier import ConversionType

if TYPE_CHECKING:
    from cformat.cli.console import ClickConsole

_ACCEPTS: dict[ConversionType, str] = {
    ConversionType.CHAR: "Char, String (1 char), SignedInt (8), UnsignedInt (8/16/32)",
    ConversionType.STRING: "String, CString",
    ConversionType.QUOTED_STRING: "String, CString",
    ConversionType.PERCENT_SIGN: "-",
}


def _accepts(conversion: ConversionType) -> str:
    if conversion.is_integer:
        return "SignedInt, UnsignedInt, Pointer"
    if conversion.is_float:
        return "Float"
    return _ACCEPTS[conversion]


def conversion_rows() -> list[dict[str, Any]]:
    """Return one row per conversion: characters, key, description, accepted arguments."""
    return [
        {
            "characters": list(conversion.aliases),
            "key": conversion.key,
            "description": conversion.label,
            "accepts": _accepts(conversion),
        }
        for conversion in ConversionType
    ]


@click.command(
    name="conversions",
    help="List the supported conversion characters.",
)
@output_format_option
def conversions_command(*, output_format: OutputFormat | None) -> None:
    """List the supported conversion characters.

    Args:
        output_format (OutputFormat | None): Text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    rows: list[dict[str, Any]] = conversion_rows()
    if output_format is OutputFormat.JSON:
        console.print(json.dumps(rows, indent=2))
        return

    for row in rows:
        chars: str = " ".join(f"%{ch}" for ch in row["characters"])
        console.print(f"{console.styled(chars.ljust(10), bold=True)} {row['description']}")
        if ctx.obj.get("verbosity_level", 0) > 0:
            console.print(f"{'':10} accepts: {row['accepts']}")
