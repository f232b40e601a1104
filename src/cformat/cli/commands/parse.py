# topmark:header:start
#
#   project      : CFormat
#   file         : parse.py
#   file_relpath : src/cformat/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat `parse` command.

Shows how a template is split into verbatim text and conversion specifiers,
one element per line, or as a JSON document with ``--format json``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from cformat.cli.arguments import decode_escapes
from cformat.cli.cli_types import OutputFormat
from cformat.cli.errors import from_format_error
from cformat.cli.options import output_format_option
from cformat.core.engine import count_arguments
from cformat.core.errors import FormatError
from cformat.core.parser import parse
from cformat.core.specifier import FromArgument, Specifier

if TYPE_CHECKING:
    from cformat.cli.console import ClickConsole
    from cformat.core.specifier import ConversionSpecifier, FormatElement, NumericParam


def _param_text(param: NumericParam) -> str:
    return "*" if isinstance(param, FromArgument) else str(param.value)


def describe_specifier(spec: ConversionSpecifier) -> str:
    """One-line summary of a specifier for the text listing."""
    parts: list[str] = [spec.conversion_type.key]
    if spec.flags_text():
        parts.append(f"flags={spec.flags_text()!r}")
    parts.append(f"width={_param_text(spec.width)}")
    precision: str = _param_text(spec.precision)
    parts.append(f"precision={precision}" if spec.explicit_precision else "precision=default")
    if spec.length_modifier:
        parts.append(f"length={spec.length_modifier}")
    return " ".join(parts)


@click.command(
    name="parse",
    help="Show the elements FORMAT parses into.",
)
@click.argument("template", metavar="FORMAT")
@click.option(
    "--no-escapes",
    "no_escapes",
    is_flag=True,
    help="Take FORMAT literally instead of decoding backslash escapes.",
)
@output_format_option
def parse_command(
    *,
    template: str,
    no_escapes: bool,
    output_format: OutputFormat | None,
) -> None:
    """Show the elements FORMAT parses into.

    Args:
        template (str): The template to parse.
        no_escapes (bool): Skip backslash-escape decoding.
        output_format (OutputFormat | None): Text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if not no_escapes:
        template = decode_escapes(template)
    try:
        elements: tuple[FormatElement, ...] = parse(template)
    except FormatError as exc:
        raise from_format_error(exc) from exc

    if output_format is OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "template": template,
                    "argument_count": count_arguments(elements),
                    "elements": [element.to_dict() for element in elements],
                },
                indent=2,
            )
        )
        return

    for element in elements:
        if isinstance(element, Specifier):
            label: str = console.styled("specifier", fg="cyan")
            console.print(f"{label} {describe_specifier(element.spec)}")
        else:
            label = console.styled("verbatim ", fg="green")
            console.print(f"{label} {element.text!r}")
    if ctx.obj.get("verbosity_level", 0) > 0:
        console.note(f"arguments consumed: {count_arguments(elements)}")
