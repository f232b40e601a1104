# topmark:header:start
#
#   project      : CFormat
#   file         : parser.py
#   file_relpath : src/cformat/core/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse printf templates into `FormatElement` sequences.

Grammar of one conversion specifier (the text after ``%``)::

    %[flags][width][.precision][length]conversion

    flags      := any run of '#', '0', '-', ' ', '+'
    width      := '*' | digits
    precision  := '.' ('*' | digits)      ; a bare '.' means 0
    length     := hh | h | ll | l | q | L | j | z | Z | t
    conversion := d i u o x X e E f F g G a A c C s S q p %

The parser never looks at arguments; argument counts are checked by the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cformat.config.logging import get_logger
from cformat.constants import (
    DEFAULT_PRECISION,
    INT_MAX,
    LENGTH_MODIFIERS,
    UNBOUNDED_PRECISION,
)
from cformat.core.errors import ParseError
from cformat.core.specifier import (
    FROM_ARGUMENT,
    ConversionSpecifier,
    ConversionType,
    NumericLiteral,
    Specifier,
    Verbatim,
    conversion_for_char,
)

if TYPE_CHECKING:
    from cformat.config.logging import CFormatLogger
    from cformat.core.specifier import FormatElement, NumericParam

logger: CFormatLogger = get_logger(__name__)

_FLAG_FIELDS: dict[str, str] = {
    "#": "alt_form",
    "0": "zero_pad",
    "-": "left_adjust",
    " ": "space_sign",
    "+": "force_sign",
}


def parse(template: str) -> tuple[FormatElement, ...]:
    """Split ``template`` into verbatim runs and conversion specifiers.

    Args:
        template (str): The printf-style format string.

    Returns:
        tuple[FormatElement, ...]: Elements in template order. Empty verbatim
        runs are never emitted.

    Raises:
        ParseError: If a specifier is malformed or uses an unknown conversion.

    Example:
        ```python
        >>> parse("Hello %#06x")[0]
        Verbatim(text='Hello ')
        ```
    """
    elements: list[FormatElement] = []
    pos: int = 0
    end: int = len(template)

    while pos < end:
        percent: int = template.find("%", pos)
        if percent < 0:
            elements.append(Verbatim(template[pos:]))
            break
        if percent > pos:
            elements.append(Verbatim(template[pos:percent]))
        spec, pos = _take_conversion_specifier(template, percent)
        logger.trace("parsed %r at offset %d: %s", template[percent:pos], percent, spec)
        elements.append(Specifier(spec))

    return tuple(elements)


def _take_conversion_specifier(template: str, percent: int) -> tuple[ConversionSpecifier, int]:
    """Parse the specifier whose ``%`` sits at ``percent``.

    Returns:
        tuple[ConversionSpecifier, int]: The specifier and the offset just past
        its conversion character.
    """
    pos: int = percent + 1
    flags: dict[str, bool] = {}

    while pos < len(template) and template[pos] in _FLAG_FIELDS:
        flags[_FLAG_FIELDS[template[pos]]] = True
        pos += 1

    width, pos = _take_numeric_param(template, pos, percent)

    precision: NumericParam | None = None
    if pos < len(template) and template[pos] == ".":
        precision, pos = _take_numeric_param(template, pos + 1, percent)

    length_modifier: str | None = None
    for modifier in LENGTH_MODIFIERS:
        if template.startswith(modifier, pos):
            after: int = pos + len(modifier)
            # 'q' is both a modifier and a conversion: only a modifier when
            # a conversion character follows it.
            if after < len(template) and conversion_for_char(template[after]) is not None:
                length_modifier = modifier
                pos = after
            break

    if pos >= len(template):
        raise ParseError("incomplete conversion specifier", offset=percent)
    conversion_char: str = template[pos]
    conversion: ConversionType | None = conversion_for_char(conversion_char)
    if conversion is None:
        raise ParseError(f"unknown conversion character {conversion_char!r}", offset=percent)
    if conversion_char == "p":
        flags["alt_form"] = True

    explicit_precision: bool = precision is not None
    if precision is None:
        precision = NumericLiteral(
            UNBOUNDED_PRECISION if conversion is ConversionType.STRING else DEFAULT_PRECISION
        )

    spec = ConversionSpecifier(
        width=width,
        precision=precision,
        conversion_type=conversion,
        explicit_precision=explicit_precision,
        length_modifier=length_modifier,
        **flags,
    )
    return spec, pos + 1


def _take_numeric_param(template: str, pos: int, percent: int) -> tuple[NumericParam, int]:
    """Parse ``*`` or a (possibly empty) digit run starting at ``pos``."""
    if pos < len(template) and template[pos] == "*":
        return FROM_ARGUMENT, pos + 1

    start: int = pos
    while pos < len(template) and template[pos] in "0123456789":
        pos += 1
    value: int = int(template[start:pos]) if pos > start else 0
    if value > INT_MAX:
        raise ParseError("field width or precision out of range", offset=percent)
    return NumericLiteral(value), pos
