# topmark:header:start
#
#   project      : CFormat
#   file         : arguments.py
#   file_relpath : src/cformat/cli/arguments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn shell words into typed arguments, the way printf(1) reads them.

Every command-line argument is a string. The conversion that consumes it
decides how it is read:

* ``*`` widths and precisions, and integer conversions: an integer with
  optional sign, in decimal, ``0x`` hex or leading-zero octal; a leading
  quote yields the code of the next character (``'A`` is 65).
* float conversions: a Python float literal (``inf``, ``nan`` and ``0x1.8p3``
  included).
* ``%c``: the first character.
* ``%s`` and ``%q``: the text itself.

Arguments beyond what the template consumes are kept as strings, so the engine
reports them as too many.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING

from cformat.cli.errors import CFormatUsageError
from cformat.config.logging import get_logger
from cformat.core.specifier import ConversionType, FromArgument, Specifier
from cformat.values.coerce import coerce_int
from cformat.values.floats import Float
from cformat.values.text import Char, String

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cformat.config.logging import CFormatLogger
    from cformat.core.specifier import FormatElement
    from cformat.values.base import Argument

logger: CFormatLogger = get_logger(__name__)

# Slot kinds
WIDTH_SLOT = "width"
PRECISION_SLOT = "precision"


def decode_escapes(text: str) -> str:
    """Decode backslash escapes (``\\n``, ``\\t``, ``\\x41``, ``\\101``, ``\\u00e9``...).

    Raises:
        CFormatUsageError: On a malformed escape such as a trailing backslash.
    """
    try:
        # characters beyond Latin-1 survive as \\u escapes and decode back
        return codecs.decode(text.encode("latin-1", "backslashreplace"), "unicode_escape")
    except UnicodeDecodeError as exc:
        raise CFormatUsageError(f"invalid escape in {text!r}: {exc.reason}") from exc


def argument_slots(elements: Sequence[FormatElement]) -> list[ConversionType | str]:
    """List what each consumed argument is used for, in consumption order.

    Returns:
        list[ConversionType | str]: `WIDTH_SLOT`, `PRECISION_SLOT`, or the
        conversion of a value argument.
    """
    slots: list[ConversionType | str] = []
    for element in elements:
        if not isinstance(element, Specifier) or not element.spec.consumes_argument:
            continue
        if isinstance(element.spec.width, FromArgument):
            slots.append(WIDTH_SLOT)
        if isinstance(element.spec.precision, FromArgument):
            slots.append(PRECISION_SLOT)
        slots.append(element.spec.conversion_type)
    return slots


def parse_cli_int(raw: str) -> int:
    """Read an integer the way printf(1) does.

    Raises:
        ValueError: If ``raw`` is not an integer.
    """
    text: str = raw.strip()
    if text[:1] in ("'", '"') and len(text) > 1:
        return ord(text[1])
    sign: int = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text[:2].lower() == "0x":
        magnitude: int = int(text[2:], 16)
    elif len(text) > 1 and text.startswith("0"):
        magnitude = int(text[1:], 8)
    else:
        magnitude = int(text, 10)
    return sign * magnitude


def parse_cli_float(raw: str) -> float:
    """Read a float literal; hexadecimal literals go through `float.fromhex`.

    Raises:
        ValueError: If ``raw`` is not a float.
    """
    text: str = raw.strip()
    if "0x" in text.lower():
        return float.fromhex(text)
    return float(text)


def _convert(raw: str, slot: ConversionType | str) -> Argument:
    if slot in (WIDTH_SLOT, PRECISION_SLOT) or (
        isinstance(slot, ConversionType) and slot.is_integer
    ):
        return coerce_int(parse_cli_int(raw))
    if isinstance(slot, ConversionType) and slot.is_float:
        return Float(parse_cli_float(raw))
    if slot is ConversionType.CHAR:
        if not raw:
            raise ValueError("empty character")
        return Char(raw[0])
    return String(raw)


def convert_cli_arguments(
    elements: Sequence[FormatElement], raw_arguments: Sequence[str]
) -> list[Argument]:
    """Convert command-line words to arguments for ``elements``.

    Args:
        elements (Sequence[FormatElement]): The parsed template.
        raw_arguments (Sequence[str]): The words after the template.

    Returns:
        list[Argument]: One argument per word.

    Raises:
        CFormatUsageError: If a word cannot be read as its slot requires.
    """
    slots: list[ConversionType | str] = argument_slots(elements)
    converted: list[Argument] = []
    for index, raw in enumerate(raw_arguments):
        if index >= len(slots):
            converted.append(String(raw))
            continue
        slot: ConversionType | str = slots[index]
        try:
            converted.append(_convert(raw, slot))
        except ValueError as exc:
            wanted: str = slot.label if isinstance(slot, ConversionType) else slot
            raise CFormatUsageError(
                f"argument {index} ({raw!r}) is not valid for {wanted}: {exc}"
            ) from exc
        logger.trace("CLI argument %d %r -> %r", index, raw, converted[-1])
    return converted
