# topmark:header:start
#
#   project      : CFormat
#   file         : text.py
#   file_relpath : src/cformat/values/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Character and string arguments.

Widths and precisions of text conversions count UTF-8 bytes, as a C library
does. A precision never splits a character: truncation backs off to the
nearest character boundary at or below the limit.

``%q`` writes a double-quoted literal that a Lua-style reader turns back into
the original text. Control characters use decimal escapes; the three-digit
form is chosen whenever a digit follows, so ``"\\1" + "2"`` never reads back
as ``"\\12"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from cformat.config.policy import DEFAULT_POLICY
from cformat.core.errors import WrongTypeError
from cformat.core.specifier import ConversionType, literal_value
from cformat.values.base import Argument, pad_text, wrong_type

if TYPE_CHECKING:
    from cformat.config.policy import FormatPolicy
    from cformat.core.specifier import ConversionSpecifier

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
}


def decode_char_code(code: int, bits: int) -> str:
    """Interpret an unsigned integer as a character for ``%c``.

    Args:
        code (int): The (non-negative) value.
        bits (int): Width of the integer type: 8 is an ASCII byte, 16 a UTF-16
            code unit, 32 a Unicode scalar value.

    Returns:
        str: The single character.

    Raises:
        WrongTypeError: If the value is not a character of that encoding.
    """
    if bits == 8:
        if code > 0x7F:
            raise WrongTypeError(f"byte {code:#04x} is not an ASCII character")
    elif bits == 16:
        if 0xD800 <= code <= 0xDFFF:
            raise WrongTypeError(f"code unit {code:#06x} is a lone surrogate")
    elif bits == 32:
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            raise WrongTypeError(f"{code:#x} is not a Unicode scalar value")
    else:
        raise WrongTypeError(f"a {bits}-bit integer cannot be rendered as a character")
    return chr(code)


def truncate_utf8(text: str, limit: int) -> str:
    """Return the longest prefix of ``text`` whose UTF-8 form fits in ``limit`` bytes."""
    encoded: bytes = text.encode("utf-8", "surrogatepass")
    if len(encoded) <= limit:
        return text
    cut: int = max(limit, 0)
    # back off over continuation bytes (0b10xxxxxx)
    while cut > 0 and encoded[cut] & 0xC0 == 0x80:
        cut -= 1
    return encoded[:cut].decode("utf-8", "surrogatepass")


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted, escaped literal.

    Escapes ``"``, ``\\``, newline and carriage return with a backslash,
    writes other control characters (and DEL) as decimal escapes, and keeps
    everything else as is.
    """
    out: list[str] = ['"']
    for index, ch in enumerate(text):
        simple: str | None = _SIMPLE_ESCAPES.get(ch)
        if simple is not None:
            out.append(simple)
            continue
        code: int = ord(ch)
        if code < 0x20 or code == 0x7F:
            followed_by_digit: bool = index + 1 < len(text) and text[index + 1] in "0123456789"
            out.append(f"\\{code:03d}" if followed_by_digit else f"\\{code}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


@dataclass(frozen=True, slots=True)
class Char(Argument):
    """A single Unicode character; supports ``%c`` only."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char needs exactly one character, got {self.value!r}")

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        if spec.conversion_type is not ConversionType.CHAR:
            raise wrong_type(self, spec)
        return pad_text(self.value, spec)


@dataclass(frozen=True, slots=True)
class String(Argument):
    """Text for ``%s`` and ``%q``; a one-character string also serves ``%c``."""

    value: str

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        conversion: ConversionType = spec.conversion_type
        if conversion is ConversionType.STRING:
            return pad_text(truncate_utf8(self.value, literal_value(spec.precision)), spec)
        if conversion is ConversionType.QUOTED_STRING:
            return quote(self.value)
        if conversion is ConversionType.CHAR and len(self.value) == 1:
            return pad_text(self.value, spec)
        raise wrong_type(self, spec)


@dataclass(frozen=True, slots=True)
class CString(Argument):
    """A NUL-terminated byte string, rendered up to its first NUL byte.

    The bytes must be valid UTF-8; anything else is reported as a wrong type
    when rendered.
    """

    value: bytes

    def text(self) -> str:
        """Decode the bytes before the first NUL.

        Raises:
            WrongTypeError: If they are not valid UTF-8.
        """
        raw: bytes = self.value.split(b"\0", 1)[0]
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WrongTypeError(f"C string is not valid UTF-8 ({exc.reason})") from exc

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        if spec.conversion_type not in (ConversionType.STRING, ConversionType.QUOTED_STRING):
            raise wrong_type(self, spec)
        return String(self.text()).render_as(spec, policy)
