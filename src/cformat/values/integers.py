# topmark:header:start
#
#   project      : CFormat
#   file         : integers.py
#   file_relpath : src/cformat/values/integers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-width integer and pointer arguments.

Signed values print their magnitude with a sign under ``%d``; under ``%o``,
``%x`` and ``%X`` they print their two's complement bit pattern at their own
width, as C does after the implicit unsigned conversion. An explicit precision
is a minimum digit count and disables zero padding; ``%.0d`` of zero prints no
digits at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from cformat.config.policy import DEFAULT_POLICY
from cformat.constants import INT_MAX, INT_MIN, POINTER_BITS
from cformat.core.specifier import ConversionType, literal_value
from cformat.values.base import Argument, pad_number, pad_text, wrong_type
from cformat.values.text import decode_char_code

if TYPE_CHECKING:
    from cformat.config.policy import FormatPolicy
    from cformat.core.specifier import ConversionSpecifier

INTEGER_BITS: Final[tuple[int, ...]] = (8, 16, 32, 64)

# conversion -> (format() spec for the digits, alternate-form prefix)
_RADIX: Final[dict[ConversionType, tuple[str, str]]] = {
    ConversionType.DEC_INT: ("d", ""),
    ConversionType.OCT_INT: ("o", "0"),
    ConversionType.HEX_INT_LOWER: ("x", "0x"),
    ConversionType.HEX_INT_UPPER: ("X", "0X"),
}


def format_integer(magnitude: int, spec: ConversionSpecifier, *, sign: str = "") -> str:
    """Render a non-negative integer under an integer conversion.

    Args:
        magnitude (int): The value to print (already made non-negative).
        spec (ConversionSpecifier): A resolved integer specifier.
        sign (str): Sign character(s) to place before any prefix.

    Returns:
        str: The padded field.
    """
    digit_spec, alt_prefix = _RADIX[spec.conversion_type]
    digits: str = format(magnitude, digit_spec)

    if spec.explicit_precision:
        min_digits: int = literal_value(spec.precision)
        if min_digits == 0 and magnitude == 0:
            digits = ""
        else:
            digits = digits.rjust(min_digits, "0")

    prefix: str = sign
    if spec.alt_form:
        if spec.conversion_type is ConversionType.OCT_INT:
            if not digits.startswith("0"):
                prefix += alt_prefix
        elif alt_prefix and magnitude != 0:
            prefix += alt_prefix

    return pad_number(prefix, digits, spec, zero_pad=spec.zero_pad and not spec.explicit_precision)


def _check_bits(bits: int) -> None:
    if bits not in INTEGER_BITS:
        raise ValueError(f"unsupported integer width {bits} (expected one of {INTEGER_BITS})")


def _sign_for(negative: bool, spec: ConversionSpecifier) -> str:
    if negative:
        return "-"
    if spec.force_sign:
        return "+"
    if spec.space_sign:
        return " "
    return ""


@dataclass(frozen=True, slots=True)
class SignedInt(Argument):
    """A two's complement integer of 8, 16, 32 or 64 bits.

    Attributes:
        value (int): The value, within the range of ``bits``.
        bits (int): Width of the C type.
    """

    value: int
    bits: int = 32

    def __post_init__(self) -> None:
        _check_bits(self.bits)
        limit: int = 1 << (self.bits - 1)
        if not -limit <= self.value < limit:
            raise ValueError(f"{self.value} does not fit in a signed {self.bits}-bit integer")

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        conversion: ConversionType = spec.conversion_type
        if conversion is ConversionType.DEC_INT:
            return format_integer(abs(self.value), spec, sign=_sign_for(self.value < 0, spec))
        if conversion.is_integer:
            return format_integer(self.value & ((1 << self.bits) - 1), spec)
        if conversion is ConversionType.CHAR and self.bits == 8:
            # signed char: reinterpret the bit pattern as unsigned
            return pad_text(decode_char_code(self.value & 0xFF, 8), spec)
        raise wrong_type(self, spec)

    def as_plain_integer(self) -> int | None:
        return self.value if INT_MIN <= self.value <= INT_MAX else None


@dataclass(frozen=True, slots=True)
class UnsignedInt(Argument):
    """An unsigned integer of 8, 16, 32 or 64 bits.

    Under ``%c`` the 8-bit type is an ASCII byte, the 16-bit type a UTF-16
    code unit and the 32-bit type a Unicode scalar value.
    """

    value: int
    bits: int = 32

    def __post_init__(self) -> None:
        _check_bits(self.bits)
        if not 0 <= self.value < (1 << self.bits):
            raise ValueError(f"{self.value} does not fit in an unsigned {self.bits}-bit integer")

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        if spec.conversion_type.is_integer:
            return format_integer(self.value, spec)
        if spec.conversion_type is ConversionType.CHAR:
            return pad_text(decode_char_code(self.value, self.bits), spec)
        raise wrong_type(self, spec)

    def as_plain_integer(self) -> int | None:
        return self.value if self.value <= INT_MAX else None


@dataclass(frozen=True, slots=True)
class Pointer(Argument):
    """A machine address; renders like a pointer-width unsigned integer.

    ``%p`` is ``%#x``: the parser sets the alternate form for it.
    """

    address: int

    def __post_init__(self) -> None:
        if not 0 <= self.address < (1 << POINTER_BITS):
            raise ValueError(f"address {self.address:#x} does not fit in {POINTER_BITS} bits")

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        if not spec.conversion_type.is_integer:
            raise wrong_type(self, spec)
        return format_integer(self.address, spec)


def i8(value: int) -> SignedInt:
    """C ``signed char``."""
    return SignedInt(value, 8)


def i16(value: int) -> SignedInt:
    """C ``short``."""
    return SignedInt(value, 16)


def i32(value: int) -> SignedInt:
    """C ``int``."""
    return SignedInt(value, 32)


def i64(value: int) -> SignedInt:
    """C ``long long``."""
    return SignedInt(value, 64)


def isize(value: int) -> SignedInt:
    """Pointer-width signed integer (``ssize_t``)."""
    return SignedInt(value, POINTER_BITS)


def u8(value: int) -> UnsignedInt:
    """C ``unsigned char``."""
    return UnsignedInt(value, 8)


def u16(value: int) -> UnsignedInt:
    """C ``unsigned short``; a UTF-16 code unit under ``%c``."""
    return UnsignedInt(value, 16)


def u32(value: int) -> UnsignedInt:
    """C ``unsigned int``; a Unicode scalar value under ``%c``."""
    return UnsignedInt(value, 32)


def u64(value: int) -> UnsignedInt:
    """C ``unsigned long long``."""
    return UnsignedInt(value, 64)


def usize(value: int) -> UnsignedInt:
    """Pointer-width unsigned integer (``size_t``)."""
    return UnsignedInt(value, POINTER_BITS)
