# topmark:header:start
#
#   project      : CFormat
#   file         : floats.py
#   file_relpath : src/cformat/values/floats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Floating-point arguments and the ``%e``/``%f``/``%g``/``%a`` algorithms.

Decimal conversions round with `decimal` rather than going through
`float.__format__`, so the rounding model is selectable:

* ``half-away-from-zero`` (default) rounds the shortest decimal that reads
  back as the same double (``repr``), ties away from zero. ``9.995`` is
  ``"9.995"`` to this model and ``%.3g`` gives ``"10.0"``.
* ``libc`` rounds the exact binary value, ties to even, which reproduces
  glibc (and CPython's ``%`` operator) digit for digit.

``%a`` works on the IEEE-754 bit pattern directly.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, Final

from cformat.config.policy import DEFAULT_POLICY, CompactTrailingZeros, FloatRounding
from cformat.core.specifier import ConversionType, literal_value
from cformat.values.base import Argument, pad_number, wrong_type

if TYPE_CHECKING:
    from cformat.config.policy import FormatPolicy
    from cformat.core.specifier import ConversionSpecifier

FLOAT_BITS: Final[tuple[int, ...]] = (32, 64)

_DECIMAL_ROUNDING: Final[dict[FloatRounding, str]] = {
    FloatRounding.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    FloatRounding.LIBC: ROUND_HALF_EVEN,
}

_MANTISSA_BITS: Final[int] = 52
_MANTISSA_HEX_DIGITS: Final[int] = 13
_EXPONENT_BIAS: Final[int] = 1023
_FRACTION_MASK: Final[int] = (1 << _MANTISSA_BITS) - 1

_SCIENTIFIC: Final[frozenset[ConversionType]] = frozenset(
    {ConversionType.SCI_FLOAT_LOWER, ConversionType.SCI_FLOAT_UPPER}
)
_FIXED: Final[frozenset[ConversionType]] = frozenset(
    {ConversionType.DEC_FLOAT_LOWER, ConversionType.DEC_FLOAT_UPPER}
)
_COMPACT: Final[frozenset[ConversionType]] = frozenset(
    {ConversionType.COMPACT_FLOAT_LOWER, ConversionType.COMPACT_FLOAT_UPPER}
)


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float (overflowing to infinity)."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# ---------------------------------------------------------------------------
# decimal rounding
# ---------------------------------------------------------------------------


def _decimal_of(magnitude: float, rounding: FloatRounding) -> Decimal:
    """Return the decimal that gets rounded for ``magnitude``.

    The default rounds the shortest round-trip text, so ``%.2f`` of 1.005
    gives ``1.01`` where C, which rounds the exact binary value
    1.00499999999999989..., gives ``1.00``. ``FloatRounding.LIBC`` rounds the
    exact value and matches C.
    """
    if rounding is FloatRounding.LIBC:
        return Decimal(magnitude)
    return Decimal(repr(magnitude))


def _quantize(value: Decimal, exponent: int, mode: str) -> Decimal:
    """Round ``value`` to a multiple of ``10**exponent``."""
    # room for every kept digit plus a carry
    digits: int = max(value.adjusted() - exponent + 2, 1)
    context = Context(prec=digits, rounding=mode, Emin=MIN_EMIN, Emax=MAX_EMAX)
    return value.quantize(Decimal((0, (1,), exponent)), context=context)


def _digit_string(value: Decimal) -> str:
    return "".join(map(str, value.as_tuple().digits))


def round_significant(value: Decimal, significant: int, mode: str) -> tuple[str, int]:
    """Round ``value`` to ``significant`` digits.

    Args:
        value (Decimal): A non-negative finite value.
        significant (int): Number of significant digits to keep (>= 1).
        mode (str): A `decimal` rounding mode.

    Returns:
        tuple[str, int]: The digits (exactly ``significant`` of them) and the
        decimal exponent of the first one, taken after rounding. Zero has
        exponent 0.
    """
    if value.is_zero():
        return "0" * significant, 0
    exponent: int = value.adjusted()
    rounded: Decimal = _quantize(value, exponent - significant + 1, mode)
    if rounded.adjusted() != exponent:
        # carried into a new leading digit (9.99 -> 10.0)
        exponent = rounded.adjusted()
        rounded = _quantize(value, exponent - significant + 1, mode)
    return _digit_string(rounded), exponent


def fixed_text(value: Decimal, precision: int, alt_form: bool, mode: str) -> str:
    """Return ``value`` with exactly ``precision`` fractional digits."""
    digits: str = _digit_string(_quantize(value, -precision, mode))
    if precision == 0:
        return digits + "." if alt_form else digits
    digits = digits.rjust(precision + 1, "0")
    return f"{digits[:-precision]}.{digits[-precision:]}"


def scientific_text(digits: str, exponent: int, alt_form: bool) -> str:
    """Lay out rounded significant ``digits`` as ``d.ddde±XX``."""
    mantissa: str = digits[0]
    if len(digits) > 1 or alt_form:
        mantissa += "." + digits[1:]
    return f"{mantissa}e{exponent:+03d}"


def strip_trailing_zeros(body: str) -> str:
    """Drop trailing fractional zeros, and the point if nothing follows it."""
    mantissa, marker, exponent = body.partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return mantissa + marker + exponent


def compact_text(value: Decimal, precision: int, alt_form: bool, policy: FormatPolicy) -> str:
    """``%g``: scientific or fixed, whichever C picks for the rounded exponent."""
    mode: str = _DECIMAL_ROUNDING[policy.float_rounding]
    significant: int = max(precision, 1)
    digits, exponent = round_significant(value, significant, mode)

    if exponent < -4 or exponent >= significant:
        body: str = scientific_text(digits, exponent, alt_form)
    else:
        body = fixed_text(value, significant - 1 - exponent, alt_form, mode)

    keep_zeros: bool = (
        alt_form and policy.compact_trailing_zeros is CompactTrailingZeros.STRIP_UNLESS_ALT
    )
    return body if keep_zeros else strip_trailing_zeros(body)


# ---------------------------------------------------------------------------
# hexadecimal
# ---------------------------------------------------------------------------


def hex_text(magnitude: float, precision: int | None, alt_form: bool, rounding: FloatRounding) -> str:
    """``%a`` body after the ``0x`` prefix, in lower case.

    Args:
        magnitude (float): A non-negative finite double.
        precision (int | None): Hex digits after the point; ``None`` prints
            as many as needed for an exact representation.
        alt_form (bool): Keep the point even with no digits after it.
        rounding (FloatRounding): Tie breaking when digits are dropped.

    Returns:
        str: E.g. ``"1.8p+0"``.
    """
    bits: int = struct.unpack("<Q", struct.pack("<d", magnitude))[0]
    biased: int = bits >> _MANTISSA_BITS
    fraction: int = bits & _FRACTION_MASK

    if biased == 0:
        lead, exponent = 0, (0 if fraction == 0 else 1 - _EXPONENT_BIAS)
    else:
        lead, exponent = 1, biased - _EXPONENT_BIAS

    if precision is None:
        digits: str = f"{fraction:0{_MANTISSA_HEX_DIGITS}x}".rstrip("0")
    elif precision >= _MANTISSA_HEX_DIGITS:
        digits = f"{fraction:0{_MANTISSA_HEX_DIGITS}x}".ljust(precision, "0")
    else:
        dropped: int = 4 * (_MANTISSA_HEX_DIGITS - precision)
        full: int = (lead << _MANTISSA_BITS) | fraction
        kept: int = full >> dropped
        rest: int = full & ((1 << dropped) - 1)
        half: int = 1 << (dropped - 1)
        if rest > half or (
            rest == half and (rounding is FloatRounding.HALF_AWAY_FROM_ZERO or kept & 1)
        ):
            kept += 1
        lead, kept = kept >> (4 * precision), kept & ((1 << (4 * precision)) - 1)
        if lead == 2 and rounding is FloatRounding.HALF_AWAY_FROM_ZERO:
            # 0x1.f -> 0x2.0 -> 0x1.0p+1
            lead, exponent = 1, exponent + 1
        digits = f"{kept:0{precision}x}" if precision else ""

    text: str = f"{lead:x}"
    if digits or alt_form:
        text += "." + digits
    return f"{text}p{exponent:+d}"


# ---------------------------------------------------------------------------
# entry point
# ---------------------------------------------------------------------------


def format_float(value: float, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
    """Render ``value`` under a floating-point conversion.

    Args:
        value (float): Any double, including infinities, NaN and ``-0.0``.
        spec (ConversionSpecifier): A resolved float specifier.
        policy (FormatPolicy): Rounding and ``%g`` policies.

    Returns:
        str: The padded field.
    """
    conversion: ConversionType = spec.conversion_type

    if math.copysign(1.0, value) < 0:
        sign: str = "-"
    elif spec.force_sign:
        sign = "+"
    elif spec.space_sign:
        sign = " "
    else:
        sign = ""

    if not math.isfinite(value):
        body: str = "nan" if math.isnan(value) else "inf"
        if conversion.is_upper:
            body = body.upper()
        return pad_number(sign, body, spec, zero_pad=False)

    magnitude: float = abs(value)
    precision: int = max(literal_value(spec.precision), 0)

    if conversion in (ConversionType.HEX_FLOAT_LOWER, ConversionType.HEX_FLOAT_UPPER):
        prefix: str = "0x"
        body = hex_text(
            magnitude,
            precision if spec.explicit_precision else None,
            spec.alt_form,
            policy.float_rounding,
        )
        if conversion.is_upper:
            prefix, body = prefix.upper(), body.upper()
        return pad_number(sign + prefix, body, spec, zero_pad=spec.zero_pad)

    exact: Decimal = _decimal_of(magnitude, policy.float_rounding)
    mode: str = _DECIMAL_ROUNDING[policy.float_rounding]
    if conversion in _SCIENTIFIC:
        digits, exponent = round_significant(exact, precision + 1, mode)
        body = scientific_text(digits, exponent, spec.alt_form)
    elif conversion in _FIXED:
        body = fixed_text(exact, precision, spec.alt_form, mode)
    else:
        body = compact_text(exact, precision, spec.alt_form, policy)

    if conversion.is_upper:
        body = body.upper()
    return pad_number(sign, body, spec, zero_pad=spec.zero_pad)


@dataclass(frozen=True, slots=True)
class Float(Argument):
    """An IEEE-754 binary float of 32 or 64 bits.

    A 32-bit float is rounded to single precision on construction; both widths
    are then printed as the double holding that value, as C's default argument
    promotion does.
    """

    value: float
    bits: int = 64

    def __post_init__(self) -> None:
        if self.bits not in FLOAT_BITS:
            raise ValueError(f"unsupported float width {self.bits} (expected one of {FLOAT_BITS})")
        if self.bits == 32:
            object.__setattr__(self, "value", to_float32(self.value))

    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        if not spec.conversion_type.is_float:
            raise wrong_type(self, spec)
        return format_float(self.value, spec, policy)


def f32(value: float) -> Float:
    """C ``float``."""
    return Float(value, 32)


def f64(value: float) -> Float:
    """C ``double``."""
    return Float(value, 64)
