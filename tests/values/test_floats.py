# topmark:header:start
#
#   project      : CFormat
#   file         : test_floats.py
#   file_relpath : tests/values/test_floats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for floating-point rendering (``%e %f %g %a``)."""

from __future__ import annotations

import math

import pytest

from cformat import LEGACY_POLICY, sprintf
from cformat.config.policy import FloatRounding, FormatPolicy
from cformat.core.errors import WrongTypeError
from cformat.values import Float, f32, f64
from cformat.values.floats import strip_trailing_zeros, to_float32
from tests.conftest import parametrize

LIBC = FormatPolicy(float_rounding=FloatRounding.LIBC)


@parametrize(
    "template, value, expected",
    [
        ("%f", 1.5, "1.500000"),
        ("%+.2f", 3.14159, "+3.14"),
        ("% .1f", 2.0, " 2.0"),
        ("%.0f", 2.0, "2"),
        ("%#.0f", 3.0, "3."),
        ("%10.3f", -1.5, "    -1.500"),
        ("%-10.3f|", -1.5, "-1.500    |"),
        ("%010.3f", -1.5, "-00001.500"),
        ("%F", 0.25, "0.250000"),
        ("%f", 1e20, "100000000000000000000.000000"),
        ("%.3f", 0.0005, "0.001"),
    ],
)
def test_fixed(template: str, value: float, expected: str) -> None:
    """Fixed notation with sign, padding and precision."""
    assert sprintf(template, value) == expected


@parametrize(
    "template, value, expected",
    [
        ("%e", 12345.678, "1.234568e+04"),
        ("%E", 1e-10, "1.000000E-10"),
        ("%.2e", 0.0, "0.00e+00"),
        ("%.0e", 12345.0, "1e+04"),
        ("%#.0e", 1.0, "1.e+00"),
        ("%.2e", 9.995, "1.00e+01"),
        ("%e", 1e300, "1.000000e+300"),
        ("%12.3e", -2.5e-7, "  -2.500e-07"),
    ],
)
def test_scientific(template: str, value: float, expected: str) -> None:
    """Scientific notation, including carry into the exponent."""
    assert sprintf(template, value) == expected


@parametrize(
    "template, value, expected",
    [
        ("%g", 100000.0, "100000"),
        ("%g", 1000000.0, "1e+06"),
        ("%g", 0.0001, "0.0001"),
        ("%g", 0.00001, "1e-05"),
        ("%g", 0.0, "0"),
        ("%g", 1.5, "1.5"),
        ("%G", 1e-10, "1E-10"),
        ("%.0g", 123.0, "1e+02"),
        ("%.3g", 9.995, "10"),
        ("%#.3g", 9.995, "10.0"),
        ("%.3g", 999.5, "1e+03"),
        ("%#g", 1.5, "1.50000"),
    ],
)
def test_compact(template: str, value: float, expected: str) -> None:
    """``%g`` picks the notation from the exponent after rounding."""
    assert sprintf(template, value) == expected


def test_compact_alternate_form_under_legacy_policy() -> None:
    """The legacy policy strips zeros even with '#'."""
    assert sprintf("%#g", 1.5, policy=LEGACY_POLICY) == "1.5"
    assert sprintf("%#.3g", 9.995, policy=LEGACY_POLICY) == "10"
    assert sprintf("%g", 1.5, policy=LEGACY_POLICY) == "1.5"


@parametrize(
    "template, value, half_away, libc",
    [
        ("%.0f", 0.5, "1", "0"),
        ("%.0f", 2.5, "3", "2"),
        ("%.1f", 0.25, "0.3", "0.2"),
        ("%.2f", 1.005, "1.01", "1.00"),
        ("%.2f", 2.675, "2.68", "2.67"),
        ("%.2e", 1.125, "1.13e+00", "1.12e+00"),
    ],
)
def test_rounding_policies(template: str, value: float, half_away: str, libc: str) -> None:
    """The default rounds the repr decimal half away; libc rounds the binary value."""
    assert sprintf(template, value) == half_away
    assert sprintf(template, value, policy=LIBC) == libc
    assert sprintf(template, value, policy={"float_rounding": "libc"}) == libc


@parametrize(
    "template, value, expected",
    [
        ("%a", 1.5, "0x1.8p+0"),
        ("%a", 1.0, "0x1p+0"),
        ("%a", 0.0, "0x0p+0"),
        ("%a", -0.0, "-0x0p+0"),
        ("%a", 0.5, "0x1p-1"),
        ("%A", 255.5, "0X1.FFP+7"),
        ("%a", 5e-324, "0x0.0000000000001p-1022"),
        ("%20.10a", 1.5, "   0x1.8000000000p+0"),
        ("%-12a|", 1.5, "0x1.8p+0    |"),
        ("%010a", 1.0, "0x00001p+0"),
        ("%+a", 2.0, "+0x1p+1"),
        ("%#.0a", 1.0, "0x1.p+0"),
        ("%.15a", 1.5, "0x1.800000000000000p+0"),
    ],
)
def test_hexadecimal(template: str, value: float, expected: str) -> None:
    """``%a`` follows the IEEE-754 bit pattern."""
    assert sprintf(template, value) == expected


@parametrize(
    "template, value, half_away, libc",
    [
        ("%.0a", 1.5, "0x1p+1", "0x2p+0"),
        ("%.1a", 1.96875, "0x1.0p+1", "0x2.0p+0"),
        ("%.0a", 1.25, "0x1p+0", "0x1p+0"),
        ("%.1a", 1.03125, "0x1.1p+0", "0x1.0p+0"),
    ],
)
def test_hexadecimal_rounding(template: str, value: float, half_away: str, libc: str) -> None:
    """Dropped hex digits round per policy; only the default renormalizes a carry."""
    assert sprintf(template, value) == half_away
    assert sprintf(template, value, policy=LIBC) == libc


@parametrize(
    "template, value, expected",
    [
        ("%f", math.inf, "inf"),
        ("%F", math.inf, "INF"),
        ("%e", -math.inf, "-inf"),
        ("%+g", math.inf, "+inf"),
        ("%05f", math.inf, "  inf"),
        ("%-5f|", math.inf, "inf  |"),
        ("%f", math.nan, "nan"),
        ("%G", math.nan, "NAN"),
        ("%a", math.inf, "inf"),
    ],
)
def test_non_finite(template: str, value: float, expected: str) -> None:
    """Infinities and NaN print as words and are never zero padded."""
    assert sprintf(template, value) == expected


def test_negative_zero_keeps_its_sign() -> None:
    """-0.0 prints a minus sign in every notation."""
    assert sprintf("%f", -0.0) == "-0.000000"
    assert sprintf("%g", -0.0) == "-0"
    assert sprintf("%.1e", -0.0) == "-0.0e+00"


def test_float32_is_rounded_on_construction() -> None:
    """A 32-bit float holds the single-precision value."""
    value = f32(0.1)
    assert value.value == to_float32(0.1)
    assert value.value != 0.1
    assert sprintf("%.10f", value) == "0.1000000015"
    assert sprintf("%.10f", f64(0.1)) == "0.1000000000"


def test_float32_overflow_is_infinite() -> None:
    """Values beyond the single-precision range become infinities."""
    assert sprintf("%f", f32(1e40)) == "inf"
    assert sprintf("%f", f32(-1e40)) == "-inf"


def test_unsupported_float_width() -> None:
    """Only 32 and 64 bit floats exist."""
    with pytest.raises(ValueError):
        Float(1.0, 16)


@parametrize("template", ["%d", "%x", "%c", "%s", "%q", "%p"])
def test_floats_reject_other_conversions(template: str) -> None:
    """Integer and text conversions are wrong types for floats."""
    with pytest.raises(WrongTypeError):
        sprintf(template, 1.0)


def test_float_has_no_plain_integer_view() -> None:
    """A float cannot supply a '*' width."""
    with pytest.raises(WrongTypeError):
        sprintf("%*d", 5.0, 1)


@parametrize(
    "body, expected",
    [
        ("1.50000", "1.5"),
        ("100.000", "100"),
        ("100", "100"),
        ("1.00000e+06", "1e+06"),
        ("1.25e-05", "1.25e-05"),
    ],
)
def test_strip_trailing_zeros(body: str, expected: str) -> None:
    """Only fractional zeros go; integer zeros and exponents stay."""
    assert strip_trailing_zeros(body) == expected
