# topmark:header:start
#
#   project      : CFormat
#   file         : test_properties.py
#   file_relpath : tests/unit/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the rendering engine.

CPython's ``%`` operator follows the C library for the decimal float
conversions and for ``%d`` without a precision, so it serves as an oracle
under the ``libc`` rounding policy.
"""

from __future__ import annotations

import math
import re

import pytest
from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from cformat import i8, i16, i32, i64, sprintf
from cformat.config.policy import FloatRounding, FormatPolicy
from cformat.values.base import utf8_length
from cformat.values.text import truncate_utf8
from tests.strategies_cformat import (
    s_finite_float,
    s_flags,
    s_float_template,
    s_int32,
    s_moderate_float,
    s_text,
    s_width,
)

LIBC = FormatPolicy(float_rounding=FloatRounding.LIBC)

_ESCAPE = re.compile(r'\\(\d{1,3}|[\\"nr])')
_NAMED = {"\\": "\\", '"': '"', "n": "\n", "r": "\r"}


def unquote(quoted: str) -> str:
    """Invert ``%q``: strip the quotes and decode each escape."""
    assert quoted.startswith('"') and quoted.endswith('"')

    def _decode(match: re.Match[str]) -> str:
        token: str = match.group(1)
        return chr(int(token)) if token.isdigit() else _NAMED[token]

    return _ESCAPE.sub(_decode, quoted[1:-1])


@given(value=s_int32(), width=st.integers(min_value=0, max_value=40))
def test_width_is_a_minimum_and_digits_survive(value: int, width: int) -> None:
    """``%{w}d`` is at least ``w`` long and trims back to the decimal digits."""
    out: str = sprintf(f"%{width}d", value)
    assert len(out) >= width
    assert out.strip() == str(value)


@given(value=s_int32(), flags=s_flags(), width=s_width())
def test_decimal_matches_python(value: int, flags: str, width: str) -> None:
    """``%d`` without a precision matches CPython's ``%``."""
    template: str = f"%{flags.replace('#', '')}{width}d"
    assert sprintf(template, value) == template % value


@given(
    data=st.sampled_from(
        [(i8, 8), (i16, 16), (i32, 32), (i64, 64)],
    ),
    raw=st.integers(min_value=-(2**63), max_value=2**63 - 1),
)
def test_hex_is_twos_complement_at_type_width(data: tuple[object, int], raw: int) -> None:
    """``%x`` prints the value masked to its own width."""
    factory, bits = data
    limit: int = 1 << (bits - 1)
    value: int = (raw + limit) % (2 * limit) - limit
    mask: int = (1 << bits) - 1
    assert sprintf("%x", factory(value)) == format(value & mask, "x")  # type: ignore[operator]
    assert sprintf("%o", factory(value)) == format(value & mask, "o")  # type: ignore[operator]


@given(value=s_finite_float())
def test_hex_float_matches_float_hex(value: float) -> None:
    """``%.13a`` agrees with `float.hex` for every non-zero finite double."""
    assume(value != 0.0)
    assert sprintf("%.13a", value) == value.hex()


@given(value=s_finite_float())
def test_shortest_hex_float_reads_back(value: float) -> None:
    """``%a`` is exact: parsing it back yields the same double."""
    assert float.fromhex(sprintf("%a", value)) == value
    assert math.copysign(1.0, float.fromhex(sprintf("%a", value))) == math.copysign(1.0, value)


@pytest.mark.hypothesis_slow
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=300)
@given(template=s_float_template(), value=s_moderate_float())
def test_libc_policy_matches_python(template: str, value: float) -> None:
    """Under the libc policy, ``%e %f %g`` match CPython digit for digit."""
    assert sprintf(template, value, policy=LIBC) == template % value


@pytest.mark.hypothesis_slow
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=100)
@given(
    template=s_float_template().filter(lambda t: not t.endswith(("f", "F"))),
    value=s_finite_float(),
)
def test_libc_policy_matches_python_over_full_range(template: str, value: float) -> None:
    """Scientific and compact output agree with CPython across the exponent range."""
    assert sprintf(template, value, policy=LIBC) == template % value


@given(value=s_moderate_float(), precision=st.integers(min_value=0, max_value=12))
def test_fixed_output_reads_back_close(value: float, precision: int) -> None:
    """``%.Nf`` is within half a unit of the last printed place."""
    out: str = sprintf(f"%.{precision}f", value)
    assert abs(float(out) - value) <= 0.5 * 10.0**-precision * (1 + 1e-9) + abs(value) * 1e-15


@given(text=s_text())
def test_quoting_is_reversible(text: str) -> None:
    """Decoding ``%q`` output reconstructs the text exactly."""
    assert unquote(sprintf("%q", text)) == text


@given(text=s_text(), limit=st.integers(min_value=0, max_value=60))
def test_truncation_is_the_longest_fitting_prefix(text: str, limit: int) -> None:
    """``%.Ns`` keeps whole characters, at most ``N`` bytes, and no fewer than fit."""
    out: str = sprintf(f"%.{limit}s", text)
    assert text.startswith(out)
    assert utf8_length(out) <= limit
    if out != text:
        assert utf8_length(text[: len(out) + 1]) > limit
    assert truncate_utf8(text, limit) == out


@given(text=s_text(), width=st.integers(min_value=0, max_value=60))
def test_string_width_counts_bytes(text: str, width: int) -> None:
    """Padding brings the UTF-8 length up to the width and no further."""
    out: str = sprintf(f"%-{width}s", text)
    assert out.startswith(text)
    assert utf8_length(out) == max(width, utf8_length(text))
