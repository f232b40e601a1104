# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/values/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument variants: integers, floats, characters, strings and pointers."""

from __future__ import annotations

from cformat.values.base import Argument
from cformat.values.coerce import to_argument, to_arguments
from cformat.values.floats import Float, f32, f64
from cformat.values.integers import (
    Pointer,
    SignedInt,
    UnsignedInt,
    i8,
    i16,
    i32,
    i64,
    isize,
    u8,
    u16,
    u32,
    u64,
    usize,
)
from cformat.values.text import Char, CString, String

__all__: list[str] = [
    "Argument",
    "CString",
    "Char",
    "Float",
    "Pointer",
    "SignedInt",
    "String",
    "UnsignedInt",
    "f32",
    "f64",
    "i16",
    "i32",
    "i64",
    "i8",
    "isize",
    "to_argument",
    "to_arguments",
    "u16",
    "u32",
    "u64",
    "u8",
    "usize",
]
