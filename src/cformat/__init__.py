# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat package.

CFormat reproduces the C ``printf`` family: a template such as
``"%-8s|%#06x|%+.2e"`` is parsed into verbatim text and conversion
specifiers, then rendered against a list of typed arguments. It exposes a
small typed API and a ``cformat`` command line tool.

Usage:
    ```python
    from cformat import sprintf, u8

    sprintf("%5.1f%%", 99.44)   # ' 99.4%'
    sprintf("%c", u8(0x41))     # 'A'
    ```
"""

from __future__ import annotations

from cformat.api import compile_format, parse, render, sprintf
from cformat.config.policy import DEFAULT_POLICY, LEGACY_POLICY, FormatPolicy
from cformat.core.engine import ParsedFormat
from cformat.core.errors import (
    ErrorKind,
    FormatError,
    NotEnoughArgsError,
    ParseError,
    TooManyArgsError,
    UnknownFormatError,
    WrongTypeError,
)
from cformat.values import (
    Argument,
    Char,
    CString,
    Float,
    Pointer,
    SignedInt,
    String,
    UnsignedInt,
    f32,
    f64,
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

__all__: list[str] = [
    "DEFAULT_POLICY",
    "LEGACY_POLICY",
    "Argument",
    "CString",
    "Char",
    "ErrorKind",
    "Float",
    "FormatError",
    "FormatPolicy",
    "NotEnoughArgsError",
    "ParseError",
    "ParsedFormat",
    "Pointer",
    "SignedInt",
    "String",
    "TooManyArgsError",
    "UnknownFormatError",
    "UnsignedInt",
    "WrongTypeError",
    "compile_format",
    "f32",
    "f64",
    "i16",
    "i32",
    "i64",
    "i8",
    "isize",
    "parse",
    "render",
    "sprintf",
    "u16",
    "u32",
    "u64",
    "u8",
    "usize",
]
