# topmark:header:start
#
#   project      : CFormat
#   file         : coerce.py
#   file_relpath : src/cformat/values/coerce.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map native Python (and `ctypes`) values onto `Argument` variants.

Rules, in order:
    * An `Argument` is used as is.
    * ``bool`` becomes a C ``int`` (0 or 1).
    * ``int`` becomes the narrowest of ``int32``, ``int64`` and ``uint64``
      holding it; larger values are rejected. A plain ``int`` is therefore
      never a character: use `Char`, a one-character ``str`` or `u32`.
    * ``float`` becomes a 64-bit `Float`.
    * ``str`` becomes a `String`; ``bytes``/``bytearray`` a `CString`.
    * ``ctypes`` scalars map to the variant of their C type.
"""

from __future__ import annotations

import ctypes
from typing import TYPE_CHECKING, Any, Callable, Final

from cformat.core.errors import WrongTypeError
from cformat.values.base import Argument
from cformat.values.floats import Float
from cformat.values.integers import Pointer, SignedInt, UnsignedInt
from cformat.values.text import Char, CString, String

if TYPE_CHECKING:
    from collections.abc import Iterable

_Converter = Callable[[Any], Argument]


def _signed(ctype: type[Any]) -> _Converter:
    bits: int = ctypes.sizeof(ctype) * 8
    return lambda obj: SignedInt(obj.value, bits)


def _unsigned(ctype: type[Any]) -> _Converter:
    bits: int = ctypes.sizeof(ctype) * 8
    return lambda obj: UnsignedInt(obj.value, bits)


def _c_char(obj: Any) -> Argument:
    raw: bytes = obj.value
    return UnsignedInt(raw[0] if raw else 0, 8)


def _c_string(obj: Any) -> Argument:
    if obj.value is None:
        raise WrongTypeError("NULL char pointer")
    return CString(obj.value)


def _c_wide_string(obj: Any) -> Argument:
    if obj.value is None:
        raise WrongTypeError("NULL wchar_t pointer")
    return String(obj.value)


_CTYPES_CONVERTERS: Final[dict[type[Any], _Converter]] = {
    **{
        ctype: _signed(ctype)
        for ctype in (
            ctypes.c_byte,
            ctypes.c_short,
            ctypes.c_int,
            ctypes.c_long,
            ctypes.c_longlong,
            ctypes.c_ssize_t,
        )
    },
    **{
        ctype: _unsigned(ctype)
        for ctype in (
            ctypes.c_ubyte,
            ctypes.c_ushort,
            ctypes.c_uint,
            ctypes.c_ulong,
            ctypes.c_ulonglong,
            ctypes.c_size_t,
        )
    },
    ctypes.c_bool: lambda obj: SignedInt(int(obj.value), 32),
    ctypes.c_float: lambda obj: Float(obj.value, 32),
    ctypes.c_double: lambda obj: Float(obj.value, 64),
    ctypes.c_longdouble: lambda obj: Float(obj.value, 64),
    ctypes.c_char: _c_char,
    ctypes.c_wchar: lambda obj: Char(obj.value),
    ctypes.c_char_p: _c_string,
    ctypes.c_wchar_p: _c_wide_string,
    ctypes.c_void_p: lambda obj: Pointer(obj.value or 0),
}

_INT32_RANGE: Final[range] = range(-(1 << 31), 1 << 31)
_INT64_RANGE: Final[range] = range(-(1 << 63), 1 << 63)
_UINT64_RANGE: Final[range] = range(0, 1 << 64)


def coerce_int(value: int) -> Argument:
    """Pick the narrowest of ``int32``, ``int64`` and ``uint64`` holding ``value``.

    Raises:
        WrongTypeError: If ``value`` needs more than 64 bits.
    """
    if value in _INT32_RANGE:
        return SignedInt(value, 32)
    if value in _INT64_RANGE:
        return SignedInt(value, 64)
    if value in _UINT64_RANGE:
        return UnsignedInt(value, 64)
    raise WrongTypeError(f"integer {value} does not fit in 64 bits")


def to_argument(value: object) -> Argument:
    """Convert one native value to an `Argument`.

    Args:
        value (object): The value to convert.

    Returns:
        Argument: The matching variant.

    Raises:
        WrongTypeError: If ``value`` has no argument representation.
    """
    if isinstance(value, Argument):
        return value
    if isinstance(value, bool):
        return SignedInt(int(value), 32)
    if isinstance(value, int):
        return coerce_int(value)
    if isinstance(value, float):
        return Float(value, 64)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, (bytes, bytearray)):
        return CString(bytes(value))
    for cls in type(value).__mro__:
        converter: _Converter | None = _CTYPES_CONVERTERS.get(cls)
        if converter is not None:
            return converter(value)
    raise WrongTypeError(f"values of type {type(value).__name__} cannot be formatted")


def to_arguments(values: Iterable[object]) -> list[Argument]:
    """Convert each value with `to_argument`, reporting the failing position.

    Raises:
        WrongTypeError: If a value cannot be converted; ``index`` is set.
    """
    converted: list[Argument] = []
    for index, value in enumerate(values):
        try:
            converted.append(to_argument(value))
        except WrongTypeError as exc:
            raise WrongTypeError(exc.message, index=index) from exc
    return converted


__all__: list[str] = [
    "coerce_int",
    "to_argument",
    "to_arguments",
]
