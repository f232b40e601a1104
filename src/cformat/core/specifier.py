# topmark:header:start
#
#   project      : CFormat
#   file         : specifier.py
#   file_relpath : src/cformat/core/specifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsed representation of a printf template.

A template parses into a tuple of `FormatElement` values, each either a
`Verbatim` text run or a `Specifier` wrapping a `ConversionSpecifier`.

Design:
    * Every class here is a frozen dataclass. The engine never mutates a
      parsed specifier; it derives a completed copy with
      ``dataclasses.replace`` once argument-supplied values are known.
    * `NumericParam` is a closed union of `NumericLiteral` and
      `FromArgument`. `FromArgument` never reaches a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, TypeAlias, Union

from cformat.core.enum_mixins import KeyedStrEnum
from cformat.core.errors import UnknownFormatError


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    """A width or precision written in the template (or resolved from an argument)."""

    value: int


@dataclass(frozen=True, slots=True)
class FromArgument:
    """Marker for ``*``: take the value from the next argument."""


FROM_ARGUMENT: Final[FromArgument] = FromArgument()

NumericParam: TypeAlias = Union[NumericLiteral, FromArgument]


def literal_value(param: NumericParam) -> int:
    """Return the integer behind a resolved numeric parameter.

    Raises:
        UnknownFormatError: If ``param`` was never resolved from its argument.
    """
    if isinstance(param, NumericLiteral):
        return param.value
    raise UnknownFormatError("width or precision was not resolved before rendering")


class ConversionType(KeyedStrEnum):
    """Conversion selected by the final character of a specifier.

    ``aliases`` lists the conversion characters mapping to each member; use
    `conversion_for_char` for the case-sensitive lookup the parser needs.
    """

    DEC_INT = ("dec_int", "decimal integer", ("d", "i", "u"))
    OCT_INT = ("oct_int", "octal integer", ("o",))
    HEX_INT_LOWER = ("hex_int_lower", "hexadecimal integer, lower case", ("x", "p"))
    HEX_INT_UPPER = ("hex_int_upper", "hexadecimal integer, upper case", ("X",))
    SCI_FLOAT_LOWER = ("sci_float_lower", "scientific float, lower case", ("e",))
    SCI_FLOAT_UPPER = ("sci_float_upper", "scientific float, upper case", ("E",))
    DEC_FLOAT_LOWER = ("dec_float_lower", "fixed-point float, lower case", ("f",))
    DEC_FLOAT_UPPER = ("dec_float_upper", "fixed-point float, upper case", ("F",))
    COMPACT_FLOAT_LOWER = ("compact_float_lower", "shortest float, lower case", ("g",))
    COMPACT_FLOAT_UPPER = ("compact_float_upper", "shortest float, upper case", ("G",))
    HEX_FLOAT_LOWER = ("hex_float_lower", "hexadecimal float, lower case", ("a",))
    HEX_FLOAT_UPPER = ("hex_float_upper", "hexadecimal float, upper case", ("A",))
    CHAR = ("char", "single character", ("c", "C"))
    STRING = ("string", "string", ("s", "S"))
    QUOTED_STRING = ("quoted_string", "quoted, escaped string", ("q",))
    PERCENT_SIGN = ("percent_sign", "literal percent sign", ("%",))

    @property
    def is_upper(self) -> bool:
        """Whether digits, exponent letters and non-finite names are upper case."""
        return self in _UPPER_CASE

    @property
    def is_integer(self) -> bool:
        """Whether this is one of the integer conversions."""
        return self in INTEGER_CONVERSIONS

    @property
    def is_float(self) -> bool:
        """Whether this is one of the floating-point conversions."""
        return self in FLOAT_CONVERSIONS


_UPPER_CASE: Final[frozenset[ConversionType]] = frozenset(
    {
        ConversionType.HEX_INT_UPPER,
        ConversionType.SCI_FLOAT_UPPER,
        ConversionType.DEC_FLOAT_UPPER,
        ConversionType.COMPACT_FLOAT_UPPER,
        ConversionType.HEX_FLOAT_UPPER,
    }
)

INTEGER_CONVERSIONS: Final[frozenset[ConversionType]] = frozenset(
    {
        ConversionType.DEC_INT,
        ConversionType.OCT_INT,
        ConversionType.HEX_INT_LOWER,
        ConversionType.HEX_INT_UPPER,
    }
)

FLOAT_CONVERSIONS: Final[frozenset[ConversionType]] = frozenset(
    {
        ConversionType.SCI_FLOAT_LOWER,
        ConversionType.SCI_FLOAT_UPPER,
        ConversionType.DEC_FLOAT_LOWER,
        ConversionType.DEC_FLOAT_UPPER,
        ConversionType.COMPACT_FLOAT_LOWER,
        ConversionType.COMPACT_FLOAT_UPPER,
        ConversionType.HEX_FLOAT_LOWER,
        ConversionType.HEX_FLOAT_UPPER,
    }
)

_BY_CHAR: Final[dict[str, ConversionType]] = {
    ch: member for member in ConversionType for ch in member.aliases
}


def conversion_for_char(ch: str) -> ConversionType | None:
    """Return the conversion selected by ``ch`` (case-sensitive), or ``None``."""
    return _BY_CHAR.get(ch)


@dataclass(frozen=True, slots=True)
class ConversionSpecifier:
    """One parsed ``%...`` directive.

    Attributes:
        alt_form (bool): ``#`` flag: base prefix / unconditional decimal point.
        zero_pad (bool): ``0`` flag: pad numbers with zeros instead of spaces.
        left_adjust (bool): ``-`` flag: pad on the right.
        space_sign (bool): space flag: write a space where a ``+`` would go.
        force_sign (bool): ``+`` flag: always write a sign for signed values.
        width (NumericParam): Minimum field width.
        precision (NumericParam): Digits, significant digits or byte limit,
            depending on the conversion.
        conversion_type (ConversionType): The selected conversion.
        explicit_precision (bool): Whether a precision was written (``.N`` or
            ``.*``) rather than defaulted.
        length_modifier (str | None): The C length modifier, checked but ignored.
    """

    alt_form: bool = False
    zero_pad: bool = False
    left_adjust: bool = False
    space_sign: bool = False
    force_sign: bool = False
    width: NumericParam = NumericLiteral(0)
    precision: NumericParam = NumericLiteral(6)
    conversion_type: ConversionType = ConversionType.DEC_INT
    explicit_precision: bool = False
    length_modifier: str | None = None

    @property
    def consumes_argument(self) -> bool:
        """Whether rendering this specifier pops a value argument."""
        return self.conversion_type is not ConversionType.PERCENT_SIGN

    @property
    def is_resolved(self) -> bool:
        """Whether neither width nor precision still refers to an argument."""
        return not isinstance(self.width, FromArgument) and not isinstance(
            self.precision, FromArgument
        )

    def flags_text(self) -> str:
        """Return the flag characters in canonical order (``#0- +``)."""
        return "".join(
            ch
            for ch, on in (
                ("#", self.alt_form),
                ("0", self.zero_pad),
                ("-", self.left_adjust),
                (" ", self.space_sign),
                ("+", self.force_sign),
            )
            if on
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this specifier."""

        def param(p: NumericParam) -> int | str:
            return "*" if isinstance(p, FromArgument) else p.value

        return {
            "conversion": self.conversion_type.key,
            "flags": {
                "alt_form": self.alt_form,
                "zero_pad": self.zero_pad,
                "left_adjust": self.left_adjust,
                "space_sign": self.space_sign,
                "force_sign": self.force_sign,
            },
            "width": param(self.width),
            "precision": param(self.precision),
            "explicit_precision": self.explicit_precision,
            "length_modifier": self.length_modifier,
        }


@dataclass(frozen=True, slots=True)
class Verbatim:
    """Template text copied to the output unchanged."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this element."""
        return {"kind": "verbatim", "text": self.text}


@dataclass(frozen=True, slots=True)
class Specifier:
    """A conversion directive within the template."""

    spec: ConversionSpecifier

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this element."""
        return {"kind": "specifier", **self.spec.to_dict()}


FormatElement: TypeAlias = Union[Verbatim, Specifier]
