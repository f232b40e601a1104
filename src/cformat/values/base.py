# topmark:header:start
#
#   project      : CFormat
#   file         : base.py
#   file_relpath : src/cformat/values/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument capability contract and the padding rules shared by all variants.

Every value passed to the engine is (or is coerced into) an `Argument`. An
argument knows how to render itself under a fully resolved
`ConversionSpecifier`, and may expose a plain C ``int`` view for ``*`` widths
and precisions.

Padding:
    * Numbers: left-adjust pads with trailing spaces; zero-pad inserts ``0``
      between the prefix (sign, ``0x``) and the digits; otherwise leading spaces.
    * Text: trailing spaces when left-adjusted, else leading spaces, measured in
      UTF-8 bytes as a C library counts them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cformat.config.policy import DEFAULT_POLICY
from cformat.core.errors import WrongTypeError
from cformat.core.specifier import literal_value

if TYPE_CHECKING:
    from cformat.config.policy import FormatPolicy
    from cformat.core.specifier import ConversionSpecifier


class Argument(ABC):
    """A value the engine can render.

    Subclasses implement `render_as`; `as_plain_integer` defaults to "no
    integer view".
    """

    __slots__ = ()

    @abstractmethod
    def render_as(self, spec: ConversionSpecifier, policy: FormatPolicy = DEFAULT_POLICY) -> str:
        """Render this value under ``spec``.

        Args:
            spec (ConversionSpecifier): A specifier whose width and precision
                are literal.
            policy (FormatPolicy): Rendering policy.

        Returns:
            str: The rendered field, padding included.

        Raises:
            WrongTypeError: If this value does not support ``spec.conversion_type``.
        """

    def as_plain_integer(self) -> int | None:
        """Return this value as a C ``int``, or ``None`` if it has no such view."""
        return None


def wrong_type(arg: Argument, spec: ConversionSpecifier) -> WrongTypeError:
    """Build the error for ``arg`` not supporting ``spec``'s conversion."""
    return WrongTypeError(
        f"{type(arg).__name__} does not support the {spec.conversion_type.label} conversion"
    )


def field_width(spec: ConversionSpecifier) -> int:
    """Return the usable field width; negative widths pad nothing."""
    return max(literal_value(spec.width), 0)


def pad_number(prefix: str, body: str, spec: ConversionSpecifier, *, zero_pad: bool) -> str:
    """Lay out a numeric field.

    Args:
        prefix (str): Sign and base prefix, kept in front of any zero padding.
        body (str): Digits (or ``inf``/``nan``).
        spec (ConversionSpecifier): Supplies width and the left-adjust flag.
        zero_pad (bool): Whether zero padding applies to this field.

    Returns:
        str: The padded field.
    """
    width: int = field_width(spec)
    if spec.left_adjust:
        return (prefix + body).ljust(width)
    if zero_pad:
        return prefix + body.rjust(width - len(prefix), "0")
    return (prefix + body).rjust(width)


def utf8_length(text: str) -> int:
    """Return the UTF-8 encoded length of ``text``."""
    return len(text.encode("utf-8", "surrogatepass"))


def pad_text(text: str, spec: ConversionSpecifier) -> str:
    """Pad ``text`` with spaces up to the field width, counted in UTF-8 bytes."""
    missing: int = field_width(spec) - utf8_length(text)
    if missing <= 0:
        return text
    if spec.left_adjust:
        return text + " " * missing
    return " " * missing + text
