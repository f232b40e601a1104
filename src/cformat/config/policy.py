# topmark:header:start
#
#   project      : CFormat
#   file         : policy.py
#   file_relpath : src/cformat/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering policy: where CFormat lets callers pick between C and legacy behavior.

Design:
    * ``MutableFormatPolicy`` uses tri-state fields (``None`` means *unset*) so
      several sources can be layered (defaults → config files → CLI flags).
    * ``FormatPolicy`` is the frozen runtime view handed to renderers; it holds
      concrete enum values only.
    * ``MutableFormatPolicy.resolve(base)`` fills unset fields from ``base``;
      ``freeze()`` resolves against the defaults.

TOML mapping:

    [format]
    negative_width = "left-adjust"          # or "ignore"
    compact_trailing_zeros = "strip-unless-alt"   # or "always-strip"
    float_rounding = "half-away-from-zero"  # or "libc"

In ``pyproject.toml`` the same table lives under ``[tool.cformat.format]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeVar

from cformat.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping

_KS = TypeVar("_KS", bound=KeyedStrEnum)


class NegativeWidth(KeyedStrEnum):
    """How a negative width taken from a ``*`` argument is applied."""

    LEFT_ADJUST = ("left-adjust", "Use the absolute value and left-adjust (C standard)", ("c",))
    IGNORE = ("ignore", "Apply no padding at all (legacy)", ("legacy",))


class CompactTrailingZeros(KeyedStrEnum):
    """Whether ``%g``/``%G`` strip trailing fractional zeros under the ``#`` flag."""

    STRIP_UNLESS_ALT = ("strip-unless-alt", "Keep zeros when '#' is given (C standard)", ("c",))
    ALWAYS_STRIP = ("always-strip", "Strip zeros regardless of '#' (legacy)", ("legacy",))


class FloatRounding(KeyedStrEnum):
    """Which decimal value is rounded, and how ties are broken."""

    HALF_AWAY_FROM_ZERO = (
        "half-away-from-zero",
        "Round the shortest round-trip decimal, ties away from zero",
        ("half-up",),
    )
    LIBC = ("libc", "Round the exact binary value, ties to even (glibc output)", ("exact",))


@dataclass(frozen=True, slots=True)
class FormatPolicy:
    """Immutable policy consulted by the engine and the float renderer.

    Attributes:
        negative_width (NegativeWidth): Treatment of negative ``*`` widths.
        compact_trailing_zeros (CompactTrailingZeros): ``%g`` stripping rule.
        float_rounding (FloatRounding): Decimal rounding model for floats.
    """

    negative_width: NegativeWidth = NegativeWidth.LEFT_ADJUST
    compact_trailing_zeros: CompactTrailingZeros = CompactTrailingZeros.STRIP_UNLESS_ALT
    float_rounding: FloatRounding = FloatRounding.HALF_AWAY_FROM_ZERO

    def thaw(self) -> MutableFormatPolicy:
        """Return a mutable builder initialized from this policy."""
        return MutableFormatPolicy(
            negative_width=self.negative_width,
            compact_trailing_zeros=self.compact_trailing_zeros,
            float_rounding=self.float_rounding,
        )

    def to_dict(self) -> dict[str, str]:
        """Return the TOML-shaped mapping of this policy."""
        return {
            "negative_width": self.negative_width.key,
            "compact_trailing_zeros": self.compact_trailing_zeros.key,
            "float_rounding": self.float_rounding.key,
        }


DEFAULT_POLICY: Final[FormatPolicy] = FormatPolicy()

# Behavior of the implementation this project replaces, kept for compatibility.
LEGACY_POLICY: Final[FormatPolicy] = FormatPolicy(
    negative_width=NegativeWidth.IGNORE,
    compact_trailing_zeros=CompactTrailingZeros.ALWAYS_STRIP,
)


class PolicyValueError(ValueError):
    """A policy key or value found in configuration is not recognized."""


@dataclass
class MutableFormatPolicy:
    """Tri-state builder for `FormatPolicy`, merged last-wins.

    Attributes:
        negative_width (NegativeWidth | None): See `FormatPolicy`. ``None`` means "inherit".
        compact_trailing_zeros (CompactTrailingZeros | None): See `FormatPolicy`.
        float_rounding (FloatRounding | None): See `FormatPolicy`.
    """

    negative_width: NegativeWidth | None = None
    compact_trailing_zeros: CompactTrailingZeros | None = None
    float_rounding: FloatRounding | None = None

    def merge_with(self, other: MutableFormatPolicy) -> MutableFormatPolicy:
        """Return a new builder with ``other``'s explicit values applied over ``self``.

        Args:
            other (MutableFormatPolicy): The overriding policy.

        Returns:
            MutableFormatPolicy: Merged policy.
        """
        return MutableFormatPolicy(
            negative_width=other.negative_width or self.negative_width,
            compact_trailing_zeros=other.compact_trailing_zeros or self.compact_trailing_zeros,
            float_rounding=other.float_rounding or self.float_rounding,
        )

    def resolve(self, base: FormatPolicy) -> FormatPolicy:
        """Fill unset fields from ``base`` and return a frozen policy."""
        return FormatPolicy(
            negative_width=self.negative_width or base.negative_width,
            compact_trailing_zeros=self.compact_trailing_zeros or base.compact_trailing_zeros,
            float_rounding=self.float_rounding or base.float_rounding,
        )

    def freeze(self) -> FormatPolicy:
        """Resolve against `DEFAULT_POLICY`."""
        return self.resolve(DEFAULT_POLICY)

    @classmethod
    def from_toml_dict(cls, table: Mapping[str, Any]) -> MutableFormatPolicy:
        """Build a policy from a ``[format]`` table.

        Args:
            table (Mapping[str, Any]): The table contents.

        Returns:
            MutableFormatPolicy: The parsed (possibly partial) policy.

        Raises:
            PolicyValueError: On unknown keys or values.
        """
        unknown: set[str] = set(table) - set(_FIELD_ENUMS)
        if unknown:
            raise PolicyValueError(f"unknown format policy key(s): {', '.join(sorted(unknown))}")
        values: dict[str, KeyedStrEnum] = {
            name: _parse_member(enum_cls, name, table[name])
            for name, enum_cls in _FIELD_ENUMS.items()
            if name in table
        }
        return cls(**values)  # type: ignore[arg-type]


_FIELD_ENUMS: Final[dict[str, type[KeyedStrEnum]]] = {
    "negative_width": NegativeWidth,
    "compact_trailing_zeros": CompactTrailingZeros,
    "float_rounding": FloatRounding,
}


def _parse_member(enum_cls: type[_KS], name: str, raw: object) -> _KS:
    member: _KS | None = enum_cls.parse(raw) if isinstance(raw, str) else None
    if member is None:
        choices: str = ", ".join(enum_cls.keys())
        raise PolicyValueError(f"invalid value {raw!r} for {name!r} (expected one of: {choices})")
    return member
