# topmark:header:start
#
#   project      : CFormat
#   file         : enum_mixins.py
#   file_relpath : src/cformat/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums for CFormat.

``KeyedStrEnum`` members carry a stable machine key (``.value``), a human
label, and a tuple of aliases. The conversion table and the policy enums are
built on it, so that TOML values, CLI choices, and JSON dumps all speak the
same keys.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Fast mode", ("quick",))

    assert Mode.parse("Quick") is Mode.FAST
    assert Mode.FAST.key == "fast"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize a key-like token: trimmed, lower case, ``-``/space become ``_``."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum whose ``.value`` is a stable key; label and aliases live on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens attached to the member.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a member from its key, label and aliases.

        Args:
            key (str): The stable machine key (stored as ``.value``).
            label (str): The human-readable label.
            aliases (Iterable[str]): Optional alternative tokens.

        Returns:
            _KS: The new enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as ``.value``)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> list[str]:
        """Return all member keys in declaration order."""
        return [m.key for m in cls]

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into a member, or return ``None`` on a miss.

        Matches the key, the member name, or an alias, case-insensitively and
        with ``-``/space normalized to ``_``.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for m in cls:
            if token in (_norm_token(m.value), _norm_token(m.name)):
                return m
            if any(token == _norm_token(a) for a in m.aliases):
                return m
        return None
