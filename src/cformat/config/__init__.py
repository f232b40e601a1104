# topmark:header:start
#
#   project      : CFormat
#   file         : __init__.py
#   file_relpath : src/cformat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for CFormat: rendering policy, its TOML loaders, and logging."""

from __future__ import annotations

from cformat.config.policy import (
    DEFAULT_POLICY,
    LEGACY_POLICY,
    CompactTrailingZeros,
    FloatRounding,
    FormatPolicy,
    MutableFormatPolicy,
    NegativeWidth,
)

__all__: list[str] = [
    "DEFAULT_POLICY",
    "LEGACY_POLICY",
    "CompactTrailingZeros",
    "FloatRounding",
    "FormatPolicy",
    "MutableFormatPolicy",
    "NegativeWidth",
]
