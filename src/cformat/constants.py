# topmark:header:start
#
#   project      : CFormat
#   file         : constants.py
#   file_relpath : src/cformat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CFormat Constants."""

from __future__ import annotations

import struct
from importlib.metadata import version as get_version
from typing import Final

CFORMAT_VERSION: str = get_version("cformat")

# Environment variable consulted by `cformat.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "CFORMAT_LOG_LEVEL"

# Largest value a C `int` field width / precision can hold.
INT_MAX: Final[int] = 2**31 - 1
INT_MIN: Final[int] = -(2**31)

# Precision used when a specifier does not name one.
DEFAULT_PRECISION: Final[int] = 6
# Unset string precision means "no limit".
UNBOUNDED_PRECISION: Final[int] = INT_MAX

# Recognized C length modifiers. Order matters: two-letter forms first.
LENGTH_MODIFIERS: Final[tuple[str, ...]] = ("hh", "h", "ll", "l", "q", "L", "j", "z", "Z", "t")

# Native pointer width in bits.
POINTER_BITS: Final[int] = struct.calcsize("P") * 8

# Config file names, in discovery precedence order.
CONFIG_FILE_NAME: Final[str] = "cformat.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
