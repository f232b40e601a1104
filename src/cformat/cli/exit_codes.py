# topmark:header:start
#
#   project      : CFormat
#   file         : exit_codes.py
#   file_relpath : src/cformat/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CFormat CLI.

CFormat follows the BSD `sysexits` convention so that shell scripts calling
``cformat format`` can tell a malformed template from bad arguments.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CFormat CLI.

    Attributes:
        SUCCESS: The command completed.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Bad command-line values, or arguments that do not match
            the template (too few, too many, wrong type). Mirrors BSD
            ``EX_USAGE (64)``.
        FORMAT_ERROR: The template itself is malformed. Mirrors BSD
            ``EX_DATAERR (65)``.
        CONFIG_ERROR: A configuration file is unreadable or invalid. Mirrors
            BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Internal inconsistency (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
