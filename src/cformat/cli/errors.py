# topmark:header:start
#
#   project      : CFormat
#   file         : errors.py
#   file_relpath : src/cformat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CFormat CLI.

Usage:
    Raise these from commands to stop with a message and a standardized exit
    code. Library errors are translated with `from_format_error`.

Styling:
    Errors print through the project console when one is present in the Click
    context (see `show()`); otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cformat.cli.exit_codes import ExitCode
from cformat.core.errors import ErrorKind, FormatError


class CFormatCliError(click.ClickException):
    """Base class for all CFormat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class CFormatUsageError(CFormatCliError):
    """Bad CLI values, or arguments that do not fit the template."""

    exit_code = ExitCode.USAGE_ERROR


class CFormatTemplateError(CFormatCliError):
    """The template is malformed."""

    exit_code = ExitCode.FORMAT_ERROR


class CFormatConfigError(CFormatCliError):
    """A configuration file is missing, unreadable or invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class CFormatUnexpectedError(CFormatCliError):
    """Internal inconsistency (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


_BY_KIND: dict[ErrorKind, type[CFormatCliError]] = {
    ErrorKind.PARSE_ERROR: CFormatTemplateError,
    ErrorKind.WRONG_TYPE: CFormatUsageError,
    ErrorKind.NOT_ENOUGH_ARGS: CFormatUsageError,
    ErrorKind.TOO_MANY_ARGS: CFormatUsageError,
    ErrorKind.UNKNOWN: CFormatUnexpectedError,
}


def from_format_error(exc: FormatError) -> CFormatCliError:
    """Wrap a library error in the CLI error matching its kind."""
    return _BY_KIND[exc.kind](f"{exc.kind.label}: {exc.message}")
