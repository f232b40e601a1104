# topmark:header:start
#
#   project      : CFormat
#   file         : console.py
#   file_relpath : src/cformat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Rendered text and listings go to stdout through `ClickConsole.print`;
notes, warnings and errors go to stderr. Internal diagnostics use `logging`
instead (see `cformat.config.logging`).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO, TypedDict

import click


class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool
    reverse: bool


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, emit ANSI color codes.
        out (TextIO | None): Stream for standard output (default `sys.stdout`).
        err (TextIO | None): Stream for messages (default `sys.stderr`).
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout, followed by a newline if ``nl``."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def note(self, text: str, *, nl: bool = True) -> None:
        """Write an informational message to stderr."""
        click.secho(text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, dim=True)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with click.style, or unchanged when color is off.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for click.style (see `StyleKwargs`).

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
