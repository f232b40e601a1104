# topmark:header:start
#
#   project      : CFormat
#   file         : options.py
#   file_relpath : src/cformat/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Reusable option groups (verbosity, color, output format, rendering policy)
live here so the commands themselves stay thin.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from cformat.cli.cli_types import ColorMode, EnumChoiceParam, OutputFormat
from cformat.cli.errors import CFormatUsageError
from cformat.config.policy import (
    CompactTrailingZeros,
    FloatRounding,
    MutableFormatPolicy,
    NegativeWidth,
)

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` (positive), ``-quiet_count`` (negative) or 0.

    Raises:
        CFormatUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CFormatUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON output.
        Honors ``--color`` / ``--no-color``.
        Honors the FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format is OutputFormat.JSON:
        return False
    if cli_mode is ColorMode.ALWAYS:
        return True
    if cli_mode is ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress notes and warnings.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` selecting text or JSON output."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)


def policy_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the rendering-policy options and config file selection.

    Adds ``--negative-width``, ``--compact-zeros``, ``--rounding``,
    ``--config`` (repeatable) and ``--no-config``.
    """
    f = click.option(
        "--negative-width",
        "negative_width",
        type=EnumChoiceParam(NegativeWidth),
        default=None,
        help=f"Negative '*' width handling ({', '.join(NegativeWidth.keys())}).",
    )(f)
    f = click.option(
        "--compact-zeros",
        "compact_zeros",
        type=EnumChoiceParam(CompactTrailingZeros),
        default=None,
        help=f"%g trailing zeros under '#' ({', '.join(CompactTrailingZeros.keys())}).",
    )(f)
    f = click.option(
        "--rounding",
        "rounding",
        type=EnumChoiceParam(FloatRounding),
        default=None,
        help=f"Float rounding model ({', '.join(FloatRounding.keys())}).",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra TOML config file(s), applied after the discovered one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not look for cformat.toml / pyproject.toml.",
    )(f)
    return f


def policy_overrides(
    *,
    negative_width: NegativeWidth | None,
    compact_zeros: CompactTrailingZeros | None,
    rounding: FloatRounding | None,
) -> MutableFormatPolicy:
    """Collect the policy options into the topmost configuration layer."""
    return MutableFormatPolicy(
        negative_width=negative_width,
        compact_trailing_zeros=compact_zeros,
        float_rounding=rounding,
    )
