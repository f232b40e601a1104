# topmark:header:start
#
#   project      : CFormat
#   file         : test_format.py
#   file_relpath : tests/cli/test_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `cformat format`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FORMAT_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def fmt(*argv: str) -> list[str]:
    """Build a ``format`` invocation that ignores project config files."""
    return ["--no-color", "format", "--no-config", "--", *argv]


@parametrize(
    "argv, expected",
    [
        (["%d", "42"], "42"),
        (["%#06x", "16"], "0x0010"),
        (["%+.2f", "3.14159"], "+3.14"),
        (["%-10s|", "left"], "left      |"),
        (["%q", "say \"hi\""], '"say \\"hi\\""'),
        (["%5.1f%%", "99.44"], " 99.4%"),
        (["%c%c", "hello", "world"], "hw"),
        (["%x", "0x1F"], "1f"),
        (["%d", "010"], "8"),
        (["%d", "'A"], "65"),
        (["%d", "-7"], "-7"),
        (["%a", "0x1.8p1"], "0x1.8p+1"),
        (["%g", "inf"], "inf"),
        (["%s-%s", "a", "b"], "a-b"),
        (["[%*d]", "-5", "42"], "[42   ]"),
        (["[%.*s]", "2", "abcdef"], "[ab]"),
        (["no conversions"], "no conversions"),
    ],
)
def test_format_renders(argv: list[str], expected: str) -> None:
    """Words are read as the consuming conversion requires."""
    result = run_cli(fmt(*argv))

    assert_SUCCESS(result)
    assert result.stdout == expected


def test_escapes_are_decoded_by_default() -> None:
    """Backslash escapes in FORMAT are decoded like printf(1)."""
    result = run_cli(fmt("%s\\t%s\\n", "a", "b"))

    assert_SUCCESS(result)
    assert result.stdout == "a\tb\n"


def test_no_escapes_keeps_backslashes() -> None:
    """`--no-escapes` takes FORMAT literally."""
    result = run_cli(["format", "--no-config", "--no-escapes", "--", "%s\\n", "a"])

    assert_SUCCESS(result)
    assert result.stdout == "a\\n"


def test_newline_flag() -> None:
    """`-n` appends a newline."""
    result = run_cli(["format", "--no-config", "-n", "--", "%d", "1"])

    assert_SUCCESS(result)
    assert result.stdout == "1\n"


def test_negative_width_policy_option() -> None:
    """`--negative-width ignore` drops the padding of a negative '*' width."""
    result = run_cli(
        ["format", "--no-config", "--negative-width", "ignore", "--", "[%*d]", "-5", "42"]
    )

    assert_SUCCESS(result)
    assert result.stdout == "[42]"


def test_rounding_policy_option() -> None:
    """`--rounding libc` rounds the exact binary value."""
    default = run_cli(fmt("%.2f", "2.675"))
    libc = run_cli(["format", "--no-config", "--rounding", "libc", "--", "%.2f", "2.675"])

    assert default.stdout == "2.68"
    assert libc.stdout == "2.67"


def test_compact_zeros_policy_option() -> None:
    """`--compact-zeros always-strip` strips zeros under '#'."""
    result = run_cli(
        ["format", "--no-config", "--compact-zeros", "always-strip", "--", "%#g", "1.5"]
    )

    assert_SUCCESS(result)
    assert result.stdout == "1.5"


def test_invalid_policy_value_is_rejected() -> None:
    """Unknown policy values fail option parsing."""
    result = run_cli(["format", "--negative-width", "sideways", "--", "%d", "1"])

    assert result.exit_code == 2
    assert "sideways" in result.output


@parametrize(
    "argv, fragment",
    [
        (["%d"], "too few arguments"),
        (["%d", "1", "2"], "too many arguments"),
        (["%d", "abc"], "not valid for"),
        (["%f", "x"], "not valid for"),
        (["%c", ""], "not valid for"),
        (["%*d", "1.5", "2"], "not valid for width"),
    ],
)
def test_argument_problems_are_usage_errors(argv: list[str], fragment: str) -> None:
    """Missing, surplus and unreadable arguments exit with 64."""
    result = run_cli(fmt(*argv))

    assert_USAGE_ERROR(result)
    assert result.stdout == ""
    assert fragment in result.stderr.lower()
    assert "Error:" in result.stderr


@parametrize("template", ["%y", "%", "%5", "%hhhd"])
def test_malformed_template_is_a_format_error(template: str) -> None:
    """Parse errors exit with 65."""
    result = run_cli(fmt(template, "1"))

    assert_FORMAT_ERROR(result)
    assert "malformed format string" in result.stderr.lower()


def test_invalid_escape_is_a_usage_error() -> None:
    """A malformed escape in FORMAT is reported."""
    result = run_cli(fmt("%d\\x", "1"))

    assert_USAGE_ERROR(result)


def test_discovered_config_file_applies(tmp_path: Path) -> None:
    """A cformat.toml in the working directory sets the policy."""
    (tmp_path / "cformat.toml").write_text('[format]\nnegative_width = "ignore"\n')

    result = run_cli_in(tmp_path, ["format", "--", "[%*d]", "-5", "42"])

    assert_SUCCESS(result)
    assert result.stdout == "[42]"


def test_cli_option_overrides_config_file(tmp_path: Path) -> None:
    """Command-line policy options win over config files."""
    (tmp_path / "cformat.toml").write_text('[format]\nnegative_width = "ignore"\n')

    result = run_cli_in(
        tmp_path, ["format", "--negative-width", "left-adjust", "--", "[%*d]", "-5", "42"]
    )

    assert_SUCCESS(result)
    assert result.stdout == "[42   ]"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """`--no-config` ignores the project file."""
    (tmp_path / "cformat.toml").write_text('[format]\nnegative_width = "ignore"\n')

    result = run_cli_in(tmp_path, ["format", "--no-config", "--", "[%*d]", "-5", "42"])

    assert_SUCCESS(result)
    assert result.stdout == "[42   ]"


def test_explicit_config_file(tmp_path: Path) -> None:
    """`--config` adds a file after the discovered one."""
    extra: Path = tmp_path / "legacy.toml"
    extra.write_text('[format]\ncompact_trailing_zeros = "always-strip"\n')

    result = run_cli_in(
        tmp_path, ["format", "--no-config", "--config", str(extra), "--", "%#g", "1.5"]
    )

    assert_SUCCESS(result)
    assert result.stdout == "1.5"


def test_invalid_config_file_is_a_config_error(tmp_path: Path) -> None:
    """Invalid config values exit with 78."""
    (tmp_path / "cformat.toml").write_text('[format]\nnegative_width = "sideways"\n')

    result = run_cli_in(tmp_path, ["format", "--", "%d", "1"])

    assert_CONFIG_ERROR(result)
    assert "cformat.toml" in result.stderr


def test_missing_explicit_config_is_a_config_error(tmp_path: Path) -> None:
    """A `--config` path that does not exist exits with 78."""
    result = run_cli_in(
        tmp_path, ["format", "--no-config", "--config", "absent.toml", "--", "%d", "1"]
    )

    assert_CONFIG_ERROR(result)


def test_verbose_notes_the_policy_on_stderr(tmp_path: Path) -> None:
    """`-v` reports the effective policy without touching stdout."""
    result = run_cli_in(tmp_path, ["-v", "format", "--", "%d", "3"])

    assert_SUCCESS(result)
    assert result.stdout == "3"
    assert "negative_width" in result.stderr
