# topmark:header:start
#
#   project      : CFormat
#   file         : io.py
#   file_relpath : src/cformat/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load the rendering policy from TOML files.

Sources, lowest precedence first:
    1. Built-in defaults (`cformat.config.policy.DEFAULT_POLICY`).
    2. The nearest ``cformat.toml`` (``[format]``) or ``pyproject.toml``
       (``[tool.cformat.format]``), searching upwards from a start directory.
    3. Files passed explicitly (``--config``), in order.

Parsing is done with `tomlkit` and unwrapped into plain ``dict`` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cformat.config.logging import get_logger
from cformat.config.policy import MutableFormatPolicy, PolicyValueError
from cformat.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cformat.config.logging import CFormatLogger
    from cformat.config.policy import FormatPolicy

logger: CFormatLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(Exception):
    """A configuration file cannot be read or holds invalid values.

    Attributes:
        path (Path): The offending file.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path: Path = path
        super().__init__(f"{path}: {message}")


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML document.

    Args:
        path (Path): File to read (UTF-8).

    Returns:
        TomlTable: The document as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(path, f"cannot read file ({exc.strerror or exc})") from exc
    except TomlkitParseError as exc:
        raise ConfigError(path, f"invalid TOML ({exc})") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_format_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the policy table of a parsed config document, if present.

    ``pyproject.toml`` keeps it under ``[tool.cformat.format]``; any other
    file uses a top-level ``[format]`` table.
    """
    if path.name == PYPROJECT_FILE_NAME:
        table: Any = data.get("tool", {}).get("cformat", {}).get("format")
    else:
        table = data.get("format")
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(path, "'format' must be a table")
    return cast("TomlTable", table)


def policy_from_file(path: Path) -> MutableFormatPolicy | None:
    """Load the (possibly partial) policy stored in ``path``.

    Returns:
        MutableFormatPolicy | None: The policy, or ``None`` when the file has
        no policy table.

    Raises:
        ConfigError: If the file is unreadable or holds invalid values.
    """
    table: TomlTable | None = extract_format_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No format policy table in %s", path)
        return None
    try:
        policy = MutableFormatPolicy.from_toml_dict(table)
    except PolicyValueError as exc:
        raise ConfigError(path, str(exc)) from exc
    logger.debug("Loaded format policy from %s: %s", path, policy)
    return policy


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file in ``start`` or one of its parents.

    In each directory ``cformat.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.cformat]`` table.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                data: TomlTable = load_toml_dict(pyproject)
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if "cformat" in data.get("tool", {}):
                return pyproject
    return None


def load_policy(
    *,
    start: Path | None = None,
    config_files: Iterable[Path] = (),
    discover: bool = True,
    overrides: MutableFormatPolicy | None = None,
) -> FormatPolicy:
    """Layer defaults, the discovered file, explicit files and overrides.

    Args:
        start (Path | None): Directory to start discovery from (default: CWD).
        config_files (Iterable[Path]): Explicit files, applied in order.
        discover (bool): Whether to search for a project config file.
        overrides (MutableFormatPolicy | None): Final layer (e.g. CLI flags).

    Returns:
        FormatPolicy: The resolved policy.

    Raises:
        ConfigError: If any consulted file is invalid.
    """
    merged = MutableFormatPolicy()
    paths: list[Path] = []
    if discover:
        found: Path | None = discover_config_file(start or Path.cwd())
        if found is not None:
            paths.append(found)
    paths.extend(config_files)

    for path in paths:
        layer: MutableFormatPolicy | None = policy_from_file(path)
        if layer is not None:
            merged = merged.merge_with(layer)
    if overrides is not None:
        merged = merged.merge_with(overrides)
    return merged.freeze()
