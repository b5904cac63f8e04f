# topmark:header:start
#
#   project      : InlineDiag
#   file         : loaders.py
#   file_relpath : src/inlinediag/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading InlineDiag render options from:
- a dedicated ``inlinediag.toml`` file, or
- the ``[tool.inlinediag]`` table of a ``pyproject.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from inlinediag.config.keys import Toml
from inlinediag.config.logging import get_logger
from inlinediag.config.options import RenderOptions
from inlinediag.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from inlinediag.config.logging import InlineDiagLogger

TomlTable = dict[str, Any]

logger: InlineDiagLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``inlinediag.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(doc: TomlTable, path: Path) -> TomlTable:
    """Return the InlineDiag table of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.inlinediag]``; any other file is an
    InlineDiag config file and is returned as-is.

    Args:
        doc (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from.

    Returns:
        TomlTable: The InlineDiag table (empty when absent).
    """
    if path.name != PYPROJECT_FILE_NAME:
        return doc
    table: Any = doc
    for part in PYPROJECT_TOOL_SECTION.split("."):
        table = table.get(part) if isinstance(table, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest InlineDiag config file at or above ``start``.

    In each directory ``inlinediag.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.inlinediag]`` table.

    Args:
        start (Path): File or directory to start from.

    Returns:
        Path | None: The config file, or ``None`` if none was found.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent

    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_tool_table(load_toml_dict(pyproject), pyproject):
            logger.debug("Discovered config in %s", pyproject)
            return pyproject
    return None


def load_render_options(path: Path | None) -> RenderOptions:
    """Load `RenderOptions` from the ``[virtual_text]`` table of a config file.

    Args:
        path (Path | None): Config file, or ``None`` for the defaults.

    Returns:
        RenderOptions: The loaded options; defaults when the file or table is absent.

    Raises:
        InvalidArgumentError: If a value in the table has the wrong shape.
        InvalidSeverityError: If a severity name is unknown.
    """
    if path is None:
        return RenderOptions()

    table: TomlTable = extract_tool_table(load_toml_dict(path), path)
    section: Any = table.get(Toml.SECTION_VIRTUAL_TEXT, {})
    if not isinstance(section, dict):
        logger.warning("[%s] in %s is not a table; ignored", Toml.SECTION_VIRTUAL_TEXT, path)
        return RenderOptions()

    logger.debug("Loaded [%s] from %s: %s", Toml.SECTION_VIRTUAL_TEXT, path, section)
    return RenderOptions.from_table(cast("TomlTable", section))
