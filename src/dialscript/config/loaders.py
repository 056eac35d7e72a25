# topmark:header:start
#
#   project      : DialScript
#   file         : loaders.py
#   file_relpath : src/dialscript/config/loaders.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads DialScript configuration from on-disk TOML files: a
dedicated ``dialscript.toml`` or the ``[tool.dialscript]`` table of a
``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dialscript.config.getters import get_table_value
from dialscript.config.logging import get_logger
from dialscript.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.types import TomlTable

logger: DialscriptLogger = get_logger(__name__)


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``dialscript.toml`` or ``pyproject.toml``).
        strict: Re-raise read and parse errors instead of swallowing them.

    Returns:
        The parsed TOML content.

    Raises:
        OSError: If ``strict`` and the file cannot be read.
        TomlkitParseError: If ``strict`` and the file is not valid TOML.

    Notes:
        - Unless ``strict``, errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if strict:
            raise
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if strict:
            raise
        return {}


def extract_dialscript_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the DialScript settings table from a parsed TOML document.

    ``pyproject.toml`` keeps settings under ``[tool.dialscript]``; any other
    file is taken to be a dedicated DialScript config at top level.
    """
    if path.name == PYPROJECT_FILE_NAME:
        return get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_TABLE)
    return data


def discover_config_files(root: Path) -> list[Path]:
    """Return config files found in ``root``, lowest precedence first.

    ``pyproject.toml`` is only reported when it carries a ``[tool.dialscript]``
    table; ``dialscript.toml`` wins over it when both exist.
    """
    found: list[Path] = []
    pyproject: Path = root / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_dialscript_table(pyproject, load_toml_dict(pyproject)):
        found.append(pyproject)
    dedicated: Path = root / CONFIG_FILE_NAME
    if dedicated.is_file():
        found.append(dedicated)
    logger.debug("Discovered config files in %s: %s", root, found)
    return found
