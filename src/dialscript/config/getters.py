# topmark:header:start
#
#   project      : DialScript
#   file         : getters.py
#   file_relpath : src/dialscript/config/getters.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape and, on mismatch, logs a warning and
records a message in the caller's ``warnings`` list. User mistakes are
surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from dialscript.config.logging import get_logger

if TYPE_CHECKING:
    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.types import TomlTable

logger: DialscriptLogger = get_logger(__name__)


def _record(warnings: list[str], loc: str, expected: str, value: Any) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    warnings.append(f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}")


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored under ``key``, or an empty dict."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return value
    if value is not None:
        logger.debug("Expected table for key %s, got %r; ignoring", key, value)
    return {}


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not a valid `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Values below ``minimum`` are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        _record(warnings, loc, "int", value)
        return None
    if minimum is not None and value < minimum:
        _record(warnings, loc, f"int >= {minimum}", value)
        return None
    return value


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _record(warnings, f"{where}.{key}", "bool", value)
    return None


def get_string_list_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
) -> list[str] | None:
    """Return an optional list of strings; non-string items are dropped with a warning."""
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        _record(warnings, loc, "list of strings", value)
        return None
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            _record(warnings, f"{loc}[]", "string", item)
    return out
