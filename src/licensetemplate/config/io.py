# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : io.py
#   file_relpath : src/licensetemplate/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for LicenseTemplate configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
into plain ``dict`` structures. The getters never raise: a missing or
ill-typed value falls back to a default (or ``None``) and the mismatch is
logged, so a user mistake in a config file is surfaced without crashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from licensetemplate.config.keys import Toml
from licensetemplate.config.logging import get_logger
from licensetemplate.constants import DEFAULT_BUILD_DIRS, DEFAULT_EXTENSIONS

if TYPE_CHECKING:
    from pathlib import Path

    from licensetemplate.config.logging import LicenseTemplateLogger

TomlTable = dict[str, Any]

logger: LicenseTemplateLogger = get_logger(__name__)


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Return True if ``val`` is a TOML table (a ``dict``)."""
    return isinstance(val, dict)


def is_any_list(val: Any) -> TypeGuard[list[Any]]:
    """Return True if ``val`` is a ``list``."""
    return isinstance(val, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for key '%s', got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for key '%s', got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Returns:
        int | None: The integer value, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for key '%s', got %r; ignoring", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Non-string items are dropped with a warning.

    Returns:
        list[str] | None: The string items, or ``None`` when absent or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not is_any_list(value):
        logger.warning("Expected a list for key '%s', got %r; ignoring", key, value)
        return None
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in '%s'", item, key)
    return out


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-compatible dict.

    The ``template`` key has no default: a template must be configured or
    passed on the command line.

    Returns:
        TomlTable: A new dict, safe for callers to mutate.
    """
    return {
        Toml.KEY_EXTENSIONS: list(DEFAULT_EXTENSIONS),
        Toml.KEY_EXCLUDE: [],
        Toml.KEY_BUILD_DIRS: list(DEFAULT_BUILD_DIRS),
        Toml.KEY_USE_GITIGNORE: True,
        Toml.KEY_JOBS: 1,
        Toml.KEY_FAIL_FAST: False,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (a standalone config file or ``pyproject.toml``).

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
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(toml_dict: TomlTable) -> str:
    """Render a dict as a TOML document string.

    ``None`` values have no TOML representation and are omitted.
    """
    cleaned: TomlTable = {k: v for k, v in toml_dict.items() if v is not None}
    return tomlkit.dumps(cleaned)
