# topmark:header:start
#
#   project      : DialScript
#   file         : constants.py
#   file_relpath : src/dialscript/constants.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DIALSCRIPT_VERSION: str = get_version("dialscript")

# Packaged sample script shown by `dialscript example`:
EXAMPLE_PACKAGE: str = "dialscript.data"
EXAMPLE_NAME: str = "example.ds"

# Config discovery (current working directory):
CONFIG_FILE_NAME: str = "dialscript.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "dialscript"

DEFAULT_EXTENSIONS: tuple[str, ...] = (".ds",)

# Bracket headers and metadata keywords, in canonical spelling:
SCENE_KEYWORD: str = "Scene"
DIALOG_KEYWORD: str = "Dialog"
LEVEL_KEYWORD: str = "Level"
LOCATION_KEYWORD: str = "Location"
CHARACTERS_KEYWORD: str = "Characters"

HEADER_KEYWORDS: tuple[str, ...] = (SCENE_KEYWORD, DIALOG_KEYWORD)
METADATA_KEYWORDS: tuple[str, ...] = (LEVEL_KEYWORD, LOCATION_KEYWORD, CHARACTERS_KEYWORD)

# Caret columns for non-positive header numbers: right after "[Scene." / "[Dialog."
SCENE_NUMBER_CARET: int = 7
DIALOG_NUMBER_CARET: int = 8

# "No caret" sentinel used by events and diagnostics.
NO_CARET: int = -1

# Typo-correction defaults (percentages and character counts):
DEFAULT_SHORT_THRESHOLD: int = 20
DEFAULT_LONG_THRESHOLD: int = 60
DEFAULT_SHORT_LENGTH: int = 4
DEFAULT_MAX_LENGTH_DELTA: int = 2
