# topmark:header:start
#
#   project      : DialScript
#   file         : kinds.py
#   file_relpath : src/dialscript/parser/kinds.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Closed set of line kinds produced by the classifier."""

from __future__ import annotations

from enum import Enum


class LineKind(str, Enum):
    """Tag of a classified source line.

    The first group describes well-formed lines. The second group holds the
    errors the classifier can detect from a single line in isolation; they are
    surfaced verbatim by the validator.
    """

    EMPTY = "empty"
    COMMENT = "comment"
    SCENE_HEADER = "scene-header"
    DIALOG_HEADER = "dialog-header"
    LEVEL = "level"
    LOCATION = "location"
    CHARACTERS = "characters"
    DIALOG = "dialog"
    UNKNOWN = "unknown"

    # Line-level errors
    UNCLOSED_BRACKET = "unclosed-bracket"
    EXTRA_SPACE_IN_HEADER = "extra-space-in-header"
    LEADING_SPACE = "leading-space"
    EMPTY_NAME = "empty-name"
    EMPTY_TEXT = "empty-text"
    NO_SPACE_AFTER_COLON = "no-space-after-colon"
    META_NOT_AT_END = "meta-not-at-end"
    TYPO_SCENE = "typo-scene"
    TYPO_DIALOG = "typo-dialog"
    TYPO_LEVEL = "typo-level"
    TYPO_LOCATION = "typo-location"
    TYPO_CHARACTERS = "typo-characters"

    @property
    def is_error(self) -> bool:
        """Return True for the line-level error kinds."""
        return self in _ERROR_KINDS

    @property
    def is_metadata(self) -> bool:
        """Return True for ``Level``/``Location``/``Characters`` lines."""
        return self in (LineKind.LEVEL, LineKind.LOCATION, LineKind.CHARACTERS)


_ERROR_KINDS: frozenset[LineKind] = frozenset(
    {
        LineKind.UNCLOSED_BRACKET,
        LineKind.EXTRA_SPACE_IN_HEADER,
        LineKind.LEADING_SPACE,
        LineKind.EMPTY_NAME,
        LineKind.EMPTY_TEXT,
        LineKind.NO_SPACE_AFTER_COLON,
        LineKind.META_NOT_AT_END,
        LineKind.TYPO_SCENE,
        LineKind.TYPO_DIALOG,
        LineKind.TYPO_LEVEL,
        LineKind.TYPO_LOCATION,
        LineKind.TYPO_CHARACTERS,
    }
)
