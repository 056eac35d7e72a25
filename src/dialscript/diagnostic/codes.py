# topmark:header:start
#
#   project      : DialScript
#   file         : codes.py
#   file_relpath : src/dialscript/diagnostic/codes.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Closed taxonomy of DialScript diagnostics.

Every finding the validator can report has a `DiagnosticCode`. A code carries a
stable machine key (its ``.value``), a `DiagnosticCategory`, and the default
message and hint used when a diagnostic is created without overrides.

Categories:
    * ``structural``: scene/dialog nesting and required metadata.
    * ``syntax``: malformed lines (brackets, colons, spacing, metadata blocks).
    * ``lexical``: misspelled keywords and unknown character names.
    * ``catch-all``: lines that match no known shape.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

_DC = TypeVar("_DC", bound="DiagnosticCode")


class DiagnosticCategory(str, Enum):
    """Coarse grouping of diagnostic codes, used for summaries and coloring."""

    STRUCTURAL = "structural"
    SYNTAX = "syntax"
    LEXICAL = "lexical"
    CATCH_ALL = "catch-all"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this category.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticCategory.STRUCTURAL: chalk.red_bright,
                DiagnosticCategory.SYNTAX: chalk.red,
                DiagnosticCategory.LEXICAL: chalk.yellow,
                DiagnosticCategory.CATCH_ALL: chalk.magenta,
            }[self],
        )


class DiagnosticCode(str, Enum):
    """Diagnostic code where `.value` is a stable machine key.

    Attributes:
        category (DiagnosticCategory): The category this code belongs to.
        message (str): Default human-readable message.
        hint (str | None): Default hint, or ``None``.
    """

    category: DiagnosticCategory
    message: str
    hint: str | None

    def __new__(
        cls: type[_DC],
        key: str,
        category: DiagnosticCategory,
        message: str,
        hint: str | None = None,
    ) -> _DC:
        obj: _DC = str.__new__(cls, key)
        obj._value_ = key
        obj.category = category
        obj.message = message
        obj.hint = hint
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    # --- Structural ---
    DUPLICATE_SCENE = (
        "duplicate-scene",
        DiagnosticCategory.STRUCTURAL,
        "Only one [Scene.X] allowed",
        "remove extra scene declarations",
    )
    DIALOG_WITHOUT_SCENE = (
        "dialog-without-scene",
        DiagnosticCategory.STRUCTURAL,
        "Dialog without [Scene.X]",
        "add [Scene.1] before this dialog",
    )
    LEVEL_OUTSIDE_SCENE = (
        "level-outside-scene",
        DiagnosticCategory.STRUCTURAL,
        "Level outside scene",
        "move Level: x inside [Scene.X] block",
    )
    LOCATION_OUTSIDE_SCENE = (
        "location-outside-scene",
        DiagnosticCategory.STRUCTURAL,
        "Location outside scene",
        "move Location: x inside [Scene.X] block",
    )
    CHARACTERS_OUTSIDE_SCENE = (
        "characters-outside-scene",
        DiagnosticCategory.STRUCTURAL,
        "Characters outside scene",
        "move Characters: inside [Scene.X] block",
    )
    LEVEL_AFTER_DIALOG = (
        "level-after-dialog",
        DiagnosticCategory.STRUCTURAL,
        "Level after dialog",
        "move Level: x before [Dialog.X]",
    )
    LOCATION_AFTER_DIALOG = (
        "location-after-dialog",
        DiagnosticCategory.STRUCTURAL,
        "Location after dialog",
        "move Location: x before [Dialog.X]",
    )
    CHARACTERS_AFTER_DIALOG = (
        "characters-after-dialog",
        DiagnosticCategory.STRUCTURAL,
        "Characters after dialog",
        "move Characters: before [Dialog.X]",
    )
    DUPLICATE_LEVEL = (
        "duplicate-level",
        DiagnosticCategory.STRUCTURAL,
        "Duplicate Level",
        "remove extra Level definition",
    )
    DUPLICATE_LOCATION = (
        "duplicate-location",
        DiagnosticCategory.STRUCTURAL,
        "Duplicate Location",
        "remove extra Location definition",
    )
    DUPLICATE_CHARACTERS = (
        "duplicate-characters",
        DiagnosticCategory.STRUCTURAL,
        "Duplicate Characters",
        "remove extra Characters definition",
    )
    STRAY_DIALOG_LINE = (
        "stray-dialog-line",
        DiagnosticCategory.STRUCTURAL,
        "Stray dialog line",
        "add [Dialog.1] before this line",
    )
    BLANK_LINE_IN_DIALOG_BLOCK = (
        "blank-line-in-dialog-block",
        DiagnosticCategory.STRUCTURAL,
        "Empty line inside dialog block",
        "remove empty lines between dialog lines",
    )
    MISSING_SCENE = (
        "missing-scene",
        DiagnosticCategory.STRUCTURAL,
        "Missing [Scene.X]",
        "add [Scene.1] at the beginning of file",
    )
    MISSING_LEVEL = (
        "missing-level",
        DiagnosticCategory.STRUCTURAL,
        "Missing Level",
        "add 'Level: N' after [Scene.X]",
    )
    MISSING_LOCATION = (
        "missing-location",
        DiagnosticCategory.STRUCTURAL,
        "Missing Location",
        "add 'Location: name' after [Scene.X]",
    )
    MISSING_CHARACTERS = (
        "missing-characters",
        DiagnosticCategory.STRUCTURAL,
        "Missing Characters",
        "add 'Characters: Name1, Name2' after [Scene.X]",
    )

    # --- Syntax ---
    UNCLOSED_BRACKET = (
        "unclosed-bracket",
        DiagnosticCategory.SYNTAX,
        "Missing ']'",
        "close header with ']'",
    )
    EXTRA_SPACE_IN_HEADER = (
        "extra-space-in-header",
        DiagnosticCategory.SYNTAX,
        "Extra space in header",
        "use [Scene.1] or [Dialog.1] without spaces",
    )
    LEADING_SPACE = (
        "leading-space",
        DiagnosticCategory.SYNTAX,
        "Leading space in dialog line",
        "character name must start at the beginning of the line",
    )
    EMPTY_NAME = (
        "empty-name",
        DiagnosticCategory.SYNTAX,
        "Empty name before ':'",
        "add character name, e.g. Alan: Hello",
    )
    EMPTY_TEXT = (
        "empty-text",
        DiagnosticCategory.SYNTAX,
        "Empty dialog text",
        "add text after the colon",
    )
    NO_SPACE_AFTER_COLON = (
        "no-space-after-colon",
        DiagnosticCategory.SYNTAX,
        "Missing space after ':'",
        "add a space after the colon, e.g. 'Name: Text'",
    )
    META_NOT_AT_END = (
        "meta-not-at-end",
        DiagnosticCategory.SYNTAX,
        "Metadata not at end of line",
        "move the {...} block to the end of the line",
    )
    MISSING_CLOSING_BRACE = (
        "missing-closing-brace",
        DiagnosticCategory.SYNTAX,
        "Missing '}' in metadata",
        "close metadata with '}'",
    )

    # --- Lexical / typo ---
    TYPO_SCENE = (
        "typo-scene",
        DiagnosticCategory.LEXICAL,
        "Invalid header format",
        "Did you mean [Scene.N]?",
    )
    TYPO_DIALOG = (
        "typo-dialog",
        DiagnosticCategory.LEXICAL,
        "Invalid header format",
        "Did you mean [Dialog.N]?",
    )
    TYPO_LEVEL = (
        "typo-level",
        DiagnosticCategory.LEXICAL,
        "Unknown keyword",
        "Did you mean 'Level:'?",
    )
    TYPO_LOCATION = (
        "typo-location",
        DiagnosticCategory.LEXICAL,
        "Unknown keyword",
        "Did you mean 'Location:'?",
    )
    TYPO_CHARACTERS = (
        "typo-characters",
        DiagnosticCategory.LEXICAL,
        "Unknown keyword",
        "Did you mean 'Characters:'?",
    )
    UNKNOWN_CHARACTER = (
        "unknown-character",
        DiagnosticCategory.LEXICAL,
        "Unknown character",
        "add this character to Characters",
    )

    # --- Catch-all ---
    UNKNOWN_SYNTAX = (
        "unknown-syntax",
        DiagnosticCategory.CATCH_ALL,
        "Unknown syntax",
        "check spelling or use: [Scene.N], [Dialog.N], Name: Text",
    )
    INVALID_LINE_IN_DIALOG = (
        "invalid-line-in-dialog",
        DiagnosticCategory.CATCH_ALL,
        "Invalid line in dialog",
        "use format: Name: Text",
    )
