# topmark:header:start
#
#   project      : DialScript
#   file         : test_classifier.py
#   file_relpath : tests/parser/test_classifier.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Unit tests for the line classifier (`dialscript.parser.classifier.classify`).

Each test feeds a single line and checks the event kind plus the payload
fields that kind carries. Carets are 0-based offsets into the raw line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dialscript.config.types import TypoPolicy
from dialscript.parser.classifier import classify, find_separator, header_keyword_for
from dialscript.parser.kinds import LineKind
from tests.conftest import parametrize

if TYPE_CHECKING:
    from dialscript.parser.events import LineEvent


# --- Blank lines and comments --------------------------------------------------


@parametrize("raw", ["", "   ", "\t"])
def test_blank_lines_are_empty(raw: str) -> None:
    """Whitespace-only lines classify as EMPTY and keep their raw text."""
    event: LineEvent = classify(raw, 3)
    assert event.kind is LineKind.EMPTY
    assert event.line_number == 3
    assert event.raw == raw


@parametrize(
    "raw, value",
    [
        ("// Main dialog", "Main dialog"),
        ("   //x", "x"),
        ("//", ""),
    ],
)
def test_comment_value_is_stripped(raw: str, value: str) -> None:
    """Comments carry the text after ``//``, left-trimmed."""
    event: LineEvent = classify(raw, 1)
    assert event.kind is LineKind.COMMENT
    assert event.value == value


# --- Headers -------------------------------------------------------------------


@parametrize(
    "raw, kind, number",
    [
        ("[Scene.1]", LineKind.SCENE_HEADER, 1),
        ("[scene.12]", LineKind.SCENE_HEADER, 12),
        ("  [Scene.4]  ", LineKind.SCENE_HEADER, 4),
        ("[Dialog.1]", LineKind.DIALOG_HEADER, 1),
        ("[DIALOG.3]", LineKind.DIALOG_HEADER, 3),
    ],
)
def test_valid_headers(raw: str, kind: LineKind, number: int) -> None:
    """Scene and dialog headers match case-insensitively and carry their number."""
    event: LineEvent = classify(raw, 1)
    assert event.kind is kind
    assert event.number == number
    assert not event.is_error


@parametrize(
    "raw, kind, caret",
    [
        ("[Scene.0]", LineKind.TYPO_SCENE, 7),
        ("[Scene.-1]", LineKind.TYPO_SCENE, 7),
        ("[Dialog.0]", LineKind.TYPO_DIALOG, 8),
        ("[Dialog.-2]", LineKind.TYPO_DIALOG, 8),
    ],
)
def test_non_positive_header_numbers(raw: str, kind: LineKind, caret: int) -> None:
    """Header numbers must be positive; the caret points at the number."""
    event: LineEvent = classify(raw, 1)
    assert event.kind is kind
    assert event.caret == caret
    assert event.is_error


def test_unclosed_header_bracket() -> None:
    """A header without ``]`` points the caret just past the last character."""
    event: LineEvent = classify("[Scene.1", 1)
    assert event.kind is LineKind.UNCLOSED_BRACKET
    assert event.caret == 8


def test_unclosed_header_bracket_ignores_trailing_whitespace() -> None:
    event: LineEvent = classify("[Scene.1   ", 1)
    assert event.kind is LineKind.UNCLOSED_BRACKET
    assert event.caret == 8


@parametrize("raw", ["[Scene. 1]", "[ Scene.1]", "[Dialog .2]"])
def test_space_inside_header(raw: str) -> None:
    assert classify(raw, 1).kind is LineKind.EXTRA_SPACE_IN_HEADER


@parametrize(
    "raw, kind, suggestion",
    [
        ("[Scen.1]", LineKind.TYPO_SCENE, "Scene"),
        ("[Scenes.1]", LineKind.TYPO_SCENE, "Scene"),
        ("[Dialg.1]", LineKind.TYPO_DIALOG, "Dialog"),
        ("[Dialogg.2]", LineKind.TYPO_DIALOG, "Dialog"),
        # Unrecognized keyword: reported against Scene with no suggestion
        ("[Foo.1]", LineKind.TYPO_SCENE, None),
        # Well spelled keyword with a malformed number
        ("[Scene.x]", LineKind.TYPO_SCENE, "Scene"),
    ],
)
def test_header_typos(raw: str, kind: LineKind, suggestion: str | None) -> None:
    """Misspelled header keywords are flagged at column 1 with a suggestion."""
    event: LineEvent = classify(raw, 1)
    assert event.kind is kind
    assert event.caret == 1
    assert event.suggestion == suggestion


def test_header_keyword_for_exact_and_typo() -> None:
    assert header_keyword_for("scene") == "Scene"
    assert header_keyword_for("DIALOG") == "Dialog"
    assert header_keyword_for("Dialg") == "Dialog"
    assert header_keyword_for("Foo") is None


def test_header_typo_respects_policy() -> None:
    """A stricter threshold turns a near-miss into an unrecognized keyword."""
    strict = TypoPolicy(long_threshold=80)
    event: LineEvent = classify("[Dialg.1]", 1, policy=strict)
    assert event.kind is LineKind.TYPO_SCENE
    assert event.suggestion is None


# --- Metadata ------------------------------------------------------------------


@parametrize(
    "raw, kind, value",
    [
        ("Level: 1", LineKind.LEVEL, "1"),
        ("level:3", LineKind.LEVEL, "3"),
        ("Location: Dark Forest  ", LineKind.LOCATION, "Dark Forest"),
        ("  Location:   Cave", LineKind.LOCATION, "Cave"),
        ("Characters: Alan, Beth", LineKind.CHARACTERS, "Alan, Beth"),
        ("CHARACTERS: Zed", LineKind.CHARACTERS, "Zed"),
    ],
)
def test_metadata_lines(raw: str, kind: LineKind, value: str) -> None:
    """Metadata keywords are case-insensitive and their value is trimmed."""
    event: LineEvent = classify(raw, 1)
    assert event.kind is kind
    assert event.value == value
    assert event.kind.is_metadata


@parametrize(
    "raw, kind, suggestion",
    [
        ("Leve: 1", LineKind.TYPO_LEVEL, "Level"),
        ("Levels: 3", LineKind.TYPO_LEVEL, "Level"),
        ("Locatio: Forest", LineKind.TYPO_LOCATION, "Location"),
        ("Character: Alan", LineKind.TYPO_CHARACTERS, "Characters"),
    ],
)
def test_metadata_keyword_typos(raw: str, kind: LineKind, suggestion: str) -> None:
    event: LineEvent = classify(raw, 1)
    assert event.kind is kind
    assert event.suggestion == suggestion


def test_short_name_is_not_a_metadata_typo() -> None:
    """``Lev:`` is not a known keyword prefix, so it reads as a dialog line."""
    event: LineEvent = classify("Lev: Hi", 1)
    assert event.kind is LineKind.DIALOG
    assert event.name == "Lev"


def test_metadata_without_value_falls_through() -> None:
    """``Level:`` with nothing after it is not metadata; it is an empty dialog line."""
    assert classify("Level:", 1).kind is LineKind.EMPTY_TEXT


# --- Dialog lines --------------------------------------------------------------


def test_dialog_line_with_metadata() -> None:
    event: LineEvent = classify("Alan: Hello there! {Emotion: happy}", 6)
    assert event.kind is LineKind.DIALOG
    assert event.name == "Alan"
    assert event.text == "Hello there!"
    assert event.metadata == "{Emotion: happy}"


def test_dialog_line_without_metadata() -> None:
    event: LineEvent = classify("Beth: Hi Alan, nice to see you.", 7)
    assert event.kind is LineKind.DIALOG
    assert event.text == "Hi Alan, nice to see you."
    assert event.metadata is None


def test_no_space_after_colon() -> None:
    """The caret points at the first character after the colon."""
    event: LineEvent = classify("Alan:Hello", 1)
    assert event.kind is LineKind.NO_SPACE_AFTER_COLON
    assert event.caret == 5


def test_leading_space() -> None:
    event: LineEvent = classify("  Alan: Hi", 1)
    assert event.kind is LineKind.LEADING_SPACE
    assert event.caret == 0


@parametrize("raw", ["Hello world", "Hello {a: b}"])
def test_lines_without_separator_are_unknown(raw: str) -> None:
    """Colons inside a metadata block do not count as the name separator."""
    assert classify(raw, 1).kind is LineKind.UNKNOWN


def test_empty_name() -> None:
    event: LineEvent = classify(": Hi", 1)
    assert event.kind is LineKind.EMPTY_NAME
    assert event.caret == 0


@parametrize("raw", ["Alan:", "Alan:   "])
def test_empty_text(raw: str) -> None:
    assert classify(raw, 1).kind is LineKind.EMPTY_TEXT


def test_unclosed_metadata_block() -> None:
    """The caret points at the opening brace."""
    event: LineEvent = classify("Alan: Hi {Emotion: happy", 1)
    assert event.kind is LineKind.UNCLOSED_BRACKET
    assert event.caret == 9


def test_metadata_not_at_end() -> None:
    """The caret points at the first character after the metadata block."""
    event: LineEvent = classify("Alan: Hi {Emotion: happy} later", 1)
    assert event.kind is LineKind.META_NOT_AT_END
    assert event.caret == 26
    assert event.metadata == "{Emotion: happy}"


@parametrize(
    "line, expected",
    [
        ("Alan: Hi", 4),
        ("{a: b} Alan: Hi", 11),
        ("no colon", -1),
        ("{unclosed: x", -1),
    ],
)
def test_find_separator(line: str, expected: int) -> None:
    assert find_separator(line) == expected


def test_event_to_dict_only_has_populated_fields() -> None:
    data = classify("Alan:Hello", 2).to_dict()
    assert data == {"line": 2, "kind": "no-space-after-colon", "name": "Alan", "caret": 5}
