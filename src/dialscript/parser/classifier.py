# topmark:header:start
#
#   project      : DialScript
#   file         : classifier.py
#   file_relpath : src/dialscript/parser/classifier.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Line classifier.

`classify` turns one raw source line into exactly one `LineEvent`. It looks at
the line in isolation, keeps no state and never raises: anything it cannot make
sense of becomes an error-kind event which the validator later reports.

Rules are tried in priority order:

1. blank line;
2. ``//`` comment;
3. ``[...]`` header (scene/dialog, or one of the header errors);
4. ``Level:`` / ``Location:`` / ``Characters:`` metadata;
5. misspelled metadata keyword;
6. ``Name: Text {meta}`` dialog line (or one of the dialog errors).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dialscript.config.types import DEFAULT_TYPO_POLICY
from dialscript.constants import (
    CHARACTERS_KEYWORD,
    DIALOG_KEYWORD,
    DIALOG_NUMBER_CARET,
    HEADER_KEYWORDS,
    LEVEL_KEYWORD,
    LOCATION_KEYWORD,
    METADATA_KEYWORDS,
    SCENE_KEYWORD,
    SCENE_NUMBER_CARET,
)
from dialscript.parser.events import LineEvent
from dialscript.parser.kinds import LineKind
from dialscript.parser.typos import suggest

if TYPE_CHECKING:
    from dialscript.config.types import TypoPolicy

COMMENT_PREFIX: str = "//"

_HEADER_RE: re.Pattern[str] = re.compile(
    r"^\[(scene|dialog)\.(-?\d+)\]$", re.IGNORECASE | re.ASCII
)
_METADATA_RE: re.Pattern[str] = re.compile(
    r"^(level|location|characters):\s*(.+)$", re.IGNORECASE | re.ASCII
)

# Lowercase line prefix -> (typo kind, keyword)
_KEYWORD_TYPO_PREFIXES: tuple[tuple[str, LineKind, str], ...] = (
    ("leve", LineKind.TYPO_LEVEL, LEVEL_KEYWORD),
    ("locatio", LineKind.TYPO_LOCATION, LOCATION_KEYWORD),
    ("character", LineKind.TYPO_CHARACTERS, CHARACTERS_KEYWORD),
)

_METADATA_KINDS: dict[str, LineKind] = {
    LEVEL_KEYWORD.lower(): LineKind.LEVEL,
    LOCATION_KEYWORD.lower(): LineKind.LOCATION,
    CHARACTERS_KEYWORD.lower(): LineKind.CHARACTERS,
}

_KEYWORD_TYPO_KINDS: dict[str, LineKind] = {
    LEVEL_KEYWORD: LineKind.TYPO_LEVEL,
    LOCATION_KEYWORD: LineKind.TYPO_LOCATION,
    CHARACTERS_KEYWORD: LineKind.TYPO_CHARACTERS,
}


def classify(
    raw_line: str,
    line_number: int,
    *,
    policy: TypoPolicy = DEFAULT_TYPO_POLICY,
) -> LineEvent:
    """Classify a single source line.

    Args:
        raw_line: The line without its line terminator.
        line_number: 1-based line number, copied into the event.
        policy: Thresholds for the keyword typo heuristic.

    Returns:
        The event describing the line. Malformed lines yield an error kind
        (see `LineKind.is_error`).
    """
    trimmed: str = raw_line.strip()

    if not trimmed:
        return LineEvent(LineKind.EMPTY, line_number, raw_line)

    if trimmed.startswith(COMMENT_PREFIX):
        return LineEvent(
            LineKind.COMMENT,
            line_number,
            raw_line,
            value=trimmed[len(COMMENT_PREFIX) :].lstrip(),
        )

    if trimmed.startswith("["):
        return _classify_header(raw_line, trimmed, line_number, policy)

    event: LineEvent | None = _classify_metadata(raw_line, trimmed, line_number, policy)
    if event is not None:
        return event

    return _classify_dialog(raw_line, line_number)


def _classify_header(
    raw_line: str,
    trimmed: str,
    line_number: int,
    policy: TypoPolicy,
) -> LineEvent:
    if "]" not in trimmed:
        return LineEvent(
            LineKind.UNCLOSED_BRACKET,
            line_number,
            raw_line,
            caret=len(raw_line.rstrip()),
        )

    match: re.Match[str] | None = _HEADER_RE.match(trimmed)
    if match is not None:
        is_scene: bool = match.group(1).lower() == SCENE_KEYWORD.lower()
        number: int = int(match.group(2))
        if number <= 0:
            return LineEvent(
                LineKind.TYPO_SCENE if is_scene else LineKind.TYPO_DIALOG,
                line_number,
                raw_line,
                number=number,
                caret=SCENE_NUMBER_CARET if is_scene else DIALOG_NUMBER_CARET,
                suggestion=SCENE_KEYWORD if is_scene else DIALOG_KEYWORD,
            )
        return LineEvent(
            LineKind.SCENE_HEADER if is_scene else LineKind.DIALOG_HEADER,
            line_number,
            raw_line,
            number=number,
        )

    body: str = trimmed[1 : trimmed.index("]")]
    if " " in body:
        return LineEvent(LineKind.EXTRA_SPACE_IN_HEADER, line_number, raw_line)

    word: str = body.split(".", 1)[0]
    keyword: str | None = header_keyword_for(word, policy=policy)
    if keyword == DIALOG_KEYWORD:
        return LineEvent(LineKind.TYPO_DIALOG, line_number, raw_line, caret=1, suggestion=keyword)
    # Anything else unrecognized in brackets is reported as a scene header typo.
    return LineEvent(LineKind.TYPO_SCENE, line_number, raw_line, caret=1, suggestion=keyword)


def header_keyword_for(word: str, *, policy: TypoPolicy = DEFAULT_TYPO_POLICY) -> str | None:
    """Return the header keyword ``word`` stands for, or None.

    An exact (case-insensitive) keyword is returned as-is; otherwise the typo
    corrector is asked for a near-miss.
    """
    for keyword in HEADER_KEYWORDS:
        if word.lower() == keyword.lower():
            return keyword
    return suggest(word, HEADER_KEYWORDS, policy=policy)


def _classify_metadata(
    raw_line: str,
    trimmed: str,
    line_number: int,
    policy: TypoPolicy,
) -> LineEvent | None:
    match: re.Match[str] | None = _METADATA_RE.match(trimmed)
    if match is not None:
        return LineEvent(
            _METADATA_KINDS[match.group(1).lower()],
            line_number,
            raw_line,
            value=match.group(2).strip(),
        )

    if ":" not in trimmed:
        return None

    lowered: str = trimmed.lower()
    for prefix, kind, keyword in _KEYWORD_TYPO_PREFIXES:
        if lowered.startswith(prefix) and not lowered.startswith(keyword.lower() + ":"):
            word: str = trimmed.split(":", 1)[0].strip()
            proposed: str | None = suggest(word, METADATA_KEYWORDS, policy=policy)
            if proposed is not None:
                kind = _KEYWORD_TYPO_KINDS[proposed]
                keyword = proposed
            return LineEvent(kind, line_number, raw_line, suggestion=keyword)
    return None


def find_separator(line: str) -> int:
    """Return the offset of the first ``:`` outside any ``{...}`` block, or -1."""
    depth: int = 0
    for idx, char in enumerate(line):
        if char == "{":
            depth += 1
        elif char == "}":
            if depth > 0:
                depth -= 1
        elif char == ":" and depth == 0:
            return idx
    return -1


def _classify_dialog(raw_line: str, line_number: int) -> LineEvent:
    colon: int = find_separator(raw_line)

    if raw_line[:1].isspace() and colon >= 0:
        return LineEvent(LineKind.LEADING_SPACE, line_number, raw_line, caret=0)

    if colon < 0:
        return LineEvent(LineKind.UNKNOWN, line_number, raw_line)

    name: str = raw_line[:colon].strip()
    if not name:
        return LineEvent(LineKind.EMPTY_NAME, line_number, raw_line, caret=colon)

    after_colon: str = raw_line[colon + 1 :]
    if after_colon and not after_colon[0].isspace():
        return LineEvent(
            LineKind.NO_SPACE_AFTER_COLON,
            line_number,
            raw_line,
            name=name,
            caret=colon + 1,
        )

    text_part: str = after_colon.strip()
    if not text_part:
        return LineEvent(LineKind.EMPTY_TEXT, line_number, raw_line, name=name)

    meta_start: int = text_part.find("{")
    if meta_start < 0:
        return LineEvent(LineKind.DIALOG, line_number, raw_line, name=name, text=text_part)

    meta_end: int = text_part.find("}", meta_start)
    if meta_end < 0:
        return LineEvent(
            LineKind.UNCLOSED_BRACKET,
            line_number,
            raw_line,
            name=name,
            caret=raw_line.find("{", colon),
        )

    text: str = text_part[:meta_start].strip()
    metadata: str = text_part[meta_start : meta_end + 1]
    trailing: str = text_part[meta_end + 1 :]
    if trailing.strip():
        offset: int = raw_line.find(metadata, colon) + len(metadata)
        offset += len(trailing) - len(trailing.lstrip())
        return LineEvent(
            LineKind.META_NOT_AT_END,
            line_number,
            raw_line,
            name=name,
            text=text,
            metadata=metadata,
            caret=offset,
        )

    return LineEvent(
        LineKind.DIALOG,
        line_number,
        raw_line,
        name=name,
        text=text,
        metadata=metadata,
    )
