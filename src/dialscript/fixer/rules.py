# topmark:header:start
#
#   project      : DialScript
#   file         : rules.py
#   file_relpath : src/dialscript/fixer/rules.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Line rewrite rules used by the auto-fixer.

Each rule takes one source line and returns the rewritten line, or ``None``
when it does not apply. Rules never look at other lines: whatever context they
need (the declared characters, whether a dialog block is open) is passed in a
`FixContext`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from dialscript.config.types import DEFAULT_TYPO_POLICY
from dialscript.constants import HEADER_KEYWORDS
from dialscript.parser.classifier import COMMENT_PREFIX, classify, find_separator
from dialscript.parser.kinds import LineKind
from dialscript.parser.typos import suggest

if TYPE_CHECKING:
    from collections.abc import Callable

    from dialscript.config.types import TypoPolicy
    from dialscript.parser.events import LineEvent

_HEADER_FIX_RE: re.Pattern[str] = re.compile(r"^\s*\[([^.\]\s]+)\.(-?\d+)\]\s*$")
_KEYWORD_FIX_RE: re.Pattern[str] = re.compile(r"^\s*([A-Za-z]+)\s*:(.*)$")

_KEYWORD_TYPO_KINDS: frozenset[LineKind] = frozenset(
    {LineKind.TYPO_LEVEL, LineKind.TYPO_LOCATION, LineKind.TYPO_CHARACTERS}
)


class FixRule(str, Enum):
    """Rewrite rules, in the order they are tried."""

    HEADER_TYPO = "header-typo"
    KEYWORD_TYPO = "keyword-typo"
    SPACE_AFTER_COLON = "space-after-colon"
    METADATA_POSITION = "metadata-position"
    CHARACTER_NAME = "character-name"


@dataclass(frozen=True, slots=True)
class FixContext:
    """What the rules may know about a line's surroundings.

    Attributes:
        characters (tuple[str, ...]): Names from the most recent ``Characters:``
            line above, in declaration order.
        in_dialog (bool): A dialog block is open at this line.
        policy (TypoPolicy): Thresholds for the typo corrector.
    """

    characters: tuple[str, ...] = ()
    in_dialog: bool = False
    policy: TypoPolicy = DEFAULT_TYPO_POLICY


def fix_header_typo(line: str, ctx: FixContext) -> str | None:
    """Rewrite ``[Scen.1]`` style headers to ``[Scene.1]``."""
    match: re.Match[str] | None = _HEADER_FIX_RE.match(line)
    if match is None:
        return None
    correct: str | None = suggest(match.group(1), HEADER_KEYWORDS, policy=ctx.policy)
    if correct is None:
        return None
    return f"[{correct}.{match.group(2)}]"


def fix_keyword_typo(line: str, ctx: FixContext) -> str | None:
    """Rewrite ``Leve: 1`` style metadata lines to ``Level: 1``.

    Only lines the classifier reports as keyword typos are rewritten, so a
    speaker such as ``Lev`` is never turned into ``Level``. Skipped inside
    dialog blocks, where ``Word:`` starts a dialog line.
    """
    if ctx.in_dialog:
        return None
    match: re.Match[str] | None = _KEYWORD_FIX_RE.match(line)
    if match is None:
        return None
    event: LineEvent = classify(line, 0, policy=ctx.policy)
    if event.kind not in _KEYWORD_TYPO_KINDS or event.suggestion is None:
        return None
    return f"{event.suggestion}: {match.group(2).strip()}"


def fix_space_after_colon(line: str, ctx: FixContext) -> str | None:
    """Insert the missing space after the separating colon."""
    colon: int = line.find(":")
    meta: int = line.find("{")
    if colon < 0 or (0 <= meta < colon):
        return None
    if colon + 1 >= len(line) or line[colon + 1].isspace():
        return None
    return f"{line[: colon + 1]} {line[colon + 1 :]}"


def fix_metadata_position(line: str, ctx: FixContext) -> str | None:
    """Move a ``{...}`` block that is followed by more text to the end of the line."""
    start: int = line.find("{")
    if start < 0:
        return None
    end: int = line.find("}", start)
    if end < 0:
        return None
    trailing: str = line[end + 1 :].strip()
    if not trailing:
        return None
    head: str = line[:start].strip()
    return " ".join(part for part in (head, trailing, line[start : end + 1]) if part)


def fix_character_name(line: str, ctx: FixContext) -> str | None:
    """Replace a misspelled speaker with the closest declared character."""
    if not ctx.characters:
        return None
    colon: int = find_separator(line)
    if colon < 0:
        return None
    name: str = line[:colon].strip()
    if not name or name in ctx.characters:
        return None
    correct: str | None = suggest(name, ctx.characters, policy=ctx.policy)
    if correct is None:
        return None
    return f"{correct}{line[colon:]}"


RULES: tuple[tuple[FixRule, Callable[[str, FixContext], str | None]], ...] = (
    (FixRule.HEADER_TYPO, fix_header_typo),
    (FixRule.KEYWORD_TYPO, fix_keyword_typo),
    (FixRule.SPACE_AFTER_COLON, fix_space_after_colon),
    (FixRule.METADATA_POSITION, fix_metadata_position),
    (FixRule.CHARACTER_NAME, fix_character_name),
)


def fix_line(line: str, ctx: FixContext) -> tuple[FixRule, str] | None:
    """Apply the first rule that changes ``line``.

    Blank lines and comments are never rewritten.

    Returns:
        The rule and the rewritten line, or ``None`` if no rule applies.
    """
    stripped: str = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None
    for rule, apply in RULES:
        fixed: str | None = apply(line, ctx)
        if fixed is not None and fixed != line:
            return rule, fixed
    return None
