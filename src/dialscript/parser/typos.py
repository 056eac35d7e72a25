# topmark:header:start
#
#   project      : DialScript
#   file         : typos.py
#   file_relpath : src/dialscript/parser/typos.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Typo-correction heuristic.

A single rule is used everywhere a near-miss has to be recognized: header
keywords (``Scene``/``Dialog``), metadata keywords
(``Level``/``Location``/``Characters``) and the character names declared by a
scene.

The score of a candidate is the percentage of positionally equal characters
(case-insensitive) over the length of the shorter of the two strings. A
candidate is accepted when:

* it is not the token itself (case-insensitively);
* its length differs from the token's by at most ``max_length_delta``;
* its score is strictly above the threshold for its length (a lower threshold
  applies to short candidates).

The first accepted candidate, in the order given, wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dialscript.config.logging import get_logger
from dialscript.config.types import DEFAULT_TYPO_POLICY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.types import TypoPolicy

logger: DialscriptLogger = get_logger(__name__)


def similarity(token: str, candidate: str) -> int:
    """Return the positional overlap of two strings as an integer percentage.

    Args:
        token: The input token.
        candidate: The string to compare against.

    Returns:
        ``0``..``100``; ``0`` when either string is empty.
    """
    shorter: int = min(len(token), len(candidate))
    if shorter == 0:
        return 0
    matches: int = sum(
        1 for a, b in zip(token.lower(), candidate.lower(), strict=False) if a == b
    )
    return matches * 100 // shorter


def is_typo_of(token: str, candidate: str, *, policy: TypoPolicy = DEFAULT_TYPO_POLICY) -> bool:
    """Return True if ``token`` looks like a misspelling of ``candidate``."""
    if token.lower() == candidate.lower():
        return False
    if abs(len(token) - len(candidate)) > policy.max_length_delta:
        return False
    return similarity(token, candidate) > policy.threshold_for(candidate)


def suggest(
    token: str,
    candidates: Iterable[str],
    *,
    policy: TypoPolicy = DEFAULT_TYPO_POLICY,
) -> str | None:
    """Return the first candidate ``token`` is a near-miss of, or None.

    Args:
        token: The (possibly misspelled) input.
        candidates: Correct spellings, in order of preference.
        policy: Thresholds to apply.

    Returns:
        The matching candidate, or ``None`` when nothing is close enough or the
        token already is one of the candidates.
    """
    for candidate in candidates:
        if is_typo_of(token, candidate, policy=policy):
            logger.trace("Typo suggestion for %r: %r", token, candidate)
            return candidate
    return None
