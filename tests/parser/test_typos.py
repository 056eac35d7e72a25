# topmark:header:start
#
#   project      : DialScript
#   file         : test_typos.py
#   file_relpath : tests/parser/test_typos.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Unit tests for the typo-correction heuristic."""

from __future__ import annotations

from dialscript.config.types import DEFAULT_TYPO_POLICY, TypoPolicy
from dialscript.parser.typos import is_typo_of, similarity, suggest
from tests.conftest import parametrize


@parametrize(
    "token, candidate, score",
    [
        ("Scen", "Scene", 100),
        ("abc", "xbc", 66),
        ("ALAN", "alan", 100),
        ("", "Scene", 0),
        ("dialg", "dialog", 80),
    ],
)
def test_similarity(token: str, candidate: str, score: int) -> None:
    """Score is positional matches over the shorter length, rounded down."""
    assert similarity(token, candidate) == score


def test_exact_match_is_not_a_typo() -> None:
    assert suggest("Scene", ["Scene"]) is None
    assert suggest("scene", ["Scene"]) is None
    assert not is_typo_of("ALAN", "Alan")


def test_suggests_declared_character() -> None:
    assert suggest("Alann", ["Alan", "Beth"]) == "Alan"


def test_length_delta_is_enforced() -> None:
    """Candidates more than two characters longer or shorter are never proposed."""
    assert suggest("Al", ["Alann"]) is None
    assert suggest("Char", ["Characters"]) is None


def test_short_candidates_use_the_low_threshold() -> None:
    """A single matching position out of three clears the 20% short threshold."""
    assert DEFAULT_TYPO_POLICY.threshold_for("Beth") == 20
    assert DEFAULT_TYPO_POLICY.threshold_for("Scene") == 60
    assert suggest("Bob", ["Beth"]) == "Beth"


def test_threshold_is_strict() -> None:
    """A score equal to the threshold is rejected."""
    assert suggest("Dialg", ["Dialog"]) == "Dialog"
    assert suggest("Dialg", ["Dialog"], policy=TypoPolicy(long_threshold=80)) is None


def test_first_accepted_candidate_wins() -> None:
    assert suggest("Dave", ["Dove", "Dive"]) == "Dove"
    assert suggest("Dave", ["Dive", "Dove"]) == "Dive"


def test_no_candidate_close_enough() -> None:
    assert suggest("Xavier", ["Alan", "Beth"]) is None
    assert suggest("anything", []) is None
