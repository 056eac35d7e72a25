# topmark:header:start
#
#   project      : DialScript
#   file         : types.py
#   file_relpath : src/dialscript/config/types.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Shared configuration value types.

Kept free of project imports (other than constants) so that the parser can
depend on them without pulling in config discovery or TOML I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dialscript.constants import (
    DEFAULT_LONG_THRESHOLD,
    DEFAULT_MAX_LENGTH_DELTA,
    DEFAULT_SHORT_LENGTH,
    DEFAULT_SHORT_THRESHOLD,
)

TomlTable = dict[str, Any]


@dataclass(frozen=True, slots=True)
class TypoPolicy:
    """Tuning knobs for the typo-correction heuristic.

    Attributes:
        short_threshold (int): Minimum similarity (percent, exclusive) for
            candidates of at most ``short_length`` characters.
        long_threshold (int): Minimum similarity (percent, exclusive) for
            longer candidates.
        short_length (int): Candidate length up to which ``short_threshold`` applies.
        max_length_delta (int): Maximum length difference between the token and
            a candidate.
    """

    short_threshold: int = DEFAULT_SHORT_THRESHOLD
    long_threshold: int = DEFAULT_LONG_THRESHOLD
    short_length: int = DEFAULT_SHORT_LENGTH
    max_length_delta: int = DEFAULT_MAX_LENGTH_DELTA

    def threshold_for(self, candidate: str) -> int:
        """Return the acceptance threshold that applies to ``candidate``."""
        if len(candidate) <= self.short_length:
            return self.short_threshold
        return self.long_threshold


DEFAULT_TYPO_POLICY: TypoPolicy = TypoPolicy()
