# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/parser/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Per-line parsing: line kinds, events, the classifier and the typo corrector."""

from __future__ import annotations

from dialscript.parser.classifier import classify, find_separator, header_keyword_for
from dialscript.parser.events import LineEvent
from dialscript.parser.kinds import LineKind
from dialscript.parser.typos import is_typo_of, similarity, suggest

__all__ = [
    "LineEvent",
    "LineKind",
    "classify",
    "find_separator",
    "header_keyword_for",
    "is_typo_of",
    "similarity",
    "suggest",
]
