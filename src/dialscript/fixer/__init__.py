# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/fixer/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Auto-fixer driven by the typo-correction heuristic."""

from __future__ import annotations

from dialscript.compiler.context import ordered_characters
from dialscript.fixer.engine import FixResult, LineFix, fix_lines
from dialscript.fixer.rules import FixContext, FixRule, fix_line

__all__ = [
    "FixContext",
    "FixResult",
    "FixRule",
    "LineFix",
    "fix_line",
    "fix_lines",
    "ordered_characters",
]
