# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""DialScript package.

DialScript validates `.ds` files describing branching game dialog: a single
scene header, its metadata (level, location, characters) and one or more
dialog blocks of ``Name: Text {metadata}`` lines. The package exposes a small
typed API for compiling lines into a `CompileResult`, an auto-fixer driven by
the typo-correction heuristic, and a Click CLI.
"""

from __future__ import annotations

from dialscript.compiler.pipeline import compile_lines, compile_text
from dialscript.compiler.result import CompileResult
from dialscript.diagnostic import Diagnostic, DiagnosticCategory, DiagnosticCode
from dialscript.fixer import FixResult, fix_lines
from dialscript.parser import LineEvent, LineKind, classify, suggest

__all__ = [
    "CompileResult",
    "Diagnostic",
    "DiagnosticCategory",
    "DiagnosticCode",
    "FixResult",
    "LineEvent",
    "LineKind",
    "classify",
    "compile_lines",
    "compile_text",
    "fix_lines",
    "suggest",
]
