# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/compiler/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Compile pipeline: scene context, block validator and compile results."""

from __future__ import annotations

from dialscript.compiler.context import SceneContext, ordered_characters, parse_character_list
from dialscript.compiler.pipeline import classify_lines, compile_lines, compile_text
from dialscript.compiler.result import CompileResult
from dialscript.compiler.validator import BlockValidator, error_code_for, validate

__all__ = [
    "BlockValidator",
    "CompileResult",
    "SceneContext",
    "classify_lines",
    "compile_lines",
    "compile_text",
    "error_code_for",
    "ordered_characters",
    "parse_character_list",
    "validate",
]
