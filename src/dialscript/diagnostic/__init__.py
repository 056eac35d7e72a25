# topmark:header:start
#
#   project      : DialScript
#   file         : __init__.py
#   file_relpath : src/dialscript/diagnostic/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - The taxonomy is closed: every finding has a `DiagnosticCode`.
    - Findings are immutable `Diagnostic` instances.
    - During a compile, diagnostics are accumulated in a mutable `DiagnosticLog`
      and frozen into a tuple on the `CompileResult`.
"""

from __future__ import annotations

from dialscript.diagnostic.codes import DiagnosticCategory, DiagnosticCode
from dialscript.diagnostic.model import (
    Diagnostic,
    DiagnosticLog,
    DiagnosticStats,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCategory",
    "DiagnosticCode",
    "DiagnosticLog",
    "DiagnosticStats",
    "compute_diagnostic_stats",
]
