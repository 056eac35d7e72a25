# topmark:header:start
#
#   project      : DialScript
#   file         : result.py
#   file_relpath : src/dialscript/compiler/result.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Outcome of compiling one DialScript file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dialscript.diagnostic.model import compute_diagnostic_stats

if TYPE_CHECKING:
    from dialscript.diagnostic.model import Diagnostic, DiagnosticStats
    from dialscript.parser.events import LineEvent


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Immutable result of a compile.

    Attributes:
        total_lines (int): Number of source lines processed.
        diagnostics (tuple[Diagnostic, ...]): Findings, in emission order.
        events (tuple[LineEvent, ...]): One classified event per source line.
    """

    total_lines: int
    diagnostics: tuple[Diagnostic, ...]
    events: tuple[LineEvent, ...]

    @property
    def success(self) -> bool:
        """Return True if the compile produced no diagnostics."""
        return not self.diagnostics

    @property
    def error_count(self) -> int:
        """Return the number of diagnostics."""
        return len(self.diagnostics)

    def stats(self) -> DiagnosticStats:
        """Return per-category diagnostic counts."""
        return compute_diagnostic_stats(self.diagnostics)

    def lines_with_diagnostics(self) -> set[int]:
        """Return the line numbers that carry at least one diagnostic."""
        return {d.line_number for d in self.diagnostics}

    def to_dict(self, *, include_events: bool = False) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this result.

        Args:
            include_events: Also emit the classified events.
        """
        out: dict[str, Any] = {
            "total_lines": self.total_lines,
            "success": self.success,
            "diagnostic_counts": self.stats().to_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
        if include_events:
            out["events"] = [e.to_dict() for e in self.events]
        return out
