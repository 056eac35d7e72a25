# topmark:header:start
#
#   project      : DialScript
#   file         : model.py
#   file_relpath : src/dialscript/diagnostic/model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Core diagnostic types and helpers for DialScript.

Sections:
    * Diagnostic: immutable structured finding (line, code, message, hint, caret).
    * DiagnosticStats: aggregated per-category counts.
    * DiagnosticLog: mutable per-compile collection with helpers for adding and
      summarizing diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dialscript.config.logging import get_logger
from dialscript.constants import NO_CARET
from dialscript.diagnostic.codes import DiagnosticCategory, DiagnosticCode

if TYPE_CHECKING:
    from dialscript.config.logging import DialscriptLogger

logger: DialscriptLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single recoverable validation finding.

    Attributes:
        line_number (int): 1-based line the finding is attributed to.
        code (DiagnosticCode): Taxonomy entry for the finding.
        message (str): Human-readable message.
        hint (str | None): Optional hint on how to fix the line.
        line_content (str | None): Optional raw source line, for rendering.
        caret (int): Column to underline in ``line_content``; ``-1`` means none.
    """

    line_number: int
    code: DiagnosticCode
    message: str
    hint: str | None = None
    line_content: str | None = None
    caret: int = NO_CARET

    @property
    def category(self) -> DiagnosticCategory:
        """Return the category of this diagnostic's code."""
        return self.code.category

    @property
    def has_caret(self) -> bool:
        """Return True if the diagnostic points at a specific column."""
        return self.caret >= 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of this diagnostic."""
        return {
            "line": self.line_number,
            "code": self.code.key,
            "category": self.category.value,
            "message": self.message,
            "hint": self.hint,
            "line_content": self.line_content,
            "caret": self.caret if self.has_caret else None,
        }


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by category."""

    n_structural: int
    n_syntax: int
    n_lexical: int
    n_catch_all: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_structural + self.n_syntax + self.n_lexical + self.n_catch_all

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by category."""
        return {
            DiagnosticCategory.STRUCTURAL.value: self.n_structural,
            DiagnosticCategory.SYNTAX.value: self.n_syntax,
            DiagnosticCategory.LEXICAL.value: self.n_lexical,
            DiagnosticCategory.CATCH_ALL.value: self.n_catch_all,
        }


@dataclass
class DiagnosticLog:
    """Mutable, per-compile collection of diagnostics.

    Diagnostics are kept in emission order, which is source line order for
    everything the validator emits before its end-of-file checks.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(
        self,
        line_number: int,
        code: DiagnosticCode,
        *,
        message: str | None = None,
        hint: str | None = None,
        line_content: str | None = None,
        caret: int = NO_CARET,
    ) -> Diagnostic:
        """Create and append a diagnostic.

        ``message`` and ``hint`` default to the ones registered on ``code``.

        Args:
            line_number: 1-based line number the finding belongs to.
            code: The diagnostic code.
            message: Optional message override.
            hint: Optional hint override.
            line_content: Raw source line, if the finding refers to one.
            caret: Column to underline, or ``-1``.

        Returns:
            The diagnostic that was appended.
        """
        diagnostic = Diagnostic(
            line_number=line_number,
            code=code,
            message=message if message is not None else code.message,
            hint=hint if hint is not None else code.hint,
            line_content=line_content,
            caret=caret,
        )
        self.items.append(diagnostic)
        logger.trace("Adding [%s] at line %d: %r", code.key, line_number, diagnostic.message)
        return diagnostic

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of this log's diagnostics."""
        return tuple(self.items)

    def stats(self) -> DiagnosticStats:
        """Return per-category counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def line_numbers(self) -> set[int]:
        """Return the set of line numbers that carry at least one diagnostic."""
        return {d.line_number for d in self.items}

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics stored in this log."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-category counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-category counts.
    """
    counts: dict[DiagnosticCategory, int] = dict.fromkeys(DiagnosticCategory, 0)
    for d in diagnostics:
        counts[d.category] += 1
    return DiagnosticStats(
        n_structural=counts[DiagnosticCategory.STRUCTURAL],
        n_syntax=counts[DiagnosticCategory.SYNTAX],
        n_lexical=counts[DiagnosticCategory.LEXICAL],
        n_catch_all=counts[DiagnosticCategory.CATCH_ALL],
    )
