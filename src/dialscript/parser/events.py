# topmark:header:start
#
#   project      : DialScript
#   file         : events.py
#   file_relpath : src/dialscript/parser/events.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Typed events produced by the line classifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dialscript.constants import NO_CARET
from dialscript.parser.kinds import LineKind


@dataclass(frozen=True, slots=True)
class LineEvent:
    """One classified source line.

    Payload fields are only meaningful for the kinds that use them; the rest
    keep their defaults.

    Attributes:
        kind (LineKind): The line's tag.
        line_number (int): 1-based line number.
        raw (str): The line as read, without its line terminator.
        number (int): Scene or dialog number of a header line.
        value (str | None): Content of a metadata or comment line.
        name (str | None): Character name of a dialog line.
        text (str | None): Text of a dialog line, without its metadata block.
        metadata (str | None): The trailing ``{...}`` block of a dialog line.
        caret (int): Column of the error in ``raw``; ``-1`` means none.
        suggestion (str | None): Keyword proposed by the typo corrector.
    """

    kind: LineKind
    line_number: int
    raw: str
    number: int = 0
    value: str | None = None
    name: str | None = None
    text: str | None = None
    metadata: str | None = None
    caret: int = NO_CARET
    suggestion: str | None = None

    @property
    def is_error(self) -> bool:
        """Return True if the classifier flagged this line as malformed."""
        return self.kind.is_error

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping with the populated fields only."""
        out: dict[str, Any] = {"line": self.line_number, "kind": self.kind.value}
        if self.kind in (LineKind.SCENE_HEADER, LineKind.DIALOG_HEADER):
            out["number"] = self.number
        for key in ("value", "name", "text", "metadata", "suggestion"):
            val = getattr(self, key)
            if val is not None:
                out[key] = val
        if self.caret != NO_CARET:
            out["caret"] = self.caret
        return out
