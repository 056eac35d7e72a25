# topmark:header:start
#
#   project      : DialScript
#   file         : engine.py
#   file_relpath : src/dialscript/fixer/engine.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Auto-fixer: rewrite lines that carry diagnostics, then re-validate.

`fix_lines` never writes anything. It returns a `FixResult` describing the
rewritten document, the individual fixes and the compile results before and
after. Callers decide whether to persist the result, normally only when
`FixResult.clean` is true.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dialscript.compiler.context import ordered_characters
from dialscript.compiler.pipeline import compile_lines, strip_line_ending
from dialscript.config.logging import get_logger
from dialscript.config.model import Config
from dialscript.fixer.rules import FixContext, fix_line
from dialscript.parser.classifier import classify
from dialscript.parser.kinds import LineKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dialscript.compiler.result import CompileResult
    from dialscript.config.logging import DialscriptLogger
    from dialscript.fixer.rules import FixRule
    from dialscript.parser.events import LineEvent

logger: DialscriptLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LineFix:
    """A single rewritten line.

    Attributes:
        line_number (int): 1-based line number.
        rule (FixRule): The rule that produced the rewrite.
        before (str): The original line.
        after (str): The rewritten line.
    """

    line_number: int
    rule: FixRule
    before: str
    after: str


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of an auto-fix run.

    Attributes:
        original_lines (tuple[str, ...]): Input lines, without line terminators.
        fixed_lines (tuple[str, ...]): Lines after rewriting.
        fixes (tuple[LineFix, ...]): The applied rewrites, in line order.
        before (CompileResult): Compile result of the input.
        after (CompileResult): Compile result of the rewritten lines.
    """

    original_lines: tuple[str, ...]
    fixed_lines: tuple[str, ...]
    fixes: tuple[LineFix, ...]
    before: CompileResult
    after: CompileResult

    @property
    def changed(self) -> bool:
        """Return True if at least one line was rewritten."""
        return bool(self.fixes)

    @property
    def clean(self) -> bool:
        """Return True if the rewritten lines compile without diagnostics."""
        return self.after.success


def fix_lines(lines: Iterable[str], *, config: Config | None = None) -> FixResult:
    """Run the auto-fixer over a document.

    A document that already compiles cleanly is returned untouched. Otherwise
    every line with at least one diagnostic is offered to the rewrite rules
    (first applicable rule wins) and the whole document is compiled again.

    Args:
        lines: Source lines; trailing line terminators are ignored.
        config: Runtime configuration; built-in defaults when omitted.

    Returns:
        The fix result.
    """
    cfg: Config = config or Config.from_defaults()
    original: tuple[str, ...] = tuple(strip_line_ending(line) for line in lines)
    before: CompileResult = compile_lines(original, config=cfg)

    if before.success:
        logger.debug("Nothing to fix: document compiles cleanly")
        return FixResult(original, original, (), before, before)

    flagged: set[int] = before.lines_with_diagnostics()
    fixed: list[str] = list(original)
    fixes: list[LineFix] = []
    characters: tuple[str, ...] = ()
    in_dialog: bool = False

    for event in before.events:
        current: LineEvent = event
        if event.line_number in flagged:
            ctx = FixContext(characters=characters, in_dialog=in_dialog, policy=cfg.typo_policy)
            outcome = fix_line(event.raw, ctx)
            if outcome is not None:
                rule, after = outcome
                logger.trace(
                    "Line %d: %s: %r -> %r", event.line_number, rule.value, event.raw, after
                )
                fixed[event.line_number - 1] = after
                fixes.append(LineFix(event.line_number, rule, event.raw, after))
                current = classify(after, event.line_number, policy=cfg.typo_policy)

        if current.kind is LineKind.CHARACTERS:
            characters = ordered_characters(current.value)
        elif current.kind is LineKind.SCENE_HEADER:
            in_dialog = False
        elif current.kind is LineKind.DIALOG_HEADER:
            in_dialog = True

    after_result: CompileResult = compile_lines(fixed, config=cfg) if fixes else before
    logger.debug(
        "Applied %d fix(es); %d diagnostic(s) remain",
        len(fixes),
        after_result.error_count,
    )
    return FixResult(original, tuple(fixed), tuple(fixes), before, after_result)
