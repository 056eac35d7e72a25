# topmark:header:start
#
#   project      : DialScript
#   file         : validator.py
#   file_relpath : src/dialscript/compiler/validator.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Block validator: cross-line structural checks over classified events.

The validator walks the events of one file from top to bottom, keeping its
state in a `SceneContext`. It enforces:

* a single ``[Scene.N]`` header, opened before anything else;
* ``Level``/``Location``/``Characters`` declared once, inside the scene and
  before the first dialog block;
* dialog lines only inside a ``[Dialog.N]`` block, spoken by a declared
  character;
* no blank lines between the lines of a dialog block.

Line-level errors found by the classifier are reported unchanged. Once all
events are processed, one diagnostic is added per missing requirement
(scene, level, location, characters), attributed to the last line.

Every finding is recorded in a `DiagnosticLog`; the validator never stops early.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dialscript.compiler.context import SceneContext
from dialscript.config.logging import get_logger
from dialscript.config.types import DEFAULT_TYPO_POLICY
from dialscript.constants import NO_CARET
from dialscript.diagnostic.codes import DiagnosticCode
from dialscript.diagnostic.model import DiagnosticLog
from dialscript.parser.kinds import LineKind
from dialscript.parser.typos import suggest

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dialscript.config.logging import DialscriptLogger
    from dialscript.config.types import TypoPolicy
    from dialscript.diagnostic.model import Diagnostic
    from dialscript.parser.events import LineEvent

logger: DialscriptLogger = get_logger(__name__)

# Metadata kind -> (outside scene, after dialog, duplicate)
_METADATA_CODES: dict[LineKind, tuple[DiagnosticCode, DiagnosticCode, DiagnosticCode]] = {
    LineKind.LEVEL: (
        DiagnosticCode.LEVEL_OUTSIDE_SCENE,
        DiagnosticCode.LEVEL_AFTER_DIALOG,
        DiagnosticCode.DUPLICATE_LEVEL,
    ),
    LineKind.LOCATION: (
        DiagnosticCode.LOCATION_OUTSIDE_SCENE,
        DiagnosticCode.LOCATION_AFTER_DIALOG,
        DiagnosticCode.DUPLICATE_LOCATION,
    ),
    LineKind.CHARACTERS: (
        DiagnosticCode.CHARACTERS_OUTSIDE_SCENE,
        DiagnosticCode.CHARACTERS_AFTER_DIALOG,
        DiagnosticCode.DUPLICATE_CHARACTERS,
    ),
}

# Next-event kinds after which a blank line inside a dialog block is allowed
_BLANK_LINE_ALLOWED_BEFORE: frozenset[LineKind] = frozenset(
    {LineKind.DIALOG_HEADER, LineKind.COMMENT}
)


def error_code_for(kind: LineKind) -> DiagnosticCode:
    """Return the diagnostic code reported for a classifier error kind.

    Error kinds and their diagnostic codes share the same machine key.

    Raises:
        ValueError: If ``kind`` is not an error kind.
    """
    if not kind.is_error:
        raise ValueError(f"Not an error kind: {kind.value}")
    return DiagnosticCode(kind.value)


class BlockValidator:
    """Single-pass, stateful validator for the events of one file.

    Args:
        context: Starting state; a fresh `SceneContext` when omitted.
        policy: Thresholds for character-name suggestions.
    """

    def __init__(
        self,
        context: SceneContext | None = None,
        *,
        policy: TypoPolicy = DEFAULT_TYPO_POLICY,
    ) -> None:
        self.context: SceneContext = context if context is not None else SceneContext()
        self.policy: TypoPolicy = policy
        self.log: DiagnosticLog = DiagnosticLog()

    def run(self, events: Sequence[LineEvent]) -> DiagnosticLog:
        """Validate ``events`` in order and return the collected diagnostics.

        Args:
            events: Classified lines, in source order.

        Returns:
            The diagnostic log, in emission order.
        """
        for idx, event in enumerate(events):
            next_event: LineEvent | None = events[idx + 1] if idx + 1 < len(events) else None
            self.check(event, next_event)

        last_line: int = events[-1].line_number if events else 0
        self.check_requirements(last_line)
        logger.debug("Validated %d event(s): %d diagnostic(s)", len(events), len(self.log))
        return self.log

    def check(self, event: LineEvent, next_event: LineEvent | None = None) -> None:
        """Validate one event against the current state.

        Args:
            event: The event to check.
            next_event: The following event, used only by the blank-line rule.
        """
        ctx: SceneContext = self.context

        if event.is_error:
            self._report(event, error_code_for(event.kind), caret=event.caret)
            return

        match event.kind:
            case LineKind.EMPTY:
                if (
                    ctx.in_dialog
                    and next_event is not None
                    and next_event.kind not in _BLANK_LINE_ALLOWED_BEFORE
                    and not next_event.is_error
                ):
                    self._report(event, DiagnosticCode.BLANK_LINE_IN_DIALOG_BLOCK)

            case LineKind.COMMENT:
                pass

            case LineKind.SCENE_HEADER:
                if ctx.has_scene:
                    self._report(event, DiagnosticCode.DUPLICATE_SCENE)
                else:
                    logger.trace("Line %d: entering scene %d", event.line_number, event.number)
                    ctx.enter_scene(event.number)

            case LineKind.DIALOG_HEADER:
                if not ctx.in_scene:
                    self._report(event, DiagnosticCode.DIALOG_WITHOUT_SCENE)
                else:
                    logger.trace("Line %d: entering dialog %d", event.line_number, event.number)
                    ctx.in_dialog = True

            case LineKind.LEVEL | LineKind.LOCATION | LineKind.CHARACTERS:
                self._check_metadata(event)

            case LineKind.DIALOG:
                self._check_dialog(event)

            case LineKind.UNKNOWN:
                self._report(
                    event,
                    DiagnosticCode.INVALID_LINE_IN_DIALOG
                    if ctx.in_dialog
                    else DiagnosticCode.UNKNOWN_SYNTAX,
                )

    def check_requirements(self, line_number: int) -> None:
        """Report every scene requirement that was never satisfied.

        Args:
            line_number: Line the diagnostics are attributed to (the last one).
        """
        ctx: SceneContext = self.context
        missing: list[DiagnosticCode] = []
        if not ctx.has_scene:
            missing.append(DiagnosticCode.MISSING_SCENE)
        if not ctx.has_level:
            missing.append(DiagnosticCode.MISSING_LEVEL)
        if not ctx.has_location:
            missing.append(DiagnosticCode.MISSING_LOCATION)
        if not ctx.has_characters:
            missing.append(DiagnosticCode.MISSING_CHARACTERS)
        for code in missing:
            self.log.add(line_number, code)

    def _check_metadata(self, event: LineEvent) -> None:
        ctx: SceneContext = self.context
        outside, after_dialog, duplicate = _METADATA_CODES[event.kind]

        if not ctx.in_scene:
            self._report(event, outside)
            return
        if ctx.in_dialog:
            self._report(event, after_dialog)
            return

        match event.kind:
            case LineKind.LEVEL:
                if ctx.has_level:
                    self._report(event, duplicate)
                else:
                    ctx.has_level = True
            case LineKind.LOCATION:
                if ctx.has_location:
                    self._report(event, duplicate)
                else:
                    ctx.has_location = True
            case _:
                if ctx.has_characters:
                    self._report(event, duplicate)
                else:
                    ctx.declare_characters(event.value)
                    logger.trace(
                        "Line %d: known characters %s",
                        event.line_number,
                        sorted(ctx.known_characters),
                    )

    def _check_dialog(self, event: LineEvent) -> None:
        ctx: SceneContext = self.context

        if not ctx.in_dialog:
            self._report(event, DiagnosticCode.STRAY_DIALOG_LINE)
            return

        name: str | None = event.name
        if ctx.known_characters and name and name not in ctx.known_characters:
            proposed: str | None = suggest(name, ctx.character_order, policy=self.policy)
            self._report(
                event,
                DiagnosticCode.UNKNOWN_CHARACTER,
                hint=f"Did you mean '{proposed}'?" if proposed is not None else None,
                caret=0,
            )

        # Only reachable for events built outside `classify`, which reports an
        # unclosed "{" as UNCLOSED_BRACKET.
        if event.metadata and "}" not in event.metadata:
            self._report(
                event,
                DiagnosticCode.MISSING_CLOSING_BRACE,
                caret=event.raw.find("{"),
            )

    def _report(
        self,
        event: LineEvent,
        code: DiagnosticCode,
        *,
        hint: str | None = None,
        caret: int = NO_CARET,
    ) -> Diagnostic:
        return self.log.add(
            event.line_number,
            code,
            hint=hint,
            line_content=event.raw,
            caret=caret,
        )


def validate(
    events: Sequence[LineEvent],
    context: SceneContext | None = None,
    *,
    policy: TypoPolicy = DEFAULT_TYPO_POLICY,
) -> tuple[tuple[Diagnostic, ...], SceneContext]:
    """Validate ``events`` and return the diagnostics with the final context.

    Args:
        events: Classified lines, in source order.
        context: Starting state; a fresh `SceneContext` when omitted.
        policy: Thresholds for character-name suggestions.

    Returns:
        The diagnostics in emission order and the context after the last event.
    """
    validator = BlockValidator(context, policy=policy)
    log: DiagnosticLog = validator.run(events)
    return log.freeze(), validator.context
