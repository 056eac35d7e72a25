# topmark:header:start
#
#   project      : DialScript
#   file         : pipeline.py
#   file_relpath : src/dialscript/compiler/pipeline.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Compile pipeline: classify every line, then validate the event stream.

Example:
    >>> from dialscript.compiler.pipeline import compile_text
    >>> result = compile_text("[Scene.1]\\n")
    >>> [d.code.key for d in result.diagnostics]
    ['missing-level', 'missing-location', 'missing-characters']
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from dialscript.compiler.context import SceneContext
from dialscript.compiler.result import CompileResult
from dialscript.compiler.validator import validate
from dialscript.config.logging import get_logger
from dialscript.config.model import Config
from dialscript.parser.classifier import classify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dialscript.config.logging import DialscriptLogger
    from dialscript.diagnostic.model import Diagnostic
    from dialscript.parser.events import LineEvent

logger: DialscriptLogger = get_logger(__name__)

_LINE_BREAK_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` and ``\\n`` only.

    Other characters that `str.splitlines` treats as breaks (form feed, U+2028
    and friends) stay part of the line. A final terminator does not start an
    extra empty line.
    """
    if not text:
        return []
    lines: list[str] = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def strip_line_ending(line: str) -> str:
    """Return ``line`` without a trailing ``\\n`` or ``\\r\\n``."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def classify_lines(lines: Iterable[str], *, config: Config | None = None) -> tuple[LineEvent, ...]:
    """Classify ``lines`` (numbered from 1) without validating them."""
    policy = (config or Config.from_defaults()).typo_policy
    return tuple(
        classify(strip_line_ending(line), idx, policy=policy)
        for idx, line in enumerate(lines, start=1)
    )


def compile_lines(lines: Iterable[str], *, config: Config | None = None) -> CompileResult:
    """Compile an ordered sequence of source lines.

    Each call uses a fresh `SceneContext`, so compiles are independent of each
    other.

    Args:
        lines: Source lines; trailing line terminators are ignored.
        config: Runtime configuration; built-in defaults when omitted.

    Returns:
        The compile result. It is never an exception: every problem is a
        diagnostic.
    """
    cfg: Config = config or Config.from_defaults()
    events: tuple[LineEvent, ...] = classify_lines(lines, config=cfg)
    logger.debug("Compiling %d line(s)", len(events))

    diagnostics: tuple[Diagnostic, ...]
    diagnostics, _ctx = validate(events, SceneContext(), policy=cfg.typo_policy)

    result = CompileResult(
        total_lines=len(events),
        diagnostics=diagnostics,
        events=events,
    )
    logger.debug(
        "Compile finished: %d line(s), %d diagnostic(s)",
        result.total_lines,
        result.error_count,
    )
    return result


def compile_text(text: str, *, config: Config | None = None) -> CompileResult:
    """Compile a whole document held in memory.

    Args:
        text: Document text; any line-ending convention.
        config: Runtime configuration; built-in defaults when omitted.

    Returns:
        The compile result.
    """
    return compile_lines(split_lines(text), config=config)
