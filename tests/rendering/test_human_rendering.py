# topmark:header:start
#
#   project      : DialScript
#   file         : test_human_rendering.py
#   file_relpath : tests/rendering/test_human_rendering.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Tests for the human-readable and JSON renderers.

A color-less `ClickConsole` is used throughout so that output can be compared
verbatim.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from dialscript.cli.console import ClickConsole
from dialscript.compiler.pipeline import compile_lines
from dialscript.fixer import FixRule, LineFix
from dialscript.parser.classifier import classify
from dialscript.rendering import (
    build_check_payload,
    render_diagnostic,
    render_event,
    render_example,
    render_fix,
    render_footer,
    render_result,
    serialize_payload,
)
from tests.conftest import MINIMAL_SCRIPT, parametrize, script

if TYPE_CHECKING:
    from dialscript.compiler.result import CompileResult

PLAIN = ClickConsole(enable_color=False)


def test_render_diagnostic_with_caret_and_hint() -> None:
    result: CompileResult = compile_lines(script("Alan:Hello"))
    assert render_diagnostic(result.diagnostics[0], PLAIN) == [
        "   8 │ ✗ Missing space after ':' [no-space-after-colon]",
        "     │   Alan:Hello",
        "     │        ^",
        "     │   Hint: add a space after the colon, e.g. 'Name: Text'",
    ]


def test_render_diagnostic_without_source_line() -> None:
    result: CompileResult = compile_lines(["[Scene.1]"])
    assert render_diagnostic(result.diagnostics[0], PLAIN) == [
        "   1 │ ✗ Missing Level [missing-level]",
        "     │   Hint: add 'Level: N' after [Scene.X]",
    ]


def test_render_diagnostic_colors_only_when_enabled() -> None:
    result: CompileResult = compile_lines(script("Alan:Hello"))
    colored = render_diagnostic(result.diagnostics[0], ClickConsole(enable_color=True))
    assert "\x1b[" in colored[0]
    assert all("\x1b[" not in line for line in render_diagnostic(result.diagnostics[0], PLAIN))


@parametrize(
    "raw, expected",
    [
        ("[Scene.1]", "   1 │ ◉ Scene 1"),
        ("[Dialog.2]", "   1 │ ◆ Dialog 2"),
        ("Level: 3", "   1 │   Level: 3"),
        ("Alan: Hi {Mood: ok}", "   1 │   Alan: Hi {Mood: ok}"),
        ("// note", "   1 │ – note"),
        ("", "   1 │"),
        ("Alan:Hi", "   1 │ ✗ Alan:Hi"),
    ],
)
def test_render_event(raw: str, expected: str) -> None:
    assert render_event(classify(raw, 1), PLAIN) == expected


def test_render_footer() -> None:
    assert render_footer(compile_lines(MINIMAL_SCRIPT), PLAIN) == (
        "Parsing completed: 7 lines processed"
    )
    assert render_footer(compile_lines(["[Scene.1]"]), PLAIN) == (
        "Parsing broken: 1 lines processed, 3 error(s)"
    )


def test_render_result_verbosity() -> None:
    result: CompileResult = compile_lines(MINIMAL_SCRIPT)
    assert render_result("a.ds", result, PLAIN) == ["Parsing completed: 7 lines processed"]
    assert render_result("a.ds", result, PLAIN, verbosity=-1) == []
    assert render_result("a.ds", result, PLAIN, verbosity=1)[0] == "Compiling: a.ds"


def test_render_result_lists_events() -> None:
    result: CompileResult = compile_lines(MINIMAL_SCRIPT)
    lines = render_result("a.ds", result, PLAIN, list_events=True)
    assert lines[0] == "Compiling: a.ds"
    assert len(lines) == 1 + len(MINIMAL_SCRIPT) + 1


def test_render_fix() -> None:
    fix = LineFix(8, FixRule.CHARACTER_NAME, "Alann: Hi", "Alan: Hi")
    assert render_fix(fix, PLAIN) == [
        "   8 │ ◼ Fixed (character-name)",
        "     │   - Alann: Hi",
        "     │   + Alan: Hi",
    ]


def test_render_example_plain() -> None:
    lines = render_example(list(MINIMAL_SCRIPT), PLAIN)
    assert lines[:2] == ["Example .ds file:", ""]
    assert lines[2:] == list(MINIMAL_SCRIPT)


def test_check_payload_is_json() -> None:
    result: CompileResult = compile_lines(["[Scene.1]"])
    payload = build_check_payload([("a.ds", result)], include_events=True)
    data = json.loads(serialize_payload(payload))
    (entry,) = data["files"]
    assert entry["path"] == "a.ds"
    assert entry["success"] is False
    assert len(entry["diagnostics"]) == 3
    assert entry["events"][0]["kind"] == "scene-header"
