# topmark:header:start
#
#   project      : DialScript
#   file         : test_diagnostic_model.py
#   file_relpath : tests/diagnostic/test_diagnostic_model.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Tests for the diagnostic taxonomy and `DiagnosticLog`."""

from __future__ import annotations

from dialscript.diagnostic import (
    Diagnostic,
    DiagnosticCategory,
    DiagnosticCode,
    DiagnosticLog,
    compute_diagnostic_stats,
)


def test_codes_have_unique_keys() -> None:
    keys = [code.key for code in DiagnosticCode]
    assert len(keys) == len(set(keys))


def test_every_code_has_a_message() -> None:
    for code in DiagnosticCode:
        assert code.message, code
        assert isinstance(code.category, DiagnosticCategory)


def test_lookup_by_key() -> None:
    code = DiagnosticCode("unknown-character")
    assert code is DiagnosticCode.UNKNOWN_CHARACTER
    assert code.category is DiagnosticCategory.LEXICAL
    assert code.hint == "add this character to Characters"


def test_log_add_uses_code_defaults() -> None:
    log = DiagnosticLog()
    d: Diagnostic = log.add(3, DiagnosticCode.EMPTY_TEXT, line_content="Alan:")
    assert d.message == "Empty dialog text"
    assert d.hint == "add text after the colon"
    assert not d.has_caret
    assert len(log) == 1
    assert list(log) == [d]


def test_log_add_overrides() -> None:
    log = DiagnosticLog()
    d: Diagnostic = log.add(
        1, DiagnosticCode.UNKNOWN_CHARACTER, hint="Did you mean 'Alan'?", caret=0
    )
    assert d.hint == "Did you mean 'Alan'?"
    assert d.has_caret


def test_log_freeze_and_line_numbers() -> None:
    log = DiagnosticLog()
    log.add(2, DiagnosticCode.DUPLICATE_LEVEL)
    log.add(2, DiagnosticCode.UNKNOWN_SYNTAX)
    log.add(5, DiagnosticCode.MISSING_LOCATION)
    frozen = log.freeze()
    assert isinstance(frozen, tuple)
    assert [d.code for d in frozen] == [
        DiagnosticCode.DUPLICATE_LEVEL,
        DiagnosticCode.UNKNOWN_SYNTAX,
        DiagnosticCode.MISSING_LOCATION,
    ]
    assert log.line_numbers() == {2, 5}


def test_stats_by_category() -> None:
    log = DiagnosticLog()
    log.add(1, DiagnosticCode.MISSING_SCENE)
    log.add(1, DiagnosticCode.MISSING_LEVEL)
    log.add(2, DiagnosticCode.TYPO_LEVEL)
    stats = log.stats()
    assert (stats.n_structural, stats.n_syntax, stats.n_lexical, stats.n_catch_all) == (2, 0, 1, 0)
    assert stats.total == 3
    assert compute_diagnostic_stats([]).total == 0


def test_diagnostic_to_dict() -> None:
    d = Diagnostic(
        line_number=8,
        code=DiagnosticCode.NO_SPACE_AFTER_COLON,
        message="Missing space after ':'",
        line_content="Alan:Hello",
        caret=5,
    )
    assert d.to_dict() == {
        "line": 8,
        "code": "no-space-after-colon",
        "category": "syntax",
        "message": "Missing space after ':'",
        "hint": None,
        "line_content": "Alan:Hello",
        "caret": 5,
    }
