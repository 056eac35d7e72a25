# topmark:header:start
#
#   project      : DialScript
#   file         : test_classifier_property.py
#   file_relpath : tests/parser/test_classifier_property.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Property tests for the classifier and the compile pipeline.

Arbitrary text must never make the classifier or the validator raise: every
line yields exactly one event and every problem becomes a diagnostic.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from dialscript.compiler.pipeline import compile_lines
from dialscript.parser.classifier import classify
from dialscript.parser.kinds import LineKind

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

# Lines built from the characters the grammar cares about, so that generated
# input hits headers, separators and metadata blocks often.
_GRAMMAR_CHARS = st.sampled_from(list("[]{}:./ -0123456789SceneDialogLvCharts\t"))
s_line = st.one_of(st.text(max_size=40), st.text(_GRAMMAR_CHARS, max_size=40))


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=200)
@given(raw=s_line, line_number=st.integers(min_value=1, max_value=10_000))
def test_classify_is_total(raw: str, line_number: int) -> None:
    """Every line classifies to one event that keeps its number and raw text."""
    event = classify(raw, line_number)
    assert isinstance(event.kind, LineKind)
    assert event.line_number == line_number
    assert event.raw == raw
    if event.caret >= 0:
        assert event.caret <= len(raw)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=100)
@given(lines=st.lists(s_line.filter(lambda s: "\n" not in s and "\r" not in s), max_size=20))
def test_compile_never_raises(lines: list[str]) -> None:
    """Compiling any document yields one event per line and in-range diagnostics."""
    result = compile_lines(lines)
    assert result.total_lines == len(lines)
    assert len(result.events) == len(lines)
    assert result.success == (result.error_count == 0)
    for diagnostic in result.diagnostics:
        assert 0 <= diagnostic.line_number <= len(lines)
