"""Tests for the heuristic code evaluator."""

from __future__ import annotations

import time

import pytest


class TestEvaluateCode:
    """Test evaluate_code scoring."""

    def test_well_structured_code_scores_100(self, sample_code):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code(sample_code) == 100

    def test_function_with_return_only(self):
        from skillmatch.assessment.evaluator import evaluate_code

        code = 'function greet(name) {\n  return "Hello " + name;\n}\n'

        assert evaluate_code(code) == 45

    def test_trivial_statement_scores_zero(self):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code("const x = 5;") == 0

    @pytest.mark.parametrize("code", [None, "", "   \n\t  "])
    def test_empty_input_scores_zero(self, code):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code(code) == 0

    def test_non_string_input_scores_zero(self):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code(12345) == 0  # type: ignore[arg-type]

    def test_python_submission(self):
        from skillmatch.assessment.evaluator import evaluate_code

        code = """
def count_evens(values):
    total = 0
    for value in values:
        if value % 2 == 0:
            total += 1
    return total
""".lstrip()

        assert evaluate_code(code) == 100

    def test_score_never_exceeds_100(self, sample_code):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code(sample_code * 5) == 100


class TestSignals:
    """Test individual structural predicates."""

    @pytest.mark.parametrize(
        "code",
        [
            "function add(a, b) {}",
            "const add = (a, b) => a + b;",
            "def add(a, b):",
            "func add(a int, b int) int {",
            "fn add(a: i32) -> i32 {",
            "public static int add(int a, int b) {",
        ],
    )
    def test_function_definitions(self, code):
        from skillmatch.assessment.evaluator import has_function_definition

        assert has_function_definition(code)

    def test_plain_assignment_is_not_a_function(self):
        from skillmatch.assessment.evaluator import has_function_definition

        assert not has_function_definition("total = price * quantity")

    @pytest.mark.parametrize(
        "code", ["for (let i = 0; i < n; i++) {}", "while (x) {}", "items.forEach(f)"]
    )
    def test_loops(self, code):
        from skillmatch.assessment.evaluator import has_loop

        assert has_loop(code)

    @pytest.mark.parametrize("code", ["if (x) {}", "switch (x) {}", "elif x:"])
    def test_conditionals(self, code):
        from skillmatch.assessment.evaluator import has_conditional

        assert has_conditional(code)

    def test_identifier_containing_keyword_is_not_a_signal(self):
        from skillmatch.assessment.evaluator import has_conditional, has_loop

        assert not has_conditional("const modifier = 1;")
        assert not has_loop("const format = 1;")

    def test_sufficient_lines_ignores_blank_lines(self):
        from skillmatch.assessment.evaluator import has_sufficient_lines

        assert not has_sufficient_lines("a\n\n\nb\n\nc\n")
        assert has_sufficient_lines("a\nb\nc\nd\n")

    def test_each_quality_signal_scores_above_zero(self):
        from skillmatch.assessment.evaluator import evaluate_code

        for code in ["function f() {}", "return 1;", "if (x) {}", "while (x) {}"]:
            assert evaluate_code(code) > 0


class TestExplainCode:
    """Test per-signal breakdown."""

    def test_explain_reports_detected_and_missing(self):
        from skillmatch.assessment.evaluator import explain_code

        evaluation = explain_code("def f(x):\n    return x\n")

        assert evaluation.score == 45
        assert evaluation.detected == ["function_definition", "return_statement"]
        assert evaluation.missing == ["conditional", "loop", "sufficient_lines"]

    def test_signal_points_total_100(self):
        from skillmatch.assessment.evaluator import SIGNALS

        assert sum(signal.points for signal in SIGNALS) == 100

    def test_explain_with_custom_signals(self):
        from skillmatch.assessment.evaluator import CodeSignal, explain_code

        signals = (CodeSignal("todo", 10, lambda code: "TODO" in code),)

        evaluation = explain_code("# TODO", signals)

        assert evaluation.score == 10
        assert evaluation.signals == {"todo": 10}


class TestEdgeCases:
    """Test unusual submissions."""

    def test_repeated_calls_are_deterministic(self, sample_code):
        from skillmatch.assessment.evaluator import evaluate_code

        scores = {evaluate_code(sample_code) for _ in range(5)}

        assert scores == {100}

    def test_very_long_code(self):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code("const x = 1;\n" * 1000) == 15

    def test_unicode_characters(self):
        from skillmatch.assessment.evaluator import evaluate_code

        assert evaluate_code('const emoji = "🚀💻"; // Special chars') == 0

    def test_sql_and_html_in_string_literals(self):
        """Keywords inside strings do not add control-flow points."""
        from skillmatch.assessment.evaluator import explain_code

        code = """
function test() {
  const sql = "SELECT * FROM users";
  const html = "<div>Test</div>";
  return { sql, html };
}
"""

        evaluation = explain_code(code)

        assert evaluation.score == 60
        assert evaluation.missing == ["conditional", "loop"]

    @pytest.mark.parametrize(
        "code",
        [
            "public " * 20000,
            "static " * 20000,
            "private static " * 10000,
            "match " * 20000,
            "def " * 20000,
            "public static void run(" + "int a, " * 20000,
        ],
    )
    def test_large_adversarial_input_stays_fast(self, code):
        from skillmatch.assessment.evaluator import evaluate_code

        started = time.monotonic()
        score = evaluate_code(code)
        elapsed = time.monotonic() - started

        assert 0 <= score <= 100
        assert elapsed < 2.0

    def test_java_parameters_may_span_lines(self):
        from skillmatch.assessment.evaluator import has_function_definition

        assert has_function_definition("public int add(\n  int a,\n  int b) {")
        assert not has_function_definition("public int\nadd(int a) {")
