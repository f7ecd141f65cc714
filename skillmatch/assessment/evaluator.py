"""Heuristic structural code evaluation.

The evaluator never parses or runs submitted code. Each structural signal is
a named regex predicate worth a fixed number of points, so the scoring rule
can be audited and tuned without touching the detection logic. Patterns
cover the common shapes of JavaScript/TypeScript, Python, Java-like, Go and
Rust sources.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from skillmatch.assessment.models import CodeEvaluation

MIN_LINES = 3

_FUNCTION_RE = re.compile(
    r"\bfunction\b"  # JavaScript declarations and expressions
    r"|=>"  # arrow functions
    r"|\bdef\s+\w+\s*\("  # Python
    r"|\bfunc\s+\w+\s*\("  # Go
    r"|\bfn\s+\w+\s*[<(]"  # Rust
    # Java-like; name and return type on one line, bounded parameter list.
    r"|\b(?:public|private|protected|static)\s[^;{}()=\n]{0,120}?\w[ \t]*"
    r"\([^()]{0,200}\)\s*\{"
)
_RETURN_RE = re.compile(r"\breturn\b|\byield\b")
_CONDITIONAL_RE = re.compile(
    r"\bif\b|\belif\b|\bswitch\b|\bcase\b"
    r"|\bmatch\b[ \t]*\S{1,80}?[ \t]*[:{]"  # match statements
)
_LOOP_RE = re.compile(r"\bfor\b|\bwhile\b|\bloop\s*\{|\.forEach\s*\(|\bdo\s*\{")


def has_function_definition(code: str) -> bool:
    """True if the code declares a function, method or lambda."""
    return _FUNCTION_RE.search(code) is not None


def has_return_statement(code: str) -> bool:
    """True if the code returns (or yields) a value."""
    return _RETURN_RE.search(code) is not None


def has_conditional(code: str) -> bool:
    """True if the code contains a branch construct."""
    return _CONDITIONAL_RE.search(code) is not None


def has_loop(code: str) -> bool:
    """True if the code contains an iteration construct."""
    return _LOOP_RE.search(code) is not None


def has_sufficient_lines(code: str) -> bool:
    """True if the code has more than MIN_LINES non-blank lines."""
    return sum(1 for line in code.splitlines() if line.strip()) > MIN_LINES


@dataclass(frozen=True)
class CodeSignal:
    """A structural signal and the points it contributes."""

    name: str
    points: int
    predicate: Callable[[str], bool]


SIGNALS: tuple[CodeSignal, ...] = (
    CodeSignal("function_definition", 25, has_function_definition),
    CodeSignal("return_statement", 20, has_return_statement),
    CodeSignal("conditional", 20, has_conditional),
    CodeSignal("loop", 20, has_loop),
    CodeSignal("sufficient_lines", 15, has_sufficient_lines),
)


def explain_code(
    code: str | None, signals: tuple[CodeSignal, ...] = SIGNALS
) -> CodeEvaluation:
    """Evaluate code and report the points earned by each signal."""
    if not isinstance(code, str) or not code.strip():
        return CodeEvaluation(score=0, signals={s.name: 0 for s in signals})

    earned = {s.name: (s.points if s.predicate(code) else 0) for s in signals}
    return CodeEvaluation(score=min(100, sum(earned.values())), signals=earned)


def evaluate_code(code: str | None) -> int:
    """Return a 0-100 heuristic quality score for a code sample.

    None, empty and whitespace-only input score 0.
    """
    return explain_code(code).score
