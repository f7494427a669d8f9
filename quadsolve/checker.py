"""Checking the solver against a file of expected answers."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from quadsolve.solver import Solution, is_zero, solve

DEFAULT_CASES_PATH = "tests/tests.txt"
SEPARATOR = "-" * 65
FIELDS_PER_CASE = 8

_RED = "\x1b[31m"
_GREEN = "\x1b[32m"
_RESET = "\x1b[0m"


class Verdict(IntEnum):
    """Outcome of one check."""

    OK = 0
    WARNING = 1


@dataclass(frozen=True)
class TestCase:
    """One line of a cases file: coefficients, starting roots, expected answer."""

    __test__ = False

    a: float
    b: float
    c: float
    x1: float
    x2: float
    ans_x1: float
    ans_x2: float
    result: float


def _number(token: str) -> float:
    if "_" in token:
        raise ValueError(f"not a number: {token!r}")
    return float(token)


def parse_cases(text: str) -> list[TestCase]:
    """Read groups of eight numbers until one fails; at most one case per line."""
    limit = text.count("\n") + 1
    tokens = iter(text.split())
    cases: list[TestCase] = []
    while len(cases) < limit:
        values = []
        for token in tokens:
            try:
                values.append(_number(token))
            except ValueError:
                break
            if len(values) == FIELDS_PER_CASE:
                break
        if len(values) != FIELDS_PER_CASE:
            break
        cases.append(TestCase(*values))
    return cases


def load_cases(path: str | Path = DEFAULT_CASES_PATH) -> list[TestCase]:
    """Read the cases in the file at path."""
    return parse_cases(Path(path).read_text())


def _value(x: float | None) -> float:
    return math.nan if x is None else x


def _roots_match(got: float, expected: float) -> bool:
    if math.isnan(got) and math.isnan(expected):
        return True
    if math.isnan(got) or math.isnan(expected):
        return False
    return is_zero(got - expected)


def compare(solution: Solution, case: TestCase) -> Verdict:
    """OK when the root count and both roots match the expected answer."""
    if not is_zero(int(solution.count) - case.result):
        return Verdict.WARNING
    if not _roots_match(_value(solution.x1), case.ans_x1):
        return Verdict.WARNING
    if not _roots_match(_value(solution.x2), case.ans_x2):
        return Verdict.WARNING
    return Verdict.OK


def run_case(case: TestCase) -> tuple[Solution, Verdict]:
    """Solve a case; roots the solver leaves unset keep the case's starting values."""
    found = solve(case.a, case.b, case.c)
    solution = Solution(
        found.count,
        found.x1 if found.x1 is not None else case.x1,
        found.x2 if found.x2 is not None else case.x2,
    )
    return solution, compare(solution, case)


def _integer(x: float) -> str:
    return "%d" % x if math.isfinite(x) else "%g" % x


def format_warning(solution: Solution, case: TestCase) -> str:
    """Report of a failed case, showing what was found and what was expected."""
    return (
        f"{SEPARATOR}\n"
        "ERROR IN TEST:\n"
        "PROGRAM OUTPUT: x1 = %g, x2 = %g, NOR = %d\n"
        % (_value(solution.x1), _value(solution.x2), int(solution.count))
        + "CORRECT OUTPUT: x1 = %g, x2 = %g, NOR = %s\n"
        % (case.ans_x1, case.ans_x2, _integer(case.result))
        + SEPARATOR
    )


def run_tests(path: str | Path = DEFAULT_CASES_PATH, out: TextIO | None = None) -> list[Verdict]:
    """Run every case in the file, report each one, and return the verdicts."""
    out = sys.stdout if out is None else out
    verdicts = []
    for case in load_cases(path):
        solution, verdict = run_case(case)
        if verdict is Verdict.OK:
            out.write(f"{_GREEN}OK{_RESET}\n")
        else:
            out.write(f"{_RED}{format_warning(solution, case)}{_RESET}\n")
        verdicts.append(verdict)
    out.write(f"{SEPARATOR}\n\n")
    return verdicts