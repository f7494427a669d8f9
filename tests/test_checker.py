import io
import math

import pytest

from quadsolve.checker import (
    TestCase as Case,
    Verdict,
    compare,
    format_warning,
    load_cases,
    parse_cases,
    run_case,
    run_tests,
)
from quadsolve.solver import RootCount, Solution

GOOD_TWO = "1 -3 2 nan nan 2 1 2"
GOOD_ONE = "0 2 -4 nan nan 2 nan 1"
BAD_IMAGINARY = "1 0 1 nan nan nan nan 2"


def test_parse_single_case_fields():
    cases = parse_cases(GOOD_TWO + "\n")
    assert len(cases) == 1
    case = cases[0]
    assert (case.a, case.b, case.c) == (1.0, -3.0, 2.0)
    assert math.isnan(case.x1) and math.isnan(case.x2)
    assert (case.ans_x1, case.ans_x2, case.result) == (2.0, 1.0, 2.0)


def test_parse_stops_at_malformed_token():
    text = GOOD_TWO + "\n1 2 oops 4 5 6 7 8\n" + GOOD_ONE + "\n"
    cases = parse_cases(text)
    assert [c.a for c in cases] == [1.0]


def test_parse_limits_cases_to_line_count():
    cases = parse_cases(GOOD_TWO + " " + GOOD_ONE)
    assert len(cases) == 1


def test_parse_ignores_incomplete_tail():
    cases = parse_cases(GOOD_TWO + "\n" + GOOD_ONE + "\n1 2 3\n")
    assert [c.b for c in cases] == [-3.0, 2.0]


def test_load_cases_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_cases(tmp_path / "absent.txt")


def test_run_case_ok():
    (case,) = parse_cases(GOOD_TWO)
    solution, verdict = run_case(case)
    assert verdict is Verdict.OK
    assert solution.count is RootCount.TWO


def test_run_case_keeps_starting_roots_when_unset():
    case = Case(1.0, 0.0, 1.0, 7.0, 8.0, 7.0, 8.0, 3.0)
    solution, verdict = run_case(case)
    assert (solution.x1, solution.x2) == (7.0, 8.0)
    assert verdict is Verdict.OK


def test_compare_wrong_count():
    (case,) = parse_cases(BAD_IMAGINARY)
    assert compare(Solution(RootCount.IMAGINARY), case) is Verdict.WARNING


def test_compare_nan_against_number_is_warning():
    case = Case(0, 2, -4, math.nan, math.nan, 2.0, math.nan, 1.0)
    assert compare(Solution(RootCount.ONE), case) is Verdict.WARNING
    assert compare(Solution(RootCount.ONE, 2.0), case) is Verdict.OK


def test_compare_second_root_mismatch():
    case = Case(1, -3, 2, math.nan, math.nan, 2.0, 1.0, 2.0)
    assert compare(Solution(RootCount.TWO, 2.0, 1.5), case) is Verdict.WARNING


def test_format_warning_contents():
    case = Case(1, 0, 1, math.nan, math.nan, math.nan, math.nan, 2.0)
    text = format_warning(Solution(RootCount.IMAGINARY), case)
    lines = text.split("\n")
    assert lines[1] == "ERROR IN TEST:"
    assert lines[2].endswith("NOR = 3")
    assert lines[3].endswith("NOR = 2")
    assert lines[0] == lines[-1] == "-" * 65


def test_run_tests_reports_each_case(tmp_path):
    path = tmp_path / "cases.txt"
    path.write_text("\n".join([GOOD_TWO, BAD_IMAGINARY, GOOD_ONE]) + "\n")
    out = io.StringIO()
    verdicts = run_tests(path, out)
    assert verdicts == [Verdict.OK, Verdict.WARNING, Verdict.OK]
    text = out.getvalue()
    assert text.count("OK") == 2
    assert text.count("ERROR IN TEST:") == 1
    assert text.endswith("-" * 65 + "\n\n")