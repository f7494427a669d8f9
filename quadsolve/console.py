"""Interactive front end: pick a mode, then solve or run the checks."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from quadsolve.checker import run_tests
from quadsolve.solver import RootCount, Solution, discriminant, solve

SEPARATOR = "-" * 65

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"

_INVALID = f"{RED}Invalid input format{RESET}\n"


def choose_mode(stdin: TextIO, stdout: TextIO) -> str:
    """Ask for 'u' (user) or 't' (tester) until one is given alone on a line."""
    stdout.write(f"\n{SEPARATOR}\n")
    stdout.write(f"{BLUE}###    Enter 't' for tester mode and 'u' for user mode    ###\n{RESET}")
    for line in stdin:
        if line in ("u\n", "t\n"):
            stdout.write("\n")
            return line[0]
        stdout.write(_INVALID)
    raise EOFError("input ended before a mode was chosen")


def _number(token: str) -> float:
    if "_" in token:
        raise ValueError(f"not a number: {token!r}")
    return float(token)


def read_coefficients(stdin: TextIO, stdout: TextIO) -> tuple[float, float, float]:
    """Read three numbers, on one line or several; the third must end its line."""
    pending: list[float] = []
    for line in stdin:
        body = line[:-1] if line.endswith("\n") else line
        try:
            pending.extend(_number(token) for token in body.split())
        except ValueError:
            pending = []
            stdout.write(_INVALID)
            continue
        if len(pending) < 3 and line.endswith("\n"):
            continue
        if len(pending) == 3 and line.endswith("\n") and body == body.rstrip():
            stdout.write(f"\n{RESET}")
            a, b, c = pending
            return a, b, c
        pending = []
        stdout.write(_INVALID)
    raise EOFError("input ended before three coefficients were read")


def describe_discriminant(a: float, b: float, c: float) -> str:
    """The discriminant worked out, with its sign against zero."""
    d = discriminant(a, b, c)
    text = "D = b^2 - 4*a*c = %g^2 - 4*%g*%g = %g" % (b, a, c, d)
    if d == 0:
        return text
    return f"{text} {'>' if d > 0 else '<'} 0"


def format_solution(solution: Solution) -> str:
    """Human-readable description of a solution."""
    if solution.count is RootCount.NONE:
        return "No roots\n"
    if solution.count is RootCount.ONE:
        return "One root:\nx = %g\n" % solution.x1
    if solution.count is RootCount.TWO:
        return "Two roots:\nx1 = %g\nx2 = %g\n" % (solution.x1, solution.x2)
    if solution.count is RootCount.IMAGINARY:
        return "Only imaginary roots\n"
    return "Infinite number of roots\n"


def _user_mode(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(f"{BLUE}###    This is a quadratic equation calculator              ###\n")
    stdout.write(f"###    Enter a, b, c separated by space or by enter         ###{RESET}\n")
    a, b, c = read_coefficients(stdin, stdout)
    stdout.write(f"{MAGENTA}Solution:\n{describe_discriminant(a, b, c)}{RESET}\n\n")
    stdout.write(f"{MAGENTA}{format_solution(solve(a, b, c))}{RESET}")
    stdout.write(f"{SEPARATOR}\n\n")


def main(argv: list[str] | None = None) -> int:
    """Run the calculator or the checks, as the user chooses."""
    parser = argparse.ArgumentParser(prog="quadsolve", description="Quadratic equation calculator.")
    parser.parse_args(argv)
    mode = choose_mode(sys.stdin, sys.stdout)
    if mode == "u":
        _user_mode(sys.stdin, sys.stdout)
    else:
        run_tests(out=sys.stdout)
    return 0