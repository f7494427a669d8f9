"""Solving a*x^2 + b*x + c = 0 over the reals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

EPSILON = 1e-8


class RootCount(IntEnum):
    """How many real roots an equation has."""

    INFINITE = -1
    NONE = 0
    ONE = 1
    TWO = 2
    IMAGINARY = 3


@dataclass(frozen=True)
class Solution:
    """The kind of solution and its roots; a root that is not found is None."""

    count: RootCount
    x1: float | None = None
    x2: float | None = None

    @property
    def roots(self) -> tuple[float, ...]:
        """The roots that were found, larger first."""
        return tuple(x for x in (self.x1, self.x2) if x is not None)


def is_zero(x: float) -> bool:
    """Whether x is closer to zero than EPSILON."""
    return abs(x) < EPSILON


def discriminant(a: float, b: float, c: float) -> float:
    """b^2 - 4ac."""
    return b * b - 4 * a * c


def solve(a: float, b: float, c: float) -> Solution:
    """Solve a*x^2 + b*x + c = 0; with two roots, x1 is the larger."""
    if is_zero(a):
        if is_zero(b):
            return Solution(RootCount.INFINITE if is_zero(c) else RootCount.NONE)
        return Solution(RootCount.ONE, -c / b)

    d = discriminant(a, b, c)

    if is_zero(d):
        root = 0.0 if is_zero(b) else -b / (2 * a)
        return Solution(RootCount.ONE, root)
    if d < 0:
        return Solution(RootCount.IMAGINARY)

    first = (-b + math.sqrt(d)) / (2 * a)
    second = (-b - math.sqrt(d)) / (2 * a)
    larger = first if first > second else second
    smaller = first if first < second else second
    return Solution(RootCount.TWO, larger, smaller)