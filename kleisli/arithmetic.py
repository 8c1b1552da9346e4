"""
Arithmetic demonstration
========================

Runs summations through prod/fmap/foldl and compares them with closed forms:

- Σ 2x               == 2 * n(n+1)/2
- Σ x²               == n(n+1)(2n+1)/6
- N * Σ x² - (Σ x)²  == 1/2 * Σi Σj (x(i) - x(j))²

All arithmetic happens in a fixed signed width (64 bits by default). Overflow
is not prevented: it shows up as a failed check.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._helpers import compose, partial_right
from ._types import Endo
from .log import Log
from .seq import Seq, fmap, foldl, lifted, prod


@dataclass(frozen=True, slots=True)
class Width:
    """
    Two's-complement integer arithmetic in `bits` bits.

    bits=None disables wrapping. Division truncates toward zero.
    """

    bits: int | None = 64

    def __post_init__(self) -> None:
        if self.bits is not None and self.bits < 2:
            raise ValueError("Width.bits must be >= 2 or None")

    def wrap(self, value: int) -> int:
        if self.bits is None:
            return value
        half = 1 << (self.bits - 1)
        return ((value + half) % (half << 1)) - half

    def add(self, x: int, y: int) -> int:
        return self.wrap(x + y)

    def sub(self, x: int, y: int) -> int:
        return self.wrap(x - y)

    def mul(self, x: int, y: int) -> int:
        return self.wrap(x * y)

    def div(self, x: int, y: int) -> int:
        q = abs(x) // abs(y)
        return self.wrap(q if (x < 0) == (y < 0) else -q)

    def square(self, x: int) -> int:
        return self.mul(x, x)

    def double(self, x: int) -> int:
        return self.add(x, x)


@dataclass(frozen=True, slots=True)
class ArithmeticReport:
    doubles: bool
    squares: bool
    pairwise: bool
    log: Log[str]

    @property
    def passed(self) -> bool:
        return self.doubles and self.squares and self.pairwise


# ============================================================================
# Closed forms
# ============================================================================


def sum_to(n: int, width: Width) -> int:
    """0 + 1 + ... + n"""
    return width.div(width.mul(n, width.add(n, 1)), 2)


def sum_of_squares_to(n: int, width: Width) -> int:
    """0² + 1² + ... + n²"""
    return width.div(
        width.mul(width.mul(n, width.add(n, 1)), width.add(width.mul(2, n), 1)),
        6,
    )


# ============================================================================
# Sums through the monad
# ============================================================================


def sum_of(xs: Seq[int], width: Width) -> int:
    return foldl(width.add, xs, 0)


def sum_of_doubles(xs: Seq[int], width: Width) -> int:
    double: Endo[int, int] = lifted(width.double)
    return sum_of(prod(double, xs.copy()), width)


def sum_of_squares(xs: Seq[int], width: Width) -> int:
    square: Endo[int, int] = lifted(width.square)
    return sum_of(prod(square, xs.copy()), width)


def squared_sum(xs: Seq[int], width: Width) -> int:
    """(Σ x)²"""
    return width.square(sum_of(xs, width))


def squared_differences(x: int, xs: Seq[int], width: Width) -> Seq[int]:
    """(y - x)² for every y in xs."""
    return fmap(compose(width.square, partial_right(width.sub, x)), xs)


def sum_of_squared_differences(xs: Seq[int], width: Width) -> int:
    """Σi Σj (x(i) - x(j))², all ordered pairs."""

    def row(x: int) -> Seq[int]:
        return squared_differences(x, xs, width)

    return sum_of(prod(row, xs.copy()), width)


# ============================================================================
# Checks
# ============================================================================


def check_doubles(xs: Seq[int], width: Width) -> bool:
    n = len(xs) - 1
    return sum_of_doubles(xs, width) == width.mul(2, sum_to(n, width))


def check_squares(xs: Seq[int], width: Width) -> bool:
    n = len(xs) - 1
    return sum_of_squares(xs, width) == sum_of_squares_to(n, width)


def check_pairwise(xs: Seq[int], width: Width) -> bool:
    """N * Σ x² - (Σ x)² == Σi Σj (x(i) - x(j))² / 2"""
    lhs = width.sub(
        width.mul(len(xs), sum_of(fmap(width.square, xs), width)),
        squared_sum(xs, width),
    )
    rhs = width.div(sum_of_squared_differences(xs, width), 2)
    return lhs == rhs


def _verdict(ok: bool) -> str:
    return "true" if ok else "false"


def run_demo(xs: Seq[int], width: Width) -> ArithmeticReport:
    """Run all three checks over xs (not consumed) and build the report."""
    last = len(xs) - 1
    doubles = check_doubles(xs, width)
    squares = check_squares(xs, width)
    pairwise = check_pairwise(xs, width)

    log = Log.of(
        f"Sum of doubles of integer sequence 0,1,2,3,...,{last} test: {_verdict(doubles)}",
        f"Sum of squares of integer sequence 0,1,2,3,...,{last} test: {_verdict(squares)}",
        "Sum of squares vs square of sums (provided no overflow): "
        + ("true" if pairwise else "false (you overflowed it!)"),
        "",
    )
    return ArithmeticReport(doubles, squares, pairwise, log)


__all__ = (
    "Width",
    "ArithmeticReport",
    "sum_to",
    "sum_of_squares_to",
    "sum_of",
    "sum_of_doubles",
    "sum_of_squares",
    "squared_sum",
    "squared_differences",
    "sum_of_squared_differences",
    "check_doubles",
    "check_squares",
    "check_pairwise",
    "run_demo",
)
