"""
Monad law harness
=================

Checks that (Seq, unit, prod) is a Kleisli triple over a range of values:

- Left identity:  prod(f, unit(x)) == f(x)
- Right identity: prod(unit, unit(x)) == unit(x)
- Associativity:  prod(f, prod(g, unit(x))) == prod(y => prod(f, g(y)), unit(x))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from ._errors import LawViolation
from ._types import Endo, Law
from .log import Log
from .seq import Seq, foldl, lifted, prod, unit, unit_probe

# Default arrows for law checks
square_endo: Endo[int, int] = lifted(lambda x: x * x)
double_endo: Endo[int, int] = lifted(lambda x: x + x)


# ============================================================================
# Laws
# ============================================================================


def left_identity[T, U](f: Endo[T, U], x: T) -> bool:
    return prod(f, unit(x)) == f(x)


def right_identity[T](x: T) -> bool:
    return prod(unit_probe, unit(x)) == unit(x)


def associativity[T](f: Endo[T, T], g: Endo[T, T], x: T) -> bool:
    def f_after_g(y: T) -> Seq[T]:
        # g may hand back a captured Seq; bind over a copy so it stays intact
        return prod(f, g(y).copy())

    return prod(f, prod(g, unit(x))) == prod(f_after_g, unit(x))


# ============================================================================
# Harness
# ============================================================================


@dataclass(frozen=True, slots=True)
class LawReport:
    """
    Outcome of check_laws.

    result - Ok(number of values checked) or Error(first violation)
    log    - report lines
    """

    result: Result[int, LawViolation]
    log: Log[str]

    @property
    def holds(self) -> bool:
        match self.result:
            case Ok(_):
                return True
            case Error(_):
                return False
            case _ as unreachable:
                assert_never(unreachable)


def check_laws[T](xs: Iterable[T], f: Endo[T, T], g: Endo[T, T]) -> LawReport:
    """
    Fold the conjunction of all three laws over xs.

    Stops checking at the first violation. xs is not consumed.
    """

    laws: tuple[tuple[str, Law[T]], ...] = (
        ("left identity", lambda x: left_identity(f, x)),
        ("right identity", right_identity),
        ("associativity", lambda x: associativity(f, g, x)),
    )

    def step(acc: Result[int, LawViolation], x: T) -> Result[int, LawViolation]:
        match acc:
            case Ok(checked):
                for name, law in laws:
                    if not law(x):
                        return Error(LawViolation(name, x))
                return Ok(checked + 1)
            case Error(_):
                return acc
            case _ as unreachable:
                assert_never(unreachable)

    initial: Result[int, LawViolation] = Ok(0)
    result = foldl(step, xs, initial)

    match result:
        case Ok(_):
            log = Log.of(
                "",
                "left identity, right identity, associativity laws valid.",
                "... so, it is a monad after all!",
                "... so, we can now start playing and pay the consequences!",
            )
        case Error(violation):
            log = Log.of("", f"monad laws do not hold: {violation}")
        case _ as unreachable:
            assert_never(unreachable)

    return LawReport(result, log)


__all__ = (
    "square_endo",
    "double_endo",
    "left_identity",
    "right_identity",
    "associativity",
    "LawReport",
    "check_laws",
)
