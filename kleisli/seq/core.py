"""
Sequence monad core
===================

(Seq, unit, prod) as a Kleisli triple, plus operations derived from it:

- unit:  T -> Seq[T]
- prod:  (T -> Seq[U], Seq[T]) -> Seq[U]   (bind, >>=)
- join:  Seq[Seq[T]] -> Seq[T]             (prod with identity)
- fmap:  (T -> U, Seq[T]) -> Seq[U]        (prod with unit . f)
- foldl: ((Y, T) -> Y, Seq[T], Y) -> Y
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._helpers import identity
from .._types import Combine, Endo
from .container import Seq


# ============================================================================
# Primitives
# ============================================================================


def unit[T](x: T, /) -> Seq[T]:
    """Wrap a value as a one-element sequence."""
    result: Seq[T] = Seq()
    result.push_back(x)
    return result


def unit_probe[T](x: T, /) -> Seq[T]:
    """
    Same as unit, under its own name.

    Used where unit is passed as the arrow under test (right identity), so the
    constructor and the probed function stay distinguishable.
    """
    result: Seq[T] = Seq()
    result.push_back(x)
    return result


def prod[T, U](f: Endo[T, U], xs: Seq[T], /) -> Seq[U]:
    """
    Monadic bind: concatenate f(x) for every x in xs, in order.

    Consumes xs; pass xs.copy() to keep using the input. Whatever f returns is
    copied into the result and stays usable, so f may hand back a captured
    Seq. Runs in a loop, so the depth does not grow with len(xs).
    """
    result: Seq[U] = Seq()
    try:
        while not xs.is_empty():
            part = f(xs.pop_front())
            if not isinstance(part, Seq):
                raise TypeError(
                    f"prod(): arrow must return Seq, got {type(part).__name__}"
                )
            result.splice(part.copy())
    finally:
        if not xs.consumed:
            xs.consume()
    return result


# ============================================================================
# Derived operations
# ============================================================================


def join[T](xss: Seq[Seq[T]], /) -> Seq[T]:
    """Flatten one level. Implemented as prod(identity). Consumes xss."""
    return prod(identity, xss)


def fmap[T, U](f: Callable[[T], U], xs: Seq[T], /) -> Seq[U]:
    """Functor map via prod(unit . f). Leaves xs untouched."""
    return prod(lifted(f), xs.copy())


def foldl[Y, T](f: Combine[Y, T], xs: Iterable[T], y: Y, /) -> Y:
    """Left fold, strictly in sequence order. Leaves xs untouched."""
    for x in xs:
        y = f(y, x)
    return y


def lifted[T, U](f: Callable[[T], U], /) -> Endo[T, U]:
    """
    Turn a plain function into an arrow: lifted(f)(x) == unit(f(x)).

    Example:
        square = lifted(lambda x: x * x)
        prod(square, Seq.of(1, 2, 3))  # Seq(1, 4, 9)
    """
    def arrow(x: T) -> Seq[U]:
        return unit(f(x))
    return arrow


__all__ = ("unit", "unit_probe", "prod", "join", "fmap", "foldl", "lifted")
