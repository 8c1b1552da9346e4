"""Internal helpers for kleisli.

Small function-level combinators used to build composite arrows
(`dot` and `par` in the usual point-free notation)."""

from __future__ import annotations

from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """
    Function composition: compose(f, g)(z) == f(g(z)).

    Usage:
        square_of_diff = compose(square, partial_right(sub, x))
    """
    def composed(z: A) -> C:
        return f(g(z))
    return composed

def partial_right[A, B, R](f: Callable[[A, B], R], y: B) -> Callable[[A], R]:
    """
    Fix the second argument: partial_right(f, y)(z) == f(z, y).

    functools.partial fixes from the left; folds and subtraction need the right.
    """
    def applied(z: A) -> R:
        return f(z, y)
    return applied

__all__ = (
    "identity",
    "compose",
    "partial_right",
)
