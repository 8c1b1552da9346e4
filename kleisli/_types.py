"""
Core type definitions for kleisli.

Aliases shared by the sequence core, the law harness and the demo.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .seq.container import Seq

# ============================================================================
# Type aliases
# ============================================================================

# Endo = Kleisli arrow into Seq ("endofunctor" when T == U)
type Endo[T, U] = Callable[[T], Seq[U]]

# Combine = left-fold step: (accumulator, element) -> accumulator
type Combine[Y, T] = Callable[[Y, T], Y]

# Law = predicate checked for every generated value
type Law[T] = Callable[[T], bool]

__all__ = (
    "Endo",
    "Combine",
    "Law",
)
