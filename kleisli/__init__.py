"""
Sequence monad playground.

A singly linked Seq with unit and prod (bind) forms a Kleisli triple;
join, fmap and foldl are derived from those two. The law harness checks
left identity, right identity and associativity over a generated range,
and the arithmetic demo puts the algebra to work on a few summations.

Architecture:
- seq        - container and monad operations
- laws       - law predicates + folding harness (kungfu Result for outcomes)
- arithmetic - fixed-width summation checks
- log        - Writer-style report log
"""

# Core types
from ._types import Combine, Endo, Law

# Internal helpers
from . import _helpers
from ._helpers import compose, identity, partial_right

# Sequence monad
from .seq import Seq, fmap, foldl, join, lifted, prod, unit, unit_probe

# Report log
from .log import Log

# Law harness
from .laws import (
    LawReport,
    associativity,
    check_laws,
    double_endo,
    left_identity,
    right_identity,
    square_endo,
)

# Arithmetic demo
from .arithmetic import ArithmeticReport, Width, run_demo

# Config
from .config import DemoConfig

# Errors
from ._errors import ConsumedSequenceError, LawViolation

__all__ = (
    # Types
    "Combine",
    "Endo",
    "Law",
    # Helpers
    "_helpers",
    "compose",
    "identity",
    "partial_right",
    # Sequence monad
    "Seq",
    "unit",
    "unit_probe",
    "prod",
    "join",
    "fmap",
    "foldl",
    "lifted",
    # Log
    "Log",
    # Laws
    "LawReport",
    "associativity",
    "check_laws",
    "double_endo",
    "left_identity",
    "right_identity",
    "square_endo",
    # Arithmetic
    "ArithmeticReport",
    "Width",
    "run_demo",
    # Config
    "DemoConfig",
    # Errors
    "ConsumedSequenceError",
    "LawViolation",
)
