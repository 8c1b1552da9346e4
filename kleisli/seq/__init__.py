from .container import Seq
from .core import fmap, foldl, join, lifted, prod, unit, unit_probe

__all__ = (
    # Container
    "Seq",
    # Primitives
    "unit",
    "unit_probe",
    "prod",
    # Derived
    "join",
    "fmap",
    "foldl",
    "lifted",
)
