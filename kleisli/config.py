"""
Demo configuration
==================
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """
    Settings for a demo run.

    size   - length of the generated sequence 0, 1, ..., size - 1
    bits   - signed integer width used by the arithmetic checks
             (None = unbounded Python ints)
    strict - exit with status 1 when any check fails
    """

    size: int = 100
    bits: int | None = 64
    strict: bool = False

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("DemoConfig.size must be >= 0")
        if self.bits is not None and self.bits < 2:
            raise ValueError("DemoConfig.bits must be >= 2 or None")

    @classmethod
    def int64(cls, size: int = 100, *, strict: bool = False) -> DemoConfig:
        """Fixed 64-bit arithmetic. Large sizes overflow on purpose."""
        return cls(size=size, bits=64, strict=strict)

    @classmethod
    def unbounded(cls, size: int = 100, *, strict: bool = False) -> DemoConfig:
        """Arbitrary precision: the identities hold for any size."""
        return cls(size=size, bits=None, strict=strict)


__all__ = ("DemoConfig",)
