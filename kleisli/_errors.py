from __future__ import annotations

class ConsumedSequenceError(Exception):
    """Sequence was used after prod/join/splice took ownership of it."""

    def __init__(self) -> None:
        super().__init__("Seq was consumed and can no longer be used")

class LawViolation(Exception):
    """A monad law did not hold for some value. Carried in Error(...), not raised."""

    law: str
    value: object

    def __init__(self, law: str, value: object) -> None:
        self.law = law
        self.value = value
        super().__init__(f"{law} law fails for {value!r}")

__all__ = ("ConsumedSequenceError", "LawViolation")
