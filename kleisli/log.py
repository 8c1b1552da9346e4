"""
Log - monoid accumulator for reports
====================================
"""

from __future__ import annotations

from collections.abc import Iterator

from .seq.container import Seq


class Log[A]:
    """
    Writer-style log, backed by Seq.

    Immutable from the outside: tell/combine build a new Log and leave both
    operands intact.

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Seq[A] | None = None, /) -> None:
        self._entries: Seq[A] = Seq() if entries is None else entries.copy()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log(Seq.from_iterable(items))

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log('a', 'b', 'c')
        """
        entries = self._entries.copy()
        entries.splice(other._entries.copy())
        return Log(entries)

    def tell(self, item: A, /) -> Log[A]:
        """Append single item. Same as self.combine(Log.of(item))."""
        entries = self._entries.copy()
        entries.push_back(item)
        return Log(entries)

    def __iter__(self) -> Iterator[A]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Log):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Log({', '.join(repr(e) for e in self._entries)})"


__all__ = ("Log",)
