"""
Seq - singly linked sequence
============================

Ordered, finite, mutable container with O(1) splice.

Ownership:
- splice(other) consumes `other` (its nodes move, nothing is copied)
- prod/join consume their input sequence
- a consumed sequence is empty and unusable; touching it raises
  ConsumedSequenceError
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from .._errors import ConsumedSequenceError


class _Node[T]:
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: _Node[T] | None = None) -> None:
        self.value = value
        self.next = next


class Seq[T]:
    """
    Singly linked sequence.

    Keeps head and tail pointers so both pop_front and splice are O(1).
    Equality is structural: same length, same elements, same order.
    """

    __slots__ = ("_head", "_tail", "_size", "_consumed")

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        self._consumed = False

    @staticmethod
    def of[V](*items: V) -> Seq[V]:
        """Create sequence with items, in order."""
        return Seq.from_iterable(items)

    @staticmethod
    def from_iterable[V](items: Iterable[V], /) -> Seq[V]:
        result: Seq[V] = Seq()
        for item in items:
            result.push_back(item)
        return result

    # Ownership

    @property
    def consumed(self) -> bool:
        """True once the sequence was handed over to prod/join/splice."""
        return self._consumed

    def consume(self) -> None:
        """Drop all nodes and mark the sequence as moved-from."""
        self._head = None
        self._tail = None
        self._size = 0
        self._consumed = True

    def _alive(self) -> None:
        if self._consumed:
            raise ConsumedSequenceError()

    # Mutation

    def push_back(self, value: T, /) -> None:
        self._alive()
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        self._alive()
        head = self._head
        if head is None:
            raise IndexError("pop_front() from empty Seq")
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return head.value

    def splice(self, other: Seq[T], /) -> None:
        """
        Move all nodes of `other` to the end of this sequence.

        `other` is consumed. Splicing a sequence into itself is rejected.
        """
        self._alive()
        other._alive()
        if other is self:
            raise ValueError("cannot splice a Seq into itself")
        if other._head is not None:
            if self._tail is None:
                self._head = other._head
            else:
                self._tail.next = other._head
            self._tail = other._tail
            self._size += other._size
        other.consume()

    def copy(self) -> Seq[T]:
        """Shallow copy with fresh nodes."""
        self._alive()
        return Seq.from_iterable(self)

    # Queries

    def is_empty(self) -> bool:
        self._alive()
        return self._head is None

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        self._alive()
        return self._size

    def __iter__(self) -> Iterator[T]:
        self._alive()
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        other_seq = typing.cast(Seq[object], other)
        if len(self) != len(other_seq):
            return False
        return all(a == b for a, b in zip(self, other_seq))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._consumed:
            return "Seq(<consumed>)"
        return f"Seq({', '.join(repr(v) for v in self)})"


__all__ = ("Seq",)
