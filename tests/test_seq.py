from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from kleisli import ConsumedSequenceError, Seq


def test_empty_seq():
    xs: Seq[int] = Seq()
    assert xs.is_empty()
    assert not xs
    assert len(xs) == 0
    assert list(xs) == []


def test_of_preserves_order():
    xs = Seq.of(3, 1, 2)
    assert list(xs) == [3, 1, 2]
    assert len(xs) == 3


def test_pop_front():
    xs = Seq.of("a", "b")
    assert xs.pop_front() == "a"
    assert xs.pop_front() == "b"
    assert xs.is_empty()
    # tail must be reset once the last node is gone
    xs.push_back("c")
    assert list(xs) == ["c"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        Seq().pop_front()


def test_splice_moves_nodes_and_consumes_other():
    xs = Seq.of(1, 2)
    ys = Seq.of(3, 4)
    xs.splice(ys)
    assert list(xs) == [1, 2, 3, 4]
    assert len(xs) == 4
    assert ys.consumed
    with pytest.raises(ConsumedSequenceError):
        len(ys)


def test_splice_into_empty():
    xs: Seq[int] = Seq()
    xs.splice(Seq.of(1))
    xs.push_back(2)
    assert list(xs) == [1, 2]


def test_splice_empty_other():
    xs = Seq.of(1)
    empty: Seq[int] = Seq()
    xs.splice(empty)
    xs.push_back(2)
    assert list(xs) == [1, 2]
    assert empty.consumed


def test_splice_self_rejected():
    xs = Seq.of(1)
    with pytest.raises(ValueError):
        xs.splice(xs)


def test_consumed_seq_is_unusable():
    xs = Seq.of(1, 2)
    xs.consume()
    for use in (xs.is_empty, xs.pop_front, xs.copy, lambda: list(xs), lambda: xs.push_back(3)):
        with pytest.raises(ConsumedSequenceError):
            use()
    assert repr(xs) == "Seq(<consumed>)"


def test_copy_is_independent():
    xs = Seq.of(1, 2)
    ys = xs.copy()
    ys.push_back(3)
    assert list(xs) == [1, 2]
    assert list(ys) == [1, 2, 3]


def test_structural_equality():
    assert Seq.of(1, 2) == Seq.of(1, 2)
    assert Seq.of(1, 2) != Seq.of(2, 1)
    assert Seq.of(1, 2) != Seq.of(1, 2, 3)
    assert Seq() == Seq()
    assert Seq.of(1) != [1]


def test_repr():
    assert repr(Seq.of(1, "a")) == "Seq(1, 'a')"


@given(st.lists(st.integers()))
def test_from_iterable_roundtrips_order(items: list[int]):
    xs = Seq.from_iterable(items)
    assert list(xs) == items
    assert len(xs) == len(items)
