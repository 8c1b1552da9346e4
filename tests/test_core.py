from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from kleisli import (
    ConsumedSequenceError,
    Seq,
    check_laws,
    fmap,
    foldl,
    join,
    left_identity,
    lifted,
    prod,
    unit,
    unit_probe,
)


def test_unit_wraps_single_value():
    assert list(unit(7)) == [7]
    assert unit_probe(7) == unit(7)
    assert unit(7) is not unit(7)


def test_prod_concatenates_in_input_order():
    def twice(x: int) -> Seq[int]:
        return Seq.of(x, x)

    assert list(prod(twice, Seq.of(1, 2, 3))) == [1, 1, 2, 2, 3, 3]


def test_prod_can_drop_and_grow():
    def evens_repeated(x: int) -> Seq[int]:
        return Seq.from_iterable([x] * x) if x % 2 == 0 else Seq()

    assert list(prod(evens_repeated, Seq.of(1, 2, 3, 4))) == [2, 2, 4, 4, 4, 4]


def test_prod_empty_input_never_calls_f():
    calls: list[int] = []

    def spy(x: int) -> Seq[int]:
        calls.append(x)
        return unit(x)

    assert prod(spy, Seq()).is_empty()
    assert calls == []


def test_prod_single_element_calls_f_once():
    calls: list[int] = []

    def spy(x: int) -> Seq[int]:
        calls.append(x)
        return unit(x + 1)

    assert prod(spy, unit(41)) == unit(42)
    assert calls == [41]


def test_prod_consumes_input():
    xs = Seq.of(1, 2)
    prod(unit, xs)
    assert xs.consumed
    with pytest.raises(ConsumedSequenceError):
        prod(unit, xs)


def test_prod_rejects_non_seq_result():
    xs = Seq.of(1)
    with pytest.raises(TypeError):
        prod(lambda x: [x], xs)  # type: ignore[arg-type, return-value]
    assert xs.consumed


def test_prod_is_not_recursive():
    xs = Seq.from_iterable(range(100_000))
    assert len(prod(unit, xs)) == 100_000


def test_join_flattens_one_level():
    xss = Seq.of(Seq.of(1, 2), Seq(), Seq.of(3))
    assert list(join(xss)) == [1, 2, 3]
    assert xss.consumed


def test_prod_with_constant_arrow_keeps_captured_seq():
    pivot = unit(7)
    assert list(prod(lambda x: pivot, Seq.of(1, 2))) == [7, 7]
    assert not pivot.consumed
    assert list(pivot) == [7]


def test_join_repeated_inner_seq():
    inner = Seq.of(1, 2)
    assert list(join(Seq.of(inner, inner))) == [1, 2, 1, 2]
    assert list(inner) == [1, 2]


def test_left_identity_with_constant_arrow():
    pivot = Seq.of(7, 8)
    assert left_identity(lambda x: pivot, 1)
    assert check_laws(Seq.of(1, 2, 3), lambda x: pivot, lambda x: pivot).holds


def test_fmap_keeps_input():
    xs = Seq.of(1, 2, 3)
    assert list(fmap(str, xs)) == ["1", "2", "3"]
    assert list(xs) == [1, 2, 3]


@given(st.lists(st.integers()))
def test_fmap_matches_elementwise_map(items: list[int]):
    def f(x: int) -> int:
        return 3 * x - 1

    assert list(fmap(f, Seq.from_iterable(items))) == [f(x) for x in items]


@given(st.integers(min_value=0, max_value=500))
def test_foldl_sum(n: int):
    xs = Seq.from_iterable(range(n))
    assert foldl(lambda acc, x: acc + x, xs, 0) == n * (n - 1) // 2


def test_foldl_is_left_to_right():
    xs = Seq.of("a", "b", "c")
    assert foldl(lambda acc, x: acc + x, xs, "") == "abc"
    assert foldl(lambda acc, x: f"({acc}{x})", xs, "") == "(((a)b)c)"


def test_lifted():
    square = lifted(lambda x: x * x)
    assert square(3) == unit(9)
    assert list(prod(square, Seq.of(1, 2, 3))) == [1, 4, 9]
