from __future__ import annotations

from kleisli import Seq, fmap, foldl, join, lifted, prod, unit


def neighbours(x: int) -> Seq[int]:
    # zero or more results per input
    return Seq.of(x - 1, x + 1) if x > 0 else Seq()


def main() -> None:
    xs = Seq.of(0, 1, 2, 3)

    print(prod(neighbours, xs.copy()))                # Seq(0, 2, 1, 3, 2, 4)
    print(join(Seq.of(unit("a"), Seq.of("b", "c"))))  # Seq('a', 'b', 'c')
    print(fmap(str, xs))                              # Seq('0', '1', '2', '3')
    print(foldl(lambda acc, x: acc + x, xs, 0))       # 6

    # two hops through the list monad
    two_hops = prod(neighbours, prod(neighbours, xs.copy()))
    print(two_hops)

    # bind is associative: the same hops as one arrow
    print(prod(lambda y: prod(neighbours, neighbours(y)), xs.copy()) == two_hops)

    square = lifted(lambda x: x * x)
    print(foldl(lambda acc, x: acc + x, prod(square, xs), 0))  # 14


if __name__ == "__main__":
    main()
