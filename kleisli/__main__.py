"""Run the demo: `python -m kleisli`."""

from __future__ import annotations

import sys

from .arithmetic import Width, run_demo
from .config import DemoConfig
from .laws import check_laws
from .seq import Seq, lifted


def main(config: DemoConfig | None = None) -> int:
    """
    Check the monad laws over 0..size-1, then run the arithmetic checks.

    Failures are only reported in the output. The exit status is 0 unless
    config.strict is set.
    """
    config = config or DemoConfig()
    width = Width(config.bits)
    xs = Seq.from_iterable(range(config.size))

    laws = check_laws(xs, lifted(width.square), lifted(width.double))
    demo = run_demo(xs, width)

    for line in laws.log.combine(demo.log):
        print(line)

    if config.strict and not (laws.holds and demo.passed):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
