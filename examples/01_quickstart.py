from __future__ import annotations

import operator

import lazyseq as ls
from lazyseq import flow


def main() -> None:
    print("\n== 01_quickstart: cursors, sources, flow ==")

    # One-shot cursor: drained once
    evens = ls.filter(ls.array_seq([1, 2, 3, 4, 5, 6]), lambda x: x % 2 == 0)
    print(ls.collect(evens))
    print(ls.collect(evens))  # [] - already consumed

    # Restartable source: every traversal starts over
    squares = ls.map(ls.array_source(range(1, 6)), lambda x: x * x)
    print(ls.collect(squares), ls.reduce(squares, operator.add, initial=0))

    # Same thing, fluent
    total = flow(range(1, 6)).map(lambda x: x * x).reduce(operator.add, initial=0)
    print(total)


if __name__ == "__main__":
    main()
