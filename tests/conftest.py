from __future__ import annotations

from lazyseq import Seq


class Recorder:
    """Callable wrapper that records every argument it is called with."""

    def __init__(self, fn):
        self.fn = fn
        self.calls: list[object] = []

    def __call__(self, value):
        self.calls.append(value)
        return self.fn(value)


def drain(seq: Seq) -> list:
    out = []
    while seq.has_more():
        out.append(seq.next())
    return out
