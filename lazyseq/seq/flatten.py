"""
Flattened sequence
==================

Выравнивание: Seq[Seq[T]] -> Seq[T].

The cursor starts on EMPTY and hops to the next inner sequence whenever
the current one runs dry. Empty inner sequences are skipped on the way.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import Seq
from .basic import EMPTY


def _empty_cursor[T]() -> Seq[T]:
    return EMPTY


@dataclass(slots=True, eq=False)
class FlattenedSeq[T](Seq[T]):
    """
    Concatenation, in outer order, of every inner sequence's elements.

    After has_more() returns True the current cursor has an element ready;
    after it returns False both outer and the current cursor are exhausted.
    """

    outer: Seq[Seq[T]]
    _current: Seq[T] = field(default_factory=_empty_cursor, init=False, repr=False)

    def has_more(self) -> bool:
        while not self._current.has_more() and self.outer.has_more():
            self._current = self.outer.next()
        return self._current.has_more()

    def next(self) -> T:
        if not self.has_more():
            raise self._exhausted()
        return self._current.next()


__all__ = ("FlattenedSeq",)
