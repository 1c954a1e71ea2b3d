"""
Filtered sequence
=================

Answering has_more() requires pulling from the inner sequence until a
matching element shows up. That element is parked in a one-slot buffer
until next() hands it out.

Buffer invariant: full iff the last has_more() returned True and next()
has not consumed it yet.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

from .._types import Predicate
from .base import Seq


@dataclass(slots=True, eq=False)
class FilteredSeq[T](Seq[T]):
    """
    Yields only the elements of inner that satisfy predicate.

    The predicate is called exactly once per inner element, in inner order.
    Unlike a null-checked cache, the buffer holds None and other falsy
    values correctly.
    """

    inner: Seq[T]
    predicate: Predicate[T]
    _buffered: bool = field(default=False, init=False, repr=False)
    _value: typing.Any = field(default=None, init=False, repr=False)

    def has_more(self) -> bool:
        while not self._buffered and self.inner.has_more():
            candidate = self.inner.next()
            if self.predicate(candidate):
                self._value = candidate
                self._buffered = True
        return self._buffered

    def next(self) -> T:
        if not self.has_more():
            raise self._exhausted()
        value: T = self._value
        self._value = None
        self._buffered = False
        return value


__all__ = ("FilteredSeq",)
