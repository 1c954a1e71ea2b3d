"""Leaf cursors

Sequences that read from a value or a collection rather than another Seq."""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass, field

from .._errors import IllegalStateError, UnsupportedOperationError
from .base import Seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EmptySeq(Seq[typing.Any]):
    """Stateless sequence with no elements. Use the EMPTY constant."""

    def has_more(self) -> bool:
        return False

    def next(self) -> typing.Never:
        raise self._exhausted()


EMPTY: EmptySeq = EmptySeq()


@dataclass(slots=True, eq=False)
class SingleSeq[T](Seq[T]):
    """Yields one value, once."""

    value: T
    _consumed: bool = field(default=False, init=False, repr=False)

    def has_more(self) -> bool:
        return not self._consumed

    def next(self) -> T:
        if self._consumed:
            raise self._exhausted()
        self._consumed = True
        return self.value


@dataclass(slots=True, eq=False)
class ArraySeq[T](Seq[T]):
    """
    Yields the elements of an indexable collection in order.

    The collection is referenced, not copied: later mutation of it is
    visible to the cursor.
    """

    items: Sequence[T]
    _index: int = field(default=0, init=False, repr=False)
    # Index of the element returned by the last next(), -1 when there is none
    _last: int = field(default=-1, init=False, repr=False)

    def has_more(self) -> bool:
        return self._index < len(self.items)

    def next(self) -> T:
        if not self.has_more():
            raise self._exhausted()
        value = self.items[self._index]
        self._last = self._index
        self._index += 1
        return value

    def remove(self) -> None:
        """
        Delete the element returned by the last next() from the backing store.

        The store shifts left, so the cursor steps back by one and the
        following element is not skipped.
        """
        if not isinstance(self.items, MutableSequence):
            raise UnsupportedOperationError("remove", type(self).__name__)
        if self._last < 0:
            raise IllegalStateError("remove() requires a preceding next()")
        del self.items[self._last]
        logger.debug("Removed index %d from backing store", self._last)
        self._index = self._last
        self._last = -1


_NOTHING: typing.Any = object()


@dataclass(slots=True, eq=False)
class IterSeq[T](Seq[T]):
    """
    Adapter over a Python iterator.

    Python iterators cannot answer "is there more" without pulling, so one
    element is buffered ahead, same as FilteredSeq.
    """

    iterator: Iterator[T]
    _buffer: typing.Any = field(default=_NOTHING, init=False, repr=False)

    def has_more(self) -> bool:
        if self._buffer is _NOTHING:
            self._buffer = next(self.iterator, _NOTHING)
        return self._buffer is not _NOTHING

    def next(self) -> T:
        if not self.has_more():
            raise self._exhausted()
        value: T = self._buffer
        self._buffer = _NOTHING
        return value


__all__ = ("EMPTY", "ArraySeq", "EmptySeq", "IterSeq", "SingleSeq")
