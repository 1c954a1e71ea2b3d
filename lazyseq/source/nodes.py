"""
Source nodes
============

Each node is an immutable description that builds its cursor on demand:
leaves read from a value or a collection, derived nodes obtain fresh
cursors from the sources they wrap and put the matching Seq around them.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .._types import Function, Predicate
from ..seq import (
    EMPTY,
    ArraySeq,
    ConcatSeq,
    FilteredSeq,
    FlattenedSeq,
    IterSeq,
    MappedSeq,
    Seq,
    SingleSeq,
)
from .base import Source


# ============================================================================
# Leaves
# ============================================================================


@dataclass(frozen=True, slots=True)
class EmptySource(Source[typing.Any]):
    def sequence(self) -> Seq[typing.Any]:
        return EMPTY


@dataclass(frozen=True, slots=True)
class SingleSource[T](Source[T]):
    value: T

    def sequence(self) -> Seq[T]:
        return SingleSeq(self.value)


@dataclass(frozen=True, slots=True)
class ArraySource[T](Source[T]):
    """
    Restartable view of an indexable collection.

    Not a snapshot: mutation of items between sequence() calls shows up
    in later traversals.
    """

    items: Sequence[T]

    def sequence(self) -> Seq[T]:
        return ArraySeq(self.items)


@dataclass(frozen=True, slots=True)
class IterableSource[T](Source[T]):
    """
    Source over any Python iterable.

    Restartable only if the iterable is (lists, ranges, dicts, other
    sources). A generator is drained by the first traversal.
    """

    iterable: Iterable[T]

    def sequence(self) -> Seq[T]:
        return IterSeq(iter(self.iterable))


# ============================================================================
# Derived
# ============================================================================


@dataclass(frozen=True, slots=True)
class MappedSource[T, R](Source[R]):
    inner: Source[T]
    transform: Function[T, R]

    def sequence(self) -> Seq[R]:
        return MappedSeq(self.inner.sequence(), self.transform)


@dataclass(frozen=True, slots=True)
class FilteredSource[T](Source[T]):
    inner: Source[T]
    predicate: Predicate[T]

    def sequence(self) -> Seq[T]:
        return FilteredSeq(self.inner.sequence(), self.predicate)


@dataclass(frozen=True, slots=True)
class ConcatSource[T](Source[T]):
    first: Source[T]
    second: Source[T]

    def sequence(self) -> Seq[T]:
        return ConcatSeq(self.first.sequence(), self.second.sequence())


def _open[T](source: Source[T]) -> Seq[T]:
    return source.sequence()


@dataclass(frozen=True, slots=True)
class FlattenedSource[T](Source[T]):
    """Inner sources are opened lazily, when the outer cursor reaches them."""

    outer: Source[Source[T]]

    def sequence(self) -> Seq[T]:
        return FlattenedSeq(MappedSeq(self.outer.sequence(), _open))


__all__ = (
    "EmptySource",
    "SingleSource",
    "ArraySource",
    "IterableSource",
    "MappedSource",
    "FilteredSource",
    "ConcatSource",
    "FlattenedSource",
)
