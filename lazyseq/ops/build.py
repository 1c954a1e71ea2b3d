"""Constructors

Leaf sequences and sources, each as a one-shot Seq and a restartable Source."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence

from ..seq import EMPTY, ArraySeq, IterSeq, Seq, SingleSeq
from ..source import ArraySource, EmptySource, IterableSource, SingleSource, Source

_EMPTY_SOURCE = EmptySource()


def empty_seq[T]() -> Seq[T]:
    """Sequence with no elements. Always the same stateless object."""
    return typing.cast(Seq[T], EMPTY)


def single_seq[T](value: T) -> Seq[T]:
    return SingleSeq(value)


def array_seq[T](items: Sequence[T]) -> Seq[T]:
    """Cursor over an indexable collection. The collection is not copied."""
    return ArraySeq(items)


def iter_seq[T](iterable: Iterable[T]) -> Seq[T]:
    return IterSeq(iter(iterable))


def empty_source[T]() -> Source[T]:
    return typing.cast(Source[T], _EMPTY_SOURCE)


def single_source[T](value: T) -> Source[T]:
    return SingleSource(value)


def array_source[T](items: Sequence[T]) -> Source[T]:
    return ArraySource(items)


def iterable_source[T](iterable: Iterable[T]) -> Source[T]:
    """Restartable only if the iterable itself can be iterated more than once."""
    return IterableSource(iterable)


__all__ = (
    "empty_seq",
    "single_seq",
    "array_seq",
    "iter_seq",
    "empty_source",
    "single_source",
    "array_source",
    "iterable_source",
)
