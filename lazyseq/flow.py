"""
Fluent builder over Source.

Each method wraps the current source in another node and returns a new
Flow; nothing runs until a terminal method (collect, reduce, for_each)
or iteration.

Example:
    flow([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).map(str).collect()
    # ["2", "4"]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ._types import BiFunction, Consumer, Function, Predicate
from .ops import collect, for_each, reduce
from .seq import Seq
from .source import (
    ArraySource,
    ConcatSource,
    FilteredSource,
    FlattenedSource,
    IterableSource,
    MappedSource,
    Source,
)


def _as_source[T](value: Flow[T] | Source[T] | Iterable[T]) -> Source[T]:
    match value:
        case Flow():
            return value.source
        case Source():
            return value
        case Seq():
            # One-shot cursor cannot back a restartable Source
            raise TypeError("flow(): Seq is single-pass, pass a Source or a collection")
        case Sequence():
            return ArraySource(value)
        case _:
            return IterableSource(value)


@dataclass(frozen=True, slots=True)
class Flow[T](Source[T]):
    """
    Fluent builder for chaining combinators over a Source.

    A Flow is itself a Source, so every ops function (map, collect, ...)
    accepts it directly.
    """

    source: Source[T]

    def map[R](self, transform: Function[T, R]) -> Flow[R]:
        return Flow(MappedSource(self.source, transform))

    def filter(self, predicate: Predicate[T]) -> Flow[T]:
        return Flow(FilteredSource(self.source, predicate))

    def concat(self, other: Flow[T] | Source[T] | Iterable[T]) -> Flow[T]:
        return Flow(ConcatSource(self.source, _as_source(other)))

    def flatten[U](self: Flow[Source[U] | Iterable[U]]) -> Flow[U]:
        """Inner elements may be Sources, Flows or plain collections."""
        return Flow(FlattenedSource(MappedSource(self.source, _as_source)))

    def flat_map[R](self, transform: Function[T, Source[R] | Iterable[R]]) -> Flow[R]:
        """map then flatten; transform may return a Source or any collection."""
        def to_source(value: T) -> Source[R]:
            return _as_source(transform(value))
        return Flow(FlattenedSource(MappedSource(self.source, to_source)))

    def reduce[U](self, combiner: BiFunction[U, T, U], *, initial: U) -> U:
        return reduce(self.source, combiner, initial=initial)

    def for_each(self, consumer: Consumer[T]) -> None:
        for_each(self.source, consumer)

    def collect(self) -> list[T]:
        return collect(self.source)

    def sequence(self) -> Seq[T]:
        return self.source.sequence()


def flow[T](value: Source[T] | Iterable[T]) -> Flow[T]:
    """
    Start a Flow.

    Accepts a Source, an indexable collection (viewed without copying) or
    any other iterable.
    """
    return Flow(_as_source(value))


__all__ = ("Flow", "flow")
