"""
Transform combinators
=====================

map / filter / concat / flatten, overloaded on the argument kind:
a Seq in gives a Seq out, a Source in gives a Source out. Nothing is
evaluated here, only wrapped.
"""

from __future__ import annotations

import typing

from .._types import Function, Predicate
from ..seq import ConcatSeq, FilteredSeq, FlattenedSeq, MappedSeq, Seq
from ..source import ConcatSource, FilteredSource, FlattenedSource, MappedSource, Source
from ._resolve import unsupported_target


@typing.overload
def map[T, R](target: Seq[T], transform: Function[T, R]) -> Seq[R]: ...
@typing.overload
def map[T, R](target: Source[T], transform: Function[T, R]) -> Source[R]: ...
def map[T, R](target: Seq[T] | Source[T], transform: Function[T, R]) -> Seq[R] | Source[R]:
    """Apply transform to every element, lazily, preserving order and count."""
    match target:
        case Seq():
            return MappedSeq(target, transform)
        case Source():
            return MappedSource(target, transform)
        case _:
            raise unsupported_target("map", target)


@typing.overload
def filter[T](target: Seq[T], predicate: Predicate[T]) -> Seq[T]: ...
@typing.overload
def filter[T](target: Source[T], predicate: Predicate[T]) -> Source[T]: ...
def filter[T](target: Seq[T] | Source[T], predicate: Predicate[T]) -> Seq[T] | Source[T]:
    """Keep only elements satisfying predicate, in original order."""
    match target:
        case Seq():
            return FilteredSeq(target, predicate)
        case Source():
            return FilteredSource(target, predicate)
        case _:
            raise unsupported_target("filter", target)


@typing.overload
def concat[T](first: Seq[T], second: Seq[T]) -> Seq[T]: ...
@typing.overload
def concat[T](first: Source[T], second: Source[T]) -> Source[T]: ...
def concat[T](first: Seq[T] | Source[T], second: Seq[T] | Source[T]) -> Seq[T] | Source[T]:
    """
    All of first, then all of second.

    Both arguments must be of the same kind: mixing a one-shot Seq into a
    restartable Source would break the Source's restart guarantee.
    """
    match first, second:
        case Seq(), Seq():
            return ConcatSeq(first, second)
        case Source(), Source():
            return ConcatSource(first, second)
        case _:
            raise TypeError(
                "concat(): expected two Seq or two Source, "
                f"got {type(first).__name__} and {type(second).__name__}"
            )


@typing.overload
def flatten[T](target: Seq[Seq[T]]) -> Seq[T]: ...
@typing.overload
def flatten[T](target: Source[Source[T]]) -> Source[T]: ...
def flatten[T](target: Seq[Seq[T]] | Source[Source[T]]) -> Seq[T] | Source[T]:
    """Concatenate inner sequences in outer order, skipping empty ones."""
    match target:
        case Seq():
            return FlattenedSeq(target)
        case Source():
            return FlattenedSource(target)
        case _:
            raise unsupported_target("flatten", target)


__all__ = ("concat", "filter", "flatten", "map")
