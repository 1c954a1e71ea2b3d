"""
Terminal folds
==============

Walk a sequence to exhaustion. A Seq argument is consumed from its
current position; a Source is opened fresh for every call.
"""

from __future__ import annotations

import logging

from .._types import BiConsumer, BiFunction, Consumer
from ..seq import Seq
from ..source import Source
from ._resolve import open_seq

logger = logging.getLogger(__name__)


def reduce[T, U](
    target: Seq[T] | Source[T],
    combiner: BiFunction[U, T, U],
    *,
    initial: U,
) -> U:
    """
    Left fold: combiner(...combiner(combiner(initial, e0), e1)..., en).

    Strictly sequential, so combiner need not be associative or commutative.
    Empty input returns initial unchanged.
    """
    seq = open_seq(target, caller="reduce")
    acc = initial
    count = 0
    while seq.has_more():
        acc = combiner(acc, seq.next())
        count += 1
    logger.debug("Reduced %d elements from %s", count, type(seq).__name__)
    return acc


def for_each[T](target: Seq[T] | Source[T], consumer: Consumer[T]) -> None:
    """Call consumer on every element, in order."""
    seq = open_seq(target, caller="for_each")
    count = 0
    while seq.has_more():
        consumer(seq.next())
        count += 1
    logger.debug("Consumed %d elements from %s", count, type(seq).__name__)


def for_each_indexed[T](target: Seq[T] | Source[T], consumer: BiConsumer[int, T]) -> None:
    """Like for_each, with the zero-based position as first argument."""
    seq = open_seq(target, caller="for_each_indexed")
    index = 0
    while seq.has_more():
        consumer(index, seq.next())
        index += 1
    logger.debug("Consumed %d elements from %s", index, type(seq).__name__)


__all__ = ("for_each", "for_each_indexed", "reduce")
