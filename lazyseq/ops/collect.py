"""Materialization

Drain a sequence into a fresh list."""

from __future__ import annotations

import logging

from ..seq import Seq
from ..source import Source
from ._resolve import open_seq

logger = logging.getLogger(__name__)


def collect[T](target: Seq[T] | Source[T]) -> list[T]:
    """
    Pull every remaining element into a new list, in order.

    Each call on a Source returns an independent list.
    """
    seq = open_seq(target, caller="collect")
    result: list[T] = []
    while seq.has_more():
        result.append(seq.next())
    logger.debug("Collected %d elements from %s", len(result), type(seq).__name__)
    return result


__all__ = ("collect",)
