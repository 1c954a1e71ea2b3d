"""Concatenated sequence

Drains first, then second."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Seq


@dataclass(slots=True, eq=False)
class ConcatSeq[T](Seq[T]):
    """All of first's elements followed by all of second's."""

    first: Seq[T]
    second: Seq[T]

    def has_more(self) -> bool:
        if self.first.has_more():
            return True
        return self.second.has_more()

    def next(self) -> T:
        if self.first.has_more():
            return self.first.next()
        if not self.second.has_more():
            raise self._exhausted()
        return self.second.next()


__all__ = ("ConcatSeq",)
