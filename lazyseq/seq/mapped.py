"""Mapped sequence

Applies a transform lazily, once per consumed element."""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Function
from .base import Seq


@dataclass(slots=True, eq=False)
class MappedSeq[T, R](Seq[R]):
    """Yields transform(element) for each element of inner, same order and count."""

    inner: Seq[T]
    transform: Function[T, R]

    def has_more(self) -> bool:
        return self.inner.has_more()

    def next(self) -> R:
        if not self.inner.has_more():
            raise self._exhausted()
        return self.transform(self.inner.next())


__all__ = ("MappedSeq",)
