"""
Source - restartable factory of Seq
===================================

A Source holds no cursor state. Each sequence() call starts a fresh,
independent traversal from the beginning.
"""

from __future__ import annotations

from ..seq import Seq


class Source[T]:
    """
    Multi-pass description of a sequence.

    Also a Python iterable: ``for x in source`` walks a fresh sequence().
    """

    __slots__ = ()

    def sequence(self) -> Seq[T]:
        raise NotImplementedError

    def __iter__(self) -> Seq[T]:
        return self.sequence()


__all__ = ("Source",)
