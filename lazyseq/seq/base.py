"""
Seq - single-pass cursor
========================

Base class for every cursor in the library. Subclasses implement
has_more() and next(); everything else is derived from those two.

Contract:
- has_more() is idempotent and never raises ExhaustedError
- next() consumes exactly one element or raises ExhaustedError
- a failed next() does not change state, repeated calls fail the same way
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import ExhaustedError, UnsupportedOperationError


class Seq[T]:
    """
    Single-pass, stateful cursor over an ordered series of T.

    Not restartable and not thread-safe: one consumer at a time.
    Also a Python iterator, so it can be drained with ``for`` or ``list()``.
    """

    __slots__ = ()

    def has_more(self) -> bool:
        raise NotImplementedError

    def next(self) -> T:
        raise NotImplementedError

    def remove(self) -> None:
        """Remove the last returned element from the backing store."""
        raise UnsupportedOperationError("remove", type(self).__name__)

    def try_next(self) -> Result[T, ExhaustedError]:
        """
        Non-raising pull.

        Ok(element) if one was available, Error(ExhaustedError) otherwise.
        """
        if not self.has_more():
            return Error(self._exhausted())
        return Ok(self.next())

    def _exhausted(self) -> ExhaustedError:
        return ExhaustedError(type(self).__name__)

    # Python iterator protocol

    def __iter__(self) -> Seq[T]:
        return self

    def __next__(self) -> T:
        if not self.has_more():
            raise StopIteration
        return self.next()


__all__ = ("Seq",)
