from __future__ import annotations

from ..seq import Seq
from ..source import Source


def unsupported_target(caller: str, target: object) -> TypeError:
    return TypeError(f"{caller}(): expected Seq or Source, got {type(target).__name__}")


def open_seq[T](target: Seq[T] | Source[T], *, caller: str) -> Seq[T]:
    """Seq as is, Source opened for a fresh traversal."""
    match target:
        case Seq():
            return target
        case Source():
            return target.sequence()
        case _:
            raise unsupported_target(caller, target)


__all__ = ("open_seq", "unsupported_target")
