"""Element-level cursors (single-pass)."""

from .base import Seq
from .basic import EMPTY, ArraySeq, EmptySeq, IterSeq, SingleSeq
from .concat import ConcatSeq
from .filtered import FilteredSeq
from .flatten import FlattenedSeq
from .mapped import MappedSeq

__all__ = (
    "Seq",
    # Leaves
    "EMPTY",
    "EmptySeq",
    "SingleSeq",
    "ArraySeq",
    "IterSeq",
    # Derived
    "MappedSeq",
    "FilteredSeq",
    "ConcatSeq",
    "FlattenedSeq",
)
