"""Restartable sources (multi-pass)."""

from .base import Source
from .nodes import (
    ArraySource,
    ConcatSource,
    EmptySource,
    FilteredSource,
    FlattenedSource,
    IterableSource,
    MappedSource,
    SingleSource,
)

__all__ = (
    "Source",
    # Leaves
    "EmptySource",
    "SingleSource",
    "ArraySource",
    "IterableSource",
    # Derived
    "MappedSource",
    "FilteredSource",
    "ConcatSource",
    "FlattenedSource",
)
