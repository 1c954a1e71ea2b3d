"""
Lazy, composable sequence combinators.

Two abstractions:
- Seq[T]    - single-pass cursor: has_more() / next()
- Source[T] - restartable factory: sequence() gives a fresh Seq

Architecture:
- Transforms (map, filter, concat, flatten) accept a Seq or a Source and
  return the same kind, wrapped lazily
- Terminal operations (reduce, for_each, collect) drain a Seq, or a fresh
  sequence of a Source
- Flow is the fluent sugar over Source
"""

import logging

# Core types
from ._types import BiConsumer, BiFunction, BiPredicate, Consumer, Function, Predicate

# Errors
from ._errors import ExhaustedError, IllegalStateError, UnsupportedOperationError

# Cursors
from . import seq
from .seq import (
    EMPTY,
    ArraySeq,
    ConcatSeq,
    EmptySeq,
    FilteredSeq,
    FlattenedSeq,
    IterSeq,
    MappedSeq,
    Seq,
    SingleSeq,
)

# Sources
from . import source
from .source import (
    ArraySource,
    ConcatSource,
    EmptySource,
    FilteredSource,
    FlattenedSource,
    IterableSource,
    MappedSource,
    SingleSource,
    Source,
)

# Operations
from .ops import (
    array_seq,
    array_source,
    collect,
    concat,
    empty_seq,
    empty_source,
    filter,
    flatten,
    for_each,
    for_each_indexed,
    iter_seq,
    iterable_source,
    map,
    reduce,
    single_seq,
    single_source,
)

# Fluent API
from .flow import Flow, flow

# Logging
from ._logging import setup_logger

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Function",
    "Predicate",
    "Consumer",
    "BiFunction",
    "BiPredicate",
    "BiConsumer",
    # Errors
    "ExhaustedError",
    "IllegalStateError",
    "UnsupportedOperationError",
    # Cursors
    "seq",
    "Seq",
    "EMPTY",
    "EmptySeq",
    "SingleSeq",
    "ArraySeq",
    "IterSeq",
    "MappedSeq",
    "FilteredSeq",
    "ConcatSeq",
    "FlattenedSeq",
    # Sources
    "source",
    "Source",
    "EmptySource",
    "SingleSource",
    "ArraySource",
    "IterableSource",
    "MappedSource",
    "FilteredSource",
    "ConcatSource",
    "FlattenedSource",
    # Constructors
    "empty_seq",
    "single_seq",
    "array_seq",
    "iter_seq",
    "empty_source",
    "single_source",
    "array_source",
    "iterable_source",
    # Transforms
    "map",
    "filter",
    "concat",
    "flatten",
    # Terminal
    "reduce",
    "for_each",
    "for_each_indexed",
    "collect",
    # Fluent
    "Flow",
    "flow",
    # Logging
    "setup_logger",
)
