from .build import (
    array_seq,
    array_source,
    empty_seq,
    empty_source,
    iter_seq,
    iterable_source,
    single_seq,
    single_source,
)
from .collect import collect
from .fold import for_each, for_each_indexed, reduce
from .transform import concat, filter, flatten, map

__all__ = (
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
)
