"""
Core type definitions for lazyseq.

Function shapes used to parameterize the combinators. Any Python callable
with the right arity satisfies them, no wrapper class required.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# One-argument shapes
# ============================================================================

# Function = transform of one value into another
type Function[T, R] = Callable[[T], R]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Consumer = side-effecting sink, result ignored
type Consumer[T] = Callable[[T], None]

# ============================================================================
# Two-argument shapes
# ============================================================================

# BiFunction = (accumulator, element) -> accumulator in reduce
type BiFunction[T, U, R] = Callable[[T, U], R]

type BiPredicate[T, U] = Callable[[T, U], bool]

type BiConsumer[T, U] = Callable[[T, U], None]

__all__ = (
    "Function",
    "Predicate",
    "Consumer",
    "BiFunction",
    "BiPredicate",
    "BiConsumer",
)
