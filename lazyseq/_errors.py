from __future__ import annotations

class ExhaustedError(Exception):
    """next() was called on a sequence with no elements left."""

    sequence: str

    def __init__(self, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(f"{sequence} is exhausted")

class UnsupportedOperationError(Exception):
    """Operation is not defined for this kind of sequence."""

    operation: str
    sequence: str

    def __init__(self, operation: str, sequence: str) -> None:
        self.operation = operation
        self.sequence = sequence
        super().__init__(f"{sequence} does not support {operation}()")

class IllegalStateError(Exception):
    """Operation is valid for the sequence, but not at its current position."""

    reason: str

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

__all__ = ("ExhaustedError", "IllegalStateError", "UnsupportedOperationError")
