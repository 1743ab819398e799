"""
errors.py — Sorting Error Kinds
================================
Every failure the engine reports is a SortingError subclass with a
stable `kind` string (what the UI switches on) and an optional context
string (what the UI shows).

    InvalidArraySize      size <= 0, raised by the array generators
    InvalidRange          low > high, raised by the array generators
    AlgorithmNotSupported unknown algorithm key
    SortInProgress        the run gate is already held
    SortStopped           a run was stopped cooperatively; carries the
                          partial steps for diagnostics
    PersistenceFailure    the step store could not save / load

None of these are fatal.  The caller retries, adjusts its input, or
resets.
"""

from typing import List, Optional


class SortingError(Exception):
    kind: str = "sorting_error"
    default_message: str = "Sorting failed"

    def __init__(self, context: Optional[str] = None):
        self.context = context
        message = self.default_message
        if context:
            message = f"{message}: {context}"
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "error": str(self), "context": self.context}


class InvalidArraySize(SortingError, ValueError):
    kind = "invalid_array_size"
    default_message = "Array size must be greater than 0"


class InvalidRange(SortingError, ValueError):
    kind = "invalid_range"
    default_message = "Minimum value cannot exceed maximum value"


class AlgorithmNotSupported(SortingError, ValueError):
    kind = "algorithm_not_supported"
    default_message = "Unsupported sorting algorithm"


class SortInProgress(SortingError):
    kind = "sort_in_progress"
    default_message = "A sort is already in progress"


class SortStopped(SortingError):
    kind = "sort_stopped"
    default_message = "Sorting was stopped"

    def __init__(self, steps: Optional[List] = None, context: Optional[str] = None):
        super().__init__(context)
        self.steps = list(steps or [])


class PersistenceFailure(SortingError):
    kind = "persistence_failure"
    default_message = "Step store error"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
