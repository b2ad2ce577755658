"""Exception hierarchy for vphys_core."""

from __future__ import annotations


class VphysCoreError(Exception):
    """Base class for every error raised by vphys_core."""


class MalformedDocument(VphysCoreError):
    """The KV3 text is not syntactically valid."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class MalformedEncoding(VphysCoreError):
    """A byte blob does not decode to the expected records."""


class IndexOutOfRange(VphysCoreError, IndexError):
    """A vertex or half-edge index points past the end of its array."""

    def __init__(self, what: str, index: int, bound: int) -> None:
        super().__init__(f"{what} index {index} out of range (size {bound})")
        self.index = index
        self.bound = bound


class LoopBoundExceeded(VphysCoreError):
    """A hull face's half-edge chain never returned to its start edge."""

    def __init__(self, start_edge: int, steps: int) -> None:
        super().__init__(
            f"face starting at half-edge {start_edge} did not close after {steps} steps"
        )
        self.start_edge = start_edge
        self.steps = steps
