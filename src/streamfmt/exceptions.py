"""Exception hierarchy for streamfmt."""

from __future__ import annotations


class StreamFmtError(Exception):
    """Base exception for all streamfmt errors."""


class UnbalancedStructureError(StreamFmtError):
    """Raised when begin/end events do not pair up.

    Signalled by an end-event with no open container, or by a final read
    while containers are still open.
    """

    def __init__(self, message: str, depth: int = 0) -> None:
        super().__init__(message)
        self.depth = depth


class MismatchedContainerError(UnbalancedStructureError):
    """An end-event closed a container of the other kind (``]`` for ``{``)."""

    def __init__(self, expected: str, actual: str, depth: int = 0) -> None:
        super().__init__(
            f"Cannot close {actual} at depth {depth}: innermost open container is {expected}",
            depth=depth,
        )
        self.expected = expected
        self.actual = actual


class EventFormatError(StreamFmtError):
    """Recorded event input could not be parsed."""

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


__all__ = [
    "StreamFmtError",
    "UnbalancedStructureError",
    "MismatchedContainerError",
    "EventFormatError",
]
