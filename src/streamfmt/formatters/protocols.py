"""Event writer protocol: the contract collaborators drive documents through.

Tokens are opaque pre-rendered text; any quoting or number formatting
belongs to the caller.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IEventWriter(Protocol):
    """Protocol for chainable structural-event writers."""

    def begin_document(self) -> IEventWriter:
        ...

    def end_document(self) -> IEventWriter:
        ...

    def begin_object(self, name: str) -> IEventWriter:
        ...

    def begin_array(self, name: str) -> IEventWriter:
        ...

    def end_object(self) -> IEventWriter:
        ...

    def end_array(self) -> IEventWriter:
        ...

    def key_value(self, key: str, value: str) -> IEventWriter:
        ...

    def element(self, value: str) -> IEventWriter:
        ...

    def getvalue(self) -> str:
        """Return the finished document text."""
        ...


__all__ = ["IEventWriter"]
