"""Replay recorded structural events against a writer.

Events are stored as a JSON array where each entry is either a list
(``["key_value", "goo", "\\"hoo\\""]``) or a mapping
(``{"kind": "key_value", "args": ["goo", "\\"hoo\\""]}``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from streamfmt.core.config import WriterConfig
from streamfmt.exceptions import EventFormatError
from streamfmt.formatters.json_writer import JsonWriter
from streamfmt.formatters.protocols import IEventWriter

log = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Names of the writer's event methods."""

    BEGIN_DOCUMENT = "begin_document"
    END_DOCUMENT = "end_document"
    BEGIN_OBJECT = "begin_object"
    BEGIN_ARRAY = "begin_array"
    END_OBJECT = "end_object"
    END_ARRAY = "end_array"
    KEY_VALUE = "key_value"
    ELEMENT = "element"


_ARITY: dict[EventKind, int] = {
    EventKind.BEGIN_DOCUMENT: 0,
    EventKind.END_DOCUMENT: 0,
    EventKind.BEGIN_OBJECT: 1,
    EventKind.BEGIN_ARRAY: 1,
    EventKind.END_OBJECT: 0,
    EventKind.END_ARRAY: 0,
    EventKind.KEY_VALUE: 2,
    EventKind.ELEMENT: 1,
}

_OPENERS = frozenset({EventKind.BEGIN_DOCUMENT, EventKind.BEGIN_OBJECT, EventKind.BEGIN_ARRAY})
_CLOSERS = frozenset({EventKind.END_DOCUMENT, EventKind.END_OBJECT, EventKind.END_ARRAY})


class Event(BaseModel):
    """One recorded call against the event API."""

    kind: EventKind
    args: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if not data:
                raise ValueError("event list must start with the event name")
            return {"kind": data[0], "args": list(data[1:])}
        return data

    @model_validator(mode="after")
    def _check_arity(self) -> Event:
        expected = _ARITY[self.kind]
        if len(self.args) != expected:
            raise ValueError(
                f"{self.kind.value} takes {expected} argument(s), got {len(self.args)}"
            )
        return self

    @property
    def depth_delta(self) -> int:
        if self.kind in _OPENERS:
            return 1
        if self.kind in _CLOSERS:
            return -1
        return 0

    def apply(self, writer: IEventWriter) -> IEventWriter:
        """Call the matching writer method with this event's tokens."""
        return getattr(writer, self.kind.value)(*self.args)


def replay_events(writer: IEventWriter, events: Iterable[Event]) -> IEventWriter:
    """Apply *events* to *writer* in order and return the writer."""
    count = 0
    for event in events:
        event.apply(writer)
        count += 1
    log.debug("Replayed %d events", count)
    return writer


def render_events(events: Iterable[Event], config: Optional[WriterConfig] = None) -> str:
    """Replay *events* into a fresh ``JsonWriter`` and return the document."""
    writer = JsonWriter(config)
    replay_events(writer, events)
    return writer.getvalue()


def max_depth(events: Iterable[Event]) -> int:
    """Deepest nesting reached by *events* (ignores imbalance)."""
    depth = deepest = 0
    for event in events:
        depth += event.depth_delta
        deepest = max(deepest, depth)
    return deepest


def parse_events(raw: Any, source: str = "") -> list[Event]:
    """Validate decoded JSON into a list of ``Event`` models."""
    if not isinstance(raw, list):
        raise EventFormatError(f"Expected a JSON array of events in {source or 'input'}", source)
    events: list[Event] = []
    for position, item in enumerate(raw):
        try:
            events.append(Event.model_validate(item))
        except ValidationError as exc:
            raise EventFormatError(f"Invalid event #{position}: {exc}", source) from exc
    return events


def load_events(path: Path) -> list[Event]:
    """Read and validate a JSON event file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EventFormatError(f"Cannot read {path}: {exc}", str(path)) from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EventFormatError(f"{path} is not valid JSON: {exc}", str(path)) from exc
    return parse_events(raw, str(path))
