"""streamfmt: render structural event streams as pretty or compact JSON-like text.

Usage::

    from streamfmt import JsonWriter

    writer = JsonWriter()
    writer.begin_document().begin_array("foo").element("1").element("2")
    writer.end_array().end_document()
    print(writer.getvalue())
"""

from __future__ import annotations

from streamfmt.core.config import AppSettings, ObservabilityConfig, WriterConfig
from streamfmt.core.types import ContainerKind, CursorState
from streamfmt.exceptions import (
    EventFormatError,
    MismatchedContainerError,
    StreamFmtError,
    UnbalancedStructureError,
)
from streamfmt.formatters import IEventWriter, JsonWriter
from streamfmt.replay import Event, EventKind, load_events, render_events, replay_events

__all__ = [
    "AppSettings",
    "WriterConfig",
    "ObservabilityConfig",
    "ContainerKind",
    "CursorState",
    "StreamFmtError",
    "UnbalancedStructureError",
    "MismatchedContainerError",
    "EventFormatError",
    "IEventWriter",
    "JsonWriter",
    "Event",
    "EventKind",
    "load_events",
    "render_events",
    "replay_events",
]
