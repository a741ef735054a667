"""Writers rendering structural events to text.

Usage::

    from streamfmt.formatters import JsonWriter

    text = JsonWriter(compact=True).begin_document().key_value("a", "1").end_document().getvalue()
"""

from __future__ import annotations

from streamfmt.formatters.json_writer import JsonWriter
from streamfmt.formatters.protocols import IEventWriter

__all__ = [
    "IEventWriter",
    "JsonWriter",
]
