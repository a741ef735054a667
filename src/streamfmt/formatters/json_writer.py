"""Event-driven writer for JSON-like documents.

The writer never inspects the tokens it is given: keys, values and elements
arrive pre-rendered and are copied into the buffer verbatim.  Its only job is
punctuation and layout::

    writer = JsonWriter()
    writer.begin_document().begin_object("foo").key_value("goo", '"hoo"')
    writer.end_object().end_document()
    writer.getvalue()
    # '{\\n  foo: {\\n    goo: "hoo"\\n  }\\n}\\n'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from streamfmt.core.config import WriterConfig
from streamfmt.core.types import ContainerKind, CursorState
from streamfmt.exceptions import MismatchedContainerError, UnbalancedStructureError

log = logging.getLogger(__name__)


class JsonWriter:
    """Stateful writer turning structural events into formatted text.

    Comma placement is driven by a two-state cursor that every begin-event
    resets, so it only has to answer "was something already written at this
    depth".  Open containers are tracked on a stack of ``ContainerKind``
    markers; in strict mode unmatched or mismatched end-events raise
    ``UnbalancedStructureError``.
    """

    def __init__(
        self,
        config: Optional[WriterConfig] = None,
        *,
        compact: Optional[bool] = None,
        indent_step: Optional[int] = None,
        strict: Optional[bool] = None,
        legacy_array_cursor: Optional[bool] = None,
    ) -> None:
        cfg = config or WriterConfig()
        self._compact = cfg.compact if compact is None else compact
        self._step = cfg.indent_step if indent_step is None else indent_step
        self._strict = cfg.strict if strict is None else strict
        self._legacy_array_cursor = (
            cfg.legacy_array_cursor if legacy_array_cursor is None else legacy_array_cursor
        )

        self._indent = 0
        self._stack: list[ContainerKind] = []
        self._cursor = CursorState.START_OF_CONTAINER
        self._buf: list[str] = []

    # ── Read-only state ──────────────────────────────────────────────

    @property
    def compact(self) -> bool:
        return self._compact

    @property
    def indent_level(self) -> int:
        """Current indentation in spaces."""
        return self._indent

    @property
    def depth(self) -> int:
        """Number of containers currently open."""
        return len(self._stack)

    @property
    def cursor(self) -> CursorState:
        return self._cursor

    @property
    def output(self) -> str:
        """Text written so far, without any balance check."""
        return "".join(self._buf)

    # ── Emission primitives ──────────────────────────────────────────

    def _write(self, text: str) -> None:
        self._buf.append(text)

    def _emit_indent(self) -> None:
        if not self._compact:
            # Lenient mode lets the counter underflow; print nothing then.
            self._write(" " * max(self._indent, 0))

    def _emit_space(self) -> None:
        if not self._compact:
            self._write(" ")

    def _emit_newline(self) -> None:
        if not self._compact:
            self._write("\n")

    def _emit_separator(self) -> None:
        if self._cursor is CursorState.AFTER_VALUE:
            self._write(",")

    def _emit_label(self, name: str) -> None:
        self._emit_newline()
        self._emit_indent()
        self._write(name)
        self._write(":")
        self._emit_space()

    # ── Nesting bookkeeping ──────────────────────────────────────────

    def _push(self, kind: ContainerKind) -> None:
        self._stack.append(kind)
        self._indent += self._step

    def _pop(self, kind: ContainerKind) -> None:
        if self._strict:
            if not self._stack:
                log.debug("Rejected close of %s with no open container", kind.value)
                raise UnbalancedStructureError(
                    f"Cannot close {kind.value}: no container is open", depth=0
                )
            if self._stack[-1] is not kind:
                log.debug("Rejected close of %s inside %s", kind.value, self._stack[-1].value)
                raise MismatchedContainerError(
                    expected=self._stack[-1].value,
                    actual=kind.value,
                    depth=len(self._stack),
                )
        if self._stack:
            self._stack.pop()
        self._indent -= self._step

    def _close(self, kind: ContainerKind, mark_value: bool = True) -> None:
        # Pop first so a rejected close leaves the buffer untouched.
        self._pop(kind)
        self._emit_newline()
        self._emit_indent()
        self._write(kind.closer)
        # Counter, not stack: an underflowed lenient writer never emits the final newline.
        if kind is ContainerKind.OBJECT and self._indent == 0:
            self._emit_newline()
            log.debug("Document closed (%d fragments)", len(self._buf))
        if mark_value:
            self._cursor = CursorState.AFTER_VALUE

    # ── Event API ────────────────────────────────────────────────────

    def begin_document(self) -> JsonWriter:
        """Open the top-level ``{``."""
        self._emit_separator()
        self._emit_indent()
        self._write("{")
        self._push(ContainerKind.OBJECT)
        self._cursor = CursorState.START_OF_CONTAINER
        return self

    def end_document(self) -> JsonWriter:
        """Close the top-level ``}``; the cursor is left as it was."""
        self._close(ContainerKind.OBJECT, mark_value=False)
        return self

    def begin_object(self, name: str) -> JsonWriter:
        """Open ``name: {`` at the current depth."""
        self._emit_separator()
        self._emit_label(name)
        self._write("{")
        self._push(ContainerKind.OBJECT)
        self._cursor = CursorState.START_OF_CONTAINER
        return self

    def begin_array(self, name: str) -> JsonWriter:
        """Open ``name: [`` at the current depth."""
        self._emit_separator()
        self._emit_label(name)
        self._write("[")
        self._push(ContainerKind.ARRAY)
        if not self._legacy_array_cursor:
            self._cursor = CursorState.START_OF_CONTAINER
        return self

    def end_object(self) -> JsonWriter:
        self._close(ContainerKind.OBJECT)
        return self

    def end_array(self) -> JsonWriter:
        self._close(ContainerKind.ARRAY)
        return self

    def key_value(self, key: str, value: str) -> JsonWriter:
        """Write ``key: value``; both tokens are inserted as given."""
        self._emit_separator()
        self._emit_label(key)
        self._write(value)
        self._cursor = CursorState.AFTER_VALUE
        return self

    def element(self, value: str) -> JsonWriter:
        """Write a bare element, typically inside an array."""
        self._emit_separator()
        self._emit_newline()
        self._emit_indent()
        self._write(value)
        self._cursor = CursorState.AFTER_VALUE
        return self

    # ── Terminal queries ─────────────────────────────────────────────

    def getvalue(self) -> str:
        """Return the finished document.

        Raises ``UnbalancedStructureError`` in strict mode while any
        container is still open.
        """
        if self._strict and self._stack:
            log.debug("Rejected read with %d open container(s)", len(self._stack))
            raise UnbalancedStructureError(
                f"Document not closed: {len(self._stack)} container(s) still open",
                depth=len(self._stack),
            )
        return self.output

    def write_to_file(self, path: Path) -> Path:
        """Write the finished document to *path* and return it."""
        path.write_text(self.getvalue(), encoding="utf-8")
        return path

    def __repr__(self) -> str:
        mode = "compact" if self._compact else "pretty"
        return f"JsonWriter({mode}, depth={self.depth}, cursor={self._cursor.value})"
