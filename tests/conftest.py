"""Shared fixtures for streamfmt tests."""

from __future__ import annotations

import pytest

from streamfmt.core.config import WriterConfig
from streamfmt.formatters.json_writer import JsonWriter
from streamfmt.replay import Event


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``STREAMFMT_*`` env vars out of the tests."""
    for name in (
        "STREAMFMT_WRITER_COMPACT",
        "STREAMFMT_WRITER_INDENT_STEP",
        "STREAMFMT_WRITER_STRICT",
        "STREAMFMT_WRITER_LEGACY_ARRAY_CURSOR",
        "STREAMFMT_OBSERVABILITY_LOG_LEVEL",
        "STREAMFMT_OBSERVABILITY_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def pretty_writer() -> JsonWriter:
    return JsonWriter(WriterConfig())


@pytest.fixture
def compact_writer() -> JsonWriter:
    return JsonWriter(WriterConfig(compact=True))


@pytest.fixture
def object_events() -> list[Event]:
    """``{ foo: { goo: "hoo" } }``"""
    return [
        Event(kind="begin_document"),
        Event(kind="begin_object", args=["foo"]),
        Event(kind="key_value", args=["goo", '"hoo"']),
        Event(kind="end_object"),
        Event(kind="end_document"),
    ]


@pytest.fixture
def array_events() -> list[Event]:
    """``{ foo: [1, 2] }``"""
    return [
        Event(kind="begin_document"),
        Event(kind="begin_array", args=["foo"]),
        Event(kind="element", args=["1"]),
        Event(kind="element", args=["2"]),
        Event(kind="end_array"),
        Event(kind="end_document"),
    ]


@pytest.fixture
def mixed_events() -> list[Event]:
    """Pairs, an array and a nested object side by side at the top level."""
    return [
        Event(kind="begin_document"),
        Event(kind="key_value", args=["name", '"demo"']),
        Event(kind="begin_array", args=["tags"]),
        Event(kind="element", args=['"a"']),
        Event(kind="element", args=['"b"']),
        Event(kind="end_array"),
        Event(kind="begin_object", args=["meta"]),
        Event(kind="key_value", args=["v", "1"]),
        Event(kind="end_object"),
        Event(kind="end_document"),
    ]


@pytest.fixture
def mixed_pretty() -> str:
    return (
        "{\n"
        '  name: "demo",\n'
        "  tags: [\n"
        '    "a",\n'
        '    "b"\n'
        "  ],\n"
        "  meta: {\n"
        "    v: 1\n"
        "  }\n"
        "}\n"
    )


@pytest.fixture
def mixed_compact() -> str:
    return '{name:"demo",tags:["a","b"],meta:{v:1}}'
