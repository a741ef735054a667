"""Shared enums for the writer state machine."""

from __future__ import annotations

from enum import Enum


class CursorState(str, Enum):
    """Whether a sibling has already been written at the current depth."""

    START_OF_CONTAINER = "start_of_container"
    AFTER_VALUE = "after_value"


class ContainerKind(str, Enum):
    """Kind of an open container, tracked on the writer's stack."""

    OBJECT = "object"
    ARRAY = "array"

    @property
    def closer(self) -> str:
        return "}" if self is ContainerKind.OBJECT else "]"
