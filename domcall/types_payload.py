"""JSON payload type definitions for converted calls."""

from __future__ import annotations

from typing import Any, Literal, TypedDict, Union


class TextPayload(TypedDict):
    type: Literal["Text"]
    text: str


class EntityPayload(TypedDict):
    type: Literal["Entity"]
    name: str


class _ElementPayloadBase(TypedDict):
    type: Literal["Element"]
    tag: str
    children: list["CallPayload"]


class ElementPayload(_ElementPayloadBase, total=False):
    selector: str
    attrs: dict[str, Any]


CallPayload = Union[ElementPayload, TextPayload, EntityPayload]
