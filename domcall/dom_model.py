"""Node and call types for the HTML to DOM-call conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union


@dataclass(frozen=True)
class TextNode:
    content: str


@dataclass(frozen=True)
class CommentNode:
    content: str


@dataclass(frozen=True)
class ElementNode:
    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["HtmlNode", ...] = ()

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("element tag must be a non-empty string")
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


HtmlNode = Union[TextNode, ElementNode, CommentNode]


@dataclass(frozen=True)
class Symbol:
    """A possibly namespace-qualified symbol such as ``dom/div``."""

    name: str
    namespace: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("symbol name must be a non-empty string")

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name


@dataclass(frozen=True)
class TextFragment:
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("text fragments are never empty")


@dataclass(frozen=True)
class EntityRef:
    """Named character reference kept as a symbol instead of being decoded."""

    name: str


StyleMap = Dict[str, str]
AttributeValue = Union[str, bool, int, float, StyleMap]


@dataclass(frozen=True)
class ElementCall:
    """One element construction call.

    ``attributes`` is ``None`` when the attributes position is omitted from the
    call entirely, which is different from an explicit empty map.
    """

    tag: Symbol
    selector: str | None = None
    attributes: Mapping[str, AttributeValue] | None = None
    children: Tuple["Call", ...] = ()

    def __post_init__(self) -> None:
        if self.attributes is not None:
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


Segment = Union[TextFragment, EntityRef]
Call = Union[ElementCall, TextFragment, EntityRef]
