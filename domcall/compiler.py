"""Compile parsed HTML nodes into DOM-call trees.

``html_to_call`` is the entry point: it parses a fragment, converts every
top-level node with :func:`element_to_call` and returns either a single call
(exactly one result) or a list of calls (zero or several results).
"""

from __future__ import annotations

from typing import Iterator, List, Union

from .attributes import class_list_to_selector, normalize_attributes
from .config import ConversionOptions
from .dom_model import Call, CommentNode, ElementCall, ElementNode, HtmlNode, Segment, Symbol, TextNode
from .entities import segment_text
from .parser import parse_fragment

NodeResult = Union[ElementCall, List[Segment], None]
ConversionResult = Union[Call, List[Call]]

DEFAULT_OPTIONS = ConversionOptions()


def _tag_symbol(tag: str, options: ConversionOptions) -> Symbol:
    return Symbol(name=tag, namespace=options.namespace_alias)


def _extend_flat(items: List[Call], result: NodeResult) -> None:
    if result is None:
        return
    if isinstance(result, list):
        items.extend(result)
    else:
        items.append(result)


def element_to_call(node: HtmlNode, options: ConversionOptions = DEFAULT_OPTIONS) -> NodeResult:
    """Convert one node.

    Text yields a list of segments for the parent to splice in, whitespace-only
    text and comments yield None, and elements yield an ElementCall.
    """
    if isinstance(node, TextNode):
        if not node.content.strip():
            return None
        return segment_text(node.content)
    if isinstance(node, CommentNode):
        return None
    if not isinstance(node, ElementNode):
        raise TypeError(f"unsupported node type: {type(node).__name__}")

    raw_class = node.attributes.get("class")
    selector = class_list_to_selector(raw_class) if raw_class is not None else None
    attributes = normalize_attributes(node.attributes)

    children: List[Call] = []
    for child in node.children:
        _extend_flat(children, element_to_call(child, options))

    return ElementCall(
        tag=_tag_symbol(node.tag, options),
        selector=selector,
        attributes=attributes if attributes or options.keep_empty_attributes else None,
        children=tuple(children),
    )


def html_to_call(fragment: str, options: ConversionOptions | None = None) -> ConversionResult:
    """Convert an HTML fragment into a call, or a list of calls."""
    if not isinstance(fragment, str):
        raise TypeError("fragment must be a string")
    options = options or DEFAULT_OPTIONS

    results: List[Call] = []
    for root in parse_fragment(fragment):
        _extend_flat(results, element_to_call(root, options))
    if len(results) == 1:
        return results[0]
    return results


def iter_element_calls(result: ConversionResult) -> Iterator[ElementCall]:
    """Yield every ElementCall in ``result`` depth-first, in document order."""
    pending: List[Call] = list(result) if isinstance(result, list) else [result]
    pending.reverse()
    while pending:
        call = pending.pop()
        if isinstance(call, ElementCall):
            yield call
            pending.extend(reversed(call.children))


def find_raw_styles(result: ConversionResult) -> List[tuple[str, str]]:
    """Return ``(tag, style)`` pairs for style attributes kept as raw text."""
    raw: List[tuple[str, str]] = []
    for call in iter_element_calls(result):
        style = (call.attributes or {}).get("style")
        if isinstance(style, str):
            raw.append((str(call.tag), style))
    return raw
