"""Parse HTML fragments into HtmlNode trees using BeautifulSoup."""

from __future__ import annotations

from html.parser import HTMLParser
from typing import List

from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from .dom_model import CommentNode, ElementNode, HtmlNode, TextNode

# elements whose text html.parser leaves undecoded; the set grows across CPython releases
RAW_TEXT_TAGS = frozenset(HTMLParser.CDATA_CONTENT_ELEMENTS)
DISCARDED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def _protect_references(fragment: str) -> str:
    # The parser decodes character references; escaping every "&" makes the
    # decoded text come out with its references intact.
    return fragment.replace("&", "&amp;")


def _unprotect(text: str) -> str:
    return text.replace("&amp;", "&")


def _convert(element: object) -> HtmlNode | None:
    if isinstance(element, DISCARDED_STRINGS):
        return CommentNode(str(element))
    if isinstance(element, CData):
        return TextNode(_unprotect(str(element)))
    if isinstance(element, NavigableString):
        text = str(element)
        parent = element.parent
        if isinstance(parent, Tag) and parent.name in RAW_TEXT_TAGS:
            # raw text elements are not decoded, so undo the escaping by hand
            text = _unprotect(text)
        return TextNode(text)
    if isinstance(element, Tag):
        attrs = {name: ("" if value is None else str(value)) for name, value in element.attrs.items()}
        children = tuple(node for node in (_convert(child) for child in element.contents) if node is not None)
        return ElementNode(tag=element.name.lower(), attributes=attrs, children=children)
    return None


def parse_fragment(fragment: str) -> List[HtmlNode]:
    """Return the top-level nodes of ``fragment`` in document order."""
    soup = BeautifulSoup(_protect_references(fragment), "html.parser", multi_valued_attributes=None)
    roots: List[HtmlNode] = []
    for child in soup.contents:
        node = _convert(child)
        if node is not None:
            roots.append(node)
    return roots
