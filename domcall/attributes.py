"""Attribute renaming, inline style parsing and class selector compaction."""

from __future__ import annotations

import re
from typing import Dict, Mapping

from .dom_model import AttributeValue, StyleMap

WHITESPACE_RE = re.compile(r"\s+")
DASH_LETTER_RE = re.compile(r"-([a-z0-9])")

ATTR_RENAMES: Dict[str, str] = {
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "viewbox": "viewBox",
    "autocorrect": "autoCorrect",
    "autocomplete": "autoComplete",
}


class StyleParseError(ValueError):
    """Raised when an inline style declaration cannot be parsed."""


def class_list_to_selector(class_attr: str) -> str | None:
    """Compact ``"a  b c"`` into ``".a.b.c"``; blank input has no selector."""
    tokens = [token for token in WHITESPACE_RE.split(class_attr.strip()) if token]
    if not tokens:
        return None
    return "." + ".".join(tokens)


def camel_case(prop: str) -> str:
    """Convert a CSS property name to the camelCase key used in style maps."""
    prop = prop.strip()
    if prop.startswith("--"):
        # custom properties keep their exact name
        return prop
    prop = prop.lower()
    if prop.startswith("-ms-"):
        prop = prop[1:]
    elif prop.startswith("-"):
        prop = prop[1:]
        prop = prop[:1].upper() + prop[1:]
    return DASH_LETTER_RE.sub(lambda match: match.group(1).upper(), prop)


def parse_style(text: str) -> StyleMap:
    """Parse ``"color: red; margin-top:4px"`` into ``{"color": "red", "marginTop": "4px"}``.

    Raises StyleParseError on a declaration without a property name or colon.
    """
    styles: StyleMap = {}
    for segment in text.split(";"):
        if not segment.strip():
            continue
        prop, sep, value = segment.partition(":")
        if not sep or not prop.strip():
            raise StyleParseError(f"malformed style declaration: {segment.strip()!r}")
        styles[camel_case(prop)] = value.strip()
    return styles


def _style_value(raw: str) -> AttributeValue:
    try:
        return parse_style(raw)
    except StyleParseError:
        return raw


def normalize_attributes(raw: Mapping[str, str]) -> Dict[str, AttributeValue]:
    """Rename HTML attributes to DOM-call names and parse ``style``.

    ``class`` never survives: a non-blank class list becomes the call's
    selector (see :func:`class_list_to_selector`) and a blank one is dropped.
    """
    attrs: Dict[str, AttributeValue] = {}
    for name, value in raw.items():
        if name == "class":
            continue
        if name == "style" and isinstance(value, str):
            attrs["style"] = _style_value(value)
            continue
        # spellcheck and unlisted names pass through unchanged
        attrs[ATTR_RENAMES.get(name, name)] = value
    return attrs
