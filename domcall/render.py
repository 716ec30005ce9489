"""Render DOM-call trees as ClojureScript-style source text."""

from __future__ import annotations

import re
from typing import List, Mapping, Sequence

from .dom_model import AttributeValue, Call, ElementCall, EntityRef, TextFragment

INDENT = "  "
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}
KEYWORD_RE = re.compile(r"[A-Za-z_][\w.:-]*")


def quote_string(value: str) -> str:
    return '"' + "".join(_ESCAPES.get(char, char) for char in value) + '"'


def _render_value(value: AttributeValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        return render_map(value)
    return quote_string(str(value))


def _render_key(key: str) -> str:
    # names that cannot be read back as keywords become string keys
    if KEYWORD_RE.fullmatch(key) and not key.endswith(":"):
        return f":{key}"
    return quote_string(key)


def render_map(attrs: Mapping[str, AttributeValue]) -> str:
    entries = [f"{_render_key(key)} {_render_value(value)}" for key, value in attrs.items()]
    return "{" + ", ".join(entries) + "}"


def _head(call: ElementCall) -> str:
    parts = [f"({call.tag}"]
    if call.selector:
        parts.append(f":{call.selector}")
    if call.attributes is not None:
        parts.append(render_map(call.attributes))
    return " ".join(parts)


def render_call(call: Call, level: int = 0) -> str:
    """Render one call; nested element children go on their own lines."""
    if isinstance(call, TextFragment):
        return quote_string(call.value)
    if isinstance(call, EntityRef):
        return call.name
    if not isinstance(call, ElementCall):
        raise TypeError(f"cannot render {type(call).__name__}")

    head = _head(call)
    if not call.children:
        return head + ")"
    if not any(isinstance(child, ElementCall) for child in call.children):
        inline = " ".join(render_call(child) for child in call.children)
        return f"{head} {inline})"

    pad = INDENT * (level + 1)
    lines: List[str] = [head]
    for child in call.children:
        lines.append(pad + render_call(child, level + 1))
    return "\n".join(lines) + ")"


def render_result(result: Call | Sequence[Call]) -> str:
    """Render the value returned by ``html_to_call``."""
    if isinstance(result, (ElementCall, TextFragment, EntityRef)):
        return render_call(result)
    return "\n".join(render_call(call) for call in result)
