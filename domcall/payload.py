"""Convert DOM-call trees to JSON-ready payloads."""

from __future__ import annotations

from typing import List, Sequence

from .dom_model import Call, ElementCall, EntityRef, TextFragment
from .types_payload import CallPayload, ElementPayload


def call_to_payload(call: Call) -> CallPayload:
    if isinstance(call, TextFragment):
        return {"type": "Text", "text": call.value}
    if isinstance(call, EntityRef):
        return {"type": "Entity", "name": call.name}
    if not isinstance(call, ElementCall):
        raise TypeError(f"cannot serialize {type(call).__name__}")

    payload: ElementPayload = {
        "type": "Element",
        "tag": str(call.tag),
        "children": [call_to_payload(child) for child in call.children],
    }
    if call.selector:
        payload["selector"] = call.selector
    if call.attributes is not None:
        payload["attrs"] = {
            key: dict(value) if isinstance(value, dict) else value for key, value in call.attributes.items()
        }
    return payload


def result_to_payload(result: Call | Sequence[Call]) -> List[CallPayload]:
    """Always returns a list, whatever shape ``html_to_call`` produced."""
    if isinstance(result, (ElementCall, TextFragment, EntityRef)):
        return [call_to_payload(result)]
    return [call_to_payload(call) for call in result]
