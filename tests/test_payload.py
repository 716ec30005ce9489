import json

from domcall.compiler import html_to_call
from domcall.config import ConversionOptions
from domcall.io_utils import stable_json_dumps
from domcall.payload import call_to_payload, result_to_payload


def test_element_payload_shape():
    result = html_to_call('<div class="b" style="color:red"><p>A&nbsp;B</p></div>', ConversionOptions(namespace_alias="dom"))
    assert call_to_payload(result) == {
        "type": "Element",
        "tag": "dom/div",
        "selector": ".b",
        "attrs": {"style": {"color": "red"}},
        "children": [
            {
                "type": "Element",
                "tag": "dom/p",
                "children": [
                    {"type": "Text", "text": "A"},
                    {"type": "Entity", "name": "nbsp"},
                    {"type": "Text", "text": "B"},
                ],
            }
        ],
    }


def test_empty_attrs_kept_only_when_requested():
    assert "attrs" not in call_to_payload(html_to_call("<hr>"))
    kept = html_to_call("<hr>", ConversionOptions(keep_empty_attributes=True))
    assert call_to_payload(kept)["attrs"] == {}


def test_result_payload_is_always_a_list():
    assert len(result_to_payload(html_to_call("<p>A</p>"))) == 1
    assert len(result_to_payload(html_to_call("<p>A</p><p>B</p>"))) == 2
    assert result_to_payload(html_to_call("")) == []


def test_payload_serializes_stably():
    payload = result_to_payload(html_to_call('<a href="/é" title="x">y</a>'))
    text = stable_json_dumps(payload)
    assert text.endswith("\n")
    assert "é" in text
    assert json.loads(text) == payload
