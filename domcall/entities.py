"""Split text content into literal runs and named entity references."""

from __future__ import annotations

from typing import List

from .dom_model import EntityRef, Segment, TextFragment


def _is_name_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _scan_entity(text: str, start: int) -> tuple[str | None, int]:
    """Scan the reference that begins with ``&`` at ``start``.

    Returns ``(name, end)`` where ``end`` is the index just past the reference.
    ``name`` is None when the text is not a reference and ``&`` is literal.
    Numeric references come back with their leading ``#``.
    """
    pos = start + 1
    numeric = pos < len(text) and text[pos] == "#"
    if numeric:
        pos += 1
    name_start = pos
    while pos < len(text) and _is_name_char(text[pos]):
        pos += 1
    name = text[name_start:pos]
    if not name:
        return None, start + 1
    if pos < len(text):
        if text[pos] != ";":
            return None, start + 1
        end = pos + 1
    else:
        # unterminated reference at end of input
        end = pos
    return ("#" + name if numeric else name), end


def segment_text(text: str) -> List[Segment]:
    """Return the literal runs and entity references of ``text`` in order.

    ``"A&nbsp;B"`` gives ``[TextFragment("A"), EntityRef("nbsp"), TextFragment("B")]``.
    Numeric references such as ``&#169;`` are kept verbatim in the literal text.
    """
    segments: List[Segment] = []
    literal: List[str] = []

    def flush() -> None:
        if literal:
            segments.append(TextFragment("".join(literal)))
            literal.clear()

    pos = 0
    while pos < len(text):
        char = text[pos]
        if char != "&":
            literal.append(char)
            pos += 1
            continue
        name, end = _scan_entity(text, pos)
        if name is None or name.startswith("#"):
            literal.append(text[pos:end])
        else:
            flush()
            segments.append(EntityRef(name))
        pos = end
    flush()
    return segments
