"""Tokenizer for the text between ``<`` and ``>`` of a single tag."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rustdoc_page.domain.exceptions import MalformedTag

SELF_TERMINATING_TAGS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "command",
    "embed",
    "frame",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})

_NAME_TRIM = " \t\r\n="


class TagKind(Enum):
    OPENING = "opening"
    CLOSING = "closing"
    SELF_TERMINATING = "self_terminating"


@dataclass(frozen=True)
class Tag:
    name: str
    kind: TagKind
    attributes: dict[str, str] = field(default_factory=dict)


def parse_tag(data: str) -> Tag:
    """Parse a tag body such as ``a href="x" class="y"`` into a Tag.

    Attribute text is split on double quotes: even-indexed chunks are names,
    odd-indexed chunks are values. A trailing name without a value (``open``)
    is dropped.
    """
    if not data.strip():
        raise MalformedTag("Empty tag")

    parts = data.split(None, 1)
    name = parts[0]
    if len(name) > 1 and not name.startswith("/"):
        # <br/>
        name = name.rstrip("/")
    attributes: dict[str, str] = {}

    if len(parts) > 1:
        rest = parts[1]
        if rest.count('"') % 2:
            raise MalformedTag(f"Unterminated attribute value in tag: <{data}>")
        chunks = rest.split('"')
        keys = [chunk.strip(_NAME_TRIM) for chunk in chunks[0::2]]
        values = [chunk.strip() for chunk in chunks[1::2]]
        for key, value in zip(keys, values):
            attributes[key] = value

    return Tag(name=name, kind=_tag_kind(name, data), attributes=attributes)


def _tag_kind(name: str, data: str) -> TagKind:
    if name in SELF_TERMINATING_TAGS or name.startswith("!"):
        return TagKind.SELF_TERMINATING
    if name.startswith("/"):
        return TagKind.CLOSING
    if data.rstrip().endswith("/"):
        return TagKind.SELF_TERMINATING
    return TagKind.OPENING
