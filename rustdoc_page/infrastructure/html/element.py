"""Element tree built by recursive descent over the generator's markup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from rustdoc_page.domain.exceptions import EmptyExpectedContent, MalformedTag, UnexpectedEof
from rustdoc_page.domain.fragments import Raw

from .tag import Tag, TagKind, parse_tag

Node = Union[Raw, "Element"]


@dataclass(frozen=True)
class Element:
    """A parsed HTML element.

    ``nodes`` keeps text runs and child elements in document order;
    ``content`` and ``children`` are the two views the zipper pairs up.
    """

    kind: str
    attributes: dict[str, str] = field(default_factory=dict)
    nodes: list[Node] = field(default_factory=list)
    void: bool = False

    @property
    def content(self) -> list[Raw]:
        return [node for node in self.nodes if isinstance(node, Raw)]

    @property
    def children(self) -> list[Element]:
        return [node for node in self.nodes if isinstance(node, Element)]

    @property
    def classes(self) -> list[str]:
        return self.attributes.get("class", "").split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def first_content(self) -> Raw:
        for node in self.nodes:
            if isinstance(node, Raw):
                return node
        raise EmptyExpectedContent(f"<{self.kind}> element has no text content")

    def find(self, kind: str) -> Element | None:
        """Return the first descendant of the given kind, depth first."""
        for child in self.children:
            if child.kind == kind:
                return child
            found = child.find(kind)
            if found is not None:
                return found
        return None

    def text(self) -> str:
        parts: list[str] = []
        for node in self.nodes:
            parts.append(node.text if isinstance(node, Raw) else node.text())
        return "".join(parts)


class _Cursor:
    """Forward-only position over the remaining markup."""

    def __init__(self, html: str) -> None:
        self._html = html
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._html)

    def at_tag(self) -> bool:
        return self._html.startswith("<", self._pos)

    def read_tag(self) -> Tag:
        end = self._html.find(">", self._pos)
        if end == -1:
            raise UnexpectedEof(f"Tag opened at offset {self._pos} is never closed")
        tag = parse_tag(self._html[self._pos + 1:end])
        self._pos = end + 1
        return tag

    def read_text(self) -> str:
        end = self._html.find("<", self._pos)
        if end == -1:
            end = len(self._html)
        text = self._html[self._pos:end]
        self._pos = end
        return text


def build_element(html: str) -> Element:
    """Build the element whose opening tag starts ``html``.

    Parsing stops at the element's closing tag; anything after it is ignored.
    Running out of input closes every open element implicitly.
    """
    cursor = _Cursor(html.lstrip())
    if not cursor.at_tag():
        raise MalformedTag(f"Expected a tag, got: {html[:40]!r}")

    tag = cursor.read_tag()
    if tag.kind is TagKind.CLOSING:
        raise MalformedTag(f"Element cannot start with closing tag <{tag.name}>")
    if tag.kind is TagKind.SELF_TERMINATING:
        return Element(kind=tag.name, attributes=tag.attributes, void=True)
    return _build(cursor, tag)


def _build(cursor: _Cursor, tag: Tag) -> Element:
    nodes: list[Node] = []

    while not cursor.at_end():
        if not cursor.at_tag():
            nodes.append(Raw(cursor.read_text()))
            continue

        current = cursor.read_tag()
        if current.kind is TagKind.SELF_TERMINATING:
            nodes.append(Element(kind=current.name, attributes=current.attributes, void=True))
        elif current.kind is TagKind.OPENING:
            nodes.append(_build(cursor, current))
        else:
            break

    return Element(kind=tag.name, attributes=tag.attributes, nodes=nodes)


def _opener_pattern(name: str) -> re.Pattern[str]:
    return re.compile(rf"<{re.escape(name)}(?=[\s>/])")


def find_element(name: str, html: str) -> Element | None:
    """Build the first ``<name>`` element found in ``html``, if any."""
    match = _opener_pattern(name).search(html)
    if match is None:
        return None
    return build_element(html[match.start():])


def extract_element(name: str, html: str) -> Element:
    element = find_element(name, html)
    if element is None:
        raise EmptyExpectedContent(f"No <{name}> element found")
    return element
