"""Semantic text fragments produced by every parser.

A fragment is a piece of text tagged with how it should stand out when
rendered: plain, bold, inline code, a code block, or an identifier carrying
a colour hint. The core never applies colours, it only records them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_ENTITIES = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&#x27;": "'",
    "&#39;": "'",
    "&quot;": '"',
}
_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))


def unescape(raw: str) -> str:
    """Turn the generator's escaped characters back into plain characters.

    Single pass, so ``&amp;lt;`` becomes ``&lt;`` and not ``<``.
    """
    return _ENTITY_RE.sub(lambda match: _ENTITIES[match.group(0)], raw)


class ColorTag(Enum):
    ASSOCIATED_TYPE = "associated_type"
    ENUM = "enum"
    MACRO = "macro"
    METHOD = "method"
    PRIMITIVE = "primitive"
    STRUCT = "struct"
    TRAIT = "trait"

    @property
    def hex(self) -> str:
        return _HEX_COLORS[self]

    @classmethod
    def from_css_class(cls, css_class: str) -> ColorTag | None:
        return _CSS_CLASS_MAPPING.get(css_class)


_HEX_COLORS = {
    ColorTag.ASSOCIATED_TYPE: "#d2991d",
    ColorTag.ENUM: "#2dbfb8",
    ColorTag.MACRO: "#09bd00",
    ColorTag.METHOD: "#2bab63",
    ColorTag.PRIMITIVE: "#2dbfb8",
    ColorTag.STRUCT: "#2dbfb8",
    ColorTag.TRAIT: "#b78cf2",
}

# CSS classes the generator puts on links to items
_CSS_CLASS_MAPPING: dict[str, ColorTag] = {
    "associatedtype": ColorTag.ASSOCIATED_TYPE,
    "enum": ColorTag.ENUM,
    "macro": ColorTag.MACRO,
    "fn": ColorTag.METHOD,
    "primitive": ColorTag.PRIMITIVE,
    "struct": ColorTag.STRUCT,
    "trait": ColorTag.TRAIT,
}


@dataclass(frozen=True)
class Raw:
    text: str

    def unescaped(self) -> Raw:
        return Raw(unescape(self.text))

    def plain_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class Bold:
    fragments: list[Fragment] = field(default_factory=list)

    def unescaped(self) -> Bold:
        return Bold([f.unescaped() for f in self.fragments])

    def plain_text(self) -> str:
        return "".join(f.plain_text() for f in self.fragments)


@dataclass(frozen=True)
class Code:
    fragment: Fragment

    def unescaped(self) -> Code:
        return Code(self.fragment.unescaped())

    def plain_text(self) -> str:
        return self.fragment.plain_text()


@dataclass(frozen=True)
class CodeBlock:
    fragment: Fragment

    def unescaped(self) -> CodeBlock:
        return CodeBlock(self.fragment.unescaped())

    def plain_text(self) -> str:
        return self.fragment.plain_text()


@dataclass(frozen=True)
class Colored:
    fragment: Fragment
    color: ColorTag

    def unescaped(self) -> Colored:
        return Colored(self.fragment.unescaped(), self.color)

    def plain_text(self) -> str:
        return self.fragment.plain_text()


Fragment = Union[Raw, Bold, Code, CodeBlock, Colored]


def plain_text(fragments: list[Fragment]) -> str:
    return "".join(f.plain_text() for f in fragments)
