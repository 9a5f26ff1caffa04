"""Conversion of a parsed Page into plain JSON-ready data.

Every fragment and section-content value becomes a dict carrying a ``"type"``
tag, so consumers can tell union variants apart without Python classes.
"""

from __future__ import annotations

import json
import re
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from rustdoc_page.domain.entities import (
    Fields,
    Implementations,
    Methods,
    ObjectSafety,
    Page,
    RequiredAssociatedTypes,
    TraitImplementations,
    UnknownSection,
    Variants,
)
from rustdoc_page.domain.fragments import Bold, Code, CodeBlock, Colored, ColorTag, Raw

# Union variants whose dicts carry a "type" tag
_TAGGED = (
    Raw,
    Bold,
    Code,
    CodeBlock,
    Colored,
    Fields,
    Implementations,
    TraitImplementations,
    Variants,
    RequiredAssociatedTypes,
    Methods,
    ObjectSafety,
    UnknownSection,
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _type_tag(cls: type) -> str:
    return _CAMEL_BOUNDARY.sub("_", cls.__name__).lower()


def to_dict(value: Any) -> Any:
    """Recursively convert entities, fragments, enums and lists to plain data."""
    if isinstance(value, ColorTag):
        return {"name": value.value, "hex": value.hex}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_dict(item) for item in value]
    if isinstance(value, dict):
        return {key: to_dict(item) for key, item in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {}
        if isinstance(value, _TAGGED):
            data["type"] = _type_tag(type(value))
        for f in fields(value):
            data[f.name] = to_dict(getattr(value, f.name))
        return data
    return value


def to_json(page: Page, indent: int | None = 2) -> str:
    return json.dumps(to_dict(page), indent=indent, ensure_ascii=False)
