"""Parser for doc blocks: an introduction followed by titled subsections."""

from __future__ import annotations

import logging
import re

from rustdoc_page.domain.entities import Description, DescriptionSection
from rustdoc_page.domain.exceptions import UnexpectedEof
from rustdoc_page.domain.fragments import Bold, CodeBlock, Fragment, Raw
from rustdoc_page.infrastructure.html.element import build_element, find_element
from rustdoc_page.infrastructure.html.tag import TagKind, parse_tag
from rustdoc_page.infrastructure.html.zipper import zip_code, zip_content

from .base import heading_text

logger = logging.getLogger(__name__)

DOCBLOCK_MARKER = '<div class="docblock'
DEFAULT_HEADING = "h5"

# Wrappers that hold paragraphs rather than a single code sample
_BLOCK_OPENER = re.compile(r"<(?:p|div)(?=[\s>/])")


def docblock(html: str) -> str:
    """Return the text from the first doc block on, or "" if there is none."""
    start = html.find(DOCBLOCK_MARKER)
    return html[start:] if start != -1 else ""


def parse_description(html: str, heading: str = DEFAULT_HEADING) -> Description:
    """Parse a description whose subsections are introduced by ``<heading>`` tags.

    Methods use ``h5`` subsection headings, a page's own description ``h2``.
    """
    marker = f"<{heading}"
    introduction_html, found, rest = html.partition(marker)
    introduction = _parse_blocks(introduction_html, lenient=True)

    sections: list[DescriptionSection] = []
    if found:
        for chunk in (marker + rest).split(marker)[1:]:
            sections.append(_parse_section(marker + chunk, heading))

    return Description(introduction=introduction, sections=sections)


def _parse_section(html: str, heading: str) -> DescriptionSection:
    closing = f"</{heading}>"
    head, found, body = html.partition(closing)
    if not found:
        raise UnexpectedEof(f"<{heading}> subsection heading is never closed")

    name = heading_text(build_element(head + closing))
    return DescriptionSection(
        name=Bold([Raw(name)]),
        content=_parse_blocks(body, lenient=False),
    )


def _parse_blocks(html: str, lenient: bool) -> list[Fragment]:
    """Walk paragraphs and code blocks in order.

    The next tag name decides: ``p`` is a paragraph, a ``div`` or ``pre``
    wrapping code is a code block. Anything else ends a subsection body; in
    lenient mode (introductions) it is stepped over instead.
    """
    fragments: list[Fragment] = []
    pos = 0

    while True:
        start = html.find("<", pos)
        if start == -1:
            break
        if not lenient and html[pos:start].strip():
            break
        end = html.find(">", start)
        if end == -1:
            raise UnexpectedEof(f"Tag opened at offset {start} is never closed")

        tag = parse_tag(html[start + 1:end])
        if tag.kind is TagKind.OPENING and tag.name == "p":
            close = _block_end(html, "</p>", start)
            fragments.extend(zip_content(build_element(html[start:close])))
            pos = close
            continue

        if tag.kind is TagKind.OPENING and _opens_code_block(tag.name, html, end + 1):
            close = _block_end(html, f"</{tag.name}>", start)
            code = find_element("code", html[start:close])
            if code is not None:
                fragments.append(CodeBlock(zip_code(code)))
                pos = close
                continue

        if not lenient:
            logger.debug("Description body stops at <%s>", tag.name)
            break
        pos = end + 1

    return fragments


def _opens_code_block(name: str, html: str, after: int) -> bool:
    if name == "pre":
        return True
    if name != "div":
        return False
    # <div class="example-wrap ignore"><a class="tooltip">ⓘ</a><pre ...><code>
    pre = html.find("<pre", after)
    if pre == -1 or _BLOCK_OPENER.search(html, after, pre):
        return False
    close = html.find("</div>", after)
    return close == -1 or pre < close


def _block_end(html: str, closing: str, start: int) -> int:
    close = html.find(closing, start)
    if close == -1:
        return len(html)
    return close + len(closing)
