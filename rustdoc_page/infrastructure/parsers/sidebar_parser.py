"""Parser for the sidebar index: ``<h3>`` headings each followed by a ``<ul>``."""

from __future__ import annotations

import logging

from rustdoc_page.domain.entities import ParseIssue, Sidebar, SidebarSection
from rustdoc_page.domain.fragments import unescape
from rustdoc_page.infrastructure.html.element import Element, extract_element, find_element

from .base import ChunkParser, heading_text

logger = logging.getLogger(__name__)

LIST_END = "</ul>"


class SidebarParser(ChunkParser):
    record_name = "sidebar section"

    def _split(self, html: str) -> list[str]:
        parts = html.split(LIST_END)
        chunks = [part + LIST_END for part in parts[:-1]] + parts[-1:]
        return [chunk for chunk in chunks if chunk.strip()]

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> SidebarSection | None:
        if "<h3" not in chunk:
            logger.debug("Sidebar chunk without heading skipped")
            return None

        name = heading_text(extract_element("h3", chunk))
        entries = find_element("ul", chunk.partition("</h3>")[2])
        items = []
        if entries is not None:
            items = [_item_text(item) for item in entries.children if item.kind == "li"]
        return SidebarSection(name=name, items=items)

    def _build_result(self, records: list[SidebarSection]) -> list[SidebarSection]:
        return records


def _item_text(item: Element) -> str:
    link = item.find("a")
    if link is None:
        return ""
    return unescape(link.text())


def parse_sidebar(html: str) -> Sidebar:
    sections, issues = SidebarParser().parse(html)
    return Sidebar(sections=sections, issues=issues)
