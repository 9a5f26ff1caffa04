"""Page assembler: splits a whole document into regions and parses each one.

Regions are located by literal anchors the generator always emits:

    ... <section> SIDEBAR </section> ... <section id="main-content" class="content">
    INTRODUCTION </details> SECTIONS <script ...

A folded declaration toggle before the introduction is skipped over.
A missing anchor means the document is not a page this parser understands
and is fatal. Everything below the anchors degrades record by record.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from rustdoc_page.domain.entities import Description, Page, ParseIssue, Sidebar
from rustdoc_page.domain.exceptions import MissingAnchor, ParseError
from rustdoc_page.domain.fragments import Fragment
from rustdoc_page.infrastructure.html.element import Element, find_element
from rustdoc_page.infrastructure.html.zipper import zip_content

from .description_parser import DEFAULT_HEADING, docblock, parse_description
from .main_content_parser import MainContentParser
from .sidebar_parser import parse_sidebar

logger = logging.getLogger(__name__)

SIDEBAR_START = "<section>"
SIDEBAR_END = "</section>"
MAIN_CONTENT_START = '<section id="main-content" class="content">'
SCANNED_REGION_END = "<script"
INTRODUCTION_END = "</details>"
# Long enum and trait declarations are folded into their own toggle
DECLARATION_TOGGLE = '<details class="toggle type-contents-toggle"'

INTRODUCTION_HEADING = "h2"


def _split_on(html: str, anchor: str) -> tuple[str, str]:
    head, found, tail = html.partition(anchor)
    if not found:
        raise MissingAnchor(anchor)
    return head, tail


def _split_introduction(main: str) -> tuple[str, str]:
    start = 0
    toggle = main.find(DECLARATION_TOGGLE)
    if toggle != -1:
        declaration_end = main.find(INTRODUCTION_END, toggle)
        if declaration_end != -1:
            start = declaration_end + len(INTRODUCTION_END)

    end = main.find(INTRODUCTION_END, start)
    if end == -1:
        raise MissingAnchor(INTRODUCTION_END)
    return main[:end], main[end + len(INTRODUCTION_END):]


class PageParser:
    """Parses a full documentation page into a Page."""

    def __init__(
        self,
        workers: int = 1,
        method_heading: str = DEFAULT_HEADING,
        introduction_heading: str = INTRODUCTION_HEADING,
    ) -> None:
        self._main_content_parser = MainContentParser(method_heading=method_heading, workers=workers)
        self._introduction_heading = introduction_heading

    def parse(self, html: str) -> Page:
        _, body = _split_on(html, SIDEBAR_START)
        sidebar_html, rest = _split_on(body, SIDEBAR_END)
        _, main = _split_on(rest, MAIN_CONTENT_START)
        main, _ = _split_on(main, SCANNED_REGION_END)
        introduction_html, sections_html = _split_introduction(main)

        issues: list[ParseIssue] = []
        entry = self._parse_entry(introduction_html, issues)
        introduction = self._parse_introduction(introduction_html, issues)
        sidebar = self._parse_sidebar(sidebar_html, issues)
        main_content = self._main_content_parser.parse(sections_html)

        page = Page(
            entry=entry,
            sidebar=sidebar,
            introduction=introduction,
            main_content=main_content,
            issues=issues,
        )
        logger.info(
            "Parsed page: %d sidebar section(s), %d main section(s), %d issue(s)",
            len(sidebar.sections),
            len(main_content.sections),
            len(page.all_issues),
        )
        return page

    def _parse_entry(self, html: str, issues: list[ParseIssue]) -> list[Fragment]:
        try:
            title = find_element("h1", html)
            if title is None:
                logger.warning("Page has no <h1> title")
                return []
            return zip_content(_without_buttons(title))
        except ParseError as e:
            logger.warning("Failed to parse page title: %s", e)
            issues.append(ParseIssue.from_error(e, "entry"))
            return []

    def _parse_introduction(self, html: str, issues: list[ParseIssue]) -> Description:
        try:
            return parse_description(docblock(html), self._introduction_heading)
        except ParseError as e:
            logger.warning("Failed to parse page introduction: %s", e)
            issues.append(ParseIssue.from_error(e, "introduction"))
            return Description()

    def _parse_sidebar(self, html: str, issues: list[ParseIssue]) -> Sidebar:
        try:
            return parse_sidebar(html)
        except ParseError as e:
            logger.warning("Failed to parse sidebar: %s", e)
            issues.append(ParseIssue.from_error(e, "sidebar"))
            return Sidebar()


def _without_buttons(element: Element) -> Element:
    # The title carries a "Copy item path" button
    nodes = [node for node in element.nodes if not (isinstance(node, Element) and node.kind == "button")]
    return replace(element, nodes=nodes)


def parse_page(html: str, workers: int = 1) -> Page:
    """Parse a documentation page; raises MissingAnchor if its layout is unknown."""
    return PageParser(workers=workers).parse(html)
