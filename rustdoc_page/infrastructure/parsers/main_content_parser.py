"""Section dispatcher: splits the main content on ``<h2>`` and routes each body."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from rustdoc_page.domain.entities import MainContent, ParseIssue, Section, SectionContent, UnknownSection
from rustdoc_page.domain.exceptions import ParseError, UnexpectedEof, UnknownSectionError
from rustdoc_page.domain.fragments import Bold, Raw
from rustdoc_page.infrastructure.html.element import build_element

from .base import ChunkParser, heading_text, split_blocks
from .description_parser import DEFAULT_HEADING
from .section_parser import (
    AutoTraitImplementationsParser,
    BlanketImplementationsParser,
    FieldsParser,
    ImplementationsParser,
    MethodListParser,
    ObjectSafetyParser,
    RequiredAssociatedTypesParser,
    TraitImplementationsParser,
    VariantsParser,
)

logger = logging.getLogger(__name__)

SECTION_MARKER = "<h2"


class MainContentParser:
    """Dispatches each main-content section to the parser for its heading.

    Sections are independent of each other, so with ``workers > 1`` they are
    parsed on a thread pool; results keep the document order.
    """

    def __init__(self, method_heading: str = DEFAULT_HEADING, workers: int = 1) -> None:
        self._workers = max(1, workers)
        fields = FieldsParser()
        trait_implementations = TraitImplementationsParser(method_heading)
        methods = MethodListParser(method_heading)
        self._parsers: dict[str, ChunkParser] = {
            "Fields": fields,
            "Tuple Fields": fields,
            "Implementations": ImplementationsParser(method_heading),
            "Trait Implementations": trait_implementations,
            "Implementors": trait_implementations,
            "Auto Trait Implementations": AutoTraitImplementationsParser(),
            "Blanket Implementations": BlanketImplementationsParser(method_heading),
            "Variants": VariantsParser(),
            "Required Associated Types": RequiredAssociatedTypesParser(),
            "Required Methods": methods,
            "Provided Methods": methods,
            "Object Safety": ObjectSafetyParser(),
        }

    @property
    def supported_headings(self) -> list[str]:
        return sorted(self._parsers)

    def parse(self, html: str) -> MainContent:
        chunks = split_blocks(html, SECTION_MARKER)
        if self._workers > 1 and len(chunks) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as executor:
                results = list(executor.map(self._parse_chunk, chunks))
        else:
            results = [self._parse_chunk(chunk) for chunk in chunks]

        sections: list[Section] = []
        issues: list[ParseIssue] = []
        for result in results:
            if isinstance(result, ParseIssue):
                issues.append(result)
            else:
                sections.append(result)
        return MainContent(sections=sections, issues=issues)

    def parse_section_content(self, heading: str, body: str) -> tuple[SectionContent, list[ParseIssue]]:
        """Parse a section body with the parser registered for ``heading``.

        Raises UnknownSectionError when no parser handles the heading.
        """
        parser = self._parsers.get(heading)
        if parser is None:
            raise UnknownSectionError(heading)
        return parser.parse(body)

    def _parse_chunk(self, chunk: str) -> Section | ParseIssue:
        try:
            heading, body = _split_heading(chunk)
        except ParseError as e:
            logger.warning("Skipping section with unreadable heading: %s", e)
            return ParseIssue.from_error(e, "section heading")

        name = Bold([Raw(heading)])
        try:
            content, issues = self.parse_section_content(heading, body)
        except UnknownSectionError as e:
            logger.warning("%s; keeping its raw content", e)
            logger.debug("Supported section headings: %s", ", ".join(self.supported_headings))
            return Section(
                name=name,
                content=UnknownSection(heading=heading, raw=body),
                issues=[ParseIssue.from_error(e, heading)],
            )

        logger.debug("Parsed section '%s' with %d issue(s)", heading, len(issues))
        return Section(name=name, content=content, issues=issues)


def _split_heading(chunk: str) -> tuple[str, str]:
    head, found, body = chunk.partition("</h2>")
    if not found:
        raise UnexpectedEof("Section heading <h2> is never closed")
    return heading_text(build_element(head + found)), body


def parse_main_content(html: str, workers: int = 1) -> MainContent:
    return MainContentParser(workers=workers).parse(html)
