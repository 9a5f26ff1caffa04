"""Base classes and chunk helpers shared by the page parsers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

from rustdoc_page.domain.entities import ParseIssue
from rustdoc_page.domain.exceptions import EmptyExpectedContent, ParseError
from rustdoc_page.domain.fragments import unescape
from rustdoc_page.infrastructure.html.element import Element

logger = logging.getLogger(__name__)


def split_blocks(html: str, opener: str) -> list[str]:
    """Split into pieces that each start with ``opener``; leading text is dropped."""
    parts = html.split(opener)
    return [opener + part for part in parts[1:]]


def split_terminated(html: str, terminator: str) -> list[str]:
    """Split on ``terminator`` (excluded), dropping blank pieces."""
    return [part for part in html.split(terminator) if part.strip()]


def heading_text(heading: Element) -> str:
    """Text of a heading: its own text, or the first link's text if it has none."""
    own = "".join(run.text for run in heading.content).strip()
    if own:
        return unescape(own)
    link = heading.find("a")
    if link is not None:
        text = link.text().strip()
        if text:
            return unescape(text)
    raise EmptyExpectedContent(f"<{heading.kind}> heading has no text")


def collect_records(
    chunks: Iterable[str],
    parse_one: Callable[[str], Any],
    context: str,
) -> tuple[list[Any], list[ParseIssue]]:
    """Parse every chunk on its own; a failing chunk becomes an issue.

    ``parse_one`` may return None for chunks that turn out not to be records.
    """
    records: list[Any] = []
    issues: list[ParseIssue] = []
    for index, chunk in enumerate(chunks):
        try:
            record = parse_one(chunk)
        except ParseError as e:
            logger.warning("Failed to parse %s #%d: %s", context, index, e)
            issues.append(ParseIssue.from_error(e, f"{context} #{index}"))
            continue
        if record is not None:
            records.append(record)
    return records, issues


class ChunkParser(ABC):
    """Base class for parsers that slice a chunk into independent records."""

    record_name = "record"

    def parse(self, html: str) -> tuple[Any, list[ParseIssue]]:
        """Parse a chunk and return the assembled result plus record issues.

        Nested records (methods inside an implementation) report their
        issues through the list handed to ``_parse_record``.
        """
        nested: list[ParseIssue] = []
        records, issues = collect_records(
            self._split(html),
            lambda chunk: self._parse_record(chunk, nested),
            self.record_name,
        )
        return self._build_result(records), issues + nested

    @abstractmethod
    def _split(self, html: str) -> list[str]:
        """Slice the chunk into one piece per record."""
        ...

    @abstractmethod
    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> Any:
        ...

    @abstractmethod
    def _build_result(self, records: list[Any]) -> Any:
        """Wrap parsed records into the result type."""
        ...
