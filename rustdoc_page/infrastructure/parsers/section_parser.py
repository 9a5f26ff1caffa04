"""Parsers for the typed sections of a page's main content.

Each parser receives the body that follows one ``<h2>`` heading and slices
it into records along the generator's fixed markers.
"""

from __future__ import annotations

from rustdoc_page.domain.entities import (
    Field,
    Fields,
    Implementation,
    Implementations,
    Method,
    Methods,
    ObjectSafety,
    ParseIssue,
    RequiredAssociatedType,
    RequiredAssociatedTypes,
    TraitImplementation,
    TraitImplementations,
    Variant,
    Variants,
)
from rustdoc_page.domain.exceptions import EmptyExpectedContent
from rustdoc_page.domain.fragments import Bold, Fragment
from rustdoc_page.infrastructure.html.element import build_element, extract_element, find_element
from rustdoc_page.infrastructure.html.zipper import zip_content

from .base import ChunkParser, collect_records, split_blocks, split_terminated
from .description_parser import DEFAULT_HEADING
from .method_parser import METHOD_HEADER, parse_method

IMPLEMENTORS_TOGGLE_OPEN = '<details class="toggle implementors-toggle" open>'
IMPLEMENTORS_TOGGLE_CLOSED = '<details class="toggle implementors-toggle">'
SUB_VARIANT = '<div class="sub-variant"'


def _paragraph(html: str) -> list[Fragment]:
    paragraph = find_element("p", html)
    return zip_content(paragraph) if paragraph is not None else []


def _header(html: str, kind: str) -> Fragment:
    return Bold(zip_content(extract_element(kind, html)))


class MethodListParser(ChunkParser):
    """Methods of a trait or an impl block, one record per signature header.

    Documented methods sit in a collapsible toggle with their doc block,
    undocumented ones are a bare header; both start at their ``<h4>``.
    """

    record_name = "method"

    def __init__(self, method_heading: str = DEFAULT_HEADING) -> None:
        self._method_heading = method_heading

    def _split(self, html: str) -> list[str]:
        return split_blocks(html, METHOD_HEADER)

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> Method:
        return parse_method(chunk, self._method_heading)

    def _build_result(self, records: list[Method]) -> Methods:
        return Methods(records)

    def parse_methods(self, html: str, issues: list[ParseIssue]) -> list[Method]:
        methods, method_issues = collect_records(
            self._split(html),
            lambda chunk: self._parse_record(chunk, issues),
            self.record_name,
        )
        issues.extend(method_issues)
        return methods


class FieldsParser(ChunkParser):
    """Named or tuple fields of a struct: a ``<code>`` span then its docs."""

    record_name = "field"

    def _split(self, html: str) -> list[str]:
        return split_terminated(html, "</div>")

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> Field | None:
        if "<code" not in chunk:
            return None
        head, found, tail = chunk.partition("</span>")
        if not found:
            raise EmptyExpectedContent("Field has no closing </span> after its declaration")
        return Field(
            content=zip_content(extract_element("code", head)),
            description=_paragraph(tail),
        )

    def _build_result(self, records: list[Field]) -> Fields:
        return Fields(records)


class ImplementationsParser(ChunkParser):
    """Inherent ``impl`` blocks, each with its methods."""

    record_name = "implementation"
    opener = IMPLEMENTORS_TOGGLE_OPEN

    def __init__(self, method_heading: str = DEFAULT_HEADING) -> None:
        self._methods = MethodListParser(method_heading)

    def _split(self, html: str) -> list[str]:
        return split_blocks(html, self.opener)

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> Implementation:
        header, _, items = chunk.partition("</summary>")
        return Implementation(
            inherent_impl=_header(header, "h3"),
            methods=self._methods.parse_methods(items, issues),
        )

    def _build_result(self, records: list[Implementation]) -> Implementations:
        return Implementations(records)


class BlanketImplementationsParser(ChunkParser):
    """Blanket trait impls, rendered collapsed by the generator."""

    record_name = "blanket implementation"
    opener = IMPLEMENTORS_TOGGLE_CLOSED

    def __init__(self, method_heading: str = DEFAULT_HEADING) -> None:
        self._methods = MethodListParser(method_heading)

    def _split(self, html: str) -> list[str]:
        return split_blocks(html, self.opener)

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> TraitImplementation:
        header, _, items = chunk.partition("</summary>")
        return TraitImplementation(
            trait_impl=_header(header, "h3"),
            methods=self._methods.parse_methods(items, issues),
        )

    def _build_result(self, records: list[TraitImplementation]) -> TraitImplementations:
        return TraitImplementations(records)


class TraitImplementationsParser(ChunkParser):
    """Trait impls, with or without items.

    Impls with items are ``<details>`` toggles, impls without items are bare
    sections; both carry exactly one ``<h3>`` header, so records start there.
    """

    record_name = "trait implementation"

    def __init__(self, method_heading: str = DEFAULT_HEADING) -> None:
        self._methods = MethodListParser(method_heading)

    def _split(self, html: str) -> list[str]:
        return split_blocks(html, "<h3")

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> TraitImplementation:
        header, _, items = chunk.partition("</h3>")
        return TraitImplementation(
            trait_impl=Bold(zip_content(build_element(header + "</h3>"))),
            methods=self._methods.parse_methods(items, issues),
        )

    def _build_result(self, records: list[TraitImplementation]) -> TraitImplementations:
        return TraitImplementations(records)


class AutoTraitImplementationsParser(ChunkParser):
    record_name = "auto trait implementation"

    def _split(self, html: str) -> list[str]:
        return split_terminated(html, "</section>")

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> TraitImplementation | None:
        if "<h3" not in chunk:
            return None
        return TraitImplementation(trait_impl=_header(chunk, "h3"))

    def _build_result(self, records: list[TraitImplementation]) -> TraitImplementations:
        return TraitImplementations(records)


class VariantsParser(ChunkParser):
    """Enum variants: an ``<h3>`` header followed by its doc paragraph."""

    record_name = "variant"

    def _split(self, html: str) -> list[str]:
        return split_blocks(html, "<h3")

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> Variant:
        header, _, tail = chunk.partition("</h3>")
        # Struct-like variants list their fields after the variant docs
        own_docs = tail.split(SUB_VARIANT, 1)[0]
        return Variant(
            name=Bold(zip_content(build_element(header + "</h3>"))),
            description=_paragraph(own_docs),
        )

    def _build_result(self, records: list[Variant]) -> Variants:
        return Variants(records)


class RequiredAssociatedTypesParser(ChunkParser):
    record_name = "associated type"

    def _split(self, html: str) -> list[str]:
        return split_terminated(html, "</details>")

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> RequiredAssociatedType | None:
        if "<h4" not in chunk:
            return None
        return RequiredAssociatedType(
            name=_header(chunk, "h4"),
            description=_paragraph(chunk.partition("</h4>")[2]),
        )

    def _build_result(self, records: list[RequiredAssociatedType]) -> RequiredAssociatedTypes:
        return RequiredAssociatedTypes(records)


class ObjectSafetyParser(ChunkParser):
    """The object-safety note of a trait, kept as a single fragment run."""

    record_name = "object safety note"

    def _split(self, html: str) -> list[str]:
        return [html] if html.strip() else []

    def _parse_record(self, chunk: str, issues: list[ParseIssue]) -> list[Fragment]:
        return zip_content(build_element(chunk))

    def _build_result(self, records: list[list[Fragment]]) -> ObjectSafety:
        return ObjectSafety(records[0] if records else [])
