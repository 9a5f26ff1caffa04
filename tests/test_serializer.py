"""Tests for the JSON interchange."""

import json

from rustdoc_page.domain.entities import (
    Description,
    MainContent,
    Page,
    ParseIssue,
    RequiredAssociatedType,
    RequiredAssociatedTypes,
    Section,
    Sidebar,
    SidebarSection,
    UnknownSection,
)
from rustdoc_page.domain.fragments import Bold, Code, CodeBlock, ColorTag, Colored, Raw
from rustdoc_page.infrastructure.parsers.page_parser import parse_page
from rustdoc_page.presentation.serializer import to_dict, to_json


class TestToDict:
    def test_raw(self):
        assert to_dict(Raw("x")) == {"type": "raw", "text": "x"}

    def test_nested_fragments(self):
        fragment = Bold([Code(Raw("a")), CodeBlock(Raw("b"))])
        assert to_dict(fragment) == {
            "type": "bold",
            "fragments": [
                {"type": "code", "fragment": {"type": "raw", "text": "a"}},
                {"type": "code_block", "fragment": {"type": "raw", "text": "b"}},
            ],
        }

    def test_colored(self):
        assert to_dict(Colored(Raw("Vec"), ColorTag.STRUCT)) == {
            "type": "colored",
            "fragment": {"type": "raw", "text": "Vec"},
            "color": {"name": "struct", "hex": "#2dbfb8"},
        }

    def test_section_content_tag(self):
        content = RequiredAssociatedTypes([RequiredAssociatedType(name=Raw("Item"))])
        data = to_dict(content)
        assert data["type"] == "required_associated_types"
        assert data["associated_types"][0] == {
            "name": {"type": "raw", "text": "Item"},
            "description": [],
        }

    def test_untagged_records(self):
        assert to_dict(SidebarSection("Methods", ["new"])) == {"name": "Methods", "items": ["new"]}

    def test_unknown_section(self):
        section = Section(
            name=Bold([Raw("Aliases")]),
            content=UnknownSection(heading="Aliases"),
            issues=[ParseIssue(kind="UnknownSectionError", message="m", context="Aliases")],
        )
        data = to_dict(section)
        assert data["content"] == {"type": "unknown_section", "heading": "Aliases", "raw": ""}
        assert data["issues"] == [{"kind": "UnknownSectionError", "message": "m", "context": "Aliases"}]


class TestToJson:
    def test_empty_page(self):
        page = Page(entry=[], sidebar=Sidebar(), introduction=Description(), main_content=MainContent())
        assert json.loads(to_json(page)) == {
            "entry": [],
            "sidebar": {"sections": [], "issues": []},
            "introduction": {"introduction": [], "sections": []},
            "main_content": {"sections": [], "issues": []},
            "issues": [],
        }

    def test_parsed_page(self, page_html):
        data = json.loads(to_json(parse_page(page_html), indent=None))
        assert data["entry"][-1]["type"] == "colored"
        assert [s["content"]["type"] for s in data["main_content"]["sections"]] == [
            "fields",
            "implementations",
            "trait_implementations",
        ]

    def test_non_ascii_kept(self):
        page = Page(entry=[Raw("§")], sidebar=Sidebar(), introduction=Description(), main_content=MainContent())
        assert "§" in to_json(page)
