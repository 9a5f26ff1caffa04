"""Markdown formatter for parsed documentation pages."""

from __future__ import annotations

from rustdoc_page.domain.entities import (
    Description,
    Fields,
    Implementations,
    Method,
    Methods,
    ObjectSafety,
    Page,
    RequiredAssociatedTypes,
    Section,
    TraitImplementations,
    UnknownSection,
    Variants,
)
from rustdoc_page.domain.fragments import Bold, Code, CodeBlock, Colored, Fragment, Raw, plain_text


class MarkdownFormatter:
    """Formats a parsed Page as Markdown. Colour hints are dropped."""

    def format_error(self, exception: Exception | str) -> str:
        return f"**Error:** {exception}\n"

    def format_page(self, page: Page) -> str:
        parts: list[str] = [f"# {self.format_fragments(page.entry).strip()}\n"]

        description = self.format_description(page.introduction, level=2)
        if description:
            parts.append(description)

        for section in page.main_content.sections:
            parts.append(self.format_section(section))

        issues = page.all_issues
        if issues:
            parts.append(f"---\n\n*{len(issues)} part(s) of the page could not be parsed.*\n")

        return "\n".join(parts)

    def format_fragments(self, fragments: list[Fragment]) -> str:
        return "".join(self.format_fragment(f) for f in fragments)

    def format_fragment(self, fragment: Fragment) -> str:
        if isinstance(fragment, Raw):
            return fragment.text
        if isinstance(fragment, Bold):
            return f"**{self.format_fragments(fragment.fragments)}**"
        if isinstance(fragment, Code):
            return f"`{fragment.plain_text()}`"
        if isinstance(fragment, CodeBlock):
            code = fragment.plain_text().strip("\n")
            return f"\n```rust\n{code}\n```\n"
        if isinstance(fragment, Colored):
            return self.format_fragment(fragment.fragment)
        return ""

    def format_description(self, description: Description, level: int = 3) -> str:
        parts: list[str] = []
        if description.introduction:
            parts.append(self.format_fragments(description.introduction).strip())
            parts.append("")

        heading = "#" * level
        for section in description.sections:
            parts.append(f"{heading} {section.name.plain_text()}\n")
            parts.append(self.format_fragments(section.content).strip())
            parts.append("")

        return "\n".join(parts)

    def format_section(self, section: Section) -> str:
        parts: list[str] = [f"## {section.name.plain_text()}\n"]
        content = section.content

        if isinstance(content, Fields):
            for f in content.fields:
                desc = self.format_fragments(f.description).strip()
                line = f"- `{plain_text(f.content).strip()}`"
                parts.append(f"{line} {desc}" if desc else line)
            parts.append("")
        elif isinstance(content, Implementations):
            for impl in content.implementations:
                parts.append(f"### `{impl.inherent_impl.plain_text().strip()}`\n")
                parts.extend(self._format_method(m) for m in impl.methods)
        elif isinstance(content, TraitImplementations):
            for impl in content.implementations:
                parts.append(f"### `{impl.trait_impl.plain_text().strip()}`\n")
                parts.extend(self._format_method(m) for m in impl.methods)
        elif isinstance(content, Variants):
            for variant in content.variants:
                desc = self.format_fragments(variant.description).strip()
                line = f"- `{variant.name.plain_text().strip()}`"
                parts.append(f"{line} {desc}" if desc else line)
            parts.append("")
        elif isinstance(content, RequiredAssociatedTypes):
            for assoc in content.associated_types:
                desc = self.format_fragments(assoc.description).strip()
                line = f"- `{assoc.name.plain_text().strip()}`"
                parts.append(f"{line} {desc}" if desc else line)
            parts.append("")
        elif isinstance(content, Methods):
            parts.extend(self._format_method(m) for m in content.methods)
        elif isinstance(content, ObjectSafety):
            parts.append(self.format_fragments(content.fragments).strip())
            parts.append("")
        elif isinstance(content, UnknownSection):
            parts.append("*This section is not supported.*\n")

        return "\n".join(parts)

    def _format_method(self, method: Method) -> str:
        signature = plain_text(method.signature).strip()
        parts: list[str] = [f"#### `{signature}`\n"]
        description = self.format_description(method.description, level=5)
        if description:
            parts.append(description)
        return "\n".join(parts)
