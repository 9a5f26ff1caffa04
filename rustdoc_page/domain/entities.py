"""Domain entities for a parsed documentation page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .fragments import Fragment


@dataclass(frozen=True)
class ParseIssue:
    """A record that could not be parsed, kept instead of failing the page."""

    kind: str
    message: str
    context: str = ""

    @classmethod
    def from_error(cls, error: Exception, context: str = "") -> ParseIssue:
        return cls(kind=type(error).__name__, message=str(error), context=context)


@dataclass(frozen=True)
class SidebarSection:
    name: str
    items: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Sidebar:
    sections: list[SidebarSection] = field(default_factory=list)
    issues: list[ParseIssue] = field(default_factory=list)


@dataclass(frozen=True)
class DescriptionSection:
    """Subsection of a description: Examples, Panics, Errors and the like."""

    name: Fragment
    content: list[Fragment] = field(default_factory=list)


@dataclass(frozen=True)
class Description:
    introduction: list[Fragment] = field(default_factory=list)
    sections: list[DescriptionSection] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.introduction and not self.sections


@dataclass(frozen=True)
class Method:
    signature: list[Fragment]
    description: Description = field(default_factory=Description)


@dataclass(frozen=True)
class Field:
    content: list[Fragment]
    description: list[Fragment] = field(default_factory=list)


@dataclass(frozen=True)
class Implementation:
    inherent_impl: Fragment
    methods: list[Method] = field(default_factory=list)


@dataclass(frozen=True)
class TraitImplementation:
    trait_impl: Fragment
    methods: list[Method] = field(default_factory=list)


@dataclass(frozen=True)
class Variant:
    name: Fragment
    description: list[Fragment] = field(default_factory=list)


@dataclass(frozen=True)
class RequiredAssociatedType:
    name: Fragment
    description: list[Fragment] = field(default_factory=list)


@dataclass(frozen=True)
class Fields:
    fields: list[Field] = field(default_factory=list)


@dataclass(frozen=True)
class Implementations:
    implementations: list[Implementation] = field(default_factory=list)


@dataclass(frozen=True)
class TraitImplementations:
    implementations: list[TraitImplementation] = field(default_factory=list)


@dataclass(frozen=True)
class Variants:
    variants: list[Variant] = field(default_factory=list)


@dataclass(frozen=True)
class RequiredAssociatedTypes:
    associated_types: list[RequiredAssociatedType] = field(default_factory=list)


@dataclass(frozen=True)
class Methods:
    methods: list[Method] = field(default_factory=list)


@dataclass(frozen=True)
class ObjectSafety:
    fragments: list[Fragment] = field(default_factory=list)


@dataclass(frozen=True)
class UnknownSection:
    """A section whose heading no parser recognizes; the body is kept as is."""

    heading: str
    raw: str = ""


SectionContent = Union[
    Fields,
    Implementations,
    TraitImplementations,
    Variants,
    RequiredAssociatedTypes,
    Methods,
    ObjectSafety,
    UnknownSection,
]


@dataclass(frozen=True)
class Section:
    name: Fragment
    content: SectionContent
    issues: list[ParseIssue] = field(default_factory=list)


@dataclass(frozen=True)
class MainContent:
    sections: list[Section] = field(default_factory=list)
    issues: list[ParseIssue] = field(default_factory=list)

    def get_section(self, name: str) -> Section | None:
        for section in self.sections:
            if section.name.plain_text() == name:
                return section
        return None


@dataclass(frozen=True)
class Page:
    entry: list[Fragment]
    sidebar: Sidebar
    introduction: Description
    main_content: MainContent
    issues: list[ParseIssue] = field(default_factory=list)

    @property
    def all_issues(self) -> list[ParseIssue]:
        issues = list(self.issues) + list(self.sidebar.issues) + list(self.main_content.issues)
        for section in self.main_content.sections:
            issues.extend(section.issues)
        return issues
