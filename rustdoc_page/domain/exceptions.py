"""Parse error hierarchy."""


class ParseError(Exception):
    pass


class MalformedTag(ParseError):
    """Tag text that cannot be split into a name and attributes."""


class UnexpectedEof(ParseError):
    """A tag or element was still open when the input ran out."""


class MissingAnchor(ParseError):
    """A literal marker the page layout relies on is absent."""

    def __init__(self, anchor: str) -> None:
        super().__init__(f"Required anchor not found: {anchor!r}")
        self.anchor = anchor


class UnknownSectionError(ParseError):
    def __init__(self, heading: str) -> None:
        super().__init__(f"Unsupported section heading: {heading!r}")
        self.heading = heading


class EmptyExpectedContent(ParseError):
    """An element that must carry text has none."""
