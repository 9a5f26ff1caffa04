"""Parser for a single method block: signature header plus doc block."""

from __future__ import annotations

from rustdoc_page.domain.entities import Method
from rustdoc_page.infrastructure.html.element import extract_element
from rustdoc_page.infrastructure.html.zipper import zip_content

from .description_parser import DEFAULT_HEADING, docblock, parse_description

METHOD_HEADER = "<h4"


def parse_method(html: str, heading: str = DEFAULT_HEADING) -> Method:
    """Parse one method block into its ``<h4>`` signature and its description."""
    signature = zip_content(extract_element("h4", html))
    body = docblock(html) or html.partition("</h4>")[2]
    return Method(signature=signature, description=parse_description(body, heading))
