"""Zipping: merging an element's text runs with its resolved children.

The generator writes inline markup as text runs separated by child elements
(links, inline code, coloured item names). Zipping walks them in document
order and turns every child into a single fragment, so a heading such as
``pub fn <a class="fn">map</a>(self)`` becomes
``[Raw("pub fn "), Colored(Raw("map"), METHOD), Raw("(self)")]``.
"""

from __future__ import annotations

from rustdoc_page.domain.fragments import Bold, Code, ColorTag, Colored, Fragment, Raw, unescape

from .element import Element

BOLD_WRAPPER = "strong"
CONTAINER = "div"
WHERE_CLAUSE_CLASS = "where"


def zip_content(element: Element) -> list[Fragment]:
    """Return the element's full content as unescaped fragments.

    Special shapes:
    - a leading ``<strong>`` gives ``[Bold(strong text), own first text]``;
    - ``div`` children never carry inline content and are skipped;
    - a where-clause child is zipped on its own and always comes last.
    """
    children = element.children
    if children and children[0].kind == BOLD_WRAPPER:
        bold = Bold([children[0].first_content()])
        return [bold.unescaped(), element.first_content().unescaped()]

    zipped: list[Fragment] = []
    where_clauses: list[Element] = []
    for node in element.nodes:
        if isinstance(node, Raw):
            if not _is_layout(node.text):
                zipped.append(node.unescaped())
        elif node.has_class(WHERE_CLAUSE_CLASS):
            where_clauses.append(node)
        elif node.void or node.kind == CONTAINER:
            continue
        else:
            zipped.append(resolve_child(node).unescaped())

    for where_clause in where_clauses:
        zipped.extend(zip_content(where_clause))

    return zipped


def resolve_child(child: Element) -> Fragment:
    """Turn one inline child element into a single fragment."""
    for css_class in child.classes:
        color = ColorTag.from_css_class(css_class)
        if color is not None:
            return Colored(child.first_content(), color)

    if child.kind == "code":
        return Code(child.first_content())

    if child.children:
        # <a><code>..</code></a> or <em><a>..</a></em>
        first = child.children[0]
        if first.kind == "code":
            return Code(first.first_content())
        return first.first_content()

    return child.first_content()


def zip_code(element: Element) -> Raw:
    """Flatten a code sample (spans and text) into one literal Raw fragment."""
    pieces: list[str] = []
    for node in element.nodes:
        if isinstance(node, Raw):
            pieces.append(unescape(node.text))
        elif not node.void:
            pieces.append(unescape(node.text()))
    return Raw("".join(pieces))


def _is_layout(text: str) -> bool:
    """Whitespace between block tags, as opposed to a meaningful space."""
    return not text.strip() and "\n" in text
