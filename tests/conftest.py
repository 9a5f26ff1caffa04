"""Shared test fixtures for rustdoc_page tests."""

from __future__ import annotations

import pytest

SIDEBAR_HTML = (
    '<h3><a href="#implementations">Methods</a></h3>'
    '<ul class="block method"><li><a href="#method.new">new</a></li></ul>'
    '<h3><a href="#trait-implementations">Trait Implementations</a></h3>'
    '<ul class="block trait-implementation">'
    '<li><a href="#impl-Clone-for-Foo">Clone</a></li>'
    '<li><a href="#impl-Debug-for-Foo">Debug</a></li>'
    "</ul>"
)

IMPLEMENTATIONS_HTML = (
    '<div id="implementations-list">'
    '<details class="toggle implementors-toggle" open><summary>'
    '<section id="impl-Foo" class="impl"><a href="#impl-Foo" class="anchor">§</a>'
    '<h3 class="code-header">impl <a class="struct" href="struct.Foo.html">Foo</a></h3>'
    "</section></summary>"
    '<div class="impl-items">'
    '<details class="toggle method-toggle" open><summary>'
    '<section id="method.new" class="method">'
    '<h4 class="code-header">pub fn <a href="#method.new" class="fn">new</a>() -&gt; Self</h4>'
    "</section></summary>"
    '<div class="docblock"><p>Creates a new <code>Foo</code>.</p>'
    '<h5 id="panics"><a href="#panics">Panics</a></h5><p>Never.</p></div>'
    "</details>"
    "</div></details></div>"
)

TRAIT_IMPLEMENTATIONS_HTML = (
    '<div id="trait-implementations-list">'
    '<details class="toggle implementors-toggle" open><summary>'
    '<section id="impl-Clone-for-Foo" class="impl">'
    '<h3 class="code-header">impl <a class="trait" href="#">Clone</a> for '
    '<a class="struct" href="#">Foo</a></h3>'
    "</section></summary>"
    '<div class="impl-items">'
    '<details class="toggle method-toggle" open><summary>'
    '<section id="method.clone" class="method trait-impl">'
    '<h4 class="code-header">fn <a href="#method.clone" class="fn">clone</a>(&amp;self) -&gt; '
    '<a class="struct" href="#">Foo</a></h4>'
    "</section></summary>"
    '<div class="docblock"><p>Returns a copy of the value.</p></div>'
    "</details></div></details>"
    '<section id="impl-Copy-for-Foo" class="impl">'
    '<h3 class="code-header">impl <a class="trait" href="#">Copy</a> for '
    '<a class="struct" href="#">Foo</a></h3>'
    "</section>"
    "</div>"
)

VARIANTS_HTML = (
    '<div class="variants">'
    '<section id="variant.Ok" class="variant"><a href="#variant.Ok" class="anchor">§</a>'
    '<h3 class="code-header">Ok(<a class="primitive" href="#">T</a>)</h3></section>'
    '<div class="docblock"><p>Contains the success value</p></div>'
    '<section id="variant.Err" class="variant"><a href="#variant.Err" class="anchor">§</a>'
    '<h3 class="code-header">Err(E)</h3></section>'
    '<div class="docblock"><p>Contains the error value</p></div>'
    "</div>"
)

FIELDS_HTML = (
    '<span id="structfield.name" class="structfield section-header">'
    '<a href="#structfield.name" class="anchor field">§</a>'
    '<code>name: <a class="struct" href="#">String</a></code></span>'
    '<div class="docblock"><p>The name.</p></div>'
    '<span id="structfield.size" class="structfield section-header">'
    '<a href="#structfield.size" class="anchor field">§</a>'
    '<code>size: <a class="primitive" href="#">usize</a></code></span>'
    '<div class="docblock"><p>The size in bytes.</p></div>'
)


DECLARATION_HTML = '<pre class="rust item-decl"><code>pub struct Foo { /* private fields */ }</code></pre>'


def _page(main_sections: str, declaration: str = DECLARATION_HTML) -> str:
    return (
        "<!DOCTYPE html><html lang=\"en\"><head><meta charset=\"utf-8\">"
        "<title>Foo in demo - Rust</title></head>"
        '<body class="rustdoc struct"><nav class="sidebar">'
        f"<section>{SIDEBAR_HTML}</section></nav>"
        '<main><div class="width-limiter"><section id="main-content" class="content">'
        '<div class="main-heading"><h1>Struct <a class="mod" href="index.html">demo</a>::<wbr>'
        '<a class="struct" href="#">Foo</a>'
        '<button id="copy-path" title="Copy item path to clipboard">Copy item path</button></h1></div>'
        f"{declaration}"
        '<details class="toggle top-doc" open><summary class="hideme"><span>Expand description</span>'
        '</summary><div class="docblock"><p>A demo struct.</p>'
        '<h2 id="examples"><a class="doc-anchor" href="#examples">§</a>Examples</h2>'
        '<div class="example-wrap"><pre class="rust rust-example-rendered"><code>'
        '<span class="kw">let </span>foo = Foo::new();</code></pre></div></div></details>'
        f"{main_sections}"
        "</section></div></main>"
        '<script src="../search.js"></script></body></html>'
    )


@pytest.fixture
def sidebar_html() -> str:
    return SIDEBAR_HTML


@pytest.fixture
def implementations_html() -> str:
    return IMPLEMENTATIONS_HTML


@pytest.fixture
def trait_implementations_html() -> str:
    return TRAIT_IMPLEMENTATIONS_HTML


@pytest.fixture
def variants_html() -> str:
    return VARIANTS_HTML


@pytest.fixture
def fields_html() -> str:
    return FIELDS_HTML


@pytest.fixture
def main_content_html() -> str:
    return (
        '<h2 id="fields" class="fields section-header">Fields'
        '<a href="#fields" class="anchor">§</a></h2>'
        f"{FIELDS_HTML}"
        '<h2 id="implementations" class="section-header">Implementations'
        '<a href="#implementations" class="anchor">§</a></h2>'
        f"{IMPLEMENTATIONS_HTML}"
        '<h2 id="trait-implementations" class="section-header">Trait Implementations'
        '<a href="#trait-implementations" class="anchor">§</a></h2>'
        f"{TRAIT_IMPLEMENTATIONS_HTML}"
    )


@pytest.fixture
def page_html(main_content_html) -> str:
    return _page(main_content_html)


@pytest.fixture
def page_builder():
    return _page


@pytest.fixture
def page_file(tmp_path, page_html):
    path = tmp_path / "struct.Foo.html"
    path.write_text(page_html, encoding="utf-8")
    return path
