"""Tests for content and code-block zipping."""

import pytest

from rustdoc_page.domain.exceptions import EmptyExpectedContent
from rustdoc_page.domain.fragments import Bold, Code, ColorTag, Colored, Raw
from rustdoc_page.infrastructure.html.element import build_element
from rustdoc_page.infrastructure.html.zipper import resolve_child, zip_code, zip_content


def _zip(html):
    return zip_content(build_element(html))


class TestZipContent:
    def test_runs_and_children_alternate(self):
        fragments = _zip('<h4>pub fn <a class="fn">map</a>(self) -&gt; <a class="struct">Foo</a></h4>')
        assert fragments == [
            Raw("pub fn "),
            Colored(Raw("map"), ColorTag.METHOD),
            Raw("(self) -> "),
            Colored(Raw("Foo"), ColorTag.STRUCT),
        ]

    def test_trailing_run(self):
        fragments = _zip('<code>Option&lt;<a class="struct">Foo</a>&gt;</code>')
        assert fragments == [
            Raw("Option<"),
            Colored(Raw("Foo"), ColorTag.STRUCT),
            Raw(">"),
        ]

    def test_leading_child(self):
        fragments = _zip("<p><code>None</code> if empty</p>")
        assert fragments == [Code(Raw("None")), Raw(" if empty")]

    def test_only_text(self):
        assert _zip("<p>Plain &amp; simple</p>") == [Raw("Plain & simple")]

    def test_strong_prefix(self):
        fragments = _zip("<p><strong>Note</strong>: be careful</p>")
        assert fragments == [Bold([Raw("Note")]), Raw(": be careful")]

    def test_where_clause_last(self):
        fragments = _zip('<h4>fn f<span class="where">where T: <a class="trait">Copy</a></span>(x: T)</h4>')
        assert fragments == [
            Raw("fn f"),
            Raw("(x: T)"),
            Raw("where T: "),
            Colored(Raw("Copy"), ColorTag.TRAIT),
        ]

    def test_void_and_div_children_skipped(self):
        fragments = _zip('<h1>std::<wbr><a class="enum">Option</a><div class="x">y</div></h1>')
        assert fragments == [Raw("std::"), Colored(Raw("Option"), ColorTag.ENUM)]

    def test_layout_whitespace_dropped(self):
        fragments = _zip('<h3>\n  <a class="trait">Send</a>\n</h3>')
        assert fragments == [Colored(Raw("Send"), ColorTag.TRAIT)]

    def test_meaningful_space_kept(self):
        fragments = _zip('<p><code>a</code> <code>b</code></p>')
        assert fragments == [Code(Raw("a")), Raw(" "), Code(Raw("b"))]

    def test_link_text(self):
        assert _zip('<p>See <a href="x">the docs</a>.</p>') == [
            Raw("See "),
            Raw("the docs"),
            Raw("."),
        ]

    def test_child_without_text_fails(self):
        with pytest.raises(EmptyExpectedContent):
            _zip('<p>x <a href="y"></a></p>')


class TestResolveChild:
    def test_colored(self):
        child = build_element('<a class="macro" href="#">vec</a>')
        assert resolve_child(child) == Colored(Raw("vec"), ColorTag.MACRO)

    def test_code(self):
        assert resolve_child(build_element("<code>T</code>")) == Code(Raw("T"))

    def test_link_wrapping_code(self):
        child = build_element('<a href="#"><code>Vec</code></a>')
        assert resolve_child(child) == Code(Raw("Vec"))

    def test_nested_inline(self):
        child = build_element('<em><a href="#">here</a></em>')
        assert resolve_child(child) == Raw("here")


class TestZipCode:
    def test_flattens_spans(self):
        code = build_element(
            '<code><span class="kw">let </span>x = <span class="string">&quot;a&quot;</span>;</code>'
        )
        assert zip_code(code) == Raw('let x = "a";')

    def test_keeps_newlines(self):
        code = build_element("<code>a\n    b\n</code>")
        assert zip_code(code) == Raw("a\n    b\n")

    def test_empty(self):
        assert zip_code(build_element("<code></code>")) == Raw("")
