from bs4 import BeautifulSoup

from twml.html_document import HtmlDocument
from twml.tokens import CssVariableTokenSource, NullTokenSource, StaticTokenSource


class TestCssVariableTokenSource:
    def test_reads_custom_properties(self):
        source = CssVariableTokenSource.from_css(
            ":root{--color-red-500:#ef4444;--spacing: 0.25rem}\nhtml { --color-bg: #000; }"
        )
        assert source.has_color("red-500")
        assert source.has_color("bg")
        assert not source.has_color("blue")
        assert source.get("--spacing") == "0.25rem"

    def test_ignores_properties_scoped_to_other_selectors(self):
        source = CssVariableTokenSource.from_css(
            ".card { --color-accent: red; }\n.dark { --color-bg: #000; }\n:root .x { --color-y: blue; }"
        )
        assert not source.has_color("accent")
        assert not source.has_color("bg")
        assert not source.has_color("y")
        assert len(source) == 0

    def test_root_in_selector_list_and_layer(self):
        source = CssVariableTokenSource.from_css(
            ".card, :root { --color-a: red; }\n@layer theme { :root { --color-b: blue; } }"
        )
        assert source.has_color("a")
        assert source.has_color("b")

    def test_ignores_comments(self):
        source = CssVariableTokenSource.from_css("/* :root { --color-x: red; } */ .y { color: red; }")
        assert not source.has_color("x")

    def test_empty_value_is_undefined(self):
        assert not CssVariableTokenSource.from_css(":root { --color-x: ; }").has_color("x")

    def test_later_declarations_win(self):
        source = CssVariableTokenSource.from_css(":root { --color-x: red; }", ":root { --color-x: ; }")
        assert not source.has_color("x")

    def test_ignores_var_references_and_bem_selectors(self):
        source = CssVariableTokenSource.from_css(
            ".a { color: var(--color-x); }\n.btn--color-y:hover { color: red; }"
        )
        assert len(source) == 0


def test_static_and_null_sources():
    assert StaticTokenSource(["brand"]).has_color("brand")
    assert not StaticTokenSource().has_color("brand")
    assert not NullTokenSource().has_color("brand")


def test_document_token_source_reads_root_style_attribute():
    document = HtmlDocument('<html style="--color-accent: teal"><body></body></html>')
    assert document.token_source().has_color("accent")


def test_document_token_source_skips_scoped_style_blocks():
    document = HtmlDocument(
        "<html><head><style>.card { --color-accent: red; } :root { --color-brand: blue; }</style>"
        "</head><body></body></html>"
    )
    source = document.token_source()
    assert source.has_color("brand")
    assert not source.has_color("accent")


class TestChangeFor:
    def test_added_styled_node(self):
        document = HtmlDocument("<body></body>")
        node = document.soup.new_tag("div", attrs={"data-tw-p": "4"})
        assert document.change_for([node], "data-tw-").has_styled_attributes

    def test_styled_descendant(self):
        fragment = BeautifulSoup('<section><span data-tw-m="2"></span></section>', "html.parser")
        document = HtmlDocument("<body></body>")
        assert document.change_for([fragment.section], "data-tw-").has_styled_attributes

    def test_unstyled_nodes_and_text(self):
        fragment = BeautifulSoup("<p>hi</p>", "html.parser")
        document = HtmlDocument("<body></body>")
        change = document.change_for([fragment.p, fragment.p.string], "data-tw-")
        assert not change.has_styled_attributes
