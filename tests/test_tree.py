# File: tests/test_tree.py
import pytest

from page_scout.dom.html import parse_html
from page_scout.dom.tree import DocumentTree, Node, NodeKind, TreeBuilder


@pytest.fixture()
def small_tree() -> DocumentTree:
    b = TreeBuilder()
    html = b.add_element(b.document, "HTML")
    body = b.add_element(html, "Body", {"id": "top"})
    b.add_text(body, "lead ")
    div = b.add_element(body, "div")
    b.add_text(div, "inner")
    b.add_comment(div, "ignored")
    b.add_element(body, "p")
    return b.build(title="T", url="https://example.com")


def test_builder_lowercases_tags_and_keeps_order(small_tree):
    body = small_tree.body
    assert body is not None
    assert body.tag == "body"
    assert body.attributes["id"] == "top"
    kinds = [n.kind for n in small_tree.child_nodes(body.id)]
    assert kinds == [NodeKind.TEXT, NodeKind.ELEMENT, NodeKind.ELEMENT]
    assert [n.tag for n in small_tree.element_children(body.id)] == ["div", "p"]


def test_descendants_are_document_order(small_tree):
    tags = [n.tag for n in small_tree.descendants(small_tree.root) if n.is_element]
    assert tags == ["html", "body", "div", "p"]


def test_query_and_query_all(small_tree):
    body = small_tree.body
    assert small_tree.query("DIV").tag == "div"
    assert small_tree.query("table") is None
    assert [n.tag for n in small_tree.query_all(("p", "div"), within=body.id)] == ["div", "p"]


def test_text_content_and_parent(small_tree):
    body = small_tree.body
    assert small_tree.text_content(body.id) == "lead inner"
    div = small_tree.query("div")
    assert small_tree.parent_element(div.id).id == body.id
    assert small_tree.parent_element(small_tree.query("html").id) is None


def test_text_nodes_cannot_have_children():
    b = TreeBuilder()
    text = b.add_text(b.document, "x")
    with pytest.raises(ValueError):
        b.add_element(text, "span")


def test_tree_requires_document_node():
    with pytest.raises(ValueError):
        DocumentTree([Node(id=0, kind=NodeKind.ELEMENT, tag="div")])


def test_parse_html_builds_browser_like_skeleton():
    capture = parse_html("<p class='a b'>Hi<!-- c --></p>", url="https://x.test/")
    tree = capture.tree
    assert tree.url == "https://x.test/"
    assert tree.body is not None
    p = tree.query("p")
    assert p.attributes["class"] == "a b"
    kinds = [n.kind for n in tree.child_nodes(p.id)]
    assert kinds == [NodeKind.TEXT, NodeKind.COMMENT]


def test_parse_html_title_and_doctype(article_html):
    tree = parse_html(article_html).tree
    assert tree.title == "Sample Page"
    assert tree.node(tree.root).kind is NodeKind.DOCUMENT
    assert all(n.kind is not NodeKind.DOCUMENT for n in tree.descendants(tree.root))


def test_html_parser_keeps_fragments_without_body():
    tree = parse_html("<div>x</div>", parser="html.parser").tree
    assert tree.body is None
    assert tree.query("div") is not None
