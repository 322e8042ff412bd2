# tests/core/test_builder.py
import pytest

from htmlval.dom.builder import DOMBuilder, doctype_name
from htmlval.dom.core import NodeKind
from htmlval.dom.vngine import VNGINE
from htmlval.errors import DocumentParseError

BACKENDS = ["html5lib", "html.parser"]

SCENARIO_A = "<!DOCTYPE html><html><head><title>T</title></head><body></body></html>"
SCENARIO_B = "<html><head></head><body><img></body></html>"
SCENARIO_C = (
    "<!DOCTYPE html><html><head><title>A</title><title>B</title></head>"
    "<body><a>link</a></body></html>"
)


def find_all(node, kind, name=None):
    found = []
    if node.kind == kind and (name is None or node.name == name):
        found.append(node)
    for child in node.children:
        found.extend(find_all(child, kind, name))
    return found


@pytest.mark.parametrize("declaration, expected", [
    ("html", "html"),
    ('html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" "x.dtd"', "html"),
    ("doctype html", "html"),
    ("DOCTYPE html", "html"),
    ("HTML", "html"),
    ("DOCTYPE HTML", "html"),
    ("svg", "svg"),
    ("", ""),
])
def test_doctype_name(declaration, expected):
    assert doctype_name(declaration) == expected


def test_unsupported_backend_is_a_parse_error():
    with pytest.raises(DocumentParseError):
        DOMBuilder("lxml-xml")


@pytest.mark.parametrize("backend", BACKENDS)
def test_build_returns_document_root(backend):
    root = DOMBuilder(backend).build(SCENARIO_A)

    assert root.kind == NodeKind.DOCUMENT
    doctypes = find_all(root, NodeKind.DOCTYPE)
    assert [d.name for d in doctypes] == ["html"]
    assert [t.name for t in find_all(root, NodeKind.ELEMENT, "title")] == ["title"]


@pytest.mark.parametrize("backend", BACKENDS)
def test_uppercase_doctype_is_accepted(backend):
    root = DOMBuilder(backend).build("<!DOCTYPE HTML><html><head></head><body></body></html>")

    assert [d.name for d in find_all(root, NodeKind.DOCTYPE)] == ["html"]
    assert VNGINE().validate(root).is_valid


def test_foreign_attributes_use_their_local_name():
    root = DOMBuilder("html5lib").build(
        '<!DOCTYPE html><html><head></head><body><svg><a xlink:href="/x">t</a></svg></body></html>'
    )
    (anchor,) = find_all(root, NodeKind.ELEMENT, "a")

    assert ("href", "/x") in anchor.attrs
    assert VNGINE().validate(root).is_valid


@pytest.mark.parametrize("backend", BACKENDS)
def test_scenarios_end_to_end(backend):
    builder, engine = DOMBuilder(backend), VNGINE()

    assert engine.validate(builder.build(SCENARIO_A)).is_valid
    assert engine.validate(builder.build(SCENARIO_B)).codes == ["MISSING_SRC", "MISSING_ALT", "MISSING_DOCTYPE"]
    assert engine.validate(builder.build(SCENARIO_C)).codes == ["DUPLICATE_ELEMENT", "MISSING_HREF"]


@pytest.mark.parametrize("backend", BACKENDS)
def test_attributes_keep_order_and_plain_strings(backend):
    root = DOMBuilder(backend).build('<a id="x" class="one two" href="/p">t</a>')
    (anchor,) = find_all(root, NodeKind.ELEMENT, "a")

    assert anchor.attrs == (("id", "x"), ("class", "one two"), ("href", "/p"))
    assert anchor.has_attr("class")
    assert not anchor.has_attr("CLASS")


@pytest.mark.parametrize("backend", BACKENDS)
def test_text_and_comment_nodes(backend):
    root = DOMBuilder(backend).build("<html><body><p>hello</p><!-- note --></body></html>")

    assert [t.content for t in find_all(root, NodeKind.TEXT)] == ["hello"]
    assert [c.content for c in find_all(root, NodeKind.COMMENT)] == [" note "]


def test_html5lib_inserts_implied_elements():
    """The HTML parsing algorithm always produces html/head/body."""
    root = DOMBuilder("html5lib").build("<p>x</p>")
    assert VNGINE().validate(root).codes == ["MISSING_DOCTYPE"]


def test_html_parser_keeps_fragment_as_written():
    root = DOMBuilder("html.parser").build("<p>x</p>")
    assert VNGINE().validate(root).codes == ["MISSING_DOCTYPE", "MISSING_HTML", "MISSING_HEAD", "MISSING_BODY"]


@pytest.mark.parametrize("backend", BACKENDS)
def test_void_elements_are_closed_by_the_parser(backend):
    """A parser never nests content inside <br>, even with a stray </br>."""
    root = DOMBuilder(backend).build("<!DOCTYPE html><html><head></head><body><br><span>x</span></br></body></html>")

    assert all(not br.children for br in find_all(root, NodeKind.ELEMENT, "br"))
