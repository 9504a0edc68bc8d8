"""Tests for the element tree and its serialized form."""

from svgdoc import (
    Document,
    DocumentConfig,
    Floats,
    Ints,
    LengthAdjust,
    TextAnchor,
    em_units,
    percentage,
    pixels,
)
from svgdoc.elements import Circle, Group, Line, Rect


def test_children_keep_insertion_order(embedded_doc):
    a = embedded_doc.rect(0, 0, 10, 10)
    b = embedded_doc.circle(5, 5, 2)
    c = embedded_doc.line(0, 0, 10, 10)
    assert [type(n) for n in embedded_doc.children] == [Rect, Circle, Line]
    assert embedded_doc.children[0] is a and embedded_doc.children[2] is c

    out = embedded_doc.to_string(indent=None)
    assert out.index("<rect") < out.index("<circle") < out.index("<line")
    assert b in embedded_doc.children


def test_root_attributes():
    doc = Document(view_box=Ints([0, 0, 100, 50]), width=pixels(200), height=100)
    assert doc.to_string(indent=None) == (
        '<svg viewBox="0 0 100 50" width="200px" height="100" xmlns="http://www.w3.org/2000/svg" />'
    )


def test_shapes(embedded_doc):
    embedded_doc.line(0, 1, 2.5, 3)
    embedded_doc.rect(0, 0, 20, 10)
    embedded_doc.circle(12, 12, 10)
    embedded_doc.ellipse(5, 5, 4, 2)
    assert embedded_doc.to_string(indent=None) == (
        "<svg>"
        '<line x1="0" y1="1" x2="2.5" y2="3" />'
        '<rect x="0" y="0" width="20" height="10" />'
        '<circle cx="12" cy="12" r="10" />'
        '<ellipse cx="5" cy="5" rx="4" ry="2" />'
        "</svg>"
    )


def test_polyline_and_polygon(embedded_doc):
    embedded_doc.polyline().pre_alloc(2).add_point(0, 0).add_point(10, 5.5)
    pg = embedded_doc.polygon()
    pg.points.add(1, 2).add(3, 4).add(5, 0)
    embedded_doc.polyline()
    assert embedded_doc.to_string(indent=None) == (
        "<svg>"
        '<polyline points="0,0 10,5.5" />'
        '<polygon points="1,2 3,4 5,0" />'
        "<polyline />"
        "</svg>"
    )


def test_object_attributes_follow_shape_attributes(embedded_doc):
    embedded_doc.circle(1, 2, 3).set_id("dot").translate(10, 20).rotate_orig(45).set_class("c").set_style("fill:red;")
    assert embedded_doc.to_string(indent=None) == (
        '<svg><circle cx="1" cy="2" r="3" id="dot" transform="translate(10,20) rotate(45)"'
        ' class="c" style="fill:red" /></svg>'
    )


def test_groups_and_defs(embedded_doc):
    defs = embedded_doc.defs()
    defs.circle(0, 0, 1).set_id("marker")
    g = embedded_doc.group().pre_alloc(4).set_id("layer").skew_x(10)
    assert isinstance(g, Group)
    g.use(0, 0, "marker")
    g.use(5, 0, "marker").scale(2)
    assert embedded_doc.to_string(indent=None) == (
        "<svg>"
        '<defs><circle cx="0" cy="0" r="1" id="marker" /></defs>'
        '<g id="layer" transform="skewX(10)">'
        '<use href="#marker" />'
        '<use x="5" href="#marker" transform="scale(2)" />'
        "</g>"
        "</svg>"
    )


def test_title_is_escaped(embedded_doc):
    embedded_doc.title("a < b & c")
    assert embedded_doc.to_string(indent=None) == "<svg><title>a &lt; b &amp; c</title></svg>"


def test_text_with_spans(embedded_doc):
    t = embedded_doc.text(10, 20, "Hello ")
    t.add_span("world").set_class("b")
    t.add_text("!")
    expected = '<svg><text x="10" y="20">Hello <tspan class="b">world</tspan>!</text></svg>'
    assert embedded_doc.to_string(indent=None) == expected


def test_text_attributes(embedded_doc):
    t = embedded_doc.text(0, 5, "abc").anchor(TextAnchor.MIDDLE)
    t.dx = em_units(0.5)
    t.text_length = percentage(80)
    t.length_adjust = LengthAdjust.SPACING_AND_GLYPHS
    t.glyph_rotate = Floats([10, 20])
    assert embedded_doc.to_string(indent=None) == (
        '<svg><text y="5" dx="0.5em" text-anchor="middle" textLength="80%"'
        ' lengthAdjust="spacingAndGlyphs" rotate="10 20">abc</text></svg>'
    )


def test_indentation_leaves_text_alone(embedded_doc):
    g = embedded_doc.group()
    g.rect(0, 0, 1, 1)
    t = embedded_doc.text(1, 2, "a")
    t.add_span("b")
    assert embedded_doc.to_string() == (
        "<svg>\n"
        "  <g>\n"
        '    <rect x="0" y="0" width="1" height="1" />\n'
        "  </g>\n"
        '  <text x="1" y="2">a<tspan>b</tspan></text>\n'
        "</svg>"
    )


def test_stylesheet_element_comes_first(sheet_doc):
    st = sheet_doc.make_style("a", "fill:red;")
    sheet_doc.circle(1, 2, 3).with_style(st)
    sheet_doc.rect(0, 0, 1, 1).with_style(sheet_doc.make_style("a", "stroke:blue"))
    assert sheet_doc.to_string(indent=None) == (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        "<style>.a {fill:red} .a1 {stroke:blue}</style>"
        '<circle cx="1" cy="2" r="3" class="a" />'
        '<rect x="0" y="0" width="1" height="1" class="a1" />'
        "</svg>"
    )


def test_inline_styling_applied(plain_doc):
    plain_doc.circle(0, 0, 1).with_style(plain_doc.make_style("a", "fill:red;"))
    out = plain_doc.to_string(indent=None)
    assert 'style="fill:red"' in out
    assert "<style>" not in out


def test_xml_declaration_and_write(tmp_path):
    doc = Document(config=DocumentConfig(embedded=True))
    doc.circle(1, 1, 1)
    assert doc.to_string(xml_declaration=True).startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg>')

    path = tmp_path / "out.svg"
    doc.write(path)
    content = path.read_text(encoding="utf-8")
    assert content.startswith("<?xml")
    assert '<circle cx="1" cy="1" r="1" />' in content


def test_matrix_shortcut_chains(embedded_doc):
    r = embedded_doc.rect(0, 0, 1, 1).matrix(1, 0, 0, 1, 5, 5).set_id("r")
    assert r.id == "r"
    assert embedded_doc.to_string(indent=None) == (
        '<svg><rect x="0" y="0" width="1" height="1" id="r" transform="matrix(1,0,0,1,5,5)" /></svg>'
    )
