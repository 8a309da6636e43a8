"""Tests for drawings: inline and anchored placement, wrapping, DrawingML
primitives and the text boxes of WordprocessingML shapes."""

import pytest

from docxwml.drawingml.coordsys import Point2D, PositiveSize2D
from docxwml.drawingml.core import GraphicalObject, NonVisualDrawingProps
from docxwml.drawingml.simpletypes import parse_adj_angle, parse_adj_coordinate
from docxwml.errors import AdjustParseError, LimitViolationError, MaxOccurs, MissingChildNodeError
from docxwml.wml.document import R
from docxwml.wml.drawing import (
    AlignH,
    Anchor,
    Drawing,
    Inline,
    RelFromH,
    RelFromV,
    TxbxContent,
    WordprocessingShape,
    WrapPath,
    WrapSquare,
    WrapText,
    WrapType,
    find_wordprocessing_shapes,
)
from tests.conftest import wml_node

GRAPHIC = (
    '<a:graphic><a:graphicData uri="http://schemas.openxmlformats.org/drawingml/2006/picture">'
    '<pic:pic/></a:graphicData></a:graphic>'
)

ANCHOR = (
    '<wp:anchor distT="0" distB="0" distL="114300" distR="114300" simplePos="0" '
    'relativeHeight="251659264" behindDoc="0" locked="0" layoutInCell="1" allowOverlap="1">'
    '<wp:simplePos x="0" y="0"/>'
    '<wp:positionH relativeFrom="column"><wp:align>center</wp:align></wp:positionH>'
    '<wp:positionV relativeFrom="paragraph"><wp:posOffset>-635</wp:posOffset></wp:positionV>'
    '<wp:extent cx="5943600" cy="3962400"/>'
    '<wp:effectExtent l="0" t="0" r="0" b="0"/>'
    '<wp:wrapSquare wrapText="bothSides"/>'
    '<wp:docPr id="1" name="Picture 1" descr="A chart"/>'
    '<wp:cNvGraphicFramePr><a:graphicFrameLocks noChangeAspect="1"/></wp:cNvGraphicFramePr>'
    f"{GRAPHIC}"
    "</wp:anchor>"
)


def _wsp(inner: str) -> str:
    return f"<wps:wsp><wps:cNvSpPr txBox=\"1\"/><wps:spPr/>{inner}<wps:bodyPr/></wps:wsp>"


class TestAnchor:
    def test_floating_picture(self) -> None:
        anchor = Anchor.from_xml_element(wml_node(ANCHOR))

        assert anchor.behind_document_text is False
        assert anchor.allow_overlap is True
        assert anchor.layout_in_cell is True
        assert anchor.relative_height == 251659264
        assert anchor.use_simple_position is False
        assert anchor.simple_position == Point2D(x=0, y=0)
        assert anchor.horizontal_position.relative_from == RelFromH.COLUMN
        assert anchor.horizontal_position.align_or_offset.kind == "align"
        assert anchor.horizontal_position.align_or_offset.value == AlignH.CENTER
        assert anchor.vertical_position.relative_from == RelFromV.PARAGRAPH
        assert anchor.vertical_position.align_or_offset.value == -635
        assert anchor.extent == PositiveSize2D(width=5943600, height=3962400)
        assert anchor.wrap_type == WrapType(kind="wrapSquare", value=WrapSquare(wrap_text=WrapText.BOTH_SIDES))
        assert anchor.document_properties.description == "A chart"
        assert anchor.graphic_frame_properties.graphic_frame_locks.no_change_aspect is True
        assert anchor.distance_left == 114300
        assert anchor.graphic.graphic_data.graphic_object[0].name == "pic:pic"

    def test_wrap_none_carries_no_value(self) -> None:
        anchor = Anchor.from_xml_element(wml_node(ANCHOR.replace('<wp:wrapSquare wrapText="bothSides"/>', "<wp:wrapNone/>")))
        assert anchor.wrap_type == WrapType(kind="wrapNone")

    def test_missing_wrap_type(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            Anchor.from_xml_element(wml_node(ANCHOR.replace('<wp:wrapSquare wrapText="bothSides"/>', "")))
        assert exc_info.value.child_node == "WrapType"

    @pytest.mark.parametrize("child", ["<wp:simplePos x=\"0\" y=\"0\"/>", '<wp:extent cx="5943600" cy="3962400"/>', GRAPHIC])
    def test_required_children(self, child: str) -> None:
        with pytest.raises(MissingChildNodeError):
            Anchor.from_xml_element(wml_node(ANCHOR.replace(child, "")))

    @pytest.mark.parametrize("attribute", ['behindDoc="0"', 'relativeHeight="251659264"', 'allowOverlap="1"'])
    def test_required_attributes(self, attribute: str) -> None:
        with pytest.raises(ValueError):
            Anchor.from_xml_element(wml_node(ANCHOR.replace(attribute, "")))

    def test_position_needs_align_or_offset(self) -> None:
        xml = ANCHOR.replace("<wp:align>center</wp:align>", "")
        with pytest.raises(MissingChildNodeError):
            Anchor.from_xml_element(wml_node(xml))


class TestInlineAndDrawing:
    def test_inline_in_run(self) -> None:
        node = wml_node(
            "<w:r><w:drawing><wp:inline distT=\"0\" distB=\"0\">"
            '<wp:extent cx="100" cy="200"/><wp:docPr id="5" name="Image"/>'
            f"{GRAPHIC}</wp:inline></w:drawing></w:r>"
        )
        inner = R.from_xml_element(node).run_inner_contents[0]
        assert inner.kind == "drawing"
        assert isinstance(inner.value, Drawing)
        choice = inner.value.anchor_or_inline_vec[0]
        assert choice.kind == "inline"
        inline = choice.value
        assert isinstance(inline, Inline)
        assert inline.extent == PositiveSize2D(width=100, height=200)
        assert inline.document_properties == NonVisualDrawingProps(id=5, name="Image")
        assert inline.distance_top == 0
        assert inline.distance_left is None

    def test_drawing_keeps_order(self) -> None:
        node = wml_node(
            f"<w:drawing>{ANCHOR}"
            '<wp:inline><wp:extent cx="1" cy="1"/><wp:docPr id="2" name="b"/>'
            f"{GRAPHIC}</wp:inline></w:drawing>"
        )
        assert [c.kind for c in Drawing.from_xml_element(node).anchor_or_inline_vec] == ["anchor", "inline"]

    def test_graphic_requires_data(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            GraphicalObject.from_xml_element(wml_node("<a:graphic/>"))
        assert exc_info.value.child_node == "graphicData"

    def test_doc_pr_requires_name(self) -> None:
        node = wml_node('<wp:inline><wp:extent cx="1" cy="1"/><wp:docPr id="2"/>' f"{GRAPHIC}</wp:inline>")
        with pytest.raises(ValueError):
            Inline.from_xml_element(node)


class TestWrapPath:
    def _path(self, line_to_count: int) -> str:
        line_to = '<wp:lineTo x="0" y="21600"/>' * line_to_count
        return f'<wp:wrapPolygon edited="0"><wp:start x="0" y="0"/>{line_to}</wp:wrapPolygon>'

    def test_polygon(self) -> None:
        path = WrapPath.from_xml_element(wml_node(self._path(3)))
        assert path.start == Point2D(x=0, y=0)
        assert len(path.line_to) == 3
        assert path.edited is False

    @pytest.mark.parametrize("count", [0, 1])
    def test_needs_two_line_segments(self, count: int) -> None:
        with pytest.raises(LimitViolationError) as exc_info:
            WrapPath.from_xml_element(wml_node(self._path(count)))
        error = exc_info.value
        assert error.violating_node_name == "lineTo"
        assert error.min_occurs == 2
        assert error.max_occurs == MaxOccurs.UNBOUNDED
        assert error.occurs == count

    def test_tight_wrap(self) -> None:
        node = wml_node(f'<wp:wrapTight wrapText="largest">{self._path(2)}</wp:wrapTight>')
        wrap = WrapType.from_xml_element(node)
        assert wrap.value.wrap_text == WrapText.LARGEST
        assert len(wrap.value.wrap_polygon.line_to) == 2


class TestTextBoxes:
    def test_empty_text_box(self) -> None:
        with pytest.raises(LimitViolationError) as exc_info:
            TxbxContent.from_xml_element(wml_node("<w:txbxContent/>"))
        assert exc_info.value.violating_node_name == "BlockLevelElts"

    def test_shape_with_text_box(self) -> None:
        node = wml_node(_wsp("<wps:txbx><w:txbxContent><w:p><w:r><w:t>boxed</w:t></w:r></w:p></w:txbxContent></wps:txbx>"))
        shape = WordprocessingShape.from_xml_element(node)
        blocks = shape.text_box_info.textbox_content.block_level_elements
        assert [b.kind for b in blocks] == ["p"]
        assert shape.shape_properties.name == "wps:spPr"
        assert shape.text_body_properties.name == "wps:bodyPr"

    def test_text_box_requires_content(self) -> None:
        with pytest.raises(MissingChildNodeError):
            WordprocessingShape.from_xml_element(wml_node(_wsp("<wps:txbx/>")))

    def test_shape_requires_body_properties(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            WordprocessingShape.from_xml_element(wml_node("<wps:wsp><wps:cNvSpPr/><wps:spPr/></wps:wsp>"))
        assert exc_info.value.child_node == "bodyPr"

    def test_linked_text_box(self) -> None:
        shape = WordprocessingShape.from_xml_element(wml_node(_wsp('<wps:linkedTxbx id="1" seq="2"/>')))
        assert (shape.text_box_info.id, shape.text_box_info.sequence) == (1, 2)

    def test_find_shapes_in_graphic(self) -> None:
        node = wml_node(
            '<a:graphic><a:graphicData uri="http://schemas.microsoft.com/office/word/2010/wordprocessingShape">'
            + _wsp("") + "</a:graphicData></a:graphic>"
        )
        shapes = find_wordprocessing_shapes(GraphicalObject.from_xml_element(node))
        assert len(shapes) == 1
        assert shapes[0].text_box_info is None


class TestAdjustableValues:
    def test_number(self) -> None:
        assert parse_adj_coordinate("-12700") == -12700
        assert parse_adj_angle("5400000") == 5400000

    def test_guide_name(self) -> None:
        assert parse_adj_coordinate("adj1") == "adj1"

    def test_whitespace_is_not_a_guide_name(self) -> None:
        with pytest.raises(AdjustParseError):
            parse_adj_coordinate("not a token")
