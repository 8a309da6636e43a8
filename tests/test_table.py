"""Tests for tables, rows, cells and their property bags."""

import pytest

from docxwml.errors import LimitViolationError, MissingChildNodeError
from docxwml.sharedtypes import Percentage
from docxwml.wml.document import Body, Document
from docxwml.wml.enums import BorderType, HeightRule, VerticalJc
from docxwml.wml.table import (
    JcTable,
    Merge,
    Row,
    Tbl,
    TblLayoutType,
    TblWidth,
    TblWidthType,
    Tc,
)
from tests.conftest import wml_node

GRID = '<w:tblGrid><w:gridCol w:w="4675"/><w:gridCol w:w="4675"/></w:tblGrid>'


def _cell(text: str, properties: str = "") -> str:
    return f"<w:tc>{properties}<w:p><w:r><w:t>{text}</w:t></w:r></w:p></w:tc>"


def _table(rows: str, properties: str = "<w:tblPr/>", grid: str = GRID) -> str:
    return f"<w:tbl>{properties}{grid}{rows}</w:tbl>"


class TestTbl:
    def test_two_by_one(self) -> None:
        node = wml_node(_table(f"<w:tr>{_cell('a')}{_cell('b')}</w:tr>"))
        table = Tbl.from_xml_element(node)
        assert [c.width for c in table.grid.base.columns] == [4675, 4675]
        assert len(table.rows) == 1
        cells = table.rows[0].cells
        assert len(cells) == 2
        first_paragraph = cells[0].block_level_elements[0].value.value
        assert first_paragraph.contents[0].value.value.run_inner_contents[0].value.text == "a"

    def test_properties(self) -> None:
        properties = (
            '<w:tblPr><w:tblStyle w:val="TableGrid"/><w:tblW w:w="5000" w:type="pct"/>'
            '<w:jc w:val="center"/><w:tblLayout w:type="fixed"/>'
            "<w:tblBorders>"
            '<w:top w:val="single" w:sz="4"/><w:left w:val="single" w:sz="8"/>'
            '<w:insideH w:val="dotted"/></w:tblBorders>'
            '<w:tblLook w:firstRow="1" w:noVBand="1"/></w:tblPr>'
        )
        base = Tbl.from_xml_element(wml_node(_table("", properties))).properties.base
        assert base.style == "TableGrid"
        assert base.width == TblWidth(width=5000, width_type=TblWidthType.PCT)
        assert base.alignment == JcTable.CENTER
        assert base.layout == TblLayoutType.FIXED
        assert base.borders.top.value == BorderType.SINGLE
        assert base.borders.start.size == 8
        assert base.borders.end is None
        assert base.borders.inside_horizontal.value == BorderType.DOTTED
        assert base.look.first_row is True
        assert base.look.no_vertical_band is True

    def test_fixed_layout_inside_document(self) -> None:
        properties = '<w:tblPr><w:tblLayout w:type="fixed"/></w:tblPr>'
        table_xml = _table(f"<w:tr>{_cell('a')}</w:tr>", properties)
        node = wml_node(f"<w:document><w:body>{table_xml}</w:body></w:document>")
        table = Document.from_xml_element(node).body.block_level_elements[0].value.value
        assert table.properties.base.layout == TblLayoutType.FIXED

    def test_layout_without_type(self) -> None:
        node = wml_node(_table("", "<w:tblPr><w:tblLayout/></w:tblPr>"))
        assert Tbl.from_xml_element(node).properties.base.layout is None

    def test_percent_width(self) -> None:
        node = wml_node(_table("", '<w:tblPr><w:tblW w:w="50%" w:type="pct"/></w:tblPr>'))
        assert Tbl.from_xml_element(node).properties.base.width.width == Percentage(value=50.0)

    def test_cell_margins_accept_left_and_right(self) -> None:
        properties = (
            '<w:tblPr><w:tblCellMar><w:left w:w="108" w:type="dxa"/>'
            '<w:end w:w="72" w:type="dxa"/></w:tblCellMar></w:tblPr>'
        )
        margin = Tbl.from_xml_element(wml_node(_table("", properties))).properties.base.cell_margin
        assert margin.start.width == 108
        assert margin.end.width == 72

    def test_requires_properties(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            Tbl.from_xml_element(wml_node(_table("", properties="")))
        assert exc_info.value.child_node == "tblPr"

    def test_requires_grid(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            Tbl.from_xml_element(wml_node(_table("", grid="")))
        assert exc_info.value.child_node == "tblGrid"

    def test_leading_bookmark(self) -> None:
        node = wml_node(
            '<w:tbl><w:bookmarkStart w:id="1" w:name="t"/><w:tblPr/>' f"{GRID}"
            f"<w:tr>{_cell('x')}</w:tr></w:tbl>"
        )
        table = Tbl.from_xml_element(node)
        assert [m.kind for m in table.range_markup_elements] == ["bookmarkStart"]
        assert len(table.rows) == 1

    def test_table_in_body(self) -> None:
        node = wml_node(f"<w:body><w:p/>{_table('')}<w:p/></w:body>")
        blocks = Body.from_xml_element(node).block_level_elements
        assert [b.kind for b in blocks] == ["p", "tbl", "p"]
        assert isinstance(blocks[1].value.value, Tbl)

    def test_nested_table(self) -> None:
        inner = _table(f"<w:tr>{_cell('inner')}</w:tr>")
        node = wml_node(_table(f"<w:tr><w:tc>{inner}<w:p/></w:tc></w:tr>"))
        cell = Tbl.from_xml_element(node).rows[0].cells[0]
        assert [b.kind for b in cell.block_level_elements] == ["tbl", "p"]


class TestRow:
    def test_row_properties(self) -> None:
        node = wml_node(
            '<w:tr w:rsidR="00C4D5E6"><w:trPr><w:tblHeader/><w:cantSplit/>'
            '<w:trHeight w:val="567" w:hRule="exact"/><w:jc w:val="end"/></w:trPr>'
            f"{_cell('a')}</w:tr>"
        )
        row = Row.from_xml_element(node)
        base = row.properties.base
        assert base.header is True
        assert base.cant_split is True
        assert base.row_height.value == 567
        assert base.row_height.height_rule == HeightRule.EXACT
        assert base.alignment == JcTable.END
        assert row.run_revision_id == 0x00C4D5E6

    def test_property_exceptions(self) -> None:
        node = wml_node(f'<w:tr><w:tblPrEx><w:tblLayout w:type="autofit"/></w:tblPrEx>{_cell("a")}</w:tr>')
        row = Row.from_xml_element(node)
        assert row.property_exceptions.base.layout == TblLayoutType.AUTOFIT

    def test_empty_row(self) -> None:
        assert Row.from_xml_element(wml_node("<w:tr/>")).cells == []


class TestTc:
    def test_cell_properties(self) -> None:
        properties = (
            '<w:tcPr><w:tcW w:w="2000" w:type="dxa"/><w:gridSpan w:val="2"/><w:vMerge w:val="restart"/>'
            '<w:tcBorders><w:right w:val="double"/><w:tl2br w:val="single"/></w:tcBorders>'
            '<w:vAlign w:val="center"/><w:noWrap/></w:tcPr>'
        )
        cell = Tc.from_xml_element(wml_node(_cell("a", properties)))
        base = cell.properties.base.base
        assert base.width == TblWidth(width=2000, width_type=TblWidthType.DXA)
        assert base.grid_span == 2
        assert base.vertical_merge == Merge.RESTART
        assert base.borders.end.value == BorderType.DOUBLE
        assert base.borders.top_left_to_bottom_right.value == BorderType.SINGLE
        assert base.vertical_alignment == VerticalJc.CENTER
        assert base.no_wrapping is True

    def test_bare_vertical_merge_continues(self) -> None:
        cell = Tc.from_xml_element(wml_node(_cell("", "<w:tcPr><w:vMerge/></w:tcPr>")))
        assert cell.properties.base.base.vertical_merge == Merge.CONTINUE

    def test_cell_without_paragraph(self) -> None:
        with pytest.raises(LimitViolationError) as exc_info:
            Tc.from_xml_element(wml_node("<w:tc><w:tcPr/></w:tc>"))
        assert exc_info.value.min_occurs == 1
        assert exc_info.value.occurs == 0

    def test_empty_cell_fails_whole_table(self) -> None:
        with pytest.raises(LimitViolationError):
            Tbl.from_xml_element(wml_node(_table("<w:tr><w:tc/></w:tr>")))

    def test_cell_property_change(self) -> None:
        properties = (
            '<w:tcPr><w:gridSpan w:val="1"/><w:tcPrChange w:id="3" w:author="Cy">'
            '<w:tcPr><w:gridSpan w:val="2"/></w:tcPr></w:tcPrChange></w:tcPr>'
        )
        cell = Tc.from_xml_element(wml_node(_cell("a", properties)))
        assert cell.properties.base.base.grid_span == 1
        assert cell.properties.change.properties.base.grid_span == 2
