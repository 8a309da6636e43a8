# Copyright (C) 2025 the contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Tables — w:tbl, its rows and cells, and the table/row/cell property bags.

A table is a grid (w:tblGrid) plus rows. Rows and cells can be wrapped in
custom XML or content controls, so the row and cell content groups are
choices just like the paragraph content groups in document.py. Cells hold
block-level content again, which is where the recursion back into
paragraphs (and nested tables) happens.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError, MaxOccurs, MissingChildNodeError
from docxwml.sharedtypes import TwipsMeasure, XAlign, YAlign, parse_twips_measure
from docxwml.update import Update
from docxwml.wml.document import (
    BlockLevelElts,
    CustomXmlPr,
    RangeMarkupElements,
    RunLevelElts,
    SdtEndPr,
    SdtPr,
)
from docxwml.wml.enums import HAnchor, HeightRule, TextDirection, VAnchor, VerticalJc
from docxwml.wml.properties import Border, Cnf, Markup, Shd, TrackChange
from docxwml.wml.simpletypes import (
    DecimalNumber,
    LongHexNumber,
    MeasurementOrPercent,
    SignedTwipsMeasure,
    parse_decimal_number,
    parse_long_hex,
    parse_measurement_or_percent,
    parse_on_off_xml_element,
    parse_signed_twips_measure,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice, XsdEnum

logger = logging.getLogger(__name__)


class TblOverlap(XsdEnum):
    NEVER = "never"
    OVERLAP = "overlap"


class TblWidthType(XsdEnum):
    NIL = "nil"
    PCT = "pct"
    DXA = "dxa"
    AUTO = "auto"


class JcTable(XsdEnum):
    CENTER = "center"
    END = "end"
    START = "start"


class TblLayoutType(XsdEnum):
    FIXED = "fixed"
    AUTOFIT = "autofit"


class Merge(XsdEnum):
    CONTINUE = "continue"
    RESTART = "restart"


class AnnotationVMerge(XsdEnum):
    MERGE = "cont"
    SPLIT = "rest"


def _parse_side_children(xml_node: XmlNode, sides: dict[str, str], builder) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for child_node in xml_node.child_nodes:
        field_name = sides.get(child_node.local_name)
        if field_name is not None:
            fields[field_name] = builder(child_node)
    return fields


# left and right are the transitional names of start and end
_MARGIN_SIDES = {
    "top": "top",
    "start": "start",
    "left": "start",
    "bottom": "bottom",
    "end": "end",
    "right": "end",
}
_TABLE_BORDER_SIDES = {
    **_MARGIN_SIDES,
    "insideH": "inside_horizontal",
    "insideV": "inside_vertical",
}
_CELL_BORDER_SIDES = {
    **_TABLE_BORDER_SIDES,
    "tl2br": "top_left_to_bottom_right",
    "tr2bl": "top_right_to_bottom_left",
}


# ── Leaf records ───────────────────────────────────────────────────────────────

class TblPPr(Update):
    """Floating table positioning (w:tblpPr)."""
    left_from_text: TwipsMeasure | None = None
    right_from_text: TwipsMeasure | None = None
    top_from_text: TwipsMeasure | None = None
    bottom_from_text: TwipsMeasure | None = None
    vertical_anchor: VAnchor | None = None
    horizontal_anchor: HAnchor | None = None
    horizontal_alignment: XAlign | None = None
    horizontal_distance: SignedTwipsMeasure | None = None
    vertical_alignment: YAlign | None = None
    vertical_distance: SignedTwipsMeasure | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPPr:
        return cls(
            left_from_text=xml_node.parse_attribute("w:leftFromText", parse_twips_measure),
            right_from_text=xml_node.parse_attribute("w:rightFromText", parse_twips_measure),
            top_from_text=xml_node.parse_attribute("w:topFromText", parse_twips_measure),
            bottom_from_text=xml_node.parse_attribute("w:bottomFromText", parse_twips_measure),
            vertical_anchor=xml_node.parse_attribute("w:vertAnchor", VAnchor.parse),
            horizontal_anchor=xml_node.parse_attribute("w:horzAnchor", HAnchor.parse),
            horizontal_alignment=xml_node.parse_attribute("w:tblpXSpec", XAlign.parse),
            horizontal_distance=xml_node.parse_attribute("w:tblpX", parse_signed_twips_measure),
            vertical_alignment=xml_node.parse_attribute("w:tblpYSpec", YAlign.parse),
            vertical_distance=xml_node.parse_attribute("w:tblpY", parse_signed_twips_measure),
        )


class TblWidth(Update):
    width: MeasurementOrPercent | None = None
    width_type: TblWidthType | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblWidth:
        return cls(
            width=xml_node.parse_attribute("w:w", parse_measurement_or_percent),
            width_type=xml_node.parse_attribute("w:type", TblWidthType.parse),
        )


class Height(Update):
    value: TwipsMeasure | None = None
    height_rule: HeightRule | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Height:
        return cls(
            value=xml_node.parse_attribute("w:val", parse_twips_measure),
            height_rule=xml_node.parse_attribute("w:hRule", HeightRule.parse),
        )


class TblBorders(Update):
    top: Border | None = None
    start: Border | None = None
    bottom: Border | None = None
    end: Border | None = None
    inside_horizontal: Border | None = None
    inside_vertical: Border | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblBorders:
        return cls(**_parse_side_children(xml_node, _TABLE_BORDER_SIDES, Border.from_xml_element))


class TcBorders(TblBorders):
    top_left_to_bottom_right: Border | None = None
    top_right_to_bottom_left: Border | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TcBorders:
        return cls(**_parse_side_children(xml_node, _CELL_BORDER_SIDES, Border.from_xml_element))


class TblCellMar(Update):
    """Default cell margins of a table (w:tblCellMar)."""
    top: TblWidth | None = None
    start: TblWidth | None = None
    bottom: TblWidth | None = None
    end: TblWidth | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblCellMar:
        return cls(**_parse_side_children(xml_node, _MARGIN_SIDES, TblWidth.from_xml_element))


class TcMar(TblCellMar):
    """Margins of a single cell (w:tcMar), overriding w:tblCellMar."""


class TblLook(Update):
    first_row: bool | None = None
    last_row: bool | None = None
    first_column: bool | None = None
    last_column: bool | None = None
    no_horizontal_band: bool | None = None
    no_vertical_band: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblLook:
        return cls(
            first_row=xml_node.parse_attribute("w:firstRow", parse_xml_bool),
            last_row=xml_node.parse_attribute("w:lastRow", parse_xml_bool),
            first_column=xml_node.parse_attribute("w:firstColumn", parse_xml_bool),
            last_column=xml_node.parse_attribute("w:lastColumn", parse_xml_bool),
            no_horizontal_band=xml_node.parse_attribute("w:noHBand", parse_xml_bool),
            no_vertical_band=xml_node.parse_attribute("w:noVBand", parse_xml_bool),
        )


class Headers(BaseModel):
    """Ids of the header cells associated with a cell (w:headers)."""
    values: list[str] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Headers:
        return cls(values=[c.get_val_attribute() for c in xml_node.find_children("header")])


# ── Table properties ───────────────────────────────────────────────────────────

def _parse_table_exception_field(xml_node: XmlNode) -> tuple[str, Any] | None:
    """Fields shared by w:tblPr and w:tblPrEx."""
    local_name = xml_node.local_name
    if local_name == "tblW":
        return "width", TblWidth.from_xml_element(xml_node)
    elif local_name == "jc":
        return "alignment", JcTable.parse_val(xml_node)
    elif local_name == "tblCellSpacing":
        return "cell_spacing", TblWidth.from_xml_element(xml_node)
    elif local_name == "tblInd":
        return "indent", TblWidth.from_xml_element(xml_node)
    elif local_name == "tblBorders":
        return "borders", TblBorders.from_xml_element(xml_node)
    elif local_name == "shd":
        return "shading", Shd.from_xml_element(xml_node)
    elif local_name == "tblLayout":
        return "layout", xml_node.parse_attribute("w:type", TblLayoutType.parse)
    elif local_name == "tblCellMar":
        return "cell_margin", TblCellMar.from_xml_element(xml_node)
    elif local_name == "tblLook":
        return "look", TblLook.from_xml_element(xml_node)
    return None


def _parse_table_field(xml_node: XmlNode) -> tuple[str, Any] | None:
    local_name = xml_node.local_name
    if local_name == "tblStyle":
        return "style", xml_node.get_val_attribute()
    elif local_name == "tblpPr":
        return "paragraph_properties", TblPPr.from_xml_element(xml_node)
    elif local_name == "tblOverlap":
        return "overlap", TblOverlap.parse_val(xml_node)
    elif local_name == "bidiVisual":
        return "bidirectional_visual", parse_on_off_xml_element(xml_node)
    elif local_name == "tblStyleRowBandSize":
        return "style_row_band_size", parse_decimal_number(xml_node.get_val_attribute())
    elif local_name == "tblStyleColBandSize":
        return "style_column_band_size", parse_decimal_number(xml_node.get_val_attribute())
    elif local_name == "tblCaption":
        return "caption", xml_node.get_val_attribute()
    elif local_name == "tblDescription":
        return "description", xml_node.get_val_attribute()
    return _parse_table_exception_field(xml_node)


class TblPrBase(Update):
    style: str | None = None
    paragraph_properties: TblPPr | None = None
    overlap: TblOverlap | None = None
    bidirectional_visual: bool | None = None
    style_row_band_size: DecimalNumber | None = None
    style_column_band_size: DecimalNumber | None = None
    width: TblWidth | None = None
    alignment: JcTable | None = None
    cell_spacing: TblWidth | None = None
    indent: TblWidth | None = None
    borders: TblBorders | None = None
    shading: Shd | None = None
    layout: TblLayoutType | None = None
    cell_margin: TblCellMar | None = None
    look: TblLook | None = None
    caption: str | None = None
    description: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPrBase:
        properties = cls()
        for child_node in xml_node.child_nodes:
            properties = properties.try_update_from_xml_element(child_node)
        return properties

    def try_update_from_xml_element(self, xml_node: XmlNode) -> TblPrBase:
        parsed = _parse_table_field(xml_node)
        if parsed is None:
            return self
        field_name, value = parsed
        return self.model_copy(update={field_name: value})


class TblPrChange(TrackChange):
    properties: TblPrBase

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPrChange:
        tbl_pr_node = xml_node.find_child("tblPr")
        if tbl_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "tblPr")
        return cls(**cls.markup_fields(xml_node), properties=TblPrBase.from_xml_element(tbl_pr_node))


class TblPr(BaseModel):
    base: TblPrBase = Field(default_factory=TblPrBase)
    change: TblPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPr:
        base = TblPrBase()
        change = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "tblPrChange":
                change = TblPrChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, change=change)


class TblPrExBase(Update):
    """Table-level property exceptions applied to a single row."""
    width: TblWidth | None = None
    alignment: JcTable | None = None
    cell_spacing: TblWidth | None = None
    indent: TblWidth | None = None
    borders: TblBorders | None = None
    shading: Shd | None = None
    layout: TblLayoutType | None = None
    cell_margin: TblCellMar | None = None
    look: TblLook | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPrExBase:
        properties = cls()
        for child_node in xml_node.child_nodes:
            properties = properties.try_update_from_xml_element(child_node)
        return properties

    def try_update_from_xml_element(self, xml_node: XmlNode) -> TblPrExBase:
        parsed = _parse_table_exception_field(xml_node)
        if parsed is None:
            return self
        field_name, value = parsed
        return self.model_copy(update={field_name: value})


class TblPrExChange(TrackChange):
    properties_ex: TblPrExBase

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPrExChange:
        tbl_pr_ex_node = xml_node.find_child("tblPrEx")
        if tbl_pr_ex_node is None:
            raise MissingChildNodeError(xml_node.name, "tblPrEx")
        return cls(**cls.markup_fields(xml_node), properties_ex=TblPrExBase.from_xml_element(tbl_pr_ex_node))


class TblPrEx(BaseModel):
    base: TblPrExBase = Field(default_factory=TblPrExBase)
    change: TblPrExChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblPrEx:
        base = TblPrExBase()
        change = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "tblPrExChange":
                change = TblPrExChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, change=change)


# ── Grid ───────────────────────────────────────────────────────────────────────

class TblGridCol(BaseModel):
    width: TwipsMeasure | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblGridCol:
        return cls(width=xml_node.parse_attribute("w:w", parse_twips_measure))


class TblGridBase(BaseModel):
    columns: list[TblGridCol] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblGridBase:
        return cls(columns=[TblGridCol.from_xml_element(c) for c in xml_node.find_children("gridCol")])


class TblGridChange(Markup):
    grid: TblGridBase

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblGridChange:
        grid_node = xml_node.find_child("tblGrid")
        grid = TblGridBase.from_xml_element(grid_node) if grid_node is not None else TblGridBase()
        return cls(**cls.markup_fields(xml_node), grid=grid)


class TblGrid(BaseModel):
    base: TblGridBase = Field(default_factory=TblGridBase)
    change: TblGridChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblGrid:
        change_node = xml_node.find_child("tblGridChange")
        return cls(
            base=TblGridBase.from_xml_element(xml_node),
            change=TblGridChange.from_xml_element(change_node) if change_node is not None else None,
        )


# ── Row properties ─────────────────────────────────────────────────────────────

class TrPrBase(Update):
    conditional_formatting: Cnf | None = None
    div_id: DecimalNumber | None = None
    grid_column_before_first_cell: DecimalNumber | None = None
    grid_column_after_last_cell: DecimalNumber | None = None
    width_before_row: TblWidth | None = None
    width_after_row: TblWidth | None = None
    cant_split: bool | None = None
    row_height: Height | None = None
    header: bool | None = None
    cell_spacing: TblWidth | None = None
    alignment: JcTable | None = None
    hidden: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TrPrBase:
        properties = cls()
        for child_node in xml_node.child_nodes:
            properties = properties.try_update_from_xml_element(child_node)
        return properties

    def try_update_from_xml_element(self, xml_node: XmlNode) -> TrPrBase:
        local_name = xml_node.local_name
        if local_name == "cnfStyle":
            update = {"conditional_formatting": Cnf.from_xml_element(xml_node)}
        elif local_name == "divId":
            update = {"div_id": parse_decimal_number(xml_node.get_val_attribute())}
        elif local_name == "gridBefore":
            update = {"grid_column_before_first_cell": parse_decimal_number(xml_node.get_val_attribute())}
        elif local_name == "gridAfter":
            update = {"grid_column_after_last_cell": parse_decimal_number(xml_node.get_val_attribute())}
        elif local_name == "wBefore":
            update = {"width_before_row": TblWidth.from_xml_element(xml_node)}
        elif local_name == "wAfter":
            update = {"width_after_row": TblWidth.from_xml_element(xml_node)}
        elif local_name == "cantSplit":
            update = {"cant_split": parse_on_off_xml_element(xml_node)}
        elif local_name == "trHeight":
            update = {"row_height": Height.from_xml_element(xml_node)}
        elif local_name == "tblHeader":
            update = {"header": parse_on_off_xml_element(xml_node)}
        elif local_name == "tblCellSpacing":
            update = {"cell_spacing": TblWidth.from_xml_element(xml_node)}
        elif local_name == "jc":
            update = {"alignment": JcTable.parse_val(xml_node)}
        elif local_name == "hidden":
            update = {"hidden": parse_on_off_xml_element(xml_node)}
        else:
            return self
        return self.model_copy(update=update)


class TrPrChange(TrackChange):
    properties: TrPrBase

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TrPrChange:
        tr_pr_node = xml_node.find_child("trPr")
        if tr_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "trPr")
        return cls(**cls.markup_fields(xml_node), properties=TrPrBase.from_xml_element(tr_pr_node))


class TrPr(BaseModel):
    base: TrPrBase = Field(default_factory=TrPrBase)
    inserted: TrackChange | None = None
    deleted: TrackChange | None = None
    change: TrPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TrPr:
        fields: dict[str, Any] = {}
        base = TrPrBase()
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "ins":
                fields["inserted"] = TrackChange.from_xml_element(child_node)
            elif local_name == "del":
                fields["deleted"] = TrackChange.from_xml_element(child_node)
            elif local_name == "trPrChange":
                fields["change"] = TrPrChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, **fields)


# ── Cell properties ────────────────────────────────────────────────────────────

class TcPrBase(Update):
    conditional_formatting: Cnf | None = None
    width: TblWidth | None = None
    grid_span: DecimalNumber | None = None
    vertical_merge: Merge | None = None
    borders: TcBorders | None = None
    shading: Shd | None = None
    no_wrapping: bool | None = None
    margin: TcMar | None = None
    text_direction: TextDirection | None = None
    fit_text: bool | None = None
    vertical_alignment: VerticalJc | None = None
    hide_marker: bool | None = None
    headers: Headers | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TcPrBase:
        properties = cls()
        for child_node in xml_node.child_nodes:
            properties = properties.try_update_from_xml_element(child_node)
        return properties

    def try_update_from_xml_element(self, xml_node: XmlNode) -> TcPrBase:
        local_name = xml_node.local_name
        if local_name == "cnfStyle":
            update = {"conditional_formatting": Cnf.from_xml_element(xml_node)}
        elif local_name == "tcW":
            update = {"width": TblWidth.from_xml_element(xml_node)}
        elif local_name == "gridSpan":
            update = {"grid_span": parse_decimal_number(xml_node.get_val_attribute())}
        elif local_name == "vMerge":
            # <w:vMerge/> without a value continues the merge above
            merge = xml_node.parse_attribute("w:val", Merge.parse)
            update = {"vertical_merge": merge if merge is not None else Merge.CONTINUE}
        elif local_name == "tcBorders":
            update = {"borders": TcBorders.from_xml_element(xml_node)}
        elif local_name == "shd":
            update = {"shading": Shd.from_xml_element(xml_node)}
        elif local_name == "noWrap":
            update = {"no_wrapping": parse_on_off_xml_element(xml_node)}
        elif local_name == "tcMar":
            update = {"margin": TcMar.from_xml_element(xml_node)}
        elif local_name == "textDirection":
            update = {"text_direction": TextDirection.parse_val(xml_node)}
        elif local_name == "tcFitText":
            update = {"fit_text": parse_on_off_xml_element(xml_node)}
        elif local_name == "vAlign":
            update = {"vertical_alignment": VerticalJc.parse_val(xml_node)}
        elif local_name == "hideMark":
            update = {"hide_marker": parse_on_off_xml_element(xml_node)}
        elif local_name == "headers":
            update = {"headers": Headers.from_xml_element(xml_node)}
        else:
            return self
        return self.model_copy(update=update)


class CellMergeTrackChange(TrackChange):
    vertical_merge: AnnotationVMerge | None = None
    vertical_merge_original: AnnotationVMerge | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CellMergeTrackChange:
        return cls(
            **cls.markup_fields(xml_node),
            vertical_merge=xml_node.parse_attribute("w:vMerge", AnnotationVMerge.parse),
            vertical_merge_original=xml_node.parse_attribute("w:vMergeOrig", AnnotationVMerge.parse),
        )


class CellMarkupElements(XsdChoice):
    """A tracked cell insertion, deletion or merge."""
    members: ClassVar[frozenset[str]] = frozenset({"cellIns", "cellDel", "cellMerge"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> TrackChange:
        if xml_node.local_name == "cellMerge":
            return CellMergeTrackChange.from_xml_element(xml_node)
        return TrackChange.from_xml_element(xml_node)


class TcPrInner(BaseModel):
    base: TcPrBase = Field(default_factory=TcPrBase)
    markup_element: CellMarkupElements | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TcPrInner:
        instance = cls()
        for child_node in xml_node.child_nodes:
            instance = instance.try_update_from_xml_element(child_node)
        return instance

    def try_update_from_xml_element(self, xml_node: XmlNode) -> TcPrInner:
        if CellMarkupElements.is_choice_member(xml_node.local_name):
            return self.model_copy(update={"markup_element": CellMarkupElements.from_xml_element(xml_node)})
        return self.model_copy(update={"base": self.base.try_update_from_xml_element(xml_node)})


class TcPrChange(TrackChange):
    properties: TcPrInner

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TcPrChange:
        tc_pr_node = xml_node.find_child("tcPr")
        if tc_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "tcPr")
        return cls(**cls.markup_fields(xml_node), properties=TcPrInner.from_xml_element(tc_pr_node))


class TcPr(BaseModel):
    base: TcPrInner = Field(default_factory=TcPrInner)
    change: TcPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TcPr:
        base = TcPrInner()
        change = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "tcPrChange":
                change = TcPrChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, change=change)


# ── Cells ──────────────────────────────────────────────────────────────────────

class Tc(BaseModel):
    properties: TcPr | None = None
    block_level_elements: list[BlockLevelElts] = Field(default_factory=list)
    id: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Tc:
        properties_node = xml_node.find_child("tcPr")
        block_level_elements = BlockLevelElts.list_from_children(xml_node)
        if not block_level_elements:
            raise LimitViolationError(xml_node.name, "BlockLevelElts", 1, MaxOccurs.UNBOUNDED, 0)

        return cls(
            properties=TcPr.from_xml_element(properties_node) if properties_node is not None else None,
            block_level_elements=block_level_elements,
            id=xml_node.attributes.get("w:id"),
        )


def _wrapper_fields(xml_node: XmlNode, content_type: type[XsdChoice]) -> dict[str, Any]:
    properties_node = xml_node.find_child("customXmlPr")
    return {
        "uri": xml_node.attributes.get("w:uri"),
        "element": xml_node.get_attribute("w:element"),
        "properties": CustomXmlPr.from_xml_element(properties_node) if properties_node is not None else None,
        "contents": content_type.list_from_children(xml_node),
    }


def _sdt_wrapper_fields(xml_node: XmlNode, content_type: type[XsdChoice]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for child_node in xml_node.child_nodes:
        local_name = child_node.local_name
        if local_name == "sdtPr":
            fields["properties"] = SdtPr.from_xml_element(child_node)
        elif local_name == "sdtEndPr":
            fields["end_properties"] = SdtEndPr.from_xml_element(child_node)
        elif local_name == "sdtContent":
            fields["contents"] = content_type.list_from_children(child_node)
    return fields


class CustomXmlCell(BaseModel):
    uri: str | None = None
    element: str
    properties: CustomXmlPr | None = None
    contents: list[ContentCellContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CustomXmlCell:
        return cls(**_wrapper_fields(xml_node, ContentCellContent))


class SdtCell(BaseModel):
    """A content control around one or more cells."""
    properties: SdtPr | None = None
    end_properties: SdtEndPr | None = None
    contents: list[ContentCellContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtCell:
        return cls(**_sdt_wrapper_fields(xml_node, ContentCellContent))


class ContentCellContent(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"tc", "customXml", "sdt"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RunLevelElts,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "tc":
            return Tc.from_xml_element(xml_node)
        elif local_name == "customXml":
            return CustomXmlCell.from_xml_element(xml_node)
        return SdtCell.from_xml_element(xml_node)


# ── Rows ───────────────────────────────────────────────────────────────────────

class Row(BaseModel):
    property_exceptions: TblPrEx | None = None
    properties: TrPr | None = None
    contents: list[ContentCellContent] = Field(default_factory=list)
    run_properties_revision_id: LongHexNumber | None = None
    run_revision_id: LongHexNumber | None = None
    deletion_revision_id: LongHexNumber | None = None
    row_revision_id: LongHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Row:
        logger.debug("Parsing %s", xml_node.name)

        exceptions_node = xml_node.find_child("tblPrEx")
        properties_node = xml_node.find_child("trPr")
        return cls(
            property_exceptions=TblPrEx.from_xml_element(exceptions_node) if exceptions_node is not None else None,
            properties=TrPr.from_xml_element(properties_node) if properties_node is not None else None,
            contents=ContentCellContent.list_from_children(xml_node),
            run_properties_revision_id=xml_node.parse_attribute("w:rsidRPr", parse_long_hex),
            run_revision_id=xml_node.parse_attribute("w:rsidR", parse_long_hex),
            deletion_revision_id=xml_node.parse_attribute("w:rsidDel", parse_long_hex),
            row_revision_id=xml_node.parse_attribute("w:rsidTr", parse_long_hex),
        )

    @property
    def cells(self) -> list[Tc]:
        """The cells directly in this row, skipping wrappers and markup."""
        return [c.value for c in self.contents if c.kind == "tc"]


class CustomXmlRow(BaseModel):
    uri: str | None = None
    element: str
    properties: CustomXmlPr | None = None
    contents: list[ContentRowContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CustomXmlRow:
        return cls(**_wrapper_fields(xml_node, ContentRowContent))


class SdtRow(BaseModel):
    """A content control around one or more rows."""
    properties: SdtPr | None = None
    end_properties: SdtEndPr | None = None
    contents: list[ContentRowContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtRow:
        return cls(**_sdt_wrapper_fields(xml_node, ContentRowContent))


class ContentRowContent(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"tr", "customXml", "sdt"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RunLevelElts,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "tr":
            return Row.from_xml_element(xml_node)
        elif local_name == "customXml":
            return CustomXmlRow.from_xml_element(xml_node)
        return SdtRow.from_xml_element(xml_node)


# ── Table ──────────────────────────────────────────────────────────────────────

class Tbl(BaseModel):
    range_markup_elements: list[RangeMarkupElements] = Field(default_factory=list)
    properties: TblPr
    grid: TblGrid
    row_contents: list[ContentRowContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Tbl:
        logger.debug("Parsing %s", xml_node.name)

        range_markup_elements: list[RangeMarkupElements] = []
        properties = None
        grid = None
        row_contents: list[ContentRowContent] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "tblPr":
                properties = TblPr.from_xml_element(child_node)
            elif local_name == "tblGrid":
                grid = TblGrid.from_xml_element(child_node)
            elif RangeMarkupElements.is_choice_member(local_name):
                range_markup_elements.append(RangeMarkupElements.from_xml_element(child_node))
            elif ContentRowContent.is_choice_member(local_name):
                row_contents.append(ContentRowContent.from_xml_element(child_node))

        if properties is None:
            raise MissingChildNodeError(xml_node.name, "tblPr")
        if grid is None:
            raise MissingChildNodeError(xml_node.name, "tblGrid")

        return cls(
            range_markup_elements=range_markup_elements,
            properties=properties,
            grid=grid,
            row_contents=row_contents,
        )

    @property
    def rows(self) -> list[Row]:
        """The rows directly in this table, skipping wrappers and markup."""
        return [c.value for c in self.row_contents if c.kind == "tr"]
