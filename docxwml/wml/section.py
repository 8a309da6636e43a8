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

"""Section properties (w:sectPr) — page geometry, columns, header/footer
references and the footnote/endnote numbering shared with settings.xml.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError
from docxwml.sharedtypes import TwipsMeasure, parse_twips_measure
from docxwml.wml.enums import (
    ChapterSep,
    DocGridType,
    EdnPos,
    FtnPos,
    HdrFtr,
    LineNumberRestart,
    NumberFormat,
    PageBorderDisplay,
    PageBorderOffset,
    PageBorderZOrder,
    PageOrientation,
    RestartNumber,
    SectionMark,
    TextDirection,
    VerticalJc,
)
from docxwml.wml.properties import Border, Rel, TrackChange
from docxwml.wml.simpletypes import (
    DecimalNumber,
    LongHexNumber,
    SignedTwipsMeasure,
    parse_decimal_number,
    parse_long_hex,
    parse_on_off_xml_element,
    parse_signed_twips_measure,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice

logger = logging.getLogger(__name__)

MAX_COLUMNS = 45
MAX_HEADER_FOOTER_REFERENCES = 6


# ── Footnote and endnote numbering ─────────────────────────────────────────────

class NumFmt(BaseModel):
    value: NumberFormat
    format: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NumFmt:
        return cls(value=NumberFormat.parse_val(xml_node), format=xml_node.attributes.get("w:format"))


class FtnEdnNumProps(BaseModel):
    numbering_start: DecimalNumber | None = None
    numbering_restart: RestartNumber | None = None

    @classmethod
    def try_parse_group_node(cls, instance: FtnEdnNumProps | None, xml_node: XmlNode) -> FtnEdnNumProps | None:
        local_name = xml_node.local_name
        if local_name == "numStart":
            update = {"numbering_start": parse_decimal_number(xml_node.get_val_attribute())}
        elif local_name == "numRestart":
            update = {"numbering_restart": RestartNumber.parse_val(xml_node)}
        else:
            return None
        return (instance if instance is not None else cls()).model_copy(update=update)


class FtnProps(BaseModel):
    """Footnote placement and numbering (w:footnotePr)."""
    position: FtnPos | None = None
    numbering_format: NumFmt | None = None
    numbering_properties: FtnEdnNumProps | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FtnProps:
        instance = cls()
        for child_node in xml_node.child_nodes:
            instance = instance.try_update_from_xml_element(child_node)
        return instance

    def try_update_from_xml_element(self, xml_node: XmlNode) -> FtnProps:
        local_name = xml_node.local_name
        if local_name == "pos":
            return self.model_copy(update={"position": FtnPos.parse_val(xml_node)})
        elif local_name == "numFmt":
            return self.model_copy(update={"numbering_format": NumFmt.from_xml_element(xml_node)})
        num_props = FtnEdnNumProps.try_parse_group_node(self.numbering_properties, xml_node)
        if num_props is None:
            return self
        return self.model_copy(update={"numbering_properties": num_props})


class EdnProps(BaseModel):
    """Endnote placement and numbering (w:endnotePr)."""
    position: EdnPos | None = None
    numbering_format: NumFmt | None = None
    numbering_properties: FtnEdnNumProps | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> EdnProps:
        instance = cls()
        for child_node in xml_node.child_nodes:
            instance = instance.try_update_from_xml_element(child_node)
        return instance

    def try_update_from_xml_element(self, xml_node: XmlNode) -> EdnProps:
        local_name = xml_node.local_name
        if local_name == "pos":
            return self.model_copy(update={"position": EdnPos.parse_val(xml_node)})
        elif local_name == "numFmt":
            return self.model_copy(update={"numbering_format": NumFmt.from_xml_element(xml_node)})
        num_props = FtnEdnNumProps.try_parse_group_node(self.numbering_properties, xml_node)
        if num_props is None:
            return self
        return self.model_copy(update={"numbering_properties": num_props})


# ── Page geometry ──────────────────────────────────────────────────────────────

class PageSz(BaseModel):
    width: TwipsMeasure | None = None
    height: TwipsMeasure | None = None
    orientation: PageOrientation | None = None
    code: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PageSz:
        return cls(
            width=xml_node.parse_attribute("w:w", parse_twips_measure),
            height=xml_node.parse_attribute("w:h", parse_twips_measure),
            orientation=xml_node.parse_attribute("w:orient", PageOrientation.parse),
            code=xml_node.parse_attribute("w:code", parse_decimal_number),
        )


class PageMar(BaseModel):
    """Page margins. Every side is required; top and bottom may be negative."""
    top: SignedTwipsMeasure
    right: TwipsMeasure
    bottom: SignedTwipsMeasure
    left: TwipsMeasure
    header: TwipsMeasure
    footer: TwipsMeasure
    gutter: TwipsMeasure

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PageMar:
        return cls(
            top=parse_signed_twips_measure(xml_node.get_attribute("w:top")),
            right=parse_twips_measure(xml_node.get_attribute("w:right")),
            bottom=parse_signed_twips_measure(xml_node.get_attribute("w:bottom")),
            left=parse_twips_measure(xml_node.get_attribute("w:left")),
            header=parse_twips_measure(xml_node.get_attribute("w:header")),
            footer=parse_twips_measure(xml_node.get_attribute("w:footer")),
            gutter=parse_twips_measure(xml_node.get_attribute("w:gutter")),
        )


class PaperSource(BaseModel):
    first: DecimalNumber | None = None
    other: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PaperSource:
        return cls(
            first=xml_node.parse_attribute("w:first", parse_decimal_number),
            other=xml_node.parse_attribute("w:other", parse_decimal_number),
        )


class PageBorder(BaseModel):
    border: Border
    relationship_id: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PageBorder:
        return cls(
            border=Border.from_xml_element(xml_node),
            relationship_id=xml_node.attributes.get("r:id"),
        )


class TopPageBorder(PageBorder):
    top_left: str | None = None
    top_right: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TopPageBorder:
        return cls(
            border=Border.from_xml_element(xml_node),
            relationship_id=xml_node.attributes.get("r:id"),
            top_left=xml_node.attributes.get("r:topLeft"),
            top_right=xml_node.attributes.get("r:topRight"),
        )


class BottomPageBorder(PageBorder):
    bottom_left: str | None = None
    bottom_right: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> BottomPageBorder:
        return cls(
            border=Border.from_xml_element(xml_node),
            relationship_id=xml_node.attributes.get("r:id"),
            bottom_left=xml_node.attributes.get("r:bottomLeft"),
            bottom_right=xml_node.attributes.get("r:bottomRight"),
        )


class PageBorders(BaseModel):
    top: TopPageBorder | None = None
    left: PageBorder | None = None
    bottom: BottomPageBorder | None = None
    right: PageBorder | None = None
    z_order: PageBorderZOrder | None = None
    display: PageBorderDisplay | None = None
    offset_from: PageBorderOffset | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PageBorders:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "top":
                fields["top"] = TopPageBorder.from_xml_element(child_node)
            elif local_name == "left":
                fields["left"] = PageBorder.from_xml_element(child_node)
            elif local_name == "bottom":
                fields["bottom"] = BottomPageBorder.from_xml_element(child_node)
            elif local_name == "right":
                fields["right"] = PageBorder.from_xml_element(child_node)

        return cls(
            z_order=xml_node.parse_attribute("w:zOrder", PageBorderZOrder.parse),
            display=xml_node.parse_attribute("w:display", PageBorderDisplay.parse),
            offset_from=xml_node.parse_attribute("w:offsetFrom", PageBorderOffset.parse),
            **fields,
        )


class LineNumber(BaseModel):
    count_by: DecimalNumber | None = None
    start: DecimalNumber | None = None
    distance: TwipsMeasure | None = None
    restart: LineNumberRestart | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> LineNumber:
        return cls(
            count_by=xml_node.parse_attribute("w:countBy", parse_decimal_number),
            start=xml_node.parse_attribute("w:start", parse_decimal_number),
            distance=xml_node.parse_attribute("w:distance", parse_twips_measure),
            restart=xml_node.parse_attribute("w:restart", LineNumberRestart.parse),
        )


class PageNumber(BaseModel):
    format: NumberFormat | None = None
    start: DecimalNumber | None = None
    chapter_style: DecimalNumber | None = None
    chapter_separator: ChapterSep | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PageNumber:
        return cls(
            format=xml_node.parse_attribute("w:fmt", NumberFormat.parse),
            start=xml_node.parse_attribute("w:start", parse_decimal_number),
            chapter_style=xml_node.parse_attribute("w:chapStyle", parse_decimal_number),
            chapter_separator=xml_node.parse_attribute("w:chapSep", ChapterSep.parse),
        )


class Column(BaseModel):
    width: TwipsMeasure | None = None
    space: TwipsMeasure | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Column:
        return cls(
            width=xml_node.parse_attribute("w:w", parse_twips_measure),
            space=xml_node.parse_attribute("w:space", parse_twips_measure),
        )


class Columns(BaseModel):
    columns: list[Column] = Field(default_factory=list)
    equal_width: bool | None = None
    space: TwipsMeasure | None = None
    number: DecimalNumber | None = None
    separator: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Columns:
        columns = [Column.from_xml_element(c) for c in xml_node.child_nodes if c.local_name == "col"]
        if len(columns) > MAX_COLUMNS:
            raise LimitViolationError(xml_node.name, "col", 0, MAX_COLUMNS, len(columns))

        return cls(
            columns=columns,
            equal_width=xml_node.parse_attribute("w:equalWidth", parse_xml_bool),
            space=xml_node.parse_attribute("w:space", parse_twips_measure),
            number=xml_node.parse_attribute("w:num", parse_decimal_number),
            separator=xml_node.parse_attribute("w:sep", parse_xml_bool),
        )


class DocGrid(BaseModel):
    type: DocGridType | None = None
    line_pitch: DecimalNumber | None = None
    char_space: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocGrid:
        return cls(
            type=xml_node.parse_attribute("w:type", DocGridType.parse),
            line_pitch=xml_node.parse_attribute("w:linePitch", parse_decimal_number),
            char_space=xml_node.parse_attribute("w:charSpace", parse_decimal_number),
        )


# ── Header and footer references ───────────────────────────────────────────────

class HdrFtrRef(Rel):
    type: HdrFtr

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> HdrFtrRef:
        return cls(
            id=xml_node.get_attribute("r:id"),
            type=HdrFtr.parse(xml_node.get_attribute("w:type")),
        )


class HdrFtrReferences(XsdChoice):
    """A w:headerReference or w:footerReference."""
    members: ClassVar[frozenset[str]] = frozenset({"headerReference", "footerReference"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> HdrFtrRef:
        return HdrFtrRef.from_xml_element(xml_node)


# ── Section property bags ──────────────────────────────────────────────────────

_SECT_PR_ON_OFF_FIELDS = {
    "formProt": "form_protection",
    "noEndnote": "no_endnote",
    "titlePg": "title_page",
    "bidi": "bidirectional",
    "rtlGutter": "rtl_gutter",
}


class SectPrContents(BaseModel):
    footnote_properties: FtnProps | None = None
    endnote_properties: EdnProps | None = None
    section_type: SectionMark | None = None
    page_size: PageSz | None = None
    page_margin: PageMar | None = None
    paper_source: PaperSource | None = None
    page_borders: PageBorders | None = None
    line_number_type: LineNumber | None = None
    page_number_type: PageNumber | None = None
    columns: Columns | None = None
    form_protection: bool | None = None
    vertical_align: VerticalJc | None = None
    no_endnote: bool | None = None
    title_page: bool | None = None
    text_direction: TextDirection | None = None
    bidirectional: bool | None = None
    rtl_gutter: bool | None = None
    document_grid: DocGrid | None = None
    printer_settings: Rel | None = None

    @classmethod
    def try_parse_group_node(cls, instance: SectPrContents | None, xml_node: XmlNode) -> SectPrContents | None:
        """Return the updated bag, or None when xml_node is not a section property."""
        parsed = _parse_sect_pr_contents_field(xml_node)
        if parsed is None:
            return None
        field_name, value = parsed
        return (instance if instance is not None else cls()).model_copy(update={field_name: value})


def _parse_sect_pr_contents_field(xml_node: XmlNode) -> tuple[str, Any] | None:
    local_name = xml_node.local_name
    if local_name in _SECT_PR_ON_OFF_FIELDS:
        return _SECT_PR_ON_OFF_FIELDS[local_name], parse_on_off_xml_element(xml_node)
    if local_name == "footnotePr":
        return "footnote_properties", FtnProps.from_xml_element(xml_node)
    elif local_name == "endnotePr":
        return "endnote_properties", EdnProps.from_xml_element(xml_node)
    elif local_name == "type":
        return "section_type", xml_node.parse_attribute("w:val", SectionMark.parse)
    elif local_name == "pgSz":
        return "page_size", PageSz.from_xml_element(xml_node)
    elif local_name == "pgMar":
        return "page_margin", PageMar.from_xml_element(xml_node)
    elif local_name == "paperSrc":
        return "paper_source", PaperSource.from_xml_element(xml_node)
    elif local_name == "pgBorders":
        return "page_borders", PageBorders.from_xml_element(xml_node)
    elif local_name == "lnNumType":
        return "line_number_type", LineNumber.from_xml_element(xml_node)
    elif local_name == "pgNumType":
        return "page_number_type", PageNumber.from_xml_element(xml_node)
    elif local_name == "cols":
        return "columns", Columns.from_xml_element(xml_node)
    elif local_name == "vAlign":
        return "vertical_align", VerticalJc.parse_val(xml_node)
    elif local_name == "textDirection":
        return "text_direction", TextDirection.parse_val(xml_node)
    elif local_name == "docGrid":
        return "document_grid", DocGrid.from_xml_element(xml_node)
    elif local_name == "printerSettings":
        return "printer_settings", Rel.from_xml_element(xml_node)
    return None


class SectPrAttributes(BaseModel):
    run_properties_revision_id: LongHexNumber | None = None
    deletion_revision_id: LongHexNumber | None = None
    revision_id: LongHexNumber | None = None
    section_revision_id: LongHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SectPrAttributes:
        return cls(
            run_properties_revision_id=xml_node.parse_attribute("w:rsidRPr", parse_long_hex),
            deletion_revision_id=xml_node.parse_attribute("w:rsidDel", parse_long_hex),
            revision_id=xml_node.parse_attribute("w:rsidR", parse_long_hex),
            section_revision_id=xml_node.parse_attribute("w:rsidSect", parse_long_hex),
        )


class SectPrBase(BaseModel):
    """Section properties without header/footer references or revisions."""
    contents: SectPrContents | None = None
    attributes: SectPrAttributes = Field(default_factory=SectPrAttributes)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SectPrBase:
        contents = None
        for child_node in xml_node.child_nodes:
            updated = SectPrContents.try_parse_group_node(contents, child_node)
            if updated is not None:
                contents = updated
        return cls(contents=contents, attributes=SectPrAttributes.from_xml_element(xml_node))


class SectPrChange(TrackChange):
    section_properties: SectPrBase | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SectPrChange:
        sect_pr_node = xml_node.find_child("sectPr")
        return cls(
            **cls.markup_fields(xml_node),
            section_properties=SectPrBase.from_xml_element(sect_pr_node) if sect_pr_node is not None else None,
        )


class SectPr(BaseModel):
    header_footer_references: list[HdrFtrReferences] = Field(default_factory=list)
    contents: SectPrContents | None = None
    change: SectPrChange | None = None
    attributes: SectPrAttributes = Field(default_factory=SectPrAttributes)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SectPr:
        logger.debug("Parsing %s", xml_node.name)

        references: list[HdrFtrReferences] = []
        contents = None
        change = None
        for child_node in xml_node.child_nodes:
            reference = HdrFtrReferences.try_from_xml_element(child_node)
            if reference is not None:
                references.append(reference)
                continue

            updated = SectPrContents.try_parse_group_node(contents, child_node)
            if updated is not None:
                contents = updated
            elif child_node.local_name == "sectPrChange":
                change = SectPrChange.from_xml_element(child_node)

        if len(references) > MAX_HEADER_FOOTER_REFERENCES:
            raise LimitViolationError(
                xml_node.name,
                "headerReference|footerReference",
                0,
                MAX_HEADER_FOOTER_REFERENCES,
                len(references),
            )

        return cls(
            header_footer_references=references,
            contents=contents,
            change=change,
            attributes=SectPrAttributes.from_xml_element(xml_node),
        )
