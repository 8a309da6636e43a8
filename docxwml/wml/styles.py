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

"""Style definitions (word/styles.xml).

Only parsing lives here. Walking basedOn chains and merging the formatting of
a style with its ancestors is done by docxwml.resolvedstyle.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from docxwml.wml.document import PPr
from docxwml.wml.properties import PPrGeneral, RPr
from docxwml.wml.simpletypes import (
    DecimalNumber,
    LongHexNumber,
    parse_decimal_number,
    parse_long_hex,
    parse_on_off_xml_element,
)
from docxwml.wml.table import TblPrBase, TcPr, TrPr
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdEnum

logger = logging.getLogger(__name__)


class StyleType(XsdEnum):
    PARAGRAPH = "paragraph"
    CHARACTER = "character"
    TABLE = "table"
    NUMBERING = "numbering"


class TblStyleOverrideType(XsdEnum):
    WHOLE_TABLE = "wholeTable"
    FIRST_ROW = "firstRow"
    LAST_ROW = "lastRow"
    FIRST_COLUMN = "firstCol"
    LAST_COLUMN = "lastCol"
    BAND1_VERTICAL = "band1Vert"
    BAND2_VERTICAL = "band2Vert"
    BAND1_HORIZONTAL = "band1Horz"
    BAND2_HORIZONTAL = "band2Horz"
    NORTH_EAST_CELL = "neCell"
    NORTH_WEST_CELL = "nwCell"
    SOUTH_EAST_CELL = "seCell"
    SOUTH_WEST_CELL = "swCell"


# ── Document defaults ──────────────────────────────────────────────────────────

class RPrDefault(BaseModel):
    run_properties: RPr | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RPrDefault:
        r_pr_node = xml_node.find_child("rPr")
        return cls(run_properties=RPr.from_xml_element(r_pr_node) if r_pr_node is not None else None)


class PPrDefault(BaseModel):
    paragraph_properties: PPr | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PPrDefault:
        p_pr_node = xml_node.find_child("pPr")
        return cls(paragraph_properties=PPr.from_xml_element(p_pr_node) if p_pr_node is not None else None)


class DocDefaults(BaseModel):
    run_properties_default: RPrDefault | None = None
    paragraph_properties_default: PPrDefault | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocDefaults:
        r_pr_default_node = xml_node.find_child("rPrDefault")
        p_pr_default_node = xml_node.find_child("pPrDefault")
        return cls(
            run_properties_default=(
                RPrDefault.from_xml_element(r_pr_default_node) if r_pr_default_node is not None else None
            ),
            paragraph_properties_default=(
                PPrDefault.from_xml_element(p_pr_default_node) if p_pr_default_node is not None else None
            ),
        )


# ── Latent styles ──────────────────────────────────────────────────────────────

class LsdException(BaseModel):
    """Overrides the latent style defaults for one built-in style name."""
    name: str
    locked: bool | None = None
    ui_priority: DecimalNumber | None = None
    semi_hidden: bool | None = None
    unhide_when_used: bool | None = None
    primary_style: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> LsdException:
        return cls(
            name=xml_node.get_attribute("w:name"),
            locked=xml_node.parse_attribute("w:locked", parse_xml_bool),
            ui_priority=xml_node.parse_attribute("w:uiPriority", parse_decimal_number),
            semi_hidden=xml_node.parse_attribute("w:semiHidden", parse_xml_bool),
            unhide_when_used=xml_node.parse_attribute("w:unhideWhenUsed", parse_xml_bool),
            primary_style=xml_node.parse_attribute("w:qFormat", parse_xml_bool),
        )


class LatentStyles(BaseModel):
    lsd_exceptions: list[LsdException] = Field(default_factory=list)
    default_locked_state: bool | None = None
    default_ui_priority: DecimalNumber | None = None
    default_semi_hidden: bool | None = None
    default_unhide_when_used: bool | None = None
    default_primary_style: bool | None = None
    count: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> LatentStyles:
        return cls(
            lsd_exceptions=[LsdException.from_xml_element(c) for c in xml_node.find_children("lsdException")],
            default_locked_state=xml_node.parse_attribute("w:defLockedState", parse_xml_bool),
            default_ui_priority=xml_node.parse_attribute("w:defUIPriority", parse_decimal_number),
            default_semi_hidden=xml_node.parse_attribute("w:defSemiHidden", parse_xml_bool),
            default_unhide_when_used=xml_node.parse_attribute("w:defUnhideWhenUsed", parse_xml_bool),
            default_primary_style=xml_node.parse_attribute("w:defQFormat", parse_xml_bool),
            count=xml_node.parse_attribute("w:count", parse_decimal_number),
        )


# ── Styles ─────────────────────────────────────────────────────────────────────

def _parse_formatting_field(xml_node: XmlNode) -> tuple[str, Any] | None:
    """The formatting children shared by w:style and w:tblStylePr."""
    local_name = xml_node.local_name
    if local_name == "pPr":
        return "paragraph_properties", PPrGeneral.from_xml_element(xml_node)
    elif local_name == "rPr":
        return "run_properties", RPr.from_xml_element(xml_node)
    elif local_name == "tblPr":
        return "table_properties", TblPrBase.from_xml_element(xml_node)
    elif local_name == "trPr":
        return "table_row_properties", TrPr.from_xml_element(xml_node)
    elif local_name == "tcPr":
        return "table_cell_properties", TcPr.from_xml_element(xml_node)
    return None


class TblStylePr(BaseModel):
    """Conditional formatting for one region of a table style."""
    override_type: TblStyleOverrideType
    paragraph_properties: PPrGeneral | None = None
    run_properties: RPr | None = None
    table_properties: TblPrBase | None = None
    table_row_properties: TrPr | None = None
    table_cell_properties: TcPr | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TblStylePr:
        override_type = TblStyleOverrideType.parse(xml_node.get_attribute("w:type"))
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            parsed = _parse_formatting_field(child_node)
            if parsed is not None:
                fields[parsed[0]] = parsed[1]
        return cls(override_type=override_type, **fields)


_STYLE_STRING_FIELDS = {
    "name": "name",
    "aliases": "aliases",
    "basedOn": "based_on",
    "next": "next",
    "link": "link",
}
_STYLE_ON_OFF_FIELDS = {
    "autoRedefine": "auto_redefine",
    "hidden": "hidden",
    "semiHidden": "semi_hidden",
    "unhideWhenUsed": "unhide_when_used",
    "qFormat": "primary_style",
    "locked": "locked",
    "personal": "personal",
    "personalCompose": "personal_compose",
    "personalReply": "personal_reply",
}


class Style(BaseModel):
    name: str | None = None
    aliases: str | None = None
    based_on: str | None = None
    next: str | None = None
    link: str | None = None
    auto_redefine: bool | None = None
    hidden: bool | None = None
    ui_priority: DecimalNumber | None = None
    semi_hidden: bool | None = None
    unhide_when_used: bool | None = None
    primary_style: bool | None = None
    locked: bool | None = None
    personal: bool | None = None
    personal_compose: bool | None = None
    personal_reply: bool | None = None
    revision_id: LongHexNumber | None = None
    paragraph_properties: PPrGeneral | None = None
    run_properties: RPr | None = None
    table_properties: TblPrBase | None = None
    table_row_properties: TrPr | None = None
    table_cell_properties: TcPr | None = None
    table_style_properties: list[TblStylePr] = Field(default_factory=list)
    style_type: StyleType | None = None
    style_id: str | None = None
    is_default: bool | None = None
    custom_style: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Style:
        fields: dict[str, Any] = {
            "style_type": xml_node.parse_attribute("w:type", StyleType.parse),
            "style_id": xml_node.attributes.get("w:styleId"),
            "is_default": xml_node.parse_attribute("w:default", parse_xml_bool),
            "custom_style": xml_node.parse_attribute("w:customStyle", parse_xml_bool),
        }
        table_style_properties: list[TblStylePr] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name in _STYLE_STRING_FIELDS:
                fields[_STYLE_STRING_FIELDS[local_name]] = child_node.get_val_attribute()
            elif local_name in _STYLE_ON_OFF_FIELDS:
                fields[_STYLE_ON_OFF_FIELDS[local_name]] = parse_on_off_xml_element(child_node)
            elif local_name == "uiPriority":
                fields["ui_priority"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "rsid":
                fields["revision_id"] = parse_long_hex(child_node.get_val_attribute())
            elif local_name == "tblStylePr":
                table_style_properties.append(TblStylePr.from_xml_element(child_node))
            else:
                parsed = _parse_formatting_field(child_node)
                if parsed is not None:
                    fields[parsed[0]] = parsed[1]
        return cls(**fields, table_style_properties=table_style_properties)


class Styles(BaseModel):
    """The root of word/styles.xml."""
    document_defaults: DocDefaults | None = None
    latent_styles: LatentStyles | None = None
    styles: list[Style] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Styles:
        logger.debug("Parsing %s", xml_node.name)

        document_defaults = None
        latent_styles = None
        styles: list[Style] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "docDefaults":
                document_defaults = DocDefaults.from_xml_element(child_node)
            elif local_name == "latentStyles":
                latent_styles = LatentStyles.from_xml_element(child_node)
            elif local_name == "style":
                styles.append(Style.from_xml_element(child_node))
        return cls(document_defaults=document_defaults, latent_styles=latent_styles, styles=styles)

    def find_style(self, style_id: str) -> Style | None:
        for style in self.styles:
            if style.style_id == style_id:
                return style
        return None
