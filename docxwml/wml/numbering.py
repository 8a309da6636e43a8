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

"""Numbering part (word/numbering.xml).

A paragraph refers to a numbering instance (``w:num``) through its numId.
The instance points at an abstract definition (``w:abstractNum``) holding up
to nine levels, and may override the start value or the whole definition of
individual levels.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError, MissingChildNodeError
from docxwml.wml.document import Control
from docxwml.wml.drawing import Drawing
from docxwml.wml.enums import Jc
from docxwml.wml.properties import PPrGeneral, RPr, Rel
from docxwml.wml.section import NumFmt
from docxwml.wml.simpletypes import (
    DecimalNumber,
    LongHexNumber,
    parse_decimal_number,
    parse_long_hex,
    parse_on_off_xml_element,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice, XsdEnum

logger = logging.getLogger(__name__)

MAX_LEVELS = 9


class MultiLevelType(XsdEnum):
    SINGLE_LEVEL = "singleLevel"
    MULTI_LEVEL = "multilevel"
    HYBRID_MULTI_LEVEL = "hybridMultilevel"


class LevelSuffix(XsdEnum):
    TAB = "tab"
    SPACE = "space"
    NOTHING = "nothing"


# ── Picture bullets ────────────────────────────────────────────────────────────

class Picture(BaseModel):
    """A VML picture bullet. The VML shapes themselves stay raw."""
    movie: Rel | None = None
    control: Control | None = None
    vml_elements: list[XmlNode] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Picture:
        movie = None
        control = None
        vml_elements: list[XmlNode] = []
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "movie":
                movie = Rel.from_xml_element(child_node)
            elif child_node.local_name == "control":
                control = Control.from_xml_element(child_node)
            else:
                vml_elements.append(child_node)
        return cls(movie=movie, control=control, vml_elements=vml_elements)


class NumPicBulletChoice(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"drawing", "pict"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Drawing | Picture:
        if xml_node.local_name == "drawing":
            return Drawing.from_xml_element(xml_node)
        return Picture.from_xml_element(xml_node)


class NumPicBullet(BaseModel):
    choice: NumPicBulletChoice
    symbol_id: DecimalNumber

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NumPicBullet:
        symbol_id = parse_decimal_number(xml_node.get_attribute("w:numPicBulletId"))
        choice = next(
            (c for c in map(NumPicBulletChoice.try_from_xml_element, xml_node.child_nodes) if c is not None),
            None,
        )
        if choice is None:
            raise MissingChildNodeError(xml_node.name, "drawing|pict")
        return cls(choice=choice, symbol_id=symbol_id)


# ── Levels ─────────────────────────────────────────────────────────────────────

class LevelText(BaseModel):
    value: str | None = None
    is_null: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> LevelText:
        return cls(
            value=xml_node.attributes.get("w:val"),
            is_null=xml_node.parse_attribute("w:null", parse_xml_bool),
        )


class Lvl(BaseModel):
    """One level of a list: how its number looks and how it is indented."""
    level: DecimalNumber
    start: DecimalNumber | None = None
    numbering_format: NumFmt | None = None
    level_restart: DecimalNumber | None = None
    paragraph_style: str | None = None
    display_as_arabic_numerals: bool | None = None
    suffix: LevelSuffix | None = None
    level_text: LevelText | None = None
    level_picture_bullet_id: DecimalNumber | None = None
    level_alignment: Jc | None = None
    paragraph_properties: PPrGeneral | None = None
    run_properties: RPr | None = None
    template_code: LongHexNumber | None = None
    tentative: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Lvl:
        fields: dict[str, Any] = {
            "level": parse_decimal_number(xml_node.get_attribute("w:ilvl")),
            "template_code": xml_node.parse_attribute("w:tplc", parse_long_hex),
            "tentative": xml_node.parse_attribute("w:tentative", parse_xml_bool),
        }
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "start":
                fields["start"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "numFmt":
                fields["numbering_format"] = NumFmt.from_xml_element(child_node)
            elif local_name == "lvlRestart":
                fields["level_restart"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "pStyle":
                fields["paragraph_style"] = child_node.get_val_attribute()
            elif local_name == "isLgl":
                fields["display_as_arabic_numerals"] = parse_on_off_xml_element(child_node)
            elif local_name == "suff":
                fields["suffix"] = LevelSuffix.parse_val(child_node)
            elif local_name == "lvlText":
                fields["level_text"] = LevelText.from_xml_element(child_node)
            elif local_name == "lvlPicBulletId":
                fields["level_picture_bullet_id"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "lvlJc":
                fields["level_alignment"] = Jc.parse_val(child_node)
            elif local_name == "pPr":
                fields["paragraph_properties"] = PPrGeneral.from_xml_element(child_node)
            elif local_name == "rPr":
                fields["run_properties"] = RPr.from_xml_element(child_node)
        return cls(**fields)


def _check_level_count(xml_node: XmlNode, violating_node_name: str, count: int) -> None:
    if count > MAX_LEVELS:
        raise LimitViolationError(xml_node.name, violating_node_name, 0, MAX_LEVELS, count)


class AbstractNum(BaseModel):
    abstract_num_id: DecimalNumber
    definition_id: LongHexNumber | None = None
    multi_level_type: MultiLevelType | None = None
    template: LongHexNumber | None = None
    name: str | None = None
    style_link: str | None = None
    numbering_style_link: str | None = None
    levels: list[Lvl] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> AbstractNum:
        fields: dict[str, Any] = {"abstract_num_id": parse_decimal_number(xml_node.get_attribute("w:abstractNumId"))}
        levels: list[Lvl] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "nsid":
                fields["definition_id"] = parse_long_hex(child_node.get_val_attribute())
            elif local_name == "multiLevelType":
                fields["multi_level_type"] = MultiLevelType.parse_val(child_node)
            elif local_name == "tmpl":
                fields["template"] = parse_long_hex(child_node.get_val_attribute())
            elif local_name == "name":
                fields["name"] = child_node.get_val_attribute()
            elif local_name == "styleLink":
                fields["style_link"] = child_node.get_val_attribute()
            elif local_name == "numStyleLink":
                fields["numbering_style_link"] = child_node.get_val_attribute()
            elif local_name == "lvl":
                levels.append(Lvl.from_xml_element(child_node))
        _check_level_count(xml_node, "lvl", len(levels))
        return cls(**fields, levels=levels)

    def find_level(self, level: int) -> Lvl | None:
        return next((lvl for lvl in self.levels if lvl.level == level), None)


# ── Numbering instances ────────────────────────────────────────────────────────

class NumLvl(BaseModel):
    """A per-instance override of one level of the abstract definition."""
    numbering_level: DecimalNumber
    start_override: DecimalNumber | None = None
    level: Lvl | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NumLvl:
        start_override = None
        level = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "startOverride":
                start_override = parse_decimal_number(child_node.get_val_attribute())
            elif child_node.local_name == "lvl":
                level = Lvl.from_xml_element(child_node)
        return cls(
            numbering_level=parse_decimal_number(xml_node.get_attribute("w:ilvl")),
            start_override=start_override,
            level=level,
        )


class Num(BaseModel):
    numbering_id: DecimalNumber
    abstract_num_id: DecimalNumber
    level_overrides: list[NumLvl] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Num:
        numbering_id = parse_decimal_number(xml_node.get_attribute("w:numId"))
        abstract_num_id = None
        level_overrides: list[NumLvl] = []
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "abstractNumId":
                abstract_num_id = parse_decimal_number(child_node.get_val_attribute())
            elif child_node.local_name == "lvlOverride":
                level_overrides.append(NumLvl.from_xml_element(child_node))
        if abstract_num_id is None:
            raise MissingChildNodeError(xml_node.name, "abstractNumId")
        _check_level_count(xml_node, "lvlOverride", len(level_overrides))
        return cls(numbering_id=numbering_id, abstract_num_id=abstract_num_id, level_overrides=level_overrides)

    def find_level_override(self, level: int) -> NumLvl | None:
        return next((o for o in self.level_overrides if o.numbering_level == level), None)


class Numbering(BaseModel):
    """The root of word/numbering.xml."""
    picture_numbering_symbols: list[NumPicBullet] = Field(default_factory=list)
    abstract_numberings: list[AbstractNum] = Field(default_factory=list)
    numberings: list[Num] = Field(default_factory=list)
    numbering_id_mac_at_cleanup: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Numbering:
        logger.debug("Parsing %s", xml_node.name)
        instance = cls()
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "numPicBullet":
                instance.picture_numbering_symbols.append(NumPicBullet.from_xml_element(child_node))
            elif local_name == "abstractNum":
                instance.abstract_numberings.append(AbstractNum.from_xml_element(child_node))
            elif local_name == "num":
                instance.numberings.append(Num.from_xml_element(child_node))
            elif local_name == "numIdMacAtCleanup":
                instance.numbering_id_mac_at_cleanup = parse_decimal_number(child_node.get_val_attribute())
        return instance

    def find_num(self, numbering_id: int) -> Num | None:
        return next((num for num in self.numberings if num.numbering_id == numbering_id), None)

    def find_abstract_num(self, abstract_num_id: int) -> AbstractNum | None:
        return next((a for a in self.abstract_numberings if a.abstract_num_id == abstract_num_id), None)
