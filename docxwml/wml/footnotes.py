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

"""Footnotes and endnotes parts (word/footnotes.xml, word/endnotes.xml)."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError, MaxOccurs
from docxwml.wml.document import BlockLevelElts
from docxwml.wml.simpletypes import DecimalNumber, parse_decimal_number
from docxwml.xml import XmlNode
from docxwml.xsdtypes import XsdEnum

logger = logging.getLogger(__name__)


class FtnEdnType(XsdEnum):
    NORMAL = "normal"
    SEPARATOR = "separator"
    CONTINUATION_SEPARATOR = "continuationSeparator"
    CONTINUATION_NOTICE = "continuationNotice"


class FtnEdn(BaseModel):
    """A single footnote or endnote. Separators are notes too, with a type."""
    type: FtnEdnType | None = None
    id: DecimalNumber
    block_level_elements: list[BlockLevelElts]

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FtnEdn:
        note_id = parse_decimal_number(xml_node.get_attribute("w:id"))
        block_level_elements = BlockLevelElts.list_from_children(xml_node)
        if not block_level_elements:
            raise LimitViolationError(xml_node.name, "BlockLevelElts", 1, MaxOccurs.UNBOUNDED, 0)

        return cls(
            type=xml_node.parse_attribute("w:type", FtnEdnType.parse),
            id=note_id,
            block_level_elements=block_level_elements,
        )


class Footnotes(BaseModel):
    """The root of word/footnotes.xml."""
    notes: list[FtnEdn] = Field(default_factory=list)

    NOTE_NAME: ClassVar[str] = "footnote"

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Footnotes:
        logger.debug("Parsing %s", xml_node.name)
        return cls(notes=[FtnEdn.from_xml_element(c) for c in xml_node.find_children(cls.NOTE_NAME)])

    def find_by_id(self, note_id: int) -> FtnEdn | None:
        for note in self.notes:
            if note.id == note_id:
                return note
        return None


class Endnotes(Footnotes):
    """The root of word/endnotes.xml."""

    NOTE_NAME: ClassVar[str] = "endnote"
