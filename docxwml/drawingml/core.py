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

"""DrawingML core types referenced from WordprocessingML drawings.

Only the non-visual properties and the graphic frame envelope are modelled.
The payload of a:graphicData (pictures, charts, diagrams) is kept as raw
XmlNode children so callers can hand it to a specialised parser.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from docxwml.drawingml.simpletypes import DrawingElementId, parse_drawing_element_id
from docxwml.errors import MissingChildNodeError
from docxwml.xml import XmlNode, parse_xml_bool


class EmbeddedWAVAudioFile(BaseModel):
    relationship_id: str
    name: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> EmbeddedWAVAudioFile:
        return cls(
            relationship_id=xml_node.get_attribute("r:embed"),
            name=xml_node.attributes.get("name"),
        )


class Hyperlink(BaseModel):
    """Click or hover action of a drawing object (a:hlinkClick, a:hlinkHover)."""
    relationship_id: str | None = None
    invalid_url: str | None = None
    action: str | None = None
    target_frame: str | None = None
    tooltip: str | None = None
    history: bool | None = None
    highlight_click: bool | None = None
    end_sound: bool | None = None
    sound: EmbeddedWAVAudioFile | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Hyperlink:
        sound_node = xml_node.find_child("snd")
        return cls(
            relationship_id=xml_node.attributes.get("r:id"),
            invalid_url=xml_node.attributes.get("invalidUrl"),
            action=xml_node.attributes.get("action"),
            target_frame=xml_node.attributes.get("tgtFrame"),
            tooltip=xml_node.attributes.get("tooltip"),
            history=xml_node.parse_attribute("history", parse_xml_bool),
            highlight_click=xml_node.parse_attribute("highlightClick", parse_xml_bool),
            end_sound=xml_node.parse_attribute("endSnd", parse_xml_bool),
            sound=EmbeddedWAVAudioFile.from_xml_element(sound_node) if sound_node is not None else None,
        )


class NonVisualDrawingProps(BaseModel):
    """Identity and accessibility data of a drawing object (wp:docPr, p:cNvPr).

    id must be unique within the document; descr holds the alternative text.
    """
    id: DrawingElementId
    name: str
    description: str | None = None
    hidden: bool | None = None
    title: str | None = None
    hyperlink_click: Hyperlink | None = None
    hyperlink_hover: Hyperlink | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NonVisualDrawingProps:
        fields: dict = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "hlinkClick":
                fields["hyperlink_click"] = Hyperlink.from_xml_element(child_node)
            elif local_name == "hlinkHover":
                fields["hyperlink_hover"] = Hyperlink.from_xml_element(child_node)

        return cls(
            id=parse_drawing_element_id(xml_node.get_attribute("id")),
            name=xml_node.get_attribute("name"),
            description=xml_node.attributes.get("descr"),
            hidden=xml_node.parse_attribute("hidden", parse_xml_bool),
            title=xml_node.attributes.get("title"),
            **fields,
        )


class GraphicalObjectFrameLocking(BaseModel):
    no_grouping: bool | None = None
    no_drilldown: bool | None = None
    no_select: bool | None = None
    no_change_aspect: bool | None = None
    no_move: bool | None = None
    no_resize: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> GraphicalObjectFrameLocking:
        return cls(
            no_grouping=xml_node.parse_attribute("noGrp", parse_xml_bool),
            no_drilldown=xml_node.parse_attribute("noDrilldown", parse_xml_bool),
            no_select=xml_node.parse_attribute("noSelect", parse_xml_bool),
            no_change_aspect=xml_node.parse_attribute("noChangeAspect", parse_xml_bool),
            no_move=xml_node.parse_attribute("noMove", parse_xml_bool),
            no_resize=xml_node.parse_attribute("noResize", parse_xml_bool),
        )


class NonVisualGraphicFrameProperties(BaseModel):
    graphic_frame_locks: GraphicalObjectFrameLocking | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NonVisualGraphicFrameProperties:
        locks_node = xml_node.find_child("graphicFrameLocks")
        if locks_node is None:
            return cls()
        return cls(graphic_frame_locks=GraphicalObjectFrameLocking.from_xml_element(locks_node))


class GraphicalObjectData(BaseModel):
    """a:graphicData — uri names the handler, children are its opaque payload."""
    uri: str
    graphic_object: list[XmlNode] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> GraphicalObjectData:
        return cls(uri=xml_node.get_attribute("uri"), graphic_object=list(xml_node.child_nodes))


class GraphicalObject(BaseModel):
    graphic_data: GraphicalObjectData

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> GraphicalObject:
        data_node = xml_node.find_child("graphicData")
        if data_node is None:
            raise MissingChildNodeError(xml_node.name, "graphicData")
        return cls(graphic_data=GraphicalObjectData.from_xml_element(data_node))
