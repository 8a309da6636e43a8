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

"""WordprocessingML drawings (w:drawing) — inline and floating objects,
their placement, text wrapping, and the text boxes of WordprocessingML shapes.

Placement attributes live in the wp: namespace and carry no prefix on their
attributes, so attribute lookups here use bare names (distT, relativeFrom).
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.drawingml.coordsys import Point2D, PositiveSize2D
from docxwml.drawingml.core import (
    GraphicalObject,
    NonVisualDrawingProps,
    NonVisualGraphicFrameProperties,
)
from docxwml.drawingml.simpletypes import Coordinate, parse_coordinate
from docxwml.errors import LimitViolationError, MaxOccurs, MissingChildNodeError
from docxwml.sharedtypes import parse_signed_int, parse_unsigned_int
from docxwml.wml.document import BlockLevelElts
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice, XsdEnum

logger = logging.getLogger(__name__)

WrapDistance = int
PositionOffset = int


def _require_child(xml_node: XmlNode, local_name: str) -> XmlNode:
    child_node = xml_node.find_child(local_name)
    if child_node is None:
        raise MissingChildNodeError(xml_node.name, local_name)
    return child_node


def _parse_optional_child(xml_node: XmlNode, local_name: str, builder) -> Any:
    child_node = xml_node.find_child(local_name)
    return builder(child_node) if child_node is not None else None


def _wrap_distances(xml_node: XmlNode, *sides: str) -> dict[str, WrapDistance | None]:
    names = {"T": "distance_top", "B": "distance_bottom", "L": "distance_left", "R": "distance_right"}
    return {names[side]: xml_node.parse_attribute(f"dist{side}", parse_unsigned_int) for side in sides}


# ── Enumerations ───────────────────────────────────────────────────────────────

class WrapText(XsdEnum):
    BOTH_SIDES = "bothSides"
    LEFT = "left"
    RIGHT = "right"
    LARGEST = "largest"


class AlignH(XsdEnum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    INSIDE = "inside"
    OUTSIDE = "outside"


class RelFromH(XsdEnum):
    MARGIN = "margin"
    PAGE = "page"
    COLUMN = "column"
    CHARACTER = "character"
    LEFT_MARGIN = "leftMargin"
    RIGHT_MARGIN = "rightMargin"
    INSIDE_MARGIN = "insideMargin"
    OUTSIDE_MARGIN = "outsideMargin"


class AlignV(XsdEnum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    INSIDE = "inside"
    OUTSIDE = "outside"


class RelFromV(XsdEnum):
    MARGIN = "margin"
    PAGE = "page"
    PARAGRAPH = "paragraph"
    LINE = "line"
    TOP_MARGIN = "topMargin"
    BOTTOM_MARGIN = "bottomMargin"
    INSIDE_MARGIN = "insideMargin"
    OUTSIDE_MARGIN = "outsideMargin"


# ── Extents and wrapping ───────────────────────────────────────────────────────

class EffectExtent(BaseModel):
    """Extra space added to each edge to fit shadows, glows and the like."""
    left: Coordinate
    top: Coordinate
    right: Coordinate
    bottom: Coordinate

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> EffectExtent:
        return cls(
            left=parse_coordinate(xml_node.get_attribute("l")),
            top=parse_coordinate(xml_node.get_attribute("t")),
            right=parse_coordinate(xml_node.get_attribute("r")),
            bottom=parse_coordinate(xml_node.get_attribute("b")),
        )


class WrapPath(BaseModel):
    """The wrapping polygon of a tight or through wrap."""
    start: Point2D
    line_to: list[Point2D]
    edited: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WrapPath:
        start = None
        line_to: list[Point2D] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "start":
                start = Point2D.from_xml_element(child_node)
            elif local_name == "lineTo":
                line_to.append(Point2D.from_xml_element(child_node))

        if start is None:
            raise MissingChildNodeError(xml_node.name, "start")
        if len(line_to) < 2:
            raise LimitViolationError(xml_node.name, "lineTo", 2, MaxOccurs.UNBOUNDED, len(line_to))

        return cls(start=start, line_to=line_to, edited=xml_node.parse_attribute("edited", parse_xml_bool))


class WrapSquare(BaseModel):
    wrap_text: WrapText
    effect_extent: EffectExtent | None = None
    distance_top: WrapDistance | None = None
    distance_bottom: WrapDistance | None = None
    distance_left: WrapDistance | None = None
    distance_right: WrapDistance | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WrapSquare:
        return cls(
            wrap_text=WrapText.parse(xml_node.get_attribute("wrapText")),
            effect_extent=_parse_optional_child(xml_node, "effectExtent", EffectExtent.from_xml_element),
            **_wrap_distances(xml_node, "T", "B", "L", "R"),
        )


class WrapTight(BaseModel):
    wrap_polygon: WrapPath
    wrap_text: WrapText
    distance_left: WrapDistance | None = None
    distance_right: WrapDistance | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WrapTight:
        return cls(
            wrap_polygon=WrapPath.from_xml_element(_require_child(xml_node, "wrapPolygon")),
            wrap_text=WrapText.parse(xml_node.get_attribute("wrapText")),
            **_wrap_distances(xml_node, "L", "R"),
        )


class WrapThrough(WrapTight):
    pass


class WrapTopBottom(BaseModel):
    effect_extent: EffectExtent | None = None
    distance_top: WrapDistance | None = None
    distance_bottom: WrapDistance | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WrapTopBottom:
        return cls(
            effect_extent=_parse_optional_child(xml_node, "effectExtent", EffectExtent.from_xml_element),
            **_wrap_distances(xml_node, "T", "B"),
        )


class WrapType(XsdChoice):
    """How text flows around a floating object. wrapNone carries no value."""
    members: ClassVar[frozenset[str]] = frozenset({
        "wrapNone", "wrapSquare", "wrapTight", "wrapThrough", "wrapTopAndBottom",
    })

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "wrapSquare":
            return WrapSquare.from_xml_element(xml_node)
        elif local_name == "wrapTight":
            return WrapTight.from_xml_element(xml_node)
        elif local_name == "wrapThrough":
            return WrapThrough.from_xml_element(xml_node)
        elif local_name == "wrapTopAndBottom":
            return WrapTopBottom.from_xml_element(xml_node)
        return None


# ── Positioning ────────────────────────────────────────────────────────────────

def _node_text(xml_node: XmlNode) -> str:
    if xml_node.text is None:
        raise MissingChildNodeError(xml_node.name, "Text node")
    return xml_node.text.strip()


class PosHChoice(XsdChoice):
    """Either a relative alignment (value is AlignH) or an EMU offset (value is int)."""
    members: ClassVar[frozenset[str]] = frozenset({"align", "posOffset"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        if xml_node.local_name == "align":
            return AlignH.parse(_node_text(xml_node))
        return parse_signed_int(_node_text(xml_node))


class PosVChoice(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"align", "posOffset"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        if xml_node.local_name == "align":
            return AlignV.parse(_node_text(xml_node))
        return parse_signed_int(_node_text(xml_node))


def _find_choice(xml_node: XmlNode, choice: type[XsdChoice]) -> XsdChoice:
    for child_node in xml_node.child_nodes:
        if choice.is_choice_member(child_node.local_name):
            return choice.from_xml_element(child_node)
    raise MissingChildNodeError(xml_node.name, "|".join(sorted(choice.members)))


class PosH(BaseModel):
    align_or_offset: PosHChoice
    relative_from: RelFromH

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PosH:
        return cls(
            align_or_offset=_find_choice(xml_node, PosHChoice),
            relative_from=RelFromH.parse(xml_node.get_attribute("relativeFrom")),
        )


class PosV(BaseModel):
    align_or_offset: PosVChoice
    relative_from: RelFromV

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PosV:
        return cls(
            align_or_offset=_find_choice(xml_node, PosVChoice),
            relative_from=RelFromV.parse(xml_node.get_attribute("relativeFrom")),
        )


# ── Inline and anchored drawings ───────────────────────────────────────────────

class Inline(BaseModel):
    """A drawing that sits in the text flow like a large character."""
    extent: PositiveSize2D
    effect_extent: EffectExtent | None = None
    document_properties: NonVisualDrawingProps
    graphic_frame_properties: NonVisualGraphicFrameProperties | None = None
    graphic: GraphicalObject
    distance_top: WrapDistance | None = None
    distance_bottom: WrapDistance | None = None
    distance_left: WrapDistance | None = None
    distance_right: WrapDistance | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Inline:
        logger.debug("Parsing %s", xml_node.name)
        return cls(
            extent=PositiveSize2D.from_xml_element(_require_child(xml_node, "extent")),
            effect_extent=_parse_optional_child(xml_node, "effectExtent", EffectExtent.from_xml_element),
            document_properties=NonVisualDrawingProps.from_xml_element(_require_child(xml_node, "docPr")),
            graphic_frame_properties=_parse_optional_child(
                xml_node, "cNvGraphicFramePr", NonVisualGraphicFrameProperties.from_xml_element
            ),
            graphic=GraphicalObject.from_xml_element(_require_child(xml_node, "graphic")),
            **_wrap_distances(xml_node, "T", "B", "L", "R"),
        )


class Anchor(BaseModel):
    """A floating drawing positioned relative to the page, margin or paragraph."""
    simple_position: Point2D
    horizontal_position: PosH
    vertical_position: PosV
    extent: PositiveSize2D
    effect_extent: EffectExtent | None = None
    wrap_type: WrapType
    document_properties: NonVisualDrawingProps
    graphic_frame_properties: NonVisualGraphicFrameProperties | None = None
    graphic: GraphicalObject
    distance_top: WrapDistance | None = None
    distance_bottom: WrapDistance | None = None
    distance_left: WrapDistance | None = None
    distance_right: WrapDistance | None = None
    use_simple_position: bool | None = None
    relative_height: int
    behind_document_text: bool
    locked: bool
    layout_in_cell: bool
    hidden: bool | None = None
    allow_overlap: bool

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Anchor:
        logger.debug("Parsing %s", xml_node.name)

        wrap_type = None
        for child_node in xml_node.child_nodes:
            if WrapType.is_choice_member(child_node.local_name):
                wrap_type = WrapType.from_xml_element(child_node)
        if wrap_type is None:
            raise MissingChildNodeError(xml_node.name, "WrapType")

        return cls(
            simple_position=Point2D.from_xml_element(_require_child(xml_node, "simplePos")),
            horizontal_position=PosH.from_xml_element(_require_child(xml_node, "positionH")),
            vertical_position=PosV.from_xml_element(_require_child(xml_node, "positionV")),
            extent=PositiveSize2D.from_xml_element(_require_child(xml_node, "extent")),
            effect_extent=_parse_optional_child(xml_node, "effectExtent", EffectExtent.from_xml_element),
            wrap_type=wrap_type,
            document_properties=NonVisualDrawingProps.from_xml_element(_require_child(xml_node, "docPr")),
            graphic_frame_properties=_parse_optional_child(
                xml_node, "cNvGraphicFramePr", NonVisualGraphicFrameProperties.from_xml_element
            ),
            graphic=GraphicalObject.from_xml_element(_require_child(xml_node, "graphic")),
            **_wrap_distances(xml_node, "T", "B", "L", "R"),
            use_simple_position=xml_node.parse_attribute("simplePos", parse_xml_bool),
            relative_height=parse_unsigned_int(xml_node.get_attribute("relativeHeight")),
            behind_document_text=parse_xml_bool(xml_node.get_attribute("behindDoc")),
            locked=parse_xml_bool(xml_node.get_attribute("locked")),
            layout_in_cell=parse_xml_bool(xml_node.get_attribute("layoutInCell")),
            hidden=xml_node.parse_attribute("hidden", parse_xml_bool),
            allow_overlap=parse_xml_bool(xml_node.get_attribute("allowOverlap")),
        )


class DrawingChoice(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"anchor", "inline"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Anchor | Inline:
        if xml_node.local_name == "anchor":
            return Anchor.from_xml_element(xml_node)
        return Inline.from_xml_element(xml_node)


class Drawing(BaseModel):
    anchor_or_inline_vec: list[DrawingChoice] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Drawing:
        return cls(anchor_or_inline_vec=DrawingChoice.list_from_children(xml_node))


# ── Text boxes of WordprocessingML shapes ──────────────────────────────────────

class TxbxContent(BaseModel):
    """The rich text inside a shape's text box. Holds at least one block."""
    block_level_elements: list[BlockLevelElts]

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TxbxContent:
        block_level_elements = BlockLevelElts.list_from_children(xml_node)
        if not block_level_elements:
            raise LimitViolationError(xml_node.name, "BlockLevelElts", 1, MaxOccurs.UNBOUNDED, 0)
        return cls(block_level_elements=block_level_elements)


class TextboxInfo(BaseModel):
    textbox_content: TxbxContent
    id: int | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TextboxInfo:
        return cls(
            textbox_content=TxbxContent.from_xml_element(_require_child(xml_node, "txbxContent")),
            id=xml_node.parse_attribute("id", parse_unsigned_int),
        )


class LinkedTextboxInformation(BaseModel):
    id: int
    sequence: int

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> LinkedTextboxInformation:
        return cls(
            id=parse_unsigned_int(xml_node.get_attribute("id")),
            sequence=parse_unsigned_int(xml_node.get_attribute("seq")),
        )


class WordprocessingShape(BaseModel):
    """A wps:wsp shape. DrawingML geometry and styling (spPr, style, bodyPr)
    are kept as raw nodes; the text box content is fully parsed."""
    non_visual_drawing_props: NonVisualDrawingProps | None = None
    non_visual_properties: XmlNode
    shape_properties: XmlNode
    style: XmlNode | None = None
    text_box_info: TextboxInfo | LinkedTextboxInformation | None = None
    text_body_properties: XmlNode
    normal_east_asian_flow: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WordprocessingShape:
        logger.debug("Parsing %s", xml_node.name)

        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "cNvPr":
                fields["non_visual_drawing_props"] = NonVisualDrawingProps.from_xml_element(child_node)
            elif local_name in ("cNvSpPr", "cNvCnPr"):
                fields["non_visual_properties"] = child_node
            elif local_name == "spPr":
                fields["shape_properties"] = child_node
            elif local_name == "style":
                fields["style"] = child_node
            elif local_name == "txbx":
                fields["text_box_info"] = TextboxInfo.from_xml_element(child_node)
            elif local_name == "linkedTxbx":
                fields["text_box_info"] = LinkedTextboxInformation.from_xml_element(child_node)
            elif local_name == "bodyPr":
                fields["text_body_properties"] = child_node

        for field_name, child_name in (
            ("non_visual_properties", "cNvSpPr|cNvCnPr"),
            ("shape_properties", "spPr"),
            ("text_body_properties", "bodyPr"),
        ):
            if field_name not in fields:
                raise MissingChildNodeError(xml_node.name, child_name)

        return cls(
            normal_east_asian_flow=xml_node.parse_attribute("normalEastAsianFlow", parse_xml_bool),
            **fields,
        )


def find_wordprocessing_shapes(graphic: GraphicalObject) -> list[WordprocessingShape]:
    """Parse the wps:wsp shapes carried in a graphic's a:graphicData payload."""
    return [
        WordprocessingShape.from_xml_element(node)
        for node in graphic.graphic_data.graphic_object
        if node.local_name == "wsp"
    ]
