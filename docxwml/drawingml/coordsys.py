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

"""DrawingML coordinate system — points and extents in EMUs."""

from __future__ import annotations

from pydantic import BaseModel

from docxwml.drawingml.simpletypes import (
    Coordinate,
    PositiveCoordinate,
    parse_coordinate,
    parse_positive_coordinate,
)
from docxwml.xml import XmlNode


class Point2D(BaseModel):
    """A point whose origin is defined by the parent element."""
    x: Coordinate
    y: Coordinate

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Point2D:
        return cls(
            x=parse_coordinate(xml_node.get_attribute("x")),
            y=parse_coordinate(xml_node.get_attribute("y")),
        )


class PositiveSize2D(BaseModel):
    """Extents of an object as displayed, after any scaling."""
    width: PositiveCoordinate
    height: PositiveCoordinate

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PositiveSize2D:
        return cls(
            width=parse_positive_coordinate(xml_node.get_attribute("cx")),
            height=parse_positive_coordinate(xml_node.get_attribute("cy")),
        )
