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

"""DrawingML simple types used by the WordprocessingML drawing fragment."""

from __future__ import annotations

import re
from typing import Union

from docxwml.errors import AdjustParseError
from docxwml.sharedtypes import parse_signed_int, parse_unsigned_int

Coordinate = int  # EMU
PositiveCoordinate = int
DrawingElementId = int
Angle = int  # 60000ths of a degree
GeomGuideName = str

AdjCoordinate = Union[Coordinate, GeomGuideName]
AdjAngle = Union[Angle, GeomGuideName]

# xsd:token without inner whitespace
_GUIDE_NAME = re.compile(r"^\S+$")


def parse_coordinate(value: str) -> Coordinate:
    return parse_signed_int(value)


def parse_positive_coordinate(value: str) -> PositiveCoordinate:
    return parse_unsigned_int(value)


def parse_drawing_element_id(value: str) -> DrawingElementId:
    return parse_unsigned_int(value)


def parse_angle(value: str) -> Angle:
    return parse_signed_int(value)


def _parse_adjustable(value: str, parse_number) -> int | str:
    try:
        return parse_number(value)
    except ValueError:
        pass
    if not _GUIDE_NAME.match(value):
        raise AdjustParseError(value)
    return value


def parse_adj_coordinate(value: str) -> AdjCoordinate:
    """A coordinate, or the name of a shape guide that computes one."""
    return _parse_adjustable(value, parse_coordinate)


def parse_adj_angle(value: str) -> AdjAngle:
    return _parse_adjustable(value, parse_angle)
