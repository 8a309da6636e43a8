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

"""Simple types shared between WordprocessingML and DrawingML — measures,
percentages, alignment and calendar enumerations."""

from __future__ import annotations

import re
from typing import ClassVar, Union

from pydantic import BaseModel

from docxwml.errors import PatternRestrictionError
from docxwml.xsdtypes import XsdEnum

OnOff = bool
Lang = str
XmlName = str  # 1 <= length <= 255

_UNSIGNED_INT = re.compile(r"^\+?[0-9]+$")
_SIGNED_INT = re.compile(r"^[-+]?[0-9]+$")


def parse_unsigned_int(value: str) -> int:
    """Parse an xsd:unsignedLong-style decimal. Raises ValueError otherwise."""
    if not _UNSIGNED_INT.match(value):
        raise ValueError(f"invalid unsigned integer: {value!r}")
    return int(value)


def parse_signed_int(value: str) -> int:
    if not _SIGNED_INT.match(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


# ── Enums ──────────────────────────────────────────────────────────────────────

class CalendarType(XsdEnum):
    GREGORIAN = "gregorian"
    GREGORIAN_US = "gregorianUs"
    GREGORIAN_ME_FRENCH = "gregorianMeFrench"
    GREGORIAN_ARABIC = "gregorianArabic"
    HIJRI = "hijri"
    HEBREW = "hebrew"
    TAIWAN = "taiwan"
    JAPAN = "japan"
    THAI = "thai"
    KOREA = "korea"
    SAKA = "saka"
    GREGORIAN_XLIT_ENGLISH = "gregorianXlitEnglish"
    GREGORIAN_XLIT_FRENCH = "gregorianXlitFrench"
    NONE = "none"


class VerticalAlignRun(XsdEnum):
    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class XAlign(XsdEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    INSIDE = "inside"
    OUTSIDE = "outside"


class YAlign(XsdEnum):
    INLINE = "inline"
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    INSIDE = "inside"
    OUTSIDE = "outside"


class ConformanceClass(XsdEnum):
    STRICT = "strict"
    TRANSITIONAL = "transitional"


class UniversalMeasureUnit(XsdEnum):
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "in"
    POINT = "pt"
    PICA = "pc"
    PITCH = "pi"


# ── Pattern-restricted measures ────────────────────────────────────────────────

class UniversalMeasure(BaseModel):
    """A signed length with an explicit unit, e.g. ``-12.5mm``."""
    value: float
    unit: UniversalMeasureUnit

    pattern: ClassVar[re.Pattern[str]] = re.compile(
        r"^(-?[0-9]+(?:\.[0-9]+)?)(mm|cm|in|pt|pc|pi)$"
    )

    @classmethod
    def from_str(cls, value: str) -> UniversalMeasure:
        match = cls.pattern.match(value)
        if match is None:
            raise PatternRestrictionError(value, cls.pattern.pattern)
        return cls(value=float(match.group(1)), unit=UniversalMeasureUnit(match.group(2)))


class PositiveUniversalMeasure(UniversalMeasure):
    """An unsigned universal measure; a leading minus sign doesn't match."""

    pattern: ClassVar[re.Pattern[str]] = re.compile(
        r"^([0-9]+(?:\.[0-9]+)?)(mm|cm|in|pt|pc|pi)$"
    )


# Plain twentieths of a point, or a measure with a unit
TwipsMeasure = Union[int, PositiveUniversalMeasure]


def parse_twips_measure(value: str) -> TwipsMeasure:
    if _UNSIGNED_INT.match(value):
        return int(value)
    return PositiveUniversalMeasure.from_str(value)


class Percentage(BaseModel):
    value: float

    pattern: ClassVar[re.Pattern[str]] = re.compile(r"^(-?[0-9]+(?:\.[0-9]+)?)%$")

    @classmethod
    def from_str(cls, value: str) -> Percentage:
        match = cls.pattern.match(value)
        if match is None:
            raise PatternRestrictionError(value, cls.pattern.pattern)
        return cls(value=float(match.group(1)))
