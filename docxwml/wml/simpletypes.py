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

"""WordprocessingML simple types — value parsers from attribute strings.

Every parser is a plain function (or a from_str classmethod) that either
returns the typed value or raises. Hex numbers are fixed-width unsigned
integers written in base 16, leading zeros allowed.
"""

from __future__ import annotations

import re
from typing import Union

from pydantic import BaseModel

from docxwml.errors import (
    ParseHexColorError,
    ParseHexColorRGBError,
    PatternRestrictionError,
    StringLengthMismatch,
)
from docxwml.sharedtypes import (
    Percentage,
    PositiveUniversalMeasure,
    UniversalMeasure,
    parse_signed_int,
    parse_unsigned_int,
)
from docxwml.xml import XmlNode, parse_xml_bool

UcharHexNumber = int
ShortHexNumber = int
LongHexNumber = int
UnqualifiedPercentage = int
DecimalNumber = int
UnsignedDecimalNumber = int
DateTime = str
MacroName = str  # maxLength=33
FFName = str  # maxLength=65
FFHelpTextVal = str  # maxLength=256
FFStatusTextVal = str  # maxLength=140
EightPointMeasure = int
PointMeasure = int
TextScalePercent = float

SignedTwipsMeasure = Union[int, UniversalMeasure]
HpsMeasure = Union[int, PositiveUniversalMeasure]
SignedHpsMeasure = Union[int, UniversalMeasure]
DecimalNumberOrPercent = Union[int, Percentage]
MeasurementOrPercent = Union[int, Percentage, UniversalMeasure]

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")
_TEXT_SCALE = re.compile(r"^0*(600|([0-5]?[0-9]?[0-9]))%$")


# ── Numbers ────────────────────────────────────────────────────────────────────

def _parse_hex(value: str, bits: int) -> int:
    if not _HEX_DIGITS.match(value):
        raise ValueError(f"invalid hex number: {value!r}")
    number = int(value, 16)
    if number >= 1 << bits:
        raise ValueError(f"hex number {value!r} doesn't fit in {bits} bits")
    return number


def parse_uchar_hex(value: str) -> UcharHexNumber:
    return _parse_hex(value, 8)


def parse_short_hex(value: str) -> ShortHexNumber:
    return _parse_hex(value, 16)


def parse_long_hex(value: str) -> LongHexNumber:
    return _parse_hex(value, 32)


def parse_decimal_number(value: str) -> DecimalNumber:
    return parse_signed_int(value)


def parse_unsigned_decimal_number(value: str) -> UnsignedDecimalNumber:
    return parse_unsigned_int(value)


# ── On/off ─────────────────────────────────────────────────────────────────────

def parse_on_off_xml_element(xml_node: XmlNode) -> bool:
    """Elements like <w:b/> are on when w:val is absent."""
    value = xml_node.attributes.get("w:val")
    if value is None:
        return True
    return parse_xml_bool(value)


# ── Measures ───────────────────────────────────────────────────────────────────

def parse_signed_twips_measure(value: str) -> SignedTwipsMeasure:
    try:
        return parse_signed_int(value)
    except ValueError:
        return UniversalMeasure.from_str(value)


def parse_hps_measure(value: str) -> HpsMeasure:
    try:
        return parse_unsigned_int(value)
    except ValueError:
        return PositiveUniversalMeasure.from_str(value)


def parse_signed_hps_measure(value: str) -> SignedHpsMeasure:
    try:
        return parse_signed_int(value)
    except ValueError:
        return UniversalMeasure.from_str(value)


def parse_decimal_number_or_percent(value: str) -> DecimalNumberOrPercent:
    try:
        return parse_signed_int(value)
    except ValueError:
        return Percentage.from_str(value)


def parse_measurement_or_percent(value: str) -> MeasurementOrPercent:
    try:
        return parse_decimal_number_or_percent(value)
    except PatternRestrictionError:
        return UniversalMeasure.from_str(value)


def parse_text_scale_percent(value: str) -> TextScalePercent:
    match = _TEXT_SCALE.match(value)
    if match is None:
        raise PatternRestrictionError(value, _TEXT_SCALE.pattern)
    return float(match.group(1))


# ── Colors ─────────────────────────────────────────────────────────────────────

def parse_hex_color_rgb(value: str) -> tuple[int, int, int]:
    if len(value) != 6:
        raise ParseHexColorRGBError(value, StringLengthMismatch(required=6, provided=len(value)))
    if not _HEX_DIGITS.match(value):
        raise ParseHexColorRGBError(value)
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class HexColor(BaseModel):
    """Either ``auto`` (rgb is None) or an explicit RGB triple."""
    rgb: tuple[int, int, int] | None = None

    @property
    def is_auto(self) -> bool:
        return self.rgb is None

    @classmethod
    def auto(cls) -> HexColor:
        return cls()

    @classmethod
    def from_str(cls, value: str) -> HexColor:
        if value == "auto":
            return cls.auto()
        try:
            return cls(rgb=parse_hex_color_rgb(value))
        except ParseHexColorRGBError as e:
            raise ParseHexColorError(value) from e
