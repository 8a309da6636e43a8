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

"""Flattened formatting — the effective run and paragraph properties after
styles have been cascaded.

RunProperties turns the ordered list of run property elements into named
fields. Two merges are offered: ``update_with`` (the right-hand side wins,
used between a style and its basedOn parent) and
``update_with_style_on_another_level`` (toggle properties such as bold are
XOR-ed, used when a character style is applied on top of a paragraph
style).
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from docxwml.sharedtypes import VerticalAlignRun
from docxwml.update import Update
from docxwml.wml.enums import Em, HighlightColor, TextEffect
from docxwml.wml.properties import (
    Border,
    Color,
    EastAsianLayout,
    FitText,
    Fonts,
    Language,
    PPrBase,
    RPrBase,
    Shd,
    Underline,
)
from docxwml.wml.simpletypes import HpsMeasure, SignedHpsMeasure, SignedTwipsMeasure, TextScalePercent
from docxwml.wml.styles import Style

ParagraphProperties = PPrBase

# RPrBase kind -> RunProperties field
_RUN_PROPERTY_FIELDS = {
    "rStyle": "style",
    "rFonts": "fonts",
    "b": "bold",
    "bCs": "complex_script_bold",
    "i": "italic",
    "iCs": "complex_script_italic",
    "caps": "all_capitals",
    "smallCaps": "all_small_capitals",
    "strike": "strikethrough",
    "dstrike": "double_strikethrough",
    "outline": "outline",
    "shadow": "shadow",
    "emboss": "emboss",
    "imprint": "imprint",
    "noProof": "no_proofing",
    "snapToGrid": "snap_to_grid",
    "vanish": "vanish",
    "webHidden": "web_hidden",
    "color": "color",
    "spacing": "spacing",
    "w": "width",
    "kern": "kerning",
    "position": "position",
    "sz": "font_size",
    "szCs": "complex_script_font_size",
    "highlight": "highlight",
    "u": "underline",
    "effect": "effect",
    "bdr": "border",
    "shd": "shading",
    "fitText": "fit_text",
    "vertAlign": "vertical_alignment",
    "rtl": "rtl",
    "cs": "complex_script",
    "em": "emphasis_mark",
    "lang": "language",
    "eastAsianLayout": "east_asian_layout",
    "specVanish": "special_vanish",
    "oMath": "o_math",
}

# strike and dstrike exclude each other
_EXCLUSIVE_FIELDS = {
    "strikethrough": "double_strikethrough",
    "double_strikethrough": "strikethrough",
}

_TOGGLE_FIELDS = (
    "bold",
    "complex_script_bold",
    "italic",
    "complex_script_italic",
    "all_capitals",
    "all_small_capitals",
    "strikethrough",
    "double_strikethrough",
    "outline",
    "shadow",
    "emboss",
    "imprint",
    "no_proofing",
    "snap_to_grid",
    "vanish",
    "web_hidden",
    "rtl",
    "complex_script",
    "special_vanish",
    "o_math",
)


def update_or_toggle_on_off(lhs: bool | None, rhs: bool | None) -> bool | None:
    """XOR when both levels set the flag, otherwise whichever one is set."""
    if lhs is not None and rhs is not None:
        return lhs ^ rhs
    return rhs if rhs is not None else lhs


class RunProperties(Update):
    style: str | None = None
    fonts: Fonts | None = None
    bold: bool | None = None
    complex_script_bold: bool | None = None
    italic: bool | None = None
    complex_script_italic: bool | None = None
    all_capitals: bool | None = None
    all_small_capitals: bool | None = None
    strikethrough: bool | None = None
    double_strikethrough: bool | None = None
    outline: bool | None = None
    shadow: bool | None = None
    emboss: bool | None = None
    imprint: bool | None = None
    no_proofing: bool | None = None
    snap_to_grid: bool | None = None
    vanish: bool | None = None
    web_hidden: bool | None = None
    color: Color | None = None
    spacing: SignedTwipsMeasure | None = None
    width: TextScalePercent | None = None
    kerning: HpsMeasure | None = None
    position: SignedHpsMeasure | None = None
    font_size: HpsMeasure | None = None
    complex_script_font_size: HpsMeasure | None = None
    highlight: HighlightColor | None = None
    underline: Underline | None = None
    effect: TextEffect | None = None
    border: Border | None = None
    shading: Shd | None = None
    fit_text: FitText | None = None
    vertical_alignment: VerticalAlignRun | None = None
    rtl: bool | None = None
    complex_script: bool | None = None
    emphasis_mark: Em | None = None
    language: Language | None = None
    east_asian_layout: EastAsianLayout | None = None
    special_vanish: bool | None = None
    o_math: bool | None = None

    @classmethod
    def from_vec(cls, properties: list[RPrBase]) -> RunProperties:
        """Flatten run property elements. Later elements win."""
        fields: dict[str, Any] = {}
        for r_pr_base in properties:
            field_name = _RUN_PROPERTY_FIELDS[r_pr_base.kind]
            fields[field_name] = r_pr_base.value
            excluded = _EXCLUSIVE_FIELDS.get(field_name)
            if excluded is not None:
                fields.pop(excluded, None)
        return cls(**fields)

    def update_with_style_on_another_level(self, other: RunProperties) -> RunProperties:
        merged = self.update_with(other)
        toggled = {
            name: update_or_toggle_on_off(getattr(self, name), getattr(other, name))
            for name in _TOGGLE_FIELDS
        }
        return merged.model_copy(update=toggled)


class ResolvedStyle(Update):
    paragraph_properties: ParagraphProperties = Field(default_factory=PPrBase)
    run_properties: RunProperties = Field(default_factory=RunProperties)

    @classmethod
    def from_paragraph_properties(cls, paragraph_properties: ParagraphProperties) -> ResolvedStyle:
        return cls(paragraph_properties=paragraph_properties)

    @classmethod
    def from_run_properties(cls, run_properties: RunProperties) -> ResolvedStyle:
        return cls(run_properties=run_properties)

    @classmethod
    def from_wml_style(cls, style: Style) -> ResolvedStyle:
        """The formatting a style defines itself, ignoring its basedOn chain."""
        paragraph_properties = PPrBase()
        if style.paragraph_properties is not None:
            paragraph_properties = style.paragraph_properties.base
        run_properties = RunProperties()
        if style.run_properties is not None:
            run_properties = RunProperties.from_vec(style.run_properties.r_pr_bases)
        return cls(paragraph_properties=paragraph_properties, run_properties=run_properties)

    def update_with_style_on_another_level(self, other: ResolvedStyle) -> ResolvedStyle:
        return ResolvedStyle(
            paragraph_properties=self.paragraph_properties.update_with(other.paragraph_properties),
            run_properties=self.run_properties.update_with_style_on_another_level(other.run_properties),
        )

    def update_paragraph_with(self, other: ParagraphProperties) -> ResolvedStyle:
        return self.model_copy(update={"paragraph_properties": self.paragraph_properties.update_with(other)})

    def update_run_with(self, other: RunProperties) -> ResolvedStyle:
        return self.model_copy(update={"run_properties": self.run_properties.update_with(other)})
