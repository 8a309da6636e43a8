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

"""Run and paragraph formatting — leaf property records and the property bags.

Leaf records (Color, Border, Shd, ...) are built from attributes only. The
bags (RPr, PPrBase, ParaRPr) are built by walking the children of the
properties element and dispatching on local name; unknown children are
ignored. Records that take part in style inheritance derive from Update.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError, MaxOccurs, MissingChildNodeError
from docxwml.sharedtypes import (
    Lang,
    TwipsMeasure,
    VerticalAlignRun,
    XAlign,
    YAlign,
    parse_twips_measure,
)
from docxwml.update import Update
from docxwml.wml.enums import (
    BorderType,
    CombineBrackets,
    DropCap,
    Em,
    HAnchor,
    HeightRule,
    HighlightColor,
    HintType,
    Jc,
    LineSpacingRule,
    ShdType,
    TabJc,
    TabTlc,
    TextAlignment,
    TextboxTightWrap,
    TextDirection,
    TextEffect,
    ThemeColor,
    ThemeFont,
    UnderlineType,
    VAnchor,
    Wrap,
)
from docxwml.wml.simpletypes import (
    DateTime,
    DecimalNumber,
    EightPointMeasure,
    HexColor,
    PointMeasure,
    SignedTwipsMeasure,
    UcharHexNumber,
    parse_decimal_number,
    parse_hps_measure,
    parse_on_off_xml_element,
    parse_signed_hps_measure,
    parse_signed_twips_measure,
    parse_text_scale_percent,
    parse_uchar_hex,
    parse_unsigned_decimal_number,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice


# ── Revision markup ────────────────────────────────────────────────────────────

class Markup(BaseModel):
    """An element identified only by its w:id (comment references, range ends)."""
    id: DecimalNumber

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {"id": parse_decimal_number(xml_node.get_attribute("w:id"))}

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Markup:
        return cls(**cls.markup_fields(xml_node))


class TrackChange(Markup):
    """A revision annotation: who changed what, and when."""
    author: str
    date: DateTime | None = None

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            **super().markup_fields(xml_node),
            "author": xml_node.get_attribute("w:author"),
            "date": xml_node.attributes.get("w:date"),
        }


class Rel(BaseModel):
    """A reference to another package part through a relationship id."""
    id: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Rel:
        return cls(id=xml_node.get_attribute("r:id"))


# ── Leaf run properties ────────────────────────────────────────────────────────

def _parse_theme_tint(xml_node: XmlNode, key: str) -> UcharHexNumber | None:
    return xml_node.parse_attribute(key, parse_uchar_hex)


class Color(Update):
    value: HexColor
    theme_color: ThemeColor | None = None
    theme_tint: UcharHexNumber | None = None
    theme_shade: UcharHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Color:
        return cls(
            value=HexColor.from_str(xml_node.get_val_attribute()),
            theme_color=xml_node.parse_attribute("w:themeColor", ThemeColor.parse),
            theme_tint=_parse_theme_tint(xml_node, "w:themeTint"),
            theme_shade=_parse_theme_tint(xml_node, "w:themeShade"),
        )


class Border(Update):
    value: BorderType
    color: HexColor | None = None
    theme_color: ThemeColor | None = None
    theme_tint: UcharHexNumber | None = None
    theme_shade: UcharHexNumber | None = None
    size: EightPointMeasure | None = None
    spacing: PointMeasure | None = None
    shadow: bool | None = None
    frame: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Border:
        return cls(
            value=BorderType.parse_val(xml_node),
            color=xml_node.parse_attribute("w:color", HexColor.from_str),
            theme_color=xml_node.parse_attribute("w:themeColor", ThemeColor.parse),
            theme_tint=_parse_theme_tint(xml_node, "w:themeTint"),
            theme_shade=_parse_theme_tint(xml_node, "w:themeShade"),
            size=xml_node.parse_attribute("w:sz", parse_unsigned_decimal_number),
            spacing=xml_node.parse_attribute("w:space", parse_unsigned_decimal_number),
            shadow=xml_node.parse_attribute("w:shadow", parse_xml_bool),
            frame=xml_node.parse_attribute("w:frame", parse_xml_bool),
        )


class Shd(Update):
    value: ShdType
    color: HexColor | None = None
    theme_color: ThemeColor | None = None
    theme_tint: UcharHexNumber | None = None
    theme_shade: UcharHexNumber | None = None
    fill: HexColor | None = None
    theme_fill: ThemeColor | None = None
    theme_fill_tint: UcharHexNumber | None = None
    theme_fill_shade: UcharHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Shd:
        return cls(
            value=ShdType.parse_val(xml_node),
            color=xml_node.parse_attribute("w:color", HexColor.from_str),
            theme_color=xml_node.parse_attribute("w:themeColor", ThemeColor.parse),
            theme_tint=_parse_theme_tint(xml_node, "w:themeTint"),
            theme_shade=_parse_theme_tint(xml_node, "w:themeShade"),
            fill=xml_node.parse_attribute("w:fill", HexColor.from_str),
            theme_fill=xml_node.parse_attribute("w:themeFill", ThemeColor.parse),
            theme_fill_tint=_parse_theme_tint(xml_node, "w:themeFillTint"),
            theme_fill_shade=_parse_theme_tint(xml_node, "w:themeFillShade"),
        )


class Fonts(Update):
    hint: HintType | None = None
    ascii: str | None = None
    high_ansi: str | None = None
    east_asia: str | None = None
    complex_script: str | None = None
    ascii_theme: ThemeFont | None = None
    high_ansi_theme: ThemeFont | None = None
    east_asia_theme: ThemeFont | None = None
    complex_script_theme: ThemeFont | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Fonts:
        return cls(
            hint=xml_node.parse_attribute("w:hint", HintType.parse),
            ascii=xml_node.attributes.get("w:ascii"),
            high_ansi=xml_node.attributes.get("w:hAnsi"),
            east_asia=xml_node.attributes.get("w:eastAsia"),
            complex_script=xml_node.attributes.get("w:cs"),
            ascii_theme=xml_node.parse_attribute("w:asciiTheme", ThemeFont.parse),
            high_ansi_theme=xml_node.parse_attribute("w:hAnsiTheme", ThemeFont.parse),
            east_asia_theme=xml_node.parse_attribute("w:eastAsiaTheme", ThemeFont.parse),
            complex_script_theme=xml_node.parse_attribute("w:cstheme", ThemeFont.parse),
        )


class Underline(Update):
    value: UnderlineType | None = None
    color: HexColor | None = None
    theme_color: ThemeColor | None = None
    theme_tint: UcharHexNumber | None = None
    theme_shade: UcharHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Underline:
        return cls(
            value=xml_node.parse_attribute("w:val", UnderlineType.parse),
            color=xml_node.parse_attribute("w:color", HexColor.from_str),
            theme_color=xml_node.parse_attribute("w:themeColor", ThemeColor.parse),
            theme_tint=_parse_theme_tint(xml_node, "w:themeTint"),
            theme_shade=_parse_theme_tint(xml_node, "w:themeShade"),
        )


class FitText(BaseModel):
    value: TwipsMeasure
    id: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FitText:
        return cls(
            value=parse_twips_measure(xml_node.get_val_attribute()),
            id=xml_node.parse_attribute("w:id", parse_decimal_number),
        )


class Language(Update):
    latin: Lang | None = None
    east_asia: Lang | None = None
    bidirectional: Lang | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Language:
        return cls(
            latin=xml_node.attributes.get("w:val"),
            east_asia=xml_node.attributes.get("w:eastAsia"),
            bidirectional=xml_node.attributes.get("w:bidi"),
        )


class EastAsianLayout(Update):
    id: DecimalNumber | None = None
    combine: bool | None = None
    combine_brackets: CombineBrackets | None = None
    vertical: bool | None = None
    vertical_compress: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> EastAsianLayout:
        return cls(
            id=xml_node.parse_attribute("w:id", parse_decimal_number),
            combine=xml_node.parse_attribute("w:combine", parse_xml_bool),
            combine_brackets=xml_node.parse_attribute("w:combineBrackets", CombineBrackets.parse),
            vertical=xml_node.parse_attribute("w:vert", parse_xml_bool),
            vertical_compress=xml_node.parse_attribute("w:vertCompress", parse_xml_bool),
        )


# ── Run property bags ──────────────────────────────────────────────────────────

class RPrBase(XsdChoice):
    """One run property. kind is the element's local name, for example
    ``b`` with value True, or ``color`` with a Color."""

    ON_OFF_KINDS: ClassVar[frozenset[str]] = frozenset({
        "b", "bCs", "i", "iCs", "caps", "smallCaps", "strike", "dstrike",
        "outline", "shadow", "emboss", "imprint", "noProof", "snapToGrid",
        "vanish", "webHidden", "rtl", "cs", "specVanish", "oMath",
    })
    members: ClassVar[frozenset[str]] = ON_OFF_KINDS | frozenset({
        "rStyle", "rFonts", "color", "spacing", "w", "kern", "position",
        "sz", "szCs", "highlight", "u", "effect", "bdr", "shd", "fitText",
        "vertAlign", "em", "lang", "eastAsianLayout",
    })

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name in cls.ON_OFF_KINDS:
            return parse_on_off_xml_element(xml_node)
        if local_name == "rStyle":
            return xml_node.get_val_attribute()
        elif local_name == "rFonts":
            return Fonts.from_xml_element(xml_node)
        elif local_name == "color":
            return Color.from_xml_element(xml_node)
        elif local_name == "spacing":
            return parse_signed_twips_measure(xml_node.get_val_attribute())
        elif local_name == "w":
            scale = xml_node.parse_attribute("w:val", parse_text_scale_percent)
            return 100.0 if scale is None else scale
        elif local_name in ("kern", "sz", "szCs"):
            return parse_hps_measure(xml_node.get_val_attribute())
        elif local_name == "position":
            return parse_signed_hps_measure(xml_node.get_val_attribute())
        elif local_name == "highlight":
            return HighlightColor.parse_val(xml_node)
        elif local_name == "u":
            return Underline.from_xml_element(xml_node)
        elif local_name == "effect":
            return TextEffect.parse_val(xml_node)
        elif local_name == "bdr":
            return Border.from_xml_element(xml_node)
        elif local_name == "shd":
            return Shd.from_xml_element(xml_node)
        elif local_name == "fitText":
            return FitText.from_xml_element(xml_node)
        elif local_name == "vertAlign":
            return VerticalAlignRun.parse_val(xml_node)
        elif local_name == "em":
            return Em.parse_val(xml_node)
        elif local_name == "lang":
            return Language.from_xml_element(xml_node)
        return EastAsianLayout.from_xml_element(xml_node)


class RPrOriginal(BaseModel):
    """Run properties as they were before a tracked formatting change."""
    r_pr_bases: list[RPrBase] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RPrOriginal:
        return cls(r_pr_bases=RPrBase.list_from_children(xml_node))


class RPrChange(TrackChange):
    run_properties: RPrOriginal

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RPrChange:
        r_pr_node = xml_node.find_child("rPr")
        if r_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "rPr")
        return cls(
            **cls.markup_fields(xml_node),
            run_properties=RPrOriginal.from_xml_element(r_pr_node),
        )


class RPr(BaseModel):
    r_pr_bases: list[RPrBase] = Field(default_factory=list)
    run_properties_change: RPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RPr:
        r_pr_bases: list[RPrBase] = []
        change = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "rPrChange":
                change = RPrChange.from_xml_element(child_node)
            elif RPrBase.is_choice_member(child_node.local_name):
                r_pr_bases.append(RPrBase.from_xml_element(child_node))
        return cls(r_pr_bases=r_pr_bases, run_properties_change=change)


# ── Paragraph mark run properties ──────────────────────────────────────────────

class ParaRPrTrackChanges(BaseModel):
    """Revision marks on the paragraph mark itself (w:ins, w:del, ... in w:rPr)."""
    inserted: TrackChange | None = None
    deleted: TrackChange | None = None
    move_from: TrackChange | None = None
    move_to: TrackChange | None = None

    GROUP_FIELDS: ClassVar[dict[str, str]] = {
        "ins": "inserted",
        "del": "deleted",
        "moveFrom": "move_from",
        "moveTo": "move_to",
    }

    @classmethod
    def try_parse_group_node(
        cls, instance: ParaRPrTrackChanges | None, xml_node: XmlNode
    ) -> ParaRPrTrackChanges | None:
        """Return the updated group, or None when xml_node is not part of it."""
        field_name = cls.GROUP_FIELDS.get(xml_node.local_name)
        if field_name is None:
            return None
        current = instance if instance is not None else cls()
        return current.model_copy(update={field_name: TrackChange.from_xml_element(xml_node)})


def _parse_para_r_pr_children(
    xml_node: XmlNode,
) -> tuple[ParaRPrTrackChanges | None, list[RPrBase], list[XmlNode]]:
    track_changes = None
    r_pr_bases: list[RPrBase] = []
    rest: list[XmlNode] = []
    for child_node in xml_node.child_nodes:
        updated = ParaRPrTrackChanges.try_parse_group_node(track_changes, child_node)
        if updated is not None:
            track_changes = updated
        elif RPrBase.is_choice_member(child_node.local_name):
            r_pr_bases.append(RPrBase.from_xml_element(child_node))
        else:
            rest.append(child_node)
    return track_changes, r_pr_bases, rest


class ParaRPrOriginal(BaseModel):
    track_changes: ParaRPrTrackChanges | None = None
    r_pr_bases: list[RPrBase] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ParaRPrOriginal:
        track_changes, r_pr_bases, _ = _parse_para_r_pr_children(xml_node)
        return cls(track_changes=track_changes, r_pr_bases=r_pr_bases)


class ParaRPrChange(TrackChange):
    run_properties: ParaRPrOriginal

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ParaRPrChange:
        r_pr_node = xml_node.find_child("rPr")
        if r_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "rPr")
        return cls(
            **cls.markup_fields(xml_node),
            run_properties=ParaRPrOriginal.from_xml_element(r_pr_node),
        )


class ParaRPr(BaseModel):
    """Formatting of the paragraph mark (w:pPr/w:rPr)."""
    track_changes: ParaRPrTrackChanges | None = None
    r_pr_bases: list[RPrBase] = Field(default_factory=list)
    change: ParaRPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ParaRPr:
        track_changes, r_pr_bases, rest = _parse_para_r_pr_children(xml_node)
        change = None
        for child_node in rest:
            if child_node.local_name == "rPrChange":
                change = ParaRPrChange.from_xml_element(child_node)
        return cls(track_changes=track_changes, r_pr_bases=r_pr_bases, change=change)


# ── Leaf paragraph properties ──────────────────────────────────────────────────

class FramePr(Update):
    """Text frame placement of a paragraph (w:framePr)."""
    drop_cap: DropCap | None = None
    lines: DecimalNumber | None = None
    width: TwipsMeasure | None = None
    height: TwipsMeasure | None = None
    vertical_space: TwipsMeasure | None = None
    horizontal_space: TwipsMeasure | None = None
    wrap: Wrap | None = None
    horizontal_anchor: HAnchor | None = None
    vertical_anchor: VAnchor | None = None
    x: SignedTwipsMeasure | None = None
    x_align: XAlign | None = None
    y: SignedTwipsMeasure | None = None
    y_align: YAlign | None = None
    height_rule: HeightRule | None = None
    anchor_lock: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FramePr:
        return cls(
            drop_cap=xml_node.parse_attribute("w:dropCap", DropCap.parse),
            lines=xml_node.parse_attribute("w:lines", parse_decimal_number),
            width=xml_node.parse_attribute("w:w", parse_twips_measure),
            height=xml_node.parse_attribute("w:h", parse_twips_measure),
            vertical_space=xml_node.parse_attribute("w:vSpace", parse_twips_measure),
            horizontal_space=xml_node.parse_attribute("w:hSpace", parse_twips_measure),
            wrap=xml_node.parse_attribute("w:wrap", Wrap.parse),
            horizontal_anchor=xml_node.parse_attribute("w:hAnchor", HAnchor.parse),
            vertical_anchor=xml_node.parse_attribute("w:vAnchor", VAnchor.parse),
            x=xml_node.parse_attribute("w:x", parse_signed_twips_measure),
            x_align=xml_node.parse_attribute("w:xAlign", XAlign.parse),
            y=xml_node.parse_attribute("w:y", parse_signed_twips_measure),
            y_align=xml_node.parse_attribute("w:yAlign", YAlign.parse),
            height_rule=xml_node.parse_attribute("w:hRule", HeightRule.parse),
            anchor_lock=xml_node.parse_attribute("w:anchorLock", parse_xml_bool),
        )


class TrackChangeNumbering(TrackChange):
    original: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TrackChangeNumbering:
        return cls(**cls.markup_fields(xml_node), original=xml_node.attributes.get("w:original"))


class NumPr(Update):
    indent_level: DecimalNumber | None = None
    numbering_id: DecimalNumber | None = None
    numbering_change: TrackChangeNumbering | None = None
    inserted: TrackChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> NumPr:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "ilvl":
                fields["indent_level"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "numId":
                fields["numbering_id"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "numberingChange":
                fields["numbering_change"] = TrackChangeNumbering.from_xml_element(child_node)
            elif local_name == "ins":
                fields["inserted"] = TrackChange.from_xml_element(child_node)
        return cls(**fields)


class PBdr(Update):
    top: Border | None = None
    left: Border | None = None
    bottom: Border | None = None
    right: Border | None = None
    between: Border | None = None
    bar: Border | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PBdr:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name in cls.model_fields:
                fields[local_name] = Border.from_xml_element(child_node)
        return cls(**fields)


class TabStop(BaseModel):
    value: TabJc
    leader: TabTlc | None = None
    position: SignedTwipsMeasure

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TabStop:
        return cls(
            value=TabJc.parse_val(xml_node),
            leader=xml_node.parse_attribute("w:leader", TabTlc.parse),
            position=parse_signed_twips_measure(xml_node.get_attribute("w:pos")),
        )


class Tabs(BaseModel):
    tabs: list[TabStop]

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Tabs:
        tabs = [TabStop.from_xml_element(c) for c in xml_node.child_nodes if c.local_name == "tab"]
        if not tabs:
            raise LimitViolationError(xml_node.name, "tab", 1, MaxOccurs.UNBOUNDED, 0)
        return cls(tabs=tabs)


class Spacing(Update):
    before: TwipsMeasure | None = None
    before_lines: DecimalNumber | None = None
    before_autospacing: bool | None = None
    after: TwipsMeasure | None = None
    after_lines: DecimalNumber | None = None
    after_autospacing: bool | None = None
    line: SignedTwipsMeasure | None = None
    line_rule: LineSpacingRule | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Spacing:
        return cls(
            before=xml_node.parse_attribute("w:before", parse_twips_measure),
            before_lines=xml_node.parse_attribute("w:beforeLines", parse_decimal_number),
            before_autospacing=xml_node.parse_attribute("w:beforeAutospacing", parse_xml_bool),
            after=xml_node.parse_attribute("w:after", parse_twips_measure),
            after_lines=xml_node.parse_attribute("w:afterLines", parse_decimal_number),
            after_autospacing=xml_node.parse_attribute("w:afterAutospacing", parse_xml_bool),
            line=xml_node.parse_attribute("w:line", parse_signed_twips_measure),
            line_rule=xml_node.parse_attribute("w:lineRule", LineSpacingRule.parse),
        )


class Ind(Update):
    """Paragraph indentation. The transitional w:left/w:right attributes are
    read as start/end when start/end are absent."""
    start: SignedTwipsMeasure | None = None
    start_chars: DecimalNumber | None = None
    end: SignedTwipsMeasure | None = None
    end_chars: DecimalNumber | None = None
    hanging: TwipsMeasure | None = None
    hanging_chars: DecimalNumber | None = None
    first_line: TwipsMeasure | None = None
    first_line_chars: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Ind:
        start = xml_node.parse_attribute("w:start", parse_signed_twips_measure)
        if start is None:
            start = xml_node.parse_attribute("w:left", parse_signed_twips_measure)
        end = xml_node.parse_attribute("w:end", parse_signed_twips_measure)
        if end is None:
            end = xml_node.parse_attribute("w:right", parse_signed_twips_measure)
        return cls(
            start=start,
            start_chars=xml_node.parse_attribute("w:startChars", parse_decimal_number),
            end=end,
            end_chars=xml_node.parse_attribute("w:endChars", parse_decimal_number),
            hanging=xml_node.parse_attribute("w:hanging", parse_twips_measure),
            hanging_chars=xml_node.parse_attribute("w:hangingChars", parse_decimal_number),
            first_line=xml_node.parse_attribute("w:firstLine", parse_twips_measure),
            first_line_chars=xml_node.parse_attribute("w:firstLineChars", parse_decimal_number),
        )


class Cnf(Update):
    """Conditional table formatting that applied to a paragraph, row or cell."""
    value: str | None = None
    first_row: bool | None = None
    last_row: bool | None = None
    first_column: bool | None = None
    last_column: bool | None = None
    odd_vertical_band: bool | None = None
    even_vertical_band: bool | None = None
    odd_horizontal_band: bool | None = None
    even_horizontal_band: bool | None = None
    first_row_first_column: bool | None = None
    first_row_last_column: bool | None = None
    last_row_first_column: bool | None = None
    last_row_last_column: bool | None = None

    FLAG_ATTRIBUTES: ClassVar[dict[str, str]] = {
        "first_row": "w:firstRow",
        "last_row": "w:lastRow",
        "first_column": "w:firstColumn",
        "last_column": "w:lastColumn",
        "odd_vertical_band": "w:oddVBand",
        "even_vertical_band": "w:evenVBand",
        "odd_horizontal_band": "w:oddHBand",
        "even_horizontal_band": "w:evenHBand",
        "first_row_first_column": "w:firstRowFirstColumn",
        "first_row_last_column": "w:firstRowLastColumn",
        "last_row_first_column": "w:lastRowFirstColumn",
        "last_row_last_column": "w:lastRowLastColumn",
    }

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Cnf:
        flags = {
            field_name: xml_node.parse_attribute(key, parse_xml_bool)
            for field_name, key in cls.FLAG_ATTRIBUTES.items()
        }
        return cls(value=xml_node.attributes.get("w:val"), **flags)


# ── Paragraph property bag ─────────────────────────────────────────────────────

_PPR_ON_OFF_FIELDS = {
    "keepNext": "keep_next",
    "keepLines": "keep_lines",
    "pageBreakBefore": "page_break_before",
    "widowControl": "widow_control",
    "suppressLineNumbers": "suppress_line_numbers",
    "suppressAutoHyphens": "suppress_auto_hyphens",
    "kinsoku": "kinsoku",
    "wordWrap": "word_wrapping",
    "overflowPunct": "overflow_punctuations",
    "topLinePunct": "top_line_punctuations",
    "autoSpaceDE": "auto_space_latin_and_east_asian",
    "autoSpaceDN": "auto_space_east_asian_and_numbers",
    "bidi": "bidirectional",
    "adjustRightInd": "adjust_right_indent",
    "snapToGrid": "snap_to_grid",
    "contextualSpacing": "contextual_spacing",
    "mirrorIndents": "mirror_indents",
    "suppressOverlap": "suppress_overlapping",
}


class PPrBase(Update):
    """The paragraph formatting bag shared by w:pPr, style w:pPr and pPrChange."""
    style: str | None = None
    keep_next: bool | None = None
    keep_lines: bool | None = None
    page_break_before: bool | None = None
    frame_properties: FramePr | None = None
    widow_control: bool | None = None
    numbering_properties: NumPr | None = None
    suppress_line_numbers: bool | None = None
    borders: PBdr | None = None
    shading: Shd | None = None
    tabs: Tabs | None = None
    suppress_auto_hyphens: bool | None = None
    kinsoku: bool | None = None
    word_wrapping: bool | None = None
    overflow_punctuations: bool | None = None
    top_line_punctuations: bool | None = None
    auto_space_latin_and_east_asian: bool | None = None
    auto_space_east_asian_and_numbers: bool | None = None
    bidirectional: bool | None = None
    adjust_right_indent: bool | None = None
    snap_to_grid: bool | None = None
    spacing: Spacing | None = None
    indent: Ind | None = None
    contextual_spacing: bool | None = None
    mirror_indents: bool | None = None
    suppress_overlapping: bool | None = None
    alignment: Jc | None = None
    text_direction: TextDirection | None = None
    text_alignment: TextAlignment | None = None
    textbox_tight_wrap: TextboxTightWrap | None = None
    outline_level: DecimalNumber | None = None
    div_id: DecimalNumber | None = None
    conditional_formatting: Cnf | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PPrBase:
        properties = cls()
        for child_node in xml_node.child_nodes:
            properties = properties.try_update_from_xml_element(child_node)
        return properties

    def try_update_from_xml_element(self, xml_node: XmlNode) -> PPrBase:
        """Return a copy with the field xml_node describes set, or self when
        xml_node is not a paragraph property."""
        parsed = _parse_ppr_base_field(xml_node)
        if parsed is None:
            return self
        field_name, value = parsed
        return self.model_copy(update={field_name: value})


def _parse_ppr_base_field(xml_node: XmlNode) -> tuple[str, Any] | None:
    local_name = xml_node.local_name
    if local_name in _PPR_ON_OFF_FIELDS:
        return _PPR_ON_OFF_FIELDS[local_name], parse_on_off_xml_element(xml_node)
    if local_name == "pStyle":
        return "style", xml_node.get_val_attribute()
    elif local_name == "framePr":
        return "frame_properties", FramePr.from_xml_element(xml_node)
    elif local_name == "numPr":
        return "numbering_properties", NumPr.from_xml_element(xml_node)
    elif local_name == "pBdr":
        return "borders", PBdr.from_xml_element(xml_node)
    elif local_name == "shd":
        return "shading", Shd.from_xml_element(xml_node)
    elif local_name == "tabs":
        return "tabs", Tabs.from_xml_element(xml_node)
    elif local_name == "spacing":
        return "spacing", Spacing.from_xml_element(xml_node)
    elif local_name == "ind":
        return "indent", Ind.from_xml_element(xml_node)
    elif local_name == "jc":
        return "alignment", Jc.parse_val(xml_node)
    elif local_name == "textDirection":
        return "text_direction", TextDirection.parse_val(xml_node)
    elif local_name == "textAlignment":
        return "text_alignment", TextAlignment.parse_val(xml_node)
    elif local_name == "textboxTightWrap":
        return "textbox_tight_wrap", TextboxTightWrap.parse_val(xml_node)
    elif local_name == "outlineLvl":
        return "outline_level", parse_decimal_number(xml_node.get_val_attribute())
    elif local_name == "divId":
        return "div_id", parse_decimal_number(xml_node.get_val_attribute())
    elif local_name == "cnfStyle":
        return "conditional_formatting", Cnf.from_xml_element(xml_node)
    return None


class PPrChange(TrackChange):
    properties: PPrBase

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PPrChange:
        p_pr_node = xml_node.find_child("pPr")
        if p_pr_node is None:
            raise MissingChildNodeError(xml_node.name, "pPr")
        return cls(**cls.markup_fields(xml_node), properties=PPrBase.from_xml_element(p_pr_node))


class PPrGeneral(BaseModel):
    """Paragraph properties as they appear in styles and numbering levels."""
    base: PPrBase = Field(default_factory=PPrBase)
    change: PPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PPrGeneral:
        base = PPrBase()
        change = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "pPrChange":
                change = PPrChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, change=change)
