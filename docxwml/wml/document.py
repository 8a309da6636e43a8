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

"""The main document grammar — runs, paragraphs, content groups, structured
document tags, the body and w:document itself.

The content groups are mutually recursive: a paragraph holds runs and
revision wrappers, revision wrappers hold run content again, a run holds a
drawing whose text box holds paragraphs. Each group is an XsdChoice whose
membership is the union of its own names and its nested groups' names, so a
caller can walk children and keep exactly the ones the group understands.

Tables and drawings live in their own modules and are imported at the bottom
of this one; their builders call back into the groups defined here.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docxwml.errors import MissingChildNodeError
from docxwml.sharedtypes import (
    CalendarType,
    ConformanceClass,
    Lang,
    TwipsMeasure,
    parse_twips_measure,
)
from docxwml.wml.enums import (
    BrClear,
    BrType,
    Direction,
    DisplacedByCustomXml,
    EdGrp,
    FFTextType,
    FldCharType,
    InfoTextType,
    Lock,
    ObjectDrawAspect,
    ObjectUpdateMode,
    ProofErrType,
    PTabAlignment,
    PTabLeader,
    PTabRelativeTo,
    RubyAlign,
    SdtDateMappingType,
    ThemeColor,
)
from docxwml.wml.properties import (
    Markup,
    ParaRPr,
    PPrBase,
    PPrChange,
    Rel,
    RPr,
    TrackChange,
)
from docxwml.wml.section import SectPr
from docxwml.wml.simpletypes import (
    DateTime,
    DecimalNumber,
    FFHelpTextVal,
    FFName,
    FFStatusTextVal,
    HexColor,
    HpsMeasure,
    LongHexNumber,
    MacroName,
    ShortHexNumber,
    UcharHexNumber,
    UnsignedDecimalNumber,
    parse_decimal_number,
    parse_hps_measure,
    parse_long_hex,
    parse_on_off_xml_element,
    parse_short_hex,
    parse_uchar_hex,
    parse_unsigned_decimal_number,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdChoice

logger = logging.getLogger(__name__)


def _require_child(xml_node: XmlNode, local_name: str) -> XmlNode:
    child_node = xml_node.find_child(local_name)
    if child_node is None:
        raise MissingChildNodeError(xml_node.name, local_name)
    return child_node


# ── Run inner content ──────────────────────────────────────────────────────────

class Text(BaseModel):
    """Character data of w:t, w:delText, w:instrText or w:delInstrText."""
    text: str
    xml_space: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Text:
        return cls(text=xml_node.text or "", xml_space=xml_node.attributes.get("xml:space"))


class Br(BaseModel):
    type: BrType | None = None
    clear: BrClear | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Br:
        return cls(
            type=xml_node.parse_attribute("w:type", BrType.parse),
            clear=xml_node.parse_attribute("w:clear", BrClear.parse),
        )


class Sym(BaseModel):
    font: str | None = None
    char: ShortHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Sym:
        return cls(
            font=xml_node.attributes.get("w:font"),
            char=xml_node.parse_attribute("w:char", parse_short_hex),
        )


class Control(BaseModel):
    name: str | None = None
    shape_id: str | None = None
    relationship_id: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Control:
        return cls(
            name=xml_node.attributes.get("w:name"),
            shape_id=xml_node.attributes.get("w:shapeid"),
            relationship_id=xml_node.attributes.get("r:id"),
        )


class ObjectEmbed(BaseModel):
    relationship_id: str
    draw_aspect: ObjectDrawAspect | None = None
    prog_id: str | None = None
    shape_id: str | None = None
    field_codes: str | None = None

    @classmethod
    def embed_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            "relationship_id": xml_node.get_attribute("r:id"),
            "draw_aspect": xml_node.parse_attribute("w:drawAspect", ObjectDrawAspect.parse),
            "prog_id": xml_node.attributes.get("w:progId"),
            "shape_id": xml_node.attributes.get("w:shapeId"),
            "field_codes": xml_node.attributes.get("w:fieldCodes"),
        }

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ObjectEmbed:
        return cls(**cls.embed_fields(xml_node))


class ObjectLink(ObjectEmbed):
    update_mode: ObjectUpdateMode
    locked_field: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ObjectLink:
        return cls(
            **cls.embed_fields(xml_node),
            update_mode=ObjectUpdateMode.parse(xml_node.get_attribute("w:updateMode")),
            locked_field=xml_node.parse_attribute("w:lockedField", parse_xml_bool),
        )


class Object(BaseModel):
    """An embedded OLE object or ActiveX control (w:object)."""
    original_image_width: TwipsMeasure | None = None
    original_image_height: TwipsMeasure | None = None
    drawing: Any = None  # drawing.Drawing
    control: Control | None = None
    object_link: ObjectLink | None = None
    object_embed: ObjectEmbed | None = None
    movie: Rel | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Object:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "drawing":
                fields["drawing"] = drawing.Drawing.from_xml_element(child_node)
            elif local_name == "control":
                fields["control"] = Control.from_xml_element(child_node)
            elif local_name == "objectLink":
                fields["object_link"] = ObjectLink.from_xml_element(child_node)
            elif local_name == "objectEmbed":
                fields["object_embed"] = ObjectEmbed.from_xml_element(child_node)
            elif local_name == "movie":
                fields["movie"] = Rel.from_xml_element(child_node)

        return cls(
            original_image_width=xml_node.parse_attribute("w:dxaOrig", parse_twips_measure),
            original_image_height=xml_node.parse_attribute("w:dyaOrig", parse_twips_measure),
            **fields,
        )


# ── Form fields ────────────────────────────────────────────────────────────────

class FFHelpText(BaseModel):
    type: InfoTextType | None = None
    value: FFHelpTextVal | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFHelpText:
        return cls(
            type=xml_node.parse_attribute("w:type", InfoTextType.parse),
            value=xml_node.attributes.get("w:val"),
        )


class FFStatusText(BaseModel):
    type: InfoTextType | None = None
    value: FFStatusTextVal | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFStatusText:
        return cls(
            type=xml_node.parse_attribute("w:type", InfoTextType.parse),
            value=xml_node.attributes.get("w:val"),
        )


class FFCheckBox(BaseModel):
    """A check box form field. Exactly one of size and size_auto is set."""
    size: HpsMeasure | None = None
    size_auto: bool | None = None
    default: bool | None = None
    checked: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFCheckBox:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "size":
                fields["size"] = parse_hps_measure(child_node.get_val_attribute())
            elif local_name == "sizeAuto":
                fields["size_auto"] = parse_on_off_xml_element(child_node)
            elif local_name == "default":
                fields["default"] = parse_on_off_xml_element(child_node)
            elif local_name == "checked":
                fields["checked"] = parse_on_off_xml_element(child_node)

        if "size" not in fields and "size_auto" not in fields:
            raise MissingChildNodeError(xml_node.name, "size|sizeAuto")
        return cls(**fields)


class FFDDList(BaseModel):
    result: DecimalNumber | None = None
    default: DecimalNumber | None = None
    list_entries: list[str] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFDDList:
        result = None
        default = None
        list_entries: list[str] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "result":
                result = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "default":
                default = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "listEntry":
                list_entries.append(child_node.get_val_attribute())
        return cls(result=result, default=default, list_entries=list_entries)


class FFTextInput(BaseModel):
    type: FFTextType | None = None
    default: str | None = None
    max_length: DecimalNumber | None = None
    format: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFTextInput:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "type":
                fields["type"] = FFTextType.parse_val(child_node)
            elif local_name == "default":
                fields["default"] = child_node.get_val_attribute()
            elif local_name == "maxLength":
                fields["max_length"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "format":
                fields["format"] = child_node.get_val_attribute()
        return cls(**fields)


class FFData(BaseModel):
    """Legacy form field data attached to a field's begin character."""
    name: FFName | None = None
    label: DecimalNumber | None = None
    tab_index: UnsignedDecimalNumber | None = None
    enabled: bool | None = None
    calculate_on_exit: bool | None = None
    entry_macro: MacroName | None = None
    exit_macro: MacroName | None = None
    help_text: FFHelpText | None = None
    status_text: FFStatusText | None = None
    check_box: FFCheckBox | None = None
    drop_down_list: FFDDList | None = None
    text_input: FFTextInput | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FFData:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "name":
                fields["name"] = child_node.get_val_attribute()
            elif local_name == "label":
                fields["label"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "tabIndex":
                fields["tab_index"] = parse_unsigned_decimal_number(child_node.get_val_attribute())
            elif local_name == "enabled":
                fields["enabled"] = parse_on_off_xml_element(child_node)
            elif local_name == "calcOnExit":
                fields["calculate_on_exit"] = parse_on_off_xml_element(child_node)
            elif local_name == "entryMacro":
                fields["entry_macro"] = child_node.get_val_attribute()
            elif local_name == "exitMacro":
                fields["exit_macro"] = child_node.get_val_attribute()
            elif local_name == "helpText":
                fields["help_text"] = FFHelpText.from_xml_element(child_node)
            elif local_name == "statusText":
                fields["status_text"] = FFStatusText.from_xml_element(child_node)
            elif local_name == "checkBox":
                fields["check_box"] = FFCheckBox.from_xml_element(child_node)
            elif local_name == "ddList":
                fields["drop_down_list"] = FFDDList.from_xml_element(child_node)
            elif local_name == "textInput":
                fields["text_input"] = FFTextInput.from_xml_element(child_node)
        return cls(**fields)


class FldChar(BaseModel):
    type: FldCharType
    field_lock: bool | None = None
    dirty: bool | None = None
    field_data: Text | None = None
    form_field_data: FFData | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FldChar:
        field_data = None
        form_field_data = None
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "fldData":
                field_data = Text.from_xml_element(child_node)
            elif local_name == "ffData":
                form_field_data = FFData.from_xml_element(child_node)

        return cls(
            type=FldCharType.parse(xml_node.get_attribute("w:fldCharType")),
            field_lock=xml_node.parse_attribute("w:fldLock", parse_xml_bool),
            dirty=xml_node.parse_attribute("w:dirty", parse_xml_bool),
            field_data=field_data,
            form_field_data=form_field_data,
        )


# ── Ruby, references, positional tabs ──────────────────────────────────────────

class RubyPr(BaseModel):
    ruby_align: RubyAlign
    hps: HpsMeasure
    hps_raise: HpsMeasure
    hps_base_text: HpsMeasure
    language_id: Lang
    dirty: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RubyPr:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "rubyAlign":
                fields["ruby_align"] = RubyAlign.parse_val(child_node)
            elif local_name == "hps":
                fields["hps"] = parse_hps_measure(child_node.get_val_attribute())
            elif local_name == "hpsRaise":
                fields["hps_raise"] = parse_hps_measure(child_node.get_val_attribute())
            elif local_name == "hpsBaseText":
                fields["hps_base_text"] = parse_hps_measure(child_node.get_val_attribute())
            elif local_name == "lid":
                fields["language_id"] = child_node.get_val_attribute()
            elif local_name == "dirty":
                fields["dirty"] = parse_on_off_xml_element(child_node)

        for field_name, child_name in (
            ("ruby_align", "rubyAlign"),
            ("hps", "hps"),
            ("hps_raise", "hpsRaise"),
            ("hps_base_text", "hpsBaseText"),
            ("language_id", "lid"),
        ):
            if field_name not in fields:
                raise MissingChildNodeError(xml_node.name, child_name)
        return cls(**fields)


class RubyContentChoice(XsdChoice):
    """A run or a run-level element inside w:rt or w:rubyBase."""
    members: ClassVar[frozenset[str]] = frozenset({"r"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RunLevelElts,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> R:
        return R.from_xml_element(xml_node)


class RubyContent(BaseModel):
    contents: list[RubyContentChoice] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RubyContent:
        return cls(contents=RubyContentChoice.list_from_children(xml_node))


class Ruby(BaseModel):
    """Phonetic guide text (w:ruby) above a base text."""
    properties: RubyPr
    ruby_content: RubyContent
    ruby_base: RubyContent

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Ruby:
        return cls(
            properties=RubyPr.from_xml_element(_require_child(xml_node, "rubyPr")),
            ruby_content=RubyContent.from_xml_element(_require_child(xml_node, "rt")),
            ruby_base=RubyContent.from_xml_element(_require_child(xml_node, "rubyBase")),
        )


class FtnEdnRef(BaseModel):
    id: DecimalNumber
    custom_mark_follows: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FtnEdnRef:
        return cls(
            id=parse_decimal_number(xml_node.get_attribute("w:id")),
            custom_mark_follows=xml_node.parse_attribute("w:customMarkFollows", parse_xml_bool),
        )


class PTab(BaseModel):
    alignment: PTabAlignment
    relative_to: PTabRelativeTo
    leader: PTabLeader

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PTab:
        return cls(
            alignment=PTabAlignment.parse(xml_node.get_attribute("w:alignment")),
            relative_to=PTabRelativeTo.parse(xml_node.get_attribute("w:relativeTo")),
            leader=PTabLeader.parse(xml_node.get_attribute("w:leader")),
        )


class RunInnerContent(XsdChoice):
    """One item of a run's content. Markers (tab, cr, separator, ...) carry no value."""

    TEXT_KINDS: ClassVar[frozenset[str]] = frozenset({"t", "delText", "instrText", "delInstrText"})
    MARKER_KINDS: ClassVar[frozenset[str]] = frozenset({
        "noBreakHyphen", "softHyphen", "dayShort", "monthShort", "yearShort",
        "dayLong", "monthLong", "yearLong", "annotationRef", "footnoteRef",
        "endnoteRef", "separator", "continuationSeparator", "pgNum", "cr",
        "tab", "lastRenderedPageBreak",
    })
    members: ClassVar[frozenset[str]] = TEXT_KINDS | MARKER_KINDS | frozenset({
        "br", "contentPart", "sym", "object", "fldChar", "ruby",
        "footnoteReference", "endnoteReference", "commentReference",
        "drawing", "ptab",
    })

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name in cls.MARKER_KINDS:
            return None
        if local_name in cls.TEXT_KINDS:
            return Text.from_xml_element(xml_node)
        elif local_name == "br":
            return Br.from_xml_element(xml_node)
        elif local_name == "contentPart":
            return Rel.from_xml_element(xml_node)
        elif local_name == "sym":
            return Sym.from_xml_element(xml_node)
        elif local_name == "object":
            return Object.from_xml_element(xml_node)
        elif local_name == "fldChar":
            return FldChar.from_xml_element(xml_node)
        elif local_name == "ruby":
            return Ruby.from_xml_element(xml_node)
        elif local_name in ("footnoteReference", "endnoteReference"):
            return FtnEdnRef.from_xml_element(xml_node)
        elif local_name == "commentReference":
            return Markup.from_xml_element(xml_node)
        elif local_name == "drawing":
            return drawing.Drawing.from_xml_element(xml_node)
        return PTab.from_xml_element(xml_node)


class R(BaseModel):
    """A run: character formatting plus an ordered list of inner content."""
    run_properties: RPr | None = None
    run_inner_contents: list[RunInnerContent] = Field(default_factory=list)
    run_properties_revision_id: LongHexNumber | None = None
    deletion_revision_id: LongHexNumber | None = None
    run_revision_id: LongHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> R:
        logger.debug("Parsing %s", xml_node.name)

        run_properties = None
        run_inner_contents: list[RunInnerContent] = []
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "rPr":
                run_properties = RPr.from_xml_element(child_node)
            elif RunInnerContent.is_choice_member(child_node.local_name):
                run_inner_contents.append(RunInnerContent.from_xml_element(child_node))

        return cls(
            run_properties=run_properties,
            run_inner_contents=run_inner_contents,
            run_properties_revision_id=xml_node.parse_attribute("w:rsidRPr", parse_long_hex),
            deletion_revision_id=xml_node.parse_attribute("w:rsidDel", parse_long_hex),
            run_revision_id=xml_node.parse_attribute("w:rsidR", parse_long_hex),
        )


# ── Range markup ───────────────────────────────────────────────────────────────

class MarkupRange(Markup):
    displaced_by_custom_xml: DisplacedByCustomXml | None = None

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            **super().markup_fields(xml_node),
            "displaced_by_custom_xml": xml_node.parse_attribute(
                "w:displacedByCustomXml", DisplacedByCustomXml.parse
            ),
        }


class BookmarkRange(MarkupRange):
    column_first: DecimalNumber | None = None
    column_last: DecimalNumber | None = None

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            **super().markup_fields(xml_node),
            "column_first": xml_node.parse_attribute("w:colFirst", parse_decimal_number),
            "column_last": xml_node.parse_attribute("w:colLast", parse_decimal_number),
        }


class Bookmark(BookmarkRange):
    name: str

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {**super().markup_fields(xml_node), "name": xml_node.get_attribute("w:name")}


class MoveBookmark(Bookmark):
    author: str
    date: DateTime

    @classmethod
    def markup_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            **super().markup_fields(xml_node),
            "author": xml_node.get_attribute("w:author"),
            "date": xml_node.get_attribute("w:date"),
        }


class RangeMarkupElements(XsdChoice):
    """Bookmark, comment, move and custom XML range start/end markers."""

    members: ClassVar[frozenset[str]] = frozenset({
        "bookmarkStart", "bookmarkEnd",
        "moveFromRangeStart", "moveFromRangeEnd",
        "moveToRangeStart", "moveToRangeEnd",
        "commentRangeStart", "commentRangeEnd",
        "customXmlInsRangeStart", "customXmlInsRangeEnd",
        "customXmlDelRangeStart", "customXmlDelRangeEnd",
        "customXmlMoveFromRangeStart", "customXmlMoveFromRangeEnd",
        "customXmlMoveToRangeStart", "customXmlMoveToRangeEnd",
    })

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Markup:
        local_name = xml_node.local_name
        if local_name == "bookmarkStart":
            return Bookmark.from_xml_element(xml_node)
        elif local_name in ("moveFromRangeStart", "moveToRangeStart"):
            return MoveBookmark.from_xml_element(xml_node)
        elif local_name.startswith("customXml"):
            if local_name.endswith("Start"):
                return TrackChange.from_xml_element(xml_node)
            return Markup.from_xml_element(xml_node)
        return MarkupRange.from_xml_element(xml_node)


class MathContent(XsdChoice):
    """An Office Math block (m:oMathPara) or inline equation (m:oMath).

    The math subtree is not modelled; value is the untouched XmlNode.
    """
    members: ClassVar[frozenset[str]] = frozenset({"oMathPara", "oMath"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> XmlNode:
        return xml_node


# ── Run-level elements ─────────────────────────────────────────────────────────

class ProofErr(BaseModel):
    type: ProofErrType

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ProofErr:
        return cls(type=ProofErrType.parse(xml_node.get_attribute("w:type")))


class Perm(BaseModel):
    id: str
    displaced_by_custom_xml: DisplacedByCustomXml | None = None

    @classmethod
    def perm_fields(cls, xml_node: XmlNode) -> dict[str, Any]:
        return {
            "id": xml_node.get_attribute("w:id"),
            "displaced_by_custom_xml": xml_node.parse_attribute(
                "w:displacedByCustomXml", DisplacedByCustomXml.parse
            ),
        }

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Perm:
        return cls(**cls.perm_fields(xml_node))


class PermStart(Perm):
    editor_group: EdGrp | None = None
    editor: str | None = None
    column_first: DecimalNumber | None = None
    column_last: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PermStart:
        return cls(
            **cls.perm_fields(xml_node),
            editor_group=xml_node.parse_attribute("w:edGrp", EdGrp.parse),
            editor=xml_node.attributes.get("w:ed"),
            column_first=xml_node.parse_attribute("w:colFirst", parse_decimal_number),
            column_last=xml_node.parse_attribute("w:colLast", parse_decimal_number),
        )


class RunTrackChange(TrackChange):
    """An insertion, deletion or move wrapping run content (w:ins, w:del, ...)."""
    contents: list[ContentRunContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> RunTrackChange:
        return cls(
            **cls.markup_fields(xml_node),
            contents=ContentRunContent.list_from_children(xml_node),
        )


class RunLevelElts(XsdChoice):
    """Elements allowed next to runs anywhere: revisions, permissions,
    proofing marks, range markers and math."""
    members: ClassVar[frozenset[str]] = frozenset({
        "proofErr", "permStart", "permEnd", "ins", "del", "moveFrom", "moveTo",
    })

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RangeMarkupElements, MathContent)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "proofErr":
            return ProofErr.from_xml_element(xml_node)
        elif local_name == "permStart":
            return PermStart.from_xml_element(xml_node)
        elif local_name == "permEnd":
            return Perm.from_xml_element(xml_node)
        return RunTrackChange.from_xml_element(xml_node)


# ── Custom XML, smart tags, bidi ───────────────────────────────────────────────

class Attr(BaseModel):
    uri: str | None = None
    name: str
    value: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Attr:
        return cls(
            uri=xml_node.attributes.get("w:uri"),
            name=xml_node.get_attribute("w:name"),
            value=xml_node.get_attribute("w:val"),
        )


class CustomXmlPr(BaseModel):
    placeholder: str | None = None
    attributes: list[Attr] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CustomXmlPr:
        placeholder = None
        attributes: list[Attr] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "placeholder":
                placeholder = child_node.get_val_attribute()
            elif local_name == "attr":
                attributes.append(Attr.from_xml_element(child_node))
        return cls(placeholder=placeholder, attributes=attributes)


class SmartTagPr(BaseModel):
    attributes: list[Attr] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SmartTagPr:
        return cls(attributes=[Attr.from_xml_element(c) for c in xml_node.find_children("attr")])


def _custom_xml_fields(xml_node: XmlNode) -> dict[str, Any]:
    properties_node = xml_node.find_child("customXmlPr")
    return {
        "uri": xml_node.attributes.get("w:uri"),
        "element": xml_node.get_attribute("w:element"),
        "properties": CustomXmlPr.from_xml_element(properties_node) if properties_node is not None else None,
    }


class CustomXmlRun(BaseModel):
    uri: str | None = None
    element: str
    properties: CustomXmlPr | None = None
    paragraph_contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CustomXmlRun:
        return cls(**_custom_xml_fields(xml_node), paragraph_contents=PContent.list_from_children(xml_node))


class CustomXmlBlock(BaseModel):
    uri: str | None = None
    element: str
    properties: CustomXmlPr | None = None
    block_contents: list[ContentBlockContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CustomXmlBlock:
        return cls(
            **_custom_xml_fields(xml_node),
            block_contents=ContentBlockContent.list_from_children(xml_node),
        )


class SmartTagRun(BaseModel):
    uri: str | None = None
    element: str
    properties: SmartTagPr | None = None
    paragraph_contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SmartTagRun:
        properties_node = xml_node.find_child("smartTagPr")
        return cls(
            uri=xml_node.attributes.get("w:uri"),
            element=xml_node.get_attribute("w:element"),
            properties=SmartTagPr.from_xml_element(properties_node) if properties_node is not None else None,
            paragraph_contents=PContent.list_from_children(xml_node),
        )


class DirContentRun(BaseModel):
    """Embedded bidirectional text (w:dir, or the override w:bdo)."""
    value: Direction | None = None
    paragraph_contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DirContentRun:
        return cls(
            value=xml_node.parse_attribute("w:val", Direction.parse),
            paragraph_contents=PContent.list_from_children(xml_node),
        )


# ── Structured document tags ───────────────────────────────────────────────────

class SdtListItem(BaseModel):
    display_text: str | None = None
    value: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtListItem:
        return cls(
            display_text=xml_node.attributes.get("w:displayText"),
            value=xml_node.attributes.get("w:value"),
        )


class SdtComboBox(BaseModel):
    last_value: str | None = None
    list_items: list[SdtListItem] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtComboBox:
        return cls(
            last_value=xml_node.attributes.get("w:lastValue"),
            list_items=[SdtListItem.from_xml_element(c) for c in xml_node.find_children("listItem")],
        )


class SdtDropDownList(SdtComboBox):
    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtDropDownList:
        return cls(
            last_value=xml_node.attributes.get("w:lastValue"),
            list_items=[SdtListItem.from_xml_element(c) for c in xml_node.find_children("listItem")],
        )


class SdtDate(BaseModel):
    full_date: DateTime | None = None
    date_format: str | None = None
    language_id: Lang | None = None
    store_mapped_data_as: SdtDateMappingType | None = None
    calendar: CalendarType | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtDate:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "dateFormat":
                fields["date_format"] = child_node.get_val_attribute()
            elif local_name == "lid":
                fields["language_id"] = child_node.get_val_attribute()
            elif local_name == "storeMappedDataAs":
                fields["store_mapped_data_as"] = SdtDateMappingType.parse_val(child_node)
            elif local_name == "calendar":
                fields["calendar"] = CalendarType.parse_val(child_node)
        return cls(full_date=xml_node.attributes.get("w:fullDate"), **fields)


class SdtDocPart(BaseModel):
    gallery: str | None = None
    category: str | None = None
    unique: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtDocPart:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "docPartGallery":
                fields["gallery"] = child_node.get_val_attribute()
            elif local_name == "docPartCategory":
                fields["category"] = child_node.get_val_attribute()
            elif local_name == "docPartUnique":
                fields["unique"] = parse_on_off_xml_element(child_node)
        return cls(**fields)


class SdtText(BaseModel):
    multi_line: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtText:
        return cls(multi_line=xml_node.parse_attribute("w:multiLine", parse_xml_bool))


class SdtPrChoice(XsdChoice):
    """The kind of content control. equation, picture, richText, citation,
    group and bibliography are markers without a value."""
    members: ClassVar[frozenset[str]] = frozenset({
        "equation", "comboBox", "date", "docPartObj", "docPartList",
        "dropDownList", "picture", "richText", "text", "citation", "group",
        "bibliography",
    })

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "comboBox":
            return SdtComboBox.from_xml_element(xml_node)
        elif local_name == "date":
            return SdtDate.from_xml_element(xml_node)
        elif local_name in ("docPartObj", "docPartList"):
            return SdtDocPart.from_xml_element(xml_node)
        elif local_name == "dropDownList":
            return SdtDropDownList.from_xml_element(xml_node)
        elif local_name == "text":
            return SdtText.from_xml_element(xml_node)
        return None


class DataBinding(BaseModel):
    prefix_mappings: str | None = None
    xpath: str
    store_item_id: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DataBinding:
        return cls(
            prefix_mappings=xml_node.attributes.get("w:prefixMappings"),
            xpath=xml_node.get_attribute("w:xpath"),
            store_item_id=xml_node.get_attribute("w:storeItemID"),
        )


class SdtPr(BaseModel):
    run_properties: RPr | None = None
    alias: str | None = None
    tag: str | None = None
    id: DecimalNumber | None = None
    lock: Lock | None = None
    placeholder: str | None = None
    temporary: bool | None = None
    showing_placeholder_header: bool | None = None
    data_binding: DataBinding | None = None
    label: DecimalNumber | None = None
    tab_index: UnsignedDecimalNumber | None = None
    control_choice: SdtPrChoice | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtPr:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "rPr":
                fields["run_properties"] = RPr.from_xml_element(child_node)
            elif local_name == "alias":
                fields["alias"] = child_node.get_val_attribute()
            elif local_name == "tag":
                fields["tag"] = child_node.get_val_attribute()
            elif local_name == "id":
                fields["id"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "lock":
                fields["lock"] = Lock.parse_val(child_node)
            elif local_name == "placeholder":
                doc_part = _require_child(child_node, "docPart")
                fields["placeholder"] = doc_part.get_val_attribute()
            elif local_name == "temporary":
                fields["temporary"] = parse_on_off_xml_element(child_node)
            elif local_name == "showingPlcHdr":
                fields["showing_placeholder_header"] = parse_on_off_xml_element(child_node)
            elif local_name == "dataBinding":
                fields["data_binding"] = DataBinding.from_xml_element(child_node)
            elif local_name == "label":
                fields["label"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "tabIndex":
                fields["tab_index"] = parse_unsigned_decimal_number(child_node.get_val_attribute())
            elif SdtPrChoice.is_choice_member(local_name):
                fields["control_choice"] = SdtPrChoice.from_xml_element(child_node)
        return cls(**fields)


class SdtEndPr(BaseModel):
    run_properties: list[RPr] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtEndPr:
        return cls(run_properties=[RPr.from_xml_element(c) for c in xml_node.find_children("rPr")])


class SdtContentRun(BaseModel):
    contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtContentRun:
        return cls(contents=PContent.list_from_children(xml_node))


class SdtContentBlock(BaseModel):
    contents: list[ContentBlockContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtContentBlock:
        return cls(contents=ContentBlockContent.list_from_children(xml_node))


def _sdt_fields(xml_node: XmlNode, content_type: type[BaseModel]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for child_node in xml_node.child_nodes:
        local_name = child_node.local_name
        if local_name == "sdtPr":
            fields["properties"] = SdtPr.from_xml_element(child_node)
        elif local_name == "sdtEndPr":
            fields["end_properties"] = SdtEndPr.from_xml_element(child_node)
        elif local_name == "sdtContent":
            fields["content"] = content_type.from_xml_element(child_node)
    return fields


class SdtRun(BaseModel):
    """A content control around inline content."""
    properties: SdtPr | None = None
    end_properties: SdtEndPr | None = None
    content: SdtContentRun | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtRun:
        return cls(**_sdt_fields(xml_node, SdtContentRun))


class SdtBlock(BaseModel):
    """A content control around paragraphs and tables."""
    properties: SdtPr | None = None
    end_properties: SdtEndPr | None = None
    content: SdtContentBlock | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SdtBlock:
        logger.debug("Parsing %s", xml_node.name)
        return cls(**_sdt_fields(xml_node, SdtContentBlock))


# ── Paragraph content ──────────────────────────────────────────────────────────

class ContentRunContent(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"customXml", "smartTag", "sdt", "dir", "bdo", "r"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RunLevelElts,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "customXml":
            return CustomXmlRun.from_xml_element(xml_node)
        elif local_name == "smartTag":
            return SmartTagRun.from_xml_element(xml_node)
        elif local_name == "sdt":
            return SdtRun.from_xml_element(xml_node)
        elif local_name in ("dir", "bdo"):
            return DirContentRun.from_xml_element(xml_node)
        return R.from_xml_element(xml_node)


class SimpleField(BaseModel):
    instruction: str
    field_lock: bool | None = None
    dirty: bool | None = None
    field_data: Text | None = None
    paragraph_contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SimpleField:
        field_data_node = xml_node.find_child("fldData")
        return cls(
            instruction=xml_node.get_attribute("w:instr"),
            field_lock=xml_node.parse_attribute("w:fldLock", parse_xml_bool),
            dirty=xml_node.parse_attribute("w:dirty", parse_xml_bool),
            field_data=Text.from_xml_element(field_data_node) if field_data_node is not None else None,
            paragraph_contents=PContent.list_from_children(xml_node),
        )


class Hyperlink(BaseModel):
    target_frame: str | None = None
    tooltip: str | None = None
    document_location: str | None = None
    history: bool | None = None
    anchor: str | None = None
    relationship_id: str | None = None
    paragraph_contents: list[PContent] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Hyperlink:
        return cls(
            target_frame=xml_node.attributes.get("w:tgtFrame"),
            tooltip=xml_node.attributes.get("w:tooltip"),
            document_location=xml_node.attributes.get("w:docLocation"),
            history=xml_node.parse_attribute("w:history", parse_xml_bool),
            anchor=xml_node.attributes.get("w:anchor"),
            relationship_id=xml_node.attributes.get("r:id"),
            paragraph_contents=PContent.list_from_children(xml_node),
        )


class PContent(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"fldSimple", "hyperlink", "subDoc"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (ContentRunContent,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "fldSimple":
            return SimpleField.from_xml_element(xml_node)
        elif local_name == "hyperlink":
            return Hyperlink.from_xml_element(xml_node)
        return Rel.from_xml_element(xml_node)


class PPr(BaseModel):
    """Direct paragraph formatting (w:p/w:pPr)."""
    base: PPrBase = Field(default_factory=PPrBase)
    run_properties: ParaRPr | None = None
    section_properties: SectPr | None = None
    properties_change: PPrChange | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> PPr:
        base = PPrBase()
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "rPr":
                fields["run_properties"] = ParaRPr.from_xml_element(child_node)
            elif local_name == "sectPr":
                fields["section_properties"] = SectPr.from_xml_element(child_node)
            elif local_name == "pPrChange":
                fields["properties_change"] = PPrChange.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)
        return cls(base=base, **fields)


class P(BaseModel):
    properties: PPr | None = None
    contents: list[PContent] = Field(default_factory=list)
    run_properties_revision_id: LongHexNumber | None = None
    run_revision_id: LongHexNumber | None = None
    deletion_revision_id: LongHexNumber | None = None
    paragraph_revision_id: LongHexNumber | None = None
    run_default_revision_id: LongHexNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> P:
        logger.debug("Parsing %s", xml_node.name)

        properties = None
        contents: list[PContent] = []
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "pPr":
                properties = PPr.from_xml_element(child_node)
            elif PContent.is_choice_member(child_node.local_name):
                contents.append(PContent.from_xml_element(child_node))

        return cls(
            properties=properties,
            contents=contents,
            run_properties_revision_id=xml_node.parse_attribute("w:rsidRPr", parse_long_hex),
            run_revision_id=xml_node.parse_attribute("w:rsidR", parse_long_hex),
            deletion_revision_id=xml_node.parse_attribute("w:rsidDel", parse_long_hex),
            paragraph_revision_id=xml_node.parse_attribute("w:rsidP", parse_long_hex),
            run_default_revision_id=xml_node.parse_attribute("w:rsidRDefault", parse_long_hex),
        )


# ── Block-level content ────────────────────────────────────────────────────────

class ContentBlockContent(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"customXml", "sdt", "p", "tbl"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (RunLevelElts,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        local_name = xml_node.local_name
        if local_name == "customXml":
            return CustomXmlBlock.from_xml_element(xml_node)
        elif local_name == "sdt":
            return SdtBlock.from_xml_element(xml_node)
        elif local_name == "p":
            return P.from_xml_element(xml_node)
        return table.Tbl.from_xml_element(xml_node)


class AltChunkPr(BaseModel):
    match_source: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> AltChunkPr:
        match_source_node = xml_node.find_child("matchSrc")
        if match_source_node is None:
            return cls()
        return cls(match_source=parse_on_off_xml_element(match_source_node))


class AltChunk(BaseModel):
    """Imported external content (w:altChunk), kept as a relationship reference."""
    relationship_id: str | None = None
    properties: AltChunkPr | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> AltChunk:
        properties_node = xml_node.find_child("altChunkPr")
        return cls(
            relationship_id=xml_node.attributes.get("r:id"),
            properties=AltChunkPr.from_xml_element(properties_node) if properties_node is not None else None,
        )


class BlockLevelElts(XsdChoice):
    members: ClassVar[frozenset[str]] = frozenset({"altChunk"})

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        return (ContentBlockContent,)

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> AltChunk:
        return AltChunk.from_xml_element(xml_node)


class Body(BaseModel):
    block_level_elements: list[BlockLevelElts] = Field(default_factory=list)
    section_properties: SectPr | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Body:
        logger.debug("Parsing %s", xml_node.name)

        block_level_elements: list[BlockLevelElts] = []
        section_properties = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "sectPr":
                section_properties = SectPr.from_xml_element(child_node)
            elif BlockLevelElts.is_choice_member(child_node.local_name):
                block_level_elements.append(BlockLevelElts.from_xml_element(child_node))
        return cls(block_level_elements=block_level_elements, section_properties=section_properties)


# ── Document ───────────────────────────────────────────────────────────────────

class Background(BaseModel):
    color: HexColor | None = None
    theme_color: ThemeColor | None = None
    theme_tint: UcharHexNumber | None = None
    theme_shade: UcharHexNumber | None = None
    drawing: Any = None  # drawing.Drawing

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Background:
        drawing_node = xml_node.find_child("drawing")
        return cls(
            color=xml_node.parse_attribute("w:color", HexColor.from_str),
            theme_color=xml_node.parse_attribute("w:themeColor", ThemeColor.parse),
            theme_tint=xml_node.parse_attribute("w:themeTint", parse_uchar_hex),
            theme_shade=xml_node.parse_attribute("w:themeShade", parse_uchar_hex),
            drawing=drawing.Drawing.from_xml_element(drawing_node) if drawing_node is not None else None,
        )


class DocumentBase(BaseModel):
    background: Background | None = None

    def try_update_from_xml_element(self, xml_node: XmlNode) -> DocumentBase:
        if xml_node.local_name == "background":
            return self.model_copy(update={"background": Background.from_xml_element(xml_node)})
        return self


class Document(BaseModel):
    """The root of word/document.xml."""
    base: DocumentBase = Field(default_factory=DocumentBase)
    body: Body
    conformance: ConformanceClass | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Document:
        logger.debug("Parsing %s", xml_node.name)

        base = DocumentBase()
        body = None
        for child_node in xml_node.child_nodes:
            if child_node.local_name == "body":
                body = Body.from_xml_element(child_node)
            else:
                base = base.try_update_from_xml_element(child_node)

        if body is None:
            raise MissingChildNodeError(xml_node.name, "body")

        return cls(
            base=base,
            body=body,
            conformance=xml_node.parse_attribute("w:conformance", ConformanceClass.parse),
        )


from docxwml.wml import drawing, table  # noqa: E402
