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

"""Document settings (word/settings.xml).

w:settings is a flat bag of about a hundred optional children. Most of them
are on/off flags or carry a single w:val, so those are mapped through the
lookup tables below; the structured ones (protection, mail merge, captions,
compatibility, ...) get their own records.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from docxwml.errors import LimitViolationError, MaxOccurs, MissingChildNodeError
from docxwml.sharedtypes import Lang, TwipsMeasure, parse_twips_measure
from docxwml.wml.enums import ChapterSep, NumberFormat
from docxwml.wml.properties import Language, Rel
from docxwml.wml.section import EdnProps, FtnProps
from docxwml.wml.simpletypes import (
    DecimalNumber,
    DecimalNumberOrPercent,
    LongHexNumber,
    UnsignedDecimalNumber,
    parse_decimal_number,
    parse_decimal_number_or_percent,
    parse_long_hex,
    parse_on_off_xml_element,
    parse_unsigned_decimal_number,
)
from docxwml.xml import XmlNode, parse_xml_bool
from docxwml.xsdtypes import XsdEnum

logger = logging.getLogger(__name__)

MAX_SEPARATOR_REFERENCES = 3

Base64Binary = str
PixelsMeasure = UnsignedDecimalNumber


# ── Enums ──────────────────────────────────────────────────────────────────────

class View(XsdEnum):
    NONE = "none"
    PRINT = "print"
    OUTLINE = "outline"
    MASTER_PAGES = "masterPages"
    NORMAL = "normal"
    WEB = "web"


class ZoomType(XsdEnum):
    NONE = "none"
    FULL_PAGE = "fullPage"
    BEST_FIT = "bestFit"
    TEXT_FIT = "textFit"


class StyleSort(XsdEnum):
    NAME = "name"
    PRIORITY = "priority"
    DEFAULT = "default"
    FONT = "font"
    BASED_ON = "basedOn"
    TYPE = "type"


class ProofType(XsdEnum):
    CLEAN = "clean"
    DIRTY = "dirty"


class MailMergeDocType(XsdEnum):
    CATALOG = "catalog"
    ENVELOPES = "envelopes"
    MAILING_LABELS = "mailingLabels"
    FORM_LETTERS = "formLetters"
    EMAIL = "email"
    FAX = "fax"


class MailMergeDest(XsdEnum):
    NEW_DOCUMENT = "newDocument"
    PRINTER = "printer"
    EMAIL = "email"
    FAX = "fax"


class MailMergeSourceType(XsdEnum):
    DATABASE = "database"
    ADDRESS_BOOK = "addressBook"
    DOCUMENT1 = "document1"
    DOCUMENT2 = "document2"
    TEXT = "text"
    EMAIL = "email"
    NATIVE = "native"
    LEGACY = "legacy"
    MASTER = "master"


class MailMergeOdsoFMDFieldType(XsdEnum):
    NULL = "null"
    DB_COLUMN = "dbColumn"


class DocProtectType(XsdEnum):
    NONE = "none"
    READ_ONLY = "readOnly"
    COMMENTS = "comments"
    TRACKED_CHANGES = "trackedChanges"
    FORMS = "forms"


class CharacterSpacing(XsdEnum):
    DO_NOT_COMPRESS = "doNotCompress"
    COMPRESS_PUNCTUATION = "compressPunctuation"
    COMPRESS_PUNCTUATION_AND_JAPANESE_KANA = "compressPunctuationAndJapaneseKana"


class WmlColorSchemeIndex(XsdEnum):
    DARK1 = "dark1"
    LIGHT1 = "light1"
    DARK2 = "dark2"
    LIGHT2 = "light2"
    ACCENT1 = "accent1"
    ACCENT2 = "accent2"
    ACCENT3 = "accent3"
    ACCENT4 = "accent4"
    ACCENT5 = "accent5"
    ACCENT6 = "accent6"
    HYPERLINK = "hyperlink"
    FOLLOWED_HYPERLINK = "followedHyperlink"


class CaptionPos(XsdEnum):
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"


# ── Protection ─────────────────────────────────────────────────────────────────

class Password(BaseModel):
    algorithm_name: str | None = None
    hash_value: Base64Binary | None = None
    salt_value: Base64Binary | None = None
    spin_count: DecimalNumber | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Password:
        return cls(
            algorithm_name=xml_node.attributes.get("w:algorithmName"),
            hash_value=xml_node.attributes.get("w:hashValue"),
            salt_value=xml_node.attributes.get("w:saltValue"),
            spin_count=xml_node.parse_attribute("w:spinCount", parse_decimal_number),
        )


class WriteProtection(BaseModel):
    recommended: bool | None = None
    password: Password = Field(default_factory=Password)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WriteProtection:
        return cls(
            recommended=xml_node.parse_attribute("w:recommended", parse_xml_bool),
            password=Password.from_xml_element(xml_node),
        )


class DocProtect(BaseModel):
    edit: DocProtectType | None = None
    formatting: bool | None = None
    enforcement: bool | None = None
    password: Password = Field(default_factory=Password)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocProtect:
        return cls(
            edit=xml_node.parse_attribute("w:edit", DocProtectType.parse),
            formatting=xml_node.parse_attribute("w:formatting", parse_xml_bool),
            enforcement=xml_node.parse_attribute("w:enforcement", parse_xml_bool),
            password=Password.from_xml_element(xml_node),
        )


# ── View and proofing ──────────────────────────────────────────────────────────

class Zoom(BaseModel):
    value: ZoomType | None = None
    percent: DecimalNumberOrPercent

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Zoom:
        return cls(
            value=xml_node.parse_attribute("w:val", ZoomType.parse),
            percent=parse_decimal_number_or_percent(xml_node.get_attribute("w:percent")),
        )


class WritingStyle(BaseModel):
    language: Lang
    vendor_id: str
    dll_version: str
    natural_language_check: bool | None = None
    check_style: bool
    app_name: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> WritingStyle:
        return cls(
            language=xml_node.get_attribute("w:lang"),
            vendor_id=xml_node.get_attribute("w:vendorID"),
            dll_version=xml_node.get_attribute("w:dllVersion"),
            natural_language_check=xml_node.parse_attribute("w:nlCheck", parse_xml_bool),
            check_style=parse_xml_bool(xml_node.get_attribute("w:checkStyle")),
            app_name=xml_node.get_attribute("w:appName"),
        )


class StylePaneFilter(BaseModel):
    all_styles: bool | None = None
    custom_styles: bool | None = None
    latent_styles: bool | None = None
    styles_in_use: bool | None = None
    heading_styles: bool | None = None
    numbering_styles: bool | None = None
    table_styles: bool | None = None
    direct_formatting_on_runs: bool | None = None
    direct_formatting_on_paragraphs: bool | None = None
    direct_formatting_on_numbering: bool | None = None
    direct_formatting_on_tables: bool | None = None
    clear_formatting: bool | None = None
    top_three_heading_styles: bool | None = None
    visible_styles: bool | None = None
    alternate_style_names: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> StylePaneFilter:
        attributes = {
            "all_styles": "w:allStyles",
            "custom_styles": "w:customStyles",
            "latent_styles": "w:latentStyles",
            "styles_in_use": "w:stylesInUse",
            "heading_styles": "w:headingStyles",
            "numbering_styles": "w:numberingStyles",
            "table_styles": "w:tableStyles",
            "direct_formatting_on_runs": "w:directFormattingOnRuns",
            "direct_formatting_on_paragraphs": "w:directFormattingOnParagraphs",
            "direct_formatting_on_numbering": "w:directFormattingOnNumbering",
            "direct_formatting_on_tables": "w:directFormattingOnTables",
            "clear_formatting": "w:clearFormatting",
            "top_three_heading_styles": "w:top3HeadingStyles",
            "visible_styles": "w:visibleStyles",
            "alternate_style_names": "w:alternateStyleNames",
        }
        return cls(**{
            field_name: xml_node.parse_attribute(key, parse_xml_bool)
            for field_name, key in attributes.items()
        })


class Proof(BaseModel):
    spelling: ProofType | None = None
    grammar: ProofType | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Proof:
        return cls(
            spelling=xml_node.parse_attribute("w:spelling", ProofType.parse),
            grammar=xml_node.parse_attribute("w:grammar", ProofType.parse),
        )


class TrackChangesView(BaseModel):
    markup: bool | None = None
    comments: bool | None = None
    display_content_revisions: bool | None = None
    formatting: bool | None = None
    ink_annotations: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> TrackChangesView:
        return cls(
            markup=xml_node.parse_attribute("w:markup", parse_xml_bool),
            comments=xml_node.parse_attribute("w:comments", parse_xml_bool),
            display_content_revisions=xml_node.parse_attribute("w:insDel", parse_xml_bool),
            formatting=xml_node.parse_attribute("w:formatting", parse_xml_bool),
            ink_annotations=xml_node.parse_attribute("w:inkAnnotations", parse_xml_bool),
        )


class ReadingModeInkLockDown(BaseModel):
    use_actual_pages: bool
    width: PixelsMeasure
    height: PixelsMeasure
    font_size: DecimalNumberOrPercent

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ReadingModeInkLockDown:
        return cls(
            use_actual_pages=parse_xml_bool(xml_node.get_attribute("w:actualPg")),
            width=parse_unsigned_decimal_number(xml_node.get_attribute("w:w")),
            height=parse_unsigned_decimal_number(xml_node.get_attribute("w:h")),
            font_size=parse_decimal_number_or_percent(xml_node.get_attribute("w:fontSz")),
        )


# ── Mail merge ─────────────────────────────────────────────────────────────────

class OdsoFieldMapData(BaseModel):
    field_type: MailMergeOdsoFMDFieldType | None = None
    name: str | None = None
    mapped_name: str | None = None
    column: DecimalNumber | None = None
    language_id: Lang | None = None
    dynamic_address: bool | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> OdsoFieldMapData:
        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "type":
                fields["field_type"] = MailMergeOdsoFMDFieldType.parse_val(child_node)
            elif local_name == "name":
                fields["name"] = child_node.get_val_attribute()
            elif local_name == "mappedName":
                fields["mapped_name"] = child_node.get_val_attribute()
            elif local_name == "column":
                fields["column"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "lid":
                fields["language_id"] = child_node.get_val_attribute()
            elif local_name == "dynamicAddress":
                fields["dynamic_address"] = parse_on_off_xml_element(child_node)
        return cls(**fields)


class Odso(BaseModel):
    """Office data source object settings."""
    udl: str | None = None
    table: str | None = None
    source: Rel | None = None
    column_delimiter: DecimalNumber | None = None
    mail_merge_source_type: MailMergeSourceType | None = None
    first_header: bool | None = None
    field_map_datas: list[OdsoFieldMapData] = Field(default_factory=list)
    recipient_datas: list[Rel] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Odso:
        fields: dict[str, Any] = {}
        field_map_datas: list[OdsoFieldMapData] = []
        recipient_datas: list[Rel] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "udl":
                fields["udl"] = child_node.get_val_attribute()
            elif local_name == "table":
                fields["table"] = child_node.get_val_attribute()
            elif local_name == "src":
                fields["source"] = Rel.from_xml_element(child_node)
            elif local_name == "colDelim":
                fields["column_delimiter"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "type":
                fields["mail_merge_source_type"] = MailMergeSourceType.parse_val(child_node)
            elif local_name == "fHdr":
                fields["first_header"] = parse_on_off_xml_element(child_node)
            elif local_name == "fieldMapData":
                field_map_datas.append(OdsoFieldMapData.from_xml_element(child_node))
            elif local_name == "recipientData":
                recipient_datas.append(Rel.from_xml_element(child_node))
        return cls(**fields, field_map_datas=field_map_datas, recipient_datas=recipient_datas)


_MAIL_MERGE_ON_OFF_FIELDS = {
    "linkToQuery": "link_to_query",
    "doNotSuppressBlankLines": "do_not_suppress_blank_lines",
    "mailAsAttachment": "mail_as_attachment",
    "viewMergedData": "view_merged_data",
}
_MAIL_MERGE_STRING_FIELDS = {
    "dataType": "data_type",
    "connectString": "connect_string",
    "query": "query",
    "addressFieldName": "address_field_name",
    "mailSubject": "mail_subject",
}


class MailMerge(BaseModel):
    main_document_type: MailMergeDocType
    link_to_query: bool | None = None
    data_type: str
    connect_string: str | None = None
    query: str | None = None
    data_source: Rel | None = None
    header_source: Rel | None = None
    do_not_suppress_blank_lines: bool | None = None
    destination: MailMergeDest | None = None
    address_field_name: str | None = None
    mail_subject: str | None = None
    mail_as_attachment: bool | None = None
    view_merged_data: bool | None = None
    active_record: DecimalNumber | None = None
    check_errors: DecimalNumber | None = None
    odso: Odso | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> MailMerge:
        logger.debug("Parsing %s", xml_node.name)

        fields: dict[str, Any] = {}
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name in _MAIL_MERGE_ON_OFF_FIELDS:
                fields[_MAIL_MERGE_ON_OFF_FIELDS[local_name]] = parse_on_off_xml_element(child_node)
            elif local_name in _MAIL_MERGE_STRING_FIELDS:
                fields[_MAIL_MERGE_STRING_FIELDS[local_name]] = child_node.get_val_attribute()
            elif local_name == "mainDocumentType":
                fields["main_document_type"] = MailMergeDocType.parse_val(child_node)
            elif local_name == "dataSource":
                fields["data_source"] = Rel.from_xml_element(child_node)
            elif local_name == "headerSource":
                fields["header_source"] = Rel.from_xml_element(child_node)
            elif local_name == "destination":
                fields["destination"] = MailMergeDest.parse_val(child_node)
            elif local_name == "activeRecord":
                fields["active_record"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "checkErrors":
                fields["check_errors"] = parse_decimal_number(child_node.get_val_attribute())
            elif local_name == "odso":
                fields["odso"] = Odso.from_xml_element(child_node)

        if "main_document_type" not in fields:
            raise MissingChildNodeError(xml_node.name, "mainDocumentType")
        if "data_type" not in fields:
            raise MissingChildNodeError(xml_node.name, "dataType")
        return cls(**fields)


# ── Footnote and endnote document properties ───────────────────────────────────

class FtnEndSepRef(BaseModel):
    """Reference to a separator or continuation footnote/endnote."""
    id: DecimalNumber

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FtnEndSepRef:
        return cls(id=parse_decimal_number(xml_node.get_attribute("w:id")))


def _separator_references(xml_node: XmlNode, local_name: str) -> list[FtnEndSepRef]:
    references = [FtnEndSepRef.from_xml_element(c) for c in xml_node.find_children(local_name)]
    if len(references) > MAX_SEPARATOR_REFERENCES:
        raise LimitViolationError(xml_node.name, local_name, 0, MAX_SEPARATOR_REFERENCES, len(references))
    return references


class FtnDocProps(BaseModel):
    """Document-wide footnote properties (w:footnotePr in settings.xml)."""
    base: FtnProps = Field(default_factory=FtnProps)
    footnotes: list[FtnEndSepRef] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> FtnDocProps:
        return cls(
            base=FtnProps.from_xml_element(xml_node),
            footnotes=_separator_references(xml_node, "footnote"),
        )


class EdnDocProps(BaseModel):
    """Document-wide endnote properties (w:endnotePr in settings.xml)."""
    base: EdnProps = Field(default_factory=EdnProps)
    endnotes: list[FtnEndSepRef] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> EdnDocProps:
        return cls(
            base=EdnProps.from_xml_element(xml_node),
            endnotes=_separator_references(xml_node, "endnote"),
        )


# ── Compatibility ──────────────────────────────────────────────────────────────

class CompatSetting(BaseModel):
    name: str | None = None
    uri: str | None = None
    value: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> CompatSetting:
        return cls(
            name=xml_node.attributes.get("w:name"),
            uri=xml_node.attributes.get("w:uri"),
            value=xml_node.attributes.get("w:val"),
        )


_COMPAT_ON_OFF_FIELDS = {
    "spaceForUL": "space_for_underline",
    "balanceSingleByteDoubleByteWidth": "balance_single_byte_double_byte_width",
    "doNotLeaveBackslashAlone": "do_not_leave_backslash_alone",
    "ulTrailSpace": "underline_trail_space",
    "doNotExpandShiftReturn": "do_not_expand_shift_return",
    "adjustLineHeightInTable": "adjust_line_height_in_table",
    "applyBreakingRules": "apply_breaking_rules",
}


class Compat(BaseModel):
    space_for_underline: bool | None = None
    balance_single_byte_double_byte_width: bool | None = None
    do_not_leave_backslash_alone: bool | None = None
    underline_trail_space: bool | None = None
    do_not_expand_shift_return: bool | None = None
    adjust_line_height_in_table: bool | None = None
    apply_breaking_rules: bool | None = None
    compatibility_settings: list[CompatSetting] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Compat:
        flags: dict[str, bool] = {}
        compatibility_settings: list[CompatSetting] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name in _COMPAT_ON_OFF_FIELDS:
                flags[_COMPAT_ON_OFF_FIELDS[local_name]] = parse_on_off_xml_element(child_node)
            elif local_name == "compatSetting":
                compatibility_settings.append(CompatSetting.from_xml_element(child_node))
        return cls(**flags, compatibility_settings=compatibility_settings)


# ── Variables, revision ids, colors, captions ──────────────────────────────────

class DocVar(BaseModel):
    name: str
    value: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocVar:
        return cls(name=xml_node.get_attribute("w:name"), value=xml_node.get_attribute("w:val"))


class DocVars(BaseModel):
    variables: list[DocVar] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocVars:
        return cls(variables=[DocVar.from_xml_element(c) for c in xml_node.find_children("docVar")])


class DocRsids(BaseModel):
    """Revision save ids recorded for the editing sessions of this document."""
    revision_id_root: LongHexNumber | None = None
    revision_ids: list[LongHexNumber] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> DocRsids:
        revision_id_root = None
        revision_ids: list[LongHexNumber] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name == "rsidRoot":
                revision_id_root = parse_long_hex(child_node.get_val_attribute())
            elif local_name == "rsid":
                revision_ids.append(parse_long_hex(child_node.get_val_attribute()))
        return cls(revision_id_root=revision_id_root, revision_ids=revision_ids)


class ColorSchemeMapping(BaseModel):
    background1: WmlColorSchemeIndex
    text1: WmlColorSchemeIndex
    background2: WmlColorSchemeIndex
    text2: WmlColorSchemeIndex
    accent1: WmlColorSchemeIndex
    accent2: WmlColorSchemeIndex
    accent3: WmlColorSchemeIndex
    accent4: WmlColorSchemeIndex
    accent5: WmlColorSchemeIndex
    accent6: WmlColorSchemeIndex
    hyperlink: WmlColorSchemeIndex
    followed_hyperlink: WmlColorSchemeIndex

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> ColorSchemeMapping:
        attributes = {
            "background1": "w:bg1",
            "text1": "w:t1",
            "background2": "w:bg2",
            "text2": "w:t2",
            "accent1": "w:accent1",
            "accent2": "w:accent2",
            "accent3": "w:accent3",
            "accent4": "w:accent4",
            "accent5": "w:accent5",
            "accent6": "w:accent6",
            "hyperlink": "w:hyperlink",
            "followed_hyperlink": "w:followedHyperlink",
        }
        return cls(**{
            field_name: WmlColorSchemeIndex.parse(xml_node.get_attribute(key))
            for field_name, key in attributes.items()
        })


class Caption(BaseModel):
    name: str
    position: CaptionPos | None = None
    chapter_number: bool | None = None
    heading: DecimalNumber | None = None
    no_label: bool | None = None
    numbering_format: NumberFormat | None = None
    separator: ChapterSep | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Caption:
        return cls(
            name=xml_node.get_attribute("w:name"),
            position=xml_node.parse_attribute("w:pos", CaptionPos.parse),
            chapter_number=xml_node.parse_attribute("w:chapNum", parse_xml_bool),
            heading=xml_node.parse_attribute("w:heading", parse_decimal_number),
            no_label=xml_node.parse_attribute("w:noLabel", parse_xml_bool),
            numbering_format=xml_node.parse_attribute("w:numFmt", NumberFormat.parse),
            separator=xml_node.parse_attribute("w:sep", ChapterSep.parse),
        )


class AutoCaption(BaseModel):
    name: str
    caption: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> AutoCaption:
        return cls(name=xml_node.get_attribute("w:name"), caption=xml_node.get_attribute("w:caption"))


class Captions(BaseModel):
    captions: list[Caption] = Field(default_factory=list)
    auto_captions: list[AutoCaption] | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Captions:
        captions = [Caption.from_xml_element(c) for c in xml_node.find_children("caption")]
        if not captions:
            raise LimitViolationError(xml_node.name, "caption", 1, MaxOccurs.UNBOUNDED, 0)

        auto_captions_node = xml_node.find_child("autoCaptions")
        auto_captions = None
        if auto_captions_node is not None:
            auto_captions = [AutoCaption.from_xml_element(c) for c in auto_captions_node.find_children("autoCaption")]
        return cls(captions=captions, auto_captions=auto_captions)


# ── Miscellaneous ──────────────────────────────────────────────────────────────

class Kinsoku(BaseModel):
    """Line breaking characters for one East Asian language."""
    language: Lang
    value: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Kinsoku:
        return cls(language=xml_node.get_attribute("w:lang"), value=xml_node.get_attribute("w:val"))


class SaveThroughXslt(BaseModel):
    relationship_id: str | None = None
    solution_id: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SaveThroughXslt:
        return cls(
            relationship_id=xml_node.attributes.get("r:id"),
            solution_id=xml_node.attributes.get("w:solutionID"),
        )


class SmartTagType(BaseModel):
    namespaceuri: str
    name: str
    url: str

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> SmartTagType:
        return cls(
            namespaceuri=xml_node.get_attribute("w:namespaceuri"),
            name=xml_node.get_attribute("w:name"),
            url=xml_node.get_attribute("w:url"),
        )


# ── Settings ───────────────────────────────────────────────────────────────────

_SETTINGS_ON_OFF_FIELDS = {
    "removePersonalInformation": "remove_personal_information",
    "removeDateAndTime": "remove_date_and_time",
    "doNotDisplayPageBoundaries": "do_not_display_page_boundaries",
    "displayBackgroundShape": "display_background_shape",
    "printPostScriptOverText": "print_post_script_over_text",
    "printFractionalCharacterWidth": "print_fractional_character_width",
    "printFormsData": "print_forms_data",
    "embedTrueTypeFonts": "embed_true_type_fonts",
    "embedSystemFonts": "embed_system_fonts",
    "saveSubsetFonts": "save_subset_fonts",
    "saveFormsData": "save_forms_data",
    "mirrorMargins": "mirror_margins",
    "alignBordersAndEdges": "align_borders_and_edges",
    "bordersDoNotSurroundHeader": "borders_do_not_surround_header",
    "bordersDoNotSurroundFooter": "borders_do_not_surround_footer",
    "gutterAtTop": "gutter_at_top",
    "hideSpellingErrors": "hide_spelling_errors",
    "hideGrammaticalErrors": "hide_grammatical_errors",
    "formsDesign": "forms_design",
    "linkStyles": "link_styles",
    "trackRevisions": "track_revisions",
    "doNotTrackMoves": "do_not_track_moves",
    "doNotTrackFormatting": "do_not_track_formatting",
    "autoFormatOverride": "auto_format_override",
    "styleLockTheme": "style_lock_theme",
    "styleLockQFSet": "style_lock_set",
    "autoHyphenation": "auto_hyphenation",
    "doNotHyphenateCaps": "do_not_hyphenate_capitals",
    "showEnvelope": "show_envelope",
    "evenAndOddHeaders": "even_and_odd_headers",
    "bookFoldRevPrinting": "book_fold_revision_printing",
    "bookFoldPrinting": "book_fold_printing",
    "bookFoldPrintingSheets": "book_fold_printing_sheets",
    "doNotUseMarginsForDrawingGridOrigin": "do_not_use_margins_for_drawing_grid_origin",
    "doNotShadeFormData": "do_not_shade_form_data",
    "noPunctuationKerning": "no_punctuation_kerning",
    "printTwoOnOne": "print_two_on_one",
    "strictFirstAndLastChars": "strict_first_and_last_chars",
    "savePreviewPicture": "save_preview_picture",
    "doNotValidateAgainstSchema": "do_not_validate_against_schema",
    "saveInvalidXml": "save_invalid_xml",
    "ignoreMixedContent": "ignore_mixed_content",
    "alwaysShowPlaceholderText": "always_show_placeholder_text",
    "doNotDemarcateInvalidXml": "do_not_demarcate_invalid_xml",
    "saveXmlDataOnly": "save_xml_data_only",
    "useXSLTWhenSaving": "use_xslt_when_saving",
    "showXMLTags": "show_xml_tags",
    "alwaysMergeEmptyNamespace": "always_merge_empty_namespace",
    "updateFields": "update_fields",
    "doNotIncludeSubdocsInStats": "do_not_include_subdocs_in_stats",
    "doNotAutoCompressPictures": "do_not_auto_compress_pictures",
    "doNotEmbedSmartTags": "do_not_embed_smart_tags",
}

# Children whose w:val is parsed into the field as-is, or through a parser.
_SETTINGS_VAL_FIELDS = {
    "view": ("view", View.parse),
    "stylePaneSortMethod": ("style_pane_sort_method", StyleSort.parse),
    "documentType": ("document_type", str),
    "defaultTabStop": ("default_tab_stop", parse_twips_measure),
    "consecutiveHyphenLimit": ("consecutive_hyphen_limit", parse_decimal_number),
    "hyphenationZone": ("hyphenation_zone", parse_twips_measure),
    "summaryLength": ("summary_length", parse_decimal_number_or_percent),
    "clickAndTypeStyle": ("click_and_type_style", str),
    "defaultTableStyle": ("default_table_style", str),
    "drawingGridHorizontalSpacing": ("drawing_grid_horizontal_spacing", parse_twips_measure),
    "drawingGridVerticalSpacing": ("drawing_grid_vertical_spacing", parse_twips_measure),
    "displayHorizontalDrawingGridEvery": ("display_horizontal_drawing_grid_every", parse_decimal_number),
    "displayVerticalDrawingGridEvery": ("display_vertical_drawing_grid_every", parse_decimal_number),
    "drawingGridHorizontalOrigin": ("drawing_grid_horizontal_origin", parse_twips_measure),
    "drawingGridVerticalOrigin": ("drawing_grid_vertical_origin", parse_twips_measure),
    "characterSpacingControl": ("character_spacing_control", CharacterSpacing.parse),
    "decimalSymbol": ("decimal_symbol", str),
    "listSeparator": ("list_separator", str),
}

# Children with a record of their own.
_SETTINGS_RECORD_FIELDS = {
    "writeProtection": ("write_protection", WriteProtection),
    "zoom": ("zoom", Zoom),
    "proofState": ("proof_state", Proof),
    "attachedTemplate": ("attached_template", Rel),
    "stylePaneFormatFilter": ("style_pane_format_filter", StylePaneFilter),
    "mailMerge": ("mail_merge", MailMerge),
    "revisionView": ("revision_view", TrackChangesView),
    "documentProtection": ("document_protection", DocProtect),
    "noLineBreaksAfter": ("no_line_breaks_after", Kinsoku),
    "noLineBreaksBefore": ("no_line_breaks_before", Kinsoku),
    "saveThroughXslt": ("save_through_xslt", SaveThroughXslt),
    "footnotePr": ("footnote_properties", FtnDocProps),
    "endnotePr": ("endnote_properties", EdnDocProps),
    "compat": ("compatibility", Compat),
    "docVars": ("document_variables", DocVars),
    "rsids": ("revision_ids", DocRsids),
    "themeFontLang": ("theme_font_lang", Language),
    "clrSchemeMapping": ("color_scheme_mapping", ColorSchemeMapping),
    "captions": ("captions", Captions),
    "readModeInkLockDown": ("read_mode_ink_lock_down", ReadingModeInkLockDown),
}


class Settings(BaseModel):
    """The root of word/settings.xml."""
    write_protection: WriteProtection | None = None
    view: View | None = None
    zoom: Zoom | None = None
    remove_personal_information: bool | None = None
    remove_date_and_time: bool | None = None
    do_not_display_page_boundaries: bool | None = None
    display_background_shape: bool | None = None
    print_post_script_over_text: bool | None = None
    print_fractional_character_width: bool | None = None
    print_forms_data: bool | None = None
    embed_true_type_fonts: bool | None = None
    embed_system_fonts: bool | None = None
    save_subset_fonts: bool | None = None
    save_forms_data: bool | None = None
    mirror_margins: bool | None = None
    align_borders_and_edges: bool | None = None
    borders_do_not_surround_header: bool | None = None
    borders_do_not_surround_footer: bool | None = None
    gutter_at_top: bool | None = None
    hide_spelling_errors: bool | None = None
    hide_grammatical_errors: bool | None = None
    active_writing_styles: list[WritingStyle] = Field(default_factory=list)
    proof_state: Proof | None = None
    forms_design: bool | None = None
    attached_template: Rel | None = None
    link_styles: bool | None = None
    style_pane_format_filter: StylePaneFilter | None = None
    style_pane_sort_method: StyleSort | None = None
    document_type: str | None = None
    mail_merge: MailMerge | None = None
    revision_view: TrackChangesView | None = None
    track_revisions: bool | None = None
    do_not_track_moves: bool | None = None
    do_not_track_formatting: bool | None = None
    document_protection: DocProtect | None = None
    auto_format_override: bool | None = None
    style_lock_theme: bool | None = None
    style_lock_set: bool | None = None
    default_tab_stop: TwipsMeasure | None = None
    auto_hyphenation: bool | None = None
    consecutive_hyphen_limit: DecimalNumber | None = None
    hyphenation_zone: TwipsMeasure | None = None
    do_not_hyphenate_capitals: bool | None = None
    show_envelope: bool | None = None
    summary_length: DecimalNumberOrPercent | None = None
    click_and_type_style: str | None = None
    default_table_style: str | None = None
    even_and_odd_headers: bool | None = None
    book_fold_revision_printing: bool | None = None
    book_fold_printing: bool | None = None
    book_fold_printing_sheets: bool | None = None
    drawing_grid_horizontal_spacing: TwipsMeasure | None = None
    drawing_grid_vertical_spacing: TwipsMeasure | None = None
    display_horizontal_drawing_grid_every: DecimalNumber | None = None
    display_vertical_drawing_grid_every: DecimalNumber | None = None
    do_not_use_margins_for_drawing_grid_origin: bool | None = None
    drawing_grid_horizontal_origin: TwipsMeasure | None = None
    drawing_grid_vertical_origin: TwipsMeasure | None = None
    do_not_shade_form_data: bool | None = None
    no_punctuation_kerning: bool | None = None
    character_spacing_control: CharacterSpacing | None = None
    print_two_on_one: bool | None = None
    strict_first_and_last_chars: bool | None = None
    no_line_breaks_after: Kinsoku | None = None
    no_line_breaks_before: Kinsoku | None = None
    save_preview_picture: bool | None = None
    do_not_validate_against_schema: bool | None = None
    save_invalid_xml: bool | None = None
    ignore_mixed_content: bool | None = None
    always_show_placeholder_text: bool | None = None
    do_not_demarcate_invalid_xml: bool | None = None
    save_xml_data_only: bool | None = None
    use_xslt_when_saving: bool | None = None
    save_through_xslt: SaveThroughXslt | None = None
    show_xml_tags: bool | None = None
    always_merge_empty_namespace: bool | None = None
    update_fields: bool | None = None
    footnote_properties: FtnDocProps | None = None
    endnote_properties: EdnDocProps | None = None
    compatibility: Compat | None = None
    document_variables: DocVars | None = None
    revision_ids: DocRsids | None = None
    attached_schemas: list[str] = Field(default_factory=list)
    theme_font_lang: Language | None = None
    color_scheme_mapping: ColorSchemeMapping | None = None
    do_not_include_subdocs_in_stats: bool | None = None
    do_not_auto_compress_pictures: bool | None = None
    force_upgrade: bool = False
    captions: Captions | None = None
    read_mode_ink_lock_down: ReadingModeInkLockDown | None = None
    smart_tag_types: list[SmartTagType] = Field(default_factory=list)
    do_not_embed_smart_tags: bool | None = None
    decimal_symbol: str | None = None
    list_separator: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Settings:
        logger.debug("Parsing %s", xml_node.name)

        fields: dict[str, Any] = {}
        active_writing_styles: list[WritingStyle] = []
        attached_schemas: list[str] = []
        smart_tag_types: list[SmartTagType] = []
        for child_node in xml_node.child_nodes:
            local_name = child_node.local_name
            if local_name in _SETTINGS_ON_OFF_FIELDS:
                fields[_SETTINGS_ON_OFF_FIELDS[local_name]] = parse_on_off_xml_element(child_node)
            elif local_name in _SETTINGS_VAL_FIELDS:
                field_name, parser = _SETTINGS_VAL_FIELDS[local_name]
                fields[field_name] = parser(child_node.get_val_attribute())
            elif local_name in _SETTINGS_RECORD_FIELDS:
                field_name, record_type = _SETTINGS_RECORD_FIELDS[local_name]
                fields[field_name] = record_type.from_xml_element(child_node)
            elif local_name == "activeWritingStyle":
                active_writing_styles.append(WritingStyle.from_xml_element(child_node))
            elif local_name == "attachedSchema":
                attached_schemas.append(child_node.get_val_attribute())
            elif local_name == "smartTagType":
                smart_tag_types.append(SmartTagType.from_xml_element(child_node))
            elif local_name == "forceUpgrade":
                fields["force_upgrade"] = True

        return cls(
            **fields,
            active_writing_styles=active_writing_styles,
            attached_schemas=attached_schemas,
            smart_tag_types=smart_tag_types,
        )
