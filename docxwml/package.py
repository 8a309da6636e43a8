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

"""The .docx package — reads the WordprocessingML parts out of the ZIP
archive and resolves the effective formatting of paragraphs and runs.

Effective formatting is layered, lowest priority first:

1. document defaults (w:docDefaults)
2. the paragraph style, or the default paragraph style
3. the character style, or the default character style (toggle
   properties are XOR-ed against the paragraph style)
4. direct paragraph and run formatting
"""

from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from docxwml.resolvedstyle import ParagraphProperties, ResolvedStyle, RunProperties
from docxwml.wml.document import PPr, RPr, P, R, Document
from docxwml.wml.footnotes import Endnotes, Footnotes, FtnEdn, FtnEdnType
from docxwml.wml.numbering import MAX_LEVELS, Lvl, Numbering
from docxwml.wml.section import SectPrContents
from docxwml.wml.settings import Settings
from docxwml.wml.styles import Style, Styles, StyleType
from docxwml.xml import XmlNode
from docxwml.xsdtypes import XsdChoice

logger = logging.getLogger(__name__)

MAIN_DOCUMENT_PART = "word/document.xml"
STYLES_PART = "word/styles.xml"
SETTINGS_PART = "word/settings.xml"
FOOTNOTES_PART = "word/footnotes.xml"
ENDNOTES_PART = "word/endnotes.xml"
NUMBERING_PART = "word/numbering.xml"
MAIN_DOCUMENT_RELATIONSHIPS_PART = "word/_rels/document.xml.rels"
MEDIA_PREFIX = "word/media/"


def _unwrap(choice: XsdChoice) -> Any:
    """The innermost value of a choice, through nested group wrappers."""
    value: Any = choice
    while isinstance(value, XsdChoice):
        value = value.value
    return value


class Relationship(BaseModel):
    """An entry of a part's .rels file, mapping an r:id to its target."""
    id: str
    rel_type: str
    target: str
    target_mode: str | None = None

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Relationship:
        return cls(
            id=xml_node.get_attribute("Id"),
            rel_type=xml_node.get_attribute("Type"),
            target=xml_node.get_attribute("Target"),
            target_mode=xml_node.attributes.get("TargetMode"),
        )


class Relationships(BaseModel):
    """The root of a .rels part."""
    relationships: list[Relationship] = Field(default_factory=list)

    @classmethod
    def from_xml_element(cls, xml_node: XmlNode) -> Relationships:
        return cls(relationships=[Relationship.from_xml_element(c) for c in xml_node.find_children("Relationship")])

    def find_by_id(self, relationship_id: str) -> Relationship | None:
        return next((r for r in self.relationships if r.id == relationship_id), None)


class Package(BaseModel):
    main_document: Document | None = None
    styles: Styles | None = None
    settings: Settings | None = None
    footnotes: Footnotes | None = None
    endnotes: Endnotes | None = None
    numbering: Numbering | None = None
    main_document_relationships: Relationships | None = None
    medias: list[str] = Field(default_factory=list)

    @classmethod
    def from_file(cls, file_path: str | Path) -> Package:
        return cls.from_bytes(Path(file_path).read_bytes())

    @classmethod
    def from_bytes(cls, file_bytes: bytes) -> Package:
        """Parse a .docx archive held in memory. Missing parts stay None."""
        fields: dict[str, Any] = {}
        medias: list[str] = []
        with zipfile.ZipFile(BytesIO(file_bytes)) as zf:
            for entry_name in zf.namelist():
                if entry_name.startswith(MEDIA_PREFIX):
                    medias.append(entry_name)
                    continue
                part = _PARTS.get(entry_name)
                if part is None:
                    continue
                field_name, part_type = part
                logger.debug("Reading part %s", entry_name)
                xml_node = XmlNode.from_bytes(zf.read(entry_name))
                fields[field_name] = part_type.from_xml_element(xml_node)
        return cls(**fields, medias=medias)

    # ── Style resolution ──────────────────────────────────────────────────────

    def resolve_document_default_style(self) -> ResolvedStyle | None:
        if self.styles is None or self.styles.document_defaults is None:
            return None
        doc_defaults = self.styles.document_defaults

        resolved = ResolvedStyle()
        r_pr_default = doc_defaults.run_properties_default
        if r_pr_default is not None and r_pr_default.run_properties is not None:
            resolved = resolved.update_run_with(RunProperties.from_vec(r_pr_default.run_properties.r_pr_bases))
        p_pr_default = doc_defaults.paragraph_properties_default
        if p_pr_default is not None and p_pr_default.paragraph_properties is not None:
            resolved = resolved.update_paragraph_with(p_pr_default.paragraph_properties.base)
        return resolved

    def resolve_default_style(self, style_type: StyleType) -> ResolvedStyle | None:
        if self.styles is None:
            return None
        for style in self.styles.styles:
            if style.style_type == style_type and style.is_default:
                return ResolvedStyle.from_wml_style(style)
        return None

    def resolve_paragraph_style(self, paragraph_properties: PPr) -> ResolvedStyle | None:
        style_id = paragraph_properties.base.style
        if style_id is None:
            return None
        return self.resolve_style_with_id(style_id)

    def resolve_run_style(self, run_properties: RPr) -> ResolvedStyle | None:
        for r_pr_base in run_properties.r_pr_bases:
            if r_pr_base.kind == "rStyle":
                return self.resolve_style_with_id(r_pr_base.value)
        return None

    def resolve_style_with_id(self, style_id: str) -> ResolvedStyle | None:
        """Fold a style with its basedOn ancestors, the style itself winning."""
        if self.styles is None:
            return None
        style = self.styles.find_style(style_id)
        if style is None:
            return None

        hierarchy: list[Style] = []
        seen: set[str | None] = set()
        while style is not None and style.style_id not in seen:
            hierarchy.append(style)
            seen.add(style.style_id)
            style = self.styles.find_style(style.based_on) if style.based_on is not None else None
        if style is not None:
            logger.warning("Cyclic basedOn chain at style %s", style.style_id)

        resolved = ResolvedStyle()
        for ancestor in reversed(hierarchy):
            resolved = resolved.update_with(ResolvedStyle.from_wml_style(ancestor))
        return resolved

    def resolve_style_inheritance(self, paragraph: P, run: R) -> ResolvedStyle | None:
        """The effective formatting of run inside paragraph."""
        paragraph_style = None
        if paragraph.properties is not None:
            paragraph_style = self.resolve_paragraph_style(paragraph.properties)
        if paragraph_style is None:
            paragraph_style = self.resolve_default_style(StyleType.PARAGRAPH)

        run_style = None
        if run.run_properties is not None:
            run_style = self.resolve_run_style(run.run_properties)
        if run_style is None:
            run_style = self.resolve_default_style(StyleType.CHARACTER)

        if paragraph_style is not None and run_style is not None:
            resolved = paragraph_style.update_with_style_on_another_level(run_style)
        else:
            resolved = paragraph_style or run_style

        default_style = self.resolve_document_default_style()
        if default_style is not None and resolved is not None:
            resolved = default_style.update_with(resolved)
        elif resolved is None:
            resolved = default_style

        if resolved is None:
            return None
        if paragraph.properties is not None:
            resolved = resolved.update_paragraph_with(paragraph.properties.base)
        if run.run_properties is not None:
            resolved = resolved.update_run_with(RunProperties.from_vec(run.run_properties.r_pr_bases))
        return resolved

    # ── Lookups ───────────────────────────────────────────────────────────────

    def get_main_document_section_properties(self) -> SectPrContents | None:
        if self.main_document is None:
            return None
        section_properties = self.main_document.body.section_properties
        if section_properties is None:
            return None
        return section_properties.contents

    def find_footnote_with_id(self, note_id: int) -> FtnEdn | None:
        if self.footnotes is None:
            return None
        return self.footnotes.find_by_id(note_id)

    def resolve_footnote_style(self, footnote_type: FtnEdnType) -> ResolvedStyle | None:
        """Formatting of the first paragraph and run of the first footnote
        of the given type, e.g. the separator."""
        if self.footnotes is None:
            return None
        footnote = next((note for note in self.footnotes.notes if note.type == footnote_type), None)
        if footnote is None:
            return None
        paragraph = next(
            (_unwrap(elt) for elt in footnote.block_level_elements if isinstance(_unwrap(elt), P)),
            None,
        )
        if paragraph is None:
            return None

        run_properties = RunProperties()
        for content in paragraph.contents:
            run = _unwrap(content)
            if isinstance(run, R):
                if run.run_properties is not None:
                    run_properties = RunProperties.from_vec(run.run_properties.r_pr_bases)
                break

        if paragraph.properties is None:
            return ResolvedStyle.from_run_properties(run_properties)
        paragraph_style = self.resolve_paragraph_style(paragraph.properties) or ResolvedStyle()
        return paragraph_style.update_run_with(run_properties).update_paragraph_with(paragraph.properties.base)

    # ── Numbering ─────────────────────────────────────────────────────────────

    def find_numbering_level(self, numbering_id: int, level: int) -> Lvl | None:
        """The definition of level (0 to 8) in numbering instance numbering_id.

        A w:lvlOverride carrying its own w:lvl replaces the abstract level.
        """
        if not 0 <= level < MAX_LEVELS or self.numbering is None:
            return None
        num = self.numbering.find_num(numbering_id)
        if num is None:
            return None
        level_override = num.find_level_override(level)
        if level_override is not None and level_override.level is not None:
            return level_override.level
        abstract_num = self.numbering.find_abstract_num(num.abstract_num_id)
        if abstract_num is None:
            return None
        return abstract_num.find_level(level)

    @staticmethod
    def resolve_numbering_level_style(numbering_level: Lvl) -> ResolvedStyle:
        paragraph_properties = ParagraphProperties()
        if numbering_level.paragraph_properties is not None:
            paragraph_properties = numbering_level.paragraph_properties.base
        run_properties = RunProperties()
        if numbering_level.run_properties is not None:
            run_properties = RunProperties.from_vec(numbering_level.run_properties.r_pr_bases)
        return ResolvedStyle(paragraph_properties=paragraph_properties, run_properties=run_properties)


_PARTS: dict[str, tuple[str, Any]] = {
    MAIN_DOCUMENT_PART: ("main_document", Document),
    STYLES_PART: ("styles", Styles),
    SETTINGS_PART: ("settings", Settings),
    FOOTNOTES_PART: ("footnotes", Footnotes),
    ENDNOTES_PART: ("endnotes", Endnotes),
    NUMBERING_PART: ("numbering", Numbering),
    MAIN_DOCUMENT_RELATIONSHIPS_PART: ("main_document_relationships", Relationships),
}
