"""Tests for reading a .docx package and resolving effective formatting."""

import logging
import zipfile

import pytest

from docxwml.errors import InvalidXmlError
from docxwml.package import Package
from docxwml.resolvedstyle import ParagraphProperties, ResolvedStyle, RunProperties
from docxwml.wml.enums import LineSpacingRule, NumberFormat, TextAlignment, UnderlineType
from docxwml.wml.footnotes import FtnEdnType
from docxwml.wml.properties import Ind, Spacing, Underline
from docxwml.wml.styles import StyleType
from tests.conftest import make_docx, wml_part

STYLES_XML = wml_part(
    "styles",
    "<w:docDefaults>"
    '<w:rPrDefault><w:rPr><w:b/><w:i w:val="0"/></w:rPr></w:rPrDefault>'
    '<w:pPrDefault><w:pPr><w:keepNext w:val="0"/></w:pPr></w:pPrDefault>'
    "</w:docDefaults>"
    '<w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
    '<w:name w:val="Normal"/><w:pPr><w:keepNext/></w:pPr><w:rPr><w:i/></w:rPr></w:style>'
    '<w:style w:type="paragraph" w:styleId="Child">'
    '<w:name w:val="Child"/><w:basedOn w:val="Normal"/>'
    '<w:pPr><w:textAlignment w:val="center"/></w:pPr><w:rPr><w:u w:val="single"/></w:rPr></w:style>'
    '<w:style w:type="character" w:styleId="DefaultParagraphFont">'
    '<w:name w:val="Default Paragraph Font"/><w:uiPriority w:val="1"/></w:style>'
    '<w:style w:type="character" w:styleId="Emphasis">'
    '<w:name w:val="Emphasis"/><w:rPr><w:i/></w:rPr></w:style>',
)

FOOTNOTES_XML = wml_part(
    "footnotes",
    '<w:footnote w:type="separator" w:id="0"><w:p>'
    '<w:pPr><w:spacing w:line="240" w:lineRule="auto"/></w:pPr>'
    "<w:r><w:separator/></w:r></w:p></w:footnote>"
    '<w:footnote w:id="1"><w:p><w:r><w:t>A note.</w:t></w:r></w:p></w:footnote>',
)

DOCUMENT_XML = wml_part(
    "document",
    "<w:body>"
    '<w:p><w:pPr><w:pStyle w:val="Child"/><w:keepLines/><w:rPr><w:b/><w:i/></w:rPr></w:pPr>'
    '<w:r><w:rPr><w:rStyle w:val="Emphasis"/></w:rPr><w:t>styled</w:t></w:r></w:p>'
    '<w:sectPr><w:pgSz w:w="12240" w:h="15840"/></w:sectPr>'
    "</w:body>",
)


def _docx(extra_parts: dict[str, bytes] | None = None) -> bytes:
    parts = {
        "[Content_Types].xml": b"<Types/>",
        "word/document.xml": DOCUMENT_XML,
        "word/styles.xml": STYLES_XML,
        "word/footnotes.xml": FOOTNOTES_XML,
        "word/media/image1.png": b"\x89PNG",
    }
    parts.update(extra_parts or {})
    return make_docx(parts)


@pytest.fixture
def package() -> Package:
    return Package.from_bytes(_docx())


def _first_paragraph_and_run(package: Package):
    paragraph = package.main_document.body.block_level_elements[0].value.value
    run = paragraph.contents[0].value.value
    return paragraph, run


# ── Reading ──────────────────────────────────────────────────────────────────

class TestReading:
    def test_parts_are_parsed(self, package: Package) -> None:
        assert package.main_document is not None
        assert len(package.styles.styles) == 4
        assert len(package.footnotes.notes) == 2
        assert package.settings is None
        assert package.endnotes is None

    def test_media_entries_are_listed(self, package: Package) -> None:
        assert package.medias == ["word/media/image1.png"]

    def test_from_file(self, tmp_path) -> None:
        path = tmp_path / "sample.docx"
        path.write_bytes(_docx())
        assert Package.from_file(path).styles.find_style("Emphasis") is not None

    def test_empty_archive(self) -> None:
        package = Package.from_bytes(make_docx({}))
        assert package.main_document is None
        assert package.resolve_document_default_style() is None
        assert package.get_main_document_section_properties() is None
        assert package.find_footnote_with_id(1) is None

    def test_not_a_zip(self) -> None:
        with pytest.raises(zipfile.BadZipFile):
            Package.from_bytes(b"not a zip")

    def test_malformed_part(self) -> None:
        with pytest.raises(InvalidXmlError):
            Package.from_bytes(_docx({"word/settings.xml": b"<w:settings"}))

    def test_section_properties(self, package: Package) -> None:
        assert package.get_main_document_section_properties().page_size.width == 12240

    def test_find_footnote(self, package: Package) -> None:
        assert package.find_footnote_with_id(1).type is None
        assert package.find_footnote_with_id(7) is None


# ── Style resolution ─────────────────────────────────────────────────────────

class TestStyleResolution:
    def test_document_defaults(self, package: Package) -> None:
        default_style = package.resolve_document_default_style()
        assert default_style.paragraph_properties == ParagraphProperties(keep_next=False)
        assert default_style.run_properties == RunProperties(bold=True, italic=False)

    def test_paragraph_style_folds_based_on(self, package: Package) -> None:
        paragraph, _ = _first_paragraph_and_run(package)
        style = package.resolve_paragraph_style(paragraph.properties)
        assert style.paragraph_properties == ParagraphProperties(
            keep_next=True, text_alignment=TextAlignment.CENTER
        )
        assert style.run_properties == RunProperties(
            italic=True, underline=Underline(value=UnderlineType.SINGLE)
        )

    def test_run_style(self, package: Package) -> None:
        _, run = _first_paragraph_and_run(package)
        style = package.resolve_run_style(run.run_properties)
        assert style.run_properties == RunProperties(italic=True)

    def test_default_style_by_type(self, package: Package) -> None:
        assert package.resolve_default_style(StyleType.PARAGRAPH).run_properties.italic is True
        # DefaultParagraphFont has no w:default="1"
        assert package.resolve_default_style(StyleType.CHARACTER) is None

    def test_style_inheritance(self, package: Package) -> None:
        paragraph, run = _first_paragraph_and_run(package)
        style = package.resolve_style_inheritance(paragraph, run)
        assert style.paragraph_properties == ParagraphProperties(
            style="Child",
            keep_next=True,
            keep_lines=True,
            text_alignment=TextAlignment.CENTER,
        )
        # italic: paragraph style on, character style on -> toggled off
        assert style.run_properties == RunProperties(
            style="Emphasis",
            bold=True,
            italic=False,
            underline=Underline(value=UnderlineType.SINGLE),
        )

    def test_footnote_separator_style(self, package: Package) -> None:
        style = package.resolve_footnote_style(FtnEdnType.SEPARATOR)
        assert style.paragraph_properties == ParagraphProperties(
            spacing=Spacing(line=240, line_rule=LineSpacingRule.AUTO)
        )
        assert style.run_properties == RunProperties()

    def test_missing_footnote_type(self, package: Package) -> None:
        assert package.resolve_footnote_style(FtnEdnType.CONTINUATION_NOTICE) is None

    def test_unknown_style_id(self, package: Package) -> None:
        assert package.resolve_style_with_id("Missing") is None

    def test_cyclic_based_on_stops(self, caplog) -> None:
        styles = wml_part(
            "styles",
            '<w:style w:type="paragraph" w:styleId="A"><w:basedOn w:val="B"/><w:rPr><w:b/></w:rPr></w:style>'
            '<w:style w:type="paragraph" w:styleId="B"><w:basedOn w:val="A"/><w:rPr><w:i/></w:rPr></w:style>',
        )
        package = Package.from_bytes(make_docx({"word/styles.xml": styles}))
        with caplog.at_level(logging.WARNING, logger="docxwml.package"):
            style = package.resolve_style_with_id("A")
        assert style.run_properties == RunProperties(bold=True, italic=True)
        assert "Cyclic" in caplog.text


# ── Numbering and relationships ──────────────────────────────────────────────

NUMBERING_XML = wml_part(
    "numbering",
    '<w:abstractNum w:abstractNumId="0">'
    '<w:lvl w:ilvl="0"><w:numFmt w:val="decimal"/><w:lvlText w:val="%1."/>'
    '<w:pPr><w:ind w:start="720" w:hanging="360"/></w:pPr><w:rPr><w:b/></w:rPr></w:lvl>'
    '<w:lvl w:ilvl="1"><w:numFmt w:val="lowerLetter"/><w:lvlText w:val="%2)"/></w:lvl>'
    "</w:abstractNum>"
    '<w:num w:numId="1"><w:abstractNumId w:val="0"/></w:num>'
    '<w:num w:numId="2"><w:abstractNumId w:val="0"/>'
    '<w:lvlOverride w:ilvl="0"><w:startOverride w:val="3"/></w:lvlOverride>'
    '<w:lvlOverride w:ilvl="1"><w:lvl w:ilvl="1"><w:numFmt w:val="upperRoman"/></w:lvl></w:lvlOverride>'
    "</w:num>"
    '<w:num w:numId="3"><w:abstractNumId w:val="7"/></w:num>',
)

RELATIONSHIPS_XML = (
    b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    b'<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    b'<Relationship Id="rId1" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles" '
    b'Target="styles.xml"/>'
    b'<Relationship Id="rId2" Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink" '
    b'Target="https://example.com/" TargetMode="External"/>'
    b"</Relationships>"
)


@pytest.fixture
def numbered_package() -> Package:
    return Package.from_bytes(
        _docx({"word/numbering.xml": NUMBERING_XML, "word/_rels/document.xml.rels": RELATIONSHIPS_XML})
    )


class TestNumbering:
    def test_numbering_part_is_parsed(self, numbered_package: Package) -> None:
        assert len(numbered_package.numbering.numberings) == 3
        assert numbered_package.numbering.abstract_numberings[0].abstract_num_id == 0

    def test_find_numbering_level(self, numbered_package: Package) -> None:
        level = numbered_package.find_numbering_level(1, 0)
        assert level.numbering_format.value == NumberFormat.DECIMAL
        assert level.level_text.value == "%1."

    def test_override_with_level_replaces_definition(self, numbered_package: Package) -> None:
        assert numbered_package.find_numbering_level(2, 1).numbering_format.value == NumberFormat.UPPER_ROMAN

    def test_start_override_keeps_abstract_level(self, numbered_package: Package) -> None:
        assert numbered_package.find_numbering_level(2, 0).level_text.value == "%1."

    @pytest.mark.parametrize(
        "numbering_id,level",
        [(1, -1), (1, 9), (1, 4), (42, 0), (3, 0)],
    )
    def test_missing_levels(self, numbered_package: Package, numbering_id: int, level: int) -> None:
        assert numbered_package.find_numbering_level(numbering_id, level) is None

    def test_no_numbering_part(self, package: Package) -> None:
        assert package.numbering is None
        assert package.find_numbering_level(1, 0) is None

    def test_resolve_numbering_level_style(self, numbered_package: Package) -> None:
        style = Package.resolve_numbering_level_style(numbered_package.find_numbering_level(1, 0))
        assert style.paragraph_properties == ParagraphProperties(indent=Ind(start=720, hanging=360))
        assert style.run_properties == RunProperties(bold=True)

    def test_resolve_bare_level_style(self, numbered_package: Package) -> None:
        style = Package.resolve_numbering_level_style(numbered_package.find_numbering_level(1, 1))
        assert style == ResolvedStyle()


class TestRelationships:
    def test_main_document_relationships(self, numbered_package: Package) -> None:
        relationships = numbered_package.main_document_relationships
        assert [r.id for r in relationships.relationships] == ["rId1", "rId2"]
        hyperlink = relationships.find_by_id("rId2")
        assert hyperlink.target == "https://example.com/"
        assert hyperlink.target_mode == "External"
        assert hyperlink.rel_type.endswith("/hyperlink")
        assert relationships.find_by_id("rId9") is None

    def test_no_relationships_part(self, package: Package) -> None:
        assert package.main_document_relationships is None
