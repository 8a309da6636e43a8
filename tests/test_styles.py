"""Tests for word/styles.xml."""

import pytest

from docxwml.errors import MissingAttributeError
from docxwml.wml.enums import Jc
from docxwml.wml.styles import StyleType, Styles, TblStyleOverrideType
from tests.conftest import wml_node

STYLES = (
    "<w:styles>"
    "<w:docDefaults>"
    '<w:rPrDefault><w:rPr><w:rFonts w:ascii="Calibri"/><w:sz w:val="22"/></w:rPr></w:rPrDefault>'
    '<w:pPrDefault><w:pPr><w:spacing w:after="160"/></w:pPr></w:pPrDefault>'
    "</w:docDefaults>"
    '<w:latentStyles w:defLockedState="0" w:defUIPriority="99" w:count="376">'
    '<w:lsdException w:name="Normal" w:uiPriority="0" w:qFormat="1"/>'
    "</w:latentStyles>"
    '<w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
    '<w:name w:val="Normal"/><w:qFormat/><w:pPr><w:jc w:val="both"/></w:pPr></w:style>'
    '<w:style w:type="paragraph" w:styleId="Heading1">'
    '<w:name w:val="heading 1"/><w:basedOn w:val="Normal"/><w:next w:val="Normal"/>'
    '<w:link w:val="Heading1Char"/><w:uiPriority w:val="9"/>'
    '<w:pPr><w:keepNext/><w:outlineLvl w:val="0"/></w:pPr><w:rPr><w:b/><w:sz w:val="32"/></w:rPr></w:style>'
    '<w:style w:type="table" w:customStyle="1" w:styleId="Grid">'
    '<w:tblPr><w:tblBorders><w:top w:val="single"/></w:tblBorders></w:tblPr>'
    '<w:tblStylePr w:type="firstRow"><w:rPr><w:b/></w:rPr></w:tblStylePr>'
    "</w:style>"
    "</w:styles>"
)


@pytest.fixture
def styles() -> Styles:
    return Styles.from_xml_element(wml_node(STYLES))


class TestStyles:
    def test_document_defaults(self, styles: Styles) -> None:
        defaults = styles.document_defaults
        r_pr_bases = defaults.run_properties_default.run_properties.r_pr_bases
        assert [b.kind for b in r_pr_bases] == ["rFonts", "sz"]
        assert r_pr_bases[0].value.ascii == "Calibri"
        assert defaults.paragraph_properties_default.paragraph_properties.base.spacing.after == 160

    def test_latent_styles(self, styles: Styles) -> None:
        latent = styles.latent_styles
        assert latent.default_locked_state is False
        assert latent.count == 376
        assert latent.lsd_exceptions[0].name == "Normal"
        assert latent.lsd_exceptions[0].primary_style is True

    def test_paragraph_style(self, styles: Styles) -> None:
        normal = styles.find_style("Normal")
        assert normal.style_type == StyleType.PARAGRAPH
        assert normal.is_default is True
        assert normal.primary_style is True
        assert normal.paragraph_properties.base.alignment == Jc.BOTH

    def test_based_on_chain_fields(self, styles: Styles) -> None:
        heading = styles.find_style("Heading1")
        assert heading.name == "heading 1"
        assert heading.based_on == "Normal"
        assert heading.next == "Normal"
        assert heading.link == "Heading1Char"
        assert heading.ui_priority == 9
        assert heading.paragraph_properties.base.keep_next is True
        assert heading.paragraph_properties.base.outline_level == 0
        assert [b.kind for b in heading.run_properties.r_pr_bases] == ["b", "sz"]
        assert heading.is_default is None

    def test_table_style(self, styles: Styles) -> None:
        grid = styles.find_style("Grid")
        assert grid.custom_style is True
        assert grid.table_properties.borders.top is not None
        assert grid.table_style_properties[0].override_type == TblStyleOverrideType.FIRST_ROW
        assert grid.table_style_properties[0].run_properties.r_pr_bases[0].kind == "b"

    def test_find_missing_style(self, styles: Styles) -> None:
        assert styles.find_style("Nope") is None

    def test_table_style_override_requires_type(self) -> None:
        node = wml_node('<w:styles><w:style w:styleId="T"><w:tblStylePr/></w:style></w:styles>')
        with pytest.raises(MissingAttributeError) as exc_info:
            Styles.from_xml_element(node)
        assert exc_info.value.attr == "type"

    def test_latent_exception_requires_name(self) -> None:
        node = wml_node("<w:styles><w:latentStyles><w:lsdException/></w:latentStyles></w:styles>")
        with pytest.raises(MissingAttributeError):
            Styles.from_xml_element(node)
