"""Tests for flattening run properties and merging style levels."""

import pytest

from docxwml.resolvedstyle import (
    ParagraphProperties,
    ResolvedStyle,
    RunProperties,
    update_or_toggle_on_off,
)
from docxwml.wml.enums import Jc, UnderlineType
from docxwml.wml.properties import Fonts, RPr, RPrBase, Underline
from docxwml.wml.styles import Style
from tests.conftest import wml_node


def _bases(fragment: str) -> list[RPrBase]:
    return RPr.from_xml_element(wml_node(f"<w:rPr>{fragment}</w:rPr>")).r_pr_bases


class TestToggle:
    @pytest.mark.parametrize(
        "lhs,rhs,expected",
        [
            (None, None, None),
            (True, None, True),
            (None, False, False),
            (True, True, False),
            (True, False, True),
            (False, False, False),
        ],
    )
    def test_truth_table(self, lhs, rhs, expected) -> None:
        assert update_or_toggle_on_off(lhs, rhs) is expected


class TestFromVec:
    def test_named_fields(self) -> None:
        properties = RunProperties.from_vec(
            _bases('<w:rStyle w:val="Strong"/><w:rFonts w:ascii="Arial"/><w:b/><w:sz w:val="24"/><w:u w:val="single"/>')
        )
        assert properties == RunProperties(
            style="Strong",
            fonts=Fonts(ascii="Arial"),
            bold=True,
            font_size=24,
            underline=Underline(value=UnderlineType.SINGLE),
        )

    def test_later_element_wins(self) -> None:
        assert RunProperties.from_vec(_bases('<w:b/><w:b w:val="0"/>')).bold is False

    def test_strike_and_double_strike_exclude(self) -> None:
        properties = RunProperties.from_vec(_bases("<w:strike/><w:dstrike/>"))
        assert properties.double_strikethrough is True
        assert properties.strikethrough is None

        properties = RunProperties.from_vec(_bases("<w:dstrike/><w:strike/>"))
        assert properties.strikethrough is True
        assert properties.double_strikethrough is None

    def test_every_kind_has_a_field(self) -> None:
        for kind in RPrBase.ON_OFF_KINDS:
            assert RunProperties.from_vec([RPrBase(kind=kind, value=True)]) != RunProperties()

    def test_empty(self) -> None:
        assert RunProperties.from_vec([]) == RunProperties()


class TestLevels:
    def test_same_level_is_right_biased(self) -> None:
        merged = RunProperties(bold=True, italic=True).update_with(RunProperties(bold=True, font_size=20))
        assert merged == RunProperties(bold=True, italic=True, font_size=20)

    def test_another_level_toggles(self) -> None:
        paragraph_level = RunProperties(bold=True, italic=True, font_size=24)
        character_level = RunProperties(bold=True, italic=False, font_size=20)
        merged = paragraph_level.update_with_style_on_another_level(character_level)
        assert merged.bold is False
        assert merged.italic is True
        assert merged.font_size == 20

    def test_complex_script_xors_both_sides(self) -> None:
        merged = RunProperties(complex_script=True).update_with_style_on_another_level(
            RunProperties(complex_script=False)
        )
        assert merged.complex_script is True

    def test_one_sided_toggle_is_kept(self) -> None:
        merged = RunProperties(vanish=True).update_with_style_on_another_level(RunProperties())
        assert merged.vanish is True

    def test_nested_records_merge(self) -> None:
        merged = RunProperties(fonts=Fonts(ascii="Arial", east_asia="MS Mincho")).update_with(
            RunProperties(fonts=Fonts(ascii="Calibri"))
        )
        assert merged.fonts == Fonts(ascii="Calibri", east_asia="MS Mincho")


class TestResolvedStyle:
    def test_from_wml_style(self) -> None:
        node = wml_node(
            '<w:style w:type="paragraph" w:styleId="Title"><w:basedOn w:val="Normal"/>'
            '<w:pPr><w:jc w:val="center"/></w:pPr><w:rPr><w:caps/></w:rPr></w:style>'
        )
        resolved = ResolvedStyle.from_wml_style(Style.from_xml_element(node))
        assert resolved.paragraph_properties == ParagraphProperties(alignment=Jc.CENTER)
        assert resolved.run_properties == RunProperties(all_capitals=True)

    def test_from_empty_style(self) -> None:
        assert ResolvedStyle.from_wml_style(Style()) == ResolvedStyle()

    def test_constructors(self) -> None:
        assert ResolvedStyle.from_run_properties(RunProperties(bold=True)).paragraph_properties == ParagraphProperties()
        assert ResolvedStyle.from_paragraph_properties(ParagraphProperties(keep_next=True)).run_properties == RunProperties()

    def test_partial_updates(self) -> None:
        style = ResolvedStyle(
            paragraph_properties=ParagraphProperties(keep_next=True),
            run_properties=RunProperties(bold=True),
        )
        style = style.update_paragraph_with(ParagraphProperties(alignment=Jc.END))
        style = style.update_run_with(RunProperties(italic=True))
        assert style.paragraph_properties == ParagraphProperties(keep_next=True, alignment=Jc.END)
        assert style.run_properties == RunProperties(bold=True, italic=True)

    def test_another_level_merges_paragraphs_plainly(self) -> None:
        lower = ResolvedStyle(
            paragraph_properties=ParagraphProperties(keep_next=True),
            run_properties=RunProperties(bold=True),
        )
        upper = ResolvedStyle(
            paragraph_properties=ParagraphProperties(keep_next=True),
            run_properties=RunProperties(bold=True),
        )
        merged = lower.update_with_style_on_another_level(upper)
        assert merged.paragraph_properties.keep_next is True
        assert merged.run_properties.bold is False
