"""Tests for word/numbering.xml."""

import pytest

from docxwml.errors import LimitViolationError, MissingAttributeError, MissingChildNodeError
from docxwml.wml.enums import Jc, NumberFormat
from docxwml.wml.numbering import (
    AbstractNum,
    LevelSuffix,
    Lvl,
    MultiLevelType,
    Num,
    Numbering,
    NumPicBullet,
    Picture,
)
from tests.conftest import wml_node

BULLET_LEVEL = (
    '<w:lvl w:ilvl="0" w:tplc="04090001" w:tentative="1">'
    '<w:start w:val="1"/><w:numFmt w:val="bullet"/><w:lvlText w:val=""/>'
    '<w:lvlJc w:val="left"/><w:suff w:val="space"/><w:isLgl w:val="0"/>'
    '<w:pPr><w:ind w:left="720" w:hanging="360"/></w:pPr>'
    '<w:rPr><w:rFonts w:ascii="Symbol" w:hAnsi="Symbol" w:hint="default"/></w:rPr>'
    "</w:lvl>"
)


def _levels(count: int) -> str:
    return "".join(f'<w:lvl w:ilvl="{i}"/>' for i in range(count))


class TestLvl:
    def test_bullet_level(self) -> None:
        level = Lvl.from_xml_element(wml_node(BULLET_LEVEL))
        assert level.level == 0
        assert level.template_code == 0x04090001
        assert level.tentative is True
        assert level.start == 1
        assert level.numbering_format.value == NumberFormat.BULLET
        assert level.level_text.value == ""
        assert level.level_text.is_null is None
        assert level.level_alignment == Jc.LEFT
        assert level.suffix == LevelSuffix.SPACE
        assert level.display_as_arabic_numerals is False
        assert level.paragraph_properties.base.indent.start == 720
        assert level.paragraph_properties.base.indent.hanging == 360
        assert level.run_properties.r_pr_bases[0].value.ascii == "Symbol"

    def test_level_requires_ilvl(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            Lvl.from_xml_element(wml_node("<w:lvl/>"))
        assert exc_info.value.attr == "ilvl"

    def test_empty_level_text(self) -> None:
        level = Lvl.from_xml_element(wml_node('<w:lvl w:ilvl="2"><w:lvlText w:val="" w:null="1"/></w:lvl>'))
        assert level.level_text.value == ""
        assert level.level_text.is_null is True


class TestAbstractNum:
    def test_definition(self) -> None:
        node = wml_node(
            '<w:abstractNum w:abstractNumId="3">'
            '<w:nsid w:val="1A2B3C4D"/><w:multiLevelType w:val="hybridMultilevel"/>'
            '<w:tmpl w:val="FEFEFEFE"/><w:name w:val="Bullets"/><w:styleLink w:val="ListBullets"/>'
            f"{BULLET_LEVEL}"
            '<w:lvl w:ilvl="1"><w:numFmt w:val="lowerLetter"/><w:lvlText w:val="%2."/></w:lvl>'
            "</w:abstractNum>"
        )
        abstract_num = AbstractNum.from_xml_element(node)
        assert abstract_num.abstract_num_id == 3
        assert abstract_num.definition_id == 0x1A2B3C4D
        assert abstract_num.multi_level_type == MultiLevelType.HYBRID_MULTI_LEVEL
        assert abstract_num.template == 0xFEFEFEFE
        assert abstract_num.name == "Bullets"
        assert abstract_num.style_link == "ListBullets"
        assert abstract_num.numbering_style_link is None
        assert [lvl.level for lvl in abstract_num.levels] == [0, 1]
        assert abstract_num.find_level(1).level_text.value == "%2."
        assert abstract_num.find_level(5) is None

    def test_nine_levels_allowed(self) -> None:
        node = wml_node(f'<w:abstractNum w:abstractNumId="0">{_levels(9)}</w:abstractNum>')
        assert len(AbstractNum.from_xml_element(node).levels) == 9

    def test_ten_levels_rejected(self) -> None:
        node = wml_node(f'<w:abstractNum w:abstractNumId="0">{_levels(10)}</w:abstractNum>')
        with pytest.raises(LimitViolationError) as exc_info:
            AbstractNum.from_xml_element(node)
        error = exc_info.value
        assert error.violating_node_name == "lvl"
        assert (error.min_occurs, error.max_occurs, error.occurs) == (0, 9, 10)


class TestNum:
    def test_instance_with_overrides(self) -> None:
        node = wml_node(
            '<w:num w:numId="2"><w:abstractNumId w:val="3"/>'
            '<w:lvlOverride w:ilvl="0"><w:startOverride w:val="5"/></w:lvlOverride>'
            '<w:lvlOverride w:ilvl="1"><w:lvl w:ilvl="1"><w:numFmt w:val="decimal"/></w:lvl></w:lvlOverride>'
            "</w:num>"
        )
        num = Num.from_xml_element(node)
        assert num.numbering_id == 2
        assert num.abstract_num_id == 3
        assert num.find_level_override(0).start_override == 5
        assert num.find_level_override(0).level is None
        assert num.find_level_override(1).level.numbering_format.value == NumberFormat.DECIMAL
        assert num.find_level_override(2) is None

    def test_requires_abstract_num_id(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            Num.from_xml_element(wml_node('<w:num w:numId="1"/>'))
        assert exc_info.value.child_node == "abstractNumId"

    def test_ten_overrides_rejected(self) -> None:
        overrides = "".join(f'<w:lvlOverride w:ilvl="{i}"/>' for i in range(10))
        node = wml_node(f'<w:num w:numId="1"><w:abstractNumId w:val="0"/>{overrides}</w:num>')
        with pytest.raises(LimitViolationError) as exc_info:
            Num.from_xml_element(node)
        assert exc_info.value.violating_node_name == "lvlOverride"


class TestPictureBullets:
    def test_vml_picture(self) -> None:
        node = wml_node(
            '<w:numPicBullet w:numPicBulletId="0"><w:pict>'
            '<v:shape id="_x0000_i1025"/><w:movie r:id="rId5"/></w:pict></w:numPicBullet>'
        )
        bullet = NumPicBullet.from_xml_element(node)
        assert bullet.symbol_id == 0
        assert bullet.choice.kind == "pict"
        picture = bullet.choice.value
        assert isinstance(picture, Picture)
        assert picture.movie.id == "rId5"
        assert [n.name for n in picture.vml_elements] == ["v:shape"]

    def test_requires_drawing_or_picture(self) -> None:
        with pytest.raises(MissingChildNodeError):
            NumPicBullet.from_xml_element(wml_node('<w:numPicBullet w:numPicBulletId="0"/>'))


class TestNumbering:
    def test_part(self) -> None:
        node = wml_node(
            "<w:numbering>"
            f'<w:abstractNum w:abstractNumId="0">{BULLET_LEVEL}</w:abstractNum>'
            '<w:num w:numId="1"><w:abstractNumId w:val="0"/></w:num>'
            '<w:numIdMacAtCleanup w:val="4"/>'
            "<w:unknownChild/>"
            "</w:numbering>"
        )
        numbering = Numbering.from_xml_element(node)
        assert numbering.picture_numbering_symbols == []
        assert numbering.find_num(1).abstract_num_id == 0
        assert numbering.find_num(9) is None
        assert numbering.find_abstract_num(0).levels[0].level == 0
        assert numbering.find_abstract_num(1) is None
        assert numbering.numbering_id_mac_at_cleanup == 4
