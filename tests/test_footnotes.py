"""Tests for the footnotes and endnotes parts."""

import pytest

from docxwml.errors import LimitViolationError, MissingAttributeError
from docxwml.wml.footnotes import Endnotes, FtnEdn, FtnEdnType, Footnotes
from tests.conftest import wml_node

SEPARATORS = (
    '<w:footnote w:type="separator" w:id="-1"><w:p><w:r><w:separator/></w:r></w:p></w:footnote>'
    '<w:footnote w:type="continuationSeparator" w:id="0"><w:p><w:r><w:continuationSeparator/></w:r></w:p></w:footnote>'
)


class TestFootnotes:
    def test_separators_and_note(self) -> None:
        node = wml_node(
            f"<w:footnotes>{SEPARATORS}"
            '<w:footnote w:id="1"><w:p><w:r><w:footnoteRef/></w:r><w:r><w:t>Source.</w:t></w:r></w:p></w:footnote>'
            "</w:footnotes>"
        )
        footnotes = Footnotes.from_xml_element(node)
        assert [n.id for n in footnotes.notes] == [-1, 0, 1]
        assert footnotes.notes[0].type == FtnEdnType.SEPARATOR
        assert footnotes.notes[1].type == FtnEdnType.CONTINUATION_SEPARATOR
        assert footnotes.notes[2].type is None

    def test_find_by_id(self) -> None:
        footnotes = Footnotes.from_xml_element(wml_node(f"<w:footnotes>{SEPARATORS}</w:footnotes>"))
        assert footnotes.find_by_id(0).type == FtnEdnType.CONTINUATION_SEPARATOR
        assert footnotes.find_by_id(42) is None

    def test_endnotes_only_read_endnotes(self) -> None:
        node = wml_node(
            '<w:endnotes><w:endnote w:id="1"><w:p/></w:endnote>'
            '<w:footnote w:id="2"><w:p/></w:footnote></w:endnotes>'
        )
        endnotes = Endnotes.from_xml_element(node)
        assert [n.id for n in endnotes.notes] == [1]

    def test_note_needs_content(self) -> None:
        with pytest.raises(LimitViolationError):
            FtnEdn.from_xml_element(wml_node('<w:footnote w:id="3"/>'))

    def test_note_needs_id(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            FtnEdn.from_xml_element(wml_node("<w:footnote><w:p/></w:footnote>"))
        assert exc_info.value.attr == "id"

    def test_note_can_hold_a_table(self) -> None:
        node = wml_node(
            '<w:footnote w:id="4"><w:tbl><w:tblPr/><w:tblGrid/></w:tbl><w:p/></w:footnote>'
        )
        assert [b.kind for b in FtnEdn.from_xml_element(node).block_level_elements] == ["tbl", "p"]
