"""Tests for runs, paragraphs, content groups, SDTs and the document root."""

from typing import ClassVar

import pytest

from docxwml.errors import MissingAttributeError, MissingChildNodeError, NotGroupMemberError
from docxwml.sharedtypes import ConformanceClass
from docxwml.wml.document import (
    BlockLevelElts,
    Body,
    Bookmark,
    Br,
    ContentBlockContent,
    ContentRunContent,
    Document,
    MathContent,
    P,
    PContent,
    R,
    RangeMarkupElements,
    RunInnerContent,
    RunLevelElts,
    RunTrackChange,
    SdtBlock,
    Text,
)
from docxwml.wml.enums import BrType, Jc
from docxwml.wml.properties import PPrBase
from docxwml.xml import XmlNode
from docxwml.xsdtypes import XsdChoice
from tests.conftest import wml_node


class _Wrapper(XsdChoice):
    """A choice whose member parses its first child as run content."""
    members: ClassVar[frozenset[str]] = frozenset({"wrapper"})

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> RunInnerContent:
        return RunInnerContent.from_xml_element(xml_node.child_nodes[0])


def _run_of(content: PContent) -> R:
    """PContent -> ContentRunContent -> R."""
    assert content.kind == "r"
    return content.value.value


class TestParagraph:
    def test_styled_paragraph_with_text(self) -> None:
        node = wml_node(
            '<w:p><w:pPr><w:pStyle w:val="Normal"/><w:jc w:val="start"/></w:pPr>'
            "<w:r><w:t>hello</w:t></w:r></w:p>"
        )
        paragraph = P.from_xml_element(node)

        assert paragraph.properties.base == PPrBase(style="Normal", alignment=Jc.START)
        assert paragraph.properties.run_properties is None
        assert paragraph.properties.section_properties is None
        assert len(paragraph.contents) == 1

        content = paragraph.contents[0]
        assert isinstance(content.value, ContentRunContent)
        run = _run_of(content)
        assert run.run_properties is None
        assert run.run_inner_contents == [RunInnerContent(kind="t", value=Text(text="hello"))]
        assert paragraph.run_revision_id is None

    def test_revision_ids(self) -> None:
        node = wml_node('<w:p w:rsidR="00A1B2C3" w:rsidRDefault="00FF0000" w:rsidP="0000000A"/>')
        paragraph = P.from_xml_element(node)
        assert paragraph.run_revision_id == 0x00A1B2C3
        assert paragraph.run_default_revision_id == 0x00FF0000
        assert paragraph.paragraph_revision_id == 0x0A

    def test_hyperlink_and_simple_field(self) -> None:
        node = wml_node(
            '<w:p><w:hyperlink r:id="rId7" w:history="1"><w:r><w:t>link</w:t></w:r></w:hyperlink>'
            '<w:fldSimple w:instr=" PAGE "><w:r><w:t>1</w:t></w:r></w:fldSimple></w:p>'
        )
        contents = P.from_xml_element(node).contents
        assert [c.kind for c in contents] == ["hyperlink", "fldSimple"]
        hyperlink = contents[0].value
        assert hyperlink.relationship_id == "rId7"
        assert hyperlink.history is True
        assert _run_of(hyperlink.paragraph_contents[0]).run_inner_contents[0].value.text == "link"
        assert contents[1].value.instruction == " PAGE "

    def test_simple_field_requires_instr(self) -> None:
        with pytest.raises(MissingAttributeError):
            P.from_xml_element(wml_node("<w:p><w:fldSimple/></w:p>"))

    def test_tracked_insertion(self) -> None:
        node = wml_node(
            '<w:p><w:ins w:id="4" w:author="Ann" w:date="2024-05-01T10:00:00Z">'
            "<w:r><w:t>new</w:t></w:r></w:ins></w:p>"
        )
        content = P.from_xml_element(node).contents[0]
        assert content.kind == "ins"
        run_level = content.value.value
        assert isinstance(run_level, RunLevelElts)
        insertion = run_level.value
        assert isinstance(insertion, RunTrackChange)
        assert insertion.author == "Ann"
        assert insertion.contents[0].value.run_inner_contents[0].value.text == "new"

    def test_bookmarks_and_proofing_marks_kept_in_order(self) -> None:
        node = wml_node(
            '<w:p><w:bookmarkStart w:id="0" w:name="_Top"/><w:proofErr w:type="spellStart"/>'
            '<w:r><w:t>x</w:t></w:r><w:proofErr w:type="spellEnd"/><w:bookmarkEnd w:id="0"/></w:p>'
        )
        contents = P.from_xml_element(node).contents
        assert [c.kind for c in contents] == ["bookmarkStart", "proofErr", "r", "proofErr", "bookmarkEnd"]
        bookmark = contents[0].value.value.value.value
        assert isinstance(bookmark, Bookmark)
        assert bookmark.name == "_Top"

    def test_bookmark_requires_name(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            P.from_xml_element(wml_node('<w:p><w:bookmarkStart w:id="0"/></w:p>'))
        assert exc_info.value.attr == "name"

    def test_math_is_kept_raw(self) -> None:
        node = wml_node("<w:p><m:oMath><m:r><m:t>x</m:t></m:r></m:oMath></w:p>")
        content = P.from_xml_element(node).contents[0]
        math = content.value.value.value
        assert isinstance(math, MathContent)
        assert isinstance(math.value, XmlNode)
        assert math.value.name == "m:oMath"

    def test_unknown_children_are_skipped(self) -> None:
        node = wml_node("<w:p><w:unknown/><w:r/><w14:thing/></w:p>")
        assert [c.kind for c in P.from_xml_element(node).contents] == ["r"]


class TestRun:
    def test_inner_content_order(self) -> None:
        node = wml_node("<w:r><w:br/><w:t>x</w:t><w:tab/></w:r>")
        run = R.from_xml_element(node)
        assert run.run_inner_contents == [
            RunInnerContent(kind="br", value=Br()),
            RunInnerContent(kind="t", value=Text(text="x")),
            RunInnerContent(kind="tab"),
        ]

    def test_text_wrapping_break(self) -> None:
        node = wml_node('<w:r><w:br w:type="textWrapping" w:clear="all"/></w:r>')
        assert R.from_xml_element(node).run_inner_contents[0].value.type == BrType.TEXT_WRAPPING

    def test_preserved_space(self) -> None:
        node = wml_node('<w:r><w:t xml:space="preserve"> a </w:t></w:r>')
        assert R.from_xml_element(node).run_inner_contents[0].value == Text(text=" a ", xml_space="preserve")

    def test_properties_and_revision_ids(self) -> None:
        node = wml_node('<w:r w:rsidRPr="00000001"><w:rPr><w:b/></w:rPr><w:t>b</w:t></w:r>')
        run = R.from_xml_element(node)
        assert run.run_properties.r_pr_bases[0].kind == "b"
        assert run.run_properties_revision_id == 1

    def test_footnote_reference(self) -> None:
        node = wml_node('<w:r><w:footnoteReference w:id="2"/></w:r>')
        assert R.from_xml_element(node).run_inner_contents[0].value.id == 2

    def test_instr_text(self) -> None:
        node = wml_node('<w:r><w:fldChar w:fldCharType="begin"/><w:instrText>PAGE</w:instrText></w:r>')
        inner = R.from_xml_element(node).run_inner_contents
        assert [i.kind for i in inner] == ["fldChar", "instrText"]
        assert inner[1].value.text == "PAGE"


class TestChoiceTotality:
    @pytest.mark.parametrize(
        "choice",
        [RunInnerContent, RangeMarkupElements, RunLevelElts, ContentRunContent, PContent,
         ContentBlockContent, BlockLevelElts],
    )
    def test_non_members_raise_not_group_member(self, choice: type[XsdChoice]) -> None:
        node = XmlNode(name="w:definitelyNotAMember")
        assert not choice.is_choice_member(node.local_name)
        with pytest.raises(NotGroupMemberError):
            choice.from_xml_element(node)
        assert choice.try_from_xml_element(node) is None

    @pytest.mark.parametrize(
        "choice,local_name",
        [
            (PContent, "r"),
            (PContent, "bookmarkEnd"),
            (PContent, "oMath"),
            (ContentBlockContent, "permEnd"),
            (BlockLevelElts, "p"),
            (BlockLevelElts, "moveToRangeEnd"),
        ],
    )
    def test_nested_group_members_are_members(self, choice: type[XsdChoice], local_name: str) -> None:
        assert choice.is_choice_member(local_name)

    def test_nested_member_keeps_kind(self) -> None:
        node = XmlNode(name="w:bookmarkEnd", attributes={"w:id": "3"})
        content = PContent.from_xml_element(node)
        assert content.kind == "bookmarkEnd"
        assert isinstance(content.value, ContentRunContent)
        assert content.value.kind == "bookmarkEnd"

    def test_error_inside_member_propagates(self) -> None:
        # a member with a broken subtree is an error, not a skipped node
        with pytest.raises(MissingAttributeError):
            PContent.try_from_xml_element(XmlNode(name="w:bookmarkEnd"))

    def test_only_the_outermost_miss_is_skipped(self) -> None:
        node = XmlNode(name="w:wrapper", child_nodes=[XmlNode(name="w:definitelyNotAMember")])
        assert _Wrapper.try_from_xml_element(XmlNode(name="w:other")) is None
        with pytest.raises(NotGroupMemberError):
            _Wrapper.try_from_xml_element(node)


class TestLocalNameInvariance:
    @pytest.mark.parametrize("prefix", ["", "w:", "x:"])
    def test_paragraph(self, prefix: str) -> None:
        node = XmlNode(
            name=f"{prefix}p",
            child_nodes=[
                XmlNode(name=f"{prefix}pPr", child_nodes=[
                    XmlNode(name=f"{prefix}jc", attributes={"w:val": "center"}),
                ]),
                XmlNode(name=f"{prefix}r", child_nodes=[XmlNode(name=f"{prefix}t", text="a")]),
            ],
        )
        paragraph = P.from_xml_element(node)
        assert paragraph.properties.base.alignment == Jc.CENTER
        assert _run_of(paragraph.contents[0]).run_inner_contents[0].value.text == "a"


class TestStructuredDocumentTags:
    def test_block_sdt(self) -> None:
        node = wml_node(
            "<w:sdt><w:sdtPr><w:alias w:val=\"Name\"/><w:tag w:val=\"name\"/><w:id w:val=\"-12\"/>"
            "<w:lock w:val=\"sdtLocked\"/><w:showingPlcHdr/><w:text w:multiLine=\"1\"/></w:sdtPr>"
            "<w:sdtContent><w:p><w:r><w:t>Click here</w:t></w:r></w:p></w:sdtContent></w:sdt>"
        )
        sdt = SdtBlock.from_xml_element(node)
        assert sdt.properties.alias == "Name"
        assert sdt.properties.id == -12
        assert sdt.properties.showing_placeholder_header is True
        assert sdt.properties.control_choice.kind == "text"
        assert sdt.properties.control_choice.value.multi_line is True
        assert [c.kind for c in sdt.content.contents] == ["p"]

    def test_run_sdt_inside_paragraph(self) -> None:
        node = wml_node(
            "<w:p><w:sdt><w:sdtPr><w:richText/></w:sdtPr>"
            "<w:sdtContent><w:r><w:t>x</w:t></w:r></w:sdtContent></w:sdt></w:p>"
        )
        sdt = P.from_xml_element(node).contents[0].value.value
        assert sdt.properties.control_choice.kind == "richText"
        assert sdt.properties.control_choice.value is None
        assert [c.kind for c in sdt.content.contents] == ["r"]

    def test_data_binding_requires_xpath(self) -> None:
        node = wml_node('<w:sdt><w:sdtPr><w:dataBinding w:storeItemID="{1}"/></w:sdtPr></w:sdt>')
        with pytest.raises(MissingAttributeError) as exc_info:
            SdtBlock.from_xml_element(node)
        assert exc_info.value.attr == "xpath"


class TestBodyAndDocument:
    def test_body_order_and_section(self) -> None:
        node = wml_node(
            "<w:body><w:p/><w:altChunk r:id=\"rId3\"/><w:p/>"
            '<w:sectPr><w:pgSz w:w="12240" w:h="15840"/></w:sectPr></w:body>'
        )
        body = Body.from_xml_element(node)
        assert [b.kind for b in body.block_level_elements] == ["p", "altChunk", "p"]
        assert body.block_level_elements[1].value.relationship_id == "rId3"
        assert body.section_properties.contents.page_size.width == 12240

    def test_document(self) -> None:
        node = wml_node(
            '<w:document w:conformance="transitional"><w:background w:color="FFFFFF"/>'
            "<w:body><w:p/></w:body></w:document>"
        )
        document = Document.from_xml_element(node)
        assert document.conformance == ConformanceClass.TRANSITIONAL
        assert document.base.background.color.rgb == (0xFF, 0xFF, 0xFF)
        assert len(document.body.block_level_elements) == 1

    def test_document_without_body(self) -> None:
        with pytest.raises(MissingChildNodeError) as exc_info:
            Document.from_xml_element(wml_node("<w:document/>"))
        assert exc_info.value.child_node == "body"

    def test_error_deep_in_tree_fails_the_part(self) -> None:
        node = wml_node('<w:document><w:body><w:p><w:r><w:b w:val="maybe"/></w:r></w:p></w:body></w:document>')
        # w:b directly in a run is not run content and is skipped
        Document.from_xml_element(node)
        node = wml_node(
            '<w:document><w:body><w:p><w:r><w:rPr><w:b w:val="maybe"/></w:rPr></w:r></w:p></w:body></w:document>'
        )
        with pytest.raises(ValueError):
            Document.from_xml_element(node)
