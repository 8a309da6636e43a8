"""Tests for the XmlNode tree and its attribute/child helpers."""

import pytest

from docxwml.errors import InvalidXmlError, MissingAttributeError, ParseBoolError
from docxwml.xml import NAMESPACES, XmlNode, parse_xml_bool
from tests.conftest import wml_node

W = NAMESPACES["w"]


class TestParseXmlBool:
    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("false", False), ("0", False)])
    def test_accepted_values(self, value: str, expected: bool) -> None:
        assert parse_xml_bool(value) is expected

    @pytest.mark.parametrize("value", ["xyz", "True", "on", "", "2"])
    def test_rejects_anything_else(self, value: str) -> None:
        with pytest.raises(ParseBoolError) as exc_info:
            parse_xml_bool(value)
        assert exc_info.value.attr_value == value


class TestLocalName:
    def test_strips_prefix(self) -> None:
        assert XmlNode(name="w:p").local_name == "p"

    def test_unprefixed_name_is_its_own_local_name(self) -> None:
        assert XmlNode(name="p").local_name == "p"

    def test_only_first_colon_splits(self) -> None:
        assert XmlNode(name="a:b:c").local_name == "b:c"


class TestAttributes:
    def test_get_val_attribute(self) -> None:
        node = XmlNode(name="w:jc", attributes={"w:val": "center"})
        assert node.get_val_attribute() == "center"

    def test_missing_val_reports_unprefixed_name(self) -> None:
        node = XmlNode(name="w:jc")
        with pytest.raises(MissingAttributeError) as exc_info:
            node.get_val_attribute()
        assert exc_info.value.attr == "val"
        assert exc_info.value.node_name == "w:jc"

    def test_parse_attribute_absent_is_none(self) -> None:
        node = XmlNode(name="w:sz")
        assert node.parse_attribute("w:val", int) is None

    def test_parse_attribute_applies_parser(self) -> None:
        node = XmlNode(name="w:sz", attributes={"w:val": "24"})
        assert node.parse_attribute("w:val", int) == 24


class TestFromBytes:
    def test_keeps_prefixes_on_names_and_attributes(self) -> None:
        node = wml_node('<w:p><w:r w:rsidR="00AB12CD"><w:t xml:space="preserve"> hi </w:t></w:r></w:p>')
        assert node.name == "w:p"
        run = node.child_nodes[0]
        assert run.name == "w:r"
        assert run.attributes["w:rsidR"] == "00AB12CD"
        text = run.child_nodes[0]
        assert text.attributes["xml:space"] == "preserve"
        assert text.text == " hi "

    def test_namespace_declarations_are_not_attributes(self) -> None:
        node = XmlNode.from_str(f'<w:p xmlns:w="{W}"><w:r xmlns:x="urn:x" w:rsidR="01"/></w:p>')
        assert node.attributes == {}
        assert node.child_nodes[0].attributes == {"w:rsidR": "01"}

    def test_default_namespace_names_are_unprefixed(self) -> None:
        node = XmlNode.from_str('<Relationships xmlns="urn:rels"><Relationship Id="rId1"/></Relationships>')
        assert node.name == "Relationships"
        assert node.child_nodes[0].attributes == {"Id": "rId1"}

    def test_container_has_no_text(self) -> None:
        node = wml_node("<w:body><w:p/></w:body>")
        assert node.text is None

    def test_children_in_document_order(self) -> None:
        node = wml_node("<w:r><w:br/><w:t>x</w:t><w:tab/></w:r>")
        assert [c.local_name for c in node.child_nodes] == ["br", "t", "tab"]

    def test_find_child_and_children(self) -> None:
        node = wml_node("<w:tabs><w:tab w:val=\"left\" w:pos=\"1\"/><w:tab w:val=\"right\" w:pos=\"2\"/></w:tabs>")
        assert node.find_child("tab").attributes["w:pos"] == "1"
        assert len(node.find_children("tab")) == 2
        assert node.find_child("missing") is None

    def test_malformed_xml_raises_invalid_xml(self) -> None:
        with pytest.raises(InvalidXmlError):
            XmlNode.from_str(f'<w:p xmlns:w="{W}"><w:r></w:p>')

    def test_entities_are_not_expanded(self) -> None:
        xml = (
            '<!DOCTYPE d [<!ENTITY e "expanded">]>'
            f'<w:t xmlns:w="{W}">&e;</w:t>'
        )
        node = XmlNode.from_str(xml)
        assert node.text != "expanded"
