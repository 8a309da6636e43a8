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

"""Implementation-independent XML node tree — built from lxml, consumed by
every node builder.

Builders never see lxml elements. They work on XmlNode, whose names and
attribute keys keep the namespace prefix used in the source document
("w:p", "w:val", "r:id", "xml:space").
"""

from __future__ import annotations

from typing import Callable, TypeVar

from lxml import etree
from pydantic import BaseModel, Field

from docxwml.errors import InvalidXmlError, MissingAttributeError, ParseBoolError

T = TypeVar("T")

# OOXML namespaces (canonical source)
NAMESPACES = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
    "m": "http://schemas.openxmlformats.org/officeDocument/2006/math",
    "mc": "http://schemas.openxmlformats.org/markup-compatibility/2006",
    "wps": "http://schemas.microsoft.com/office/word/2010/wordprocessingShape",
    "wpg": "http://schemas.microsoft.com/office/word/2010/wordprocessingGroup",
    "wpc": "http://schemas.microsoft.com/office/word/2010/wordprocessingCanvas",
    "w14": "http://schemas.microsoft.com/office/word/2010/wordml",
    "v": "urn:schemas-microsoft-com:vml",
    "o": "urn:schemas-microsoft-com:office:office",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

# Reverse mapping: full URI → prefix
_URI_TO_PREFIX = {v: k for k, v in NAMESPACES.items()}

# No entity expansion, no DTD loading, no network access.
SECURE_PARSER = etree.XMLParser(
    resolve_entities=False,
    load_dtd=False,
    dtd_validation=False,
    no_network=True,
    recover=False,
    huge_tree=False,
)


def parse_xml_bool(value: str) -> bool:
    """Parse an xsd:boolean attribute value (true, false, 1, 0)."""
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise ParseBoolError(value)


class XmlNode(BaseModel):
    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    child_nodes: list[XmlNode] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"name: {self.name}"

    @property
    def local_name(self) -> str:
        """The node name without its namespace prefix."""
        _, sep, local = self.name.partition(":")
        return local if sep else self.name

    # ── Attribute access ─────────────────────────────────────────────────────

    def get_attribute(self, key: str) -> str:
        """Return a required attribute or raise MissingAttributeError.

        The error names the attribute without its prefix ("val" for "w:val").
        """
        try:
            return self.attributes[key]
        except KeyError:
            _, sep, local = key.partition(":")
            raise MissingAttributeError(self.name, local if sep else key) from None

    def get_val_attribute(self) -> str:
        return self.get_attribute("w:val")

    def parse_attribute(self, key: str, parser: Callable[[str], T]) -> T | None:
        """Parse an optional attribute, returning None when it is absent."""
        value = self.attributes.get(key)
        if value is None:
            return None
        return parser(value)

    # ── Child access ─────────────────────────────────────────────────────────

    def find_child(self, local_name: str) -> XmlNode | None:
        """Return the first child with the given local name."""
        for child_node in self.child_nodes:
            if child_node.local_name == local_name:
                return child_node
        return None

    def find_children(self, local_name: str) -> list[XmlNode]:
        return [c for c in self.child_nodes if c.local_name == local_name]

    # ── Construction from lxml ───────────────────────────────────────────────

    @classmethod
    def from_element(cls, element: etree._Element) -> XmlNode:
        """Convert an lxml element (and its subtree) into an XmlNode."""
        prefixes = {uri: prefix for prefix, uri in element.nsmap.items() if prefix}

        # namespace declarations live in nsmap, not in attrib
        attributes = {_qualified_name(key, prefixes): value for key, value in element.attrib.items()}

        children: list[XmlNode] = []
        texts = [element.text] if element.text else []
        for child in element:
            if isinstance(child.tag, str):
                children.append(cls.from_element(child))
            if child.tail:
                texts.append(child.tail)

        return cls(
            name=_qualified_name(element.tag, prefixes, element.prefix),
            attributes=attributes,
            text="".join(texts) if texts else None,
            child_nodes=children,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> XmlNode:
        """Parse raw XML bytes (e.g. a part read from a .docx archive)."""
        try:
            root = etree.fromstring(data, SECURE_PARSER)
        except etree.XMLSyntaxError as e:
            raise InvalidXmlError(str(e)) from e
        return cls.from_element(root)

    @classmethod
    def from_str(cls, xml_string: str) -> XmlNode:
        return cls.from_bytes(xml_string.encode("utf-8"))


def _qualified_name(
    tag: str, prefixes: dict[str, str], own_prefix: str | None = None
) -> str:
    """Convert Clark notation {uri}local to prefix:local."""
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    prefix = own_prefix or prefixes.get(uri) or _URI_TO_PREFIX.get(uri)
    if prefix:
        return f"{prefix}:{local}"
    return local
