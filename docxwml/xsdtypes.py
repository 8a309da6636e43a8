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

"""Building blocks shared by every schema type — closed enumerations and the
xsd:choice / xsd:group dispatcher.

A choice type lists the local names it accepts directly (``members``) and the
nested groups whose members it also accepts (``member_groups``). Parsing a
direct member goes through ``parse_member``; parsing a nested group's member
stores the nested choice as the value. Either way ``kind`` is the local name
of the node the value was built from.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from docxwml.errors import NotGroupMemberError, ParseEnumError
from docxwml.xml import XmlNode

E = TypeVar("E", bound="XsdEnum")
C = TypeVar("C", bound="XsdChoice")


class XsdEnum(str, Enum):
    """A closed xsd enumeration. Member values are the exact XML strings."""

    @classmethod
    def parse(cls: type[E], value: str) -> E:
        try:
            return cls(value)
        except ValueError:
            raise ParseEnumError(cls.__name__, value) from None

    @classmethod
    def parse_val(cls: type[E], xml_node: XmlNode) -> E:
        """Parse the required w:val attribute of xml_node."""
        return cls.parse(xml_node.get_val_attribute())


class XsdChoice(BaseModel):
    kind: str
    value: Any = None

    members: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def member_groups(cls) -> tuple[type[XsdChoice], ...]:
        """Nested groups whose members are members of this choice too."""
        return ()

    @classmethod
    def is_choice_member(cls, local_name: str) -> bool:
        if local_name in cls.members:
            return True
        return any(group.is_choice_member(local_name) for group in cls.member_groups())

    @classmethod
    def parse_member(cls, xml_node: XmlNode) -> Any:
        """Build the value of a direct member. Markers return None."""
        return None

    @classmethod
    def from_xml_element(cls: type[C], xml_node: XmlNode) -> C:
        local_name = xml_node.local_name
        if local_name in cls.members:
            return cls(kind=local_name, value=cls.parse_member(xml_node))

        for group in cls.member_groups():
            if group.is_choice_member(local_name):
                return cls(kind=local_name, value=group.from_xml_element(xml_node))

        raise NotGroupMemberError(xml_node.name, cls.__name__)

    @classmethod
    def try_from_xml_element(cls: type[C], xml_node: XmlNode) -> C | None:
        """Like from_xml_element, but None for nodes outside the choice.

        Every other error propagates, including a NotGroupMemberError raised
        deeper in the subtree of a member node.
        """
        if not cls.is_choice_member(xml_node.local_name):
            return None
        return cls.from_xml_element(xml_node)

    @classmethod
    def list_from_children(cls: type[C], xml_node: XmlNode) -> list[C]:
        """Parse every child of xml_node that belongs to this choice, in order."""
        return [
            item
            for item in (cls.try_from_xml_element(c) for c in xml_node.child_nodes)
            if item is not None
        ]
