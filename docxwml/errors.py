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

"""Error taxonomy raised by the node builders.

Every error derives from DocxParseError (itself a ValueError), so callers can
catch a whole part failing with a single except clause. Each error carries
enough context (node name, attribute, group, limits) to locate the failure
in the source XML.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DocxParseError(ValueError):
    """Base class of every error raised while building the document model."""


# ── Structural errors ────────────────────────────────────────────────────────

class MissingAttributeError(DocxParseError):
    """An xml element doesn't have an attribute marked as required in the schema."""

    def __init__(self, node_name: str, attr: str) -> None:
        self.node_name = node_name
        self.attr = attr
        super().__init__(
            f"Xml element '{node_name}' is missing a required attribute: {attr}"
        )


class MissingChildNodeError(DocxParseError):
    """An xml element doesn't have a child node marked as required in the schema."""

    def __init__(self, node_name: str, child_node: str) -> None:
        self.node_name = node_name
        self.child_node = child_node
        super().__init__(
            f"Xml element '{node_name}' is missing a required child element: {child_node}"
        )


class NotGroupMemberError(DocxParseError):
    """A node was dispatched through a choice/group that doesn't recognize it.

    Choice parsers raise this as a sentinel; try_from_xml_element turns it
    into None so list builders can skip unrelated children.
    """

    def __init__(self, node_name: str, group: str) -> None:
        self.node_name = node_name
        self.group = group
        super().__init__(f"XmlNode '{node_name}' is not a member of {group} group")


class MaxOccurs(str, Enum):
    UNBOUNDED = "unbounded"


class LimitViolationError(DocxParseError):
    """A child count fell outside the [minOccurs, maxOccurs] range of the schema."""

    def __init__(
        self,
        node_name: str,
        violating_node_name: str,
        min_occurs: int,
        max_occurs: int | MaxOccurs,
        occurs: int,
    ) -> None:
        self.node_name = node_name
        self.violating_node_name = violating_node_name
        self.min_occurs = min_occurs
        self.max_occurs = max_occurs
        self.occurs = occurs
        max_text = max_occurs.value if isinstance(max_occurs, MaxOccurs) else max_occurs
        super().__init__(
            f"Element {node_name} violates the limits of occurrence in element: "
            f"{violating_node_name}. minOccurs: {min_occurs}, maxOccurs: {max_text}, "
            f"occurrence: {occurs}"
        )


class InvalidXmlError(DocxParseError):
    """The xml text handed to the tree builder could not be parsed."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        message = "Invalid xml document"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# ── Value errors ─────────────────────────────────────────────────────────────

class ParseBoolError(DocxParseError):
    """An on/off attribute had a value outside of true, false, 1, 0."""

    def __init__(self, attr_value: str) -> None:
        self.attr_value = attr_value
        super().__init__(f"Xml attribute is not a valid bool value: {attr_value}")


class ParseEnumError(DocxParseError):
    def __init__(self, enum_name: str, value: str | None = None) -> None:
        self.enum_name = enum_name
        self.value = value
        message = f"Cannot convert string to {enum_name}"
        if value is not None:
            message = f"{message}: {value!r}"
        super().__init__(message)


class PatternRestrictionError(DocxParseError):
    """A string doesn't match the pattern restricting its simple type."""

    def __init__(self, value: str, pattern: str) -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(f"string {value!r} doesn't match pattern {pattern}")


@dataclass(frozen=True)
class StringLengthMismatch:
    required: int
    provided: int


class ParseHexColorRGBError(DocxParseError):
    """A hex color wasn't six hex digits.

    mismatch is set when the length was wrong; otherwise the string contained
    non-hex characters.
    """

    def __init__(self, value: str, mismatch: StringLengthMismatch | None = None) -> None:
        self.value = value
        self.mismatch = mismatch
        if mismatch is not None:
            message = (
                f"length of string should be {mismatch.required} "
                f"but {mismatch.provided} is provided"
            )
        else:
            message = f"invalid hex digits in color: {value!r}"
        super().__init__(message)


class ParseHexColorError(DocxParseError):
    """Union of the enum (auto) and RGB failures of a HexColor value.

    The underlying ParseEnumError or ParseHexColorRGBError is chained as
    __cause__.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Cannot convert string to HexColor: {value!r}")


class AdjustParseError(DocxParseError):
    """Parsing an AdjCoordinate or AdjAngle has failed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"AdjCoordinate or AdjAngle parse error: {value!r}")
