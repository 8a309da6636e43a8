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

"""Shared test infrastructure for building XmlNode trees from XML snippets.

Provides wml_node (parse a fragment with the usual WordprocessingML
namespace prefixes pre-declared on its root) and make_docx (zip a set of
parts into an in-memory .docx).
"""

import re
import zipfile
from io import BytesIO

from docxwml.xml import NAMESPACES, XmlNode

NS_DECLARATIONS = " ".join(
    f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items() if prefix != "xml"
)

_ROOT_TAG = re.compile(r"^\s*<[A-Za-z_][\w.:-]*")


def wml_node(fragment: str) -> XmlNode:
    """Parse fragment, declaring w:, r:, wp:, a: (and friends) on its root."""
    match = _ROOT_TAG.match(fragment)
    assert match is not None, f"not an element: {fragment!r}"
    end = match.end()
    return XmlNode.from_str(f"{fragment[:end]} {NS_DECLARATIONS}{fragment[end:]}")


def wml_part(root_name: str, inner: str) -> bytes:
    """A complete part document such as word/styles.xml."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f"<w:{root_name} {NS_DECLARATIONS}>{inner}</w:{root_name}>"
    ).encode("utf-8")


def make_docx(parts: dict[str, bytes]) -> bytes:
    buf = BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in parts.items():
            zf.writestr(name, data)
    return buf.getvalue()
