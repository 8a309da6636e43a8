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

"""Right-biased property merging, used to cascade style properties into
direct formatting.

``lhs.update_with(rhs)`` returns a new model in which every field holds the
value from rhs when rhs sets it, and lhs's value otherwise. Fields that are
themselves mergeable (a Color inside run properties, say) are merged
recursively instead of replaced. ``False`` and ``0`` count as set.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

U = TypeVar("U", bound="Update")


def update_options(lhs: Any, rhs: Any) -> Any:
    if lhs is not None and rhs is not None and isinstance(lhs, Update):
        return lhs.update_with(rhs)
    return rhs if rhs is not None else lhs


class Update(BaseModel):
    """Mixin for models that take part in property inheritance."""

    def update_with(self: U, other: U) -> U:
        merged = {
            name: update_options(getattr(self, name), getattr(other, name))
            for name in type(self).model_fields
        }
        return self.model_copy(update=merged)
