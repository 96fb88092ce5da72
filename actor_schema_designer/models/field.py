# Copyright 2026 The actor-schema-designer Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

FieldDeclaration = Dict[str, Any]


@dataclass(frozen=True)
class FieldDescriptor:
    """Fully resolved form of a sparse field declaration."""

    name: str
    type: str
    format: str
    title: str
    description: str
    editor: str
    label: str
    constraints: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldCollision:
    """A field name declared more than once while aggregating dataset fields.

    ``previous_origin``/``winning_origin`` are group names, or ``None`` for the
    base ``dataset.fields`` mapping.
    """

    name: str
    previous_origin: Optional[str]
    winning_origin: Optional[str]

    @property
    def message(self) -> str:
        return (
            f"Dataset field '{self.name}' from {_origin_label(self.winning_origin)} overrides "
            f"the definition from {_origin_label(self.previous_origin)}"
        )


def _origin_label(origin: Optional[str]) -> str:
    return f"field_group '{origin}'" if origin is not None else "dataset.fields"


class AggregatedFields(Mapping):
    """Read-only mapping of dataset field name to declaration.

    Provenance lives in a side table so that generators can never leak it into
    a document by passing a declaration through.
    """

    def __init__(
        self,
        declarations: Dict[str, FieldDeclaration],
        origins: Dict[str, str],
        collisions: Optional[List[FieldCollision]] = None,
    ):
        self._declarations = dict(declarations)
        self._origins = dict(origins)
        self._collisions: Tuple[FieldCollision, ...] = tuple(collisions or ())

    def __getitem__(self, name: str) -> FieldDeclaration:
        return self._declarations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._declarations
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"AggregatedFields({list(self._declarations)!r}, origins={self._origins!r})"

    @property
    def origins(self) -> Dict[str, str]:
        return dict(self._origins)

    @property
    def collisions(self) -> Tuple[FieldCollision, ...]:
        return self._collisions

    def origin_of(self, name: str) -> Optional[str]:
        """Return the field-group a field came from, or ``None`` for base fields."""
        return self._origins.get(name)

    def is_optional(self, name: str) -> bool:
        return name in self._origins
