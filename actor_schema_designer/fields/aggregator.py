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

import logging
from typing import Any, Dict, List, Optional

from ..models.field import AggregatedFields, FieldCollision, FieldDeclaration
from ..utils import as_mapping, section

logger = logging.getLogger(__name__)


def field_declarations(fields: Any) -> Dict[str, FieldDeclaration]:
    """Normalize a ``{name: declaration}`` mapping.

    A field written without a body (``price:``) parses as ``None`` and is kept
    as the empty declaration.
    """
    return {name: as_mapping(declaration) for name, declaration in as_mapping(fields).items()}


def get_all_dataset_fields(config: Any) -> AggregatedFields:
    """Merge ``dataset.fields`` with every group in ``dataset.field_groups``.

    Groups are merged in declaration order and the last writer wins, so a group
    field silently replaces a base field of the same name. Each such overwrite
    is recorded in ``AggregatedFields.collisions``.
    """
    dataset = section(config, "dataset")
    declarations = field_declarations(dataset.get("fields"))
    origins: Dict[str, str] = {}
    collisions: List[FieldCollision] = []

    for group_name, group_fields in as_mapping(dataset.get("field_groups")).items():
        for field_name, declaration in field_declarations(group_fields).items():
            if field_name in declarations:
                previous: Optional[str] = origins.get(field_name)
                collisions.append(FieldCollision(field_name, previous, group_name))
                logger.debug(collisions[-1].message)
            declarations[field_name] = declaration
            origins[field_name] = group_name

    return AggregatedFields(declarations, origins, collisions)


def get_input_group_mapping(config: Any) -> Dict[str, Any]:
    """Map input field names to the field_group they reference."""
    fields = field_declarations(section(config, "input").get("fields"))
    return {name: decl["group"] for name, decl in fields.items() if decl.get("group")}
