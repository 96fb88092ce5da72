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

"""Generator for ``dataset_schema.json``.

Dataset fields are never marked required: fields injected from field groups
are optional by nature and must validate when a run does not produce them.

Views may reference fields that do not exist. :func:`validate` reports that as
an error, but this generator does not rely on validation having run: unknown
names are left out of ``display.properties`` (and logged when ``verbose``)
while ``transformation.fields`` keeps the declared list untouched.
"""

import logging
from typing import Any, Dict, Optional

from ..fields.aggregator import get_all_dataset_fields
from ..fields.normalizer import describe_field, title_case
from ..models.documents import (
    ACTOR_SPECIFICATION_VERSION,
    JSON_SCHEMA_DRAFT,
    DatasetFieldSchema,
    DatasetSchema,
    DisplayProperty,
    ViewSchema,
)
from ..models.field import AggregatedFields, FieldDeclaration
from ..utils import as_list, as_mapping, section
from ..utils.field_types import ARRAY_TYPE, NULL_TYPE, OBJECT_TYPE, STRING_TYPE

logger = logging.getLogger(__name__)

DEFAULT_VIEW_COMPONENT = "table"


def build_field_schema(field_name: str, declaration: FieldDeclaration) -> DatasetFieldSchema:
    descriptor = describe_field(field_name, declaration)
    nullable = declaration.get("nullable") is not False

    field_schema: DatasetFieldSchema = {
        "type": [descriptor.type, NULL_TYPE] if nullable else descriptor.type,
        "title": descriptor.title,
        "description": descriptor.description,
    }
    if descriptor.type == ARRAY_TYPE:
        field_schema["items"] = {"type": declaration.get("itemType") or STRING_TYPE}
    return field_schema


def build_view(
    view_name: str,
    view_config: Any,
    all_fields: AggregatedFields,
    verbose: bool = False,
) -> ViewSchema:
    view_config = as_mapping(view_config)
    view_fields = as_list(view_config.get("fields"))

    display_properties: Dict[str, DisplayProperty] = {}
    for field_name in view_fields:
        if field_name not in all_fields:
            if verbose:
                logger.warning(f"Field '{field_name}' in view '{view_name}' not found in fields definition")
            continue

        descriptor = describe_field(field_name, all_fields[field_name])
        display_properties[field_name] = {
            "label": descriptor.label,
            "format": descriptor.format,
        }

    return {
        "title": view_config.get("title") or title_case(view_name),
        "transformation": {
            "fields": view_fields,
        },
        "display": {
            "component": view_config.get("component") or DEFAULT_VIEW_COMPONENT,
            "properties": display_properties,
        },
    }


def generate_dataset_schema(
    config: Any,
    verbose: bool = False,
    all_fields: Optional[AggregatedFields] = None,
) -> DatasetSchema:
    """Build ``dataset_schema.json`` from the ``dataset`` section.

    Args:
        config: The ``schemas`` config
        verbose: Log a warning for every view field that cannot be resolved
        all_fields: Pre-aggregated dataset fields; aggregated from ``config`` when omitted
    """
    if all_fields is None:
        all_fields = get_all_dataset_fields(config)
    views = section(config, "dataset", "views")

    properties: Dict[str, DatasetFieldSchema] = {
        name: build_field_schema(name, declaration) for name, declaration in all_fields.items()
    }

    return {
        "actorSpecification": ACTOR_SPECIFICATION_VERSION,
        "fields": {
            "$schema": JSON_SCHEMA_DRAFT,
            "type": OBJECT_TYPE,
            "properties": properties,
        },
        "views": {
            view_name: build_view(view_name, view_config, all_fields, verbose)
            for view_name, view_config in views.items()
        },
    }
