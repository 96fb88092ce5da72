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

import copy
from typing import Any, Dict

from ..fields.aggregator import field_declarations
from ..fields.normalizer import describe_field, infer_input_type, title_case
from ..models.documents import INPUT_SCHEMA_VERSION, InputProperty, InputSchema
from ..utils import as_list, section
from ..utils.field_types import OBJECT_TYPE

DEFAULT_INPUT_TITLE = "Actor Input"


def build_input_property(field_name: str, declaration: Dict[str, Any]) -> InputProperty:
    """Build one ``input_schema.json`` property; constraints are copied only when declared."""
    descriptor = describe_field(field_name, declaration)
    prop: InputProperty = {
        "title": descriptor.title,
        "type": infer_input_type(declaration),
        "description": descriptor.description,
        "editor": descriptor.editor,
    }
    for key, value in descriptor.constraints.items():
        prop[key] = copy.deepcopy(value)
    return prop


def input_schema_title(config: Any) -> str:
    actor = section(config, "actor")
    if actor.get("title"):
        return actor["title"]
    if actor.get("name"):
        return title_case(actor["name"])
    return DEFAULT_INPUT_TITLE


def generate_input_schema(config: Any) -> InputSchema:
    """Build ``input_schema.json`` from the ``input`` section."""
    input_config = section(config, "input")

    properties: Dict[str, InputProperty] = {
        name: build_input_property(name, declaration)
        for name, declaration in field_declarations(input_config.get("fields")).items()
    }

    return {
        "title": input_schema_title(config),
        "type": OBJECT_TYPE,
        "schemaVersion": INPUT_SCHEMA_VERSION,
        "properties": properties,
        "required": as_list(input_config.get("required")),
    }
