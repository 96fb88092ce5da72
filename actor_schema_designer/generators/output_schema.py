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

from ..models.documents import OUTPUT_SCHEMA_VERSION, OutputSchema
from ..utils import section

DEFAULT_OUTPUT_TITLE = "Scraper Results"
DEFAULT_OUTPUT_DESCRIPTION = "Scraper Results"
DATASET_ITEMS_TEMPLATE = "{{links.apiDefaultDatasetUrl}}/items"


def default_output_properties() -> Dict[str, Any]:
    """Single ``results`` property linking to the default dataset items."""
    return {
        "results": {
            "type": "string",
            "title": "Results",
            "template": DATASET_ITEMS_TEMPLATE,
        }
    }


def _is_unset(value: Any) -> bool:
    # An empty mapping counts as declared; only null and empty scalars fall back.
    return value is None or value is False or value == "" or value == 0


def generate_output_schema(config: Any) -> OutputSchema:
    output = section(config, "output")
    properties = output.get("properties")

    return {
        "actorOutputSchemaVersion": OUTPUT_SCHEMA_VERSION,
        "title": output.get("title") or DEFAULT_OUTPUT_TITLE,
        "description": output.get("description") or DEFAULT_OUTPUT_DESCRIPTION,
        "properties": default_output_properties() if _is_unset(properties) else copy.deepcopy(properties),
    }
