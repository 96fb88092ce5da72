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

"""Generate actor schema files from the ``schemas`` section of a unified spec file.

The engine is a set of pure functions (``fields``, ``validation``, ``generators``);
``manager`` and ``file_io`` are the thin adapters that persist the documents.
"""

__version__ = "0.3.0"

from .fields import get_all_dataset_fields, get_input_group_mapping
from .generators import (
    GeneratedSchemas,
    generate_actor_json,
    generate_all,
    generate_dataset_schema,
    generate_default_input,
    generate_input_schema,
    generate_output_schema,
)
from .manager import ActorSchemaManager
from .validation import ValidationResult, validate

__all__ = [
    "ActorSchemaManager",
    "GeneratedSchemas",
    "ValidationResult",
    "generate_actor_json",
    "generate_all",
    "generate_dataset_schema",
    "generate_default_input",
    "generate_input_schema",
    "generate_output_schema",
    "get_all_dataset_fields",
    "get_input_group_mapping",
    "validate",
]
