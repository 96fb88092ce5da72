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

"""Schema-driven shape check of the ``schemas`` config.

The generators tolerate malformed sections by treating them as empty, so a
typo such as ``views: {main: {fields: price}}`` would silently produce an empty
view. This linter reports such shapes against the bundled JSON Schema. It is
advisory: its issues never change what :func:`validate` returns.
"""

from __future__ import annotations

from typing import Any, List

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as SchemaError

from ..models.parsing.yaml_parser import join_yaml_path
from .schema_loader import SCHEMAS_CONFIG, load_schema
from .validator import ValidationIssue


def _issue_path(error: SchemaError) -> str:
    return join_yaml_path("", *error.absolute_path)


def lint_config(config: Any, schema_name: str = SCHEMAS_CONFIG) -> List[ValidationIssue]:
    """Validate ``config`` against a bundled JSON Schema and return every issue, ordered by path."""
    if config is None:
        return []

    validator = Draft7Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.absolute_path])

    issues: List[ValidationIssue] = []
    for error in errors:
        path = _issue_path(error)
        location = path or "/"
        issues.append(ValidationIssue(f"{location}: {error.message}", path))
    return issues
