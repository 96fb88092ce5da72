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

"""Cross-reference validation of the unified ``schemas`` config.

Every check runs and every failure is reported; nothing here raises. Whether
to abort generation on an invalid result is the caller's decision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional

from ..fields.aggregator import field_declarations, get_all_dataset_fields
from ..models.parsing.yaml_parser import join_yaml_path
from ..utils import as_list, as_mapping, section

EMPTY_CONFIG_ERROR = "Config is empty or undefined"
MISSING_ACTOR_NAME_ERROR = "Missing required field: schemas.actor.name"

MAX_CATEGORIES = 3
VALID_CATEGORIES = (
    'AI', 'AGENTS', 'AUTOMATION', 'BUSINESS', 'COVID_19', 'DEVELOPER_EXAMPLES', 'DEVELOPER_TOOLS', 'ECOMMERCE',
    'FOR_CREATORS', 'GAMES', 'JOBS', 'LEAD_GENERATION', 'MARKETING', 'NEWS', 'SEO_TOOLS', 'SOCIAL_MEDIA',
    'TRAVEL', 'VIDEOS', 'REAL_ESTATE', 'SPORTS', 'EDUCATION', 'INTEGRATIONS', 'OTHER', 'OPEN_SOURCE', 'MCP_SERVERS',
)


@dataclass(frozen=True)
class ValidationIssue:
    message: str
    # Location relative to the ``schemas`` section, e.g. "/dataset/views/main/fields/2".
    yaml_path: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue]) -> "ValidationResult":
        return cls(valid=not issues, errors=[issue.message for issue in issues])


@dataclass(frozen=True)
class CategoryCheckResult:
    valid: bool
    message: Optional[str] = None


def _has_key(mapping: Mapping[Any, Any], key: Any) -> bool:
    try:
        return key in mapping
    except TypeError:
        return False


def _check_view_references(config: Any) -> Iterator[ValidationIssue]:
    all_fields = get_all_dataset_fields(config)
    views = section(config, "dataset", "views")
    for view_name, view_config in views.items():
        for idx, field_name in enumerate(as_list(as_mapping(view_config).get("fields"))):
            if field_name not in all_fields:
                yield ValidationIssue(
                    f"View '{view_name}' references unknown field '{field_name}'",
                    join_yaml_path("", "dataset", "views", view_name, "fields", idx),
                )


def _check_group_references(config: Any) -> Iterator[ValidationIssue]:
    field_groups = section(config, "dataset", "field_groups")
    input_fields = field_declarations(section(config, "input").get("fields"))
    for field_name, declaration in input_fields.items():
        group = declaration.get("group")
        if group and not _has_key(field_groups, group):
            yield ValidationIssue(
                f"Input field '{field_name}' references unknown field_group '{group}'",
                join_yaml_path("", "input", "fields", field_name, "group"),
            )


def validate_issues(config: Any) -> List[ValidationIssue]:
    """Run every cross-reference check and return the located issues in check order."""
    if not config or not isinstance(config, dict):
        return [ValidationIssue(EMPTY_CONFIG_ERROR, "")]

    issues: List[ValidationIssue] = []
    if not section(config, "actor").get("name"):
        issues.append(ValidationIssue(MISSING_ACTOR_NAME_ERROR, "/actor/name"))

    issues.extend(_check_view_references(config))
    issues.extend(_check_group_references(config))
    return issues


def validate(config: Any) -> ValidationResult:
    """Validate the ``schemas`` config; returns ``ValidationResult(valid, errors)``."""
    return ValidationResult.from_issues(validate_issues(config))


def validate_categories(categories: Any) -> CategoryCheckResult:
    """Check store categories from ``actor_details.categories``."""
    if not isinstance(categories, list):
        return CategoryCheckResult(False, "Categories must be an array of strings")

    if len(categories) > MAX_CATEGORIES:
        return CategoryCheckResult(False, f"Maximum of {MAX_CATEGORIES} categories allowed")

    invalid = [str(category) for category in categories if category not in VALID_CATEGORIES]
    if invalid:
        return CategoryCheckResult(
            False,
            f"Invalid categories: {', '.join(invalid)}. "
            f"Valid categories are: {', '.join(VALID_CATEGORIES)}",
        )

    return CategoryCheckResult(True)
