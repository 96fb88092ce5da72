"""Cross-reference validation and store category checks."""
from __future__ import annotations

import pytest

from actor_schema_designer.validation import validate, validate_categories, validate_issues
from actor_schema_designer.validation.validator import (
    EMPTY_CONFIG_ERROR,
    MAX_CATEGORIES,
    MISSING_ACTOR_NAME_ERROR,
)


def test_valid_config(schemas_config):
    result = validate(schemas_config)
    assert result.valid is True
    assert result.errors == []


@pytest.mark.parametrize("config", [None, {}, [], "schemas"])
def test_empty_config_short_circuits(config):
    result = validate(config)
    assert result.valid is False
    assert result.errors == [EMPTY_CONFIG_ERROR]


def test_missing_actor_name():
    result = validate({"actor": {"title": "No name"}})
    assert result.errors == [MISSING_ACTOR_NAME_ERROR]


def test_every_error_is_reported_in_check_order():
    config = {
        "dataset": {"views": {"main": {"fields": ["x"]}}},
        "input": {"fields": {"a": {"group": "missing"}}},
    }
    result = validate(config)

    assert result.valid is False
    assert result.errors == [
        MISSING_ACTOR_NAME_ERROR,
        "View 'main' references unknown field 'x'",
        "Input field 'a' references unknown field_group 'missing'",
    ]


def test_view_may_reference_group_fields(schemas_config):
    schemas_config["dataset"]["views"]["overview"]["fields"].append("review_links")
    assert validate(schemas_config).valid


def test_issue_paths_point_into_the_config():
    config = {
        "actor": {"name": "a"},
        "dataset": {"fields": {"t": {}}, "views": {"main": {"fields": ["t", "gone"]}}},
        "input": {"fields": {"q": {"group": "g"}}},
    }
    paths = [issue.yaml_path for issue in validate_issues(config)]
    assert paths == ["/dataset/views/main/fields/1", "/input/fields/q/group"]


def test_unhashable_group_reference_is_reported():
    config = {"actor": {"name": "a"}, "input": {"fields": {"q": {"group": ["g"]}}}}
    assert len(validate(config).errors) == 1


def test_validation_does_not_raise_on_malformed_sections():
    config = {"actor": {"name": "a"}, "dataset": {"views": {"v": None}}, "input": {"fields": {"a": None}}}
    assert validate(config).valid


def test_valid_categories():
    result = validate_categories(["AI", "ECOMMERCE"])
    assert result.valid
    assert result.message is None


def test_categories_must_be_a_list():
    result = validate_categories("AI")
    assert not result.valid
    assert result.message == "Categories must be an array of strings"


def test_too_many_categories():
    result = validate_categories(["AI", "NEWS", "SEO_TOOLS", "JOBS"])
    assert not result.valid
    assert result.message == f"Maximum of {MAX_CATEGORIES} categories allowed"


def test_unknown_categories_are_listed():
    result = validate_categories(["AI", "CRYPTO"])
    assert not result.valid
    assert result.message.startswith("Invalid categories: CRYPTO. Valid categories are: AI, AGENTS")


def test_dangling_view_field_and_bad_group_give_two_errors():
    config = {
        "actor": {"name": "a"},
        "dataset": {"fields": {"x": {}}, "views": {"v": {"fields": ["x", "z"]}}},
        "input": {"fields": {"q": {"group": "bad"}}},
    }
    result = validate(config)
    assert not result.valid
    assert len(result.errors) == 2
