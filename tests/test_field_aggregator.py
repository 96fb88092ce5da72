"""Dataset field aggregation and input group mapping."""
from __future__ import annotations

import copy

from actor_schema_designer.fields import get_all_dataset_fields, get_input_group_mapping


def test_group_fields_are_merged_with_provenance():
    config = {"dataset": {"fields": {"a": {"type": "string"}}, "field_groups": {"g1": {"b": {"type": "number"}}}}}
    fields = get_all_dataset_fields(config)

    assert list(fields) == ["a", "b"]
    assert fields.origin_of("b") == "g1"
    assert fields.origin_of("a") is None
    assert fields.is_optional("b")
    assert not fields.is_optional("a")


def test_provenance_is_not_injected_into_declarations():
    config = {"dataset": {"field_groups": {"g1": {"b": {"type": "number"}}}}}
    fields = get_all_dataset_fields(config)
    assert fields["b"] == {"type": "number"}
    assert "_fromGroup" not in fields["b"]


def test_missing_sections_give_empty_aggregate():
    assert len(get_all_dataset_fields({})) == 0
    assert len(get_all_dataset_fields(None)) == 0
    assert len(get_all_dataset_fields({"dataset": {"fields": None, "field_groups": None}})) == 0


def test_field_without_body_is_an_empty_declaration():
    fields = get_all_dataset_fields({"dataset": {"fields": {"price": None}, "field_groups": {"g": None}}})
    assert fields["price"] == {}


def test_later_group_wins_and_collision_is_recorded():
    config = {
        "dataset": {
            "fields": {"rating": {"type": "string"}},
            "field_groups": {
                "first": {"rating": {"type": "integer"}},
                "second": {"rating": {"type": "number"}},
            },
        }
    }
    fields = get_all_dataset_fields(config)

    assert fields["rating"] == {"type": "number"}
    assert fields.origin_of("rating") == "second"
    assert [(c.previous_origin, c.winning_origin) for c in fields.collisions] == [
        (None, "first"),
        ("first", "second"),
    ]
    assert "dataset.fields" in fields.collisions[0].message
    assert "field_group 'second'" in fields.collisions[1].message


def test_overridden_base_field_keeps_its_position():
    config = {
        "dataset": {
            "fields": {"a": {}, "b": {}},
            "field_groups": {"g": {"c": {}, "a": {"type": "integer"}}},
        }
    }
    assert list(get_all_dataset_fields(config)) == ["a", "b", "c"]


def test_aggregation_does_not_mutate_config(schemas_config):
    original = copy.deepcopy(schemas_config)
    get_all_dataset_fields(schemas_config)
    assert schemas_config == original


def test_unhashable_lookup_is_a_miss():
    fields = get_all_dataset_fields({"dataset": {"fields": {"a": {}}}})
    assert ["a"] not in fields


def test_input_group_mapping(schemas_config):
    assert get_input_group_mapping(schemas_config) == {"include_reviews": "reviews"}


def test_input_group_mapping_skips_empty_groups():
    config = {"input": {"fields": {"a": {"group": ""}, "b": None, "c": {"group": "g"}}}}
    assert get_input_group_mapping(config) == {"c": "g"}
