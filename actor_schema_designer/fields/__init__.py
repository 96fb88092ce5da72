"""Field normalization and aggregation shared by the validator and the generators."""

from .aggregator import field_declarations, get_all_dataset_fields, get_input_group_mapping
from .normalizer import (
    FallbackRule,
    describe_field,
    field_description,
    field_label,
    field_title,
    infer_editor,
    infer_format,
    infer_input_type,
    infer_type,
    resolve_rules,
    title_case,
)

__all__ = [
    "FallbackRule",
    "describe_field",
    "field_declarations",
    "field_description",
    "field_label",
    "field_title",
    "get_all_dataset_fields",
    "get_input_group_mapping",
    "infer_editor",
    "infer_format",
    "infer_input_type",
    "infer_type",
    "resolve_rules",
    "title_case",
]
