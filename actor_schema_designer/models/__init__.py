"""Typed shapes of the engine's inputs and outputs."""

from .documents import (
    ACTOR_FILE,
    ACTOR_SPECIFICATION_VERSION,
    DATASET_SCHEMA_FILE,
    INPUT_SCHEMA_FILE,
    OUTPUT_SCHEMA_FILE,
)
from .field import AggregatedFields, FieldCollision, FieldDescriptor

__all__ = [
    "ACTOR_FILE",
    "ACTOR_SPECIFICATION_VERSION",
    "DATASET_SCHEMA_FILE",
    "INPUT_SCHEMA_FILE",
    "OUTPUT_SCHEMA_FILE",
    "AggregatedFields",
    "FieldCollision",
    "FieldDescriptor",
]
