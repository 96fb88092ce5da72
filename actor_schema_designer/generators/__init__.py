"""Document generators.

Each generator is a pure function of the ``schemas`` config: no I/O, no shared
state, no mutation of the config. They can run in any order.
"""

from typing import Any, NamedTuple

from ..fields.aggregator import get_all_dataset_fields
from ..models.documents import ActorManifest, DatasetSchema, InputSchema, OutputSchema
from .dataset_schema import generate_dataset_schema
from .defaults import generate_default_input
from .input_schema import generate_input_schema
from .manifest import generate_actor_json
from .output_schema import generate_output_schema


class GeneratedSchemas(NamedTuple):
    actor: ActorManifest
    input_schema: InputSchema
    dataset_schema: DatasetSchema
    output_schema: OutputSchema


def generate_all(config: Any, verbose: bool = False) -> GeneratedSchemas:
    """Run the four document generators over one config."""
    return GeneratedSchemas(
        actor=generate_actor_json(config),
        input_schema=generate_input_schema(config),
        dataset_schema=generate_dataset_schema(config, verbose, get_all_dataset_fields(config)),
        output_schema=generate_output_schema(config),
    )


__all__ = [
    "GeneratedSchemas",
    "generate_actor_json",
    "generate_all",
    "generate_dataset_schema",
    "generate_default_input",
    "generate_input_schema",
    "generate_output_schema",
]
