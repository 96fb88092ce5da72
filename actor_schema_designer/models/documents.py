from __future__ import annotations

from typing import Any, Dict, List, TypedDict, Union


# Format markers of the generated actor documents.
ACTOR_SPECIFICATION_VERSION = 1
INPUT_SCHEMA_VERSION = 1
OUTPUT_SCHEMA_VERSION = 1
JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

# File names, relative to the actor directory.
ACTOR_FILE = "actor.json"
INPUT_SCHEMA_FILE = "input_schema.json"
DATASET_SCHEMA_FILE = "dataset_schema.json"
OUTPUT_SCHEMA_FILE = "output_schema.json"


class StoragesRef(TypedDict):
    dataset: str


class ActorManifest(TypedDict):
    actorSpecification: int
    name: str
    version: str
    buildTag: str
    environmentVariables: Dict[str, Any]
    input: str
    output: str
    storages: StoragesRef


class InputProperty(TypedDict, total=False):
    title: str
    type: str
    description: str
    editor: str
    sectionCaption: str
    prefill: Any
    default: Any
    minLength: int
    maxLength: int
    minimum: Union[int, float]
    maximum: Union[int, float]
    enum: List[Any]


class InputSchema(TypedDict):
    title: str
    type: str
    schemaVersion: int
    properties: Dict[str, InputProperty]
    required: List[str]


class DatasetFieldSchema(TypedDict, total=False):
    type: Union[str, List[str]]
    title: str
    description: str
    items: Dict[str, str]


class DisplayProperty(TypedDict):
    label: str
    format: str


class ViewDisplay(TypedDict):
    component: str
    properties: Dict[str, DisplayProperty]


class ViewSchema(TypedDict):
    title: str
    transformation: Dict[str, List[str]]
    display: ViewDisplay


class DatasetSchema(TypedDict):
    actorSpecification: int
    fields: Dict[str, Any]
    views: Dict[str, ViewSchema]


class OutputSchema(TypedDict):
    actorOutputSchemaVersion: int
    title: str
    description: str
    properties: Dict[str, Any]
