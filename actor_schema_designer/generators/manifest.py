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
from typing import Any

from ..models.documents import (
    ACTOR_SPECIFICATION_VERSION,
    DATASET_SCHEMA_FILE,
    INPUT_SCHEMA_FILE,
    OUTPUT_SCHEMA_FILE,
    ActorManifest,
)
from ..utils import section

DEFAULT_ACTOR_NAME = "unnamed-actor"
DEFAULT_ACTOR_VERSION = "0.1"
DEFAULT_BUILD_TAG = "latest"


def _relative(file_name: str) -> str:
    return f"./{file_name}"


def generate_actor_json(config: Any) -> ActorManifest:
    """Build ``actor.json`` from the ``actor`` section."""
    actor = section(config, "actor")

    return {
        "actorSpecification": ACTOR_SPECIFICATION_VERSION,
        "name": actor.get("name") or DEFAULT_ACTOR_NAME,
        "version": actor.get("version") or DEFAULT_ACTOR_VERSION,
        "buildTag": actor.get("build_tag") or DEFAULT_BUILD_TAG,
        "environmentVariables": copy.deepcopy(actor.get("environment_variables") or {}),
        "input": _relative(INPUT_SCHEMA_FILE),
        "output": _relative(OUTPUT_SCHEMA_FILE),
        "storages": {
            "dataset": _relative(DATASET_SCHEMA_FILE),
        },
    }
