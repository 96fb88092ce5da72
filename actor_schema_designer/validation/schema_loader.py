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

"""Access to the JSON Schemas shipped in ``actor_schema_designer/schema``."""

import json
from functools import lru_cache
from pathlib import Path

SCHEMAS_CONFIG = "schemas_config"
SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schema"


def get_schema_path(schema_name: str) -> Path:
    """Path of a bundled schema, given its file name without ``.json``."""
    return SCHEMA_DIR / f"{schema_name}.json"


def load_schema(schema_name: str = SCHEMAS_CONFIG) -> dict:
    """Return a bundled schema, read once per process.

    Raises:
        FileNotFoundError: If no schema of that name is bundled
        ValueError: If the bundled file is not valid JSON
    """
    return _read_schema(schema_name)


@lru_cache(maxsize=None)
def _read_schema(schema_name: str) -> dict:
    schema_path = get_schema_path(schema_name)
    if not schema_path.is_file():
        raise FileNotFoundError(f"No bundled schema named '{schema_name}' ({schema_path})")

    try:
        return json.loads(schema_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Bundled schema {schema_path} is not valid JSON: {e}") from e


def clear_cache() -> None:
    _read_schema.cache_clear()
