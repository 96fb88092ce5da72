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

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import designer_config
from .exceptions import ValidationError
from .fields.aggregator import get_all_dataset_fields, get_input_group_mapping
from .file_io.json_writer import ensure_directory, resolve_actor_id, write_json_file
from .generators import GeneratedSchemas, generate_all, generate_default_input
from .models.documents import ACTOR_FILE, DATASET_SCHEMA_FILE, INPUT_SCHEMA_FILE, OUTPUT_SCHEMA_FILE
from .models.field import AggregatedFields
from .validation.validator import ValidationResult, validate

logger = logging.getLogger(__name__)


class ActorSchemaManager:
    """Generates actor schema files from the ``schemas`` section of a spec file.

    Writes, under ``<base_path>/.actor/``:
      - actor.json
      - input_schema.json
      - dataset_schema.json
      - output_schema.json
    and, on request, ``INPUT.json`` with local-run defaults.

    Generation never validates implicitly; call :meth:`validate` or
    :meth:`ensure_valid` first to reject broken configs.
    """

    def __init__(
        self,
        config: Any,
        base_path: Optional[Union[str, Path]] = None,
        dry_run: bool = False,
        verbose: bool = False,
        actor_dir_name: Optional[str] = None,
    ):
        """Initialize the manager.

        Args:
            config: The ``schemas`` section of the spec file
            base_path: Directory the ``.actor`` folder and ``INPUT.json`` are written to (default: cwd)
            dry_run: Return documents without writing files
            verbose: Log details, including view fields that cannot be resolved
            actor_dir_name: Name of the actor directory (default from configuration)
        """
        self.config = config
        self.base_path = Path(base_path) if base_path is not None else Path(os.getcwd())
        self.dry_run = dry_run
        self.verbose = verbose
        self.actor_dir = self.base_path / (actor_dir_name or designer_config.actor_dir_name)

    def validate(self) -> ValidationResult:
        return validate(self.config)

    def ensure_valid(self) -> ValidationResult:
        """Validate and raise :class:`ValidationError` carrying every error if invalid."""
        result = self.validate()
        if not result.valid:
            raise ValidationError(
                f"Schema config has {len(result.errors)} validation error(s)", result.errors
            )
        return result

    def get_all_dataset_fields(self) -> AggregatedFields:
        return get_all_dataset_fields(self.config)

    def get_input_group_mapping(self) -> Dict[str, Any]:
        return get_input_group_mapping(self.config)

    def resolve_actor_id(self, provided_id: Optional[str] = None) -> Optional[str]:
        """Return the platform actor id, derived from the written ``actor.json`` when not provided."""
        return resolve_actor_id(provided_id, actor_dir=self.actor_dir)

    def _report_collisions(self) -> None:
        for collision in self.get_all_dataset_fields().collisions:
            logger.warning(collision.message)

    def generate_all_schemas(self) -> GeneratedSchemas:
        """Generate the four actor documents and write them unless ``dry_run``."""
        self._report_collisions()
        schemas = generate_all(self.config, verbose=self.verbose)

        if not self.dry_run:
            ensure_directory(self.actor_dir)
            write_json_file(self.actor_dir / ACTOR_FILE, schemas.actor)
            write_json_file(self.actor_dir / INPUT_SCHEMA_FILE, schemas.input_schema)
            write_json_file(self.actor_dir / DATASET_SCHEMA_FILE, schemas.dataset_schema)
            write_json_file(self.actor_dir / OUTPUT_SCHEMA_FILE, schemas.output_schema)
            logger.info(f"Generated all actor schemas in {self.actor_dir}")

        return schemas

    def generate_input_file(self, output_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """Generate ``INPUT.json`` defaults and write them unless ``dry_run``.

        Args:
            output_path: Target file (default: ``<base_path>/INPUT.json``)
        """
        defaults = generate_default_input(self.config)
        target_path = Path(output_path) if output_path else self.base_path / designer_config.input_file_name

        if not self.dry_run:
            write_json_file(target_path, defaults)
            logger.info(f"Generated default input file: {target_path}")

        return defaults
