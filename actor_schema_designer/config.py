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

"""Runtime configuration for the schema designer tools."""

import logging
import os
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, resolve_level

ENV_PREFIX = "ACTOR_SCHEMA_DESIGNER_"


def _env(name: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass
class DesignerConfig:
    """Settings shared by the CLI, the spec parser and the file writer."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = False

    # paths
    spec_path: str = "./websy-spec.yml"
    actor_dir_name: str = ".actor"
    input_file_name: str = "INPUT.json"

    @classmethod
    def from_env(cls) -> 'DesignerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=_env('LOG_LEVEL', 'INFO'),
            print_level=_env('PRINT_LEVEL', 'WARNING'),
            cache_enabled=_env('CACHE_ENABLED', 'false').lower() == 'true',
            spec_path=_env('SPEC', './websy-spec.yml'),
            actor_dir_name=_env('ACTOR_DIR', '.actor'),
        )

    def set_logging(self, verbose: bool = False) -> logging.Logger:
        """Setup logging; ``verbose`` forces DEBUG regardless of ``log_level``."""
        level = logging.DEBUG if verbose else resolve_level(self.log_level)
        stderr_level = resolve_level(self.print_level, logging.WARNING)
        configure_split_stream_logging(level=level, stderr_level=stderr_level)

        return logging.getLogger('actor_schema_designer')


# Global configuration instance
designer_config = DesignerConfig.from_env()
