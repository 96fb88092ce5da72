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

"""Spec file parser with optional caching and YAML source maps."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ...config import designer_config
from ...exceptions import SpecFileError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


def json_pointer_escape(token: Any) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return str(token).replace("~", "~0").replace("/", "~1")


def join_yaml_path(base: str, *tokens: Any) -> str:
    """Append escaped tokens to a JSON-pointer-like YAML path."""
    path = base or ""
    for token in tokens:
        path = f"{path}/{json_pointer_escape(token)}"
    return path


class YamlParser:
    """Loads spec files, optionally caching parsed content per path."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """``cache_enabled=None`` follows ``designer_config.cache_enabled``."""
        self.cache_enabled = cache_enabled if cache_enabled is not None else designer_config.cache_enabled
        self._cache: Dict[Path, Tuple[Dict[str, Any], SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Map every YAML path (e.g. ``/schemas/actor/name``) to its 1-based line and column.

        Locations come from the composed node tree, so the data returned by
        ``safe_load`` keeps its plain shape. Unparseable content yields an empty map.
        """
        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            return {}

        source_map: SourceMap = {}
        pending = [("", root)] if root is not None else []
        while pending:
            node_path, node = pending.pop()
            start = node.start_mark
            source_map[node_path] = {"line": start.line + 1, "column": start.column + 1}

            if isinstance(node, yaml.MappingNode):
                pending.extend(
                    (join_yaml_path(node_path, key.value), value)
                    for key, value in node.value
                    if isinstance(key, yaml.ScalarNode)
                )
            elif isinstance(node, yaml.SequenceNode):
                pending.extend((join_yaml_path(node_path, i), item) for i, item in enumerate(node.value))
        return source_map

    @staticmethod
    def _parse(content: str, origin: str) -> Dict[str, Any]:
        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SpecFileError(f"Failed to parse YAML {origin}: {exc}") from exc

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise SpecFileError(
                f"Spec {origin} must contain a mapping at the top level, got {type(config_data).__name__}"
            )
        return config_data

    def load_config_with_source(self, file_path: Union[str, Path]) -> Tuple[Dict[str, Any], SourceMap]:
        """Return ``(data, source_map)`` for a spec file.

        Raises:
            SpecFileError: If the file is missing, unreadable or not a YAML mapping
        """
        path = Path(file_path)
        cached = self._cache.get(path) if self.cache_enabled else None
        if cached is not None:
            logger.debug(f"Using cached spec: {path}")
            return cached

        if not path.is_file():
            reason = "is not a file" if path.exists() else "not found"
            raise SpecFileError(f"Spec file {reason}: {path}")

        logger.debug(f"Reading spec file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SpecFileError(f"Cannot read spec file {path}: {exc}") from exc

        loaded = (self._parse(content, f"file {path}"), self.build_source_map(content))
        if self.cache_enabled:
            self._cache[path] = loaded
        return loaded

    def load_config(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        return self.load_config_with_source(file_path)[0]

    def load_config_from_string_with_source(self, content: str) -> Tuple[Dict[str, Any], SourceMap]:
        """Load YAML spec content from a string and return (data, source_map)."""
        return self._parse(content, "content"), self.build_source_map(content)

    def load_config_from_string(self, content: str) -> Dict[str, Any]:
        return self._parse(content, "content")

    def clear_cache(self) -> None:
        self._cache.clear()


yaml_parser = YamlParser()
