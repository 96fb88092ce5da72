"""Locations of config values inside the spec file, for error messages."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

# The unified config lives under this key of the spec file.
SCHEMAS_ROOT = "/schemas"


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def position(self) -> str:
        """``file[:line[:column]]``, or an empty string without a file."""
        if self.file_path is None:
            return ""
        numbers = [str(n) for n in (self.line, self.column) if n is not None]
        return ":".join([_display_path(self.file_path), *numbers])


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    yaml_path: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Find ``yaml_path`` in a source map built by ``YamlParser.build_source_map``."""
    entry = (source_map.get(yaml_path) if source_map and yaml_path else None) or {}
    return SourceLocation(file_path, yaml_path, entry.get("line"), entry.get("column"))


def spec_path_for(config_path: Optional[str]) -> Optional[str]:
    """Prefix a path relative to the ``schemas`` section with :data:`SCHEMAS_ROOT`."""
    if config_path is None:
        return None
    return SCHEMAS_ROOT + config_path


def _display_path(path: Path) -> str:
    try:
        return os.path.relpath(path)
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    """Render ``loc`` as a message suffix: `` (websy-spec.yml:5:11, at /schemas/actor/name)``."""
    if loc is None:
        return ""

    parts = [part for part in (loc.position, f"at {loc.yaml_path}" if loc.yaml_path else "") if part]
    return f" ({', '.join(parts)})" if parts else ""
