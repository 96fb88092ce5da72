import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import OutputWriteError
from ..models.documents import ACTOR_FILE
from .source_location import SourceLocation, format_source

logger = logging.getLogger(__name__)

JSON_INDENT = 2


def dump_json(content: Any) -> str:
    """Serialize a generated document the way it is written to disk (without the trailing newline)."""
    return json.dumps(content, indent=JSON_INDENT, ensure_ascii=False)


def ensure_directory(directory: Union[str, Path]) -> Path:
    path = Path(directory)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory: {path}")
    return path


def write_json_file(file_path: Union[str, Path], content: Any) -> Path:
    """Write ``content`` as pretty JSON followed by a newline, creating parent directories."""
    path = Path(file_path)
    try:
        ensure_directory(path.parent)
        path.write_text(dump_json(content) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        src = SourceLocation(file_path=path)
        logger.error(f"Failed to write JSON file: {path}: {e}{format_source(src)}")
        raise OutputWriteError(f"Failed to write {path}: {e}") from e

    logger.debug(f"Written: {path}")
    return path


def load_json_file(file_path: Union[str, Path]) -> Any:
    path = Path(file_path)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def resolve_actor_id(
    provided_id: Optional[str] = None,
    prefix: Optional[str] = None,
    actor_dir: Union[str, Path] = ".actor",
) -> Optional[str]:
    """Return ``provided_id``, else ``<prefix>~<name>`` from an existing ``actor.json``.

    ``prefix`` defaults to the ``APIFY_USERNAME`` environment variable. Returns
    ``None`` when no id can be determined.
    """
    if provided_id:
        return provided_id

    if prefix is None:
        prefix = os.getenv("APIFY_USERNAME")

    actor_json_path = Path(actor_dir) / ACTOR_FILE
    if not actor_json_path.exists():
        return None

    try:
        actor_name = load_json_file(actor_json_path).get("name")
    except (OSError, ValueError, AttributeError) as e:
        logger.error(f"Error reading {actor_json_path}: {e}")
        return None

    if not actor_name or not prefix:
        return None

    derived_id = f"{prefix}~{actor_name}"
    logger.info(f"Using actor ID: {derived_id} (derived from actor name in {actor_json_path})")
    return derived_id
