"""File I/O related utilities.

This package groups the small modules that write generated documents to disk
and format file-backed diagnostics.
"""

from .json_writer import dump_json, ensure_directory, load_json_file, resolve_actor_id, write_json_file
from .source_location import SourceLocation, format_source, lookup_source, spec_path_for

__all__ = [
    "SourceLocation",
    "dump_json",
    "ensure_directory",
    "format_source",
    "load_json_file",
    "lookup_source",
    "resolve_actor_id",
    "spec_path_for",
    "write_json_file",
]
