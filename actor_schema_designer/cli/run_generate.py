#!/usr/bin/env python3
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

"""CLI entry point for generating actor schema files from a spec file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config import designer_config
from ..exceptions import SchemaDesignerError
from ..file_io.json_writer import dump_json
from ..file_io.source_location import format_source, lookup_source, spec_path_for
from ..manager import ActorSchemaManager
from ..models.documents import ACTOR_FILE, DATASET_SCHEMA_FILE, INPUT_SCHEMA_FILE, OUTPUT_SCHEMA_FILE
from ..models.parsing.yaml_parser import SourceMap, yaml_parser
from ..validation import ValidationIssue, lint_config, validate_categories, validate_issues

logger = logging.getLogger(__name__)

DRY_RUN_NOTICE = "Dry run mode - no files written. Use without --dry-run to write files."


def load_schemas_section(spec_path: str) -> Tuple[Dict[str, Any], Dict[str, Any], SourceMap]:
    """Load a spec file and return (spec, schemas section, source map).

    Raises:
        SchemaDesignerError: If the file cannot be loaded or has no ``schemas`` section
    """
    spec, source_map = yaml_parser.load_config_with_source(spec_path)
    schemas = spec.get("schemas")
    if not schemas:
        raise SchemaDesignerError("Spec must contain a `schemas` section.")
    return spec, schemas, source_map


def describe_issue(issue: ValidationIssue, spec_path: str, source_map: SourceMap) -> str:
    loc = lookup_source(source_map, spec_path_for(issue.yaml_path), Path(spec_path))
    return f"{issue.message}{format_source(loc)}"


def _print_dry_run(sections: List[Tuple[str, Any]], heading: str) -> None:
    print(f"\n=== DRY RUN - {heading} ===\n")
    for title, document in sections:
        if title:
            print(f"--- {title} ---")
        print(dump_json(document))
        print()
    print(DRY_RUN_NOTICE)


def _build_manager(args: argparse.Namespace, schemas: Dict[str, Any]) -> ActorSchemaManager:
    return ActorSchemaManager(
        schemas,
        base_path=getattr(args, "base_path", None),
        dry_run=args.dry_run,
        verbose=args.verbose,
    )


def run_gen_schemas(args: argparse.Namespace) -> int:
    _, schemas, source_map = load_schemas_section(args.spec)
    manager = _build_manager(args, schemas)

    issues = validate_issues(schemas)
    if issues:
        logger.error("Schema validation errors:")
        for issue in issues:
            logger.error(f"  - {describe_issue(issue, args.spec, source_map)}")
        return 1

    schemas_out = manager.generate_all_schemas()

    if args.dry_run:
        _print_dry_run(
            [
                (ACTOR_FILE, schemas_out.actor),
                (INPUT_SCHEMA_FILE, schemas_out.input_schema),
                (DATASET_SCHEMA_FILE, schemas_out.dataset_schema),
                (OUTPUT_SCHEMA_FILE, schemas_out.output_schema),
            ],
            "Generated Schemas",
        )
    return 0


def run_gen_input(args: argparse.Namespace) -> int:
    _, schemas, _ = load_schemas_section(args.spec)
    manager = _build_manager(args, schemas)

    defaults = manager.generate_input_file(args.output)

    if args.dry_run:
        _print_dry_run([("", defaults)], "Generated INPUT.json")
    return 0


def collect_report(spec: Dict[str, Any], schemas: Dict[str, Any], spec_path: str, source_map: SourceMap) -> Dict[str, List[str]]:
    """Run every local check and return ``{"errors": [...], "warnings": [...]}``."""
    errors = [describe_issue(issue, spec_path, source_map) for issue in validate_issues(schemas)]
    warnings = [describe_issue(issue, spec_path, source_map) for issue in lint_config(schemas)]

    manager = ActorSchemaManager(schemas, dry_run=True)
    warnings.extend(collision.message for collision in manager.get_all_dataset_fields().collisions)

    details = spec.get("actor_details")
    if isinstance(details, dict) and "categories" in details:
        category_check = validate_categories(details["categories"])
        if not category_check.valid:
            loc = lookup_source(source_map, "/actor_details/categories", Path(spec_path))
            errors.append(f"{category_check.message}{format_source(loc)}")

    return {"errors": errors, "warnings": warnings}


def run_validate(args: argparse.Namespace) -> int:
    spec, schemas, source_map = load_schemas_section(args.spec)
    report = collect_report(spec, schemas, args.spec, source_map)

    if args.format == "json":
        print(json.dumps({"spec": args.spec, **report}, indent=2))
    else:
        for error in report["errors"]:
            print(f"  ERROR: {error}")
        for warning in report["warnings"]:
            print(f"  WARNING: {warning}")

    if report["errors"]:
        return 1
    if args.format == "human":
        print("Validation succeeded with no errors.")
    return 0


def _add_spec_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--spec",
        default=designer_config.spec_path,
        help=f"Path to spec file (default: {designer_config.spec_path})",
    )


def _add_output_arguments(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument("--dry-run", action="store_true", help=f"Preview generated {what} without writing files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="actor-schema-designer",
        description="Generate .actor/*.json schema files from the `schemas` section of a spec file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_schemas = subparsers.add_parser("gen-schemas", help="Generate all .actor/*.json schema files")
    _add_spec_argument(gen_schemas)
    gen_schemas.add_argument("--base-path", default=None, help="Directory to create .actor/ in (default: cwd)")
    _add_output_arguments(gen_schemas, "schemas")
    gen_schemas.set_defaults(handler=run_gen_schemas, failure="Failed to generate schemas")

    gen_input = subparsers.add_parser("gen-input", help="Generate INPUT.json with default values")
    _add_spec_argument(gen_input)
    gen_input.add_argument(
        "-o",
        "--output",
        default=f"./{designer_config.input_file_name}",
        help="Output path for INPUT.json",
    )
    _add_output_arguments(gen_input, "input")
    gen_input.set_defaults(handler=run_gen_input, failure="Failed to generate input file")

    check = subparsers.add_parser("validate", help="Validate the spec without generating files")
    _add_spec_argument(check)
    check.add_argument(
        "--format",
        choices=["human", "json"],
        default="human",
        help="Output format (default: human)",
    )
    check.set_defaults(handler=run_validate, failure="Failed to validate spec", verbose=False)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the schema generator CLI."""
    args = build_parser().parse_args(argv)
    designer_config.set_logging(verbose=args.verbose)

    try:
        exit_code = args.handler(args)
    except SchemaDesignerError as e:
        logger.error(f"{args.failure}: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == '__main__':
    main()
