"""Command line front end."""
from __future__ import annotations

import json
import textwrap

import pytest

from actor_schema_designer.cli.run_generate import build_parser, main


def run_cli(*argv):
    with pytest.raises(SystemExit) as excinfo:
        main(list(argv))
    return excinfo.value.code


@pytest.fixture
def broken_spec(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text(
        textwrap.dedent(
            """\
            actor_details:
              categories: [AI, CRYPTO]
            schemas:
              dataset:
                fields:
                  title: {}
                views:
                  main:
                    fields: [title, ghost]
            """
        ),
        encoding="utf-8",
    )
    return path


def test_subcommand_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 2


def test_gen_schemas(tmp_path, spec_file):
    assert run_cli("gen-schemas", "-s", str(spec_file), "--base-path", str(tmp_path)) == 0

    actor = json.loads((tmp_path / ".actor" / "actor.json").read_text(encoding="utf-8"))
    assert actor["name"] == "shop-scraper"
    dataset = json.loads((tmp_path / ".actor" / "dataset_schema.json").read_text(encoding="utf-8"))
    assert dataset["views"]["overview"]["display"]["properties"]["price"] == {"label": "Price", "format": "text"}


def test_gen_schemas_dry_run(tmp_path, spec_file, capsys):
    assert run_cli("gen-schemas", "-s", str(spec_file), "--base-path", str(tmp_path), "--dry-run") == 0

    out = capsys.readouterr().out
    assert "=== DRY RUN - Generated Schemas ===" in out
    assert "--- dataset_schema.json ---" in out
    assert "Dry run mode - no files written." in out
    assert not (tmp_path / ".actor").exists()


def test_gen_schemas_refuses_invalid_spec(tmp_path, broken_spec, capsys):
    assert run_cli("gen-schemas", "-s", str(broken_spec), "--base-path", str(tmp_path)) == 1

    err = capsys.readouterr().err
    assert "Schema validation errors:" in err
    assert "Missing required field: schemas.actor.name" in err
    assert "View 'main' references unknown field 'ghost'" in err
    assert "at /schemas/dataset/views/main/fields/1" in err
    assert ":9:" in err
    assert not (tmp_path / ".actor").exists()


def test_gen_input(tmp_path, spec_file):
    output = tmp_path / "INPUT.json"
    assert run_cli("gen-input", "-s", str(spec_file), "-o", str(output)) == 0
    assert json.loads(output.read_text(encoding="utf-8"))["include_reviews"] is False


def test_gen_input_dry_run(tmp_path, spec_file, capsys):
    output = tmp_path / "INPUT.json"
    assert run_cli("gen-input", "-s", str(spec_file), "-o", str(output), "--dry-run") == 0

    out = capsys.readouterr().out
    assert "=== DRY RUN - Generated INPUT.json ===" in out
    assert '"max_pages": 10' in out
    assert not output.exists()


def test_validate_human(spec_file, capsys):
    assert run_cli("validate", "-s", str(spec_file)) == 0
    assert "Validation succeeded with no errors." in capsys.readouterr().out


def test_validate_reports_everything(broken_spec, capsys):
    assert run_cli("validate", "-s", str(broken_spec), "--format", "json") == 1

    report = json.loads(capsys.readouterr().out)
    assert report["spec"] == str(broken_spec)
    assert len(report["errors"]) == 3
    assert report["errors"][0].startswith("Missing required field: schemas.actor.name")
    assert report["errors"][2].startswith("Invalid categories: CRYPTO.")
    assert report["warnings"] == []


def test_validate_lists_lint_warnings(tmp_path, capsys):
    spec = tmp_path / "spec.yml"
    spec.write_text("schemas:\n  actor:\n    name: a\n    version: 1\n", encoding="utf-8")

    assert run_cli("validate", "-s", str(spec)) == 0
    out = capsys.readouterr().out
    assert "  WARNING: /actor/version: 1 is not of type 'string'" in out
    assert "Validation succeeded with no errors." in out


def test_missing_schemas_section(tmp_path, capsys):
    spec = tmp_path / "spec.yml"
    spec.write_text("actor_details: {}\n", encoding="utf-8")

    assert run_cli("gen-schemas", "-s", str(spec), "--base-path", str(tmp_path)) == 1
    assert "Failed to generate schemas: Spec must contain a `schemas` section." in capsys.readouterr().err


def test_missing_spec_file(tmp_path, capsys):
    assert run_cli("validate", "-s", str(tmp_path / "nope.yml")) == 1
    assert "Failed to validate spec: Spec file not found" in capsys.readouterr().err


def test_gen_schemas_does_not_resolve_actor_id(tmp_path, spec_file, capsys, monkeypatch):
    monkeypatch.setenv("APIFY_USERNAME", "jane")
    assert run_cli("gen-schemas", "-s", str(spec_file), "--base-path", str(tmp_path)) == 0

    captured = capsys.readouterr()
    assert "jane~shop-scraper" not in captured.out + captured.err
