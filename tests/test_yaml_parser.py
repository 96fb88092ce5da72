"""Spec file loading, caching and source maps."""
from __future__ import annotations

from pathlib import Path

import pytest

from actor_schema_designer.exceptions import SpecFileError
from actor_schema_designer.file_io import format_source, lookup_source, spec_path_for
from actor_schema_designer.models.parsing import YamlParser, join_yaml_path


def test_load_config(spec_file, schemas_config):
    config = YamlParser(cache_enabled=False).load_config(spec_file)
    assert config["schemas"] == schemas_config
    assert config["actor_details"]["categories"] == ["AUTOMATION", "DEVELOPER_TOOLS"]


def test_source_map_points_at_lines(spec_yaml):
    _, source_map = YamlParser(cache_enabled=False).load_config_from_string_with_source(spec_yaml)

    assert source_map["/schemas/actor/name"] == {"line": 5, "column": 11}
    assert source_map["/schemas/dataset/views/overview/fields/2"]["line"] == 43
    assert "" in source_map


def test_empty_document_is_empty_config():
    parser = YamlParser(cache_enabled=False)
    assert parser.load_config_from_string("") == {}
    assert parser.build_source_map("") == {}


@pytest.mark.parametrize("content", ["- a\n- b\n", "just text\n"])
def test_non_mapping_top_level_is_rejected(content):
    with pytest.raises(SpecFileError, match="mapping at the top level"):
        YamlParser(cache_enabled=False).load_config_from_string(content)


def test_invalid_yaml_is_rejected():
    content = "schemas:\n  actor: [unclosed\n"
    parser = YamlParser(cache_enabled=False)
    with pytest.raises(SpecFileError, match="Failed to parse YAML"):
        parser.load_config_from_string(content)
    assert parser.build_source_map(content) == {}


def test_missing_file(tmp_path):
    with pytest.raises(SpecFileError, match="not found"):
        YamlParser(cache_enabled=False).load_config(tmp_path / "missing.yml")


def test_directory_is_not_a_spec(tmp_path):
    with pytest.raises(SpecFileError, match="not a file"):
        YamlParser(cache_enabled=False).load_config(tmp_path)


def test_cache(spec_file):
    parser = YamlParser(cache_enabled=True)
    first = parser.load_config(spec_file)
    spec_file.write_text("schemas: {}\n", encoding="utf-8")

    assert parser.load_config(spec_file) is first
    parser.clear_cache()
    assert parser.load_config(spec_file) == {"schemas": {}}


def test_join_yaml_path_escapes_tokens():
    assert join_yaml_path("", "views", "a/b", "c~d", 0) == "/views/a~1b/c~0d/0"
    assert join_yaml_path("/schemas") == "/schemas"


def test_source_lookup_and_formatting(tmp_path):
    source_map = {"/schemas/actor/name": {"line": 5, "column": 11}}
    spec = tmp_path / "websy-spec.yml"

    located = lookup_source(source_map, spec_path_for("/actor/name"), spec)
    assert (located.line, located.column) == (5, 11)
    assert format_source(located).endswith(":5:11, at /schemas/actor/name)")

    unknown = lookup_source(source_map, "/schemas/nope", spec)
    assert unknown.line is None
    assert format_source(unknown).endswith("websy-spec.yml, at /schemas/nope)")

    assert spec_path_for("") == "/schemas"
    assert spec_path_for(None) is None
    assert format_source(None) == ""
    assert format_source(lookup_source(None, None)) == ""


def test_relative_source_path():
    located = lookup_source({}, "/schemas", Path("websy-spec.yml"))
    assert format_source(located) == " (websy-spec.yml, at /schemas)"
