from __future__ import annotations

from pathlib import Path

import actor_schema_designer

PACKAGE_DIR = Path(actor_schema_designer.__file__).parent
HOLDER = "Copyright 2026 The actor-schema-designer Authors"


def test_license_headers_name_this_project():
    headers = [path.read_text(encoding="utf-8").splitlines()[:1] for path in PACKAGE_DIR.rglob("*.py")]
    first_lines = [lines[0] for lines in headers if lines and lines[0].startswith("# Copyright")]

    assert first_lines
    assert all(line == f"# {HOLDER}" for line in first_lines)
