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

"""Field normalization: resolve sparse field declarations into descriptors.

Each inferred attribute is an ordered list of :class:`FallbackRule` entries.
The first rule whose predicate holds supplies the value; the last rule of every
list always matches, so inference is total over any declaration, including ``{}``.

An attribute counts as declared when its value is truthy, so ``title: ""``
falls back to the generated title.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Sequence

from ..models.field import FieldDeclaration, FieldDescriptor
from ..utils import as_mapping
from ..utils.field_types import (
    ARRAY_TYPE,
    INPUT_PASSTHROUGH_KEYS,
    STRING_TYPE,
    editor_for_type,
)

# (field name, declaration) -> value
RuleFunc = Callable[[str, FieldDeclaration], Any]


@dataclass(frozen=True)
class FallbackRule:
    """One ``(predicate, value)`` step of an inference chain."""

    description: str
    predicate: RuleFunc
    value: RuleFunc


def resolve_rules(rules: Sequence[FallbackRule], name: Any, declaration: Any) -> Any:
    """Evaluate ``rules`` top to bottom and return the first matching value."""
    field_name = "" if name is None else str(name)
    decl = as_mapping(declaration)
    for rule in rules:
        if rule.predicate(field_name, decl):
            return rule.value(field_name, decl)
    raise LookupError("inference rules must end with an unconditional rule")


def _declared(key: str) -> FallbackRule:
    return FallbackRule(f"declared '{key}'", lambda _n, d: bool(d.get(key)), lambda _n, d: d[key])


def _always(value: Any, description: str = "default") -> FallbackRule:
    return FallbackRule(description, lambda _n, _d: True, lambda _n, _d: value)


def _is_array_shorthand(_name: str, decl: FieldDeclaration) -> bool:
    return bool(decl.get("array"))


TYPE_RULES = (
    _declared("type"),
    FallbackRule("array shorthand", _is_array_shorthand, lambda _n, _d: ARRAY_TYPE),
    _always(STRING_TYPE),
)

FORMAT_RULES = (
    _declared("format"),
    FallbackRule("array shorthand", _is_array_shorthand, lambda _n, _d: "array"),
    FallbackRule(
        "url-like name",
        lambda n, _d: n.endswith("_url") or n == "website",
        lambda _n, _d: "link",
    ),
    FallbackRule("link list name", lambda n, _d: n.endswith("_links"), lambda _n, _d: "array"),
    _always("text"),
)

# Input fields ignore the array shorthand; it only shapes dataset fields.
INPUT_TYPE_RULES = (
    _declared("type"),
    _always(STRING_TYPE),
)

EDITOR_RULES = (
    _declared("editor"),
    FallbackRule("by input type", lambda _n, _d: True, lambda _n, d: editor_for_type(infer_input_type(d))),
)


def title_case(name: Any) -> str:
    """Convert a snake_case identifier to Title Case.

    >>> title_case("start_urls")
    'Start Urls'
    """
    if name is None:
        return ""
    return " ".join(word[:1].upper() + word[1:].lower() for word in str(name).split("_"))


def infer_type(declaration: Any) -> str:
    return resolve_rules(TYPE_RULES, "", declaration)


def infer_input_type(declaration: Any) -> str:
    return resolve_rules(INPUT_TYPE_RULES, "", declaration)


def infer_format(field_name: Any, declaration: Any) -> str:
    return resolve_rules(FORMAT_RULES, field_name, declaration)


def infer_editor(declaration: Any) -> str:
    return resolve_rules(EDITOR_RULES, "", declaration)


def field_title(field_name: Any, declaration: Any) -> str:
    decl = as_mapping(declaration)
    return decl.get("title") or title_case(field_name)


def field_description(declaration: Any) -> str:
    decl = as_mapping(declaration)
    return decl.get("description") or decl.get("desc") or ""


def field_label(field_name: Any, declaration: Any) -> str:
    decl = as_mapping(declaration)
    return decl.get("label") or decl.get("title") or title_case(field_name)


def describe_field(field_name: Any, declaration: Any) -> FieldDescriptor:
    """Resolve a declaration into a :class:`FieldDescriptor`.

    Passthrough constraints are only carried when the key is present, so an
    undeclared ``minimum`` never shows up as ``None``.
    """
    decl = as_mapping(declaration)
    constraints: Dict[str, Any] = {key: decl[key] for key in INPUT_PASSTHROUGH_KEYS if key in decl}
    return FieldDescriptor(
        name=str(field_name),
        type=infer_type(decl),
        format=infer_format(field_name, decl),
        title=field_title(field_name, decl),
        description=field_description(decl),
        editor=infer_editor(decl),
        label=field_label(field_name, decl),
        constraints=constraints,
    )
