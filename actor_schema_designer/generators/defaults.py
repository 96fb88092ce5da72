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

import copy
from typing import Any, Dict

from ..fields.aggregator import field_declarations
from ..fields.normalizer import infer_input_type
from ..models.field import FieldDeclaration
from ..utils import as_mapping, section
from ..utils.field_types import zero_value

_OMIT = object()


def _derive_default(declaration: FieldDeclaration) -> Any:
    """Return the local-run value of one input field, or ``_OMIT``.

    Precedence: ``default``, then ``prefill``, then the zero value of the
    field's type. String-like fields get no synthesized value.
    """
    if "default" in declaration:
        return copy.deepcopy(declaration["default"])
    if "prefill" in declaration:
        return copy.deepcopy(declaration["prefill"])

    value = zero_value(infer_input_type(declaration))
    return _OMIT if value is None else value


def generate_default_input(config: Any) -> Dict[str, Any]:
    """Build the ``INPUT.json`` mapping used for local runs.

    ``input.defaults`` is applied last and overrides any derived value.
    """
    input_config = section(config, "input")

    defaults: Dict[str, Any] = {}
    for name, declaration in field_declarations(input_config.get("fields")).items():
        value = _derive_default(declaration)
        if value is not _OMIT:
            defaults[name] = value

    defaults.update(copy.deepcopy(as_mapping(input_config.get("defaults"))))
    return defaults
