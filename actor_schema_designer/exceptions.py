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

"""Custom exceptions for the Actor Schema Designer."""

from typing import List, Optional


class SchemaDesignerError(Exception):
    """Base exception for schema-designer related errors."""
    pass


class SpecFileError(SchemaDesignerError):
    """Exception raised when a spec file cannot be found, read or parsed."""
    pass


class ValidationError(SchemaDesignerError):
    """Exception raised when a caller chooses to abort on validation errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors: List[str] = list(errors or [])


class OutputWriteError(SchemaDesignerError):
    """Exception raised when a generated document cannot be written."""
    pass
