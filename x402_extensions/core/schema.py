# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""JSON Schema compilation and checking backed by jsonschema."""

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Union

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.validators import validator_for

from ..types.errors import SchemaCompilationError


ROOT_PATH = "(root)"


@dataclass(frozen=True)
class SchemaViolation:
    """One place where a value does not satisfy a schema."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class CompiledSchema:
    """A compiled, reusable validator for one schema document.

    Instances are read-only after construction and safe to share.
    """

    def __init__(self, schema: Union[Dict[str, Any], bool]):
        if not isinstance(schema, (dict, bool)):
            raise SchemaCompilationError(
                f"Schema must be an object or boolean, got {type(schema).__name__}"
            )

        # Unknown or missing $schema falls back to 2020-12 instead of failing
        try:
            validator_cls = validator_for(schema, default=Draft202012Validator)
        except TypeError as e:
            raise SchemaCompilationError(f"Invalid $schema: {e}") from e
        try:
            validator_cls.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise SchemaCompilationError(f"Invalid schema: {e.message}") from e

        self.schema = schema
        self._validator = validator_cls(schema)

    def check(self, value: Any) -> List[SchemaViolation]:
        """Check a value, returning violations in the validator's order."""
        return [
            SchemaViolation(path=format_error_path(error), message=error.message)
            for error in self._validator.iter_errors(value)
        ]

    def is_valid(self, value: Any) -> bool:
        return self._validator.is_valid(value)


def format_error_path(error: jsonschema.ValidationError) -> str:
    """Render an error location as `a/b/0`, or `(root)` for the top level."""
    if not error.absolute_path:
        return ROOT_PATH
    return "/".join(str(part) for part in error.absolute_path)


def compile_schema(schema: Union[Dict[str, Any], bool], cache: bool = True) -> CompiledSchema:
    """Compile a schema document into a CompiledSchema.

    Args:
        schema: JSON Schema document
        cache: Reuse a previously compiled validator for an identical schema

    Returns:
        CompiledSchema ready to check values

    Raises:
        SchemaCompilationError: If the schema document is malformed
    """
    if not cache:
        return CompiledSchema(schema)

    try:
        cache_key = json.dumps(schema, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError):
        # Not JSON serializable, so not a cacheable schema document
        return CompiledSchema(schema)
    return _compile_cached(cache_key)


@lru_cache(maxsize=256)
def _compile_cached(cache_key: str) -> CompiledSchema:
    return CompiledSchema(json.loads(cache_key))


def clear_schema_cache() -> None:
    """Drop all cached compiled schemas."""
    _compile_cached.cache_clear()
