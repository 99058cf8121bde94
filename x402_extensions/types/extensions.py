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
"""Extension record, validation and extraction result types."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


T = TypeVar("T")


class ExtensionRecord(BaseModel):
    """An extension as carried on the wire: info plus the schema it satisfies.

    Records are immutable once built. Two records are equal when their info
    and schema are structurally equal.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    info: Any
    schema_: Dict[str, Any] = Field(alias="schema")

    @classmethod
    def from_wire(cls, data: Any) -> "ExtensionRecord":
        """Build a record from a wire entry, a model with info/schema, or a record."""
        if isinstance(data, ExtensionRecord):
            return data
        if isinstance(data, dict):
            return cls.model_validate(data)
        if hasattr(data, "model_dump"):
            return cls.model_validate(data.model_dump(by_alias=True, exclude_none=True))
        raise TypeError(f"Cannot read extension record from {type(data).__name__}")

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready `{"info": ..., "schema": ...}` entry."""
        return {
            "info": copy.deepcopy(self.info),
            "schema": copy.deepcopy(self.schema_),
        }


class ValidationResult(BaseModel):
    """Outcome of checking an extension's info against its schema."""

    valid: bool
    errors: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _errors_match_validity(self) -> "ValidationResult":
        if self.valid and self.errors:
            raise ValueError("a valid result cannot carry errors")
        if not self.valid and not self.errors:
            raise ValueError("an invalid result must carry at least one error")
        return self

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, errors: List[str]) -> "ValidationResult":
        return cls(valid=False, errors=list(errors))


@dataclass
class ExtractionResult(Generic[T]):
    """Extracted extension value together with the reasons it may be absent.

    `value` is None whenever the extension is missing or unusable; the
    diagnostics explain why.
    """

    value: Optional[T] = None
    diagnostics: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.value is not None
