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
"""Building extension map entries for PaymentRequired responses."""

import copy
from typing import Any, Dict

from ..types.errors import ExtensionDeclarationError
from ..types.extensions import ExtensionRecord
from ..types.payloads import ExtensionMap
from .validation import validate_extension


def declare_extension(
    key: str,
    info: Any,
    schema: Dict[str, Any]
) -> ExtensionMap:
    """Creates a single-entry extension map for PaymentRequired.extensions.

    Concrete extensions should derive `schema` from the same parameters that
    produced `info`; this function only packages the pair.

    Args:
        key: Extension key (e.g., "bazaar")
        info: Extension data, either JSON data or a pydantic model
        schema: JSON Schema describing info

    Returns:
        `{key: {"info": ..., "schema": ...}}` ready for the wire
    """
    if hasattr(info, "model_dump"):
        info = info.model_dump(by_alias=True, exclude_none=True)

    record = ExtensionRecord(info=copy.deepcopy(info), schema=copy.deepcopy(schema))
    return {key: record.to_wire()}


def merge_extensions(*extension_maps: ExtensionMap) -> ExtensionMap:
    """Combine several declarations into one map. Later keys win."""
    merged: ExtensionMap = {}
    for extension_map in extension_maps:
        if extension_map:
            merged.update(copy.deepcopy(extension_map))
    return merged


def check_declaration(extension_map: ExtensionMap) -> None:
    """Assert that every declared extension satisfies its own schema.

    Intended for extension authors' tests; declarations are not re-validated
    at runtime.

    Raises:
        ExtensionDeclarationError: If any entry fails its own schema
    """
    for key, extension in extension_map.items():
        result = validate_extension(extension)
        if not result.valid:
            raise ExtensionDeclarationError(key, result.errors)
