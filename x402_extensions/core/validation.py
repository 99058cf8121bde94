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
"""Validation of an extension's info against its own schema."""

import logging
from typing import Any, Dict, Optional

from ..types.config import DEFAULT_CONFIG, X402ExtensionsConfig
from ..types.extensions import ExtensionRecord, ValidationResult
from .schema import compile_schema

logger = logging.getLogger(__name__)


def validate_extension(
    extension: Any,
    config: Optional[X402ExtensionsConfig] = None
) -> ValidationResult:
    """Validate an extension's info against its schema.

    The extension is untrusted input. Malformed records and schemas are
    reported as a failed result rather than raised.

    Args:
        extension: ExtensionRecord, wire dict `{"info", "schema"}`, or any
            pydantic model exposing info and schema
        config: Optional configuration controlling validator caching

    Returns:
        ValidationResult with one error per schema violation
    """
    config = config or DEFAULT_CONFIG

    try:
        record = ExtensionRecord.from_wire(extension)
    except Exception as e:
        return ValidationResult.failure([f"Malformed extension: {e}"])

    info = record.info
    if hasattr(info, "model_dump"):
        info = info.model_dump(by_alias=True, exclude_none=True)

    try:
        compiled = compile_schema(record.schema_, cache=config.cache_validators)
        violations = compiled.check(info)
    except Exception as e:
        logger.debug(f"Schema compilation or evaluation failed: {e}")
        return ValidationResult.failure([f"Schema validation failed: {e}"])

    if not violations:
        return ValidationResult.success()
    return ValidationResult.failure([str(violation) for violation in violations])


def validate_extensions(
    extensions: Optional[Dict[str, Any]],
    config: Optional[X402ExtensionsConfig] = None
) -> Dict[str, ValidationResult]:
    """Validate every entry of an extension map, keyed by extension key."""
    if not extensions:
        return {}
    return {
        key: validate_extension(extension, config)
        for key, extension in extensions.items()
    }
