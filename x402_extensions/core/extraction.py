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
"""Extraction of named extensions from payment payloads.

Extensions are optional, best-effort metadata. Every failure mode here
collapses to an absent value with diagnostics; nothing is raised to the
caller.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..types.config import DEFAULT_CONFIG, X402ExtensionsConfig
from ..types.extensions import ExtractionResult
from .registry import ExtensionRegistry, default_registry
from .validation import validate_extension

logger = logging.getLogger(__name__)


def payload_to_dict(payment_payload: Any) -> Optional[Dict[str, Any]]:
    """Wire-shaped dict for a payload model or dict; None for anything else."""
    if isinstance(payment_payload, dict):
        return payment_payload
    if hasattr(payment_payload, "model_dump"):
        return payment_payload.model_dump(by_alias=True)
    return None


def get_payload_version(payload_dict: Dict[str, Any]) -> Optional[int]:
    """Read x402Version, accepting the snake_case spelling as well."""
    if "x402Version" in payload_dict:
        return payload_dict["x402Version"]
    return payload_dict.get("x402_version")


def _absent(result: ExtractionResult, message: str, warn: bool = False) -> ExtractionResult:
    result.diagnostics.append(message)
    if warn:
        logger.warning(message)
    else:
        logger.debug(message)
    return result


def extract_extension(
    payment_payload: Any,
    key: str,
    validate: Optional[bool] = None,
    narrow: Optional[Callable[[Any], Any]] = None,
    config: Optional[X402ExtensionsConfig] = None,
    registry: Optional[ExtensionRegistry] = None
) -> ExtractionResult:
    """Locate, optionally validate, and narrow an extension from a payload.

    Args:
        payment_payload: PaymentPayload model or its wire dict
        key: Extension key to look up
        validate: Validate info against the extension's schema before
            trusting it; defaults to config.validate_on_extract
        narrow: Conversion from raw info to the caller's type; defaults to
            the registry definition for key, or the raw info
        config: Optional extension configuration
        registry: Registry used when narrow is not given

    Returns:
        ExtractionResult with the narrowed value, or value None plus
        diagnostics explaining why nothing usable was found
    """
    config = config or DEFAULT_CONFIG
    registry = registry or default_registry
    if validate is None:
        validate = config.validate_on_extract
    result: ExtractionResult = ExtractionResult()

    try:
        payload_dict = payload_to_dict(payment_payload)
        if payload_dict is None:
            return _absent(result, f"Payment payload of type {type(payment_payload).__name__} is not readable")

        version = get_payload_version(payload_dict)
        if version != config.x402_version:
            return _absent(result, f"Unsupported x402Version {version!r}; extensions require {config.x402_version}")

        extensions = payload_dict.get("extensions")
        if not isinstance(extensions, dict):
            return _absent(result, "Payment payload carries no extensions")

        if key not in extensions:
            return _absent(result, f"Extension '{key}' not present in payment payload")

        extension = extensions[key]
        if not isinstance(extension, dict) or "info" not in extension:
            return _absent(result, f"Extension '{key}' is not an {{info, schema}} object", warn=True)

        if validate:
            validation = validate_extension(extension, config)
            if not validation.valid:
                return _absent(
                    result,
                    f"Extension '{key}' validation failed: {', '.join(validation.errors)}",
                    warn=True
                )

        info = extension["info"]
        if info is None:
            return _absent(result, f"Extension '{key}' has null info")
        if narrow is not None:
            result.value = narrow(info)
        else:
            result.value = registry.narrow(key, info)
    except Exception as e:
        result.value = None
        return _absent(result, f"Extension '{key}' extraction failed: {e}", warn=True)

    logger.debug(f"Extracted extension '{key}'")
    return result


def extract_extension_info(
    payment_payload: Any,
    key: str,
    validate: Optional[bool] = None,
    narrow: Optional[Callable[[Any], Any]] = None,
    config: Optional[X402ExtensionsConfig] = None
) -> Optional[Any]:
    """Same as extract_extension, returning only the value (or None)."""
    return extract_extension(
        payment_payload,
        key,
        validate=validate,
        narrow=narrow,
        config=config
    ).value
