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
"""Facilitator side: validating and extracting bazaar discovery info.

Payload extensions are untrusted input. They are validated against their
own schema before use, whatever the payment requirements declared.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional
from urllib.parse import urlparse, urlunparse

from ..core.extraction import extract_extension, get_payload_version, payload_to_dict
from ..core.registry import ExtensionDefinition, default_registry
from ..core.validation import validate_extension
from ..types.config import X402ExtensionsConfig
from ..types.errors import InvalidExtensionError
from ..types.extensions import ExtractionResult, ValidationResult
from .types import (
    BAZAAR,
    DiscoveryExtension,
    DiscoveryInfo,
    parse_discovery_extension,
    parse_discovery_info,
)

logger = logging.getLogger(__name__)

UNKNOWN_METHOD = "UNKNOWN"


@dataclass
class DiscoveredResource:
    """A discoverable x402 resource, ready for cataloging."""

    resource_url: str
    method: str
    x402_version: int
    discovery_info: DiscoveryInfo
    description: Optional[str] = None
    mime_type: Optional[str] = None


@dataclass
class ValidationExtractResult:
    """Validation outcome plus the discovery info when valid."""

    valid: bool
    info: Optional[DiscoveryInfo] = None
    errors: List[str] = field(default_factory=list)


default_registry.register(
    ExtensionDefinition(
        key=BAZAAR,
        info_type=DiscoveryInfo,
        narrow=parse_discovery_info,
        description="Endpoint discovery for bazaar cataloging",
    )
)


def _to_record(extension: Any) -> Any:
    if hasattr(extension, "model_dump"):
        return extension.model_dump(by_alias=True, exclude_none=True)
    return extension


def validate_discovery_extension(extension: Any) -> ValidationResult:
    """Validate a bazaar extension's info against its schema.

    Args:
        extension: The `declare_discovery_extension(...)["bazaar"]` entry or a
            parsed DiscoveryExtension

    Returns:
        ValidationResult
    """
    return validate_extension(_to_record(extension))


def normalize_resource_url(url: str) -> str:
    """Strip query string and fragment so one endpoint catalogs once."""
    parsed = urlparse(url)
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, "", "", ""))


def get_method_from_info(info: Any) -> str:
    """HTTP method from discovery info, or UNKNOWN if it was never enriched."""
    if isinstance(info, dict):
        input_data = info.get("input")
        method = input_data.get("method") if isinstance(input_data, dict) else None
    else:
        method = getattr(getattr(info, "input", None), "method", None)
    return method or UNKNOWN_METHOD


def extract_discovery_result(
    payment_payload: Any,
    validate: Optional[bool] = None,
    config: Optional[X402ExtensionsConfig] = None
) -> ExtractionResult:
    """Extract a DiscoveredResource along with extraction diagnostics.

    Never raises; see extract_discovery_info.
    """
    result = extract_extension(
        payment_payload,
        BAZAAR,
        validate=validate,
        narrow=parse_discovery_info,
        config=config
    )
    if result.value is None:
        return result

    discovery_info = result.value
    try:
        payload_dict = payload_to_dict(payment_payload) or {}
        resource = payload_dict.get("resource")
        if not isinstance(resource, dict):
            resource = {}

        result.value = DiscoveredResource(
            resource_url=normalize_resource_url(resource.get("url") or ""),
            method=get_method_from_info(discovery_info),
            x402_version=get_payload_version(payload_dict),
            discovery_info=discovery_info,
            description=resource.get("description") or None,
            mime_type=resource.get("mimeType") or resource.get("mime_type") or None,
        )
    except Exception as e:
        message = f"Discovery resource could not be built: {e}"
        logger.warning(message)
        result.value = None
        result.diagnostics.append(message)
    return result


def extract_discovery_info(
    payment_payload: Any,
    validate: Optional[bool] = None,
    config: Optional[X402ExtensionsConfig] = None
) -> Optional[DiscoveredResource]:
    """Extract discovery information from a v2 payment payload.

    The client copies the server's extensions into PaymentPayload.extensions;
    this reads the bazaar entry from there.

    Args:
        payment_payload: PaymentPayload model or its wire dict
        validate: Validate the extension before trusting it; defaults to
            config.validate_on_extract
        config: Optional extension configuration

    Returns:
        DiscoveredResource, or None when the payload is not version 2, has no
        bazaar extension, or the extension is invalid

    Example:
        resource = extract_discovery_info(payment_payload)
        if resource:
            catalog.add(resource.resource_url, resource.method, resource.discovery_info)
    """
    return extract_discovery_result(payment_payload, validate=validate, config=config).value


def extract_discovery_info_from_extension(
    extension: Any,
    validate: bool = True
) -> DiscoveryInfo:
    """Extract discovery info from a bazaar extension entry directly.

    Unlike extract_discovery_info this raises on invalid input.

    Raises:
        InvalidExtensionError: If validate is True and the extension is invalid
        pydantic.ValidationError: If info has neither discovery shape
    """
    if validate:
        result = validate_discovery_extension(extension)
        if not result.valid:
            raise InvalidExtensionError(
                f"Invalid discovery extension: {', '.join(result.errors)}",
                key=BAZAAR,
                errors=result.errors
            )
    return parse_discovery_extension(_to_record(extension)).info


def validate_and_extract(extension: Any) -> ValidationExtractResult:
    """Validate a bazaar extension and return its info when valid."""
    result = validate_discovery_extension(extension)
    if not result.valid:
        return ValidationExtractResult(valid=False, errors=result.errors)

    try:
        info = parse_discovery_extension(_to_record(extension)).info
    except Exception as e:
        return ValidationExtractResult(valid=False, errors=[f"(root): {e}"])
    return ValidationExtractResult(valid=True, info=info)
