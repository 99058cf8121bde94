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
"""Legacy v1 discovery, read from PaymentRequirements.outputSchema.

Version 1 payloads never carry extensions, so extract_discovery_info ignores
them. Facilitators that still catalog v1 resources call these functions on
the v1 payment requirements instead. The v1 shape is loosely specified; the
field names below are the spellings seen in practice.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .types import (
    BodyDiscoveryInfo,
    BodyInput,
    BodyType,
    DiscoveryInfo,
    OutputInfo,
    QueryDiscoveryInfo,
    QueryInput,
    is_body_method,
    is_query_method,
)


@dataclass
class ResourceMetadataV1:
    """Resource metadata embedded in v1 payment requirements."""

    url: str
    description: str
    mime_type: str


def _as_dict(payment_requirements: Any) -> Dict[str, Any]:
    if hasattr(payment_requirements, "model_dump"):
        return payment_requirements.model_dump(by_alias=True)
    if isinstance(payment_requirements, dict):
        return payment_requirements
    return {}


def _first_dict(source: Dict[str, Any], *names: str) -> Optional[Dict[str, Any]]:
    for name in names:
        value = source.get(name)
        if isinstance(value, dict):
            return value
    return None


def _extract_body_info(v1_input: Dict[str, Any]) -> Tuple[Dict[str, Any], BodyType]:
    body_type: BodyType = "json"
    declared = v1_input.get("bodyType") or v1_input.get("body_type")
    if isinstance(declared, str):
        lowered = declared.lower()
        if "form" in lowered or "multipart" in lowered:
            body_type = "form-data"
        elif "text" in lowered or "plain" in lowered:
            body_type = "text"

    body = _first_dict(v1_input, "bodyFields", "body_fields", "bodyParams", "body", "data", "properties")
    return body or {}, body_type


def extract_discovery_info_v1(payment_requirements: Any) -> Optional[DiscoveryInfo]:
    """Normalize v1 outputSchema discovery data into v2 discovery info.

    Args:
        payment_requirements: v1 PaymentRequirements as a dict or model

    Returns:
        Query or body discovery info, or None when the requirements are not
        discoverable
    """
    requirements = _as_dict(payment_requirements)
    output_schema = requirements.get("outputSchema") or requirements.get("output_schema")
    if not isinstance(output_schema, dict):
        return None

    v1_input = output_schema.get("input")
    if not isinstance(v1_input, dict) or v1_input.get("type") != "http" or "method" not in v1_input:
        return None

    # Missing flag means discoverable
    if not v1_input.get("discoverable", True):
        return None

    method = v1_input.get("method")
    if not isinstance(method, str):
        return None
    method = method.upper()

    headers = _first_dict(v1_input, "headerFields", "header_fields", "headers")
    query_params = _first_dict(v1_input, "queryParams", "query_params", "query", "params")
    output_data = output_schema.get("output")
    output = OutputInfo(type="json", example=output_data) if output_data else None

    if is_query_method(method):
        return QueryDiscoveryInfo(
            input=QueryInput(type="http", method=method, query_params=query_params, headers=headers),
            output=output,
        )

    if is_body_method(method):
        body, body_type = _extract_body_info(v1_input)
        return BodyDiscoveryInfo(
            input=BodyInput(
                type="http",
                method=method,
                body_type=body_type,
                body=body,
                query_params=query_params,
                headers=headers,
            ),
            output=output,
        )

    return None


def is_discoverable_v1(payment_requirements: Any) -> bool:
    return extract_discovery_info_v1(payment_requirements) is not None


def extract_resource_metadata_v1(payment_requirements: Any) -> ResourceMetadataV1:
    requirements = _as_dict(payment_requirements)
    return ResourceMetadataV1(
        url=requirements.get("resource", ""),
        description=requirements.get("description", ""),
        mime_type=requirements.get("mimeType") or requirements.get("mime_type") or "",
    )
