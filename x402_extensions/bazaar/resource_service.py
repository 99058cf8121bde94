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
"""Resource server side: declaring the bazaar discovery extension.

Both the info and the schema of a declaration are built from the same
parameters, so a declaration always satisfies its own schema.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.declaration import declare_extension
from ..types.config import JSON_SCHEMA_DIALECT
from ..types.payloads import ExtensionMap
from .types import (
    BAZAAR,
    BODY_METHODS,
    BODY_TYPES,
    QUERY_METHODS,
    BodyDiscoveryExtension,
    BodyDiscoveryInfo,
    BodyInput,
    BodyType,
    OutputInfo,
    QueryDiscoveryExtension,
    QueryDiscoveryInfo,
    QueryInput,
)


@dataclass
class OutputConfig:
    """Example response, with an optional schema for it."""

    example: Optional[Any] = None
    schema: Optional[Dict[str, Any]] = None


@dataclass
class DeclareQueryDiscoveryConfig:
    """Parameters for a query parameter endpoint declaration."""

    input: Optional[Dict[str, Any]] = None
    input_schema: Optional[Dict[str, Any]] = None
    output: Optional[OutputConfig] = None


@dataclass
class DeclareBodyDiscoveryConfig:
    """Parameters for a body endpoint declaration."""

    input: Optional[Dict[str, Any]] = None
    input_schema: Optional[Dict[str, Any]] = None
    body_type: BodyType = "json"
    output: Optional[OutputConfig] = None


def _json_type(value: Any) -> str:
    """JSON Schema type name for a JSON value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def _normalize_output(output: Any) -> Optional[OutputConfig]:
    if isinstance(output, OutputConfig):
        return output
    if isinstance(output, dict):
        schema = output.get("schema")
        return OutputConfig(
            example=output.get("example"),
            schema=schema if isinstance(schema, dict) else None
        )
    return None


def _output_parts(output: Optional[OutputConfig]):
    """Output info and its schema, or (None, None) without an example."""
    if output is None or output.example is None:
        return None, None

    example = copy.deepcopy(output.example)
    example_schema: Dict[str, Any] = {"type": _json_type(example)}
    if output.schema:
        example_schema.update(copy.deepcopy(output.schema))

    output_info = OutputInfo(type="json", example=example)
    output_schema = {
        "type": "object",
        "properties": {
            "type": {"type": "string"},
            "example": example_schema,
        },
        "required": ["type"],
    }
    return output_info, output_schema


def _wrap_schema(input_schema: Dict[str, Any], output_schema: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    properties: Dict[str, Any] = {"input": input_schema}
    if output_schema is not None:
        properties["output"] = output_schema
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "type": "object",
        "properties": properties,
        "required": ["input"],
    }


def _create_query_discovery_extension(
    input_data: Optional[Dict[str, Any]] = None,
    input_schema: Optional[Dict[str, Any]] = None,
    output: Optional[OutputConfig] = None
) -> QueryDiscoveryExtension:
    """Create a query discovery extension from example params and their schema."""
    has_params = isinstance(input_data, dict) and bool(input_data)

    query_input = QueryInput(
        type="http",
        query_params=copy.deepcopy(input_data) if has_params else None,
    )
    input_properties: Dict[str, Any] = {
        "type": {"type": "string", "const": "http"},
        "method": {"type": "string", "enum": list(QUERY_METHODS)},
    }
    if has_params:
        params_schema: Dict[str, Any] = {"type": "object"}
        if isinstance(input_schema, dict):
            params_schema.update(copy.deepcopy(input_schema))
        input_properties["queryParams"] = params_schema

    output_info, output_schema = _output_parts(output)
    schema = _wrap_schema(
        {
            "type": "object",
            "properties": input_properties,
            "required": ["type"],
            "additionalProperties": False,
        },
        output_schema,
    )
    info = QueryDiscoveryInfo(input=query_input, output=output_info)
    return QueryDiscoveryExtension(info=info, schema=schema)


def _create_body_discovery_extension(
    input_data: Optional[Any] = None,
    input_schema: Optional[Dict[str, Any]] = None,
    body_type: BodyType = "json",
    output: Optional[OutputConfig] = None
) -> BodyDiscoveryExtension:
    """Create a body discovery extension from an example body and its schema."""
    has_body = input_data is not None and input_data != {}

    body_input = BodyInput(
        type="http",
        body_type=body_type,
        body=copy.deepcopy(input_data) if has_body else {},
    )
    # Without an example body there is nothing to describe, so the schema stays open
    if has_body and isinstance(input_schema, dict):
        body_schema = copy.deepcopy(input_schema)
    else:
        body_schema = {"type": _json_type(body_input.body)}

    output_info, output_schema = _output_parts(output)
    schema = _wrap_schema(
        {
            "type": "object",
            "properties": {
                "type": {"type": "string", "const": "http"},
                "method": {"type": "string", "enum": list(BODY_METHODS)},
                "bodyType": {"type": "string", "enum": list(BODY_TYPES)},
                "body": body_schema,
            },
            "required": ["type", "bodyType", "body"],
            "additionalProperties": False,
        },
        output_schema,
    )
    info = BodyDiscoveryInfo(input=body_input, output=output_info)
    return BodyDiscoveryExtension(info=info, schema=schema)


def declare_discovery_extension(
    input: Optional[Any] = None,
    input_schema: Optional[Dict[str, Any]] = None,
    body_type: Optional[BodyType] = None,
    output: Optional[Any] = None
) -> ExtensionMap:
    """Creates a bazaar discovery extension describing how to call an endpoint.

    The HTTP method is not a parameter; BazaarResourceServerExtension fills
    it in from the request at runtime.

    Args:
        input: Example input (query params for GET/HEAD/DELETE, body for
            POST/PUT/PATCH)
        input_schema: JSON Schema fragment for the input
        body_type: "json", "form-data" or "text" for body endpoints; when
            None a query parameter extension is declared
        output: OutputConfig, or a dict with "example" and optional "schema"

    Returns:
        `{"bazaar": {"info": ..., "schema": ...}}`

    Example:
        extension = declare_discovery_extension(
            input={"query": "example"},
            input_schema={
                "properties": {"query": {"type": "string"}},
                "required": ["query"]
            },
            output={"example": {"results": []}}
        )
        payment_required.extensions = {**extension}
    """
    output_config = _normalize_output(output)

    if body_type is not None:
        extension = _create_body_discovery_extension(
            input_data=input,
            input_schema=input_schema,
            body_type=body_type,
            output=output_config,
        )
    else:
        extension = _create_query_discovery_extension(
            input_data=input if isinstance(input, dict) else None,
            input_schema=input_schema,
            output=output_config,
        )

    return declare_extension(BAZAAR, extension.info, extension.schema_)


def declare_query_discovery_extension(config: DeclareQueryDiscoveryConfig) -> ExtensionMap:
    return declare_discovery_extension(
        input=config.input,
        input_schema=config.input_schema,
        output=config.output,
    )


def declare_body_discovery_extension(config: DeclareBodyDiscoveryConfig) -> ExtensionMap:
    return declare_discovery_extension(
        input=config.input,
        input_schema=config.input_schema,
        body_type=config.body_type,
        output=config.output,
    )
