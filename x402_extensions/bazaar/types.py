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
"""Type definitions for the bazaar discovery extension."""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Extension key for bazaar discovery
BAZAAR = "bazaar"

QueryParamMethods = Literal["GET", "HEAD", "DELETE"]
BodyMethods = Literal["POST", "PUT", "PATCH"]
BodyType = Literal["json", "form-data", "text"]

QUERY_METHODS = ("GET", "HEAD", "DELETE")
BODY_METHODS = ("POST", "PUT", "PATCH")
BODY_TYPES = ("json", "form-data", "text")


def is_query_method(method: str) -> bool:
    """True for GET, HEAD and DELETE."""
    return method.upper() in QUERY_METHODS


def is_body_method(method: str) -> bool:
    """True for POST, PUT and PATCH."""
    return method.upper() in BODY_METHODS


class OutputInfo(BaseModel):
    """What the endpoint returns."""

    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    format: Optional[str] = None
    example: Optional[Any] = None


class QueryInput(BaseModel):
    """How to call a query parameter endpoint (GET, HEAD, DELETE)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: Literal["http"] = "http"
    method: Optional[QueryParamMethods] = None
    query_params: Optional[Dict[str, Any]] = Field(default=None, alias="queryParams")
    headers: Optional[Dict[str, str]] = None


class BodyInput(BaseModel):
    """How to call a body endpoint (POST, PUT, PATCH)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: Literal["http"] = "http"
    method: Optional[BodyMethods] = None
    body_type: BodyType = Field(default="json", alias="bodyType")
    body: Any = Field(default_factory=dict)
    query_params: Optional[Dict[str, Any]] = Field(default=None, alias="queryParams")
    headers: Optional[Dict[str, str]] = None


class QueryDiscoveryInfo(BaseModel):
    """Discovery info for query parameter methods."""

    model_config = ConfigDict(extra="allow")

    input: QueryInput
    output: Optional[OutputInfo] = None


class BodyDiscoveryInfo(BaseModel):
    """Discovery info for body methods."""

    model_config = ConfigDict(extra="allow")

    input: BodyInput
    output: Optional[OutputInfo] = None


DiscoveryInfo = Union[QueryDiscoveryInfo, BodyDiscoveryInfo]


class QueryDiscoveryExtension(BaseModel):
    """Bazaar extension record for a query parameter endpoint."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    info: QueryDiscoveryInfo
    schema_: Dict[str, Any] = Field(alias="schema")


class BodyDiscoveryExtension(BaseModel):
    """Bazaar extension record for a body endpoint."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    info: BodyDiscoveryInfo
    schema_: Dict[str, Any] = Field(alias="schema")


DiscoveryExtension = Union[QueryDiscoveryExtension, BodyDiscoveryExtension]


def _is_body_input(input_data: Any) -> bool:
    if not isinstance(input_data, dict):
        return False
    if "bodyType" in input_data or "body_type" in input_data:
        return True
    method = input_data.get("method")
    return isinstance(method, str) and is_body_method(method)


def parse_discovery_info(data: Any) -> DiscoveryInfo:
    """Narrow raw discovery info into the query or body variant.

    Body info is recognised by a bodyType (or a body HTTP method) on its input.

    Raises:
        pydantic.ValidationError: If data does not have either shape
    """
    if isinstance(data, (QueryDiscoveryInfo, BodyDiscoveryInfo)):
        return data
    input_data = data.get("input", {}) if isinstance(data, dict) else None
    if _is_body_input(input_data):
        return BodyDiscoveryInfo.model_validate(data)
    return QueryDiscoveryInfo.model_validate(data)


def parse_discovery_extension(data: Any) -> DiscoveryExtension:
    """Parse a bazaar extension record into the query or body variant."""
    if isinstance(data, (QueryDiscoveryExtension, BodyDiscoveryExtension)):
        return data
    info = data.get("info", {}) if isinstance(data, dict) else None
    input_data = info.get("input", {}) if isinstance(info, dict) else None
    if _is_body_input(input_data):
        return BodyDiscoveryExtension.model_validate(data)
    return QueryDiscoveryExtension.model_validate(data)
