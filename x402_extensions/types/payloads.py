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
"""x402 v2 protocol messages that carry extension maps.

Only the fields the extension mechanism reads are modelled strictly; the
scheme-specific payment data is kept as opaque JSON.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import X402_VERSION


# Wire shape of PaymentRequired.extensions / PaymentPayload.extensions
ExtensionMap = Dict[str, Dict[str, Any]]


class ResourceInfo(BaseModel):
    """Describes the resource being paid for."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    description: Optional[str] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")


class PaymentRequirements(BaseModel):
    """A single accepted way to pay, as listed in PaymentRequired.accepts."""

    model_config = ConfigDict(populate_by_name=True)

    scheme: str
    network: str
    asset: str
    amount: str
    pay_to: str = Field(alias="payTo")
    max_timeout_seconds: int = Field(default=600, alias="maxTimeoutSeconds")
    extra: Dict[str, Any] = Field(default_factory=dict)


class PaymentRequired(BaseModel):
    """402 response body produced by a resource server."""

    model_config = ConfigDict(populate_by_name=True)

    x402_version: int = Field(default=X402_VERSION, alias="x402Version")
    error: Optional[str] = None
    resource: Optional[ResourceInfo] = None
    accepts: List[PaymentRequirements] = Field(default_factory=list)
    extensions: Optional[Dict[str, Any]] = None


class PaymentPayload(BaseModel):
    """Payment submitted by a client, echoing the server's extensions."""

    model_config = ConfigDict(populate_by_name=True)

    x402_version: int = Field(default=X402_VERSION, alias="x402Version")
    payload: Dict[str, Any] = Field(default_factory=dict)
    accepted: Optional[PaymentRequirements] = None
    resource: Optional[ResourceInfo] = None
    extensions: Optional[Dict[str, Any]] = None
