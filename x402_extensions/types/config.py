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
"""Configuration types for x402_extensions."""

from pydantic import BaseModel


# Protocol version that carries extensions in PaymentPayload
X402_VERSION = 2

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class X402ExtensionsConfig(BaseModel):
    """Configuration for extension validation and extraction."""
    x402_version: int = X402_VERSION
    validate_on_extract: bool = True
    cache_validators: bool = True


DEFAULT_CONFIG = X402ExtensionsConfig()
