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
"""Resource server hook that adds the HTTP method to bazaar declarations."""

import copy
import logging
from typing import Any

from .types import BAZAAR

logger = logging.getLogger(__name__)


def _is_http_request_context(ctx: Any) -> bool:
    return isinstance(getattr(ctx, "method", None), str)


class BazaarResourceServerExtension:
    """Enriches bazaar declarations with the method of the incoming request.

    The method is written into info.input.method and made required in the
    schema, so the enriched declaration still satisfies its own schema.
    Methods the declared schema does not allow are left out.
    """

    @property
    def key(self) -> str:
        return BAZAAR

    def enrich_declaration(self, declaration: Any, transport_context: Any) -> Any:
        """Return an enriched copy of declaration; the input is not modified.

        Args:
            declaration: The bazaar `{"info", "schema"}` entry
            transport_context: Request object exposing a `method` attribute

        Returns:
            Enriched declaration, or declaration unchanged when it cannot be
            enriched
        """
        if not _is_http_request_context(transport_context):
            return declaration

        if hasattr(declaration, "model_dump"):
            ext = declaration.model_dump(by_alias=True, exclude_none=True)
        elif isinstance(declaration, dict):
            ext = copy.deepcopy(declaration)
        else:
            return declaration

        info = ext.get("info")
        schema = ext.get("schema")
        if not isinstance(info, dict) or not isinstance(info.get("input"), dict):
            return declaration
        if not isinstance(schema, dict):
            return declaration

        properties = schema.get("properties", {})
        if not isinstance(properties, dict):
            return declaration
        input_schema = properties.get("input")
        if not isinstance(input_schema, dict):
            return declaration

        input_properties = input_schema.get("properties", {})
        if not isinstance(input_properties, dict):
            return declaration
        method_schema = input_properties.get("method", {})
        if not isinstance(method_schema, dict):
            return declaration
        required = input_schema.get("required", [])
        if not isinstance(required, list):
            return declaration

        method = transport_context.method.upper()
        allowed = method_schema.get("enum")
        if allowed is not None and method not in allowed:
            logger.warning(f"HTTP method {method} is not valid for this bazaar declaration; not enriching")
            return declaration

        info["input"]["method"] = method
        required = list(required)
        if "method" not in required:
            required.append("method")
        input_schema["required"] = required
        return ext


bazaar_resource_server_extension = BazaarResourceServerExtension()
