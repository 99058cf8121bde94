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
"""Utilities for moving extension maps between protocol messages."""

import copy
from typing import Any, Dict, Optional

from ..types.payloads import (
    ExtensionMap,
    PaymentPayload,
    PaymentRequired
)
from .declaration import merge_extensions


class X402ExtensionUtils:
    """Core utilities for carrying extensions through the x402 flow."""

    def attach_extensions(
        self,
        payment_required: PaymentRequired,
        *extension_maps: ExtensionMap
    ) -> PaymentRequired:
        """Return a copy of payment_required with the given declarations merged in."""
        merged = merge_extensions(payment_required.extensions or {}, *extension_maps)
        return payment_required.model_copy(update={"extensions": merged or None})

    def echo_extensions(
        self,
        payment_required: PaymentRequired,
        payment_payload: PaymentPayload
    ) -> PaymentPayload:
        """Copy the server's declared extensions into the client's payload.

        Extensions already present on the payload are kept unless the server
        declares the same key.
        """
        if not payment_required.extensions:
            return payment_payload
        merged = merge_extensions(payment_payload.extensions or {}, payment_required.extensions)
        return payment_payload.model_copy(update={"extensions": merged})

    def get_extensions(self, message: Any) -> Dict[str, Any]:
        """Extract the extension map from a PaymentRequired/PaymentPayload or its dict."""
        if message is None:
            return {}
        if isinstance(message, dict):
            extensions = message.get("extensions")
        else:
            extensions = getattr(message, "extensions", None)
        if not isinstance(extensions, dict):
            return {}
        return copy.deepcopy(extensions)

    def get_extension(self, message: Any, key: str) -> Optional[Dict[str, Any]]:
        """Raw, unvalidated extension entry for key, if present."""
        extension = self.get_extensions(message).get(key)
        return extension if isinstance(extension, dict) else None
