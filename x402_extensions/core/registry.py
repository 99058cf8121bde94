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
"""Registry of known extension kinds.

Each kind is identified by its extension key and knows how to narrow an
untrusted `info` value into its typed shape. Together the registered kinds
form a union tagged by extension key.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from pydantic import TypeAdapter

from ..types.errors import ExtensionRegistrationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionDefinition:
    """A known extension kind.

    Attributes:
        key: Unique extension key
        info_type: Type that info narrows into
        narrow: Optional custom conversion from raw info to info_type;
            defaults to pydantic validation against info_type
        description: Human-readable summary
    """

    key: str
    info_type: Any
    narrow: Optional[Callable[[Any], Any]] = None
    description: str = ""

    def narrow_info(self, info: Any) -> Any:
        """Convert raw info into info_type. Raises on structural mismatch."""
        if self.narrow is not None:
            return self.narrow(info)
        return TypeAdapter(self.info_type).validate_python(info)


class ExtensionRegistry:
    """Thread-safe mapping from extension key to ExtensionDefinition."""

    def __init__(self):
        self._definitions: Dict[str, ExtensionDefinition] = {}
        self._lock = threading.Lock()

    def register(self, definition: ExtensionDefinition, replace: bool = False) -> None:
        """Register an extension kind.

        Raises:
            ExtensionRegistrationError: If the key is empty, or already
                registered with a different definition and replace is False
        """
        if not definition.key:
            raise ExtensionRegistrationError("Extension key must be a non-empty string")

        with self._lock:
            existing = self._definitions.get(definition.key)
            if existing is not None and existing != definition and not replace:
                raise ExtensionRegistrationError(
                    f"Extension '{definition.key}' is already registered"
                )
            self._definitions[definition.key] = definition
        logger.debug(f"Registered extension '{definition.key}'")

    def unregister(self, key: str) -> None:
        with self._lock:
            self._definitions.pop(key, None)

    def get(self, key: str) -> Optional[ExtensionDefinition]:
        return self._definitions.get(key)

    def keys(self) -> List[str]:
        return sorted(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def narrow(self, key: str, info: Any) -> Any:
        """Narrow info for a registered key; unknown keys pass info through."""
        definition = self.get(key)
        if definition is None:
            return info
        return definition.narrow_info(info)


default_registry = ExtensionRegistry()
