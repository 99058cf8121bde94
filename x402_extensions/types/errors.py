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
"""Extension error types and error code mapping."""

from typing import List, Optional


class X402Error(Exception):
    """Base error for x402 extensions."""
    pass


class ExtensionError(X402Error):
    """Extension handling errors."""
    pass


class SchemaCompilationError(ExtensionError):
    """Raised when a JSON Schema document cannot be compiled.

    The validation engine converts this into a failed ValidationResult;
    it only escapes when the schema capability is used directly.
    """
    pass


class InvalidExtensionError(ExtensionError, ValueError):
    """Extension info does not satisfy its own schema.

    Raised only by the strict extraction helpers. The default extraction
    pipeline degrades to absence instead.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        errors: Optional[List[str]] = None
    ):
        """Initialize invalid extension error.

        Args:
            message: Human-readable error message
            key: Extension key that failed validation
            errors: Per-field validation errors
        """
        super().__init__(message)
        self.key = key
        self.errors = list(errors or [])


class ExtensionDeclarationError(ExtensionError):
    """A declared extension is inconsistent with its own schema.

    This is an authoring bug in the declaring code, surfaced by
    check_declaration in tests.
    """

    def __init__(self, key: str, errors: List[str]):
        super().__init__(f"Extension '{key}' does not satisfy its own schema: {', '.join(errors)}")
        self.key = key
        self.errors = list(errors)


class ExtensionRegistrationError(ExtensionError):
    """Extension registry misuse (duplicate or empty keys)."""
    pass


class X402ErrorCode:
    """Error codes reported for extension failures."""
    INVALID_EXTENSION = "INVALID_EXTENSION"
    INVALID_SCHEMA = "INVALID_SCHEMA"
    EXTENSION_DECLARATION_MISMATCH = "EXTENSION_DECLARATION_MISMATCH"
    EXTENSION_REGISTRATION_FAILED = "EXTENSION_REGISTRATION_FAILED"

    @classmethod
    def get_all_codes(cls) -> list[str]:
        """Returns all defined error codes."""
        return [
            cls.INVALID_EXTENSION,
            cls.INVALID_SCHEMA,
            cls.EXTENSION_DECLARATION_MISMATCH,
            cls.EXTENSION_REGISTRATION_FAILED
        ]


def map_error_to_code(error: Exception) -> str:
    """Maps implementation errors to error codes."""
    error_mapping = {
        InvalidExtensionError: X402ErrorCode.INVALID_EXTENSION,
        SchemaCompilationError: X402ErrorCode.INVALID_SCHEMA,
        ExtensionDeclarationError: X402ErrorCode.EXTENSION_DECLARATION_MISMATCH,
        ExtensionRegistrationError: X402ErrorCode.EXTENSION_REGISTRATION_FAILED,
    }
    return error_mapping.get(type(error), "UNKNOWN_ERROR")
