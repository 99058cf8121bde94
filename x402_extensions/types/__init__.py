"""Types package for x402_extensions."""

from .config import (
    X402_VERSION,
    JSON_SCHEMA_DIALECT,
    X402ExtensionsConfig
)

from .errors import (
    X402Error,
    ExtensionError,
    SchemaCompilationError,
    InvalidExtensionError,
    ExtensionDeclarationError,
    ExtensionRegistrationError,
    X402ErrorCode,
    map_error_to_code
)

from .extensions import (
    ExtensionRecord,
    ValidationResult,
    ExtractionResult
)

from .payloads import (
    ExtensionMap,
    ResourceInfo,
    PaymentRequirements,
    PaymentRequired,
    PaymentPayload
)

__all__ = [

    "X402_VERSION",
    "JSON_SCHEMA_DIALECT",
    "X402ExtensionsConfig",

    "X402Error",
    "ExtensionError",
    "SchemaCompilationError",
    "InvalidExtensionError",
    "ExtensionDeclarationError",
    "ExtensionRegistrationError",
    "X402ErrorCode",
    "map_error_to_code",

    "ExtensionRecord",
    "ValidationResult",
    "ExtractionResult",

    "ExtensionMap",
    "ResourceInfo",
    "PaymentRequirements",
    "PaymentRequired",
    "PaymentPayload"
]
