"""x402_extensions - self-describing extensions for the x402 payment protocol."""

# Extension Types
from .types import (
    # Constants
    X402_VERSION,
    JSON_SCHEMA_DIALECT,

    # Configuration
    X402ExtensionsConfig,

    # Records and results
    ExtensionRecord,
    ValidationResult,
    ExtractionResult,

    # Protocol messages
    ExtensionMap,
    ResourceInfo,
    PaymentRequirements,
    PaymentRequired,
    PaymentPayload,

    # Error Types
    X402Error,
    ExtensionError,
    SchemaCompilationError,
    InvalidExtensionError,
    ExtensionDeclarationError,
    ExtensionRegistrationError,
    X402ErrorCode
)

# Core Functions
from .core import (
    compile_schema,
    validate_extension,
    validate_extensions,
    declare_extension,
    merge_extensions,
    check_declaration,
    extract_extension,
    extract_extension_info,

    # Registry
    ExtensionDefinition,
    ExtensionRegistry,
    default_registry,

    # Utilities
    X402ExtensionUtils
)

# Bazaar discovery extension (registers itself with default_registry)
from .bazaar import (
    BAZAAR,
    DiscoveredResource,
    declare_discovery_extension,
    validate_discovery_extension,
    extract_discovery_info
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "X402_VERSION",
    "JSON_SCHEMA_DIALECT",

    # Configuration
    "X402ExtensionsConfig",

    # Records and results
    "ExtensionRecord",
    "ValidationResult",
    "ExtractionResult",

    # Protocol messages
    "ExtensionMap",
    "ResourceInfo",
    "PaymentRequirements",
    "PaymentRequired",
    "PaymentPayload",

    # Error Types
    "X402Error",
    "ExtensionError",
    "SchemaCompilationError",
    "InvalidExtensionError",
    "ExtensionDeclarationError",
    "ExtensionRegistrationError",
    "X402ErrorCode",

    # Core Functions
    "compile_schema",
    "validate_extension",
    "validate_extensions",
    "declare_extension",
    "merge_extensions",
    "check_declaration",
    "extract_extension",
    "extract_extension_info",

    # Registry
    "ExtensionDefinition",
    "ExtensionRegistry",
    "default_registry",

    # Utilities
    "X402ExtensionUtils",

    # Bazaar
    "BAZAAR",
    "DiscoveredResource",
    "declare_discovery_extension",
    "validate_discovery_extension",
    "extract_discovery_info"
]
