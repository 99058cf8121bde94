"""Core package exports for x402_extensions."""

from .schema import (
    CompiledSchema,
    SchemaViolation,
    compile_schema,
    clear_schema_cache
)
from .validation import validate_extension, validate_extensions
from .declaration import declare_extension, merge_extensions, check_declaration
from .registry import ExtensionDefinition, ExtensionRegistry, default_registry
from .extraction import extract_extension, extract_extension_info
from .utils import X402ExtensionUtils

__all__ = [
    # Schema capability
    "CompiledSchema",
    "SchemaViolation",
    "compile_schema",
    "clear_schema_cache",

    # Validation
    "validate_extension",
    "validate_extensions",

    # Declaration
    "declare_extension",
    "merge_extensions",
    "check_declaration",

    # Registry
    "ExtensionDefinition",
    "ExtensionRegistry",
    "default_registry",

    # Extraction
    "extract_extension",
    "extract_extension_info",

    # Utilities
    "X402ExtensionUtils"
]
