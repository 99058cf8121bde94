"""Unit tests for x402_extensions.types.errors module."""

import pytest
from x402_extensions.types.errors import (
    X402Error,
    ExtensionError,
    SchemaCompilationError,
    InvalidExtensionError,
    ExtensionDeclarationError,
    ExtensionRegistrationError,
    X402ErrorCode,
    map_error_to_code
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_base_error(self):
        """Test X402Error base exception."""
        error = X402Error("Test error")
        assert str(error) == "Test error"
        assert isinstance(error, Exception)

    def test_error_inheritance(self):
        """Test that all errors inherit from ExtensionError and X402Error."""
        errors = [
            SchemaCompilationError("bad schema"),
            InvalidExtensionError("bad info"),
            ExtensionDeclarationError("bazaar", ["(root): oops"]),
            ExtensionRegistrationError("duplicate")
        ]
        for error in errors:
            assert isinstance(error, ExtensionError)
            assert isinstance(error, X402Error)

    def test_invalid_extension_error_is_value_error(self):
        """Strict extraction failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidExtensionError("Invalid", key="bazaar", errors=["(root): nope"])

    def test_invalid_extension_error_details(self):
        error = InvalidExtensionError("Invalid", key="bazaar", errors=["a: b"])
        assert error.key == "bazaar"
        assert error.errors == ["a: b"]

        bare = InvalidExtensionError("Invalid")
        assert bare.key is None
        assert bare.errors == []

    def test_declaration_error_message(self):
        error = ExtensionDeclarationError("bazaar", ["(root): 'input' is a required property"])
        assert "bazaar" in str(error)
        assert "'input' is a required property" in str(error)
        assert error.errors == ["(root): 'input' is a required property"]


class TestX402ErrorCode:
    """Test X402ErrorCode constants."""

    def test_all_error_codes_defined(self):
        all_codes = X402ErrorCode.get_all_codes()
        assert len(all_codes) == 4
        assert "INVALID_EXTENSION" in all_codes
        assert "INVALID_SCHEMA" in all_codes

    def test_map_error_to_code(self):
        assert map_error_to_code(InvalidExtensionError("x")) == X402ErrorCode.INVALID_EXTENSION
        assert map_error_to_code(SchemaCompilationError("x")) == X402ErrorCode.INVALID_SCHEMA
        assert map_error_to_code(
            ExtensionDeclarationError("k", ["e"])
        ) == X402ErrorCode.EXTENSION_DECLARATION_MISMATCH
        assert map_error_to_code(
            ExtensionRegistrationError("x")
        ) == X402ErrorCode.EXTENSION_REGISTRATION_FAILED

    def test_map_unknown_error(self):
        assert map_error_to_code(RuntimeError("boom")) == "UNKNOWN_ERROR"
