"""Unit tests for x402_extensions.types.config module."""

import pytest
from pydantic import ValidationError
from x402_extensions.types.config import (
    X402_VERSION,
    JSON_SCHEMA_DIALECT,
    X402ExtensionsConfig
)


class TestConstants:
    """Test protocol constants."""

    def test_version_is_two(self):
        assert X402_VERSION == 2

    def test_schema_dialect(self):
        assert JSON_SCHEMA_DIALECT == "https://json-schema.org/draft/2020-12/schema"


class TestX402ExtensionsConfig:
    """Test X402ExtensionsConfig data model."""

    def test_default_config(self):
        config = X402ExtensionsConfig()

        assert config.x402_version == 2
        assert config.validate_on_extract is True
        assert config.cache_validators is True

    def test_custom_config(self):
        config = X402ExtensionsConfig(
            x402_version=3,
            validate_on_extract=False,
            cache_validators=False
        )

        assert config.x402_version == 3
        assert config.validate_on_extract is False
        assert config.cache_validators is False

    def test_config_validation(self):
        with pytest.raises(ValidationError):
            X402ExtensionsConfig(x402_version="invalid")
