"""Shared pytest fixtures for x402_extensions tests."""

import pytest
from x402_extensions.types import (
    PaymentRequirements,
    PaymentRequired,
    PaymentPayload,
    ResourceInfo
)
from x402_extensions.core.schema import clear_schema_cache


@pytest.fixture(autouse=True)
def fresh_schema_cache():
    """Isolate tests from validators compiled by earlier tests."""
    clear_schema_cache()
    yield
    clear_schema_cache()


@pytest.fixture
def sample_payment_requirements():
    """Create sample PaymentRequirements for testing."""
    return PaymentRequirements(
        scheme="exact",
        network="eip155:8453",
        asset="0x833589fCD6eDb6E08f4c7C32D4f71b54bda02913",
        amount="1000000",
        pay_to="0xmerchant123",
        max_timeout_seconds=600
    )


@pytest.fixture
def sample_resource():
    """Create sample ResourceInfo for testing."""
    return ResourceInfo(
        url="https://api.example.com/search?q=test#top",
        description="Search the catalog",
        mime_type="application/json"
    )


@pytest.fixture
def feature_record():
    """A wire extension entry whose schema requires a string feature."""
    return {
        "info": {"feature": "dark-mode"},
        "schema": {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": {"feature": {"type": "string"}},
            "required": ["feature"]
        }
    }


@pytest.fixture
def sample_payment_required(sample_payment_requirements, sample_resource):
    """Create sample PaymentRequired without extensions."""
    return PaymentRequired(
        x402_version=2,
        resource=sample_resource,
        accepts=[sample_payment_requirements]
    )


@pytest.fixture
def make_payload(sample_payment_requirements, sample_resource):
    """Factory for v2 PaymentPayloads carrying the given extensions."""
    def _make(extensions=None, x402_version=2):
        return PaymentPayload(
            x402_version=x402_version,
            payload={"signature": "0x" + "a" * 130},
            accepted=sample_payment_requirements,
            resource=sample_resource,
            extensions=extensions
        )
    return _make
