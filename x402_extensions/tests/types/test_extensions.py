"""Unit tests for x402_extensions.types.extensions module."""

import json

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from x402_extensions.types.extensions import (
    ExtensionRecord,
    ValidationResult,
    ExtractionResult
)


class TestExtensionRecord:
    """Test ExtensionRecord data model."""

    def test_from_wire_dict(self, feature_record):
        record = ExtensionRecord.from_wire(feature_record)

        assert record.info == {"feature": "dark-mode"}
        assert record.schema_["required"] == ["feature"]

    def test_from_wire_record_is_identity(self, feature_record):
        record = ExtensionRecord.from_wire(feature_record)
        assert ExtensionRecord.from_wire(record) is record

    def test_from_wire_model(self, feature_record):
        class Wrapper(BaseModel):
            model_config = ConfigDict(populate_by_name=True)

            info: dict
            schema_: dict = Field(alias="schema")

        wrapper = Wrapper(info=feature_record["info"], schema=feature_record["schema"])
        record = ExtensionRecord.from_wire(wrapper)
        assert record.info == feature_record["info"]

    def test_from_wire_rejects_other_types(self):
        with pytest.raises(TypeError):
            ExtensionRecord.from_wire("not a record")

    def test_missing_schema_rejected(self):
        with pytest.raises(ValidationError):
            ExtensionRecord.from_wire({"info": {}})

    def test_to_wire_uses_schema_key(self, feature_record):
        wire = ExtensionRecord.from_wire(feature_record).to_wire()
        assert set(wire) == {"info", "schema"}
        assert wire == feature_record

    def test_to_wire_returns_copies(self, feature_record):
        record = ExtensionRecord.from_wire(feature_record)
        wire = record.to_wire()
        wire["info"]["feature"] = "changed"
        assert record.info["feature"] == "dark-mode"

    def test_record_is_frozen(self, feature_record):
        record = ExtensionRecord.from_wire(feature_record)
        with pytest.raises(ValidationError):
            record.info = {}

    def test_structural_equality(self, feature_record):
        first = ExtensionRecord.from_wire(feature_record)
        second = ExtensionRecord.from_wire(json.loads(json.dumps(feature_record)))
        assert first == second


class TestValidationResult:
    """Test ValidationResult invariants."""

    def test_success(self):
        result = ValidationResult.success()
        assert result.valid is True
        assert result.errors == []

    def test_failure(self):
        result = ValidationResult.failure(["(root): bad"])
        assert result.valid is False
        assert result.errors == ["(root): bad"]

    def test_valid_with_errors_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(valid=True, errors=["(root): bad"])

    def test_invalid_without_errors_rejected(self):
        with pytest.raises(ValidationError):
            ValidationResult(valid=False)


class TestExtractionResult:
    """Test ExtractionResult container."""

    def test_defaults_to_absent(self):
        result = ExtractionResult()
        assert result.value is None
        assert result.found is False
        assert result.diagnostics == []

    def test_found(self):
        result = ExtractionResult(value={"a": 1})
        assert result.found is True
