"""Unit tests for x402_extensions.core.validation module."""

import json

from x402_extensions.core.validation import validate_extension, validate_extensions
from x402_extensions.types.config import X402ExtensionsConfig
from x402_extensions.types.extensions import ExtensionRecord, ValidationResult


class TestValidateExtension:
    """Test validation of info against its own schema."""

    def test_valid_record(self, feature_record):
        result = validate_extension(feature_record)

        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.errors == []

    def test_accepts_extension_record(self, feature_record):
        record = ExtensionRecord.from_wire(feature_record)
        assert validate_extension(record).valid is True

    def test_missing_required_field(self, feature_record):
        feature_record["info"] = {}

        result = validate_extension(feature_record)

        assert result.valid is False
        assert result.errors == ["(root): 'feature' is a required property"]

    def test_wrong_type_reports_field_path(self, feature_record):
        feature_record["info"] = {"feature": 42}

        result = validate_extension(feature_record)

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].startswith("feature: ")
        assert "is not of type 'string'" in result.errors[0]

    def test_one_error_per_violation(self):
        record = {
            "info": {"a": 1, "b": 2},
            "schema": {
                "type": "object",
                "properties": {"a": {"type": "string"}, "b": {"type": "string"}}
            }
        }

        result = validate_extension(record)

        assert result.valid is False
        assert len(result.errors) == 2
        assert {error.split(":")[0] for error in result.errors} == {"a", "b"}

    def test_malformed_schema_becomes_failure(self):
        result = validate_extension({"info": {}, "schema": {"type": "no-such-type"}})

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Schema validation failed:")

    def test_malformed_record_becomes_failure(self):
        for record in [{"info": {}}, "nonsense", None, 42]:
            result = validate_extension(record)
            assert result.valid is False
            assert len(result.errors) == 1

    def test_unknown_keywords_do_not_fail(self):
        record = {
            "info": {"feature": "x"},
            "schema": {"type": "object", "x-future-keyword": 1, "properties": {"feature": {"type": "string"}}}
        }
        assert validate_extension(record).valid is True

    def test_deterministic(self, feature_record):
        feature_record["info"] = {"feature": 1, "extra": True}
        first = validate_extension(feature_record)
        second = validate_extension(feature_record)
        assert first == second

    def test_json_round_trip_preserves_result(self, feature_record):
        for info in [{"feature": "ok"}, {}, {"feature": 3}]:
            feature_record["info"] = info
            before = validate_extension(feature_record)
            after = validate_extension(json.loads(json.dumps(feature_record)))
            assert before == after

    def test_without_cache(self, feature_record):
        config = X402ExtensionsConfig(cache_validators=False)
        assert validate_extension(feature_record, config).valid is True


class TestValidateExtensions:
    """Test validating a whole extension map."""

    def test_validates_each_entry(self, feature_record):
        broken = {"info": {}, "schema": feature_record["schema"]}

        results = validate_extensions({"good": feature_record, "broken": broken})

        assert results["good"].valid is True
        assert results["broken"].valid is False

    def test_empty_map(self):
        assert validate_extensions(None) == {}
        assert validate_extensions({}) == {}
