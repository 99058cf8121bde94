"""Unit tests for x402_extensions.core.declaration module."""

from typing import Optional

import pytest
from pydantic import BaseModel
from x402_extensions.core.declaration import (
    declare_extension,
    merge_extensions,
    check_declaration
)
from x402_extensions.core.validation import validate_extension
from x402_extensions.types.errors import ExtensionDeclarationError


FEATURE_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {"feature": {"type": "string"}},
    "required": ["feature"]
}


class FeatureInfo(BaseModel):
    feature: str
    note: Optional[str] = None


class TestDeclareExtension:
    """Test generic extension declaration."""

    def test_single_entry_map(self):
        extension_map = declare_extension("feature", {"feature": "x"}, FEATURE_SCHEMA)

        assert list(extension_map) == ["feature"]
        assert extension_map["feature"] == {"info": {"feature": "x"}, "schema": FEATURE_SCHEMA}

    def test_model_info_dumped_without_none(self):
        extension_map = declare_extension("feature", FeatureInfo(feature="x"), FEATURE_SCHEMA)
        assert extension_map["feature"]["info"] == {"feature": "x"}
        assert validate_extension(extension_map["feature"]).valid is True

    def test_inputs_are_copied(self):
        info = {"feature": "x"}
        schema = dict(FEATURE_SCHEMA)

        extension_map = declare_extension("feature", info, schema)
        extension_map["feature"]["info"]["feature"] = "mutated"
        extension_map["feature"]["schema"]["type"] = "array"

        assert info == {"feature": "x"}
        assert schema["type"] == "object"

    def test_equal_params_give_equal_records(self):
        assert declare_extension("f", {"feature": "x"}, FEATURE_SCHEMA) == \
            declare_extension("f", {"feature": "x"}, FEATURE_SCHEMA)


class TestMergeExtensions:
    """Test combining declarations."""

    def test_merge(self):
        merged = merge_extensions(
            declare_extension("a", {"feature": "1"}, FEATURE_SCHEMA),
            declare_extension("b", {"feature": "2"}, FEATURE_SCHEMA),
            None
        )
        assert set(merged) == {"a", "b"}

    def test_later_keys_win(self):
        merged = merge_extensions(
            declare_extension("a", {"feature": "old"}, FEATURE_SCHEMA),
            declare_extension("a", {"feature": "new"}, FEATURE_SCHEMA)
        )
        assert merged["a"]["info"] == {"feature": "new"}


class TestCheckDeclaration:
    """Test the authoring-time consistency check."""

    def test_consistent_declaration_passes(self):
        check_declaration(declare_extension("feature", {"feature": "x"}, FEATURE_SCHEMA))

    def test_inconsistent_declaration_raises(self):
        extension_map = declare_extension("feature", {"other": 1}, FEATURE_SCHEMA)

        with pytest.raises(ExtensionDeclarationError) as exc_info:
            check_declaration(extension_map)

        assert exc_info.value.key == "feature"
        assert exc_info.value.errors == ["(root): 'feature' is a required property"]
