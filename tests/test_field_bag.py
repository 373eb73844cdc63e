"""
Tests for field bag validation.
"""

import pytest

from modules.entity_validation import ConfigurationError, FieldSpec, ValidationEngine, ValidationFailed


class TestFieldBag:

    def test_only_bag_fields_checked(self, engine):
        engine.add_field("field_year", 99)

        assert engine.validate_fields(silent=True) is False
        assert list(engine.get_errors(squash=False)) == ["field_year"]

    def test_valid_bag(self, engine):
        engine.set_fields({"title": "Hello", "field_year": "2024"})

        assert engine.validate_fields() is True

    def test_required_field_in_bag(self, engine):
        engine.add_field("title", "").add_field("body", "text")

        with pytest.raises(ValidationFailed, match="title cannot be empty"):
            engine.validate_fields()

    def test_unknown_bag_fields_ignored(self, engine, facade):
        engine.set_fields({"title": "Hello", "extra": object()})

        assert engine.validate_fields() is True
        assert facade.reads == []

    def test_preprocessors_update_bag(self, engine):
        engine.add_field("body", "  text  ")

        engine.validate_fields()

        assert engine.get_fields()["body"] == "text"

    def test_property_name_ignored_for_bag(self, provider):
        provider.register("node", "nested", [FieldSpec(name="title", property_name="data.title", required=True)])
        engine = ValidationEngine(provider, None, error_level=0, entity_type="node", bundle="nested")
        engine.add_field("title", "Hello")

        assert engine.validate_fields() is True

    def test_set_fields_copies_input(self, engine):
        fields = {"title": "Hello"}
        engine.set_fields(fields)
        engine.add_field("body", "x")

        assert fields == {"title": "Hello"}

    def test_requires_entity_type(self, provider):
        engine = ValidationEngine(provider, None, error_level=0)
        engine.add_field("title", "Hello")

        with pytest.raises(ConfigurationError):
            engine.validate_fields()
