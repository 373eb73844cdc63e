"""
Tests for the YAML schema loader and metadata provider.
"""

from datetime import datetime, timezone

import pytest
import yaml

from modules.entity_validation import ConfigurationError, ValidationEngine
from modules.entity_validation.core.config_loader import SchemaConfigLoader
from modules.entity_validation.providers import MappingPropertyFacade, YamlMetadataProvider


SCHEMA = {
    "field_types": {
        "text": {"property_type": "text", "preprocess": ["morphText"]},
        "number_integer": {"property_type": "integer"},
    },
    "entity_types": {
        "node": {
            "label_key": "title",
            "bundles": {
                "article": {
                    "fields": {
                        "body": {"type": "text", "required": True, "validators": ["isText"]},
                        "title": {"type": "text", "label": "Title"},
                        "field_year": {
                            "type": "number_integer",
                            "property": "meta.year",
                            "validators": ["isYear"],
                        },
                    }
                }
            },
        }
    },
}


@pytest.fixture
def schema_path(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(yaml.safe_dump(SCHEMA, sort_keys=False))
    return path


class TestSchemaConfigLoader:

    def test_load(self, schema_path):
        loader = SchemaConfigLoader(schema_path)

        assert loader.get_entity_type("node").label_key == "title"
        assert loader.get_bundle("node", "article") is not None
        assert loader.get_bundle("node", "page") is None
        assert loader.get_field_type("text").preprocess == ["morphText"]
        assert loader.get_field_type("unknown").validators == []

    def test_invalid_document(self, tmp_path):
        path = tmp_path / "schema.yaml"
        path.write_text(yaml.safe_dump({"entity_types": {"node": {"bundles": "article"}}}))

        with pytest.raises(ConfigurationError):
            SchemaConfigLoader(path).load()

    def test_missing_file(self, tmp_path):
        loader = SchemaConfigLoader(tmp_path / "missing.yaml")

        assert loader.load().entity_types == {}

    def test_reload(self, schema_path):
        loader = SchemaConfigLoader(schema_path)
        loader.load()

        schema_path.write_text(yaml.safe_dump({"entity_types": {}}))

        assert loader.reload().entity_types == {}


class TestYamlMetadataProvider:

    def test_label_key_first_and_merged(self, schema_path):
        fields = YamlMetadataProvider(schema_path).get_fields_info("node", "article")

        assert list(fields) == ["title", "body", "field_year"]
        assert fields["title"].required is True
        assert fields["title"].label == "Title"
        assert fields["title"].preprocessors == ["morphText"]

    def test_field_type_rules_come_first(self, schema_path):
        fields = YamlMetadataProvider(schema_path).get_fields_info("node", "article")

        assert fields["body"].preprocessors == ["morphText"]
        assert fields["body"].validators == ["isText"]
        assert fields["body"].type_descriptor == "text"
        assert fields["field_year"].type_descriptor == "integer"
        assert fields["field_year"].target_property() == "meta.year"

    def test_unknown_bundle_keeps_label_key(self, schema_path):
        fields = YamlMetadataProvider(schema_path).get_fields_info("node", "page")

        assert list(fields) == ["title"]

    def test_unknown_entity_type(self, schema_path):
        assert YamlMetadataProvider(schema_path).get_fields_info("comment", "comment") == {}

    def test_missing_file(self, tmp_path):
        provider = YamlMetadataProvider(tmp_path / "missing.yaml")

        assert provider.get_fields_info("node", "article") == {}

    def test_validate_with_property_path(self, schema_path):
        engine = ValidationEngine(
            YamlMetadataProvider(schema_path),
            MappingPropertyFacade(),
            error_level=0,
            entity_type="node",
            bundle="article",
        )
        record = {"title": " Hello ", "body": "Body", "meta": {"year": "20"}}

        assert engine.validate(record, silent=True) is False
        assert engine.get_errors() == "The value 20 of the field field_year is not a valid year."
        assert record["title"] == "Hello"


class TestDefaultSchema:

    @pytest.fixture
    def provider(self):
        loader = SchemaConfigLoader()
        assert loader.config_path.exists()
        return YamlMetadataProvider(loader=loader)

    def test_article_fields(self, provider):
        fields = provider.get_fields_info("node", "article")

        assert list(fields) == ["title", "body", "field_image", "field_tags", "field_published"]

    def test_article_end_to_end(self, provider):
        engine = ValidationEngine(
            provider,
            MappingPropertyFacade(),
            error_level=0,
            entity_type="node",
            bundle="article",
        )
        record = {
            "title": "Release notes",
            "body": "  Body text  ",
            "field_image": {"width": 50, "height": 2000},
            "field_tags": "news",
            "field_published": "2024-01-01",
        }

        assert engine.validate(record, silent=True) is False

        errors = engine.get_errors(squash=False)
        assert list(errors) == ["field_image"]
        assert len(errors["field_image"]) == 2

        assert record["body"] == "Body text"
        assert record["field_tags"] == ["news"]
        assert record["field_published"] == int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp())

    def test_user_bundle(self, provider):
        engine = ValidationEngine(provider, MappingPropertyFacade(), error_level=0, entity_type="user")
        record = {"name": "admin", "field_birth_year": 1990, "field_homepage": "not a url"}

        assert engine.validate(record, silent=True) is False
        assert engine.get_errors() == "The value not a url is invalid for the field field_homepage."
