"""
Tests for property facades, the type verifier and message channels.
"""

import logging

import pytest

from modules.entity_validation import FieldSpec, ValidationSeverity
from modules.entity_validation.providers import (
    AttributePropertyFacade,
    CollectingMessageChannel,
    LoggerMessageChannel,
    MappingPropertyFacade,
    PropertyTypeVerifier,
    StaticMetadataProvider,
)


class TestPropertyFacades:

    def test_mapping_nested_paths(self):
        facade = MappingPropertyFacade()
        record = {"image": {"width": 10}, "items": [{"name": "a"}]}

        assert facade.get(record, "image.width") == 10
        assert facade.get(record, "items.0.name") == "a"
        assert facade.get(record, "missing.path") is None

        facade.set(record, "image.height", 20)
        facade.set(record, "meta.source", "import")

        assert record["image"] == {"width": 10, "height": 20}
        assert record["meta"] == {"source": "import"}

    def test_attribute_facade(self):
        class Node:
            title = "Hello"

        node = Node()
        facade = AttributePropertyFacade()

        assert facade.get(node, "title") == "Hello"
        assert facade.get(node, "body") is None

        facade.set(node, "body", "text")
        assert node.body == "text"


class TestPropertyTypeVerifier:

    @pytest.mark.parametrize("value,type_descriptor", [
        ("hello", "text"),
        (5, "token"),
        ("42", "integer"),
        (42, "integer"),
        ("1.5", "decimal"),
        (1704067200, "date"),
        ("1", "boolean"),
        (False, "boolean"),
        ("https://example.com/page", "uri"),
        ({"a": 1}, "struct"),
        ([1, "2"], "list<integer>"),
        ([], "list<text>"),
        (object(), "field_item_image"),
    ])
    def test_valid(self, value, type_descriptor):
        assert PropertyTypeVerifier().verify(value, type_descriptor) is True

    @pytest.mark.parametrize("value,type_descriptor", [
        (["a"], "text"),
        ("4.5", "integer"),
        ("abc", "decimal"),
        ("2024-01-01", "date"),
        ("yes", "boolean"),
        ("example.com", "uri"),
        ("text", "struct"),
        ("a", "list<text>"),
        ([1, "x"], "list<integer>"),
    ])
    def test_invalid(self, value, type_descriptor):
        assert PropertyTypeVerifier().verify(value, type_descriptor) is False


class TestMessageChannels:

    def test_collecting_channel(self):
        channel = CollectingMessageChannel()
        channel.emit("first")
        channel.emit("second", ValidationSeverity.WARNING)

        assert channel.get_messages() == ["first", "second"]
        assert channel.get_messages(ValidationSeverity.WARNING) == ["second"]

        channel.clear()
        assert channel.messages == []

    def test_logger_channel(self, caplog):
        channel = LoggerMessageChannel(logging.getLogger("tests.validation.messages"))

        with caplog.at_level(logging.INFO, logger="tests.validation.messages"):
            channel.emit("The field title cannot be empty.")
            channel.emit("Heads up", ValidationSeverity.WARNING)

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.ERROR, "The field title cannot be empty."),
            (logging.WARNING, "Heads up"),
        ]


class TestStaticMetadataProvider:

    def test_register_dicts_and_specs(self):
        provider = StaticMetadataProvider().register("node", "article", [
            FieldSpec(name="title", required=True),
            {"name": "field_year", "validators": ["isYear"]},
        ])

        fields = provider.get_fields_info("node", "article")

        assert list(fields) == ["title", "field_year"]
        assert fields["field_year"].validators == ["isYear"]

    def test_unknown_bundle(self):
        assert StaticMetadataProvider().get_fields_info("node", "article") == {}

    def test_returns_copies(self):
        provider = StaticMetadataProvider({"node": {"article": [FieldSpec(name="title")]}})

        provider.get_fields_info("node", "article")["title"].required = True

        assert provider.get_fields_info("node", "article")["title"].required is False
