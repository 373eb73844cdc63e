"""
Shared fixtures for entity validation tests.
"""

from typing import Any, List, Tuple

import pytest

from modules.entity_validation import FieldSpec, ValidationEngine
from modules.entity_validation.providers import (
    CollectingMessageChannel,
    MappingPropertyFacade,
    StaticMetadataProvider,
)


class RecordingFacade(MappingPropertyFacade):
    """Mapping facade that remembers every read and write."""

    def __init__(self) -> None:
        self.reads: List[str] = []
        self.writes: List[Tuple[str, Any]] = []

    def get(self, record: Any, property_name: str) -> Any:
        self.reads.append(property_name)
        return super().get(record, property_name)

    def set(self, record: Any, property_name: str, value: Any) -> None:
        self.writes.append((property_name, value))
        super().set(record, property_name, value)


ARTICLE_FIELDS = [
    FieldSpec(name="title", required=True, type_descriptor="text"),
    FieldSpec(name="body", preprocessors=["morphText"], type_descriptor="text"),
    FieldSpec(
        name="field_image",
        validators=["validateImageField"],
        settings={"max_resolution": "200x150", "min_resolution": "100x50"},
    ),
    FieldSpec(name="field_year", validators=["isYear"], type_descriptor="integer"),
]


@pytest.fixture
def provider() -> StaticMetadataProvider:
    return StaticMetadataProvider({
        "node": {
            "article": ARTICLE_FIELDS,
            "empty": [],
        }
    })


@pytest.fixture
def facade() -> RecordingFacade:
    return RecordingFacade()


@pytest.fixture
def channel() -> CollectingMessageChannel:
    return CollectingMessageChannel()


@pytest.fixture
def engine(provider, facade, channel) -> ValidationEngine:
    return ValidationEngine(
        provider,
        facade,
        message_channel=channel,
        error_level=0,
        commit_preprocessed=True,
        entity_type="node",
        bundle="article",
    )


@pytest.fixture
def valid_article() -> dict:
    return {
        "title": "Hello world",
        "body": "Some text",
        "field_image": {"width": 120, "height": 150},
        "field_year": 2024,
    }
