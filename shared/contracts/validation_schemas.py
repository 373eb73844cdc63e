"""
Pydantic schemas for validation schema documents.

These schemas validate the YAML files consumed by the YAML metadata provider.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# ==============================================================================
# FIELD TYPE SCHEMAS
# ==============================================================================

class FieldTypeSchema(BaseModel):
    """Rules shared by every field of one field type."""

    property_type: Optional[str] = None
    preprocess: List[str] = Field(default_factory=list)
    validators: List[str] = Field(default_factory=list)


# ==============================================================================
# ENTITY SCHEMAS
# ==============================================================================

class FieldInstanceSchema(BaseModel):
    """A field attached to a bundle."""

    label: Optional[str] = None
    type: Optional[str] = None
    required: bool = False
    property: Optional[str] = None
    preprocess: List[str] = Field(default_factory=list)
    validators: List[str] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)


class BundleSchema(BaseModel):
    """Bundle of an entity type."""

    label: Optional[str] = None
    fields: Dict[str, FieldInstanceSchema] = Field(default_factory=dict)


class EntityTypeSchema(BaseModel):
    """Entity type with its bundles."""

    label_key: Optional[str] = None
    bundles: Dict[str, BundleSchema] = Field(default_factory=dict)


class ValidationSchemaDocument(BaseModel):
    """Top level validation schema document."""

    field_types: Dict[str, FieldTypeSchema] = Field(default_factory=dict)
    entity_types: Dict[str, EntityTypeSchema] = Field(default_factory=dict)
