"""
Validation schema loader.

Loads and parses entity schemas from YAML configuration files.
"""

import yaml
from typing import Any, Dict, Optional, Union
from pathlib import Path
from pydantic import ValidationError as SchemaValidationError

from modules.entity_validation.core.exceptions import ConfigurationError
from shared.contracts.validation_schemas import (
    BundleSchema,
    EntityTypeSchema,
    FieldTypeSchema,
    ValidationSchemaDocument,
)
from shared.utils.config import settings
from shared.utils.logger import log_error, setup_logger

logger = setup_logger(__name__)


class SchemaConfigLoader:
    """
    Loads validation schemas from YAML files.

    Supports:
    - Field type definitions (property type, default rules)
    - Entity types with their bundles and field instances
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to schema YAML file
                        If None, uses VALIDATION_SCHEMA_PATH or the default:
                        config/validation/schema.yaml
        """
        if config_path is None:
            config_path = settings.VALIDATION_SCHEMA_PATH

        if config_path is None:
            # Default path
            base_dir = Path(__file__).parent.parent.parent.parent
            config_path = base_dir / "config" / "validation" / "schema.yaml"

        self.config_path = Path(config_path)
        self._config: Optional[ValidationSchemaDocument] = None

    def load(self) -> ValidationSchemaDocument:
        """
        Load configuration from YAML file.

        Returns:
            Parsed schema document

        Raises:
            yaml.YAMLError: If YAML parsing fails
            ConfigurationError: If the document does not match the schema
        """
        if not self.config_path.exists():
            logger.warning(
                f"Validation schema file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = ValidationSchemaDocument()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            log_error(logger, e, f"Failed to parse validation schema {self.config_path}")
            raise

        self._config = self.parse(raw or {})
        logger.info(f"Loaded validation schema from: {self.config_path}")
        return self._config

    @staticmethod
    def parse(raw: Dict[str, Any]) -> ValidationSchemaDocument:
        """
        Validate a raw schema mapping.

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            return ValidationSchemaDocument.model_validate(raw)
        except SchemaValidationError as e:
            raise ConfigurationError(f"Invalid validation schema: {e}") from e

    @property
    def config(self) -> ValidationSchemaDocument:
        if self._config is None:
            self.load()
        return self._config

    def get_entity_type(self, entity_type: str) -> Optional[EntityTypeSchema]:
        """Get the schema of an entity type, or None if unknown."""
        return self.config.entity_types.get(entity_type)

    def get_bundle(self, entity_type: str, bundle: str) -> Optional[BundleSchema]:
        """Get the schema of a bundle, or None if unknown."""
        entity_schema = self.get_entity_type(entity_type)
        if entity_schema is None:
            return None
        return entity_schema.bundles.get(bundle)

    def get_field_type(self, field_type: Optional[str]) -> FieldTypeSchema:
        """Get a field type definition; unknown types have no rules."""
        if field_type is None:
            return FieldTypeSchema()
        return self.config.field_types.get(field_type, FieldTypeSchema())

    def reload(self) -> ValidationSchemaDocument:
        """
        Reload configuration from file.

        Returns:
            Updated schema document
        """
        self._config = None
        return self.load()
