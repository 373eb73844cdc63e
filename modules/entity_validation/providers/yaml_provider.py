"""
YAML metadata provider implementation.

Resolves field specs from a schema document such as:

    field_types:
      image:
        property_type: field_item_image
        validators: [validateImageField]
    entity_types:
      node:
        label_key: title
        bundles:
          article:
            fields:
              field_image:
                type: image
                required: true
                settings:
                  max_resolution: "200x150"
"""

from pathlib import Path
from typing import Dict, Optional, Union

from modules.entity_validation.core.base import FieldSpec
from modules.entity_validation.core.config_loader import SchemaConfigLoader
from modules.entity_validation.core.interfaces import IMetadataProvider
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class YamlMetadataProvider(IMetadataProvider):
    """
    Schema source backed by a YAML schema document.

    Resolution order per bundle:
    1. The entity type's label key, always checked for emptiness
    2. Bundle fields in declaration order; field type rules come before
       the instance's own rules
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        loader: Optional[SchemaConfigLoader] = None
    ):
        """
        Initialize YAML metadata provider.

        Args:
            config_path: Path to the schema YAML file
            loader: Pre-built loader (takes precedence over config_path)
        """
        self.loader = loader or SchemaConfigLoader(config_path)

    def get_fields_info(
        self,
        entity_type: str,
        bundle: Optional[str] = None
    ) -> Dict[str, FieldSpec]:
        entity_schema = self.loader.get_entity_type(entity_type)

        if entity_schema is None:
            logger.info(f"No validation schema defined for entity type {entity_type}")
            return {}

        fields: Dict[str, FieldSpec] = {}

        if entity_schema.label_key:
            fields[entity_schema.label_key] = FieldSpec(
                name=entity_schema.label_key,
                required=True,
            )

        bundle_schema = entity_schema.bundles.get(bundle)
        if bundle_schema is None:
            logger.debug(f"No bundle schema for {entity_type}/{bundle}")
            return fields

        for name, instance in bundle_schema.fields.items():
            field_type = self.loader.get_field_type(instance.type)
            spec = fields.get(name) or FieldSpec(name=name)

            spec.label = instance.label or spec.label
            spec.property_name = instance.property
            spec.required = spec.required or instance.required
            spec.preprocessors = [*field_type.preprocess, *instance.preprocess]
            spec.validators = [*field_type.validators, *instance.validators]
            spec.type_descriptor = field_type.property_type
            spec.settings = dict(instance.settings)

            fields[name] = spec

        return fields

    def reload(self) -> None:
        """Reload the schema document from disk"""
        logger.info("Reloading validation schema")
        self.loader.reload()
