"""
Static metadata provider implementation.

Serves schemas registered in code. Useful for:
- Testing
- Hosts that build their schema programmatically
"""

from copy import deepcopy
from typing import Any, Dict, Iterable, List, Optional, Union

from modules.entity_validation.core.base import FieldSpec
from modules.entity_validation.core.interfaces import IMetadataProvider
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


FieldDefinition = Union[FieldSpec, Dict[str, Any]]


class StaticMetadataProvider(IMetadataProvider):
    """
    In-memory schema source.

    Usage:
        provider = StaticMetadataProvider()
        provider.register("node", "article", [
            FieldSpec(name="title", required=True),
            {"name": "field_year", "validators": ["isYear"]},
        ])
    """

    def __init__(self, schemas: Optional[Dict[str, Dict[str, Iterable[FieldDefinition]]]] = None):
        """
        Initialize static metadata provider.

        Args:
            schemas: Optional {entity_type: {bundle: [field, ...]}} mapping
        """
        self._schemas: Dict[str, Dict[str, List[FieldSpec]]] = {}

        for entity_type, bundles in (schemas or {}).items():
            for bundle, fields in bundles.items():
                self.register(entity_type, bundle, fields)

    def register(
        self,
        entity_type: str,
        bundle: str,
        fields: Iterable[FieldDefinition]
    ) -> "StaticMetadataProvider":
        """
        Register (or replace) the fields of a bundle.

        Args:
            entity_type: Entity type identifier
            bundle: Bundle identifier
            fields: FieldSpec objects or dicts of FieldSpec arguments

        Returns:
            self, for chaining
        """
        specs = [
            field if isinstance(field, FieldSpec) else FieldSpec(**field)
            for field in fields
        ]
        self._schemas.setdefault(entity_type, {})[bundle] = specs
        logger.debug(f"Registered {len(specs)} fields for {entity_type}/{bundle}")
        return self

    def get_fields_info(
        self,
        entity_type: str,
        bundle: Optional[str] = None
    ) -> Dict[str, FieldSpec]:
        specs = self._schemas.get(entity_type, {}).get(bundle, [])

        # Fresh copies so rules and callers can't alter the registered schema
        return {spec.name: deepcopy(spec) for spec in specs}
