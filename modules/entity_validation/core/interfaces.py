"""
Core interfaces for the entity validation module.

The engine only talks to its collaborators through these interfaces;
hosts plug in their own schema source, record access and message display.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from modules.entity_validation.core.base import FieldSpec, ValidationSeverity


# ==============================================================================
# METADATA PROVIDER INTERFACE
# ==============================================================================

class IMetadataProvider(ABC):
    """
    Base interface for schema sources.

    Tells the engine which fields exist for an entity type and bundle,
    which of them are required and which rules apply to each.

    Example:
        class MyProvider(IMetadataProvider):
            def get_fields_info(self, entity_type, bundle):
                return {"title": FieldSpec(name="title", required=True)}
    """

    @abstractmethod
    def get_fields_info(
        self,
        entity_type: str,
        bundle: Optional[str] = None
    ) -> Dict[str, FieldSpec]:
        """
        Resolve the fields of an entity type / bundle.

        Must be free of side effects; called once per validation.

        Args:
            entity_type: Entity type identifier (e.g., "node")
            bundle: Bundle identifier (e.g., "article")

        Returns:
            Ordered mapping of field name -> FieldSpec
        """
        pass


# ==============================================================================
# PROPERTY FACADE INTERFACE
# ==============================================================================

class IPropertyFacade(ABC):
    """
    Base interface for reading and writing record values.

    Decouples the engine from the concrete record representation.
    """

    @abstractmethod
    def get(self, record: Any, property_name: str) -> Any:
        """
        Read the current value of a property.

        Args:
            record: The record under validation
            property_name: Property to read

        Returns:
            Current value, or None if the property is absent
        """
        pass

    @abstractmethod
    def set(self, record: Any, property_name: str, value: Any) -> None:
        """
        Write a property value on the record.

        Args:
            record: The record under validation
            property_name: Property to write
            value: New value
        """
        pass


# ==============================================================================
# TYPE VERIFIER INTERFACE
# ==============================================================================

class ITypeVerifier(ABC):
    """Base interface for type-conformance predicates."""

    @abstractmethod
    def verify(self, value: Any, type_descriptor: str) -> bool:
        """
        Check a value against a type descriptor.

        Args:
            value: Value to check
            type_descriptor: Opaque type token from the schema

        Returns:
            True if the value conforms
        """
        pass


# ==============================================================================
# MESSAGE CHANNEL INTERFACE
# ==============================================================================

class IMessageChannel(ABC):
    """Fire-and-forget channel for messages surfaced during validation."""

    @abstractmethod
    def emit(self, message: str, severity: ValidationSeverity = ValidationSeverity.ERROR) -> None:
        """
        Emit a message to the host.

        Args:
            message: Formatted message
            severity: Message severity
        """
        pass
