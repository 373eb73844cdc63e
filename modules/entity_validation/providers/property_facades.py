"""
Property facade implementations.

- MappingPropertyFacade: dict records, dot-notation property paths
- AttributePropertyFacade: plain objects, attribute access
"""

from typing import Any

from modules.entity_validation.core.interfaces import IPropertyFacade
from shared.utils.helpers import get_path, set_path


class MappingPropertyFacade(IPropertyFacade):
    """
    Property access for dictionary records.

    Supports nested properties: "image.width", "items.0.name".
    Missing properties read as None; writes create intermediate dicts.
    """

    def get(self, record: Any, property_name: str) -> Any:
        return get_path(record, property_name)

    def set(self, record: Any, property_name: str, value: Any) -> None:
        set_path(record, property_name, value)


class AttributePropertyFacade(IPropertyFacade):
    """Property access for objects through their attributes."""

    def get(self, record: Any, property_name: str) -> Any:
        return getattr(record, property_name, None)

    def set(self, record: Any, property_name: str, value: Any) -> None:
        setattr(record, property_name, value)
