"""
Reference implementations of the engine's collaborators.

- Metadata providers: StaticMetadataProvider, YamlMetadataProvider
- Property facades: MappingPropertyFacade, AttributePropertyFacade
- Type verifier: PropertyTypeVerifier
- Message channels: LoggerMessageChannel, CollectingMessageChannel
"""

from modules.entity_validation.providers.message_channels import (
    CollectingMessageChannel,
    LoggerMessageChannel,
)
from modules.entity_validation.providers.property_facades import (
    AttributePropertyFacade,
    MappingPropertyFacade,
)
from modules.entity_validation.providers.static_provider import StaticMetadataProvider
from modules.entity_validation.providers.type_verifier import PropertyTypeVerifier
from modules.entity_validation.providers.yaml_provider import YamlMetadataProvider

__all__ = [
    'CollectingMessageChannel',
    'LoggerMessageChannel',
    'AttributePropertyFacade',
    'MappingPropertyFacade',
    'StaticMetadataProvider',
    'PropertyTypeVerifier',
    'YamlMetadataProvider',
]
