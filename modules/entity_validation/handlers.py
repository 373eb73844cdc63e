"""
Validator handler registry.

Engine subclasses self-register for an entity type (and optionally a
bundle) with @register_validator_handler; hosts then look the handler up
without knowing the concrete class.
"""

from typing import Any, Dict, Optional, Tuple, Type

from modules.entity_validation.engine import ValidationEngine
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class ValidatorHandlerRegistry:
    """
    Registry of engine classes keyed by (entity_type, bundle).

    A bundle of None registers the handler for every bundle of the
    entity type.
    """

    _REGISTRY: Dict[Tuple[str, Optional[str]], Type[ValidationEngine]] = {}

    @classmethod
    def register(
        cls,
        entity_type: str,
        bundle: Optional[str],
        handler: Type[ValidationEngine]
    ) -> None:
        """
        Register an engine class.

        Args:
            entity_type: Entity type identifier
            bundle: Bundle identifier, or None for all bundles
            handler: ValidationEngine subclass
        """
        key = (entity_type, bundle)
        if key in cls._REGISTRY:
            logger.warning(f"Validator handler for {entity_type}/{bundle} already registered, overwriting")

        cls._REGISTRY[key] = handler
        logger.debug(f"Registered validator handler: {entity_type}/{bundle} -> {handler.__name__}")

    @classmethod
    def unregister(cls, entity_type: str, bundle: Optional[str] = None) -> bool:
        return cls._REGISTRY.pop((entity_type, bundle), None) is not None

    @classmethod
    def get_class(cls, entity_type: str, bundle: Optional[str] = None) -> Type[ValidationEngine]:
        """
        Find the engine class for an entity type / bundle.

        Lookup order: exact bundle, entity type wildcard, base engine.
        """
        handler = cls._REGISTRY.get((entity_type, bundle)) or cls._REGISTRY.get((entity_type, None))

        if handler is None:
            logger.debug(f"No validator handler for {entity_type}/{bundle}, using ValidationEngine")
            return ValidationEngine

        return handler

    @classmethod
    def get(cls, entity_type: str, bundle: Optional[str] = None, **kwargs: Any) -> ValidationEngine:
        """
        Get a configured engine instance.

        Args:
            entity_type: Entity type identifier
            bundle: Bundle identifier
            **kwargs: Collaborators passed to the engine constructor

        Returns:
            Engine with entity type and bundle already set
        """
        handler = cls.get_class(entity_type, bundle)
        return handler.from_plugin({'entity_type': entity_type, 'bundle': bundle}, **kwargs)

    @classmethod
    def list_handlers(cls) -> Dict[str, str]:
        return {
            f"{entity_type}/{bundle or '*'}": handler.__name__
            for (entity_type, bundle), handler in cls._REGISTRY.items()
        }


def register_validator_handler(entity_type: str, bundle: Optional[str] = None):
    """
    Decorator to register an engine class as validator handler.

    Usage:
        @register_validator_handler("node", "article")
        class ArticleValidator(ValidationEngine):
            ...
    """
    def decorator(cls: Type[ValidationEngine]):
        ValidatorHandlerRegistry.register(entity_type, bundle, cls)
        return cls

    return decorator
