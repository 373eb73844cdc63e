"""
ValidationEngine - Main orchestrator for entity validation.

This is the primary entry point for validating records.
It resolves the schema, runs every field through the pipeline, and
surfaces the collected violations according to the error policy.
"""

from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Union

from modules.entity_validation.core.base import FieldSpec, RuleKind, ValidationError, ValidationSeverity
from modules.entity_validation.core.errors import ErrorCollector
from modules.entity_validation.core.exceptions import ConfigurationError, ValidationFailed
from modules.entity_validation.core.interfaces import (
    IMessageChannel,
    IMetadataProvider,
    IPropertyFacade,
    ITypeVerifier,
)
from modules.entity_validation.core.policy import ErrorLevel, ErrorPolicy, policy_for_level
from modules.entity_validation.core.registry import RuleRegistry
from modules.entity_validation.pipeline import FieldPipeline
from modules.entity_validation.providers.message_channels import LoggerMessageChannel
from modules.entity_validation.providers.property_facades import MappingPropertyFacade
from modules.entity_validation.providers.type_verifier import PropertyTypeVerifier
from modules.entity_validation.providers.yaml_provider import YamlMetadataProvider
from shared.utils.config import settings
from shared.utils.logger import setup_logger

# Import rules to trigger registration
from modules.entity_validation import rules  # noqa: F401

logger = setup_logger(__name__)


PreValidateHook = Callable[["ValidationEngine"], None]


class ValidationEngine:
    """
    Entity validation engine.

    Orchestrates validation by:
    1. Resolving field specs for the entity type / bundle
    2. Running each field through the FieldPipeline
    3. Collecting violations without short-circuiting
    4. Returning, failing silently or raising, per the error policy

    Subclasses add rules with the @rule decorator and may override
    get_fields_info() to adjust the resolved schema.

    Not safe for concurrent validations: use one instance per in-flight
    validation.

    Usage:
        engine = ValidationEngine(provider, MappingPropertyFacade())
        engine.set_entity_type("node").set_bundle("article")

        if not engine.validate(record, silent=True):
            print(engine.get_errors())
    """

    def __init__(
        self,
        metadata_provider: Optional[IMetadataProvider] = None,
        property_facade: Optional[IPropertyFacade] = None,
        type_verifier: Optional[ITypeVerifier] = None,
        message_channel: Optional[IMessageChannel] = None,
        error_level: Optional[Union[int, ErrorLevel]] = None,
        commit_preprocessed: Optional[bool] = None,
        entity_type: Optional[str] = None,
        bundle: Optional[str] = None
    ):
        """
        Initialize validation engine.

        Args:
            metadata_provider: Schema source. If None and
                               VALIDATION_SCHEMA_PATH is set, a
                               YamlMetadataProvider is used
            property_facade: Record access
            type_verifier: Type-conformance predicate
            message_channel: Channel used by error level 1
            error_level: 0 buffer, 1 emit, 2 raise
                         If None, uses VALIDATION_ERROR_LEVEL
            commit_preprocessed: Write pre-processed values back to the record
                                 If None, uses VALIDATION_COMMIT_PREPROCESSED
            entity_type: Entity type to validate
            bundle: Bundle to validate (defaults to the entity type)
        """
        if metadata_provider is None and settings.VALIDATION_SCHEMA_PATH:
            metadata_provider = YamlMetadataProvider()

        self.metadata_provider = metadata_provider
        self.property_facade = property_facade
        self.type_verifier = type_verifier or PropertyTypeVerifier()
        self.message_channel = message_channel or LoggerMessageChannel()

        if commit_preprocessed is None:
            commit_preprocessed = settings.VALIDATION_COMMIT_PREPROCESSED
        self.commit_preprocessed = commit_preprocessed

        self.entity_type = entity_type
        self.bundle = bundle

        self.errors = ErrorCollector()
        self.registry = RuleRegistry()
        self.registry.bind_builtins(self)
        self.registry.bind_methods(self)

        self._fields: Dict[str, Any] = {}
        self._metadata: Dict[str, Any] = {}
        self._pre_validate: List[PreValidateHook] = []
        self._current_fields: Dict[str, FieldSpec] = {}
        self._violations = 0

        if error_level is None:
            error_level = settings.VALIDATION_ERROR_LEVEL
        self.set_error_level(error_level)

        logger.debug(
            f"{type(self).__name__} initialized with {len(self.registry.list_rules())} rules"
        )

    @classmethod
    def from_plugin(cls, plugin: Dict[str, Any], **kwargs: Any) -> "ValidationEngine":
        """
        Build an engine from a plugin definition.

        Args:
            plugin: {"entity_type": ..., "bundle": ...}
            **kwargs: Collaborators passed to the constructor

        Raises:
            ConfigurationError: If the plugin has no entity type
        """
        if not plugin.get('entity_type'):
            raise ConfigurationError(f"Plugin definition without entity_type: {plugin}")

        return cls(entity_type=plugin['entity_type'], bundle=plugin.get('bundle'), **kwargs)

    # ==========================================================================
    # CONTEXT
    # ==========================================================================

    def set_entity_type(self, entity_type: str) -> "ValidationEngine":
        self.entity_type = entity_type
        return self

    def get_entity_type(self) -> Optional[str]:
        return self.entity_type

    def set_bundle(self, bundle: str) -> "ValidationEngine":
        self.bundle = bundle
        return self

    def get_bundle(self) -> Optional[str]:
        return self.bundle

    def set_error_level(self, level: Union[int, ErrorLevel]) -> "ValidationEngine":
        """Select the error policy by numeric level (0 buffer, 1 emit, 2 raise)."""
        self.policy = policy_for_level(
            level,
            self.message_channel,
            ValidationSeverity(settings.VALIDATION_MESSAGE_SEVERITY)
        )
        return self

    def get_error_level(self) -> ErrorLevel:
        return self.policy.level

    def set_policy(self, policy: ErrorPolicy) -> "ValidationEngine":
        """Use a custom error policy."""
        self.policy = policy
        return self

    def add_metadata(self, key: str, value: Any) -> "ValidationEngine":
        """Attach free-form data for rules and hooks."""
        self._metadata[key] = value
        return self

    def get_metadata(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None:
            return dict(self._metadata)
        return self._metadata.get(key, default)

    # ==========================================================================
    # RULES AND HOOKS
    # ==========================================================================

    def register_rule(
        self,
        name: str,
        func: Callable[..., Any],
        kind: RuleKind = RuleKind.VALIDATOR,
        extra_args: int = 0
    ) -> "ValidationEngine":
        """
        Register a rule callable taking (field_name, value).

        Raises:
            ConfigurationError: If func is not callable or has a wrong signature
        """
        self.registry.register(name, func, kind, extra_args)
        return self

    def get_available_rules(self) -> List[str]:
        """Get list of all registered rule names."""
        return list(self.registry.list_rules().keys())

    def register_pre_validate(self, hook: PreValidateHook) -> "ValidationEngine":
        """
        Register a callable run with the engine at the start of every validation.

        Raises:
            ConfigurationError: If hook is not callable
        """
        if not callable(hook):
            raise ConfigurationError(f"Pre-validate hook is not callable: {hook!r}")

        self._pre_validate.append(hook)
        return self

    # ==========================================================================
    # FIELD BAG
    # ==========================================================================

    def add_field(self, name: str, value: Any) -> "ValidationEngine":
        self._fields[name] = value
        return self

    def set_fields(self, fields: Dict[str, Any]) -> "ValidationEngine":
        self._fields = dict(fields)
        return self

    def get_fields(self) -> Dict[str, Any]:
        return self._fields

    # ==========================================================================
    # ERRORS
    # ==========================================================================

    def set_error(self, field_name: str, message: str, params: Optional[Dict[str, Any]] = None) -> None:
        """
        Record a violation for a field.

        The field name is always available to the message as @field.
        What happens next is up to the error policy.
        """
        params = dict(params or {})
        params['@field'] = field_name

        self._violations += 1
        self.policy.handle(ValidationError(field_name, message, params), self.errors)

    def get_errors(self, squash: bool = True) -> Union[str, Dict[str, List[ValidationError]]]:
        """
        Get the buffered errors.

        Args:
            squash: One formatted string when True, structured errors otherwise
        """
        return self.errors.get_errors(squash)

    def clear_errors(self) -> None:
        self.errors.clear_errors()
        self._violations = 0

    # ==========================================================================
    # VALIDATION
    # ==========================================================================

    def get_fields_info(self) -> Dict[str, FieldSpec]:
        """
        Resolve the field specs for the current entity type and bundle.

        Raises:
            ConfigurationError: No metadata provider or no entity type
        """
        if self.metadata_provider is None:
            raise ConfigurationError("No metadata provider bound to the validation engine")

        if not self.entity_type:
            raise ConfigurationError("Entity type must be set before validation")

        bundle = self.bundle if self.bundle is not None else self.entity_type
        return self.metadata_provider.get_fields_info(self.entity_type, bundle)

    def get_field_spec(self, field_name: str) -> Optional[FieldSpec]:
        """Get the FieldSpec of a field during the running validation."""
        return self._current_fields.get(field_name)

    def validate(self, record: Any, silent: bool = False) -> bool:
        """
        Validate a record against the resolved schema.

        Args:
            record: Record to validate, read through the property facade
            silent: Return False instead of raising when violations exist

        Returns:
            True if no violations were recorded, False on violations when
            silent (or when they were already emitted under error level 1)

        Raises:
            ValidationFailed: Violations were recorded and silent is False,
                              or at the first violation under error level 2
            ConfigurationError: Missing bindings or unknown rule names
        """
        logger.debug(f"Validating {self.entity_type}/{self.bundle or self.entity_type}")

        self.clear_errors()
        self._run_pre_validate()

        return self._run(record, self.get_fields_info(), self.property_facade, silent)

    def validate_fields(self, silent: bool = False) -> bool:
        """
        Validate the field bag against the schema.

        Only fields present in the bag are checked.

        Args:
            silent: Return False instead of raising when violations exist

        Returns:
            Same as validate()
        """
        logger.debug(f"Validating {len(self._fields)} fields of {self.entity_type}")

        self.clear_errors()
        self._run_pre_validate()

        fields_info = {
            name: replace(spec, property_name=None)
            for name, spec in self.get_fields_info().items()
            if name in self._fields
        }

        unknown = [name for name in self._fields if name not in fields_info]
        if unknown:
            logger.debug(f"Fields without schema skipped: {unknown}")

        return self._run(self._fields, fields_info, MappingPropertyFacade(), silent)

    def _run_pre_validate(self) -> None:
        for hook in self._pre_validate:
            hook(self)

    def _run(
        self,
        record: Any,
        fields_info: Dict[str, FieldSpec],
        facade: Optional[IPropertyFacade],
        silent: bool
    ) -> bool:
        if fields_info:
            if facade is None:
                raise ConfigurationError("No property facade bound to the validation engine")

            # Unknown rule names fail before any field is touched
            self.registry.check_fields(fields_info.values())

            pipeline = FieldPipeline(self.registry, facade, self.commit_preprocessed)
            self._current_fields = fields_info

            try:
                for spec in fields_info.values():
                    logger.debug(f"Validating field: {spec.name}")
                    pipeline.run(spec, record)
            finally:
                self._current_fields = {}

        return self._finish(silent)

    def _finish(self, silent: bool) -> bool:
        if not self._violations:
            logger.debug("Validation passed")
            return True

        logger.debug(f"Validation recorded {self._violations} violation(s)")

        if silent:
            return False

        if not self.errors.has_errors():
            # Already surfaced through the message channel
            return False

        raise ValidationFailed(self.errors.get_errors(squash=True), self.errors.get_errors(squash=False))
