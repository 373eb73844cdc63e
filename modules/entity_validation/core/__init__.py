"""
Entity validation core module.

Contains base types, interfaces, error handling and the rule registry.
"""

from modules.entity_validation.core.base import (
    FieldSpec,
    RuleKind,
    ValidationError,
    ValidationSeverity,
    format_message,
    is_empty,
)
from modules.entity_validation.core.errors import ERROR_SEPARATOR, ErrorCollector
from modules.entity_validation.core.exceptions import (
    ConfigurationError,
    EntityValidationException,
    ValidationFailed,
)
from modules.entity_validation.core.interfaces import (
    IMessageChannel,
    IMetadataProvider,
    IPropertyFacade,
    ITypeVerifier,
)
from modules.entity_validation.core.policy import (
    BufferPolicy,
    EmitAndContinuePolicy,
    ErrorLevel,
    ErrorPolicy,
    RaiseImmediatelyPolicy,
    policy_for_level,
)
from modules.entity_validation.core.registry import (
    BUILTIN_RULES,
    RuleRegistry,
    register_rule,
    rule,
)

__all__ = [
    'FieldSpec',
    'RuleKind',
    'ValidationError',
    'ValidationSeverity',
    'format_message',
    'is_empty',
    'ERROR_SEPARATOR',
    'ErrorCollector',
    'ConfigurationError',
    'EntityValidationException',
    'ValidationFailed',
    'IMessageChannel',
    'IMetadataProvider',
    'IPropertyFacade',
    'ITypeVerifier',
    'BufferPolicy',
    'EmitAndContinuePolicy',
    'ErrorLevel',
    'ErrorPolicy',
    'RaiseImmediatelyPolicy',
    'policy_for_level',
    'BUILTIN_RULES',
    'RuleRegistry',
    'register_rule',
    'rule',
]
