"""
Entity validation module.

Validates records field by field against a schema resolved per entity type
and bundle, collecting every violation before deciding the outcome.

Main components:
- ValidationEngine: Main orchestrator for validation
- FieldPipeline: Runs the rules of one field
- RuleRegistry: Rule name -> callable table
- ErrorCollector / ErrorPolicy: Violation accumulation and surfacing

Usage:
    from modules.entity_validation import ValidationEngine
    from modules.entity_validation.providers import MappingPropertyFacade, YamlMetadataProvider

    engine = ValidationEngine(YamlMetadataProvider(), MappingPropertyFacade())
    engine.set_entity_type("node").set_bundle("article")

    if not engine.validate(record, silent=True):
        print(engine.get_errors())
"""

from modules.entity_validation.engine import ValidationEngine
from modules.entity_validation.handlers import ValidatorHandlerRegistry, register_validator_handler
from modules.entity_validation.pipeline import FieldPipeline
from modules.entity_validation.core.base import FieldSpec, RuleKind, ValidationError, ValidationSeverity
from modules.entity_validation.core.errors import ErrorCollector
from modules.entity_validation.core.exceptions import ConfigurationError, ValidationFailed
from modules.entity_validation.core.policy import ErrorLevel
from modules.entity_validation.core.registry import register_rule, rule

__all__ = [
    'ValidationEngine',
    'ValidatorHandlerRegistry',
    'register_validator_handler',
    'FieldPipeline',
    'FieldSpec',
    'RuleKind',
    'ValidationError',
    'ValidationSeverity',
    'ErrorCollector',
    'ConfigurationError',
    'ValidationFailed',
    'ErrorLevel',
    'register_rule',
    'rule',
]
