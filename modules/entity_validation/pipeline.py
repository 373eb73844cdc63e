"""
FieldPipeline - runs the rules of a single field.
"""

from typing import Any

from modules.entity_validation.core.base import FieldSpec, RuleKind, is_empty
from modules.entity_validation.core.interfaces import IPropertyFacade
from modules.entity_validation.core.registry import RuleRegistry
from modules.entity_validation.rules.builtin_rules import IS_NOT_EMPTY, IS_VALID_VALUE
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class FieldPipeline:
    """
    Validate one field of a record.

    Steps:
    1. Read the current value through the property facade
    2. Run pre-processors; a changed value is committed back to the record
       when commit_preprocessed is set, otherwise kept for this run only
    3. Type-conformance check when the field declares a type and the value
       is not empty
    4. Required check
    5. Validators in declared order

    No step short-circuits: every rule runs and reports on its own.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        facade: IPropertyFacade,
        commit_preprocessed: bool = True
    ):
        self.registry = registry
        self.facade = facade
        self.commit_preprocessed = commit_preprocessed

    def run(self, spec: FieldSpec, record: Any) -> Any:
        """
        Run the pipeline for one field.

        Args:
            spec: Resolved field spec
            record: Record under validation

        Returns:
            The value the validators saw
        """
        property_name = spec.target_property()
        value = self.facade.get(record, property_name)

        for name in spec.preprocessors:
            preprocess = self.registry.resolve(name, RuleKind.PREPROCESSOR)
            new_value = preprocess(spec.name, value)

            if new_value != value:
                logger.debug(f"Pre-processor '{name}' changed field '{spec.name}'")
                value = new_value
                if self.commit_preprocessed:
                    self.facade.set(record, property_name, value)

        if spec.type_descriptor is not None and not is_empty(value):
            self.registry.resolve(IS_VALID_VALUE)(spec.name, value, spec.type_descriptor)

        if spec.required:
            self.registry.resolve(IS_NOT_EMPTY)(spec.name, value)

        for name in spec.validators:
            self.registry.resolve(name, RuleKind.VALIDATOR)(spec.name, value)

        return value
