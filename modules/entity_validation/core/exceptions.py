"""
Custom exceptions for the entity validation module.
"""

from typing import Any, Dict, List, Optional


VALIDATION_FAILED_PREFIX = "The validation process failed: "


class EntityValidationException(Exception):
    """Base exception for entity validation module."""
    pass


class ConfigurationError(EntityValidationException):
    """
    Exception raised for configuration errors.

    Unknown rule names, rules with a wrong signature, missing metadata
    provider or property facade bindings and malformed schema files.
    Never caught by the engine.
    """
    pass


class ValidationFailed(EntityValidationException):
    """
    Exception raised when a validation run recorded violations.

    Attributes:
        errors: Squashed, human readable error string
        violations: Structured errors keyed by field name (may be empty)
    """

    def __init__(self, errors: str, violations: Optional[Dict[str, List[Any]]] = None):
        self.errors = errors
        self.violations = violations or {}
        super().__init__(f"{VALIDATION_FAILED_PREFIX}{errors}")
