"""
Rules module.

Contains all built-in rules organized by category:
- builtin_rules: Empty check, type-conformance check, image dimensions
- format_rules: Shape checks for single values
- preprocessors: Value transforms run before validation

All rules are automatically registered via decorators.
"""

# Import all rules to trigger registration
from modules.entity_validation.rules import builtin_rules
from modules.entity_validation.rules import format_rules
from modules.entity_validation.rules import preprocessors

__all__ = ['builtin_rules', 'format_rules', 'preprocessors']
