"""
Base data models for the entity validation system.

This module provides the shared types every component speaks:
- FieldSpec: Resolved schema for one field
- ValidationError: A single recorded violation
- ValidationSeverity: Severity levels used by message channels
- RuleKind: Validator or pre-processor
"""

import numbers
import re
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sized


class ValidationSeverity(str, Enum):
    """Severity levels for emitted messages"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class RuleKind(str, Enum):
    """Kinds of rules a field can reference"""
    VALIDATOR = "validator"
    PREPROCESSOR = "preprocessor"


@dataclass
class FieldSpec:
    """
    Schema of a single field, resolved per validation call.

    Produced by a metadata provider; the engine never stores it beyond the
    validation call it was resolved for.
    """
    name: str
    property_name: Optional[str] = None  # Defaults to the field name
    required: bool = False
    label: Optional[str] = None
    preprocessors: List[str] = dataclass_field(default_factory=list)
    validators: List[str] = dataclass_field(default_factory=list)
    type_descriptor: Optional[str] = None
    settings: Dict[str, Any] = dataclass_field(default_factory=dict)

    def target_property(self) -> str:
        """Property name used to read and write the field value."""
        return self.property_name or self.name

    def rule_names(self) -> List[str]:
        """All rule names this field references."""
        return [*self.preprocessors, *self.validators]


def is_empty(value: Any) -> bool:
    """
    Check whether a value counts as empty.

    None, False, numeric zero, the empty string, the string "0" and empty
    collections are empty.
    """
    if value is None:
        return True
    if isinstance(value, numbers.Number):
        return not value
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def format_message(message: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute placeholders in a message template.

    Placeholders are the literal keys of ``params`` (e.g. ``@field``).
    Longer keys win over their prefixes so ``@max-width`` is never
    rewritten through ``@max``. Placeholders without a param stay verbatim.

    Args:
        message: Message template
        params: Mapping of placeholder -> value

    Returns:
        Formatted message
    """
    if not params:
        return message

    keys = sorted((key for key in params if key), key=len, reverse=True)
    if not keys:
        return message

    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: str(params[match.group(0)]), message)


@dataclass
class ValidationError:
    """A single violation recorded against a field."""
    field: str
    message: str
    params: Dict[str, Any] = dataclass_field(default_factory=dict)

    def format(self) -> str:
        """Render the message with its params substituted."""
        return format_message(self.message, self.params)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'field': self.field,
            'message': self.message,
            'params': dict(self.params),
        }
