"""
Type verifier for schema property types.

Understands the property types used in schema documents:
text, token, integer, decimal, date, duration, boolean, uri, struct and
list<T>. Unknown types verify as true so hosts can introduce their own
descriptors without breaking validation.
"""

from typing import Any, Callable, Dict
from urllib.parse import urlparse

from modules.entity_validation.core.interfaces import ITypeVerifier
from shared.utils.helpers import is_numeric, to_number


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _is_integer(value: Any) -> bool:
    return isinstance(to_number(value), int)


def _is_boolean(value: Any) -> bool:
    return _is_scalar(value) and value in (0, 1, True, False, "0", "1")


def _is_uri(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


class PropertyTypeVerifier(ITypeVerifier):
    """
    Verify values against property type descriptors.

    Usage:
        verifier = PropertyTypeVerifier()
        verifier.verify("42", "integer")           # True
        verifier.verify([1, "x"], "list<integer>")  # False
    """

    TYPE_VALIDATORS: Dict[str, Callable[[Any], bool]] = {
        'text': _is_scalar,
        'token': _is_scalar,
        'integer': _is_integer,
        'decimal': is_numeric,
        'date': is_numeric,
        'duration': is_numeric,
        'boolean': _is_boolean,
        'uri': _is_uri,
        'struct': lambda v: isinstance(v, dict) or hasattr(v, '__dict__'),
    }

    def verify(self, value: Any, type_descriptor: str) -> bool:
        if type_descriptor.startswith('list<') and type_descriptor.endswith('>'):
            item_type = type_descriptor[len('list<'):-1]
            if not isinstance(value, (list, tuple)):
                return False
            return all(self.verify(item, item_type) for item in value)

        validator_fn = self.TYPE_VALIDATORS.get(type_descriptor)
        if validator_fn is None:
            return True

        return validator_fn(value)
