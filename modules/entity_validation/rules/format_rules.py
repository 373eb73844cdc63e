"""
Format validators.

Validators that check the shape of a single value:
- isText: Value must be a string
- isNumeric: Value must be a number or numeric string
- isList: Value must be a list
- isYear: Value must be a four digit year
- isUnixTimeStamp: Value must be a non-negative integer timestamp

Empty values pass; use the required flag or isNotEmpty for those.
"""

from typing import Any

from modules.entity_validation.core.base import is_empty
from modules.entity_validation.core.registry import register_rule
from shared.utils.helpers import is_numeric, to_number


@register_rule("isText")
def is_text(engine, field_name: str, value: Any) -> None:
    if is_empty(value):
        return

    if not isinstance(value, str):
        engine.set_error(field_name, 'The field @field must be text.', {'@value': str(value)})


@register_rule("isNumeric")
def is_numeric_value(engine, field_name: str, value: Any) -> None:
    if is_empty(value):
        return

    if not is_numeric(value):
        engine.set_error(field_name, 'The value @value of the field @field is not numeric.', {'@value': str(value)})


@register_rule("isList")
def is_list(engine, field_name: str, value: Any) -> None:
    if is_empty(value):
        return

    if not isinstance(value, (list, tuple)):
        engine.set_error(field_name, 'The field @field must be a list.', {'@value': str(value)})


@register_rule("isYear")
def is_year(engine, field_name: str, value: Any) -> None:
    if is_empty(value):
        return

    number = to_number(value)
    if not isinstance(number, int) or not 1000 <= number <= 9999:
        engine.set_error(field_name, 'The value @value of the field @field is not a valid year.', {'@value': str(value)})


@register_rule("isUnixTimeStamp")
def is_unix_timestamp(engine, field_name: str, value: Any) -> None:
    if is_empty(value):
        return

    number = to_number(value)
    if not isinstance(number, int) or number < 0:
        engine.set_error(field_name, 'The value @value of the field @field is not a valid timestamp.', {'@value': str(value)})
