"""
Built-in rules every engine carries.

- isNotEmpty: Field value must not be empty
- isValidValue: Field value must conform to its declared type
- validateImageField: Image dimensions must fit the field's resolution bounds

Rules report through engine.set_error and return nothing, so one field can
collect several independent violations.
"""

from typing import Any, Optional, Tuple

from modules.entity_validation.core.base import is_empty
from modules.entity_validation.core.exceptions import ConfigurationError
from modules.entity_validation.core.registry import register_rule
from shared.utils.helpers import Number, to_number


IS_NOT_EMPTY = "isNotEmpty"
IS_VALID_VALUE = "isValidValue"
VALIDATE_IMAGE_FIELD = "validateImageField"


@register_rule(IS_NOT_EMPTY)
def is_not_empty(engine, field_name: str, value: Any) -> None:
    """Record an error when the value is empty."""
    if is_empty(value):
        params = {
            '@field': field_name,
        }

        engine.set_error(field_name, 'The field @field cannot be empty.', params)


@register_rule(IS_VALID_VALUE, extra_args=1)
def is_valid_value(engine, field_name: str, value: Any, type_descriptor: str) -> None:
    """
    Check the value against the field's type descriptor.

    Unlike other validators this one receives a third argument: the type
    descriptor resolved from the field spec.
    """
    if not engine.type_verifier.verify(value, type_descriptor):
        params = {
            '@value': str(value),
            '@field': field_name,
        }

        engine.set_error(field_name, 'The value @value is invalid for the field @field.', params)


def _parse_resolution(field_name: str, resolution: Any) -> Tuple[Number, Number]:
    """Split an "HxW" resolution into (height, width)."""
    parts = str(resolution).lower().split("x")
    numbers = [to_number(part) for part in parts]

    if len(numbers) != 2 or any(number is None for number in numbers):
        raise ConfigurationError(
            f"Invalid resolution '{resolution}' for field '{field_name}', expected 'HxW'"
        )

    return numbers[0], numbers[1]


def _dimension(value: Any, name: str) -> Optional[Number]:
    if isinstance(value, dict):
        raw = value.get(name)
    else:
        raw = getattr(value, name, None)
    return to_number(raw)


@register_rule(VALIDATE_IMAGE_FIELD)
def validate_image_field(engine, field_name: str, value: Any) -> None:
    """
    Check the image is the correct size.

    Resolution settings are "HxW" strings: max_resolution and min_resolution.
    All four bounds are checked; each violation is recorded separately.
    Empty values are left to the required check.
    """
    if is_empty(value):
        return

    spec = engine.get_field_spec(field_name)
    settings = spec.settings if spec is not None else {}

    width = _dimension(value, 'width')
    height = _dimension(value, 'height')

    params = {
        '@width': width,
        '@height': height,
    }

    if settings.get('max_resolution'):
        max_height, max_width = _parse_resolution(field_name, settings['max_resolution'])

        params.update({
            '@max-width': max_width,
            '@max-height': max_height,
        })

        if width is not None and width > max_width:
            engine.set_error(field_name, 'The width of the image(@width) is bigger then the allowed size(@max-width)', params)

        if height is not None and height > max_height:
            engine.set_error(field_name, 'The width of the image(@height) is bigger then the allowed size(@max-height)', params)

    if settings.get('min_resolution'):
        min_height, min_width = _parse_resolution(field_name, settings['min_resolution'])

        params.update({
            '@min-width': min_width,
            '@min-height': min_height,
        })

        if width is not None and width < min_width:
            engine.set_error(field_name, 'The width of the image(@width) is bigger then the allowed size(@min-width) ', params)

        if height is not None and height < min_height:
            engine.set_error(field_name, 'The width of the image(@height) is bigger then the allowed size(@min-height) ', params)
