"""
Helper utility functions.
"""

from typing import Any, Optional, Union


Number = Union[int, float]


def is_numeric(value: Any) -> bool:
    """
    Check whether a value is a number or a numeric string.

    Booleans are not numeric.

    Args:
        value: Value to check

    Returns:
        True for ints, floats and strings parsing as a float
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            float(value.strip())
        except ValueError:
            return False
        return bool(value.strip())
    return False


def to_number(value: Any) -> Optional[Number]:
    """
    Convert a numeric value to int (when integral) or float.

    Ints and integer strings are kept exact, however large.

    Args:
        value: Value to convert

    Returns:
        The number, or None if the value is not numeric

    Example:
        to_number("150")    # Returns 150
        to_number("1.5")    # Returns 1.5
        to_number("wide")   # Returns None
    """
    if not is_numeric(value):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass

    number = float(value)
    if number.is_integer():
        return int(number)
    return number


def get_path(data: Any, path: str) -> Any:
    """
    Get a value from nested data using dot notation.

    Supports nested keys and list indexes: "address.city", "items.0.name"

    Args:
        data: Data dictionary
        path: Field path in dot notation

    Returns:
        Value or None if not found
    """
    current = data
    try:
        for key in path.split('.'):
            if isinstance(current, dict):
                current = current.get(key)
            elif isinstance(current, list) and key.isdigit():
                current = current[int(key)]
            else:
                return None

            if current is None:
                return None

        return current
    except (KeyError, IndexError, AttributeError, TypeError):
        return None


def set_path(data: dict, path: str, value: Any) -> None:
    """
    Set a value in nested data using dot notation.

    Missing intermediate dictionaries are created.

    Args:
        data: Data dictionary (modified in place)
        path: Field path in dot notation
        value: Value to set
    """
    keys = path.split('.')
    current = data

    for key in keys[:-1]:
        if isinstance(current, list) and key.isdigit():
            current = current[int(key)]
            continue
        if key not in current or current[key] is None:
            current[key] = {}
        current = current[key]

    last = keys[-1]
    if isinstance(current, list) and last.isdigit():
        current[int(last)] = value
    else:
        current[last] = value
