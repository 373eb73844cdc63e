"""
Built-in pre-processors.

Pre-processors run before any validator and return the value the rest of
the pipeline should see:
- morphText: Strip surrounding whitespace
- morphList: Wrap a scalar into a one item list
- morphDate: Convert a date or date string into a unix timestamp
- morphUnique: Drop duplicate list items, keeping the first occurrence
"""

from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as date_parser

from modules.entity_validation.core.base import RuleKind
from modules.entity_validation.core.registry import register_rule
from shared.utils.helpers import is_numeric
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


@register_rule("morphText", kind=RuleKind.PREPROCESSOR)
def morph_text(engine, field_name: str, value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


@register_rule("morphList", kind=RuleKind.PREPROCESSOR)
def morph_list(engine, field_name: str, value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (tuple, set, frozenset)):
        return list(value)
    return [value]


def _to_timestamp(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


@register_rule("morphDate", kind=RuleKind.PREPROCESSOR)
def morph_date(engine, field_name: str, value: Any) -> Any:
    """
    Naive dates and datetimes are read as UTC. Numeric strings are left
    as they are; strings the date parser cannot read are returned
    unchanged so the type check can report them.
    """
    if isinstance(value, datetime):
        return _to_timestamp(value)

    if isinstance(value, date):
        return _to_timestamp(datetime(value.year, value.month, value.day))

    if isinstance(value, str) and value.strip() and not is_numeric(value):
        try:
            return _to_timestamp(date_parser.parse(value.strip()))
        except (ValueError, OverflowError) as e:
            logger.debug(f"Field '{field_name}': '{value}' is not a date ({e}), left unchanged")

    return value


@register_rule("morphUnique", kind=RuleKind.PREPROCESSOR)
def morph_unique(engine, field_name: str, value: Any) -> Any:
    if not isinstance(value, (list, tuple)):
        return value

    unique = []
    for item in value:
        if item not in unique:
            unique.append(item)
    return unique
