"""
Error collection for validation runs.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from modules.entity_validation.core.base import ValidationError


ERROR_SEPARATOR = "\n\r"


class ErrorCollector:
    """
    Ordered, per-field accumulation of violations.

    Errors keep their insertion order within a field; fields keep the order
    in which they first recorded an error.
    """

    def __init__(self) -> None:
        self._errors: Dict[str, List[ValidationError]] = {}

    def set_error(
        self,
        field_name: str,
        message: str,
        params: Optional[Mapping[str, Any]] = None
    ) -> ValidationError:
        """
        Append one violation to the field's entry list.

        Args:
            field_name: Field the violation belongs to
            message: Message template
            params: Placeholder values for the template

        Returns:
            The recorded ValidationError
        """
        error = ValidationError(field=field_name, message=message, params=dict(params or {}))
        self.add(error)
        return error

    def add(self, error: ValidationError) -> None:
        """Append an already built violation."""
        self._errors.setdefault(error.field, []).append(error)

    def get_errors(self, squash: bool = True) -> Union[str, Dict[str, List[ValidationError]]]:
        """
        Get the recorded errors.

        Args:
            squash: When True return one formatted string, otherwise the raw
                    mapping of field name -> list of ValidationError

        Returns:
            Squashed error string or structured errors
        """
        if not squash:
            return {name: list(errors) for name, errors in self._errors.items()}

        return ERROR_SEPARATOR.join(
            error.format()
            for errors in self._errors.values()
            for error in errors
        )

    def clear_errors(self) -> None:
        """Reset the store to empty."""
        self._errors = {}

    def has_errors(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return sum(len(errors) for errors in self._errors.values())
