"""
Error policies.

An error policy decides what happens to each violation at the moment it is
recorded:
- BufferPolicy (level 0): keep it in the collector for later retrieval
- EmitAndContinuePolicy (level 1): send it to the message channel right away
- RaiseImmediatelyPolicy (level 2): abort validation with ValidationFailed
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional, Union

from modules.entity_validation.core.base import ValidationError, ValidationSeverity
from modules.entity_validation.core.errors import ErrorCollector
from modules.entity_validation.core.exceptions import ConfigurationError, ValidationFailed
from modules.entity_validation.core.interfaces import IMessageChannel


class ErrorLevel(IntEnum):
    """Severity levels selecting an error policy"""
    BUFFER = 0
    EMIT = 1
    RAISE = 2


class ErrorPolicy(ABC):
    """Base class for all error policies."""

    level: ErrorLevel

    @abstractmethod
    def handle(self, error: ValidationError, collector: ErrorCollector) -> None:
        """
        Dispose of a freshly recorded violation.

        Args:
            error: The violation
            collector: The engine's error collector
        """
        pass


class BufferPolicy(ErrorPolicy):
    """Buffer every violation; the engine decides at the end of the run."""

    level = ErrorLevel.BUFFER

    def handle(self, error: ValidationError, collector: ErrorCollector) -> None:
        collector.add(error)


class EmitAndContinuePolicy(ErrorPolicy):
    """Emit every violation as a non-fatal message and keep validating."""

    level = ErrorLevel.EMIT

    def __init__(
        self,
        channel: IMessageChannel,
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        self.channel = channel
        self.severity = ValidationSeverity(severity)

    def handle(self, error: ValidationError, collector: ErrorCollector) -> None:
        self.channel.emit(error.format(), self.severity)


class RaiseImmediatelyPolicy(ErrorPolicy):
    """Abort the validation at the first violation."""

    level = ErrorLevel.RAISE

    def handle(self, error: ValidationError, collector: ErrorCollector) -> None:
        collector.add(error)
        raise ValidationFailed(error.format(), {error.field: [error]})


def policy_for_level(
    level: Union[int, ErrorLevel],
    channel: Optional[IMessageChannel] = None,
    severity: ValidationSeverity = ValidationSeverity.ERROR
) -> ErrorPolicy:
    """
    Build the policy for a numeric error level.

    Args:
        level: 0 buffer, 1 emit, 2 raise
        channel: Message channel, required for level 1
        severity: Severity of emitted messages

    Returns:
        ErrorPolicy instance

    Raises:
        ConfigurationError: Unknown level, or level 1 without a channel
    """
    try:
        level = ErrorLevel(level)
    except ValueError:
        raise ConfigurationError(
            f"Unknown error level: {level}. "
            f"Available: {[lvl.value for lvl in ErrorLevel]}"
        )

    if level == ErrorLevel.BUFFER:
        return BufferPolicy()

    if level == ErrorLevel.EMIT:
        if channel is None:
            raise ConfigurationError("Error level 1 requires a message channel")
        return EmitAndContinuePolicy(channel, severity)

    return RaiseImmediatelyPolicy()
