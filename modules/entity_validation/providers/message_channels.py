"""
Message channel implementations.

- LoggerMessageChannel: Write messages to the application log
- CollectingMessageChannel: Keep messages for the host to display later
"""

import logging
from typing import List, Optional, Tuple

from modules.entity_validation.core.base import ValidationSeverity
from modules.entity_validation.core.interfaces import IMessageChannel
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class LoggerMessageChannel(IMessageChannel):
    """Emit messages as log records at the matching level."""

    LOG_LEVELS = {
        ValidationSeverity.INFO: logging.INFO,
        ValidationSeverity.WARNING: logging.WARNING,
        ValidationSeverity.ERROR: logging.ERROR,
        ValidationSeverity.CRITICAL: logging.CRITICAL,
    }

    def __init__(self, target: Optional[logging.Logger] = None):
        self.logger = target or logger

    def emit(self, message: str, severity: ValidationSeverity = ValidationSeverity.ERROR) -> None:
        self.logger.log(self.LOG_LEVELS[ValidationSeverity(severity)], message)


class CollectingMessageChannel(IMessageChannel):
    """Collect (message, severity) pairs in memory."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, ValidationSeverity]] = []

    def emit(self, message: str, severity: ValidationSeverity = ValidationSeverity.ERROR) -> None:
        self.messages.append((message, ValidationSeverity(severity)))

    def get_messages(self, severity: Optional[ValidationSeverity] = None) -> List[str]:
        """Get emitted messages, optionally filtered by severity."""
        return [
            message for message, message_severity in self.messages
            if severity is None or message_severity == ValidationSeverity(severity)
        ]

    def clear(self) -> None:
        self.messages = []
