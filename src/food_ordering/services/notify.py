"""
Notification service facade.

Relays workflow messages ("Item selected: ...", "Order confirmed ...") to
whatever output the session is using, and logs each one.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class NotificationService:
    """Sends customer-facing messages to an output callable."""

    def __init__(self, output: Callable[[str], None] | None = None) -> None:
        self._output = output
        self.sent: list[str] = []

    def send(self, message: str) -> None:
        logger.debug("Notify: %s", message)
        self.sent.append(message)
        if self._output is not None:
            self._output(message)
