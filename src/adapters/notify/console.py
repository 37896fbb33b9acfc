"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notifier port, logging transient messages instead of displaying them.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Auto-dismiss timing belongs to whatever displays the message, so
    this adapter only records it.
    """

    def notify(self, message: str) -> None:
        """
        Log a notification message at INFO level.

        Args:
            message: Human-readable message from the form domain
        """
        logger.info("[NOTIFICATION] %s", message)
