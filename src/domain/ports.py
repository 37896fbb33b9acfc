"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the form domain requires
from its collaborators. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol


class SubmitOutcome(str, Enum):
    """
    Result of a submit attempt.

    - SUCCESS: record persisted, form reset to its pristine state
    - REJECTED: at least one field error, errors made visible
    """

    SUCCESS = "success"
    REJECTED = "rejected"


class UserStore(Protocol):
    """Port interface for persisting the single registered user record."""

    def save_user(self, record: dict[str, str]) -> None:
        """
        Store the registered user, replacing any previous record.

        Best-effort durable write; the caller does not consume an
        acknowledgment.

        Args:
            record: Flat field name -> value mapping with all form fields
        """
        ...

    def load_user(self) -> dict[str, str] | None:
        """
        Read back the stored record.

        Returns:
            The last saved record, or None if nothing was stored yet
        """
        ...


class Notifier(Protocol):
    """Port interface for transient user notifications."""

    def notify(self, message: str) -> None:
        """
        Show a transient message to the user.

        Display duration and dismissal belong to the implementation.

        Args:
            message: Human-readable message
        """
        ...
