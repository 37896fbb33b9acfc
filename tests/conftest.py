"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fixed reference date for age rules
- Mocked store and notifier ports
- A FormModel wired to the mocks
"""

from datetime import date
from unittest.mock import Mock

import pytest

from src.domain.form import FormModel

TODAY = date(2026, 10, 19)


@pytest.fixture
def today() -> date:
    """Reference date used as "today" by the form under test."""
    return TODAY


@pytest.fixture
def store() -> Mock:
    """Mocked UserStore port."""
    mock = Mock()
    mock.load_user.return_value = None
    return mock


@pytest.fixture
def notifier() -> Mock:
    """Mocked Notifier port."""
    return Mock()


@pytest.fixture
def form(store: Mock, notifier: Mock, today: date) -> FormModel:
    """FormModel with mocked collaborators and a frozen clock."""
    return FormModel(store=store, notifier=notifier, clock=lambda: today)
