"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the form
domain service and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.notify.console import ConsoleNotifier
from src.adapters.storage import LocalFileUserStore, PostgresUserStore
from src.config.settings import Settings
from src.domain.form import FormModel
from src.domain.ports import UserStore

# Module-level singleton - ConsoleNotifier is stateless
_notifier = ConsoleNotifier()


def get_notifier() -> ConsoleNotifier:
    """Get console notifier (singleton)."""
    return _notifier


def build_user_store(settings: Settings, pool: ConnectionPool | None = None) -> UserStore:
    """
    Create the configured user store.

    Args:
        settings: Application settings selecting the backend
        pool: Connection pool, required for the postgres backend

    Returns:
        LocalFileUserStore or PostgresUserStore
    """
    if settings.storage_backend == "postgres":
        if pool is None:
            raise ValueError("postgres storage backend requires a connection pool")
        return PostgresUserStore(pool, key=settings.storage_key)
    return LocalFileUserStore(settings.storage_path, key=settings.storage_key)


def get_user_store(request: Request) -> UserStore:
    """
    Get user store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.store


def get_form(request: Request) -> FormModel:
    """
    Get the in-progress form from app state.

    One form per application, wired to the user store and notifier
    during lifespan startup.
    """
    return request.app.state.form
