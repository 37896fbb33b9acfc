"""Storage adapters - User record persistence implementations."""

from .local import LocalFileUserStore
from .postgres import PostgresUserStore, run_migrations

__all__ = ["LocalFileUserStore", "PostgresUserStore", "run_migrations"]
