"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.expense import Expense
from app.models.migration_run import MigrationRun

__all__ = [
    "User",
    "Expense",
    "MigrationRun",
]
