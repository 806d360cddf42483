"""
Pydantic schemas for administrative batch job results.
"""
from pydantic import BaseModel


class ExpenseBackfillResult(BaseModel):
    """Outcome of the expense timestamp backfill."""
    migrated_record_count: int
    total_record_count: int


class UserBackfillResult(BaseModel):
    """Outcome of the legacy user backfill."""
    users_updated: int
    total_users: int


class OrphanPurgeResult(BaseModel):
    """Outcome of deleting expenses that have no owner."""
    deleted_count: int
    total_orphaned_found: int


class JobInfo(BaseModel):
    """Registered batch job as listed on the admin surface."""
    name: str
    kind: str
    version: int
    description: str
