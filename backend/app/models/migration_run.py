"""
Record of an administrative batch job run.
"""
from sqlalchemy import Column, String, Integer, DateTime, JSON
from app.db.base import BaseModel


class MigrationRun(BaseModel):
    """One completed run of a registered batch job and its summary counts."""
    __tablename__ = "migration_runs"

    job_name = Column(String(100), nullable=False, index=True)
    kind = Column(String(20), nullable=False)
    version = Column(Integer, nullable=False)
    ran_at = Column(DateTime(timezone=True), nullable=False)
    summary = Column(JSON, nullable=False)
