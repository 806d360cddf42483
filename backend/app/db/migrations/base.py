"""
Base class for administrative batch jobs.
"""
import enum
from pydantic import BaseModel
from sqlalchemy.orm import Session


class JobKind(str, enum.Enum):
    """What a batch job does to existing records."""
    BACKFILL = "backfill"
    ORPHAN_PURGE = "orphan_purge"


class MigrationJob:
    """
    A named, versioned, idempotent batch job.

    Subclasses set the class attributes and implement `run`. Running a job
    twice must be safe: the second run finds nothing left to change.
    """
    name: str = ""
    kind: JobKind = JobKind.BACKFILL
    version: int = 1
    description: str = ""

    def run(self, db: Session) -> BaseModel:
        raise NotImplementedError
