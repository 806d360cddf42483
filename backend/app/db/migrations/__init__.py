"""
Administrative batch jobs and their single entry point.
"""
import logging
from typing import Dict, List
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError
from app.core.utils import utcnow
from app.db.migrations.base import MigrationJob, JobKind
from app.db.migrations.backfill_expense_timestamps import BackfillExpenseTimestamps
from app.db.migrations.backfill_legacy_users import BackfillLegacyUsers
from app.db.migrations.purge_orphaned_expenses import PurgeOrphanedExpenses
from app.models.migration_run import MigrationRun
from app.schemas.migration import JobInfo

logger = logging.getLogger(__name__)

# Listed in the order an operator is expected to run them
JOBS: Dict[str, MigrationJob] = {
    job.name: job
    for job in (
        BackfillLegacyUsers(),
        BackfillExpenseTimestamps(),
        PurgeOrphanedExpenses(),
    )
}


def get_job(name: str) -> MigrationJob:
    job = JOBS.get(name)
    if job is None:
        raise NotFoundError(f"Unknown job: {name}")
    return job


def list_jobs() -> List[JobInfo]:
    return [
        JobInfo(name=job.name, kind=job.kind.value, version=job.version, description=job.description)
        for job in JOBS.values()
    ]


def run_job(name: str, db: Session) -> BaseModel:
    """
    Run a registered job and record the run.

    Errors from the store abort the job and propagate; whatever the job had
    already committed stays, and no run record is written.
    """
    job = get_job(name)
    logger.info(f"Running job {job.name} (v{job.version}, {job.kind.value})")
    result = job.run(db)

    db.add(MigrationRun(
        job_name=job.name,
        kind=job.kind.value,
        version=job.version,
        ran_at=utcnow(),
        summary=result.model_dump(),
    ))
    db.commit()
    logger.info(f"Job {job.name} finished: {result.model_dump()}")
    return result


__all__ = ["JOBS", "JobKind", "MigrationJob", "get_job", "list_jobs", "run_job"]
