"""
Administrative routes: batch jobs and cross-user inspection.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List
from app.db.session import get_db
from app.db.migrations import list_jobs, run_job
from app.schemas.expense import ExpenseResponse
from app.schemas.migration import JobInfo
from app.api.dependencies import require_admin
from app.core.exceptions import NotFoundError
from app.services import expense_service

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/jobs", response_model=List[JobInfo])
async def get_jobs():
    """List registered batch jobs."""
    return list_jobs()


@router.post("/jobs/{job_name}")
def run_admin_job(job_name: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Run a batch job and return its summary counts."""
    try:
        result = run_job(job_name, db)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    return result.model_dump()


@router.get("/expenses", response_model=List[ExpenseResponse])
def get_all_expenses(db: Session = Depends(get_db)):
    """All expenses across users, newest first."""
    return expense_service.get_all_expenses(db)
