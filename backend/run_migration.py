"""
Run an administrative batch job against the configured database.

Usage:
    python run_migration.py --list
    python run_migration.py backfill_expense_timestamps
"""
import argparse
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app.db.session import SessionLocal, init_db
from app.db.migrations import JOBS, list_jobs, run_job


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run an expense tracker batch job.")
    parser.add_argument("job", nargs="?", choices=sorted(JOBS), help="job to run")
    parser.add_argument("--list", action="store_true", help="list registered jobs and exit")
    args = parser.parse_args(argv)

    if args.list or not args.job:
        for job in list_jobs():
            print(f"{job.name} (v{job.version}, {job.kind}): {job.description}")
        return 0

    init_db()
    db = SessionLocal()
    try:
        result = run_job(args.job, db)
    finally:
        db.close()

    print(f"{args.job} completed:")
    for key, value in result.model_dump().items():
        print(f"  {key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
