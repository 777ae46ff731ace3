"""Script to run one recurring-transaction pass against the configured database."""

import argparse
import asyncio
import sys
from datetime import date
from typing import Optional

from components.core.config import get_settings
from components.core.database import DatabaseManager
from components.core.log_config import configure_logging
from components.recurring.materializer import RecurringMaterializer
from components.recurring.schemas import JobStatus
import components.core.init_db  # noqa: F401  # registers all models


async def run_recurring(today: Optional[date] = None, create_schema: bool = False) -> int:
    """Run the materializer once and return a process exit code."""
    settings = get_settings()
    db_manager = DatabaseManager(settings=settings)
    try:
        if create_schema:
            await db_manager.create_schema()
        materializer = RecurringMaterializer(
            db_manager,
            memo=settings.RECURRING_MEMO,
            concurrency=settings.RECURRING_CONCURRENCY,
            timezone=settings.TIMEZONE,
        )
        job = await materializer.run(today)
    finally:
        await db_manager.dispose()

    print(job.model_dump_json(indent=2))
    return 1 if job.status == JobStatus.partial_failure else 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="Run as if today were DATE (YYYY-MM-DD)")
    parser.add_argument("--create-schema", action="store_true", help="Create missing tables first")
    args = parser.parse_args()

    configure_logging(get_settings().LOG_LEVEL)
    sys.exit(asyncio.run(run_recurring(args.date, args.create_schema)))


if __name__ == "__main__":
    main()
