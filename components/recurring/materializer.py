"""Turns recurring categories due today into transactions."""

import asyncio
import logging
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import select, update

from components.category.models import Category
from components.core import errors
from components.core.database import DatabaseManager
from components.core.dates import add_one_month, local_today
from components.recurring.schemas import CategoryFailure, JobResult, JobStatus
from components.transaction.models import Transaction

logger = logging.getLogger(__name__)


def _due_on(today: date):
    return (
        Category.is_deleted.is_(False),
        Category.registration_next_date == today,
    )


class RecurringMaterializer:
    """
    Creates one transaction per recurring category due today.

    Every category is fired in its own database transaction: the inserted
    transaction and the advanced ``registration_next_date`` are committed
    together or not at all. Only categories whose next date equals today
    exactly are fired; a date already in the past stays unfired.
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        memo: str = "recurring",
        concurrency: int = 4,
        timezone: str = "UTC",
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.db_manager = db_manager
        self.memo = memo
        self.concurrency = concurrency
        self.timezone = timezone

    async def due_category_ids(self, today: date) -> List[int]:
        """Ids of active categories whose next firing is today."""
        async with self.db_manager.get_db() as session:
            result = await session.execute(
                select(Category.id).where(*_due_on(today)).order_by(Category.id)
            )
            return list(result.scalars().all())

    async def process_category(self, category_id: int, today: date) -> bool:
        """
        Fire a single category atomically.

        The row is claimed by moving its next date forward with a
        conditional UPDATE before the transaction is inserted. Returns False
        when the claim matches no row, i.e. another run fired it first.
        """
        async with self.db_manager.session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    select(Category)
                    .where(Category.id == category_id, *_due_on(today))
                    .with_for_update()
                )
                category = result.scalar_one_or_none()
                if category is None:
                    return False

                if category.amount is None or not category.type:
                    raise errors.RecurrenceError(
                        f"Category {category_id} is recurring but has no amount or type"
                    )
                if category.user_id is None:
                    raise errors.RecurrenceError(f"Category {category_id} has no owner")

                claim = await session.execute(
                    update(Category)
                    .where(Category.id == category_id, *_due_on(today))
                    .values(registration_next_date=add_one_month(today, category.registration_date))
                    .execution_options(synchronize_session=False)
                )
                if claim.rowcount != 1:
                    return False

                session.add(Transaction(
                    user_id=category.user_id,
                    category_id=category.id,
                    date=today,
                    amount=category.amount,
                    type=category.type,
                    memo=self.memo,
                ))
                await session.flush()
        return True

    async def _run_unit(
        self, semaphore: asyncio.Semaphore, category_id: int, today: date
    ) -> Tuple[int, Optional[bool], Optional[str]]:
        async with semaphore:
            try:
                fired = await self.process_category(category_id, today)
            except Exception as exc:
                logger.exception("Recurring category %s failed", category_id)
                return category_id, None, str(exc) or exc.__class__.__name__
        return category_id, fired, None

    async def run(self, today: Optional[date] = None) -> JobResult:
        """Fire every category due today and collect the per-category outcomes."""
        today = today or local_today(self.timezone)
        category_ids = await self.due_category_ids(today)
        if not category_ids:
            logger.info("No recurring categories due on %s", today)
            return JobResult(status=JobStatus.nothing_due)

        logger.info("Processing %d recurring categories due on %s", len(category_ids), today)
        semaphore = asyncio.Semaphore(self.concurrency)
        outcomes = await asyncio.gather(
            *(self._run_unit(semaphore, category_id, today) for category_id in category_ids)
        )

        job = JobResult(status=JobStatus.processed)
        for category_id, fired, error in outcomes:
            if error is not None:
                job.failures.append(CategoryFailure(category_id=category_id, error=error))
            elif fired:
                job.processed.append(category_id)
            else:
                job.skipped.append(category_id)

        if job.failures:
            job.status = JobStatus.partial_failure
            logger.warning(
                "Recurring run on %s: %d processed, %d failed (%s)",
                today,
                len(job.processed),
                len(job.failures),
                ", ".join(str(failure.category_id) for failure in job.failures),
            )
        else:
            logger.info("Recurring run on %s: %d processed, %d skipped", today, len(job.processed), len(job.skipped))
        return job
