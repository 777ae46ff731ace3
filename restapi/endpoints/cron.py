"""Scheduler-triggered endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import JSONResponse

from components.core.config import Settings
from components.core.database import DatabaseManager
from components.core.init_db import get_db_manager
from components.core.security import verify_cron_secret
from components.recurring.materializer import RecurringMaterializer
from components.recurring.schemas import JobResponse, JobStatus
from restapi.dependencies import get_app_settings

router = APIRouter(
    prefix="/cron",
    tags=["cron"],
    responses={401: {"description": "Unauthorized"}},
)

MESSAGES = {
    JobStatus.nothing_due: "No recurring transactions for today",
    JobStatus.processed: "Recurring transactions processed",
    JobStatus.partial_failure: "Some recurring transactions failed",
}


def require_cron_secret(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Reject callers that do not present the shared scheduler secret."""
    expected = f"Bearer {settings.CRON_SECRET}" if settings.CRON_SECRET else None
    if not verify_cron_secret(authorization, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_materializer(
    db_manager: DatabaseManager = Depends(get_db_manager),
    settings: Settings = Depends(get_app_settings),
) -> RecurringMaterializer:
    return RecurringMaterializer(
        db_manager,
        memo=settings.RECURRING_MEMO,
        concurrency=settings.RECURRING_CONCURRENCY,
        timezone=settings.TIMEZONE,
    )


@router.api_route(
    "/recurring",
    methods=["GET", "POST"],
    response_model=JobResponse,
    dependencies=[Depends(require_cron_secret)],
    responses={500: {"model": JobResponse, "description": "Some categories failed"}},
)
async def run_recurring(
    materializer: RecurringMaterializer = Depends(get_materializer),
):
    """
    Materialize recurring categories due today.

    Each due category gets one transaction and its next date moves one
    month ahead. Re-running on the same day is a no-op for categories that
    already fired, so a scheduler may retry after a partial failure.
    """
    job = await materializer.run()
    response = JobResponse(
        message=MESSAGES[job.status],
        processed=job.processed or None,
        skipped=job.skipped or None,
        failures=job.failures or None,
    )
    status_code = status.HTTP_200_OK
    if job.status == JobStatus.partial_failure:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", exclude_none=True),
    )
