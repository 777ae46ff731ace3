"""Pydantic schemas for recurring job results."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    nothing_due = "nothing_due"
    processed = "processed"
    partial_failure = "partial_failure"


class CategoryFailure(BaseModel):
    """A due category whose firing was rolled back."""
    category_id: int
    error: str


class JobResult(BaseModel):
    """Aggregate outcome of one materializer run."""
    status: JobStatus
    processed: List[int] = Field(default_factory=list)
    skipped: List[int] = Field(default_factory=list)  # Already fired by a concurrent run
    failures: List[CategoryFailure] = Field(default_factory=list)


class JobResponse(BaseModel):
    """Schema for the trigger endpoint response. Empty lists are left out."""
    message: str
    processed: Optional[List[int]] = None
    skipped: Optional[List[int]] = None
    failures: Optional[List[CategoryFailure]] = None
