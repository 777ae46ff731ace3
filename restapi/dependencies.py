"""Shared FastAPI dependencies."""

from datetime import date

from fastapi import Depends, Request

from components.core.config import Settings
from components.core.dates import local_today


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_today(settings: Settings = Depends(get_app_settings)) -> date:
    """Today's calendar date in the configured timezone."""
    return local_today(settings.TIMEZONE)
