"""Main entry point for the FastAPI application."""

import uvicorn

from components.core.config import get_settings
from components.core.log_config import configure_logging
from restapi.router import create_app

configure_logging(get_settings().LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True)
