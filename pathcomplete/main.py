"""
HTTP entrypoint exposing directory suggestions.
"""

import logging

from fastapi import FastAPI

from pathcomplete.api.routers import router as api_router
from pathcomplete.config.settings import settings

# Create FastAPI app
app = FastAPI(title="Path Completion API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
