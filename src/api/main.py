import logging
import os

from fastapi import FastAPI

from api.routers import capture, entries, ops

# Logging configuration
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="GenieNotes capture API")

app.include_router(capture.router)
app.include_router(entries.router)
app.include_router(ops.router)

logger.info("GenieNotes API configured")
