import logging

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api.dependencies import DATE_RESOLVER, STORE_BACKEND, get_entry_store
from api.metrics import STORE_ENTRIES
from storage.entry_store import EntryStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(store: EntryStore = Depends(get_entry_store)) -> dict:
    """Health check endpoint for container orchestration."""
    health = {
        "status": "healthy",
        "store_backend": STORE_BACKEND,
        "date_resolver": DATE_RESOLVER,
    }
    try:
        health["entries"] = store.count()
    except Exception as e:
        logger.error(f"Entry store health check failed: {e}")
        health["status"] = "degraded"
        health["store"] = {"status": "error", "error": str(e)}
    return health


@router.get("/metrics")
async def metrics(store: EntryStore = Depends(get_entry_store)) -> Response:
    """
    Prometheus scrape endpoint.
    """
    try:
        STORE_ENTRIES.set(store.count())
    except Exception:
        pass

    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
