import asyncio
import logging
import time
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.backend import BackendAPI
from api.dependencies import get_entry_store, get_pipeline
from api.metrics import ENTRIES_CLASSIFIED_TOTAL, REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS, STORE_ENTRIES
from genie_notes.models import ParsedItem
from genie_notes.pipeline import CapturePipeline
from storage.entry_store import EntryStore

router = APIRouter()
logger = logging.getLogger(__name__)


class CaptureIn(BaseModel):
    text: str
    now: Optional[datetime] = None
    persist: bool = True


class BrainDumpIn(BaseModel):
    text: str


class ConfirmIn(BaseModel):
    items: List[ParsedItem] = Field(default_factory=list)


def get_backend(
    pipeline: CapturePipeline = Depends(get_pipeline),
    store: EntryStore = Depends(get_entry_store),
) -> BackendAPI:
    return BackendAPI(pipeline, store)


@router.post("/capture")
async def capture(payload: CaptureIn, backend: BackendAPI = Depends(get_backend)) -> dict:
    start = time.time()
    logger.info(f"Received capture: {payload.text[:50]}...")

    result = await asyncio.to_thread(
        backend.capture, payload.text, now=payload.now, persist=payload.persist
    )
    logger.info(
        f"Capture processed. Entries: {len(result['entries'])}, stored: {result['stored']}"
    )

    # Prometheus counters (best-effort)
    try:
        REQUESTS_TOTAL.labels(endpoint="/capture", status="processed").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/capture").observe(time.time() - start)
        for entry in result["entries"]:
            ENTRIES_CLASSIFIED_TOTAL.labels(type=entry["type"]).inc()
        STORE_ENTRIES.set(backend.store.count())
    except Exception:
        pass

    return {"status": "processed", **result}


@router.post("/brain-dump")
async def brain_dump(payload: BrainDumpIn, backend: BackendAPI = Depends(get_backend)) -> dict:
    start = time.time()
    result = await asyncio.to_thread(backend.brain_dump, payload.text)

    try:
        REQUESTS_TOTAL.labels(endpoint="/brain-dump", status="processed").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/brain-dump").observe(time.time() - start)
    except Exception:
        pass

    return {"status": "processed", **result}


@router.post("/brain-dump/confirm")
async def confirm_brain_dump(payload: ConfirmIn, backend: BackendAPI = Depends(get_backend)) -> dict:
    result = await asyncio.to_thread(backend.confirm, payload.items)

    try:
        REQUESTS_TOTAL.labels(endpoint="/brain-dump/confirm", status="stored").inc()
    except Exception:
        pass

    return {"status": "stored", **result}
