import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.dependencies import get_entry_store
from genie_notes.models import Status
from storage.entry_store import EntryNotFoundError, EntryStore, InvalidTransitionError

router = APIRouter()
logger = logging.getLogger(__name__)


class StatusIn(BaseModel):
    status: Status


class EntryPatchIn(BaseModel):
    tags: Optional[List[str]] = None
    due_date: Optional[datetime] = None
    start_date: Optional[datetime] = None


def _dump(entries) -> List[dict]:
    return [e.model_dump(mode="json") for e in entries]


@router.get("/entries")
async def list_entries(
    type: Optional[str] = None,
    status: Optional[str] = None,
    store: EntryStore = Depends(get_entry_store),
) -> dict:
    entries = store.list_entries(type=type, status=status)
    return {"entries": _dump(entries), "total": len(entries)}


@router.get("/entries/today")
async def entries_due_today(store: EntryStore = Depends(get_entry_store)) -> dict:
    """Active entries due or starting today."""
    entries = store.due_today()
    return {"date": datetime.now().strftime("%Y-%m-%d"), "entries": _dump(entries)}


@router.get("/entries/active")
async def active_entries(store: EntryStore = Depends(get_entry_store)) -> dict:
    entries = store.active()
    return {"entries": _dump(entries), "total": len(entries)}


@router.get("/entries/{entry_id}")
async def get_entry(entry_id: str, store: EntryStore = Depends(get_entry_store)) -> dict:
    try:
        return store.get(entry_id).model_dump(mode="json")
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")


@router.patch("/entries/{entry_id}/status")
async def update_status(
    entry_id: str,
    payload: StatusIn,
    store: EntryStore = Depends(get_entry_store),
) -> dict:
    try:
        return store.update_status(entry_id, payload.status).model_dump(mode="json")
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")
    except InvalidTransitionError as e:
        logger.warning(f"Rejected status change: {e}")
        raise HTTPException(status_code=409, detail=str(e))


@router.patch("/entries/{entry_id}")
async def patch_entry(
    entry_id: str,
    payload: EntryPatchIn,
    store: EntryStore = Depends(get_entry_store),
) -> dict:
    """Retag and/or reschedule an entry."""
    try:
        entry = store.get(entry_id)
        if payload.tags is not None:
            entry = store.retag(entry_id, payload.tags)
        if payload.due_date is not None or payload.start_date is not None:
            entry = store.reschedule(
                entry_id, due_date=payload.due_date, start_date=payload.start_date
            )
        return entry.model_dump(mode="json")
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")


@router.post("/entries/{entry_id}/actions/{action_id}/complete")
async def complete_action(
    entry_id: str,
    action_id: str,
    store: EntryStore = Depends(get_entry_store),
) -> dict:
    try:
        return store.complete_auto_action(entry_id, action_id).model_dump(mode="json")
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry or action not found")


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: str, store: EntryStore = Depends(get_entry_store)) -> dict:
    try:
        store.delete(entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Entry not found")
    return {"status": "deleted", "id": entry_id}
