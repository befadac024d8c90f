"""
Entry store service.

Owns the persisted collection of entries and confirmed brain-dump items on top
of an injected :class:`StorageBackend`. All mutations go through this class:
records handed out by the capture pipeline are never edited in place, the
store writes updated copies instead.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from assembly.entry_assembler import PREP_LEAD_TIME
from genie_notes.models import Entry, ParsedItem
from storage.backends import StorageBackend

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    "pending": {"in_progress", "completed"},
    "in_progress": {"completed"},
    "completed": set(),
}


class EntryNotFoundError(KeyError):
    pass


class InvalidTransitionError(ValueError):
    pass


class EntryStore:
    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ reads

    def list_entries(self, type: Optional[str] = None, status: Optional[str] = None) -> List[Entry]:
        entries = self._load_entries(self.backend.load())
        if type:
            entries = [e for e in entries if e.type == type]
        if status:
            entries = [e for e in entries if e.status == status]
        return entries

    def get(self, entry_id: str) -> Entry:
        for entry in self._load_entries(self.backend.load()):
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(entry_id)

    def active(self) -> List[Entry]:
        """Entries that still need attention (anything not completed)."""
        return [e for e in self.list_entries() if e.status != "completed"]

    def due_today(self, now: Optional[datetime] = None) -> List[Entry]:
        """Active entries due or starting on ``now``'s calendar day."""
        today = (now or datetime.now()).date()
        out = []
        for entry in self.active():
            when = entry.due_date or entry.start_date
            if when is not None and when.date() == today:
                out.append(entry)
        return out

    def list_parsed_items(self) -> List[ParsedItem]:
        return [ParsedItem.model_validate(d) for d in self.backend.load()["items"]]

    def count(self) -> int:
        return len(self.backend.load()["entries"])

    # -------------------------------------------------------------- mutations

    def add_entries(self, entries: Iterable[Entry]) -> List[Entry]:
        """Persist entries under fresh ids, skipping empty placeholders."""
        stored = [
            e.model_copy(update={"id": str(uuid.uuid4())})
            for e in entries
            if not e.is_placeholder
        ]
        if not stored:
            return []

        with self._lock:
            data = self.backend.load()
            data["entries"].extend(e.model_dump(mode="json") for e in stored)
            self.backend.save(data)

        logger.info(f"Stored {len(stored)} entries")
        return stored

    def confirm_parsed_items(self, items: Iterable[ParsedItem]) -> List[ParsedItem]:
        stored = [
            i.model_copy(update={"id": str(uuid.uuid4())})
            for i in items
            if not i.is_placeholder
        ]
        if not stored:
            return []

        with self._lock:
            data = self.backend.load()
            data["items"].extend(i.model_dump(mode="json") for i in stored)
            self.backend.save(data)

        logger.info(f"Confirmed {len(stored)} brain dump items")
        return stored

    def update_status(self, entry_id: str, status: str) -> Entry:
        def _apply(entry: Entry) -> Dict[str, Any]:
            if status == entry.status:
                return {}
            if status not in ALLOWED_TRANSITIONS.get(entry.status, set()):
                raise InvalidTransitionError(
                    f"Cannot move entry {entry_id} from {entry.status} to {status}"
                )
            return {"status": status}

        return self._update(entry_id, _apply)

    def complete_auto_action(self, entry_id: str, action_id: str) -> Entry:
        def _apply(entry: Entry) -> Dict[str, Any]:
            actions = []
            found = False
            for action in entry.auto_actions:
                if action.id == action_id:
                    found = True
                    action = action.model_copy(update={"completed": True})
                actions.append(action)
            if not found:
                raise EntryNotFoundError(f"{entry_id}/{action_id}")
            return {"auto_actions": actions}

        return self._update(entry_id, _apply)

    def retag(self, entry_id: str, tags: List[str]) -> Entry:
        cleaned: List[str] = []
        for tag in tags:
            tag = tag.lstrip("#").strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return self._update(entry_id, lambda entry: {"tags": cleaned})

    def reschedule(
        self,
        entry_id: str,
        due_date: Optional[datetime] = None,
        start_date: Optional[datetime] = None,
    ) -> Entry:
        """Move a due date and/or start date. Events keep their duration and
        their preparation actions follow the new start."""

        def _apply(entry: Entry) -> Dict[str, Any]:
            changes: Dict[str, Any] = {}
            if due_date is not None:
                changes["due_date"] = due_date
            if start_date is not None:
                duration = timedelta(hours=1)
                if entry.start_date and entry.end_date:
                    duration = entry.end_date - entry.start_date
                changes["start_date"] = start_date
                changes["end_date"] = start_date + duration
                changes["auto_actions"] = [
                    action.model_copy(update={"due_date": start_date - PREP_LEAD_TIME})
                    if action.type == "prep_task"
                    else action
                    for action in entry.auto_actions
                ]
            return changes

        return self._update(entry_id, _apply)

    def delete(self, entry_id: str) -> None:
        with self._lock:
            data = self.backend.load()
            remaining = [d for d in data["entries"] if d.get("id") != entry_id]
            if len(remaining) == len(data["entries"]):
                raise EntryNotFoundError(entry_id)
            data["entries"] = remaining
            self.backend.save(data)
        logger.info(f"Deleted entry {entry_id}")

    # ---------------------------------------------------------------- helpers

    def _update(self, entry_id: str, apply) -> Entry:
        with self._lock:
            data = self.backend.load()
            for i, raw in enumerate(data["entries"]):
                if raw.get("id") != entry_id:
                    continue
                entry = Entry.model_validate(raw)
                changes = apply(entry)
                if not changes:
                    return entry
                changes["updated_at"] = datetime.now()
                # re-validate so end_date stays after start_date
                updated = Entry.model_validate({**entry.model_dump(), **changes})
                data["entries"][i] = updated.model_dump(mode="json")
                self.backend.save(data)
                logger.info(f"Updated entry {entry_id}: {', '.join(sorted(changes))}")
                return updated
        raise EntryNotFoundError(entry_id)

    @staticmethod
    def _load_entries(data: Dict[str, Any]) -> List[Entry]:
        return [Entry.model_validate(d) for d in data["entries"]]
