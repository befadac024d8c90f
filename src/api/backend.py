from datetime import datetime
from typing import List, Optional

from genie_notes.models import ParsedItem
from genie_notes.pipeline import CapturePipeline
from storage.entry_store import EntryStore


class BackendAPI:
    """Central orchestration component: capture pipeline in, entry store out."""

    def __init__(self, pipeline: CapturePipeline, store: EntryStore):
        self.pipeline = pipeline
        self.store = store

    def capture(self, text: str, now: Optional[datetime] = None, persist: bool = True) -> dict:
        """Accepts free-form text and runs the full classification pipeline."""

        # 1. Segment, classify, extract and assemble
        parsed = self.pipeline.parse_input(text, now=now)

        # 2. Persist real entries (placeholders are dropped by the store)
        stored = self.store.add_entries(parsed.entries) if persist else []

        # Callers see stored ids when the entries were persisted
        entries = stored if persist else [e for e in parsed.entries if not e.is_placeholder]

        return {
            "confidence": parsed.confidence,
            "entries": [e.model_dump(mode="json") for e in entries],
            "suggestions": parsed.suggestions,
            "stored": len(stored),
        }

    def brain_dump(self, text: str) -> dict:
        items = [i for i in self.pipeline.brain_dump(text) if not i.is_placeholder]
        return {"items": [i.model_dump(mode="json") for i in items]}

    def confirm(self, items: List[ParsedItem]) -> dict:
        stored = self.store.confirm_parsed_items(items)
        return {"items": [i.model_dump(mode="json") for i in stored], "stored": len(stored)}
