from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from extraction.tag_extractor import strip_tags
from genie_notes.models import (
    AutoAction,
    ClassificationResult,
    DateMatch,
    Entry,
    LocationMatch,
)

DEFAULT_EVENT_DURATION = timedelta(hours=1)
PREP_LEAD_TIME = timedelta(hours=24)


def assemble_entry(
    candidate: str,
    classification: ClassificationResult,
    dates: List[DateMatch],
    location: Optional[LocationMatch] = None,
    now: Optional[datetime] = None,
) -> Entry:
    """Combine the per-candidate extractor outputs into one :class:`Entry`.

    Tasks take the first date as their due date; events take it as their start,
    get a one hour slot and a preparation action due a day earlier. Without a
    date match neither field is set.
    """
    now = now or datetime.now()
    content = strip_tags(candidate)
    entry_type = classification.type

    due_date = start_date = end_date = None
    auto_actions: List[AutoAction] = []

    if dates and entry_type == "task":
        due_date = dates[0].date
    elif dates and entry_type == "event":
        start_date = dates[0].date
        end_date = start_date + DEFAULT_EVENT_DURATION
        auto_actions.append(
            AutoAction(
                id=f"prep_{uuid.uuid4().hex[:12]}",
                type="prep_task",
                content=f"Prepare for: {content}",
                due_date=start_date - PREP_LEAD_TIME,
            )
        )

    return Entry(
        content=content,
        type=entry_type,
        confidence=classification.confidence,
        tags=list(classification.tags),
        priority=classification.priority,
        status="pending",
        due_date=due_date,
        start_date=start_date,
        end_date=end_date,
        location=location.location if location else None,
        auto_actions=auto_actions,
        related_ids=[],
        notes="",
        created_at=now,
        updated_at=now,
    )
