from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from genie_notes.models import DateMatch
from resolvers.base import DateResolver

logger = logging.getLogger(__name__)

EXACT_CONFIDENCE = 0.9
RELATIVE_CONFIDENCE = 0.7


class TemporalExtractor:
    """Finds date references through a pluggable :class:`DateResolver`.

    A missing or failing resolver yields no matches for the candidate.
    """

    def __init__(self, resolver: Optional[DateResolver] = None):
        self.resolver = resolver

    def extract(self, text: str, now: Optional[datetime] = None) -> List[DateMatch]:
        if self.resolver is None or not text.strip():
            return []

        reference = now or datetime.now()
        try:
            return [
                DateMatch(
                    date=r.resolved_date,
                    confidence=EXACT_CONFIDENCE if r.day_level_certainty else RELATIVE_CONFIDENCE,
                    type="exact" if r.day_level_certainty else "relative",
                    matched_text=r.matched_text,
                )
                for r in self.resolver.resolve(text, reference)
            ]
        except Exception as e:
            logger.warning(f"Date resolver failed, continuing without dates: {e}")
            return []
