from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

import parsedatetime

from .base import DateResolver, ResolvedDate

logger = logging.getLogger(__name__)

# A phrase naming an absolute calendar day resolves to the same day from a
# reference shifted forward or back; relative phrases ("tomorrow", "friday",
# "3pm") move with both shifts.
PROBE_SHIFT = timedelta(days=8)


class ParsedatetimeResolver(DateResolver):
    def __init__(self, calendar: Optional[parsedatetime.Calendar] = None):
        self.calendar = calendar or parsedatetime.Calendar(
            version=parsedatetime.VERSION_CONTEXT_STYLE
        )

    def resolve(self, text: str, reference: datetime) -> List[ResolvedDate]:
        found = self.calendar.nlp(text, sourceTime=reference.timetuple())
        if not found:
            return []

        out: List[ResolvedDate] = []
        for resolved, _flags, start, _end, matched in sorted(found, key=lambda m: m[2]):
            out.append(
                ResolvedDate(
                    matched_text=matched,
                    resolved_date=resolved,
                    day_level_certainty=self._is_day_certain(matched, resolved, reference),
                )
            )
        logger.debug(f"parsedatetime resolved {len(out)} date phrase(s)")
        return out

    def _is_day_certain(self, matched: str, resolved: datetime, reference: datetime) -> bool:
        for shifted in (reference + PROBE_SHIFT, reference - PROBE_SHIFT):
            probe, _ctx = self.calendar.parseDT(matched, sourceTime=shifted.timetuple())
            if probe.date() == resolved.date():
                return True
        return False
