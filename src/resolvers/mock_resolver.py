from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import List

from .base import DateResolver, ResolvedDate

_DAY_WORDS = {"today": 0, "tomorrow": 1, "yesterday": -1}

_PHRASE = re.compile(
    r"\b(today|tomorrow|yesterday)\b"
    r"(?:\s+(?:at\s+)?(\d{1,2})(?::(\d{2}))?\s*(am|pm))?",
    re.IGNORECASE,
)
_ISO_DATE = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")


class MockResolver(DateResolver):
    """
    Deterministic resolver for demos and offline runs.

    Understands today/tomorrow/yesterday with an optional "[at] H[:MM]am|pm"
    suffix (relative), and ISO ``YYYY-MM-DD`` dates (day-certain).
    """

    def resolve(self, text: str, reference: datetime) -> List[ResolvedDate]:
        found = []

        for m in _PHRASE.finditer(text):
            day = reference + timedelta(days=_DAY_WORDS[m.group(1).lower()])
            resolved = day.replace(hour=12, minute=0, second=0, microsecond=0)
            if m.group(2):
                hour = int(m.group(2)) % 12 + (12 if m.group(4).lower() == "pm" else 0)
                resolved = resolved.replace(hour=hour, minute=int(m.group(3) or 0))
            found.append((m.start(), ResolvedDate(m.group(0), resolved, False)))

        for m in _ISO_DATE.finditer(text):
            try:
                resolved = datetime(int(m.group(1)), int(m.group(2)), int(m.group(3)), 12, 0)
            except ValueError:
                continue
            found.append((m.start(), ResolvedDate(m.group(0), resolved, True)))

        return [r for _pos, r in sorted(found, key=lambda pair: pair[0])]
