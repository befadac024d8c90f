from __future__ import annotations

import re
from typing import Optional, Tuple, Pattern

from genie_notes.models import LocationMatch

LOCATION_CONFIDENCE = 0.8

_CAPITALIZED_RUN = r"([A-Z][A-Za-z'&-]*(?:[ \t]+[A-Z][A-Za-z'&-]*)*)"

KNOWN_VENUES = (
    "WeWork",
    "Starbucks",
    "Office",
    "Home",
    "Gym",
    "Restaurant",
    "Cafe",
    "Library",
    "Park",
    "School",
    "Airport",
    "Hospital",
)

LOCATION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\b(?:at|in|to|from)\s+" + _CAPITALIZED_RUN),
    re.compile(r"@\s*" + _CAPITALIZED_RUN),
    re.compile(r"\b(?:" + "|".join(KNOWN_VENUES) + r")\b", re.IGNORECASE),
)


def extract_location(text: str) -> Optional[LocationMatch]:
    """Return the first location mention found by the ordered patterns, if any."""
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text)
        if match:
            location = match.group(1) if match.groups() else match.group(0)
            return LocationMatch(
                location=location.strip(),
                confidence=LOCATION_CONFIDENCE,
                type="exact",
            )
    return None
