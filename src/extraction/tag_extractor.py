from __future__ import annotations

import re
from typing import List

HASHTAG = re.compile(r"#(\w+)")
WHITESPACE_RUN = re.compile(r"[ \t]{2,}")

URGENCY_WORDS = ("urgent", "asap")
GOAL_WORDS = ("goal", "objective")


def extract_explicit_tags(content: str) -> List[str]:
    """Return ``#word`` tokens in order of appearance, case preserved, without ``#``."""
    tags: List[str] = []
    for tag in HASHTAG.findall(content):
        if tag not in tags:
            tags.append(tag)
    return tags


def extract_tags(content: str) -> List[str]:
    """Explicit hashtags followed by inferred ``priority`` / ``goal`` tags."""
    tags = extract_explicit_tags(content)
    lowered = content.lower()

    if any(word in lowered for word in URGENCY_WORDS) and "priority" not in tags:
        tags.append("priority")
    if any(word in lowered for word in GOAL_WORDS) and "goal" not in tags:
        tags.append("goal")

    return tags


def strip_tags(content: str) -> str:
    """Remove ``#word`` tokens and tidy the whitespace they leave behind."""
    return WHITESPACE_RUN.sub(" ", HASHTAG.sub("", content)).strip()
