from __future__ import annotations

import re
from typing import List, Pattern, Tuple

# (separator, minimum trimmed length every part must exceed)
SEPARATORS: Tuple[Tuple[Pattern[str], int], ...] = (
    (re.compile(r"\n+"), 3),
    (re.compile(r";"), 3),
    (re.compile(r", and"), 3),
    (re.compile(r", then"), 3),
    (re.compile(r"[.!?]\s+(?=[A-Z])"), 3),
)

SENTENCE_SPLIT = re.compile(r"[.!?]+")
BRAIN_DUMP_MIN_SENTENCE = 10


def segment(text: str) -> List[str]:
    """Split raw capture text into ordered candidate strings.

    Separators are tried in priority order; blank parts are dropped and the
    first separator leaving more than one part, every part long enough, wins.
    Always returns at least one element.
    """
    for separator, min_length in SEPARATORS:
        parts = [p.strip() for p in separator.split(text) if p.strip()]
        if len(parts) > 1 and all(len(p) > min_length for p in parts):
            return parts

    return [text.strip()]


def segment_brain_dump(text: str) -> List[str]:
    """Line-oriented segmentation used by the brain-dump capture.

    Multiple non-blank lines become one piece each; a single block is split
    into sentences, keeping only substantial ones.
    """
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if len(lines) > 1:
        return lines

    block = text.strip()
    sentences = [s.strip() for s in SENTENCE_SPLIT.split(block) if s.strip()]
    if len(sentences) > 1:
        kept = [s for s in sentences if len(s) > BRAIN_DUMP_MIN_SENTENCE]
        return kept or [block]

    return [block]
