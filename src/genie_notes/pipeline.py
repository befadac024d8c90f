from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from assembly.entry_assembler import assemble_entry
from classification.entry_classifier import classify
from extraction.segmenter import segment, segment_brain_dump
from extraction.spatial_extractor import extract_location
from extraction.tag_extractor import strip_tags
from extraction.temporal_extractor import TemporalExtractor
from genie_notes.models import Entry, ParsedInput, ParsedItem
from resolvers.base import DateResolver
from scheduling.suggestions import generate_suggestions

logger = logging.getLogger(__name__)


class CapturePipeline:
    """Turns raw captured text into structured records.

    Holds no state besides its date resolver, so one instance can be shared
    between callers.
    """

    def __init__(self, resolver: Optional[DateResolver] = None):
        self.temporal = TemporalExtractor(resolver)

    def parse_input(self, text: str, now: Optional[datetime] = None) -> ParsedInput:
        """Full-classification capture: entries plus suggestions for the batch."""
        now = now or datetime.now()

        # 1. Split into candidates
        candidates = segment(text)

        # 2. Classify, extract and assemble each candidate independently
        entries: List[Entry] = []
        for candidate in candidates:
            content = strip_tags(candidate)
            # a tags-only candidate becomes an empty placeholder, its tags go with it
            classification = classify(candidate if content else "", profile="full")
            dates = self.temporal.extract(content, now=now)
            location = extract_location(content)
            entries.append(assemble_entry(candidate, classification, dates, location, now=now))

        # 3. Advisory suggestions over the whole batch
        suggestions = generate_suggestions(entries)

        logger.info(
            f"Captured {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} "
            f"from {len(text)} chars"
        )
        return ParsedInput(
            entries=entries,
            confidence=classify(text, profile="full").confidence,
            suggestions=suggestions,
        )

    def brain_dump(self, text: str) -> List[ParsedItem]:
        """Lightweight capture: one :class:`ParsedItem` per line or sentence."""
        items: List[ParsedItem] = []
        for piece in segment_brain_dump(text):
            item = parse_item(piece, len(items))
            if not item.is_placeholder:
                items.append(item)

        return items or [parse_item(text, 0)]


def parse_item(text: str, index: int) -> ParsedItem:
    content = strip_tags(text)
    classification = classify(text if content else "", profile="brain_dump")
    return ParsedItem(
        id=f"temp-{index}",
        content=content,
        type=classification.type,
        tags=classification.tags,
        confidence=classification.confidence,
    )
