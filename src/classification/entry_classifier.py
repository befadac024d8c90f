from __future__ import annotations

import logging

from classification.rules import DEFAULT_CONFIDENCE, PROFILES
from extraction.tag_extractor import extract_tags
from genie_notes.models import ClassificationResult, Priority

logger = logging.getLogger(__name__)

# Checked top to bottom; the first level with a matching word wins.
PRIORITY_WORDS = (
    ("urgent", ("urgent", "asap", "emergency")),
    ("high", ("important", "deadline", "due")),
    ("medium", ("priority", "focus")),
)


def determine_priority(content: str) -> Priority:
    lowered = content.lower()
    for level, words in PRIORITY_WORDS:
        if any(w in lowered for w in words):
            return level
    return "low"


def classify(content: str, profile: str = "full") -> ClassificationResult:
    """Assign a type and confidence to one candidate string.

    ``profile`` selects the rule set: ``"full"`` (task/event/idea/insight/
    reflection/journal, default insight) or ``"brain_dump"`` (task/idea/
    journal, default thought). Pure: same input, same result.
    """
    rules, default_type = PROFILES[profile]

    if not content.strip():
        return ClassificationResult(
            type=default_type,
            confidence=0.0,
            reasoning="Empty input",
            tags=[],
            priority="low",
        )

    lowered = content.lower()
    tags = extract_tags(content)
    priority = determine_priority(content)

    for rule in rules:
        if rule.matches(lowered):
            logger.debug(f"Rule '{rule.name}' matched ({profile} profile)")
            return ClassificationResult(
                type=rule.type,
                confidence=rule.confidence,
                reasoning=rule.reasoning,
                tags=tags,
                priority=priority,
            )

    return ClassificationResult(
        type=default_type,
        confidence=DEFAULT_CONFIDENCE,
        reasoning="General observation or note",
        tags=tags,
        priority=priority,
    )
