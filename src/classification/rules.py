from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple


@dataclass(frozen=True)
class Rule:
    """One stage of a classification cascade.

    ``patterns`` are matched against lower-cased content; any hit fires the rule.
    """

    name: str
    type: str
    confidence: float
    reasoning: str
    patterns: Tuple[Pattern[str], ...]

    def matches(self, lowered: str) -> bool:
        return any(p.search(lowered) for p in self.patterns)


def _words(*phrases: str) -> Pattern[str]:
    return re.compile("(?:" + "|".join(re.escape(p) for p in phrases) + ")")


def _leading(*phrases: str) -> Pattern[str]:
    return re.compile("^(?:" + "|".join(re.escape(p) for p in phrases) + ")")


# Full-classification profile ------------------------------------------------

FULL_TASK = Rule(
    name="task",
    type="task",
    confidence=0.9,
    reasoning="Contains action verbs and task indicators",
    patterns=(
        _leading(
            "todo", "task", "do", "fix", "complete", "finish", "implement", "add",
            "create", "update", "delete", "remove", "build", "setup", "install",
            "configure", "test", "debug", "review", "check", "verify", "schedule",
            "book", "call", "email", "send", "buy", "order", "pay", "submit",
            "apply", "sign", "register", "cancel", "remind", "follow up",
        ),
        _words("need to", "should", "must", "have to", "got to", "gotta",
               "don't forget", "remember to"),
        _words("deadline", "due", "urgent", "asap", "priority"),
    ),
)

FULL_EVENT = Rule(
    name="event",
    type="event",
    confidence=0.85,
    reasoning="Contains time/date references and meeting indicators",
    patterns=(
        _words("meet", "meeting", "appointment", "call", "lunch", "dinner", "coffee",
               "drinks", "party", "event", "conference", "workshop", "session"),
        _words("tomorrow", "today", "next week", "this week", "morning",
               "afternoon", "evening", "night"),
        re.compile(r"at \d{1,2}(?::\d{2})?\s*(?:am|pm)?"),
        re.compile(r"on \w+"),
        _words("with", "@"),
    ),
)

FULL_IDEA = Rule(
    name="idea",
    type="idea",
    confidence=0.8,
    reasoning="Contains creative or conceptual language",
    patterns=(
        _leading(
            "idea", "what if", "maybe", "could", "might", "potentially", "brainstorm",
            "concept", "innovation", "solution", "approach", "strategy", "feature",
            "improvement",
        ),
        _words("\U0001f4a1", "idea:", "maybe we could", "what about", "consider",
               "think about"),
    ),
)

FULL_INSIGHT = Rule(
    name="insight",
    type="insight",
    confidence=0.75,
    reasoning="Contains observational or analytical language",
    patterns=(
        _words("noticed", "observed", "realized", "discovered", "learned", "found",
               "figured out", "understood"),
        _words("pattern", "trend", "insight", "observation", "discovery", "learning"),
    ),
)

FULL_REFLECTION = Rule(
    name="reflection",
    type="reflection",
    confidence=0.8,
    reasoning="Contains personal or introspective language",
    patterns=(
        _words("feeling", "felt", "thinking about", "reflecting on", "grateful for",
               "struggling with", "working on"),
        _words("happy", "sad", "excited", "frustrated", "anxious", "stressed", "proud",
               "disappointed", "grateful", "worried", "confused", "tired", "energized"),
        _leading("i feel", "i am", "today i"),
    ),
)

FULL_JOURNAL = Rule(
    name="journal",
    type="journal",
    confidence=0.85,
    reasoning="Contains daily activity or personal narrative",
    patterns=(
        _words("today", "yesterday", "this morning", "this week", "lately", "currently",
               "morning routine", "evening routine"),
        _words("woke up", "went to", "had", "ate", "drank", "exercised", "worked",
               "studied", "read", "watched", "listened to"),
    ),
)

FULL_RULES: Tuple[Rule, ...] = (
    FULL_TASK,
    FULL_EVENT,
    FULL_IDEA,
    FULL_INSIGHT,
    FULL_REFLECTION,
    FULL_JOURNAL,
)


# Brain-dump profile -----------------------------------------------------------

DUMP_TASK = Rule(
    name="task",
    type="task",
    confidence=0.8,
    reasoning="Contains obligation phrasing or starts with an action verb",
    patterns=(
        _words(
            "need to", "must", "should", "don't forget", "remember to", "have to",
            "got to", "buy", "call", "email", "schedule", "book", "pay", "submit",
            "finish", "complete", "review", "pick up", "drop off", "sign up", "cancel",
            "order", "make appointment", "follow up", "check on", "respond to",
        ),
        _leading(
            "call", "email", "buy", "pay", "book", "schedule", "finish", "complete",
            "review", "submit", "send", "update", "create", "delete", "install", "setup",
            "configure", "test", "fix", "debug", "deploy", "pick", "drop", "sign",
            "cancel", "order", "make", "follow", "check", "respond",
        ),
        _leading("i need to", "i should", "i have to", "i must", "todo:"),
    ),
)

DUMP_IDEA = Rule(
    name="idea",
    type="idea",
    confidence=0.85,
    reasoning="Contains ideation phrasing",
    patterns=(
        _words(
            "idea:", "would be cool if", "what if", "maybe we could", "idea for",
            "thinking about", "concept:", "feature idea", "product idea",
            "business idea", "app idea", "website idea", "innovation", "brainstorm",
            "creative idea",
        ),
    ),
)

DUMP_JOURNAL = Rule(
    name="journal",
    type="journal",
    confidence=0.75,
    reasoning="Contains emotional language or a personal tone",
    patterns=(
        _words(
            "feel", "overwhelmed", "excited", "worried", "anxious", "happy", "sad",
            "frustrated", "stressed", "tired", "energized", "can't", "struggling",
            "amazing", "terrible", "love", "hate", "emotional", "mood", "today i",
            "yesterday i", "grateful", "annoyed", "confused", "disappointed", "proud",
            "embarrassed", "nervous", "confident", "insecure", "motivated",
        ),
        _leading("i feel", "i am", "i was", "today i", "yesterday i", "i'm", "i can't",
                 "i don't", "i think i"),
    ),
)

BRAIN_DUMP_RULES: Tuple[Rule, ...] = (DUMP_TASK, DUMP_IDEA, DUMP_JOURNAL)


# (rules, default type) per profile
PROFILES: Dict[str, Tuple[Tuple[Rule, ...], str]] = {
    "full": (FULL_RULES, "insight"),
    "brain_dump": (BRAIN_DUMP_RULES, "thought"),
}

DEFAULT_CONFIDENCE = 0.6
