from typing import Iterable, List

from genie_notes.models import Entry


def generate_suggestions(entries: Iterable[Entry]) -> List[str]:
    """Advisory follow-ups for a captured batch, in entry order."""
    suggestions: List[str] = []

    for entry in entries:
        if entry.type == "event" and entry.start_date:
            suggestions.append(f"Set reminder for {entry.content} 15 minutes before.")

        if entry.type == "task" and entry.priority == "high":
            suggestions.append(f"Block time in calendar for {entry.content}.")

        if "goal" in entry.tags:
            suggestions.append(f"Break down {entry.content} into smaller tasks.")

    return suggestions
