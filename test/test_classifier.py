import pytest

from classification.entry_classifier import classify, determine_priority
from classification.rules import BRAIN_DUMP_RULES, FULL_EVENT, FULL_RULES, FULL_TASK


def test_task_rule_fires_before_event_rule():
    result = classify("Call the dentist tomorrow at 3pm #health")
    assert result.type == "task"
    assert result.confidence == 0.9
    assert "health" in result.tags


def test_event():
    result = classify("Meeting with Sarah at WeWork tomorrow 10am")
    assert result.type == "event"
    assert result.confidence == 0.85


def test_idea_confidence_per_profile():
    text = "Idea: what if we built a plant-watering app"
    assert classify(text, profile="brain_dump").type == "idea"
    assert classify(text, profile="brain_dump").confidence == 0.85
    assert classify(text).type == "idea"
    assert classify(text).confidence == 0.8


@pytest.mark.parametrize(
    "text,expected_type,expected_confidence",
    [
        ("Realized the build pattern repeats", "insight", 0.75),
        ("Feeling grateful for my family", "reflection", 0.8),
        ("Yesterday I ran five kilometers", "journal", 0.85),
        ("Blue whales are enormous", "insight", 0.6),
    ],
)
def test_full_profile_cascade(text, expected_type, expected_confidence):
    result = classify(text)
    assert result.type == expected_type
    assert result.confidence == expected_confidence


@pytest.mark.parametrize(
    "text,expected_type,expected_confidence",
    [
        ("I need to renew my passport", "task", 0.8),
        ("todo: renew passport", "task", 0.8),
        ("So overwhelmed by everything lately", "journal", 0.75),
        ("Blue whales are enormous", "thought", 0.6),
    ],
)
def test_brain_dump_profile(text, expected_type, expected_confidence):
    result = classify(text, profile="brain_dump")
    assert result.type == expected_type
    assert result.confidence == expected_confidence


def test_brain_dump_task_stage_runs_before_journal_stage():
    assert classify("I need to feel better", profile="brain_dump").type == "task"


def test_empty_input_has_zero_confidence():
    full = classify("")
    assert full.type == "insight"
    assert full.confidence == 0.0
    assert full.tags == []

    dump = classify("   ", profile="brain_dump")
    assert dump.type == "thought"
    assert dump.confidence == 0.0


def test_classification_is_idempotent():
    text = "Don't forget the objective review #q3 asap"
    first, second = classify(text), classify(text)
    assert first == second


def test_confidence_always_in_unit_interval():
    samples = [
        "", "x", "Buy milk", "Lunch with Ana", "what if", "noticed a trend",
        "feeling tired", "went to the gym", "#tag only", "12345", "\n\n",
    ]
    for text in samples:
        for profile in ("full", "brain_dump"):
            assert 0.0 <= classify(text, profile=profile).confidence <= 1.0


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Server down, urgent and important", "urgent"),
        ("Emergency plumber", "urgent"),
        ("Important: tax deadline", "high"),
        ("Report due Friday", "high"),
        ("Focus on writing", "medium"),
        ("Walk the dog", "low"),
    ],
)
def test_priority(text, expected):
    assert determine_priority(text) == expected
    assert classify(text).priority == expected


def test_rules_are_independently_testable():
    assert FULL_TASK.matches("buy milk")
    assert not FULL_TASK.matches("lunch at noon")
    assert FULL_EVENT.matches("lunch at noon")
    assert [r.type for r in FULL_RULES] == [
        "task", "event", "idea", "insight", "reflection", "journal",
    ]
    assert [r.type for r in BRAIN_DUMP_RULES] == ["task", "idea", "journal"]
