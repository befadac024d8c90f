from extraction.tag_extractor import extract_explicit_tags, extract_tags, strip_tags


def test_hashtags_keep_case_and_order():
    assert extract_tags("Call the dentist #health #Health") == ["health", "Health"]


def test_duplicate_hashtags_collapse():
    assert extract_explicit_tags("#work and more #work") == ["work"]


def test_inferred_tags():
    assert extract_tags("Urgent: fix the server asap") == ["priority"]
    assert extract_tags("My goal is to run a marathon") == ["goal"]
    assert extract_tags("#q4 objective, ASAP") == ["q4", "priority", "goal"]


def test_inferred_tag_not_duplicated_by_explicit_one():
    assert extract_tags("#priority this is urgent") == ["priority"]


def test_tags_never_carry_hash():
    for text in ["#a #b", "##double", "plain text", "#mixed_Case42 urgent"]:
        assert all(not t.startswith("#") for t in extract_tags(text))


def test_strip_tags():
    assert strip_tags("Call the dentist tomorrow at 3pm #health") == "Call the dentist tomorrow at 3pm"
    assert strip_tags("Plan #work trip") == "Plan trip"
    assert strip_tags("#only") == ""
