# /tests/test_demo_content.py

import pytest

from app.services.demo_content import generate_demo_content


@pytest.mark.parametrize("generation_type", ["section", "full", "outline", "title", "meta"])
def test_demo_text_mentions_topic(generation_type):
    text = generate_demo_content("Urban Gardening", generation_type)
    assert text.strip()
    assert "Urban Gardening" in text


def test_tags_are_a_comma_separated_line():
    text = generate_demo_content("Urban Gardening", "tags")
    assert "\n" not in text
    tags = [t.strip() for t in text.split(",")]
    assert tags[0] == "urban gardening"
    assert len(tags) >= 8


def test_demo_content_is_deterministic():
    assert generate_demo_content("Chess Openings", "full") == generate_demo_content("Chess Openings", "full")


def test_unknown_type_uses_section_template():
    assert generate_demo_content("Chess", "nonsense") == generate_demo_content("Chess", "section")


def test_title_demo_has_five_numbered_lines():
    lines = generate_demo_content("Chess", "title").splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("1. ")
