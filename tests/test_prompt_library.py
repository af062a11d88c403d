# /tests/test_prompt_library.py

import pytest

from app.models.ai_model import GenerationType
from app.services import prompt_library

ALL_TYPES = ["section", "full", "outline", "title", "tags", "meta"]


@pytest.mark.parametrize("generation_type", ALL_TYPES)
def test_prompt_pair_contains_topic_for_every_type(generation_type):
    topic = "Sourdough Baking at Altitude"
    prompt = prompt_library.get_professional_prompt(topic, generation_type)

    assert set(prompt.keys()) == {"system", "user"}
    assert prompt["system"].strip()
    assert prompt["user"].strip()
    assert topic in prompt["user"]


def test_unknown_type_falls_back_to_section_template():
    topic = "Remote Work"
    assert prompt_library.get_professional_prompt(topic, "bogus") == \
        prompt_library.get_professional_prompt(topic, "section")


def test_enum_and_string_types_build_the_same_prompt():
    assert prompt_library.get_professional_prompt("X", GenerationType.OUTLINE) == \
        prompt_library.get_professional_prompt("X", "outline")


def test_topic_with_braces_is_inserted_verbatim():
    topic = "Using {placeholders} in Python f-strings"
    prompt = prompt_library.get_professional_prompt(topic, "title")
    assert topic in prompt["user"]


def test_each_type_has_a_distinct_system_message():
    systems = {prompt_library.get_professional_prompt("t", t)["system"] for t in ALL_TYPES}
    assert len(systems) == len(ALL_TYPES)


@pytest.mark.parametrize(
    "generation_type, expected",
    [("section", 500), ("full", 2000), ("outline", 1500), ("title", 300), ("tags", 200), ("meta", 150)],
)
def test_token_budget_table(generation_type, expected):
    assert prompt_library.get_token_budget(generation_type) == expected


def test_build_messages_orders_system_before_user():
    messages = prompt_library.build_messages("Composting", "tags")
    assert [m["role"] for m in messages] == ["system", "user"]
    assert "Composting" in messages[1]["content"]
