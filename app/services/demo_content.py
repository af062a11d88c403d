# /app/services/demo_content.py

"""
Offline stand-in for the language model.

When no live model call is possible (no API key, provider error, network
failure) the assistant still has to return something useful, so every
generation type has a hard-coded template with the topic interpolated. The
output depends only on (topic, type): no randomness, no clock.
"""

from typing import Dict

from ..models.ai_model import GenerationType

SECTION_TEMPLATE = """## Understanding {topic}

{topic} has become one of the most talked-about subjects for readers who want practical, up-to-date advice. Before diving into tactics, it helps to understand why it matters and where most people go wrong when they first approach it.

At its core, {topic} is about making deliberate choices. The people who get the best results start small, measure what works, and build on it week after week instead of chasing every new trend.

Keep this in mind as you read on: progress with {topic} is rarely about a single breakthrough. It comes from a handful of good habits applied consistently."""

FULL_TEMPLATE = """# The Complete Guide to {topic}

Whether you are just getting started or looking to sharpen your approach, this guide walks you through everything you need to know about {topic}.

## Why {topic} Matters

{topic} touches more of our daily work than most people realise. Getting it right saves time, reduces frustration and opens up opportunities that are easy to miss.

## Getting Started

- Define what success with {topic} looks like for you
- Gather the tools and resources you already have
- Set one small, measurable goal for the first week

## Core Principles

The fundamentals of {topic} are simple: stay consistent, learn from feedback and focus on the activities with the biggest impact.

## Common Mistakes to Avoid

- Trying to do everything at once
- Ignoring the data you already collect
- Copying others without adapting to your own context

## Advanced Strategies

Once the basics are in place, look for ways to automate repetitive steps, collaborate with others who share your interest in {topic}, and review your results every month.

## Conclusion

{topic} rewards patience and curiosity. Start with one idea from this guide today, and build from there."""

OUTLINE_TEMPLATE = """# Article Outline: {topic}

1. Introduction
   - Hook: a surprising fact about {topic}
   - Why readers should care
   - What this article covers

2. Background
   - A short history of {topic}
   - Key terms and definitions

3. The Current Landscape
   - Recent trends in {topic}
   - Who is doing it well

4. Practical Steps
   - Step 1: assess where you are
   - Step 2: set clear goals
   - Step 3: choose the right tools

5. Common Pitfalls
   - Mistakes beginners make
   - How to recover from them

6. Case Study
   - A real-world example of {topic} in action
   - Lessons learned

7. Conclusion
   - Summary of key points
   - Call to action"""

TITLE_TEMPLATE = """1. The Ultimate Guide to {topic}
2. 10 Things Nobody Tells You About {topic}
3. How to Master {topic} in 30 Days
4. Is {topic} Worth It? An Honest Look
5. {topic}: Simple Strategies That Actually Work"""

TAGS_TEMPLATE = """{tag}, guide, tips, how to, best practices, beginners, strategy, trends, tutorial, insights"""

META_TEMPLATE = """Discover everything you need to know about {topic}: practical tips, common mistakes to avoid and proven strategies. Start improving today."""

DEMO_TEMPLATES: Dict[GenerationType, str] = {
    GenerationType.SECTION: SECTION_TEMPLATE,
    GenerationType.FULL: FULL_TEMPLATE,
    GenerationType.OUTLINE: OUTLINE_TEMPLATE,
    GenerationType.TITLE: TITLE_TEMPLATE,
    GenerationType.TAGS: TAGS_TEMPLATE,
    GenerationType.META: META_TEMPLATE,
}


def generate_demo_content(topic: str, generation_type) -> str:
    """Returns the canned text for `generation_type` with `topic` filled in."""
    resolved = generation_type if isinstance(generation_type, GenerationType) else GenerationType.parse(generation_type)
    template = DEMO_TEMPLATES[resolved or GenerationType.SECTION]
    # `tag` is the lowercase form used in the comma-separated tag list.
    return template.format(topic=topic, tag=topic.strip().lower())
