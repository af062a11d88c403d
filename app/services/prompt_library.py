# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for every prompt the AI
content assistant sends to the language model, together with the token
budget allotted to each generation type.

Each generation type maps to a fixed pair of messages: a `system` message that
sets the writer persona and output rules, and a `user` template that carries
the author's topic. Templates use `str.format` with a single `{topic}` field.
"""

from typing import Dict, List

from ..models.ai_model import GenerationType

# --- TOKEN BUDGETS ---
# Upper bound on completion tokens requested from the provider, per type.
TOKEN_BUDGETS: Dict[GenerationType, int] = {
    GenerationType.SECTION: 500,
    GenerationType.FULL: 2000,
    GenerationType.OUTLINE: 1500,
    GenerationType.TITLE: 300,
    GenerationType.TAGS: 200,
    GenerationType.META: 150,
}

DEFAULT_GENERATION_TYPE = GenerationType.SECTION


# --- SYSTEM MESSAGES ---

SECTION_SYSTEM_PROMPT = """
You are a professional blog writer and editor. You write clear, engaging,
well-structured prose for an online audience.

**--- RULES ---**
1.  Write a single, self-contained section of a blog article.
2.  Open with a short level-2 markdown heading (## ...) that names the section.
3.  Use 2 to 4 paragraphs. Keep sentences concrete and avoid filler.
4.  Do not write an introduction or conclusion for the whole article.
5.  Respond with the section only. No preamble, no commentary.
""".strip()

FULL_SYSTEM_PROMPT = """
You are an experienced content strategist and long-form blog writer. You
produce complete, publication-ready articles with a logical flow.

**--- RULES ---**
1.  Start with a level-1 markdown heading (# ...) containing the article title.
2.  Write a hook-driven introduction, 4 to 6 body sections with level-2
    headings, and a conclusion with a clear takeaway.
3.  Use bullet lists where they make the content easier to scan.
4.  Keep the tone friendly, authoritative and practical.
5.  Respond with the article only. No preamble, no commentary.
""".strip()

OUTLINE_SYSTEM_PROMPT = """
You are a senior editor who plans blog articles before they are written.

**--- RULES ---**
1.  Produce a hierarchical markdown outline for one article.
2.  Include a working title, an introduction entry, 5 to 7 main sections
    each with 2 to 4 bullet sub-points, and a conclusion entry.
3.  Sub-points are short phrases, not full paragraphs.
4.  Respond with the outline only. No preamble, no commentary.
""".strip()

TITLE_SYSTEM_PROMPT = """
You are a headline copywriter who specialises in blog titles that earn clicks
without resorting to clickbait.

**--- RULES ---**
1.  Propose exactly 5 alternative titles for the same article.
2.  Vary the style: how-to, list, question, bold statement, benefit-driven.
3.  Keep every title under 70 characters.
4.  Output a numbered list, one title per line, with no extra text.
""".strip()

TAGS_SYSTEM_PROMPT = """
You are an SEO specialist who categorises blog content.

**--- RULES ---**
1.  Suggest 8 to 12 relevant tags for the article topic.
2.  Tags are lowercase, 1 to 3 words each, with no leading '#'.
3.  Order them from most to least relevant.
4.  Output the tags as a single comma-separated line with no extra text.
""".strip()

META_SYSTEM_PROMPT = """
You are an SEO copywriter who writes search-result snippets.

**--- RULES ---**
1.  Write one meta description for the article topic.
2.  Stay between 140 and 160 characters.
3.  Include the main keyword naturally and end with a soft call to action.
4.  Output the description only, without quotes or extra text.
""".strip()


# --- USER MESSAGE TEMPLATES ---

SECTION_USER_PROMPT = 'Write a blog section about: "{topic}"'
FULL_USER_PROMPT = 'Write a complete blog article about: "{topic}"'
OUTLINE_USER_PROMPT = 'Create a detailed article outline for: "{topic}"'
TITLE_USER_PROMPT = 'Generate 5 blog post titles for an article about: "{topic}"'
TAGS_USER_PROMPT = 'Suggest tags for a blog article about: "{topic}"'
META_USER_PROMPT = 'Write an SEO meta description for a blog article about: "{topic}"'


# --- LOOKUP TABLE ---
PROFESSIONAL_PROMPTS: Dict[GenerationType, Dict[str, str]] = {
    GenerationType.SECTION: {"system": SECTION_SYSTEM_PROMPT, "user": SECTION_USER_PROMPT},
    GenerationType.FULL: {"system": FULL_SYSTEM_PROMPT, "user": FULL_USER_PROMPT},
    GenerationType.OUTLINE: {"system": OUTLINE_SYSTEM_PROMPT, "user": OUTLINE_USER_PROMPT},
    GenerationType.TITLE: {"system": TITLE_SYSTEM_PROMPT, "user": TITLE_USER_PROMPT},
    GenerationType.TAGS: {"system": TAGS_SYSTEM_PROMPT, "user": TAGS_USER_PROMPT},
    GenerationType.META: {"system": META_SYSTEM_PROMPT, "user": META_USER_PROMPT},
}


def _resolve_type(generation_type) -> GenerationType:
    """Accepts an enum member or its string value; anything else becomes `section`."""
    if isinstance(generation_type, GenerationType):
        return generation_type
    return GenerationType.parse(generation_type) or DEFAULT_GENERATION_TYPE


def get_professional_prompt(topic: str, generation_type) -> Dict[str, str]:
    """
    Builds the system/user message pair for a topic.

    Unknown generation types fall back to the `section` template. The topic is
    inserted verbatim into the user message.
    """
    template = PROFESSIONAL_PROMPTS[_resolve_type(generation_type)]
    return {
        "system": template["system"],
        "user": template["user"].format(topic=topic),
    }


def build_messages(topic: str, generation_type) -> List[Dict[str, str]]:
    """The chat-completion message list for a topic, ready to send."""
    prompt = get_professional_prompt(topic, generation_type)
    return [
        {"role": "system", "content": prompt["system"]},
        {"role": "user", "content": prompt["user"]},
    ]


def get_token_budget(generation_type) -> int:
    return TOKEN_BUDGETS[_resolve_type(generation_type)]
