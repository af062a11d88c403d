# /app/utils/reading_time.py

import math
import re

WORDS_PER_MINUTE = 220
_TAG_RE = re.compile(r"<[^>]*>")


def calculate_reading_time(content: str) -> int:
    """Minutes needed to read `content` (HTML allowed); never less than 1."""
    plain_text = _TAG_RE.sub("", content or "").strip()
    words = len(plain_text.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def format_reading_time(minutes: int) -> str:
    if minutes == 1:
        return "1 minute read"
    return f"{minutes} min read"
