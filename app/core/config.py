# /app/core/config.py

"""
Central place for every environment-driven setting the backend reads.

Values are loaded once from the process environment (and an optional `.env`
file) at import time. The OpenRouter API key is the one exception: it is read
on every call through `get_openrouter_api_key()` so that live and demo mode can
be toggled without restarting the process.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# --- Application ---
APP_TITLE = "BlogVerse API"
APP_VERSION = "1.0.0"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS: List[str] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./blogverse.db")

# --- Authentication ---
JWT_SECRET = os.getenv("JWT_SECRET", "your-secret-key-change-in-production")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# --- AI Provider (OpenRouter) ---
OPENROUTER_API_URL = os.getenv("OPENROUTER_API_URL", "https://openrouter.io/api/v1/chat/completions")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "openai/gpt-4o-mini")
OPENROUTER_TIMEOUT_SECONDS = float(os.getenv("OPENROUTER_TIMEOUT_SECONDS", "60"))
OPENROUTER_TEMPERATURE = 0.7
OPENROUTER_APP_TITLE = "BlogVerse"


def get_openrouter_api_key() -> Optional[str]:
    """Returns the configured OpenRouter key, or None when demo mode is active."""
    key = os.getenv("OPENROUTER_API_KEY")
    return key.strip() if key and key.strip() else None
