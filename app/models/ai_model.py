# /app/models/ai_model.py

# --- Core Imports ---
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# --- Enumerations ---
class GenerationType(str, Enum):
    """The six content shapes the AI assistant can produce."""
    SECTION = "section"
    FULL = "full"
    OUTLINE = "outline"
    TITLE = "title"
    TAGS = "tags"
    META = "meta"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["GenerationType"]:
        """Returns the matching member, or None for anything outside the closed set."""
        try:
            return cls(value)
        except ValueError:
            return None


class OutcomeSource(str, Enum):
    LIVE = "live"
    FALLBACK = "fallback"


class FallbackReason(str, Enum):
    MISSING_API_KEY = "missing_api_key"
    HTTP_ERROR = "http_error"
    EXCEPTION = "exception"


# --- Request / Response Contracts ---
class GenerateRequest(BaseModel):
    """
    Body of POST /api/ai/generate.

    Both fields are optional at the schema level on purpose: the service layer
    owns the "required" and "closed set" checks so it can answer with the
    exact error messages the client expects.
    """
    prompt: Optional[str] = Field(None, description="The topic or instruction for the assistant.")
    type: Optional[str] = Field(None, description="One of: section, full, outline, title, tags, meta.")


class GenerateResponse(BaseModel):
    text: str
    type: GenerationType
    timestamp: str = Field(..., description="ISO-8601 UTC time the response was produced.")
    demo: bool = Field(..., description="True when the text came from the offline fallback generator.")


# --- Internal Result Type ---
class GenerationOutcome(BaseModel):
    """What a single model invocation produced, and why, when it fell back."""
    text: str
    source: OutcomeSource
    fallback_reason: Optional[FallbackReason] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == OutcomeSource.FALLBACK
