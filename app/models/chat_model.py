# /app/models/chat_model.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessageCreate(BaseModel):
    """
    Request body for POST /api/chat/messages. Accepts the camelCase keys the
    web client sends as well as snake_case.
    """
    model_config = ConfigDict(populate_by_name=True)

    role: ChatRole
    message: str = Field(..., min_length=1)
    generationType: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("generationType", "generation_type")
    )
    topic: Optional[str] = None


class ChatMessage(BaseModel):
    """A persisted chat turn, as returned to the client."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    role: ChatRole
    message: str
    generationType: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("generationType", "generation_type")
    )
    topic: Optional[str] = None
    createdAt: datetime = Field(..., validation_alias=AliasChoices("createdAt", "created_at"))
