# /app/services/chat_service.py

from typing import List

from ..db.models.chat_models import ChatMessage
from ..models import chat_model
from .database_service import DatabaseService

DEFAULT_HISTORY_LIMIT = 30
MAX_HISTORY_LIMIT = 200


def save_message(db: DatabaseService, user_id: str, payload: chat_model.ChatMessageCreate) -> ChatMessage:
    """Appends one turn to the user's assistant conversation."""
    if not payload.message.strip():
        raise ValueError("Message must not be empty.")
    record = {
        "user_id": user_id,
        "role": payload.role.value,
        "message": payload.message,
        "generation_type": payload.generationType,
        "topic": payload.topic,
    }
    return db.add_chat_message(record)


def get_history(db: DatabaseService, user_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> List[ChatMessage]:
    """The user's latest `limit` messages, oldest first, so the client can render them top-down."""
    limit = max(1, min(limit, MAX_HISTORY_LIMIT))
    return db.get_recent_chat_messages(user_id, limit)
