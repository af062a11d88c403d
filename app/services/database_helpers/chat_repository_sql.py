# /app/services/database_helpers/chat_repository_sql.py

from typing import Dict, List

from sqlalchemy.orm import Session

from app.db.models.chat_models import ChatMessage


class ChatRepositorySQL:
    """Append-only access to the chat_messages table: insert and read, nothing else."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def add_message(self, record: Dict) -> ChatMessage:
        new_message = ChatMessage(**record)
        self.db.add(new_message)
        self.db.commit()
        self.db.refresh(new_message)
        return new_message

    def get_recent_messages_by_user_id(self, user_id: str, limit: int) -> List[ChatMessage]:
        """The user's newest `limit` messages, returned oldest first."""
        newest_first = (
            self.db.query(ChatMessage)
            .filter(ChatMessage.user_id == user_id)
            .order_by(ChatMessage.created_at.desc())
            .limit(limit)
            .all()
        )
        return list(reversed(newest_first))
