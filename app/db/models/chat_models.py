# /app/db/models/chat_models.py

import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..base_class import Base, utcnow


class ChatMessage(Base):
    """
    One turn of the AI assistant conversation. The log is append-only per
    user: there is no update or delete path, and reads order by created_at.
    """
    __tablename__ = "chat_messages"
    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String, nullable=False)  # 'user' or 'assistant'
    message = Column(Text, nullable=False)
    generation_type = Column(String, nullable=True)  # section, full, outline, title, tags, meta
    topic = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    user = relationship("User", back_populates="chat_messages")
