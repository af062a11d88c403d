# /app/db/models/user_model.py

import uuid

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship

from ..base_class import Base, utcnow


class User(Base):
    """An account holder. Owns blogs and a private AI chat history."""
    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never the plain text
    display_name = Column(String, nullable=False)
    bio = Column(Text, nullable=True)
    avatar = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    blogs = relationship("Blog", back_populates="owner", cascade="all, delete-orphan")
    chat_messages = relationship("ChatMessage", back_populates="user", cascade="all, delete-orphan")
