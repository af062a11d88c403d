# /app/db/models/blog_models.py

"""
SQLAlchemy models for the publishing side of the product: a Blog owned by a
user, and the Articles written inside it.
"""

import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship

from ..base_class import Base, utcnow


class Blog(Base):
    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String, nullable=True)  # hero/cover image
    slug = Column(String, unique=True, index=True, nullable=False)
    domain = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")  # active, draft
    theme = Column(String, nullable=True, default="default")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    owner = relationship("User", back_populates="blogs")
    # Deleting a blog removes its articles (and, through them, their events).
    articles = relationship("Article", back_populates="blog", cascade="all, delete-orphan")


class Article(Base):
    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    blog_id = Column(String, ForeignKey("blogs.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    cover_image = Column(String, nullable=True)
    slug = Column(String, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    status = Column(String, nullable=False, default="draft")  # draft, published
    published_at = Column(DateTime(timezone=True), nullable=True)
    author_bio = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    blog = relationship("Blog", back_populates="articles")
    events = relationship("AnalyticsEvent", back_populates="article", cascade="all, delete-orphan")
