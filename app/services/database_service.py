# /app/services/database_service.py

from datetime import datetime
from typing import Dict, Generator, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.blog_repository_sql import BlogRepositorySQL
from .database_helpers.analytics_repository_sql import AnalyticsRepositorySQL
from .database_helpers.chat_repository_sql import ChatRepositorySQL


class DatabaseService:
    """
    Single facade over every repository. Services only ever talk to this
    class, never to a Session or a repository directly.
    """

    def __init__(self, db_session: Session):
        if db_session is None:
            raise ValueError("A database session is required.")
        self.user_repo = UserRepositorySQL(db_session)
        self.blog_repo = BlogRepositorySQL(db_session)
        self.analytics_repo = AnalyticsRepositorySQL(db_session)
        self.chat_repo = ChatRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def add_user(self, user_record: Dict): return self.user_repo.add_user(user_record)
    def update_user(self, user_id: str, user_update_data: Dict): return self.user_repo.update_user(user_id, user_update_data)

    # --- BLOG METHODS (DELEGATED) ---
    def get_blog_by_id(self, blog_id: str): return self.blog_repo.get_blog_by_id(blog_id)
    def get_blog_by_slug(self, slug: str): return self.blog_repo.get_blog_by_slug(slug)
    def get_blogs_by_user_id(self, user_id: str) -> List: return self.blog_repo.get_blogs_by_user_id(user_id)
    def add_blog(self, blog_record: Dict): return self.blog_repo.add_blog(blog_record)
    def update_blog(self, blog_id: str, blog_update_data: Dict): return self.blog_repo.update_blog(blog_id, blog_update_data)
    def delete_blog(self, blog_id: str) -> bool: return self.blog_repo.delete_blog(blog_id)

    # --- ARTICLE METHODS (DELEGATED) ---
    def get_article_by_id(self, article_id: str): return self.blog_repo.get_article_by_id(article_id)
    def get_articles_by_blog_id(self, blog_id: str, published_only: bool = False) -> List:
        return self.blog_repo.get_articles_by_blog_id(blog_id, published_only=published_only)
    def get_articles_by_blog_ids(self, blog_ids: List[str]) -> List: return self.blog_repo.get_articles_by_blog_ids(blog_ids)
    def add_article(self, article_record: Dict): return self.blog_repo.add_article(article_record)
    def update_article(self, article_id: str, article_update_data: Dict): return self.blog_repo.update_article(article_id, article_update_data)
    def delete_article(self, article_id: str) -> bool: return self.blog_repo.delete_article(article_id)

    # --- ANALYTICS METHODS (DELEGATED) ---
    def add_analytics_event(self, event_record: Dict): return self.analytics_repo.add_event(event_record)
    def count_events(self, article_ids: List[str]) -> int: return self.analytics_repo.count_events(article_ids)
    def count_distinct_sessions(self, article_ids: List[str]) -> int: return self.analytics_repo.count_distinct_sessions(article_ids)
    def get_events_for_articles(self, article_ids: List[str], since: Optional[datetime] = None) -> List:
        return self.analytics_repo.get_events_for_articles(article_ids, since=since)

    # --- CHAT HISTORY METHODS (DELEGATED) ---
    def add_chat_message(self, message_record: Dict): return self.chat_repo.add_message(message_record)
    def get_recent_chat_messages(self, user_id: str, limit: int) -> List:
        return self.chat_repo.get_recent_messages_by_user_id(user_id, limit)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
