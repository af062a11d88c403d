# /app/services/blog_service.py

"""
Business logic for blogs and articles.

Every mutating operation resolves the target, then checks that the acting
user owns it (directly for a blog, through the parent blog for an article).
Missing targets raise NotFoundError, foreign ones ForbiddenError.
"""

import logging
from typing import List

from ..core.errors import ConflictError, ForbiddenError, NotFoundError
from ..db.base_class import utcnow
from ..db.models.blog_models import Article, Blog
from ..models import blog_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


# --- Ownership Helpers ---

def _get_owned_blog(db: DatabaseService, blog_id: str, user_id: str) -> Blog:
    blog = db.get_blog_by_id(blog_id)
    if not blog:
        raise NotFoundError("Blog not found")
    if blog.user_id != user_id:
        raise ForbiddenError("Unauthorized")
    return blog


def _get_owned_article(db: DatabaseService, article_id: str, user_id: str) -> Article:
    article = db.get_article_by_id(article_id)
    if not article:
        raise NotFoundError("Article not found")
    blog = db.get_blog_by_id(article.blog_id)
    if not blog or blog.user_id != user_id:
        raise ForbiddenError("Unauthorized")
    return article


# --- Blog Operations ---

def get_blog(db: DatabaseService, blog_id: str) -> Blog:
    blog = db.get_blog_by_id(blog_id)
    if not blog:
        raise NotFoundError("Blog not found")
    return blog


def list_user_blogs(db: DatabaseService, user_id: str) -> List[Blog]:
    return db.get_blogs_by_user_id(user_id)


def create_blog(db: DatabaseService, user_id: str, blog_data: blog_model.BlogCreate) -> Blog:
    if db.get_blog_by_slug(blog_data.slug):
        raise ConflictError("Slug already in use")
    record = blog_data.model_dump(mode="json")
    record["user_id"] = user_id
    return db.add_blog(record)


def update_blog(db: DatabaseService, blog_id: str, user_id: str, blog_update: blog_model.BlogUpdate) -> Blog:
    blog = _get_owned_blog(db, blog_id, user_id)
    update_data = blog_update.model_dump(exclude_unset=True, mode="json")
    if not update_data:
        raise ValueError("No update data provided.")
    new_slug = update_data.get("slug")
    if new_slug and new_slug != blog.slug and db.get_blog_by_slug(new_slug):
        raise ConflictError("Slug already in use")
    return db.update_blog(blog_id, update_data)


def delete_blog(db: DatabaseService, blog_id: str, user_id: str) -> bool:
    _get_owned_blog(db, blog_id, user_id)
    logger.info("Deleting blog %s for user %s", blog_id, user_id)
    return db.delete_blog(blog_id)


# --- Article Operations ---

def get_article(db: DatabaseService, article_id: str) -> Article:
    article = db.get_article_by_id(article_id)
    if not article:
        raise NotFoundError("Article not found")
    return article


def list_published_articles(db: DatabaseService, blog_id: str) -> List[Article]:
    return db.get_articles_by_blog_id(blog_id, published_only=True)


def list_all_articles_for_owner(db: DatabaseService, blog_id: str, user_id: str) -> List[Article]:
    _get_owned_blog(db, blog_id, user_id)
    return db.get_articles_by_blog_id(blog_id)


def create_article(db: DatabaseService, user_id: str, article_data: blog_model.ArticleCreate) -> Article:
    _get_owned_blog(db, article_data.blog_id, user_id)
    record = article_data.model_dump(mode="json")
    if article_data.status == blog_model.ArticleStatus.PUBLISHED:
        record["published_at"] = utcnow()
    return db.add_article(record)


def update_article(db: DatabaseService, article_id: str, user_id: str, article_update: blog_model.ArticleUpdate) -> Article:
    article = _get_owned_article(db, article_id, user_id)
    update_data = article_update.model_dump(exclude_unset=True, mode="json")
    if not update_data:
        raise ValueError("No update data provided.")
    # First publish stamps the date; later edits keep the original one.
    if update_data.get("status") == blog_model.ArticleStatus.PUBLISHED.value and article.published_at is None:
        update_data["published_at"] = utcnow()
    return db.update_article(article_id, update_data)


def delete_article(db: DatabaseService, article_id: str, user_id: str) -> bool:
    _get_owned_article(db, article_id, user_id)
    return db.delete_article(article_id)
