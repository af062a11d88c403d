# /app/services/database_helpers/blog_repository_sql.py

"""
Raw SQLAlchemy queries for the Blog and Article tables.

Ownership checks are NOT made here; the blog service decides who may touch
what. This layer only reads and writes rows.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.db.base_class import utcnow
from app.db.models.blog_models import Article, Blog


class BlogRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Blog Methods ---
    def get_blog_by_id(self, blog_id: str) -> Optional[Blog]:
        return self.db.query(Blog).filter(Blog.id == blog_id).first()

    def get_blog_by_slug(self, slug: str) -> Optional[Blog]:
        return self.db.query(Blog).filter(Blog.slug == slug).first()

    def get_blogs_by_user_id(self, user_id: str) -> List[Blog]:
        return self.db.query(Blog).filter(Blog.user_id == user_id).order_by(Blog.created_at.asc()).all()

    def add_blog(self, record: Dict) -> Blog:
        new_blog = Blog(**record)
        self.db.add(new_blog)
        self.db.commit()
        self.db.refresh(new_blog)
        return new_blog

    def update_blog(self, blog_id: str, data: Dict) -> Optional[Blog]:
        blog = self.get_blog_by_id(blog_id)
        if not blog:
            return None
        for key, value in data.items():
            setattr(blog, key, value)
        blog.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(blog)
        return blog

    def delete_blog(self, blog_id: str) -> bool:
        blog = self.get_blog_by_id(blog_id)
        if blog:
            self.db.delete(blog)
            self.db.commit()
            return True
        return False

    # --- Article Methods ---
    def get_article_by_id(self, article_id: str) -> Optional[Article]:
        return self.db.query(Article).filter(Article.id == article_id).first()

    def get_articles_by_blog_id(self, blog_id: str, published_only: bool = False) -> List[Article]:
        query = self.db.query(Article).filter(Article.blog_id == blog_id)
        if published_only:
            query = query.filter(Article.status == "published")
        return query.order_by(Article.created_at.desc()).all()

    def get_articles_by_blog_ids(self, blog_ids: List[str]) -> List[Article]:
        if not blog_ids:
            return []
        return (
            self.db.query(Article)
            .filter(Article.blog_id.in_(blog_ids))
            .order_by(Article.created_at.desc())
            .all()
        )

    def add_article(self, record: Dict) -> Article:
        new_article = Article(**record)
        self.db.add(new_article)
        self.db.commit()
        self.db.refresh(new_article)
        return new_article

    def update_article(self, article_id: str, data: Dict) -> Optional[Article]:
        article = self.get_article_by_id(article_id)
        if not article:
            return None
        for key, value in data.items():
            setattr(article, key, value)
        article.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(article)
        return article

    def delete_article(self, article_id: str) -> bool:
        article = self.get_article_by_id(article_id)
        if article:
            self.db.delete(article)
            self.db.commit()
            return True
        return False
