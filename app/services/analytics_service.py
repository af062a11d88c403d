# /app/services/analytics_service.py

"""
Reading and writing page analytics.

Event ingestion is public (published pages post to it without a token).
Everything that aggregates events is scoped to what the caller owns.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from ..core.errors import NotFoundError
from ..db.models.analytics_models import AnalyticsEvent
from ..models.blog_model import Article
from ..models.analytics_model import (
    AnalyticsEventCreate,
    ArticleStats,
    BlogStats,
    ChartPoint,
    DashboardStats,
    DetailedAnalytics,
    TopArticle,
)
from . import blog_service
from .database_service import DatabaseService

# When no event carries a session id, visitors are estimated from views.
ARTICLE_VISITOR_RATIO = 0.8
CHART_VISITOR_RATIO = 0.75
RECENT_ARTICLES_COUNT = 5
TOP_ARTICLES_COUNT = 10
DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def record_event(db: DatabaseService, event: AnalyticsEventCreate) -> AnalyticsEvent:
    if not db.get_article_by_id(event.article_id):
        raise NotFoundError("Article not found")
    return db.add_analytics_event(event.model_dump())


def _estimate_visitors(views: int, distinct_sessions: int, ratio: float) -> int:
    if distinct_sessions:
        return distinct_sessions
    return math.ceil(views * ratio)


def get_article_stats(db: DatabaseService, article_id: str) -> ArticleStats:
    views = db.count_events([article_id])
    sessions = db.count_distinct_sessions([article_id])
    return ArticleStats(views=views, uniqueVisitors=_estimate_visitors(views, sessions, ARTICLE_VISITOR_RATIO))


def get_blog_stats(db: DatabaseService, blog_id: str, user_id: str) -> BlogStats:
    # Reuses the article listing so the ownership check lives in one place.
    articles = blog_service.list_all_articles_for_owner(db, blog_id, user_id)
    return BlogStats(
        totalViews=db.count_events([a.id for a in articles]),
        totalArticles=len(articles),
    )


def _user_articles(db: DatabaseService, user_id: str):
    blogs = db.get_blogs_by_user_id(user_id)
    return blogs, db.get_articles_by_blog_ids([b.id for b in blogs])


def get_dashboard_stats(db: DatabaseService, user_id: str) -> DashboardStats:
    blogs, articles = _user_articles(db, user_id)
    return DashboardStats(
        totalBlogs=len(blogs),
        totalArticles=len(articles),
        totalViews=db.count_events([a.id for a in articles]),
        # Repository returns newest first.
        recentArticles=[Article.model_validate(a) for a in articles[:RECENT_ARTICLES_COUNT]],
    )


def get_detailed_analytics(db: DatabaseService, user_id: str) -> DetailedAnalytics:
    _, articles = _user_articles(db, user_id)
    article_ids = [a.id for a in articles]
    total_views = db.count_events(article_ids)

    ranked = []
    for article in articles:
        stats = get_article_stats(db, article.id)
        ranked.append(TopArticle(
            id=article.id,
            title=article.title,
            views=stats.views,
            uniqueVisitors=stats.uniqueVisitors,
            status=article.status,
            createdAt=article.created_at,
        ))
    # Stable sort: equal view counts keep newest-first order.
    ranked.sort(key=lambda item: item.views, reverse=True)

    return DetailedAnalytics(
        totalViews=total_views,
        totalVisitors=_estimate_visitors(total_views, db.count_distinct_sessions(article_ids), CHART_VISITOR_RATIO),
        topArticles=ranked[:TOP_ARTICLES_COUNT],
    )


def get_chart_data(db: DatabaseService, user_id: str, days: int = 7, now: Optional[datetime] = None) -> List[ChartPoint]:
    """
    Daily views and visitors for the last `days` days (today included),
    oldest first. Days without traffic are present with zero counts.
    """
    today = (now or datetime.now(timezone.utc)).date()
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    buckets: Dict = {day: {"views": 0, "sessions": set()} for day in window}

    _, articles = _user_articles(db, user_id)
    if articles:
        since = datetime.combine(window[0], datetime.min.time(), tzinfo=timezone.utc)
        for event in db.get_events_for_articles([a.id for a in articles], since=since):
            bucket = buckets.get(event.created_at.date())
            if bucket is None:
                continue
            bucket["views"] += 1
            if event.session_id:
                bucket["sessions"].add(event.session_id)

    return [
        ChartPoint(
            name=DAY_NAMES[day.weekday()],
            date=day,
            views=buckets[day]["views"],
            visitors=_estimate_visitors(buckets[day]["views"], len(buckets[day]["sessions"]), CHART_VISITOR_RATIO),
        )
        for day in window
    ]
