# /app/models/analytics_model.py

import datetime as dt
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .blog_model import CAMEL_RESPONSE_CONFIG, Article, ArticleStatus


class AnalyticsEventCreate(BaseModel):
    """Public tracking payload posted by published blog pages."""
    model_config = ConfigDict(populate_by_name=True)

    article_id: str = Field(..., validation_alias=AliasChoices("article_id", "articleId"))
    event_type: str = Field(..., min_length=1, validation_alias=AliasChoices("event_type", "eventType"))
    referrer: Optional[str] = None
    user_agent: Optional[str] = Field(default=None, validation_alias=AliasChoices("user_agent", "userAgent"))
    ip_address: Optional[str] = Field(default=None, validation_alias=AliasChoices("ip_address", "ipAddress"))
    session_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("session_id", "sessionId"))


class AnalyticsEvent(BaseModel):
    model_config = CAMEL_RESPONSE_CONFIG

    id: str
    article_id: str
    event_type: str
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    session_id: Optional[str] = None
    created_at: dt.datetime


class ArticleStats(BaseModel):
    views: int
    uniqueVisitors: int


class BlogStats(BaseModel):
    totalViews: int
    totalArticles: int


class DashboardStats(BaseModel):
    totalBlogs: int
    totalArticles: int
    totalViews: int
    recentArticles: List[Article]


class ChartPoint(BaseModel):
    name: str = Field(..., description="Short weekday name, e.g. 'Mon'.")
    date: dt.date
    views: int
    visitors: int


class TopArticle(BaseModel):
    id: str
    title: str
    views: int
    uniqueVisitors: int
    status: ArticleStatus
    createdAt: dt.datetime


class DetailedAnalytics(BaseModel):
    """Account-wide totals plus the most viewed articles, best first."""
    totalViews: int
    totalVisitors: int
    topArticles: List[TopArticle]
