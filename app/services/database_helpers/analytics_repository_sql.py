# /app/services/database_helpers/analytics_repository_sql.py

from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.models.analytics_models import AnalyticsEvent


class AnalyticsRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_event(self, record: Dict) -> AnalyticsEvent:
        new_event = AnalyticsEvent(**record)
        self.db.add(new_event)
        self.db.commit()
        self.db.refresh(new_event)
        return new_event

    def count_events(self, article_ids: List[str]) -> int:
        if not article_ids:
            return 0
        return (
            self.db.query(func.count(AnalyticsEvent.id))
            .filter(AnalyticsEvent.article_id.in_(article_ids))
            .scalar()
            or 0
        )

    def count_distinct_sessions(self, article_ids: List[str]) -> int:
        if not article_ids:
            return 0
        return (
            self.db.query(func.count(func.distinct(AnalyticsEvent.session_id)))
            .filter(AnalyticsEvent.article_id.in_(article_ids), AnalyticsEvent.session_id.isnot(None))
            .scalar()
            or 0
        )

    def get_events_for_articles(self, article_ids: List[str], since: Optional[datetime] = None) -> List[AnalyticsEvent]:
        if not article_ids:
            return []
        query = self.db.query(AnalyticsEvent).filter(AnalyticsEvent.article_id.in_(article_ids))
        if since is not None:
            query = query.filter(AnalyticsEvent.created_at >= since)
        return query.order_by(AnalyticsEvent.created_at.asc()).all()
