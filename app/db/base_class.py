# /app/db/base_class.py

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base, declared_attr


def utcnow() -> datetime:
    """Column default for every timestamp; keeps microseconds so ordering is stable."""
    return datetime.now(timezone.utc)


class _Base:
    # Default table name is the lowercased class name plus an "s".
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


Base = declarative_base(cls=_Base)
