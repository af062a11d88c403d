# /app/models/blog_model.py

# --- Core Imports ---
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from ..utils.reading_time import calculate_reading_time, format_reading_time

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# Responses go out in camelCase (userId, createdAt, ...); ORM rows are read by attribute name.
CAMEL_RESPONSE_CONFIG = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


def _reject_null(value, field_name: str):
    # Omitting a field leaves it untouched; an explicit null would clear a NOT NULL column.
    if value is None:
        raise ValueError(f"{field_name} cannot be null.")
    return value


# --- Enumerations ---
class BlogStatus(str, Enum):
    ACTIVE = "active"
    DRAFT = "draft"


class ArticleStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


# --- Blog Models ---
class BlogCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    image: Optional[str] = None
    domain: Optional[str] = None
    status: BlogStatus = BlogStatus.ACTIVE
    theme: Optional[str] = "default"


class BlogUpdate(BaseModel):
    """All fields optional; only the ones sent are changed."""
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    image: Optional[str] = None
    domain: Optional[str] = None
    status: Optional[BlogStatus] = None
    theme: Optional[str] = None

    @field_validator("title", "slug", "status")
    @classmethod
    def required_fields_not_null(cls, v, info):
        return _reject_null(v, info.field_name)


class Blog(BaseModel):
    model_config = CAMEL_RESPONSE_CONFIG

    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    slug: str
    domain: Optional[str] = None
    status: BlogStatus
    theme: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# --- Article Models ---
class ArticleCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    blog_id: str = Field(..., validation_alias=AliasChoices("blog_id", "blogId"))
    title: str = Field(..., min_length=1)
    content: str
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, validation_alias=AliasChoices("cover_image", "coverImage"))
    tags: List[str] = Field(default_factory=list)
    status: ArticleStatus = ArticleStatus.DRAFT
    author_bio: Optional[str] = Field(default=None, validation_alias=AliasChoices("author_bio", "authorBio"))


class ArticleUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, validation_alias=AliasChoices("cover_image", "coverImage"))
    tags: Optional[List[str]] = None
    status: Optional[ArticleStatus] = None
    author_bio: Optional[str] = Field(default=None, validation_alias=AliasChoices("author_bio", "authorBio"))

    @field_validator("title", "content", "slug", "tags", "status")
    @classmethod
    def required_fields_not_null(cls, v, info):
        return _reject_null(v, info.field_name)


class Article(BaseModel):
    model_config = CAMEL_RESPONSE_CONFIG

    id: str
    blog_id: str
    title: str
    content: str
    excerpt: Optional[str] = None
    cover_image: Optional[str] = None
    slug: str
    tags: List[str] = Field(default_factory=list)
    status: ArticleStatus
    published_at: Optional[datetime] = None
    author_bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="readingTime")
    @property
    def reading_time(self) -> int:
        return calculate_reading_time(self.content)

    @computed_field(alias="readingTimeLabel")
    @property
    def reading_time_label(self) -> str:
        return format_reading_time(self.reading_time)


class DeleteResponse(BaseModel):
    success: bool = True
