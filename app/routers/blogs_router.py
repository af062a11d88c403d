# /app/routers/blogs_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_user
from ..core.errors import ForbiddenError, NotFoundError, to_http_exception
from ..db.models.user_model import User
from ..models import analytics_model, blog_model
from ..services import analytics_service, blog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- BLOG COLLECTION ENDPOINTS (/api/blogs) ---

@router.post("", response_model=blog_model.Blog, status_code=status.HTTP_201_CREATED, summary="Create a Blog")
def create_blog(
    blog_create: blog_model.BlogCreate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return blog_service.create_blog(db=db, user_id=current_user.id, blog_data=blog_create)
    except ValueError as e:
        raise to_http_exception(e)

# --- INDIVIDUAL BLOG RESOURCE ENDPOINTS (/api/blogs/{blog_id}) ---

@router.get("/{blog_id}", response_model=blog_model.Blog, summary="Get a Blog")
def get_blog(blog_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return blog_service.get_blog(db=db, blog_id=blog_id)
    except NotFoundError as e:
        raise to_http_exception(e)


@router.patch("/{blog_id}", response_model=blog_model.Blog, summary="Update a Blog")
def update_blog(
    blog_id: str,
    blog_update: blog_model.BlogUpdate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return blog_service.update_blog(db=db, blog_id=blog_id, user_id=current_user.id, blog_update=blog_update)
    except (NotFoundError, ForbiddenError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{blog_id}", response_model=blog_model.DeleteResponse, summary="Delete a Blog")
def delete_blog(
    blog_id: str,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        was_deleted = blog_service.delete_blog(db=db, blog_id=blog_id, user_id=current_user.id)
    except (NotFoundError, ForbiddenError) as e:
        raise to_http_exception(e)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found")
    return blog_model.DeleteResponse(success=True)

# --- ARTICLE & STATS SUB-RESOURCE ENDPOINTS ---

@router.get("/{blog_id}/articles", response_model=List[blog_model.Article], summary="List Published Articles")
def list_published_articles(blog_id: str, db: DatabaseService = Depends(get_db_service)):
    return blog_service.list_published_articles(db=db, blog_id=blog_id)


@router.get("/{blog_id}/articles/admin", response_model=List[blog_model.Article], summary="List All Articles (Owner)")
def list_all_articles(
    blog_id: str,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return blog_service.list_all_articles_for_owner(db=db, blog_id=blog_id, user_id=current_user.id)
    except (NotFoundError, ForbiddenError) as e:
        raise to_http_exception(e)


@router.get("/{blog_id}/stats", response_model=analytics_model.BlogStats, summary="Get Blog Stats (Owner)")
def get_blog_stats(
    blog_id: str,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return analytics_service.get_blog_stats(db=db, blog_id=blog_id, user_id=current_user.id)
    except (NotFoundError, ForbiddenError) as e:
        raise to_http_exception(e)
