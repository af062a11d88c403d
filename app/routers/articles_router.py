# /app/routers/articles_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_current_user
from ..core.errors import ForbiddenError, NotFoundError, to_http_exception
from ..db.models.user_model import User
from ..models import analytics_model, blog_model
from ..services import analytics_service, blog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=blog_model.Article, status_code=status.HTTP_201_CREATED, summary="Create an Article")
def create_article(
    article_create: blog_model.ArticleCreate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return blog_service.create_article(db=db, user_id=current_user.id, article_data=article_create)
    except (NotFoundError, ForbiddenError) as e:
        raise to_http_exception(e)


@router.get("/{article_id}", response_model=blog_model.Article, summary="Get an Article")
def get_article(article_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return blog_service.get_article(db=db, article_id=article_id)
    except NotFoundError as e:
        raise to_http_exception(e)


@router.patch("/{article_id}", response_model=blog_model.Article, summary="Update an Article")
def update_article(
    article_id: str,
    article_update: blog_model.ArticleUpdate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return blog_service.update_article(
            db=db, article_id=article_id, user_id=current_user.id, article_update=article_update
        )
    except (NotFoundError, ForbiddenError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{article_id}", response_model=blog_model.DeleteResponse, summary="Delete an Article")
def delete_article(
    article_id: str,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        was_deleted = blog_service.delete_article(db=db, article_id=article_id, user_id=current_user.id)
    except (NotFoundError, ForbiddenError) as e:
        raise to_http_exception(e)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return blog_model.DeleteResponse(success=True)


@router.get("/{article_id}/stats", response_model=analytics_model.ArticleStats, summary="Get Article Stats")
def get_article_stats(article_id: str, db: DatabaseService = Depends(get_db_service)):
    return analytics_service.get_article_stats(db=db, article_id=article_id)
