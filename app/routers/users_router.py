# /app/routers/users_router.py

from typing import List

from fastapi import APIRouter, Depends

from ..core.deps import get_current_user
from ..core.errors import NotFoundError, to_http_exception
from ..db.models.user_model import User
from ..models import blog_model, user_model
from ..services import blog_service, user_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/profile", response_model=user_model.UserProfile, summary="Get My Profile")
def read_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/profile", response_model=user_model.UserProfile, summary="Update My Profile")
def update_profile(
    updates: user_model.UserProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return user_service.update_profile(db=db, user_id=current_user.id, updates=updates)
    except NotFoundError as e:
        raise to_http_exception(e)


@router.get("/blogs", response_model=List[blog_model.Blog], summary="List My Blogs")
def list_my_blogs(current_user: User = Depends(get_current_user), db: DatabaseService = Depends(get_db_service)):
    return blog_service.list_user_blogs(db=db, user_id=current_user.id)
