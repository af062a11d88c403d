# /app/routers/chat_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.deps import get_current_user
from ..db.models.user_model import User
from ..models import chat_model
from ..services import chat_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post(
    "/messages",
    response_model=chat_model.ChatMessage,
    status_code=status.HTTP_201_CREATED,
    summary="Save a Chat Message",
    description="Appends a user or assistant turn to the caller's AI assistant history.",
)
def save_chat_message(
    payload: chat_model.ChatMessageCreate,
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return chat_service.save_message(db=db, user_id=current_user.id, payload=payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/history",
    response_model=List[chat_model.ChatMessage],
    summary="Get Chat History",
    description="Returns the caller's most recent messages, oldest first.",
)
def get_chat_history(
    limit: int = Query(chat_service.DEFAULT_HISTORY_LIMIT, ge=1, le=chat_service.MAX_HISTORY_LIMIT),
    current_user: User = Depends(get_current_user),
    db: DatabaseService = Depends(get_db_service),
):
    return chat_service.get_history(db=db, user_id=current_user.id, limit=limit)
