# /app/routers/ai_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from ..core.deps import get_current_user
from ..core.errors import GenerationRequestError
from ..db.models.user_model import User
from ..models import ai_model
from ..services import ai_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate",
    response_model=ai_model.GenerateResponse,
    summary="Generate Blog Content",
    description="Produces a section, full article, outline, titles, tags or a meta description for a topic. "
                "Falls back to demo content (demo=true) when the AI provider is unavailable.",
)
async def generate_blog_content(
    # No body at all is answered like a body with both fields missing.
    request: Optional[ai_model.GenerateRequest] = Body(None),
    current_user: User = Depends(get_current_user),
):
    request = request or ai_model.GenerateRequest()
    try:
        return await ai_service.generate_content(prompt=request.prompt, generation_type=request.type)
    except GenerationRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error while generating content for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to generate content", "details": str(e)},
        )
