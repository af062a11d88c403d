# /app/services/ai_service.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..core.errors import GenerationRequestError
from ..models.ai_model import GenerateResponse, GenerationType
from . import openrouter_service, prompt_library

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Prompt and type are required"
INVALID_TYPE_MESSAGE = "Invalid generation type"


def validate_generation_request(prompt: Optional[str], generation_type: Optional[str]) -> GenerationType:
    """Rejects empty fields and types outside the closed set, before any prompt is built."""
    if not prompt or not generation_type:
        raise GenerationRequestError(MISSING_FIELDS_MESSAGE)
    parsed_type = GenerationType.parse(generation_type)
    if parsed_type is None:
        raise GenerationRequestError(INVALID_TYPE_MESSAGE)
    return parsed_type


async def generate_content(prompt: Optional[str], generation_type: Optional[str], client=None) -> Dict[str, Any]:
    """
    Runs the full validate -> build-prompt -> invoke-model -> respond flow.

    Raises GenerationRequestError for a structurally invalid request. Provider
    outages do not raise; they surface as `demo: True` in the response.
    """
    parsed_type = validate_generation_request(prompt, generation_type)

    messages = prompt_library.build_messages(prompt, parsed_type)
    max_tokens = prompt_library.get_token_budget(parsed_type)

    outcome = await openrouter_service.invoke_model(
        messages=messages,
        max_tokens=max_tokens,
        generation_type=parsed_type,
        prompt=prompt,
        client=client,
    )
    if outcome.is_fallback:
        logger.info("Generation for type '%s' served from fallback (%s).", parsed_type.value, outcome.fallback_reason.value)

    response = GenerateResponse(
        text=outcome.text,
        type=parsed_type,
        timestamp=datetime.now(timezone.utc).isoformat(),
        demo=outcome.is_fallback,
    )
    return response.model_dump(mode="json")
