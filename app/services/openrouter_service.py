# /app/services/openrouter_service.py

"""
The one place that talks to the external chat-completion provider.

Every call ends in a GenerationOutcome. A live outcome carries the provider's
text; a fallback outcome carries the demo generator's text for the same
(prompt, type) plus the reason the live path was skipped. Callers never see a
provider exception: no key, a non-2xx status and any error raised while
calling or parsing all resolve to the same fallback text.
"""

import logging
from typing import Dict, List, Optional

import httpx

from ..core import config
from ..models.ai_model import FallbackReason, GenerationOutcome, OutcomeSource
from .demo_content import generate_demo_content

logger = logging.getLogger(__name__)


def _fallback(prompt: str, generation_type, reason: FallbackReason) -> GenerationOutcome:
    return GenerationOutcome(
        text=generate_demo_content(prompt, generation_type),
        source=OutcomeSource.FALLBACK,
        fallback_reason=reason,
    )


def _build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "X-Title": config.OPENROUTER_APP_TITLE,
    }


def _extract_text(payload: Dict) -> str:
    """Pulls choices[0].message.content out of a completion body."""
    text = payload["choices"][0]["message"]["content"]
    if not isinstance(text, str) or not text.strip():
        raise ValueError("AI provider returned an empty completion.")
    return text.strip()


async def invoke_model(
    messages: List[Dict[str, str]],
    max_tokens: int,
    generation_type,
    prompt: str,
    client: Optional[httpx.AsyncClient] = None,
) -> GenerationOutcome:
    """
    Performs a single completion request and reports how it went.

    Args:
        messages: The system/user message list to send.
        max_tokens: Completion budget for this generation type.
        generation_type: Used only to format the fallback text.
        prompt: The author's original topic, also only for the fallback.
        client: Optional pre-built AsyncClient (tests inject a mock transport).

    Returns:
        A GenerationOutcome. This function does not raise for provider problems.
    """
    api_key = config.get_openrouter_api_key()
    if not api_key:
        logger.warning("OPENROUTER_API_KEY is not set; serving demo content for type '%s'.", generation_type)
        return _fallback(prompt, generation_type, FallbackReason.MISSING_API_KEY)

    body = {
        "model": config.OPENROUTER_MODEL,
        "messages": messages,
        "max_tokens": max_tokens,
        "temperature": config.OPENROUTER_TEMPERATURE,
    }

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=config.OPENROUTER_TIMEOUT_SECONDS)
    try:
        response = await client.post(config.OPENROUTER_API_URL, headers=_build_headers(api_key), json=body)
        if not response.is_success:
            logger.warning(
                "AI provider answered HTTP %s; serving demo content for type '%s'.",
                response.status_code, generation_type,
            )
            return _fallback(prompt, generation_type, FallbackReason.HTTP_ERROR)
        return GenerationOutcome(text=_extract_text(response.json()), source=OutcomeSource.LIVE)
    except Exception as e:
        logger.warning("AI provider call failed (%s: %s); serving demo content.", type(e).__name__, e)
        return _fallback(prompt, generation_type, FallbackReason.EXCEPTION)
    finally:
        if owns_client:
            await client.aclose()


async def call_openrouter_api(
    messages: List[Dict[str, str]],
    max_tokens: int,
    generation_type,
    prompt: str,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Text-only view of `invoke_model`: always returns a string, never raises for provider failures."""
    outcome = await invoke_model(messages, max_tokens, generation_type, prompt, client=client)
    return outcome.text
