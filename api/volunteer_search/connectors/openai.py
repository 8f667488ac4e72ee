from __future__ import annotations

from typing import Any, List, Optional

import httpx

from ..config import get_settings


settings = get_settings()


async def chat_raw(
    messages: List[dict[str, Any]],
    *,
    model: Optional[str] = None,
    tools: Optional[list] = None,
    tool_choice: Optional[str] = None,
    response_format: Optional[dict[str, Any]] = None,
) -> dict:
    """Call the OpenAI chat completions API and return the decoded response.

    Raises on a missing key or a non-2xx status; callers decide how to degrade.
    """
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY is not configured")

    payload: dict[str, Any] = {
        "model": model or settings.openai_model,
        "messages": messages,
        "temperature": 0.1,
        "max_tokens": settings.openai_max_tokens,
    }
    if tools:
        payload["tools"] = tools
    if tool_choice is not None:
        payload["tool_choice"] = tool_choice
    if response_format is not None:
        payload["response_format"] = response_format

    headers = {
        "Authorization": f"Bearer {settings.openai_api_key}",
        "Content-Type": "application/json",
    }
    url = f"{settings.openai_base_url.rstrip('/')}/chat/completions"
    async with httpx.AsyncClient(timeout=settings.openai_timeout) as client:
        r = await client.post(url, headers=headers, json=payload)
        r.raise_for_status()
        return r.json()


def first_message(response: dict[str, Any]) -> dict[str, Any]:
    choice = (response.get("choices") or [{}])[0] or {}
    return choice.get("message") or {}
