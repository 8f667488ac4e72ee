from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any, Optional

from .config import get_settings
from .connectors import openai as openai_client
from .tools import TOOL_SCHEMAS, execute_tool
from .vocabulary import CAUSE_IDS, SKILL_IDS, VOLUNTEER_TYPES, WORK_MODES


settings = get_settings()
logger = logging.getLogger(__name__)


class InterpreterFailure(RuntimeError):
    pass


class AgentState:
    THINKING = "thinking"
    AWAITING_TOOL_RESULT = "awaiting-tool-result"
    DONE = "done"


FILTERS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "skills": {"type": "array", "items": {"type": "string", "enum": list(SKILL_IDS)}},
        "causes": {"type": "array", "items": {"type": "string", "enum": list(CAUSE_IDS)}},
        "workMode": {"type": "string", "enum": list(WORK_MODES)},
        "volunteerType": {"type": "string", "enum": list(VOLUNTEER_TYPES)},
        "location": {"type": "string"},
        "minRating": {"type": "number", "minimum": 1, "maximum": 5},
        "maxHourlyRate": {"type": "number", "exclusiveMinimum": 0},
        "matchedVolunteerIds": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["skills", "causes"],
    "additionalProperties": False,
}

RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {"name": "search_filters", "schema": FILTERS_SCHEMA},
}


def build_system_prompt() -> str:
    return f"""You are a search query parser for a volunteer marketplace called JustBeCause Network.
Turn the user's natural language search into structured filters.

Available skill IDs: {", ".join(SKILL_IDS)}
Available cause IDs: {", ".join(CAUSE_IDS)}
Available work modes: {", ".join(WORK_MODES)}
Available volunteer types: {", ".join(VOLUNTEER_TYPES)}

Fields (all optional except skills and causes, which may be empty):
- skills: matching skill IDs. Broad terms expand to the whole category ("marketing" means ALL digital marketing skills, "fundraising" ALL fundraising skills). Specific terms map narrowly ("SEO expert" is seo-content only).
- causes: matching cause IDs
- workMode: one work mode
- volunteerType: one volunteer type ("pro bono" or "free" is free)
- location: city or country if mentioned
- minRating: minimum rating 1-5 if quality or experience is asked for
- maxHourlyRate: maximum hourly rate if a budget is mentioned
- matchedVolunteerIds: ids returned by search_volunteers that the user is clearly looking for

Tools:
- get_skill_taxonomy: call it when a phrase ("writer", "marketing") is ambiguous.
- search_volunteers: call it only when the query names a specific person, place or title.

Only include fields the query clearly supports; never invent constraints.
Only use IDs from the lists above. Reply with the JSON object only, no markdown."""


_FENCE_RE = re.compile(r"```(?:json)?\s*|```", re.IGNORECASE)


def parse_filters_content(content: Optional[str]) -> dict[str, Any]:
    if not content or not content.strip():
        raise InterpreterFailure("Empty response from model")
    text = _FENCE_RE.sub("", content).strip()
    try:
        parsed = json.loads(text)
    except ValueError as exc:
        raise InterpreterFailure(f"Model returned non-JSON output: {content[:200]}") from exc
    if not isinstance(parsed, dict):
        raise InterpreterFailure("Model output is not a JSON object")
    return parsed


async def interpret_query(query: str, *, max_steps: Optional[int] = None) -> dict[str, Any]:
    """Run the bounded tool-calling loop and return raw (unsanitized) filters.

    Each model call is one step. Tool calls are resolved in order before the
    next step. Raises InterpreterFailure if no structured output arrives
    within the step bound; transport errors propagate unchanged.
    """
    steps_allowed = max_steps or settings.agent_max_steps
    messages: list[dict[str, Any]] = [
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": query},
    ]
    state = AgentState.THINKING
    steps = 0
    pending_calls: list[dict[str, Any]] = []
    result: dict[str, Any] | None = None

    while state != AgentState.DONE:
        if state == AgentState.THINKING:
            if steps >= steps_allowed:
                raise InterpreterFailure(f"No structured output after {steps_allowed} steps")
            steps += 1
            data = await openai_client.chat_raw(
                messages,
                tools=TOOL_SCHEMAS,
                tool_choice="auto",
                response_format=RESPONSE_FORMAT,
            )
            msg = openai_client.first_message(data)
            pending_calls = msg.get("tool_calls") or []
            if pending_calls:
                messages.append(
                    {"role": "assistant", "content": msg.get("content"), "tool_calls": pending_calls}
                )
                state = AgentState.AWAITING_TOOL_RESULT
            else:
                result = parse_filters_content(msg.get("content"))
                state = AgentState.DONE
        elif state == AgentState.AWAITING_TOOL_RESULT:
            for tc in pending_calls:
                fn = tc.get("function") or {}
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": tc.get("id"),
                        "content": await asyncio.to_thread(execute_tool, fn.get("name") or "", fn.get("arguments")),
                    }
                )
            pending_calls = []
            state = AgentState.THINKING

    logger.info("Interpreter finished in %d step(s)", steps)
    return result or {}
