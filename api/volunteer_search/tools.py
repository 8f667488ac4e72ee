from __future__ import annotations

import json
import logging
from typing import Any, Callable

from .config import get_settings
from .profiles import search_profiles
from .vocabulary import SKILL_IDS, skill_taxonomy


settings = get_settings()
logger = logging.getLogger(__name__)


# OpenAI function-calling schemas
TOOL_SCHEMAS: list[dict[str, Any]] = [
    {
        "type": "function",
        "function": {
            "name": "search_volunteers",
            "description": (
                "Search volunteer profiles when the query mentions a specific person, place or job title. "
                "Text fields are case-insensitive substring matches and are OR'd together; "
                "skills narrows the result to profiles holding at least one of the listed skill ids."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "part of the volunteer's name"},
                    "location": {"type": "string", "description": "city, country or location text"},
                    "headline": {"type": "string", "description": "job title or headline text"},
                    "skills": {
                        "type": "array",
                        "items": {"type": "string", "enum": list(SKILL_IDS)},
                        "description": "only return volunteers with one of these skill ids",
                    },
                    "limit": {"type": "integer", "description": "max results", "default": 20},
                },
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "get_skill_taxonomy",
            "description": "Return every skill id grouped by category, to map vague phrases onto skill ids.",
            "parameters": {"type": "object", "properties": {}},
        },
    },
]


def search_volunteers_tool(
    name: str | None = None,
    location: str | None = None,
    headline: str | None = None,
    skills: list[str] | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    try:
        results = search_profiles(
            name=name,
            location=location,
            headline=headline,
            skills=skills if isinstance(skills, list) else None,
            limit=limit or settings.profile_search_limit,
        )
    except Exception:  # noqa: BLE001
        # A failed lookup must not abort the agent turn
        logger.exception("search_volunteers failed; returning empty result")
        return {"volunteers": [], "count": 0}
    volunteers = [r.model_dump(by_alias=True) for r in results]
    return {"volunteers": volunteers, "count": len(volunteers)}


def skill_taxonomy_tool() -> dict[str, Any]:
    return {"categories": skill_taxonomy()}


TOOL_HANDLERS: dict[str, Callable[..., dict[str, Any]]] = {
    "search_volunteers": search_volunteers_tool,
    "get_skill_taxonomy": skill_taxonomy_tool,
}

_TOOL_PARAMS: dict[str, frozenset[str]] = {
    t["function"]["name"]: frozenset(t["function"]["parameters"].get("properties", {}))
    for t in TOOL_SCHEMAS
}


def _decode_arguments(arguments: Any) -> dict[str, Any]:
    if isinstance(arguments, dict):
        return arguments
    if not arguments:
        return {}
    try:
        decoded = json.loads(arguments)
    except (TypeError, ValueError):
        logger.warning("Ignoring undecodable tool arguments: %r", str(arguments)[:200])
        return {}
    return decoded if isinstance(decoded, dict) else {}


def execute_tool(name: str, arguments: Any) -> str:
    """Dispatch a tool call and return its JSON-encoded result."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return json.dumps({"error": f"Unknown tool: {name}"})
    args = _decode_arguments(arguments)
    # Drop arguments the model invented
    kwargs = {k: v for k, v in args.items() if k in _TOOL_PARAMS.get(name, frozenset())}
    logger.info("Tool call: %s %s", name, kwargs)
    return json.dumps(handler(**kwargs), ensure_ascii=False)
