from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .agent import interpret_query
from .config import get_settings
from .keywords import keyword_fallback
from .schemas import SearchFilters
from .validation import sanitize_filters, validate_query


settings = get_settings()
logger = logging.getLogger(__name__)


class SearchMethod:
    AI_AGENT = "ai-agent"
    KEYWORD = "keyword"


@dataclass
class SearchResult:
    filters: SearchFilters
    method: str


async def compile_search(query: Any) -> SearchResult:
    """Validate a raw query and compile it into sanitized SearchFilters.

    Only SearchValidationError escapes; interpreter failures degrade to the
    keyword fallback.
    """
    query = validate_query(query)

    if not settings.openai_api_key:
        logger.info("No OpenAI API key configured, using keyword fallback")
        candidate = keyword_fallback(query)
        method = SearchMethod.KEYWORD
    else:
        try:
            candidate = await interpret_query(query)
            method = SearchMethod.AI_AGENT
        except Exception:  # noqa: BLE001
            logger.exception("Interpreter failed for %r, using keyword fallback", query[:200])
            candidate = keyword_fallback(query)
            method = SearchMethod.KEYWORD

    filters = sanitize_filters(candidate)
    logger.debug("Compiled %r via %s -> %s", query[:200], method, filters.to_payload())
    return SearchResult(filters=filters, method=method)
