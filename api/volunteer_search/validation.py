from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable, Mapping, Optional

from .schemas import SearchFilters
from .vocabulary import (
    VALID_CAUSES,
    VALID_SKILLS,
    VALID_VOLUNTEER_TYPES,
    VALID_WORK_MODES,
)


MIN_QUERY_LENGTH = 3


class SearchValidationError(ValueError):
    pass


def validate_query(query: Any) -> str:
    if not isinstance(query, str) or len(query.strip()) < MIN_QUERY_LENGTH:
        raise SearchValidationError(f"Query must be at least {MIN_QUERY_LENGTH} characters")
    return query


def _pick(candidate: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in candidate and candidate[key] is not None:
            return candidate[key]
    return None


def _restrict(values: Any, allowed: frozenset[str]) -> list[str]:
    if not isinstance(values, (list, tuple, set, frozenset)):
        return []
    # dict.fromkeys keeps first-seen order while dropping duplicates
    return list(dict.fromkeys(v for v in values if isinstance(v, str) and v in allowed))


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def _string_ids(values: Iterable[Any]) -> list[str]:
    return list(dict.fromkeys(str(v) for v in values if isinstance(v, (str, int)) and not isinstance(v, bool)))


def sanitize_filters(candidate: Optional[Mapping[str, Any]]) -> SearchFilters:
    """Reduce an untrusted candidate filter object to valid SearchFilters.

    Identifiers outside the closed vocabularies are dropped, enum fields must
    match exactly, and out-of-range numbers become None rather than being
    clamped. Accepts camelCase or snake_case keys.
    """
    if not isinstance(candidate, Mapping):
        candidate = {}

    work_mode = _pick(candidate, "workMode", "work_mode")
    volunteer_type = _pick(candidate, "volunteerType", "volunteer_type")
    location = candidate.get("location")

    min_rating = _number(_pick(candidate, "minRating", "min_rating"))
    if min_rating is not None and not (1 <= min_rating <= 5):
        min_rating = None

    max_rate = _number(_pick(candidate, "maxHourlyRate", "max_hourly_rate"))
    if max_rate is not None and not max_rate > 0:
        max_rate = None

    matched = _pick(candidate, "matchedVolunteerIds", "matched_volunteer_ids")
    matched_ids = _string_ids(matched) if isinstance(matched, (list, tuple, set)) else None

    return SearchFilters(
        skills=_restrict(candidate.get("skills"), VALID_SKILLS),
        causes=_restrict(candidate.get("causes"), VALID_CAUSES),
        work_mode=work_mode if isinstance(work_mode, str) and work_mode in VALID_WORK_MODES else None,
        volunteer_type=(
            volunteer_type
            if isinstance(volunteer_type, str) and volunteer_type in VALID_VOLUNTEER_TYPES
            else None
        ),
        location=location if isinstance(location, str) and location.strip() else None,
        min_rating=min_rating,
        max_hourly_rate=max_rate,
        matched_volunteer_ids=matched_ids,
    )
