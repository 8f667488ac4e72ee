from __future__ import annotations

from typing import Iterable, Optional

from sqlmodel import col, or_, select

from .db import get_session
from .models import VolunteerProfile
from .schemas import CandidateProfileSummary


MAX_SUMMARY_SKILLS = 5
MAX_LIMIT = 50


def _icontains(column, value: str):
    # autoescape keeps % and _ literal
    return col(column).icontains(value.strip(), autoescape=True)


def summarize_profile(profile: VolunteerProfile) -> CandidateProfileSummary:
    return CandidateProfileSummary(
        id=profile.id,
        name=profile.name,
        headline=profile.headline,
        location=profile.location or ", ".join(p for p in (profile.city, profile.country) if p) or None,
        skills=profile.skills[:MAX_SUMMARY_SKILLS],
        volunteer_type=profile.volunteer_type,
    )


def search_profiles(
    *,
    name: Optional[str] = None,
    location: Optional[str] = None,
    headline: Optional[str] = None,
    skills: Optional[Iterable[str]] = None,
    limit: int = 20,
) -> list[CandidateProfileSummary]:
    """Case-insensitive substring search over active volunteer profiles.

    Text criteria are OR'd together; a skill list, when given, is AND'd on top
    (the profile must hold at least one of the listed skills).
    """
    lim = max(1, min(MAX_LIMIT, int(limit or 0) or 20))
    stmt = select(VolunteerProfile).where(col(VolunteerProfile.is_active).is_(True))

    text_clauses = []
    if name and name.strip():
        text_clauses.append(_icontains(VolunteerProfile.name, name))
    if location and location.strip():
        text_clauses.extend(
            [
                _icontains(VolunteerProfile.location, location),
                _icontains(VolunteerProfile.city, location),
                _icontains(VolunteerProfile.country, location),
            ]
        )
    if headline and headline.strip():
        text_clauses.append(_icontains(VolunteerProfile.headline, headline))
    if text_clauses:
        stmt = stmt.where(or_(*text_clauses))

    skill_ids = [s for s in (skills or []) if isinstance(s, str) and s]
    if skill_ids:
        # skills_json holds a JSON list, so a quoted id is an exact element match
        stmt = stmt.where(
            or_(*[col(VolunteerProfile.skills_json).contains(f'"{s}"', autoescape=True) for s in skill_ids])
        )

    stmt = stmt.order_by(col(VolunteerProfile.rating).desc(), col(VolunteerProfile.name)).limit(lim)
    with get_session() as s:
        rows = s.exec(stmt).all()
    return [summarize_profile(p) for p in rows]
