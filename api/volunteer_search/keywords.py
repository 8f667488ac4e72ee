from __future__ import annotations

# Deterministic keyword matcher used when the LLM path is unavailable.
# Plain substring checks on the lower-cased query: "art" also matches "smart".

from types import MappingProxyType
from typing import Any, Mapping

from .vocabulary import VolunteerType, WorkMode


SKILL_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "marketing": (
        "community-management", "email-marketing", "social-media-ads", "ppc-google-ads",
        "seo-content", "social-media-strategy", "whatsapp-marketing",
    ),
    "social media": ("social-media-ads", "social-media-strategy", "community-management"),
    "seo": ("seo-content",),
    "ads": ("social-media-ads", "ppc-google-ads"),
    "google": ("ppc-google-ads",),
    "fundrais": (
        "grant-writing", "grant-research", "corporate-sponsorship", "major-gift-strategy",
        "peer-to-peer-campaigns", "fundraising-pitch-deck",
    ),
    "grant": ("grant-writing", "grant-research"),
    "sponsor": ("corporate-sponsorship",),
    "website": (
        "wordpress-development", "ux-ui", "html-css", "website-security",
        "cms-maintenance", "website-redesign", "landing-page-optimization",
    ),
    "web design": ("ux-ui", "wordpress-development", "website-redesign"),
    "wordpress": ("wordpress-development",),
    "ui": ("ux-ui",),
    "ux": ("ux-ui",),
    "design": ("ux-ui", "graphic-design", "website-redesign"),
    "finance": (
        "bookkeeping", "budgeting-forecasting", "payroll-processing",
        "financial-reporting", "accounting-software",
    ),
    "accounting": ("bookkeeping", "accounting-software", "financial-reporting"),
    "budget": ("budgeting-forecasting",),
    "payroll": ("payroll-processing",),
    "photo": ("photography", "photo-editing"),
    "video": ("videography", "video-editing", "motion-graphics"),
    "editing": ("video-editing", "photo-editing"),
    "graphic": ("graphic-design", "motion-graphics"),
    "content": ("email-copywriting", "impact-story-writing", "annual-report-writing", "seo-content"),
    "writing": (
        "grant-writing", "email-copywriting", "impact-story-writing",
        "annual-report-writing", "press-release",
    ),
    "copy": ("email-copywriting",),
    "event": ("event-planning", "event-onground-support"),
    "planning": ("event-planning",),
    "support": ("customer-support", "event-onground-support"),
    "volunteer": ("volunteer-recruitment",),
    "logistics": ("logistics-management",),
    "calling": ("telecalling",),
})

CAUSE_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "education": ("education",),
    "school": ("education",),
    "teach": ("education",),
    "health": ("healthcare",),
    "medical": ("healthcare",),
    "hospital": ("healthcare",),
    "environment": ("environment",),
    "climate": ("environment",),
    "green": ("environment",),
    "poverty": ("poverty-alleviation",),
    "hunger": ("poverty-alleviation",),
    "women": ("women-empowerment",),
    "gender": ("women-empowerment",),
    "child": ("child-welfare",),
    "kids": ("child-welfare",),
    "animal": ("animal-welfare",),
    "pet": ("animal-welfare",),
    "disaster": ("disaster-relief",),
    "relief": ("disaster-relief",),
    "rights": ("human-rights",),
    "art": ("arts-culture",),
    "culture": ("arts-culture",),
    "music": ("arts-culture",),
    "elder": ("senior-citizens",),
    "senior": ("senior-citizens",),
    "disabil": ("disability-support",),
    "accessib": ("disability-support",),
})

# Checked in order, first hit wins.
WORK_MODE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (WorkMode.REMOTE, ("remote",)),
    (WorkMode.ONSITE, ("onsite", "on-site", "in person")),
    (WorkMode.HYBRID, ("hybrid",)),
)

VOLUNTEER_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (VolunteerType.FREE, ("free", "pro bono", "probono")),
    (VolunteerType.PAID, ("paid",)),
)


def _collect(q: str, table: Mapping[str, tuple[str, ...]]) -> list[str]:
    found: dict[str, None] = {}
    for keyword, ids in table.items():
        if keyword in q:
            for i in ids:
                found.setdefault(i, None)
    return list(found)


def _first_match(q: str, rules: tuple[tuple[str, tuple[str, ...]], ...]) -> str | None:
    for value, needles in rules:
        if any(n in q for n in needles):
            return value
    return None


def keyword_fallback(query: str) -> dict[str, Any]:
    """Map a free-text query to candidate filters with substring rules.

    Total: never raises, including for empty or non-string input.
    """
    q = query.lower() if isinstance(query, str) else ""
    filters: dict[str, Any] = {
        "skills": _collect(q, SKILL_KEYWORDS),
        "causes": _collect(q, CAUSE_KEYWORDS),
    }
    work_mode = _first_match(q, WORK_MODE_KEYWORDS)
    if work_mode:
        filters["workMode"] = work_mode
    volunteer_type = _first_match(q, VOLUNTEER_TYPE_KEYWORDS)
    if volunteer_type:
        filters["volunteerType"] = volunteer_type
    return filters
