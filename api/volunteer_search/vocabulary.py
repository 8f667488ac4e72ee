from __future__ import annotations

# Closed vocabularies shared by every search path. Immutable, built once at import.

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Skill:
    id: str
    name: str


@dataclass(frozen=True)
class SkillCategory:
    id: str
    name: str
    subskills: tuple[Skill, ...]


@dataclass(frozen=True)
class Cause:
    id: str
    name: str


class WorkMode:
    REMOTE = "remote"
    ONSITE = "onsite"
    HYBRID = "hybrid"


class VolunteerType:
    FREE = "free"
    PAID = "paid"
    BOTH = "both"


SKILL_CATEGORIES: tuple[SkillCategory, ...] = (
    SkillCategory(
        id="digital-marketing",
        name="Digital Marketing",
        subskills=(
            Skill("community-management", "Community Management"),
            Skill("email-marketing", "Email Marketing / Automation"),
            Skill("social-media-ads", "Social Media Ads (Meta Ads / Facebook Ads)"),
            Skill("ppc-google-ads", "PPC / Google Ads"),
            Skill("seo-content", "SEO / Content"),
            Skill("social-media-strategy", "Social Media Strategy"),
            Skill("whatsapp-marketing", "WhatsApp Marketing"),
        ),
    ),
    SkillCategory(
        id="fundraising",
        name="Fundraising Assistance",
        subskills=(
            Skill("grant-writing", "Grant Writing"),
            Skill("grant-research", "Grant Research"),
            Skill("corporate-sponsorship", "Corporate Sponsorship"),
            Skill("major-gift-strategy", "Major Gift Strategy"),
            Skill("peer-to-peer-campaigns", "Peer-to-Peer Campaigns"),
            Skill("fundraising-pitch-deck", "Fundraising Pitch Deck Support"),
        ),
    ),
    SkillCategory(
        id="website",
        name="Website Design & Maintenance",
        subskills=(
            Skill("wordpress-development", "WordPress Development"),
            Skill("ux-ui", "UX / UI"),
            Skill("html-css", "HTML / CSS"),
            Skill("website-security", "Website Security"),
            Skill("cms-maintenance", "CMS Maintenance"),
            Skill("website-redesign", "Website Redesign"),
            Skill("landing-page-optimization", "Landing Page Optimization"),
        ),
    ),
    SkillCategory(
        id="finance",
        name="Finance & Accounting",
        subskills=(
            Skill("bookkeeping", "Bookkeeping"),
            Skill("budgeting-forecasting", "Budgeting & Forecasting"),
            Skill("payroll-processing", "Payroll Processing"),
            Skill("financial-reporting", "Financial Reporting"),
            Skill("accounting-software", "Accounting Software (Tally / QuickBooks / Zoho)"),
        ),
    ),
    SkillCategory(
        id="content-creation",
        name="Content Creation",
        subskills=(
            Skill("photography", "Photography (Event / Documentary)"),
            Skill("videography", "Videography / Shooting"),
            Skill("video-editing", "Video Editing"),
            Skill("photo-editing", "Photo Editing / Retouching"),
            Skill("motion-graphics", "Motion Graphics"),
            Skill("graphic-design", "Graphic Design"),
        ),
    ),
    SkillCategory(
        id="communication",
        name="Communication",
        subskills=(
            Skill("donor-communications", "Donor Communications"),
            Skill("email-copywriting", "Email Copywriting"),
            Skill("press-release", "Press Release"),
            Skill("impact-story-writing", "Impact Story Writing"),
            Skill("annual-report-writing", "Annual Report Writing"),
        ),
    ),
    SkillCategory(
        id="planning-support",
        name="Planning & Support",
        subskills=(
            Skill("volunteer-recruitment", "Volunteer Recruitment"),
            Skill("event-planning", "Event Planning"),
            Skill("event-onground-support", "Event On-Ground Support"),
            Skill("telecalling", "Telecalling"),
            Skill("customer-support", "Customer Support"),
            Skill("logistics-management", "Logistics Management"),
        ),
    ),
)

CAUSES: tuple[Cause, ...] = (
    Cause("education", "Education"),
    Cause("healthcare", "Healthcare"),
    Cause("environment", "Environment"),
    Cause("poverty-alleviation", "Poverty Alleviation"),
    Cause("women-empowerment", "Women Empowerment"),
    Cause("child-welfare", "Child Welfare"),
    Cause("animal-welfare", "Animal Welfare"),
    Cause("disaster-relief", "Disaster Relief"),
    Cause("human-rights", "Human Rights"),
    Cause("arts-culture", "Arts & Culture"),
    Cause("senior-citizens", "Senior Citizens"),
    Cause("disability-support", "Disability Support"),
)

# Ordered tuples for prompts and listings, frozensets for membership tests.
SKILL_IDS: tuple[str, ...] = tuple(s.id for c in SKILL_CATEGORIES for s in c.subskills)
CAUSE_IDS: tuple[str, ...] = tuple(c.id for c in CAUSES)
WORK_MODES: tuple[str, ...] = (WorkMode.REMOTE, WorkMode.ONSITE, WorkMode.HYBRID)
VOLUNTEER_TYPES: tuple[str, ...] = (VolunteerType.FREE, VolunteerType.PAID, VolunteerType.BOTH)

VALID_SKILLS: frozenset[str] = frozenset(SKILL_IDS)
VALID_CAUSES: frozenset[str] = frozenset(CAUSE_IDS)
VALID_WORK_MODES: frozenset[str] = frozenset(WORK_MODES)
VALID_VOLUNTEER_TYPES: frozenset[str] = frozenset(VOLUNTEER_TYPES)


def skill_taxonomy() -> list[dict[str, Any]]:
    """Skill taxonomy grouped by category, as plain JSON-able dicts."""
    return [
        {
            "id": c.id,
            "name": c.name,
            "skills": [{"id": s.id, "name": s.name} for s in c.subskills],
        }
        for c in SKILL_CATEGORIES
    ]


def causes_listing() -> list[dict[str, str]]:
    return [{"id": c.id, "name": c.name} for c in CAUSES]
