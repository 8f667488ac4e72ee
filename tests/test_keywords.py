"""tests/test_keywords.py

Deterministic keyword fallback.
"""

from __future__ import annotations

import json

import pytest

from volunteer_search.keywords import keyword_fallback
from volunteer_search.vocabulary import VALID_CAUSES, VALID_SKILLS


FUNDRAISING_GROUP = [
    "grant-writing",
    "grant-research",
    "corporate-sponsorship",
    "major-gift-strategy",
    "peer-to-peer-campaigns",
    "fundraising-pitch-deck",
]


class TestKeywordFallback:
    def test_website_redesign(self) -> None:
        result = keyword_fallback("we need a website redesign expert")

        assert {"website-redesign", "ux-ui", "wordpress-development"} <= set(result["skills"])
        assert result["causes"] == []
        assert "workMode" not in result
        assert "volunteerType" not in result

    def test_compound_query(self) -> None:
        result = keyword_fallback("remote pro bono grant writer for education causes")

        assert result["workMode"] == "remote"
        assert result["volunteerType"] == "free"
        assert "grant-writing" in result["skills"]
        assert "education" in result["causes"]

    def test_fundraising_expands_to_whole_group(self) -> None:
        result = keyword_fallback("fundraising help")

        assert sorted(result["skills"]) == sorted(FUNDRAISING_GROUP)
        assert len(result["skills"]) == len(set(result["skills"]))

    def test_overlapping_keywords_are_deduplicated(self) -> None:
        # "website", "web design" and "design" all contribute ux-ui
        result = keyword_fallback("Web design for our website")
        assert result["skills"].count("ux-ui") == 1
        assert result["skills"].count("website-redesign") == 1

    def test_case_insensitive(self) -> None:
        assert keyword_fallback("SEO for a HOSPITAL") == keyword_fallback("seo for a hospital")

    @pytest.mark.parametrize(
        "query, mode",
        [
            ("remote or hybrid designer", "remote"),
            ("on-site photographer", "onsite"),
            ("meet in person please", "onsite"),
            ("hybrid event planner", "hybrid"),
        ],
    )
    def test_work_mode_priority(self, query: str, mode: str) -> None:
        assert keyword_fallback(query)["workMode"] == mode

    @pytest.mark.parametrize(
        "query, volunteer_type",
        [
            ("free bookkeeping", "free"),
            ("probono accountant", "free"),
            ("paid video editor", "paid"),
            ("paid or free designer", "free"),
        ],
    )
    def test_volunteer_type(self, query: str, volunteer_type: str) -> None:
        assert keyword_fallback(query)["volunteerType"] == volunteer_type

    @pytest.mark.parametrize("query", ["", "   ", "xyzzy qwerty", "éèê"])
    def test_total_on_unrecognised_input(self, query: str) -> None:
        assert keyword_fallback(query) == {"skills": [], "causes": []}

    def test_non_string_input_is_treated_as_empty(self) -> None:
        assert keyword_fallback(None) == {"skills": [], "causes": []}  # type: ignore[arg-type]

    def test_idempotent(self) -> None:
        query = "remote marketing and video support for animal shelters"
        first = json.dumps(keyword_fallback(query))
        second = json.dumps(keyword_fallback(query))
        assert first == second

    def test_substring_matches_inside_words(self) -> None:
        """Known limitation: "art" fires inside "smart"."""
        assert keyword_fallback("smart helper")["causes"] == ["arts-culture"]

    def test_output_stays_inside_vocabularies(self) -> None:
        query = "marketing social media seo ads google fundraising grant sponsor website wordpress ui ux design " \
                "finance accounting budget payroll photo video editing graphic content writing copy event " \
                "planning support volunteer logistics calling education health environment poverty women " \
                "child animal disaster rights art music elder disability accessibility"
        result = keyword_fallback(query)
        assert set(result["skills"]) <= VALID_SKILLS
        assert set(result["causes"]) <= VALID_CAUSES
        assert set(result["causes"]) == VALID_CAUSES
