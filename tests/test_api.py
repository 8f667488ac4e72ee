"""tests/test_api.py

HTTP envelope of the search endpoint.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

from volunteer_search import main, orchestrator


class TestSearchEndpoint:
    def test_keyword_path_without_key(self, client, no_llm) -> None:
        resp = client.post("/search", json={"query": "we need a website redesign expert"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["method"] == "keyword"
        assert {"website-redesign", "ux-ui", "wordpress-development"} <= set(body["data"]["skills"])
        assert body["data"]["causes"] == []
        assert "matchedVolunteerIds" not in body["data"]

    def test_short_query_is_rejected(self, client, no_llm) -> None:
        resp = client.post("/search", json={"query": "so"})

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Query must be at least 3 characters"}

    def test_missing_or_non_string_query(self, client, no_llm) -> None:
        assert client.post("/search", json={}).status_code == 400
        assert client.post("/search", json={"query": 12345}).status_code == 400

    def test_body_must_be_an_object(self, client) -> None:
        resp = client.post("/search", content=b"not json", headers={"Content-Type": "application/json"})

        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_interpreter_failure_still_succeeds(self, client, with_llm, monkeypatch) -> None:
        monkeypatch.setattr(orchestrator, "interpret_query", AsyncMock(side_effect=TimeoutError("llm down")))

        resp = client.post("/search", json={"query": "fundraising help"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["method"] == "keyword"
        assert len(body["data"]["skills"]) == 6

    def test_ai_agent_path(self, client, with_llm, monkeypatch) -> None:
        monkeypatch.setattr(
            orchestrator,
            "interpret_query",
            AsyncMock(
                return_value={
                    "skills": ["grant-writing"],
                    "causes": ["education"],
                    "workMode": "remote",
                    "location": "Pune",
                    "minRating": 4,
                    "matchedVolunteerIds": ["vol-asha"],
                }
            ),
        )

        resp = client.post("/search", json={"query": "experienced grant writers in Pune"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["method"] == "ai-agent"
        assert body["data"] == {
            "skills": ["grant-writing"],
            "causes": ["education"],
            "workMode": "remote",
            "location": "Pune",
            "minRating": 4,
            "matchedVolunteerIds": ["vol-asha"],
        }

    def test_oversized_number_from_model_is_dropped(self, client, with_llm, monkeypatch) -> None:
        monkeypatch.setattr(
            orchestrator,
            "interpret_query",
            AsyncMock(return_value={"skills": [], "causes": [], "minRating": 10**400}),
        )

        resp = client.post("/search", json={"query": "fundraising help"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["method"] == "ai-agent"
        assert "minRating" not in body["data"]

    def test_unexpected_error_is_500(self, client, monkeypatch) -> None:
        monkeypatch.setattr(main, "compile_search", AsyncMock(side_effect=TypeError("bad state")))

        resp = client.post("/search", json={"query": "fundraising help"})

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Search failed"}


class TestMetaEndpoints:
    def test_vocabulary(self, client) -> None:
        body = client.get("/vocabulary").json()

        assert len(body["skillCategories"]) == 7
        assert len(body["causes"]) == 12
        assert body["workModes"] == ["remote", "onsite", "hybrid"]
        assert body["volunteerTypes"] == ["free", "paid", "both"]

    def test_health(self, client) -> None:
        assert client.get("/health").json() == {"status": "ok"}
