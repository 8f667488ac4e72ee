from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Literal, Optional


class SearchRequest(BaseModel):
    # Left untyped so a non-string query reaches the validator instead of a 422.
    query: Any = None


class SearchFilters(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    skills: list[str] = []
    causes: list[str] = []
    work_mode: Optional[str] = Field(default=None, alias="workMode")
    volunteer_type: Optional[str] = Field(default=None, alias="volunteerType")
    location: Optional[str] = None
    min_rating: Optional[float] = Field(default=None, alias="minRating")
    max_hourly_rate: Optional[float] = Field(default=None, alias="maxHourlyRate")
    matched_volunteer_ids: Optional[list[str]] = Field(default=None, alias="matchedVolunteerIds")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SearchResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
    method: Literal["ai-agent", "keyword"]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class CandidateProfileSummary(BaseModel):
    id: str
    name: str
    headline: str | None = None
    location: str | None = None
    skills: list[str] = []
    volunteer_type: str | None = Field(default=None, serialization_alias="volunteerType")


class VocabularyResponse(BaseModel):
    skill_categories: list[dict[str, Any]] = Field(serialization_alias="skillCategories")
    causes: list[dict[str, str]]
    work_modes: list[str] = Field(serialization_alias="workModes")
    volunteer_types: list[str] = Field(serialization_alias="volunteerTypes")
