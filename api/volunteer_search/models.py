import json
import uuid
from typing import Optional

from sqlmodel import SQLModel, Field


class VolunteerProfile(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, index=True)
    name: str = Field(index=True)
    headline: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    skills_json: Optional[str] = None  # JSON string list of skill ids
    volunteer_type: Optional[str] = None  # free, paid, both
    rating: float = Field(default=0.0)
    is_active: bool = Field(default=True)

    @property
    def skills(self) -> list[str]:
        try:
            value = json.loads(self.skills_json or "[]")
        except ValueError:
            return []
        return [s for s in value if isinstance(s, str)] if isinstance(value, list) else []
