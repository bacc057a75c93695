from datetime import datetime
from pydantic import Field
from devfolio.dto.base_dto import BaseDto


class ExperienceDto(BaseDto):
    id: str
    user_id: str
    title: str
    company: str
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
