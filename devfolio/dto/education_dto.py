from datetime import datetime
from pydantic import Field
from devfolio.dto.base_dto import BaseDto


class EducationDto(BaseDto):
    id: str
    user_id: str
    degree: str
    institution: str
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    gpa: str | None = None
    achievements: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
