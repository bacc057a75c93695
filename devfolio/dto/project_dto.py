from datetime import datetime
from pydantic import Field
from devfolio.dto.base_dto import BaseDto


class ProjectDto(BaseDto):
    id: str
    user_id: str
    title: str
    description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    featured: bool = False
    created_at: datetime | None = None
