from datetime import datetime
from devfolio.dto.base_dto import BaseDto


class ProfileDto(BaseDto):
    id: str
    full_name: str | None = None
    title: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    location: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
