from datetime import datetime
from devfolio.dto.base_dto import BaseDto


class InterestDto(BaseDto):
    id: str
    user_id: str
    title: str
    description: str | None = None
    icon: str | None = None
    created_at: datetime | None = None
