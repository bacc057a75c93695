from datetime import datetime
from devfolio.dto.base_dto import BaseDto


class SkillDto(BaseDto):
    id: str
    user_id: str
    category: str
    name: str
    level: int | None = None
    created_at: datetime | None = None
