from datetime import datetime
from devfolio.dto.base_dto import BaseDto


class CertificationDto(BaseDto):
    id: str
    user_id: str
    title: str
    issuer: str
    issue_date: str | None = None
    credential_url: str | None = None
    created_at: datetime | None = None
