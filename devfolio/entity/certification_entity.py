from datetime import datetime
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from devfolio.common.base import Base
from devfolio.entity.column_types import DateText, new_entity_id, utc_now


class CertificationEntity(Base):
    __tablename__ = "certifications"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_entity_id
    )
    user_id: Mapped[str] = mapped_column(String(36), index=True)

    title: Mapped[str] = mapped_column(String)
    issuer: Mapped[str] = mapped_column(String)
    issue_date: Mapped[str | None] = mapped_column(DateText)
    credential_url: Mapped[str | None] = mapped_column(String)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
