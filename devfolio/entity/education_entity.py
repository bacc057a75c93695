from datetime import datetime
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from devfolio.common.base import Base
from devfolio.entity.column_types import (
    StringList,
    DateText,
    new_entity_id,
    utc_now,
)


class EducationEntity(Base):
    __tablename__ = "education"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_entity_id
    )
    user_id: Mapped[str] = mapped_column(String(36), index=True)

    degree: Mapped[str] = mapped_column(String)
    institution: Mapped[str] = mapped_column(String)
    start_date: Mapped[str | None] = mapped_column(DateText)
    end_date: Mapped[str | None] = mapped_column(DateText)
    description: Mapped[str | None] = mapped_column(Text)
    gpa: Mapped[str | None] = mapped_column(String)
    achievements: Mapped[list[str] | None] = mapped_column(StringList)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
