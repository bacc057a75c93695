from datetime import datetime, timezone
import uuid
from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY

# text[] on Postgres; SQLite has no array type so it stores JSON instead.
StringList = ARRAY(String).with_variant(JSON(), "sqlite")

# ISO date text ("YYYY-MM-DD" or "YYYY-MM"); sorts chronologically as text.
DateText = String(10)


def new_entity_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
