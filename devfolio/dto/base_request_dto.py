from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseRequestDto(BaseModel):
    """
    Base DTO class for editor and authentication payloads.

    Unknown fields are rejected, which keeps callers from smuggling an owner
    id into a write.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    def to_row(self) -> dict:
        """Column values for the Entity Store, keyed by snake_case column name."""
        return self.model_dump(by_alias=False)
