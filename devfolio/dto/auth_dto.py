from pydantic import Field
from devfolio.dto.base_dto import BaseDto
from devfolio.dto.base_request_dto import BaseRequestDto


class SignInRequestDto(BaseRequestDto):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SignUpRequestDto(BaseRequestDto):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    display_name: str = Field(min_length=1)


class AuthSessionDto(BaseDto):
    owner_id: str
    email: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None


class SessionStatusDto(BaseDto):
    owner_id: str | None = None
    is_authenticated: bool = False
