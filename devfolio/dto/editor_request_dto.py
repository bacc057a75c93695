from typing import Annotated

from pydantic import Field, field_validator

from devfolio.common.constants import MIN_SKILL_LEVEL
from devfolio.dto.base_request_dto import BaseRequestDto
from devfolio.utils.form_coercion import (
    blank_to_none,
    clamp_skill_level,
    normalize_date_text,
    parse_comma_list,
)

RequiredText = Annotated[str, Field(min_length=1)]


class ProfileRequestDto(BaseRequestDto):
    full_name: str | None = None
    title: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    location: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    email: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class EducationRequestDto(BaseRequestDto):
    degree: RequiredText
    institution: RequiredText
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    gpa: str | None = None
    achievements: list[str] | None = None

    @field_validator("description", "gpa", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date_text(cls, value):
        return normalize_date_text(value)

    @field_validator("achievements", mode="before")
    @classmethod
    def _comma_list(cls, value):
        return parse_comma_list(value)


class ExperienceRequestDto(BaseRequestDto):
    title: RequiredText
    company: RequiredText
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    technologies: list[str] | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date_text(cls, value):
        return normalize_date_text(value)

    @field_validator("technologies", mode="before")
    @classmethod
    def _comma_list(cls, value):
        return parse_comma_list(value)


class ProjectRequestDto(BaseRequestDto):
    title: RequiredText
    description: str | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    demo_url: str | None = None
    image_url: str | None = None
    featured: bool = False

    @field_validator("description", "github_url", "demo_url", "image_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("technologies", mode="before")
    @classmethod
    def _comma_list(cls, value):
        return parse_comma_list(value)

    @field_validator("featured", mode="before")
    @classmethod
    def _featured_default(cls, value):
        return False if blank_to_none(value) is None else value


class SkillRequestDto(BaseRequestDto):
    category: RequiredText
    name: RequiredText
    level: int = MIN_SKILL_LEVEL

    @field_validator("level", mode="before")
    @classmethod
    def _clamp_level(cls, value):
        return clamp_skill_level(value)


class CertificationRequestDto(BaseRequestDto):
    title: RequiredText
    issuer: RequiredText
    issue_date: str | None = None
    credential_url: str | None = None

    @field_validator("credential_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("issue_date", mode="before")
    @classmethod
    def _date_text(cls, value):
        return normalize_date_text(value)


class InterestRequestDto(BaseRequestDto):
    title: RequiredText
    description: str | None = None
    icon: str | None = None

    @field_validator("description", "icon", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)
