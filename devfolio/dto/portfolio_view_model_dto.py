from pydantic import Field
from devfolio.common.constants import PortfolioStatus
from devfolio.dto.base_dto import BaseDto
from devfolio.dto.profile_dto import ProfileDto
from devfolio.dto.education_dto import EducationDto
from devfolio.dto.experience_dto import ExperienceDto
from devfolio.dto.project_dto import ProjectDto
from devfolio.dto.skill_dto import SkillDto
from devfolio.dto.certification_dto import CertificationDto
from devfolio.dto.interest_dto import InterestDto


class PortfolioViewModelDto(BaseDto):
    owner_id: str | None = None
    profile: ProfileDto | None = None
    education: list[EducationDto] = Field(default_factory=list)
    experiences: list[ExperienceDto] = Field(default_factory=list)
    projects: list[ProjectDto] = Field(default_factory=list)
    skills: list[SkillDto] = Field(default_factory=list)
    certifications: list[CertificationDto] = Field(default_factory=list)
    interests: list[InterestDto] = Field(default_factory=list)


class PortfolioStateDto(BaseDto):
    """Aggregator output: the view model plus how complete it is."""

    status: PortfolioStatus
    view_model: PortfolioViewModelDto = Field(default_factory=PortfolioViewModelDto)
    failed_sections: list[str] = Field(default_factory=list)


class SummaryCountsDto(BaseDto):
    project_count: int = 0
    experience_count: int = 0
    skill_category_count: int = 0
    certification_count: int = 0
