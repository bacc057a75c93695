from devfolio.dto.profile_dto import ProfileDto
from devfolio.dto.education_dto import EducationDto
from devfolio.dto.experience_dto import ExperienceDto
from devfolio.dto.project_dto import ProjectDto
from devfolio.dto.skill_dto import SkillDto
from devfolio.dto.certification_dto import CertificationDto
from devfolio.dto.interest_dto import InterestDto
from devfolio.entity.profile_entity import ProfileEntity
from devfolio.entity.education_entity import EducationEntity
from devfolio.entity.experience_entity import ExperienceEntity
from devfolio.entity.project_entity import ProjectEntity
from devfolio.entity.skill_entity import SkillEntity
from devfolio.entity.certification_entity import CertificationEntity
from devfolio.entity.interest_entity import InterestEntity


class PortfolioMapper:
    """
    Maps table entities into the typed records consumed by the shaper and
    renderers. Null list columns become empty lists.
    """

    def map_profile(self, entity: ProfileEntity | None) -> ProfileDto | None:
        if entity is None:
            return None
        return ProfileDto.model_validate(entity)

    def map_education(self, entity: EducationEntity) -> EducationDto:
        return EducationDto(
            id=entity.id,
            user_id=entity.user_id,
            degree=entity.degree,
            institution=entity.institution,
            start_date=entity.start_date,
            end_date=entity.end_date,
            description=entity.description,
            gpa=entity.gpa,
            achievements=list(entity.achievements or []),
            created_at=entity.created_at,
        )

    def map_experience(self, entity: ExperienceEntity) -> ExperienceDto:
        return ExperienceDto(
            id=entity.id,
            user_id=entity.user_id,
            title=entity.title,
            company=entity.company,
            start_date=entity.start_date,
            end_date=entity.end_date,
            description=entity.description,
            technologies=list(entity.technologies or []),
            created_at=entity.created_at,
        )

    def map_project(self, entity: ProjectEntity) -> ProjectDto:
        return ProjectDto(
            id=entity.id,
            user_id=entity.user_id,
            title=entity.title,
            description=entity.description,
            technologies=list(entity.technologies or []),
            github_url=entity.github_url,
            demo_url=entity.demo_url,
            image_url=entity.image_url,
            featured=bool(entity.featured),
            created_at=entity.created_at,
        )

    def map_skill(self, entity: SkillEntity) -> SkillDto:
        return SkillDto.model_validate(entity)

    def map_certification(self, entity: CertificationEntity) -> CertificationDto:
        return CertificationDto.model_validate(entity)

    def map_interest(self, entity: InterestEntity) -> InterestDto:
        return InterestDto.model_validate(entity)
