from devfolio.common.constants import PortfolioTable
from devfolio.common.base import Base
from devfolio.entity.profile_entity import ProfileEntity
from devfolio.entity.education_entity import EducationEntity
from devfolio.entity.experience_entity import ExperienceEntity
from devfolio.entity.project_entity import ProjectEntity
from devfolio.entity.skill_entity import SkillEntity
from devfolio.entity.certification_entity import CertificationEntity
from devfolio.entity.interest_entity import InterestEntity

TABLE_ENTITIES: dict[PortfolioTable, type[Base]] = {
    PortfolioTable.PROFILES: ProfileEntity,
    PortfolioTable.EDUCATION: EducationEntity,
    PortfolioTable.EXPERIENCES: ExperienceEntity,
    PortfolioTable.PROJECTS: ProjectEntity,
    PortfolioTable.SKILLS: SkillEntity,
    PortfolioTable.CERTIFICATIONS: CertificationEntity,
    PortfolioTable.INTERESTS: InterestEntity,
}

# Column holding the owner reference; the profile id is the owner id itself.
OWNER_COLUMNS: dict[PortfolioTable, str] = {
    table: ("id" if table == PortfolioTable.PROFILES else "user_id")
    for table in PortfolioTable
}


def entity_for(table: PortfolioTable) -> type[Base]:
    return TABLE_ENTITIES[PortfolioTable(table)]
