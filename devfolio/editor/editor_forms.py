from pydantic import BaseModel

from devfolio.common.constants import PortfolioTable
from devfolio.dto.editor_request_dto import (
    CertificationRequestDto,
    EducationRequestDto,
    ExperienceRequestDto,
    InterestRequestDto,
    ProfileRequestDto,
    ProjectRequestDto,
    SkillRequestDto,
)
from devfolio.utils.form_coercion import form_text, join_comma_list

EDITOR_FORMS: dict[PortfolioTable, type[BaseModel]] = {
    PortfolioTable.PROFILES: ProfileRequestDto,
    PortfolioTable.EDUCATION: EducationRequestDto,
    PortfolioTable.EXPERIENCES: ExperienceRequestDto,
    PortfolioTable.PROJECTS: ProjectRequestDto,
    PortfolioTable.SKILLS: SkillRequestDto,
    PortfolioTable.CERTIFICATIONS: CertificationRequestDto,
    PortfolioTable.INTERESTS: InterestRequestDto,
}

# Columns edited as comma-separated text.
LIST_FIELDS = {"achievements", "technologies"}
# Columns edited with a non-text control keep their native value.
NATIVE_FIELDS = {"level", "featured"}


def form_class_for(table: PortfolioTable) -> type[BaseModel]:
    return EDITOR_FORMS[PortfolioTable(table)]


def to_form_values(table: PortfolioTable, existing=None) -> dict:
    """
    Build the initial editor values for a row, or blank values for a new one.

    Lists are joined back into comma-separated text and absent optional
    values become empty strings.
    """
    form_cls = form_class_for(table)
    values = {}
    for field_name, field_info in form_cls.model_fields.items():
        current = getattr(existing, field_name, None) if existing is not None else None
        if field_name in LIST_FIELDS:
            values[field_name] = join_comma_list(current)
        elif field_name in NATIVE_FIELDS:
            values[field_name] = (
                current if current is not None else field_info.get_default()
            )
        else:
            values[field_name] = form_text(current)
    return values
