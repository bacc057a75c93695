from devfolio.common.api_endpoints import (
    DASHBOARD_ENTITY_ENDPOINT,
    DASHBOARD_ENTITY_FORM_ENDPOINT,
    DASHBOARD_PROFILE_ENDPOINT,
    DASHBOARD_SECTION_ENDPOINT,
)
from devfolio.common.constants import (
    DEFAULT_PUBLIC_BIO,
    DEFAULT_PUBLIC_NAME,
    DEFAULT_PUBLIC_TITLE,
    SKILL_CATEGORIES,
    SKILL_LEVEL_LABELS,
    DashboardTab,
    PortfolioStatus,
    PortfolioTable,
)
from devfolio.dto.portfolio_view_model_dto import PortfolioStateDto
from devfolio.portfolio.view_model_shaper import (
    display_date_range,
    display_text,
    group_skills_by_category,
    skill_level_indicator,
    summary_counts,
)

API_PREFIX = "/api"


def _compact(values: dict) -> dict:
    """Drop keys whose value is absent so they are not rendered at all."""
    return {key: value for key, value in values.items() if value is not None}


def _optional(value) -> str | None:
    return display_text(value) or None


class PortfolioRenderer:
    """
    Renders the aggregated portfolio for the public page and the dashboard.

    Both pages are built from the same sections; the dashboard only adds
    write affordances (edit/delete routes, editor options and tabs).
    """

    def render_public(self, state: PortfolioStateDto) -> dict:
        """
        Render the read-only public page.

        A missing portfolio renders as an explicit empty state.
        """
        if state.status == PortfolioStatus.NO_PORTFOLIO:
            return {
                "status": state.status.value,
                "notices": self._notices(state),
            }

        page = self._render_sections(state, editable=False)
        profile = state.view_model.profile
        page["hero"] = _compact(
            {
                "name": display_text(
                    profile.full_name if profile else None, DEFAULT_PUBLIC_NAME
                ),
                "title": display_text(
                    profile.title if profile else None, DEFAULT_PUBLIC_TITLE
                ),
                "bio": display_text(profile.bio if profile else None, DEFAULT_PUBLIC_BIO),
                "avatarUrl": _optional(profile.avatar_url) if profile else None,
                "githubUrl": _optional(profile.github_url) if profile else None,
                "linkedinUrl": _optional(profile.linkedin_url) if profile else None,
                "email": _optional(profile.email) if profile else None,
            }
        )
        return page

    def render_dashboard(self, state: PortfolioStateDto, user_email: str = "") -> dict:
        """
        Render the owner's dashboard with its edit affordances.

        Args:
            state (PortfolioStateDto): Aggregated portfolio of the session owner.
            user_email (str): Session email, used when the profile has no name.
        """
        page = self._render_sections(state, editable=True)
        profile = state.view_model.profile
        page["welcomeName"] = display_text(
            profile.full_name if profile else None, user_email
        )
        page["tabs"] = [tab.value for tab in DashboardTab]
        page["profileForm"] = {
            "action": API_PREFIX + DASHBOARD_PROFILE_ENDPOINT,
            "values": {
                "fullName": display_text(profile.full_name if profile else None),
                "title": display_text(profile.title if profile else None),
                "bio": display_text(profile.bio if profile else None),
                "avatarUrl": display_text(profile.avatar_url if profile else None),
                "phone": display_text(profile.phone if profile else None),
                "location": display_text(profile.location if profile else None),
                "githubUrl": display_text(profile.github_url if profile else None),
                "linkedinUrl": display_text(profile.linkedin_url if profile else None),
                "email": display_text(profile.email if profile else None, user_email),
            },
        }
        page["createActions"] = {
            table.value: API_PREFIX + DASHBOARD_SECTION_ENDPOINT.format(section=table.value)
            for table in PortfolioTable
            if table != PortfolioTable.PROFILES
        }
        page["editorOptions"] = {
            "skillCategories": list(SKILL_CATEGORIES),
            "skillLevels": [
                {"value": level, "label": f"{level} - {label}"}
                for level, label in SKILL_LEVEL_LABELS.items()
            ],
        }
        return page

    def _render_sections(self, state: PortfolioStateDto, editable: bool) -> dict:
        view_model = state.view_model
        profile = view_model.profile

        def with_actions(section: PortfolioTable, entity_id: str, item: dict) -> dict:
            if editable:
                item["actions"] = self._row_actions(section, entity_id)
            return item

        return {
            "status": state.status.value,
            "ownerId": view_model.owner_id,
            "notices": self._notices(state),
            "about": _compact(
                {
                    "bio": _optional(profile.bio) if profile else None,
                    "location": _optional(profile.location) if profile else None,
                }
            ),
            "contact": _compact(
                {
                    "email": _optional(profile.email) if profile else None,
                    "phone": _optional(profile.phone) if profile else None,
                    "location": _optional(profile.location) if profile else None,
                    "githubUrl": _optional(profile.github_url) if profile else None,
                    "linkedinUrl": _optional(profile.linkedin_url) if profile else None,
                }
            ),
            "summary": summary_counts(view_model).model_dump(by_alias=True),
            "education": [
                with_actions(
                    PortfolioTable.EDUCATION,
                    item.id,
                    _compact(
                        {
                            "id": item.id,
                            "degree": item.degree,
                            "institution": item.institution,
                            "dateRange": display_date_range(
                                item.start_date, item.end_date
                            ),
                            "description": _optional(item.description),
                            "gpa": _optional(item.gpa),
                            "achievements": list(item.achievements),
                        }
                    ),
                )
                for item in view_model.education
            ],
            "experience": [
                with_actions(
                    PortfolioTable.EXPERIENCES,
                    item.id,
                    _compact(
                        {
                            "id": item.id,
                            "title": item.title,
                            "company": item.company,
                            "dateRange": display_date_range(
                                item.start_date, item.end_date
                            ),
                            "description": _optional(item.description),
                            "technologies": list(item.technologies),
                        }
                    ),
                )
                for item in view_model.experiences
            ],
            "projects": [
                with_actions(
                    PortfolioTable.PROJECTS,
                    item.id,
                    _compact(
                        {
                            "id": item.id,
                            "title": item.title,
                            "description": _optional(item.description),
                            "technologies": list(item.technologies),
                            "githubUrl": _optional(item.github_url),
                            "demoUrl": _optional(item.demo_url),
                            "imageUrl": _optional(item.image_url),
                            "featured": item.featured,
                        }
                    ),
                )
                for item in view_model.projects
            ],
            "skills": [
                {
                    "category": category,
                    "skills": [
                        with_actions(
                            PortfolioTable.SKILLS,
                            skill.id,
                            {
                                "id": skill.id,
                                "name": skill.name,
                                "level": skill.level or 0,
                                "indicator": skill_level_indicator(skill.level),
                            },
                        )
                        for skill in skills
                    ],
                }
                for category, skills in group_skills_by_category(
                    view_model.skills
                ).items()
            ],
            "certifications": [
                with_actions(
                    PortfolioTable.CERTIFICATIONS,
                    item.id,
                    _compact(
                        {
                            "id": item.id,
                            "title": item.title,
                            "issuer": item.issuer,
                            "issueDate": _optional(item.issue_date),
                            "credentialUrl": _optional(item.credential_url),
                        }
                    ),
                )
                for item in view_model.certifications
            ],
            "interests": [
                with_actions(
                    PortfolioTable.INTERESTS,
                    item.id,
                    _compact(
                        {
                            "id": item.id,
                            "title": item.title,
                            "description": _optional(item.description),
                            "icon": _optional(item.icon),
                        }
                    ),
                )
                for item in view_model.interests
            ],
        }

    def _row_actions(self, section: PortfolioTable, entity_id: str) -> dict:
        entity_route = API_PREFIX + DASHBOARD_ENTITY_ENDPOINT.format(
            section=section.value, entity_id=entity_id
        )
        return {
            "form": API_PREFIX
            + DASHBOARD_ENTITY_FORM_ENDPOINT.format(
                section=section.value, entity_id=entity_id
            ),
            "update": entity_route,
            "delete": f"{entity_route}?confirm=true",
        }

    def _notices(self, state: PortfolioStateDto) -> list[str]:
        return [
            f"The {section} section could not be loaded."
            for section in state.failed_sections
        ]
