"""
Pure, synchronous helpers that derive display-ready values from the
aggregated view model. Nothing here performs I/O.
"""

from devfolio.common.constants import MAX_SKILL_LEVEL, PRESENT_SENTINEL
from devfolio.dto.portfolio_view_model_dto import (
    PortfolioViewModelDto,
    SummaryCountsDto,
)
from devfolio.dto.skill_dto import SkillDto


def group_skills_by_category(skills: list[SkillDto]) -> dict[str, list[SkillDto]]:
    """
    Group skills by category.

    Categories keep their first-seen order from the (already sorted) input and
    skills keep their order inside each category. Categories only appear when
    they hold at least one skill.

    Example:
        >>> grouped = group_skills_by_category(sorted_skills)
        >>> list(grouped)
        ['Cloud', 'Mobile']
    """
    grouped: dict[str, list[SkillDto]] = {}
    for skill in skills or []:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


def summary_counts(view_model: PortfolioViewModelDto) -> SummaryCountsDto:
    return SummaryCountsDto(
        project_count=len(view_model.projects),
        experience_count=len(view_model.experiences),
        skill_category_count=len(group_skills_by_category(view_model.skills)),
        certification_count=len(view_model.certifications),
    )


def display_date_range(start: str | None, end: str | None) -> str:
    """
    Render a start/end pair as "start - end".

    A missing end renders as the "Present" sentinel; a missing start renders
    as an empty range string. Never raises.

    Example:
        >>> display_date_range("2020-01", None)
        '2020-01 - Present'
    """
    start_text = display_text(start)
    if not start_text:
        return ""
    end_text = display_text(end) or PRESENT_SENTINEL
    return f"{start_text} - {end_text}"


def skill_level_indicator(level: int | None) -> list[bool]:
    """Fixed-width indicator: one slot per level, filled up to `level`."""
    filled = max(0, min(MAX_SKILL_LEVEL, level or 0))
    return [slot < filled for slot in range(MAX_SKILL_LEVEL)]


def display_text(value, fallback: str = "") -> str:
    """
    Text for an optional field. Absent values, including a stray "null"
    string, render as `fallback`.
    """
    if value is None:
        return fallback
    text = str(value).strip()
    if not text or text.lower() in ("null", "undefined"):
        return fallback
    return text
