"""
Coercions applied at the editing boundary.

Editors receive free-text form values; these helpers turn them into column
values on write and back into form text when an edit form is loaded.
"""

from datetime import datetime

from devfolio.common.constants import (
    LIST_JOINER,
    LIST_SEPARATOR,
    MAX_SKILL_LEVEL,
    MIN_SKILL_LEVEL,
)

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m")


def blank_to_none(value):
    """Map None and whitespace-only strings to None; strip other strings."""
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def parse_comma_list(value) -> list[str] | None:
    """
    Split a comma-separated string into trimmed, non-empty items.

    Lists are accepted as well and cleaned the same way. An empty result is
    returned as None, which is how the column stores "not provided".

    Example:
        >>> parse_comma_list("Flutter, Dart,  Firebase")
        ['Flutter', 'Dart', 'Firebase']
    """
    if value is None:
        return None
    if isinstance(value, str):
        candidates = value.split(LIST_SEPARATOR)
    elif isinstance(value, (list, tuple)):
        candidates = [str(item) for item in value if item is not None]
    else:
        raise ValueError("Expected a comma-separated string or a list of strings")

    items = [item.strip() for item in candidates]
    items = [item for item in items if item]
    return items or None


def join_comma_list(items: list[str] | None) -> str:
    """Render a stored list back into the editor's comma-separated text."""
    if not items:
        return ""
    return LIST_JOINER.join(items)


def clamp_skill_level(value) -> int:
    """
    Coerce a skill level to an int inside [MIN_SKILL_LEVEL, MAX_SKILL_LEVEL].

    Missing values default to the minimum level.

    Raises:
        ValueError: If the value is not an integer or numeric string.
    """
    value = blank_to_none(value)
    if value is None:
        return MIN_SKILL_LEVEL
    if isinstance(value, bool):
        raise ValueError("Skill level must be an integer")
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Skill level must be an integer, got {value!r}")
    return max(MIN_SKILL_LEVEL, min(MAX_SKILL_LEVEL, level))


def normalize_date_text(value) -> str | None:
    """
    Validate an optional date string in "YYYY-MM-DD" or "YYYY-MM" form.

    Returns:
        str | None: The stripped date text, or None when not provided.

    Raises:
        ValueError: If the text is not a valid date in either form.
    """
    value = blank_to_none(value)
    if value is None:
        return None
    if not isinstance(value, str):
        value = value.isoformat()

    for date_format in _DATE_FORMATS:
        try:
            datetime.strptime(value, date_format)
            return value
        except ValueError:
            continue
    raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD or YYYY-MM")


def form_text(value) -> str:
    """Render an optional stored value as editor text ("" when absent)."""
    if value is None:
        return ""
    return str(value)
