"""
Naming Conventions
==================

Formats suggested file names following the ``[Date]_[Title]_[Project]``
pattern in the user's preferred word-joining convention.
"""

import re
from datetime import date
from typing import List, Optional

from file_insights.config.preferences import NamingConvention, UserPreferences

NAME_PATTERN = "[Date]_[Title]_[Project]"

_SEPARATORS = re.compile(r"[\W_]+")
_CAMEL_HUMP = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_words(text: str) -> List[str]:
    """Split text into words on separators and camel-case humps.

    >>> split_words("marketing-presentation Q1Launch")
    ['marketing', 'presentation', 'Q1', 'Launch']
    """
    words = []
    for chunk in _SEPARATORS.split(text or ""):
        words.extend(part for part in _CAMEL_HUMP.split(chunk) if part)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def apply_convention(text: str, convention: NamingConvention) -> str:
    """Rewrite free text in the given naming convention."""
    words = split_words(text)
    if not words:
        return ""

    if convention == NamingConvention.CAMEL_CASE:
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if convention == NamingConvention.PASCAL_CASE:
        return "".join(_capitalize(w) for w in words)
    if convention == NamingConvention.KEBAB_CASE:
        return "-".join(w.lower() for w in words)
    return "_".join(w.lower() for w in words)


def suggest_name(
    title: str,
    project: str,
    convention: NamingConvention,
    on: date,
    extension: str = "",
) -> str:
    """Build a file name as ``<YYYY-MM-DD>_<title>_<project>``.

    Args:
        title: Free-text title.
        project: Free-text project name. Empty drops the segment.
        convention: Convention applied to title and project.
        on: Date for the leading segment.
        extension: Optional extension, with or without the dot.

    Returns:
        Suggested file name.
    """
    segments = [on.isoformat()]
    segments.extend(
        formatted for formatted in (
            apply_convention(title, convention),
            apply_convention(project, convention),
        ) if formatted
    )
    name = "_".join(segments)

    if extension:
        name += "." + extension.lstrip(".")
    return name


def suggest_name_for(
    title: str,
    project: str,
    preferences: UserPreferences,
    on: date,
    extension: str = "",
) -> str:
    """Suggest a name using the convention from saved preferences."""
    return suggest_name(title, project, preferences.naming_convention, on, extension)


def convention_example(convention: NamingConvention, on: Optional[date] = None) -> str:
    """Example name shown when choosing a convention."""
    return suggest_name("Marketing Presentation", "Q1 Launch", convention, on or date.today())
