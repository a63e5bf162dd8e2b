"""
Heuristic Rule Tables
=====================

Keyword tables that drive tagging, importance scoring, grouping and
sensitivity detection. Each table maps a pattern to its effect so the
rule set can be extended without touching the engine's control flow.

All keyword matches are case-insensitive substring tests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RuleTarget(Enum):
    """Which field of a file record a rule inspects."""
    NAME = "name"
    MIME_TYPE = "mime_type"


@dataclass(frozen=True)
class KeywordRule:
    """Base keyword rule.

    Attributes:
        target: Field the keywords are tested against.
        keywords: Any one of these substrings triggers the rule.
    """
    target: RuleTarget
    keywords: Tuple[str, ...]

    def matches(self, name: str, mime_type: str) -> bool:
        """Check whether the rule fires for a (name, mime type) pair."""
        value = name if self.target == RuleTarget.NAME else mime_type
        value = (value or "").lower()
        return any(keyword in value for keyword in self.keywords)


@dataclass(frozen=True)
class TagRule(KeywordRule):
    """Adds ``tag`` when any keyword matches."""
    tag: str = ""


@dataclass(frozen=True)
class ImportanceRule(KeywordRule):
    """Adds ``points`` (possibly negative) when any keyword matches."""
    points: int = 0


@dataclass(frozen=True)
class RecencyBand:
    """Awards ``points`` when a file is younger than ``max_days``."""
    max_days: float
    points: int


@dataclass(frozen=True)
class GroupRule(KeywordRule):
    """Sends a file to ``group`` when any name keyword matches."""
    group: str = ""


# Tag rules: every rule that fires contributes its tag
TAG_RULES: Tuple[TagRule, ...] = (
    # Content type tags
    TagRule(RuleTarget.MIME_TYPE, ("document",), tag="document"),
    TagRule(RuleTarget.MIME_TYPE, ("spreadsheet",), tag="spreadsheet"),
    TagRule(RuleTarget.MIME_TYPE, ("presentation",), tag="presentation"),
    TagRule(RuleTarget.MIME_TYPE, ("image",), tag="image"),
    TagRule(RuleTarget.MIME_TYPE, ("pdf",), tag="pdf"),
    # Project-related tags
    TagRule(RuleTarget.NAME, ("project",), tag="project"),
    TagRule(RuleTarget.NAME, ("proposal",), tag="proposal"),
    TagRule(RuleTarget.NAME, ("report",), tag="report"),
    # Financial tags
    TagRule(RuleTarget.NAME, ("budget", "invoice"), tag="financial"),
    # Meeting tags
    TagRule(RuleTarget.NAME, ("meeting",), tag="meeting"),
    TagRule(RuleTarget.NAME, ("notes",), tag="notes"),
)

# Recency bands, checked in order; the first band that fits wins
RECENCY_BANDS: Tuple[RecencyBand, ...] = (
    RecencyBand(max_days=7, points=3),
    RecencyBand(max_days=30, points=2),
)

# Importance rules are independent and cumulative
IMPORTANCE_RULES: Tuple[ImportanceRule, ...] = (
    ImportanceRule(RuleTarget.MIME_TYPE, ("document",), points=2),
    ImportanceRule(RuleTarget.MIME_TYPE, ("spreadsheet",), points=2),
    ImportanceRule(RuleTarget.MIME_TYPE, ("presentation",), points=2),
    ImportanceRule(RuleTarget.NAME, ("important",), points=3),
    ImportanceRule(RuleTarget.NAME, ("urgent",), points=3),
    ImportanceRule(RuleTarget.NAME, ("final",), points=2),
    ImportanceRule(RuleTarget.NAME, ("draft",), points=-1),
)

# Group names
RECENT_PROJECTS = "Recent Projects"
FINANCIAL_DOCUMENTS = "Financial Documents"
MEETING_MATERIALS = "Meeting Materials"
IMPORTANT_DOCUMENTS = "Important Documents"
OTHER = "Other"

# Every classification result carries exactly these keys, in this order
GROUP_NAMES: Tuple[str, ...] = (
    RECENT_PROJECTS,
    FINANCIAL_DOCUMENTS,
    MEETING_MATERIALS,
    IMPORTANT_DOCUMENTS,
    OTHER,
)

# Keyword groups, evaluated after the importance check; first match wins
GROUP_RULES: Tuple[GroupRule, ...] = (
    GroupRule(RuleTarget.NAME, ("project", "proposal"), group=RECENT_PROJECTS),
    GroupRule(RuleTarget.NAME, ("budget", "invoice"), group=FINANCIAL_DOCUMENTS),
    GroupRule(RuleTarget.NAME, ("meeting", "notes"), group=MEETING_MATERIALS),
)

# File names hinting at sensitive content
SENSITIVE_PATTERNS: Tuple[str, ...] = (
    "password",
    "secret",
    "private",
    "confidential",
    "personal",
)

# Provider MIME types with special meaning
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
FIGMA_MIME_TYPE = "application/figma"
UNKNOWN_MIME_TYPE = "unknown/unknown"
