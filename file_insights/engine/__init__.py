"""Insight engine: tagging, scoring, grouping and collection analysis."""

from .file_record import FileRecord, Owner, parse_timestamp, sort_by_recent, split_mime_type
from .tagging import TagGenerator, generate_tags
from .scoring import ImportanceScorer, score
from .grouping import GroupClassifier, classify
from .analyzer import (
    AccessEntry,
    InsightAnalyzer,
    InsightSummary,
    analyze,
)

__all__ = [
    "FileRecord",
    "Owner",
    "parse_timestamp",
    "sort_by_recent",
    "TagGenerator",
    "generate_tags",
    "ImportanceScorer",
    "score",
    "GroupClassifier",
    "classify",
    "AccessEntry",
    "InsightAnalyzer",
    "InsightSummary",
    "analyze",
    "split_mime_type",
]
