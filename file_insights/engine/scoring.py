"""
Importance Scoring
==================

Computes a bounded importance score from recency, media type and name
signals. Points are accumulated additively and the sum is clamped to
``[0, max_score]``.

The current instant is always passed in by the caller.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from file_insights.config.rules import (
    IMPORTANCE_RULES,
    RECENCY_BANDS,
    ImportanceRule,
    RecencyBand,
)
from file_insights.config.settings import ScoringConfig
from file_insights.engine.file_record import FileRecord
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


class ImportanceScorer:
    """Scores files from 0 (least) to ``max_score`` (most important)."""

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        recency_bands: Optional[Sequence[RecencyBand]] = None,
        rules: Optional[Sequence[ImportanceRule]] = None,
    ):
        """Initialize the scorer.

        Args:
            config: Scoring configuration. Uses defaults if None.
            recency_bands: Recency bands, smallest ``max_days`` first.
            rules: Cumulative keyword rules.
        """
        self.config = config or ScoringConfig()
        self.recency_bands = tuple(recency_bands) if recency_bands is not None else RECENCY_BANDS
        self.rules = tuple(rules) if rules is not None else IMPORTANCE_RULES

    def recency_points(self, days_since: float) -> int:
        """Points for the first recency band the age falls into."""
        for band in self.recency_bands:
            if days_since < band.max_days:
                return band.points
        return 0

    def raw_score(self, file: FileRecord, now: datetime) -> Optional[int]:
        """Unclamped point sum, or None when the timestamp is unusable."""
        modified = file.modified_at
        if modified is None:
            return None

        days_since = (_as_utc(now) - modified).total_seconds() / SECONDS_PER_DAY
        total = self.recency_points(days_since)

        # Missing MIME types must not match any type rule
        mime_type = file.mime_type or ""
        for rule in self.rules:
            if rule.matches(file.name, mime_type):
                total += rule.points

        return total

    def score(self, file: FileRecord, now: datetime) -> int:
        """Score a file.

        Args:
            file: File to score.
            now: The current instant.

        Returns:
            Integer in ``[0, max_score]``. Files whose modification time is
            missing or malformed score 0.
        """
        total = self.raw_score(file, now)
        if total is None:
            logger.debug(f"Unusable modifiedTime for {file.id!r}, scoring 0")
            return 0
        return min(max(total, 0), self.config.max_score)


_default_scorer = ImportanceScorer()


def score(file: FileRecord, now: datetime) -> int:
    """Score a file with the default configuration."""
    return _default_scorer.score(file, now)
