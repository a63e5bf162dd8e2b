"""
Group Classification
====================

Partitions a file collection into fixed semantic groups. Rules are
evaluated per file in priority order and the first match wins:

1. Importance score at or above the threshold -> Important Documents
2. Name keyword group rules, in table order
3. Everything else -> Other
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from file_insights.config.rules import GROUP_NAMES, GROUP_RULES, IMPORTANT_DOCUMENTS, OTHER, GroupRule
from file_insights.engine.file_record import FileRecord
from file_insights.engine.scoring import ImportanceScorer
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)


class GroupClassifier:
    """Assigns each file to exactly one group."""

    def __init__(
        self,
        scorer: Optional[ImportanceScorer] = None,
        rules: Optional[Sequence[GroupRule]] = None,
    ):
        """Initialize the classifier.

        Args:
            scorer: Importance scorer; its config supplies the threshold.
            rules: Keyword group rules in priority order.
        """
        self.scorer = scorer or ImportanceScorer()
        self.rules = tuple(rules) if rules is not None else GROUP_RULES

    @property
    def group_names(self) -> List[str]:
        """All group names, in output order."""
        names = list(GROUP_NAMES)
        for rule in self.rules:
            if rule.group not in names:
                names.insert(names.index(OTHER), rule.group)
        return names

    def group_for(self, file: FileRecord, now: datetime) -> str:
        """Return the group a single file belongs to."""
        if self.scorer.score(file, now) >= self.scorer.config.important_threshold:
            return IMPORTANT_DOCUMENTS

        for rule in self.rules:
            if rule.matches(file.name, ""):
                return rule.group

        return OTHER

    def classify(self, files: Sequence[FileRecord], now: datetime) -> Dict[str, List[FileRecord]]:
        """Partition files into groups.

        Args:
            files: Files to classify.
            now: The current instant.

        Returns:
            Mapping containing every group name, each with its files in
            input order. Groups without files map to an empty list.
        """
        groups: Dict[str, List[FileRecord]] = {name: [] for name in self.group_names}
        for file in files:
            groups[self.group_for(file, now)].append(file)

        counts = {name: len(members) for name, members in groups.items()}
        logger.debug(f"Classified {len(files)} files: {counts}")
        return groups


_default_classifier = GroupClassifier()


def classify(files: Sequence[FileRecord], now: datetime) -> Dict[str, List[FileRecord]]:
    """Classify files with the default configuration."""
    return _default_classifier.classify(files, now)
