"""
Collection Insights
===================

Derives collection-level summaries from a file listing:

- Duplicate names (case-insensitive, one entry per repeat occurrence)
- Potentially sensitive files, by name pattern
- Access map of files per owner
- Suggested folder structure by MIME category and subtype
- The most recently modified files

Each summary is computed independently from the same input.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from file_insights.config.rules import UNKNOWN_MIME_TYPE
from file_insights.config.settings import InsightsConfig
from file_insights.engine.file_record import FileRecord, sort_by_recent, split_mime_type
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)

FolderStructure = Dict[str, Dict[str, List[str]]]


@dataclass
class AccessEntry:
    """Files associated with one owner.

    Attributes:
        owned: Files whose first owner is this user, in input order.
        shared: Files shared with this user. No provider field feeds this
            yet, so it is always empty.
    """
    owned: List[FileRecord] = field(default_factory=list)
    shared: List[FileRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "owned": [file.to_dict() for file in self.owned],
            "shared": [file.to_dict() for file in self.shared],
        }


@dataclass
class InsightSummary:
    """Collection-level report.

    Attributes:
        duplicates: Lower-cased names, once per occurrence after the first.
        sensitive_files: Files whose names match a sensitive pattern.
        access_map: Owner name to that owner's files, in first-seen order.
        folder_structure: Category to subtype to file names.
        recent_files: Most recently modified files, newest first.
    """
    duplicates: List[str] = field(default_factory=list)
    sensitive_files: List[FileRecord] = field(default_factory=list)
    access_map: Dict[str, AccessEntry] = field(default_factory=dict)
    folder_structure: FolderStructure = field(default_factory=dict)
    recent_files: List[FileRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "duplicates": list(self.duplicates),
            "sensitive_files": [file.to_dict() for file in self.sensitive_files],
            "access_map": {owner: entry.to_dict() for owner, entry in self.access_map.items()},
            "folder_structure": {
                category: {subtype: list(names) for subtype, names in subtypes.items()}
                for category, subtypes in self.folder_structure.items()
            },
            "recent_files": [file.to_dict() for file in self.recent_files],
        }


class InsightAnalyzer:
    """Computes an ``InsightSummary`` for a file collection."""

    def __init__(self, config: Optional[InsightsConfig] = None):
        """Initialize the analyzer.

        Args:
            config: Insight configuration. Uses defaults if None.
        """
        self.config = config or InsightsConfig()

    def find_duplicates(self, files: Sequence[FileRecord]) -> List[str]:
        """List lower-cased names for every occurrence after the first.

        Only case is normalized; whitespace is compared as-is.
        """
        seen = set()
        duplicates = []
        for file in files:
            name = (file.name or "").lower()
            if name in seen:
                duplicates.append(name)
            else:
                seen.add(name)
        return duplicates

    def is_sensitive(self, file: FileRecord) -> bool:
        """Check whether a file name contains any sensitive pattern."""
        name = (file.name or "").lower()
        return any(pattern in name for pattern in self.config.sensitive_patterns)

    def find_sensitive(self, files: Sequence[FileRecord]) -> List[FileRecord]:
        """Files with sensitive-looking names, in input order."""
        return [file for file in files if self.is_sensitive(file)]

    def build_access_map(self, files: Sequence[FileRecord]) -> Dict[str, AccessEntry]:
        """Group files by their first owner's display name."""
        access_map: Dict[str, AccessEntry] = {}
        for file in files:
            access_map.setdefault(file.owner_name, AccessEntry()).owned.append(file)
        return access_map

    def build_folder_structure(self, files: Sequence[FileRecord]) -> FolderStructure:
        """Nest file names under their MIME category and subtype."""
        structure: FolderStructure = {}
        for file in files:
            category, subtype = split_mime_type(file.mime_type)
            if file.mime_type and file.effective_mime_type == UNKNOWN_MIME_TYPE:
                logger.debug(f"Malformed mimeType {file.mime_type!r} for {file.id!r}")
            structure.setdefault(category, {}).setdefault(subtype, []).append(file.name)
        return structure

    def recent(self, files: Sequence[FileRecord]) -> List[FileRecord]:
        """The most recently modified files, newest first."""
        return sort_by_recent(files)[:self.config.recent_limit]

    def analyze(self, files: Sequence[FileRecord]) -> InsightSummary:
        """Compute every insight for a collection.

        Args:
            files: Files to analyze. May be empty.

        Returns:
            InsightSummary; empty input yields empty fields.
        """
        files = list(files)
        summary = InsightSummary(
            duplicates=self.find_duplicates(files),
            sensitive_files=self.find_sensitive(files),
            access_map=self.build_access_map(files),
            folder_structure=self.build_folder_structure(files),
            recent_files=self.recent(files),
        )

        logger.debug(
            f"Analyzed {len(files)} files: {len(summary.duplicates)} duplicates, "
            f"{len(summary.sensitive_files)} sensitive, {len(summary.access_map)} owners"
        )
        return summary


_default_analyzer = InsightAnalyzer()


def analyze(files: Sequence[FileRecord]) -> InsightSummary:
    """Analyze files with the default configuration."""
    return _default_analyzer.analyze(files)
