"""
Tag Editing
===========

Pure tag-list edits. Results are handed to the external metadata store;
nothing here writes anywhere.
"""

from typing import List, Optional, Sequence

from file_insights.engine.file_record import FileRecord
from file_insights.engine.tagging import TagGenerator
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)


def add_tag(tags: Optional[Sequence[str]], new_tag: str) -> List[str]:
    """Append a tag if it is not already present.

    Args:
        tags: Current tags, possibly None.
        new_tag: Tag to add. Surrounding whitespace is trimmed.

    Returns:
        New tag list. Blank tags leave the list unchanged.
    """
    current = list(dict.fromkeys(tags or []))
    tag = (new_tag or "").strip()
    if tag and tag not in current:
        current.append(tag)
    return current


def remove_tag(tags: Optional[Sequence[str]], tag: str) -> List[str]:
    """Return the tags without any entry equal to ``tag``."""
    return [existing for existing in (tags or []) if existing != tag]


def merge_generated_tags(record: FileRecord, generator: Optional[TagGenerator] = None) -> List[str]:
    """Union a record's existing tags with generated ones, existing first."""
    generator = generator or TagGenerator()
    merged = record.tag_set
    for tag in generator.generate(record.name, record.mime_type):
        merged = add_tag(merged, tag)

    logger.debug(f"Merged tags for {record.id!r}: {merged}")
    return merged
