"""
Smart Tag Generation
====================

Derives descriptive tags from a file's name and MIME type. Every rule in
the tag table that fires contributes its tag.
"""

from typing import List, Optional, Sequence

from file_insights.config.rules import TAG_RULES, TagRule
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)


class TagGenerator:
    """Generates tags from keyword rules.

    Tags are returned without duplicates, in rule-table order, so the
    output is deterministic across runs.
    """

    def __init__(self, rules: Optional[Sequence[TagRule]] = None):
        """Initialize the generator.

        Args:
            rules: Tag rules to apply. Uses the default table if None.
        """
        self.rules = tuple(rules) if rules is not None else TAG_RULES

    def generate(self, name: Optional[str], mime_type: Optional[str]) -> List[str]:
        """Generate tags for a file.

        Args:
            name: File name. None or empty yields no name tags.
            mime_type: MIME type. None or empty yields no type tags.

        Returns:
            Unique tags in rule order.
        """
        tags: List[str] = []
        for rule in self.rules:
            if rule.tag not in tags and rule.matches(name or "", mime_type or ""):
                tags.append(rule.tag)

        logger.debug(f"Generated tags for {name!r}: {tags}")
        return tags


_default_generator = TagGenerator()


def generate_tags(name: Optional[str], mime_type: Optional[str]) -> List[str]:
    """Generate tags with the default rule table."""
    return _default_generator.generate(name, mime_type)
