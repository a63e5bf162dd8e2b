"""Actions module: naming, tag edits and file list views."""

from .naming import (
    NAME_PATTERN,
    apply_convention,
    convention_example,
    split_words,
    suggest_name,
    suggest_name_for,
)
from .tag_editor import add_tag, remove_tag, merge_generated_tags
from .views import ViewFilter, filter_view, format_file_size, recent_files

__all__ = [
    "NAME_PATTERN",
    "apply_convention",
    "convention_example",
    "split_words",
    "suggest_name",
    "suggest_name_for",
    "add_tag",
    "remove_tag",
    "merge_generated_tags",
    "ViewFilter",
    "filter_view",
    "format_file_size",
    "recent_files",
]
