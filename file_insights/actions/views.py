"""
File List Views
===============

Recent-file selection, view filters and size formatting for file lists.
"""

from enum import Enum
from typing import List, Sequence

from file_insights.config.rules import FOLDER_MIME_TYPE
from file_insights.engine.file_record import FileRecord, sort_by_recent


class ViewFilter(Enum):
    """File list filters."""
    ALL = "all"
    FILES = "files"
    FOLDERS = "folders"
    IMAGES = "images"
    DOCUMENTS = "documents"
    OTHERS = "others"


SIZE_UNITS = ("B", "KB", "MB", "GB")


def _mime_type(file: FileRecord) -> str:
    return (file.mime_type or "").lower()


def is_folder(file: FileRecord) -> bool:
    return _mime_type(file) == FOLDER_MIME_TYPE


def is_image(file: FileRecord) -> bool:
    return _mime_type(file).startswith("image/")


def is_document(file: FileRecord) -> bool:
    mime_type = _mime_type(file)
    return "document" in mime_type or "pdf" in mime_type


def matches_view(file: FileRecord, view: ViewFilter) -> bool:
    """Check whether a file belongs in a view."""
    if view == ViewFilter.FOLDERS:
        return is_folder(file)
    if view == ViewFilter.FILES:
        return not is_folder(file)
    if view == ViewFilter.IMAGES:
        return is_image(file)
    if view == ViewFilter.DOCUMENTS:
        return is_document(file)
    if view == ViewFilter.OTHERS:
        return not (is_image(file) or is_document(file) or is_folder(file))
    return True


def filter_view(files: Sequence[FileRecord], view: ViewFilter) -> List[FileRecord]:
    """Files matching a view, in input order."""
    return [file for file in files if matches_view(file, view)]


def recent_files(files: Sequence[FileRecord], limit: int) -> List[FileRecord]:
    """The ``limit`` most recently modified files, newest first."""
    return sort_by_recent(files)[:max(limit, 0)]


def format_file_size(size_bytes: int) -> str:
    """Format a byte count with one decimal, e.g. ``1536 -> "1.5 KB"``.

    Units step by 1024 and stop at GB.
    """
    size = float(max(size_bytes, 0))
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.1f} {SIZE_UNITS[unit_index]}"
