"""
File Records
============

Canonical file-metadata shape consumed by the insight engine.

Records come from an external provider (a cloud drive listing or a
design-tool project listing). Optional fields are explicit and every
accessor falls back to a documented neutral default instead of raising.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from file_insights.config.rules import FIGMA_MIME_TYPE, UNKNOWN_MIME_TYPE
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)

UNKNOWN_OWNER = "Unknown"
DEFAULT_FIGMA_OWNER = "You"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive values are taken as UTC. A trailing ``Z`` is accepted.

    Args:
        value: Timestamp string (or an existing datetime).

    Returns:
        Aware datetime, or None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unparseable timestamp: {value!r}")
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        logger.debug(f"Timestamp out of range: {value!r}")
        return None


def split_mime_type(mime_type: Optional[str]) -> Tuple[str, str]:
    """Split a MIME type into (category, subtype).

    Only the first two segments are used. Absent or malformed values map
    to ``("unknown", "unknown")``.
    """
    unknown_category, unknown_subtype = UNKNOWN_MIME_TYPE.split("/")
    if not mime_type or "/" not in mime_type:
        return unknown_category, unknown_subtype

    parts = mime_type.split("/")
    category, subtype = parts[0].strip(), parts[1].strip()
    if not category or not subtype:
        return unknown_category, unknown_subtype
    return category, subtype


@dataclass
class Owner:
    """A file owner as reported by the provider."""
    display_name: str = ""


@dataclass
class FileRecord:
    """File metadata supplied by a provider.

    The engine treats records as read-only input.

    Attributes:
        id: Opaque unique identifier.
        name: Display name. May be empty.
        mime_type: ``type/subtype`` media type, absent for some entries.
        modified_time: ISO-8601 modification timestamp.
        owners: Owners in provider order. May be empty.
        size: Decimal byte count as a string, absent for native documents.
        tags: User or generated tags in insertion order.
    """
    id: str
    name: str = ""
    mime_type: Optional[str] = None
    modified_time: Optional[str] = None
    owners: List[Owner] = field(default_factory=list)
    size: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    @property
    def effective_mime_type(self) -> str:
        """MIME type with ``unknown/unknown`` standing in for absent or malformed values."""
        if split_mime_type(self.mime_type) == tuple(UNKNOWN_MIME_TYPE.split("/")):
            return UNKNOWN_MIME_TYPE
        return self.mime_type

    @property
    def owner_name(self) -> str:
        """Display name of the first owner, or ``Unknown``."""
        if self.owners and self.owners[0].display_name:
            return self.owners[0].display_name
        return UNKNOWN_OWNER

    @property
    def size_bytes(self) -> int:
        """Size in bytes, 0 when absent or not a decimal number."""
        if self.size is None:
            return 0
        try:
            return max(int(str(self.size).strip()), 0)
        except ValueError:
            return 0

    @property
    def modified_at(self) -> Optional[datetime]:
        """Parsed modification time, or None when missing or malformed."""
        return parse_timestamp(self.modified_time)

    @property
    def tag_set(self) -> List[str]:
        """Tags de-duplicated, keeping first-insertion order."""
        return list(dict.fromkeys(self.tags))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        """Create a record from the provider's camelCase JSON shape.

        Args:
            data: Dictionary with ``id``, ``name``, ``mimeType``,
                ``modifiedTime``, ``owners``, ``size`` and ``tags`` keys.
                Any key may be missing.

        Returns:
            FileRecord with defaults for missing fields.
        """
        owners = [
            Owner(display_name=str(owner.get("displayName") or ""))
            for owner in (data.get("owners") or [])
            if isinstance(owner, dict)
        ]
        size = data.get("size")
        mime_type = data.get("mimeType")
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            mime_type=mime_type if isinstance(mime_type, str) else None,
            modified_time=data.get("modifiedTime"),
            owners=owners,
            size=str(size) if size is not None else None,
            tags=[str(tag) for tag in (data.get("tags") or [])],
        )

    @classmethod
    def from_figma(cls, data: Dict[str, Any], owner_name: Optional[str] = None) -> "FileRecord":
        """Adapt a design-tool project file to the canonical shape.

        Args:
            data: Dictionary with ``key``, ``name`` and ``lastModified``.
            owner_name: Name of the connected user, ``You`` if unknown.

        Returns:
            FileRecord with the design-tool MIME type and zero size.
        """
        return cls(
            id=str(data.get("key", "")),
            name=str(data.get("name") or ""),
            mime_type=FIGMA_MIME_TYPE,
            modified_time=data.get("lastModified"),
            owners=[Owner(display_name=owner_name or DEFAULT_FIGMA_OWNER)],
            size="0",
            tags=[str(tag) for tag in (data.get("tags") or [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the provider's camelCase JSON shape."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "mimeType": self.mime_type,
            "modifiedTime": self.modified_time,
            "owners": [{"displayName": owner.display_name} for owner in self.owners],
            "tags": list(self.tags),
        }
        if self.size is not None:
            data["size"] = self.size
        return data


def sort_by_recent(files: Sequence[FileRecord]) -> List[FileRecord]:
    """Sort files newest first.

    Files without a usable modification time go last. Ties keep their
    input order.
    """
    def sort_key(file: FileRecord):
        modified = file.modified_at
        if modified is None:
            return (1, 0.0)
        return (0, -modified.timestamp())

    return sorted(files, key=sort_key)
