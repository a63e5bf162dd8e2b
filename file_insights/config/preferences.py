"""
User Preferences
================

User preferences (currently the file naming convention) as an explicit
value. Loading and saving go through a ``PreferencesStore`` handed in by
the caller, never through ambient global state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional
import yaml

from file_insights.utils.exceptions import ErrorCode, PreferencesError
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)


class NamingConvention(Enum):
    """Word-joining styles for suggested file names."""
    CAMEL_CASE = "camelCase"
    KEBAB_CASE = "kebab-case"
    SNAKE_CASE = "snake_case"
    PASCAL_CASE = "PascalCase"


@dataclass(frozen=True)
class UserPreferences:
    """Saved user preferences."""
    naming_convention: NamingConvention = NamingConvention.CAMEL_CASE

    def to_dict(self) -> dict:
        """Convert to a YAML-friendly dictionary."""
        return {"naming_convention": self.naming_convention.value}


class PreferencesStore(ABC):
    """Load/save interface for user preferences."""

    @abstractmethod
    def load(self) -> UserPreferences:
        """Return the saved preferences, or defaults when none are saved."""

    @abstractmethod
    def save(self, preferences: UserPreferences) -> None:
        """Persist preferences."""


class InMemoryPreferencesStore(PreferencesStore):
    """Keeps preferences in memory. Useful for tests and embedding."""

    def __init__(self, preferences: Optional[UserPreferences] = None):
        self._preferences = preferences or UserPreferences()

    def load(self) -> UserPreferences:
        return self._preferences

    def save(self, preferences: UserPreferences) -> None:
        self._preferences = preferences


class YamlPreferencesStore(PreferencesStore):
    """Stores preferences in a small YAML file.

    Missing files and unknown stored values fall back to the defaults.
    """

    def __init__(self, path: Path, default: Optional[UserPreferences] = None):
        """Initialize the store.

        Args:
            path: Preferences file location.
            default: Preferences returned when nothing usable is saved.
        """
        self.path = Path(path)
        self.default = default or UserPreferences()

    def load(self) -> UserPreferences:
        """Load preferences from disk.

        Raises:
            PreferencesError: If the file exists but is not valid YAML.
        """
        if not self.path.exists():
            logger.debug(f"No preferences at {self.path}, using defaults")
            return self.default

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PreferencesError(
                "Preferences file is not valid YAML",
                path=str(self.path),
                cause=e,
            )

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences in {self.path}")
            return self.default

        value = data.get("naming_convention", self.default.naming_convention.value)
        try:
            convention = NamingConvention(value)
        except ValueError:
            logger.warning(f"Unknown naming convention '{value}', using default")
            convention = self.default.naming_convention

        return UserPreferences(naming_convention=convention)

    def save(self, preferences: UserPreferences) -> None:
        """Write preferences to disk, creating parent directories.

        Raises:
            PreferencesError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(preferences.to_dict(), f, default_flow_style=False)
        except OSError as e:
            raise PreferencesError(
                "Failed to save preferences",
                path=str(self.path),
                error_code=ErrorCode.PREFERENCES_SAVE_FAILED,
                cause=e,
            )

        logger.info(f"Saved preferences to {self.path}")
