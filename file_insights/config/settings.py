"""
Configuration Management System
===============================

Provides dataclass-based configuration with YAML file loading support.
All settings are validated and have sensible defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml

from file_insights.config.preferences import NamingConvention
from file_insights.config.rules import SENSITIVE_PATTERNS
from file_insights.utils.exceptions import ConfigurationError
from file_insights.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ScoringConfig:
    """Importance scoring configuration.

    Attributes:
        max_score: Upper clamp for importance scores.
        important_threshold: Minimum score for the Important Documents group.
    """
    max_score: int = 5
    important_threshold: int = 4

    def __post_init__(self):
        if self.max_score < 1:
            raise ConfigurationError(
                f"max_score must be positive, got {self.max_score}",
                config_key="scoring.max_score",
                expected_type="int",
            )
        if not 0 <= self.important_threshold <= self.max_score:
            raise ConfigurationError(
                f"important_threshold must be between 0 and {self.max_score}, "
                f"got {self.important_threshold}",
                config_key="scoring.important_threshold",
                expected_type="int",
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringConfig":
        """Create ScoringConfig from dictionary."""
        if not data:
            return cls()
        return cls(
            max_score=int(data.get("max_score", cls.max_score)),
            important_threshold=int(data.get("important_threshold", cls.important_threshold)),
        )


@dataclass
class InsightsConfig:
    """Collection insight configuration.

    Attributes:
        sensitive_patterns: Name fragments that flag a file as sensitive.
        recent_limit: Number of files in the recently-modified list.
    """
    sensitive_patterns: Tuple[str, ...] = SENSITIVE_PATTERNS
    recent_limit: int = 8

    def __post_init__(self):
        patterns = self.sensitive_patterns
        if not isinstance(patterns, (list, tuple)) or not all(isinstance(p, str) for p in patterns):
            raise ConfigurationError(
                f"sensitive_patterns must be a list of strings, got {patterns!r}",
                config_key="insights.sensitive_patterns",
                expected_type="list of str",
            )
        self.sensitive_patterns = tuple(p.lower() for p in patterns if p)
        if self.recent_limit < 1:
            raise ConfigurationError(
                f"recent_limit must be positive, got {self.recent_limit}",
                config_key="insights.recent_limit",
                expected_type="int",
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InsightsConfig":
        """Create InsightsConfig from dictionary."""
        if not data:
            return cls()
        return cls(
            sensitive_patterns=data.get("sensitive_patterns", SENSITIVE_PATTERNS),
            recent_limit=int(data.get("recent_limit", cls.recent_limit)),
        )


@dataclass
class ViewConfig:
    """File list view configuration.

    Attributes:
        list_limit: Number of most recent files shown in the file list.
    """
    list_limit: int = 9

    def __post_init__(self):
        if self.list_limit < 1:
            raise ConfigurationError(
                f"list_limit must be positive, got {self.list_limit}",
                config_key="views.list_limit",
                expected_type="int",
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewConfig":
        """Create ViewConfig from dictionary."""
        if not data:
            return cls()
        return cls(list_limit=int(data.get("list_limit", cls.list_limit)))


@dataclass
class PreferencesConfig:
    """User preference defaults and storage location.

    Attributes:
        naming_convention: Default naming convention for suggested names.
        preferences_file: YAML file holding saved user preferences.
    """
    naming_convention: str = NamingConvention.CAMEL_CASE.value
    preferences_file: Path = field(
        default_factory=lambda: Path.home() / ".smart_file_insights" / "preferences.yaml"
    )

    def __post_init__(self):
        try:
            NamingConvention(self.naming_convention)
        except ValueError:
            raise ConfigurationError(
                f"Unknown naming convention: {self.naming_convention}",
                config_key="preferences.naming_convention",
                expected_type=" | ".join(c.value for c in NamingConvention),
            )

    @property
    def convention(self) -> NamingConvention:
        """The default naming convention as an enum member."""
        return NamingConvention(self.naming_convention)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PreferencesConfig":
        """Create PreferencesConfig from dictionary."""
        if not data:
            return cls()
        prefs_file = data.get("preferences_file")
        return cls(
            naming_convention=data.get("naming_convention", cls.naming_convention),
            preferences_file=(
                Path(prefs_file).expanduser() if prefs_file else cls().preferences_file
            ),
        )


@dataclass
class Config:
    """Main configuration container.

    Aggregates all configuration sections and provides loading from YAML.
    """
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    insights: InsightsConfig = field(default_factory=InsightsConfig)
    views: ViewConfig = field(default_factory=ViewConfig)
    preferences: PreferencesConfig = field(default_factory=PreferencesConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the configuration file. If None, looks for
                        config.yaml in the current directory.

        Returns:
            Config instance with loaded settings.

        Raises:
            yaml.YAMLError: If config file is not valid YAML.
            ConfigurationError: If a setting has an invalid value.
        """
        if config_path is None:
            config_path = Path("config.yaml")
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping",
                expected_type="mapping",
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            scoring=ScoringConfig.from_dict(data.get("scoring", {})),
            insights=InsightsConfig.from_dict(data.get("insights", {})),
            views=ViewConfig.from_dict(data.get("views", {})),
            preferences=PreferencesConfig.from_dict(data.get("preferences", {})),
        )

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        data = {
            "scoring": {
                "max_score": self.scoring.max_score,
                "important_threshold": self.scoring.important_threshold,
            },
            "insights": {
                "sensitive_patterns": list(self.insights.sensitive_patterns),
                "recent_limit": self.insights.recent_limit,
            },
            "views": {
                "list_limit": self.views.list_limit,
            },
            "preferences": {
                "naming_convention": self.preferences.naming_convention,
                "preferences_file": str(self.preferences.preferences_file),
            },
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to {config_path}")
