"""Configuration module for Smart File Insights."""

from .settings import (
    Config,
    ScoringConfig,
    InsightsConfig,
    ViewConfig,
    PreferencesConfig,
)
from .preferences import (
    NamingConvention,
    UserPreferences,
    PreferencesStore,
    InMemoryPreferencesStore,
    YamlPreferencesStore,
)

__all__ = [
    "Config",
    "ScoringConfig",
    "InsightsConfig",
    "ViewConfig",
    "PreferencesConfig",
    "NamingConvention",
    "UserPreferences",
    "PreferencesStore",
    "InMemoryPreferencesStore",
    "YamlPreferencesStore",
]
