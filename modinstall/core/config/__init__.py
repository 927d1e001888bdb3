"""Configuration — workspace settings loading."""

from modinstall.core.config.settings import (
    SETTINGS_FILE,
    Settings,
    WorkspaceSettings,
    find_settings_file,
    load_settings,
)

__all__ = [
    "SETTINGS_FILE",
    "Settings",
    "WorkspaceSettings",
    "find_settings_file",
    "load_settings",
]
