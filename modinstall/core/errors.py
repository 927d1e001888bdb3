"""
Library exceptions.

The resolution algorithm itself never raises these. They surface from
the pieces around it: settings loading, probe setup and installer
selection.
"""

from __future__ import annotations


class ModInstallError(Exception):
    """Base class for all modinstall errors."""


class ConfigError(ModInstallError):
    """Raised when the workspace settings file is invalid."""


class ProbeError(ModInstallError):
    """Raised when an environment probe cannot be set up."""


class NoInstallerError(ModInstallError):
    """Raised when no registered installer supports an environment."""
