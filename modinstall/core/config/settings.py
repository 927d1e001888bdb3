"""
Workspace settings — reads .modinstall.yml into a read-only reader.

The file is optional. Without one every option takes its default, so
an empty proxy and no configured interpreter.

    http:
      proxy: http://proxy:8080
    python:
      interpreter: /usr/bin/python3
      version: 3.11.4
      env_type: venv
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from modinstall.core.errors import ConfigError
from modinstall.core.services import ConfigurationReader

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".modinstall.yml"


class HttpSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    proxy: str = ""


class PythonSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    interpreter: str | None = None
    version: str | None = None
    env_type: str | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_is_text(cls, value: Any) -> Any:
        # YAML reads 3.10 as the float 3.1; the original text is gone by now
        if isinstance(value, (int, float)):
            raise ValueError(f"python.version must be a quoted string (got {value!r}), e.g. \"3.10\"")
        return value


class Settings(BaseModel):
    """Validated shape of the settings file. Unknown sections are kept."""

    model_config = ConfigDict(extra="allow")

    http: HttpSettings = Field(default_factory=HttpSettings)
    python: PythonSettings = Field(default_factory=PythonSettings)


class WorkspaceSettings(ConfigurationReader):
    """``ConfigurationReader`` backed by a validated ``Settings`` model."""

    def __init__(self, settings: Settings | None = None, source: Path | None = None):
        self._settings = settings or Settings()
        self._source = source

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def source(self) -> Path | None:
        """File the settings came from (None when defaults are in use)."""
        return self._source

    def get(self, section: str, option: str, default: str = "") -> str:
        data = self._settings.model_dump()
        block = data.get(section)
        if not isinstance(block, dict):
            return default
        value = block.get(option)
        if value is None:
            return default
        return str(value)

    @classmethod
    def from_mapping(cls, data: dict[str, Any], source: Path | None = None) -> WorkspaceSettings:
        try:
            settings = Settings.model_validate(data)
        except ValidationError as e:
            where = source or "settings"
            raise ConfigError(f"Invalid settings in {where}: {e}") from e
        return cls(settings, source=source)


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for .modinstall.yml from ``start_dir`` (default: cwd) upward."""
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        if current.parent == current:
            break
        current = current.parent

    return None


def load_settings(path: Path | None = None, start_dir: Path | None = None) -> WorkspaceSettings:
    """Load workspace settings.

    Args:
        path: Explicit settings file. Must exist when given.
        start_dir: Where to start searching when ``path`` is None.

    Raises:
        ConfigError: If an explicit file is missing, or any file is unreadable
            or does not hold a YAML mapping of valid settings.
    """
    if path is None:
        path = find_settings_file(start_dir)
        if path is None:
            logger.debug("No %s found, using defaults", SETTINGS_FILE)
            return WorkspaceSettings()
    elif not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    return WorkspaceSettings.from_mapping(data, source=path)
