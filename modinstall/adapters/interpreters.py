"""
Interpreter adapter — the active interpreter comes from settings.

There is no discovery: a resource scope resolves to the interpreter
named under ``python.interpreter``, or to nothing.
"""

from __future__ import annotations

from modinstall.core.models.environment import (
    EnvironmentType,
    InterpreterInfo,
    PythonVersion,
    ResourceScope,
)
from modinstall.core.services import ConfigurationReader, InterpreterService


class SettingsInterpreterService(InterpreterService):
    def __init__(self, config: ConfigurationReader):
        self._config = config

    def get_active_interpreter(self, resource: ResourceScope) -> InterpreterInfo | None:
        path = self._config.get("python", "interpreter", "")
        if not path:
            return None
        version = self._config.get("python", "version", "")
        return InterpreterInfo(
            path=path,
            version=PythonVersion.parse(version) if version else None,
            env_type=EnvironmentType.parse(self._config.get("python", "env_type", "")),
        )
