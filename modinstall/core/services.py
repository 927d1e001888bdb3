"""
Collaborator contracts — what installers consume from the outside world.

Installers never construct their collaborators. They receive one
``InstallerServices`` bundle at construction time and look services
up on it, so tests can hand in fakes and hosts can wire in their own
implementations.

Default implementations live in ``modinstall.adapters``,
``modinstall.core.config`` and ``modinstall.core.observability``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from modinstall.core.models.environment import (
    InterpreterInfo,
    ResourceScope,
)
from modinstall.core.models.product import Product


class PythonProcess(ABC):
    """A handle on one Python environment that can answer probes."""

    @abstractmethod
    def is_module_installed(self, name: str) -> bool:
        """Whether ``name`` is importable in this environment."""


class PythonExecutionFactory(ABC):
    """Builds ``PythonProcess`` handles for a scope or an interpreter."""

    @abstractmethod
    def create(
        self,
        resource: ResourceScope | None = None,
        python_path: str | None = None,
    ) -> PythonProcess:
        """Create a process handle.

        Exactly one of ``resource`` / ``python_path`` is meaningful:
        a resource scope lets the factory pick the active interpreter,
        a path pins it. May raise when no interpreter can be used.
        """


class ProductInstallChecker(ABC):
    """Answers "is this product already installed in that environment"."""

    @abstractmethod
    def is_installed(
        self,
        product: Product,
        env: ResourceScope | InterpreterInfo,
    ) -> bool:
        ...


class InterpreterService(ABC):
    """Maps a resource scope to its currently active interpreter."""

    @abstractmethod
    def get_active_interpreter(self, resource: ResourceScope) -> InterpreterInfo | None:
        ...


class ConfigurationReader(ABC):
    """Read-only access to workspace settings."""

    @abstractmethod
    def get(self, section: str, option: str, default: str = "") -> str:
        ...


class TelemetryReporter(ABC):
    """Fire-and-forget event sink."""

    @abstractmethod
    def send_event(self, event_name: str, properties: dict[str, Any]) -> None:
        ...


@dataclass(frozen=True)
class InstallerServices:
    """Everything an installer needs to resolve a command."""

    execution_factory: PythonExecutionFactory
    product_checker: ProductInstallChecker
    interpreters: InterpreterService
    config: ConfigurationReader
    telemetry: TelemetryReporter
