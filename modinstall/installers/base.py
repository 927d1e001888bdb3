"""
Installer base — the contract every package-manager variant implements.

An installer answers two questions about a target environment:

    is_supported(env)                          can I install into it?
    resolve_install_command(module, env, flags) which command would?

It never runs the command. Collaborators (probes, settings, telemetry)
come from the ``InstallerServices`` bundle passed to the constructor.

To add a package manager:
    1. Subclass ModuleInstaller
    2. Implement the identity properties, is_supported and
       resolve_install_command
    3. Register it in the InstallerRegistry
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from modinstall.core.models.environment import InterpreterInfo, ResourceScope
from modinstall.core.models.install import (
    InstallCommand,
    ModuleInstallerType,
    ModuleInstallFlags,
)
from modinstall.core.models.product import Product, translate_product_to_module
from modinstall.core.services import InstallerServices

logger = logging.getLogger(__name__)


class ModuleInstaller(ABC):
    """Abstract base class for module installers."""

    def __init__(self, services: InstallerServices):
        self.services = services

    @property
    @abstractmethod
    def name(self) -> str:
        """Internal key (e.g., 'Pip')."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable label."""

    @property
    @abstractmethod
    def type(self) -> ModuleInstallerType:
        """Package manager this installer drives."""

    @property
    @abstractmethod
    def priority(self) -> int:
        """Ordering among candidates. Lower sorts first."""

    @abstractmethod
    def is_supported(self, env: ResourceScope | InterpreterInfo) -> bool:
        """Whether this installer can target ``env``.

        May probe the environment. MUST NOT raise: probe failures
        mean "not supported".
        """

    @abstractmethod
    def resolve_install_command(
        self,
        module_name: str,
        env: ResourceScope | InterpreterInfo,
        flags: ModuleInstallFlags = ModuleInstallFlags.NONE,
    ) -> InstallCommand:
        """Describe the command that installs ``module_name`` into ``env``.

        Read-only with respect to ``env`` and every collaborator.
        """

    # ── Helpers ─────────────────────────────────────────────────

    @staticmethod
    def module_name_for(product: Product | str) -> str:
        """Module name for a product; plain module names pass through."""
        if isinstance(product, Product):
            return translate_product_to_module(product)
        return product

    def _send_telemetry(self, event_name: str, properties: dict[str, Any]) -> None:
        """Forward an event to the telemetry sink, discarding any failure."""
        try:
            self.services.telemetry.send_event(event_name, properties)
        except Exception:
            logger.debug("Telemetry event %s dropped", event_name, exc_info=True)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} priority={self.priority}>"
