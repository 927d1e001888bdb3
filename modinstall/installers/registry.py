"""
Installer registry — picks the installer for an environment.

Installers are ordered by ascending priority; installers with equal
priority keep their registration order. Selection walks that order and
returns the first installer whose ``is_supported`` says yes.
"""

from __future__ import annotations

import logging
from typing import Any

from modinstall.core.errors import NoInstallerError
from modinstall.core.models.environment import InterpreterInfo, ResourceScope
from modinstall.core.models.install import (
    InstallCommand,
    ModuleInstallerType,
    ModuleInstallFlags,
)
from modinstall.core.models.product import Product
from modinstall.core.services import InstallerServices
from modinstall.installers.base import ModuleInstaller
from modinstall.installers.pip import PipInstaller

logger = logging.getLogger(__name__)


class InstallerRegistry:
    """Registry and selector for module installers."""

    def __init__(self) -> None:
        self._installers: dict[str, ModuleInstaller] = {}

    def register(self, installer: ModuleInstaller) -> None:
        name = installer.name
        if name in self._installers:
            logger.warning("Overwriting existing installer: %s", name)
        self._installers[name] = installer
        logger.debug("Registered installer: %s (priority %d)", name, installer.priority)

    def unregister(self, name: str) -> None:
        self._installers.pop(name, None)

    def get(self, name: str) -> ModuleInstaller | None:
        return self._installers.get(name)

    def list_installers(self) -> list[ModuleInstaller]:
        """Registered installers, lowest priority first."""
        return sorted(self._installers.values(), key=lambda i: i.priority)

    def installer_status(self, env: ResourceScope | InterpreterInfo) -> dict[str, dict[str, Any]]:
        """Support status of every installer for ``env``. Never raises."""
        status = {}
        for installer in self.list_installers():
            try:
                supported = installer.is_supported(env)
            except Exception:
                supported = False
            status[installer.name] = {
                "name": installer.name,
                "display_name": installer.display_name,
                "type": installer.type.value,
                "priority": installer.priority,
                "supported": supported,
            }
        return status

    def select(self, env: ResourceScope | InterpreterInfo) -> ModuleInstaller | None:
        """First supported installer for ``env``, or None."""
        for installer in self.list_installers():
            try:
                if installer.is_supported(env):
                    return installer
            except Exception as e:
                logger.debug("Installer %s support check raised: %s", installer.name, e)
        return None

    def resolve(
        self,
        product: Product | str,
        env: ResourceScope | InterpreterInfo,
        flags: ModuleInstallFlags = ModuleInstallFlags.NONE,
        installer: ModuleInstaller | None = None,
    ) -> InstallCommand:
        """Resolve the install command for a product or module name.

        Args:
            product: A ``Product`` or a plain module name.
            env: Target environment.
            flags: Install-mode modifiers.
            installer: Use this installer instead of selecting one.

        Bootstrapping pip itself skips selection: pip cannot be supported
        where it is missing, so the first pip-type installer handles it.

        Raises:
            NoInstallerError: If no registered installer supports ``env``.
        """
        chosen = installer
        if chosen is None and _is_pip(product):
            chosen = next(
                (i for i in self.list_installers() if i.type == ModuleInstallerType.PIP),
                None,
            )
        if chosen is None:
            chosen = self.select(env)
        if chosen is None:
            raise NoInstallerError(
                f"No installer supports {env!r} "
                f"(registered: {', '.join(self._installers) or 'none'})"
            )
        module_name = chosen.module_name_for(product)
        logger.info("Resolving %s with %s installer", module_name, chosen.name)
        return chosen.resolve_install_command(module_name, env, flags)


def default_registry(services: InstallerServices) -> InstallerRegistry:
    """Registry holding the built-in installers."""
    registry = InstallerRegistry()
    registry.register(PipInstaller(services))
    return registry


def _is_pip(product: Product | str) -> bool:
    return ModuleInstaller.module_name_for(product) == ModuleInstaller.module_name_for(Product.PIP)
