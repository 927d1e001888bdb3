"""
Pip installer — install modules with pip, or bootstrap pip itself.

Resolution for an ordinary module:

    [--proxy <http.proxy>] install -U [--force-reinstall] <module>

run as ``<interpreter> -m pip``. Argument order is fixed.

Resolution when the module is pip itself, most preferred first:
    1. ``<interpreter> -m ensurepip``    when ensurepip is installed
    2. ``<interpreter> <scripts>/get-pip.py``  otherwise

Each step of the pip bootstrap reports a PYTHON_INSTALL_PACKAGE
telemetry event naming the missing product.
"""

from __future__ import annotations

import logging

from modinstall.core.models.environment import (
    InterpreterInfo,
    ResourceScope,
    is_resource,
)
from modinstall.core.models.install import (
    InstallCommand,
    ModuleInstallerType,
    ModuleInstallFlags,
)
from modinstall.core.models.product import PRODUCT_NAMES, Product
from modinstall.core.observability.telemetry import EventName
from modinstall.installers.base import ModuleInstaller
from modinstall.scripts import GET_PIP_SCRIPT

logger = logging.getLogger(__name__)

# Executable used when no interpreter path can be resolved
FALLBACK_PYTHON = "python"


class PipInstaller(ModuleInstaller):
    """Installer for the pip package manager."""

    @property
    def name(self) -> str:
        return "Pip"

    @property
    def display_name(self) -> str:
        return "Pip"

    @property
    def type(self) -> ModuleInstallerType:
        return ModuleInstallerType.PIP

    @property
    def priority(self) -> int:
        return 0

    def is_supported(self, env: ResourceScope | InterpreterInfo) -> bool:
        return self._is_pip_available(env)

    def resolve_install_command(
        self,
        module_name: str,
        env: ResourceScope | InterpreterInfo,
        flags: ModuleInstallFlags = ModuleInstallFlags.NONE,
    ) -> InstallCommand:
        if module_name == self.module_name_for(Product.PIP):
            return self._bootstrap_pip(env)

        args: list[str] = []
        proxy = self.services.config.get("http", "proxy", "")
        if proxy:
            args.extend(["--proxy", proxy])
        args.extend(["install", "-U"])
        if flags & ModuleInstallFlags.REINSTALL:
            args.append("--force-reinstall")
        args.append(module_name)

        logger.debug("pip command for %s: %s", module_name, args)
        return InstallCommand(module_name="pip", args=tuple(args))

    # ── Pip bootstrap ───────────────────────────────────────────

    def _bootstrap_pip(self, env: ResourceScope | InterpreterInfo) -> InstallCommand:
        self._report_unavailable(Product.PIP, env)

        if self.services.product_checker.is_installed(Product.ENSUREPIP, env):
            logger.debug("pip missing, bootstrapping with ensurepip")
            return InstallCommand(module_name="ensurepip", args=())

        self._report_unavailable(Product.ENSUREPIP, env)

        if is_resource(env):
            interpreter = self.services.interpreters.get_active_interpreter(env)
        else:
            interpreter = env
        exec_path = interpreter.path if interpreter and interpreter.path else FALLBACK_PYTHON

        script = str(GET_PIP_SCRIPT)
        logger.debug("pip and ensurepip missing, bootstrapping with %s via %s", script, exec_path)
        return InstallCommand(exec_path=exec_path, args=(script,))

    def _report_unavailable(self, product: Product, env: ResourceScope | InterpreterInfo) -> None:
        self._send_telemetry(
            EventName.PYTHON_INSTALL_PACKAGE,
            {
                "installer": "unavailable",
                "requiredInstaller": ModuleInstallerType.PIP.value,
                "productName": PRODUCT_NAMES[product],
                "version": _version_label(env),
                "envType": None if is_resource(env) else env.env_type.value,
            },
        )

    # ── Probe ───────────────────────────────────────────────────

    def _is_pip_available(self, env: ResourceScope | InterpreterInfo) -> bool:
        factory = self.services.execution_factory
        try:
            if is_resource(env):
                proc = factory.create(resource=env)
            else:
                proc = factory.create(python_path=env.path)
            return proc.is_module_installed("pip")
        except Exception as e:
            logger.debug("pip probe failed for %r: %s", env, e)
            return False


def _version_label(env: ResourceScope | InterpreterInfo) -> str:
    """``major.minor.patch`` for telemetry; unknown or zero parts render empty."""
    if is_resource(env):
        return ""
    version = env.version
    if version is None:
        return ".."
    return f"{version.major or ''}.{version.minor or ''}.{version.patch or ''}"
