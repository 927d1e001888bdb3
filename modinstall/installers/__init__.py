"""Installers — package-manager variants and their registry.

Public re-exports for convenient access.
"""

from modinstall.core.models.product import translate_product_to_module
from modinstall.installers.base import ModuleInstaller
from modinstall.installers.pip import PipInstaller
from modinstall.installers.registry import InstallerRegistry, default_registry

__all__ = [
    "InstallerRegistry",
    "ModuleInstaller",
    "PipInstaller",
    "default_registry",
    "translate_product_to_module",
]
