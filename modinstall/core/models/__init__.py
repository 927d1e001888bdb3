"""
Domain models — Pydantic value objects for installer resolution.

All models are re-exported here for convenient access:

    from modinstall.core.models import InterpreterInfo, InstallCommand, Product
"""

from modinstall.core.models.environment import (
    EnvironmentRef,
    EnvironmentType,
    InterpreterInfo,
    PythonVersion,
    ResourceScope,
    is_resource,
)
from modinstall.core.models.install import (
    InstallCommand,
    ModuleInstallerType,
    ModuleInstallFlags,
)
from modinstall.core.models.product import (
    PRODUCT_NAMES,
    Product,
    translate_product_to_module,
)

__all__ = [
    # environment.py
    "EnvironmentRef",
    "EnvironmentType",
    # install.py
    "InstallCommand",
    "InterpreterInfo",
    "ModuleInstallFlags",
    "ModuleInstallerType",
    # product.py
    "PRODUCT_NAMES",
    "Product",
    "PythonVersion",
    "ResourceScope",
    "is_resource",
    "translate_product_to_module",
]
