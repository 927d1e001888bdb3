"""
Product check adapter — "is this product installed" via the module probe.
"""

from __future__ import annotations

import logging

from modinstall.core.models.environment import (
    InterpreterInfo,
    ResourceScope,
    is_resource,
)
from modinstall.core.models.product import Product, translate_product_to_module
from modinstall.core.services import ProductInstallChecker, PythonExecutionFactory

logger = logging.getLogger(__name__)


class ModuleProductChecker(ProductInstallChecker):
    """A product counts as installed when its module is importable.

    A probe that cannot run reports the product as missing.
    """

    def __init__(self, execution_factory: PythonExecutionFactory):
        self._factory = execution_factory

    def is_installed(self, product: Product, env: ResourceScope | InterpreterInfo) -> bool:
        module = translate_product_to_module(product)
        try:
            if is_resource(env):
                proc = self._factory.create(resource=env)
            else:
                proc = self._factory.create(python_path=env.path)
            return proc.is_module_installed(module)
        except Exception as e:
            logger.debug("Probe for %s failed: %s", module, e)
            return False
