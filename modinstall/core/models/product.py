"""
Products — logical tools a caller may ask to install.

A product is not always importable under its own name (the torch
profiler installs as ``torch-tb-profiler`` and imports as
``torch_tb_profiler``), so installers go through
``translate_product_to_module`` rather than using the value directly.
"""

from __future__ import annotations

from enum import StrEnum


class Product(StrEnum):
    PIP = "pip"
    ENSUREPIP = "ensurepip"
    PYTHON = "python"
    PYTEST = "pytest"
    UNITTEST = "unittest"
    PYLINT = "pylint"
    FLAKE8 = "flake8"
    MYPY = "mypy"
    BANDIT = "bandit"
    PYDOCSTYLE = "pydocstyle"
    PYCODESTYLE = "pycodestyle"
    PROSPECTOR = "prospector"
    PYLAMA = "pylama"
    BLACK = "black"
    AUTOPEP8 = "autopep8"
    YAPF = "yapf"
    ISORT = "isort"
    TENSORBOARD = "tensorboard"
    TORCH_PROFILER_INSTALL_NAME = "torchProfilerInstallName"
    TORCH_PROFILER_IMPORT_NAME = "torchProfilerImportName"


# Human-readable names, used in telemetry and CLI output
PRODUCT_NAMES: dict[Product, str] = {
    Product.PIP: "pip",
    Product.ENSUREPIP: "ensurepip",
    Product.PYTHON: "python",
    Product.PYTEST: "pytest",
    Product.UNITTEST: "unittest",
    Product.PYLINT: "pylint",
    Product.FLAKE8: "flake8",
    Product.MYPY: "mypy",
    Product.BANDIT: "bandit",
    Product.PYDOCSTYLE: "pydocstyle",
    Product.PYCODESTYLE: "pycodestyle",
    Product.PROSPECTOR: "prospector",
    Product.PYLAMA: "pylama",
    Product.BLACK: "black",
    Product.AUTOPEP8: "autopep8",
    Product.YAPF: "yapf",
    Product.ISORT: "isort",
    Product.TENSORBOARD: "tensorboard",
    Product.TORCH_PROFILER_INSTALL_NAME: "torch-tb-profiler",
    Product.TORCH_PROFILER_IMPORT_NAME: "torch-tb-profiler",
}

_PRODUCT_MODULES: dict[Product, str] = {
    Product.TORCH_PROFILER_INSTALL_NAME: "torch-tb-profiler",
    Product.TORCH_PROFILER_IMPORT_NAME: "torch_tb_profiler",
}


def translate_product_to_module(product: Product) -> str:
    """Module name a product is installed or imported under."""
    return _PRODUCT_MODULES.get(product, product.value)
