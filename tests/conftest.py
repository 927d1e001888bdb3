"""
Shared test fixtures — in-memory fakes for every installer collaborator.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from modinstall.core.models.environment import (
    EnvironmentType,
    InterpreterInfo,
    PythonVersion,
    ResourceScope,
)
from modinstall.core.models.product import Product
from modinstall.core.services import (
    ConfigurationReader,
    InstallerServices,
    InterpreterService,
    ProductInstallChecker,
    PythonExecutionFactory,
    PythonProcess,
    TelemetryReporter,
)


class FakeProcess(PythonProcess):
    def __init__(self, modules: set[str], raises: Exception | None = None):
        self.modules = modules
        self.raises = raises
        self.probed: list[str] = []

    def is_module_installed(self, name: str) -> bool:
        self.probed.append(name)
        if self.raises:
            raise self.raises
        return name in self.modules


class FakeExecutionFactory(PythonExecutionFactory):
    def __init__(
        self,
        modules: set[str] | None = None,
        create_raises: Exception | None = None,
        probe_raises: Exception | None = None,
    ):
        self.modules = modules if modules is not None else {"pip"}
        self.create_raises = create_raises
        self.probe_raises = probe_raises
        self.calls: list[dict[str, Any]] = []

    def create(self, resource=None, python_path=None) -> PythonProcess:
        self.calls.append({"resource": resource, "python_path": python_path})
        if self.create_raises:
            raise self.create_raises
        return FakeProcess(self.modules, raises=self.probe_raises)


class FakeProductChecker(ProductInstallChecker):
    def __init__(self, installed: set[Product] | None = None):
        self.installed = installed or set()
        self.calls: list[tuple[Product, Any]] = []

    def is_installed(self, product, env) -> bool:
        self.calls.append((product, env))
        return product in self.installed


class FakeInterpreterService(InterpreterService):
    def __init__(self, interpreter: InterpreterInfo | None = None):
        self.interpreter = interpreter
        self.calls: list[ResourceScope] = []

    def get_active_interpreter(self, resource):
        self.calls.append(resource)
        return self.interpreter


class FakeConfig(ConfigurationReader):
    def __init__(self, values: dict[tuple[str, str], str] | None = None):
        self.values = values or {}

    def get(self, section, option, default=""):
        return self.values.get((section, option), default)


class RecordingTelemetry(TelemetryReporter):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.events: list[tuple[str, dict[str, Any]]] = []

    def send_event(self, event_name, properties):
        self.events.append((event_name, properties))
        if self.fail:
            raise RuntimeError("telemetry sink down")


@pytest.fixture
def make_services() -> Callable[..., InstallerServices]:
    """Builder for ``InstallerServices`` made of fakes.

    Keyword arguments:
        modules: modules the probed environment can import (default {"pip"}).
        create_raises / probe_raises: errors raised by the execution factory.
        installed: products the product checker reports as installed.
        interpreter: what the interpreter service resolves a scope to.
        proxy: value of the ``http.proxy`` setting.
        telemetry_fails: make every telemetry call raise.
    """

    def _make(
        modules: set[str] | None = None,
        create_raises: Exception | None = None,
        probe_raises: Exception | None = None,
        installed: set[Product] | None = None,
        interpreter: InterpreterInfo | None = None,
        proxy: str | None = None,
        telemetry_fails: bool = False,
    ) -> InstallerServices:
        config = {("http", "proxy"): proxy} if proxy is not None else {}
        return InstallerServices(
            execution_factory=FakeExecutionFactory(modules, create_raises, probe_raises),
            product_checker=FakeProductChecker(installed),
            interpreters=FakeInterpreterService(interpreter),
            config=FakeConfig(config),
            telemetry=RecordingTelemetry(fail=telemetry_fails),
        )

    return _make


@pytest.fixture
def workspace() -> ResourceScope:
    return ResourceScope(uri="file:///work/project")


@pytest.fixture
def python3() -> InterpreterInfo:
    return InterpreterInfo(
        path="/usr/bin/python3",
        version=PythonVersion(major=3, minor=11, patch=4),
        env_type=EnvironmentType.VENV,
    )
