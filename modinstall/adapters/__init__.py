"""Adapters — default collaborator implementations.

``build_services`` wires them into an ``InstallerServices`` bundle.
"""

from __future__ import annotations

from modinstall.adapters.interpreters import SettingsInterpreterService
from modinstall.adapters.products import ModuleProductChecker
from modinstall.adapters.python_probe import (
    SubprocessExecutionFactory,
    SubprocessPythonProcess,
)
from modinstall.core.observability.telemetry import LoggingTelemetryReporter
from modinstall.core.services import (
    ConfigurationReader,
    InstallerServices,
    TelemetryReporter,
)


def build_services(
    config: ConfigurationReader,
    telemetry: TelemetryReporter | None = None,
    probe_timeout: float = 30,
) -> InstallerServices:
    """Default services: settings-backed interpreters, subprocess probes."""
    interpreters = SettingsInterpreterService(config)
    factory = SubprocessExecutionFactory(interpreters, timeout=probe_timeout)
    return InstallerServices(
        execution_factory=factory,
        product_checker=ModuleProductChecker(factory),
        interpreters=interpreters,
        config=config,
        telemetry=telemetry or LoggingTelemetryReporter(),
    )


__all__ = [
    "ModuleProductChecker",
    "SettingsInterpreterService",
    "SubprocessExecutionFactory",
    "SubprocessPythonProcess",
    "build_services",
]
