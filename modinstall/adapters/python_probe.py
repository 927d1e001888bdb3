"""
Python probe adapter — asks a real interpreter what it can import.

Each probe spawns ``<python> -c <snippet> <module>`` and reads the exit
code. The module name travels as an argument, never as source text.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from modinstall.core.errors import ProbeError
from modinstall.core.models.environment import ResourceScope
from modinstall.core.services import (
    InterpreterService,
    PythonExecutionFactory,
    PythonProcess,
)

logger = logging.getLogger(__name__)

_FIND_SPEC = (
    "import importlib.util, sys\n"
    "sys.exit(0 if importlib.util.find_spec(sys.argv[1]) else 1)"
)


def default_python() -> str | None:
    """First ``python3`` / ``python`` on PATH."""
    return shutil.which("python3") or shutil.which("python")


class SubprocessPythonProcess(PythonProcess):
    """Probe handle bound to one interpreter path."""

    def __init__(self, python_path: str, timeout: float = 30):
        self.python_path = python_path
        self.timeout = timeout

    def is_module_installed(self, name: str) -> bool:
        cmd = [self.python_path, "-c", _FIND_SPEC, name]
        logger.debug("Probing %s in %s", name, self.python_path)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"Probe for {name!r} timed out after {self.timeout}s") from e
        except OSError as e:
            raise ProbeError(f"Cannot run {self.python_path}: {e}") from e
        return result.returncode == 0

    def __repr__(self) -> str:
        return f"<SubprocessPythonProcess python={self.python_path!r}>"


class SubprocessExecutionFactory(PythonExecutionFactory):
    """Builds subprocess probes.

    A resource scope is mapped to its active interpreter through
    ``interpreters``; with none configured the first Python on PATH is
    used.
    """

    def __init__(self, interpreters: InterpreterService, timeout: float = 30):
        self._interpreters = interpreters
        self._timeout = timeout

    def create(
        self,
        resource: ResourceScope | None = None,
        python_path: str | None = None,
    ) -> PythonProcess:
        if python_path is None:
            interpreter = self._interpreters.get_active_interpreter(resource or ResourceScope())
            python_path = interpreter.path if interpreter else default_python()
        if not python_path:
            raise ProbeError("No Python interpreter available to probe")
        return SubprocessPythonProcess(python_path, timeout=self._timeout)
