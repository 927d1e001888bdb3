"""
Install models — what an installer produces.

InstallCommand is the only value handed back to callers. It describes
a command; nothing in this package runs it.
"""

from __future__ import annotations

from enum import IntFlag, StrEnum

from pydantic import BaseModel, ConfigDict


class ModuleInstallerType(StrEnum):
    """Package manager behind an installer."""

    UNKNOWN = "Unknown"
    CONDA = "Conda"
    PIP = "Pip"
    POETRY = "Poetry"
    PIPENV = "Pipenv"


class ModuleInstallFlags(IntFlag):
    """Install-mode modifiers.

    Installers act only on the bits they know. Any other bit, including
    integers outside the declared members, is ignored.
    """

    NONE = 0
    UPGRADE = 1
    UPDATE_DEPENDENCIES = 2
    REINSTALL = 4
    INSTALL_PIP = 8


class InstallCommand(BaseModel):
    """A resolved install command.

    With ``exec_path`` set, ``args`` is a literal invocation of that
    executable. Without it, the command runs as a module through the
    caller's interpreter: ``<interpreter> -m <module_name> <args...>``.
    """

    model_config = ConfigDict(frozen=True)

    exec_path: str | None = None
    module_name: str | None = None
    args: tuple[str, ...] = ()

    @property
    def is_module_run(self) -> bool:
        return self.exec_path is None

    def as_argv(self, interpreter: str = "python") -> list[str]:
        """Render the full argv, using ``interpreter`` for module runs."""
        if self.exec_path is not None:
            return [self.exec_path, *self.args]
        return [interpreter, "-m", self.module_name or "", *self.args]
