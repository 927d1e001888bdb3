"""
Environment references — the target of an install.

An environment reference is one of two shapes:

    ResourceScope    an unresolved scope (a workspace folder, or no
                     folder at all). No interpreter is pinned yet.
    InterpreterInfo  a concrete interpreter: executable path, version
                     and environment kind.

Code must branch on the shape (``is_resource``) before touching any
interpreter-only field.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentType(StrEnum):
    """Kind of Python environment an interpreter lives in."""

    UNKNOWN = "Unknown"
    CONDA = "Conda"
    VIRTUALENV = "VirtualEnv"
    VENV = "Venv"
    PIPENV = "Pipenv"
    PYENV = "Pyenv"
    POETRY = "Poetry"
    SYSTEM = "System"
    WINDOWS_STORE = "WindowsStore"

    @classmethod
    def parse(cls, value: str | None) -> EnvironmentType:
        """Case-insensitive lookup by value or member name; UNKNOWN otherwise."""
        if not value:
            return cls.UNKNOWN
        needle = value.strip().lower()
        for member in cls:
            if needle in (member.value.lower(), member.name.lower()):
                return member
        return cls.UNKNOWN


class PythonVersion(BaseModel):
    """Semantic interpreter version. Any component may be unknown."""

    model_config = ConfigDict(frozen=True)

    major: int | None = None
    minor: int | None = None
    patch: int | None = None

    @classmethod
    def parse(cls, text: str) -> PythonVersion:
        """Parse ``"3.11.4"``-style strings. Unparseable parts become None."""
        parts: list[int | None] = []
        for raw in text.strip().split(".")[:3]:
            parts.append(int(raw) if raw.isascii() and raw.isdecimal() else None)
        parts.extend([None] * (3 - len(parts)))
        return cls(major=parts[0], minor=parts[1], patch=parts[2])


class ResourceScope(BaseModel):
    """An environment scope with no concrete interpreter yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resource"] = "resource"
    uri: str | None = None


class InterpreterInfo(BaseModel):
    """A resolved interpreter."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["interpreter"] = "interpreter"
    path: str
    version: PythonVersion | None = None
    env_type: EnvironmentType = EnvironmentType.UNKNOWN


EnvironmentRef = Annotated[ResourceScope | InterpreterInfo, Field(discriminator="kind")]


def is_resource(env: ResourceScope | InterpreterInfo) -> bool:
    """Whether ``env`` is an unresolved resource scope."""
    return isinstance(env, ResourceScope)
