"""Variable providers consulted by substitution in place of direct environment access."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

__all__ = ["VariableProvider", "EnvironmentProvider", "MappingProvider"]


@runtime_checkable
class VariableProvider(Protocol):
    """Lookup of a variable name to its text, or None when undefined."""

    def get(self, name: str) -> str | None: ...


class EnvironmentProvider:
    """Reads process environment variables at lookup time."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "EnvironmentProvider()"


class MappingProvider:
    """Serves variables from a fixed mapping; used by tests and embedders."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables: dict[str, str] = dict(variables or {})

    def get(self, name: str) -> str | None:
        return self._variables.get(name)

    def __repr__(self) -> str:
        return f"MappingProvider({self._variables!r})"
