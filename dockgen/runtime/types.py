"""Shared types for the runtime plugins."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class RuntimeName(str, Enum):
    """Identifier of a supported runtime."""

    NET = "net"
    GO = "go"


@dataclass(frozen=True)
class ManifestFile:
    """A project-descriptor file discovered in the project root.

    entry_name is the file name without its extension and doubles as the
    build's entry artifact (``MyApp.csproj`` -> ``MyApp``).
    """

    path: Path
    entry_name: str


@dataclass(frozen=True)
class PortResult:
    """Outcome of asking for the container port.

    Exactly one of port / error is set.
    """

    port: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.port is None) == (self.error is None):
            raise ValueError("PortResult needs exactly one of port or error")

    @property
    def ok(self) -> bool:
        return self.port is not None and self.error is None

    @classmethod
    def success(cls, port: str) -> "PortResult":
        return cls(port=port)

    @classmethod
    def failure(cls, error: str) -> "PortResult":
        return cls(error=error)
