"""Runtime plugins: detect a project's runtime and generate its Dockerfile.

Public API:
    default_registry() -> RuntimeRegistry
    RuntimeRegistry.detect(path) -> RuntimeDetector | None
    RuntimeDetector.generate(path, *overrides) -> bytes
"""

from dockgen.runtime.base import RuntimeDetector
from dockgen.runtime.errors import (
    DockgenError,
    NoRuntimeDetectedError,
    PortAcquisitionError,
    RenderError,
    TemplateExecutionError,
    TemplateInvalidError,
    UnknownRuntimeError,
)
from dockgen.runtime.go import GoRuntime
from dockgen.runtime.net import NetRuntime
from dockgen.runtime.prompt import ClickPortPrompt, PortPrompt, StaticPortPrompt
from dockgen.runtime.registry import RuntimeRegistry, default_registry
from dockgen.runtime.types import ManifestFile, PortResult, RuntimeName

__all__ = [
    "RuntimeDetector",
    "RuntimeRegistry",
    "default_registry",
    "NetRuntime",
    "GoRuntime",
    "RuntimeName",
    "ManifestFile",
    "PortResult",
    "PortPrompt",
    "ClickPortPrompt",
    "StaticPortPrompt",
    "DockgenError",
    "RenderError",
    "TemplateInvalidError",
    "TemplateExecutionError",
    "PortAcquisitionError",
    "NoRuntimeDetectedError",
    "UnknownRuntimeError",
]
