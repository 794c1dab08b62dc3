"""Base class for all runtime plugins.

A plugin answers two questions about a project directory: does it belong
to this runtime (match), and what Dockerfile builds it (generate).
generate() is a fixed pipeline; subclasses only supply the pieces:

    scan manifest -> resolve version -> default parameters
        -> port -> merge overrides -> render
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from dockgen.config import Settings, get_settings
from dockgen.runtime.errors import PortAcquisitionError
from dockgen.runtime.manifest import find_manifest, has_manifest
from dockgen.runtime.params import build_parameters, merged_overrides
from dockgen.runtime.prompt import ClickPortPrompt, PortPrompt
from dockgen.runtime.render import render_template
from dockgen.runtime.types import ManifestFile, RuntimeName

PORT_KEY = "Port"


class RuntimeDetector(ABC):
    """Abstract base class for runtime plugins.

    Instances hold only read-only collaborators (settings, logger, prompt)
    and keep no state between calls.
    """

    #: Identifier of the runtime
    name: RuntimeName

    #: Glob patterns for the runtime's manifests, highest priority first
    manifest_patterns: tuple[str, ...] = ()

    #: Human-readable runtime label used in log lines
    display_name: str = ""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
        prompt: Optional[PortPrompt] = None,
    ):
        self.settings = settings or get_settings()
        self.log = logger or logging.getLogger(type(self).__module__)
        self.prompt = prompt or ClickPortPrompt(
            label=self.settings.prompt_label,
            default=self.settings.default_port,
        )

    # -- contract ---------------------------------------------------------

    @abstractmethod
    def resolve_version(self, path: Path) -> str:
        """Return the toolchain version to pin. Must never raise."""
        ...

    @abstractmethod
    def default_parameters(
        self, path: Path, version: str, manifest: Optional[ManifestFile]
    ) -> dict[str, str]:
        """Return the computed template parameters, excluding the port."""
        ...

    @abstractmethod
    def template(self) -> str:
        """Return the Dockerfile template text."""
        ...

    def match(self, path: Path) -> bool:
        if has_manifest(Path(path), self.manifest_patterns):
            self.log.info("Detected %s project", self.display_name)
            return True
        self.log.debug("%s project not detected", self.display_name)
        return False

    def generate(self, path: Path, *overrides: Optional[Mapping[str, object]]) -> bytes:
        """Render the Dockerfile for the project at path.

        Override mappings are applied in order after the defaults are
        computed, so a later mapping wins over an earlier one.

        Raises:
            RenderError: the template is invalid or fails to render.
            PortAcquisitionError: strict_port is set and the prompt failed.
        """
        path = Path(path)

        manifest = find_manifest(path, self.manifest_patterns)
        if manifest is None:
            self.log.warning(
                "Could not locate a %s project file in %s; entry name left empty",
                self.display_name,
                path,
            )

        version = self.resolve_version(path)
        defaults = self.default_parameters(path, version, manifest)
        self._log_defaults(defaults)

        extra = merged_overrides(*overrides)
        if PORT_KEY not in extra:
            defaults[PORT_KEY] = self._acquire_port()

        params = build_parameters(defaults, extra)
        return render_template(self.template(), params, name=f"{self.name.value}.Dockerfile")

    # -- helpers ----------------------------------------------------------

    def _acquire_port(self) -> str:
        result = self.prompt()
        if result.ok:
            return result.port
        if self.settings.strict_port:
            raise PortAcquisitionError(f"could not obtain port: {result.error}")
        self.log.warning(
            "Port prompt failed (%s); using default port %s",
            result.error,
            self.settings.default_port,
        )
        return self.settings.default_port

    def _log_defaults(self, defaults: Mapping[str, str]) -> None:
        width = max((len(k) for k in defaults), default=0)
        lines = "\n".join(f"  {k.ljust(width)} : {v}" for k, v in defaults.items())
        self.log.info("Detected %s defaults\n%s", self.display_name, lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name.value!r})"
