"""Runtime registry: probes plugins in a fixed order, first match wins.

Default order:
  go.mod                          → Go
  *.csproj / *.fsproj / *.vbproj  → .NET

The order is part of the registry's contract, not an accident of
registration: when a directory satisfies several plugins, the earlier one
is chosen.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional, Union

from dockgen.config import Settings
from dockgen.runtime.base import RuntimeDetector
from dockgen.runtime.errors import NoRuntimeDetectedError, UnknownRuntimeError
from dockgen.runtime.go import GoRuntime
from dockgen.runtime.net import NetRuntime
from dockgen.runtime.prompt import PortPrompt
from dockgen.runtime.types import RuntimeName

logger = logging.getLogger(__name__)


class RuntimeRegistry:
    """Ordered collection of runtime plugins."""

    def __init__(self, detectors: Iterable[RuntimeDetector]):
        self.detectors: tuple[RuntimeDetector, ...] = tuple(detectors)
        names = [d.name for d in self.detectors]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate runtimes in registry: {names}")

    def __iter__(self):
        return iter(self.detectors)

    def __len__(self) -> int:
        return len(self.detectors)

    @property
    def names(self) -> list[RuntimeName]:
        return [d.name for d in self.detectors]

    def get(self, name: Union[RuntimeName, str]) -> RuntimeDetector:
        """Look a plugin up by RuntimeName or its string value."""
        try:
            wanted = RuntimeName(name)
        except ValueError as exc:
            raise UnknownRuntimeError(f"unknown runtime: {name}") from exc
        for detector in self.detectors:
            if detector.name is wanted:
                return detector
        raise UnknownRuntimeError(f"runtime not registered: {wanted.value}")

    def detect(self, path: Path) -> Optional[RuntimeDetector]:
        """Return the first plugin whose match() accepts path, or None."""
        path = Path(path)
        for detector in self.detectors:
            if detector.match(path):
                logger.debug("Runtime %s selected for %s", detector.name.value, path)
                return detector
        logger.info("No supported runtime detected in %s", path)
        return None

    def generate(
        self, path: Path, *overrides: Optional[Mapping[str, object]]
    ) -> tuple[RuntimeName, bytes]:
        """Detect the runtime and render its Dockerfile.

        Raises:
            NoRuntimeDetectedError: no plugin matched.
            RenderError / PortAcquisitionError: from the matched plugin.
        """
        detector = self.detect(path)
        if detector is None:
            raise NoRuntimeDetectedError(path)
        return detector.name, detector.generate(path, *overrides)


def default_registry(
    settings: Optional[Settings] = None,
    prompt: Optional[PortPrompt] = None,
    logger: Optional[logging.Logger] = None,
) -> RuntimeRegistry:
    """Registry with every built-in runtime in priority order."""
    return RuntimeRegistry([
        GoRuntime(settings=settings, logger=logger, prompt=prompt),
        NetRuntime(settings=settings, logger=logger, prompt=prompt),
    ])
