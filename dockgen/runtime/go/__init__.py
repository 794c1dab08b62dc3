"""Go runtime plugin.

Detects Go modules by go.mod and renders a golang -> distroless Dockerfile.
"""

from pathlib import Path
from typing import Optional

from dockgen.runtime.base import RuntimeDetector
from dockgen.runtime.go.defaults import GO_TEMPLATE, MANIFEST_PATTERNS
from dockgen.runtime.go.gomod import binary_name, parse_gomod, resolve_go_version
from dockgen.runtime.types import ManifestFile, RuntimeName


class GoRuntime(RuntimeDetector):
    name = RuntimeName.GO
    manifest_patterns = MANIFEST_PATTERNS
    display_name = "Go"

    def resolve_version(self, path: Path) -> str:
        return resolve_go_version(path, self.settings.default_go_version, self.log)

    def default_parameters(
        self, path: Path, version: str, manifest: Optional[ManifestFile]
    ) -> dict[str, str]:
        module = parse_gomod(path).get("module", "") if manifest else ""
        return {
            "Version": version,
            "Module": module,
            "BinaryName": binary_name(module),
        }

    def template(self) -> str:
        return GO_TEMPLATE


__all__ = ["GoRuntime", "resolve_go_version"]
