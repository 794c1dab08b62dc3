""".NET runtime plugin.

Detects C#, F# and VB.NET projects by their project file and renders a
multi-stage sdk -> aspnet Dockerfile.
"""

from pathlib import Path
from typing import Optional

from dockgen.runtime.base import RuntimeDetector
from dockgen.runtime.net.defaults import NET_TEMPLATE, PROJECT_FILE_PATTERNS
from dockgen.runtime.net.version import resolve_net_version
from dockgen.runtime.types import ManifestFile, RuntimeName


class NetRuntime(RuntimeDetector):
    name = RuntimeName.NET
    manifest_patterns = PROJECT_FILE_PATTERNS
    display_name = ".NET"

    def resolve_version(self, path: Path) -> str:
        return resolve_net_version(path, self.settings.default_net_version, self.log)

    def default_parameters(
        self, path: Path, version: str, manifest: Optional[ManifestFile]
    ) -> dict[str, str]:
        return {
            "Version": version,
            "ProjectFile": manifest.entry_name if manifest else "",
            "PublishDir": self.settings.publish_dir,
        }

    def template(self) -> str:
        return NET_TEMPLATE


__all__ = ["NetRuntime", "resolve_net_version"]
