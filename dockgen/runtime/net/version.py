""".NET SDK version resolution.

Sources, first hit wins:
  1. global.json            sdk.version, truncated to major.minor
  2. project files          <TargetFramework>netX.Y</TargetFramework>
  3. configured default     (current LTS)

A broken or empty source is treated as absent; resolution never raises.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from dockgen.runtime.manifest import iter_manifests
from dockgen.runtime.net.defaults import (
    GLOBAL_JSON,
    PROJECT_FILE_PATTERNS,
    TARGET_FRAMEWORK_RE,
)
from dockgen.runtime.versions import extract_major_minor

logger = logging.getLogger(__name__)


def resolve_net_version(
    directory: Path,
    default: str,
    log: Optional[logging.Logger] = None,
) -> str:
    """Return the .NET SDK major.minor version to target."""
    log = log or logger
    directory = Path(directory)

    version = version_from_global_json(directory, log)
    if version:
        log.info("Detected .NET SDK version from %s: %s", GLOBAL_JSON, version)
        return version

    found = version_from_project_files(directory, log)
    if found:
        source, version = found
        log.info("Detected .NET TargetFramework from %s: %s", source, version)
        return version

    log.info("No .NET version detected. Using default LTS: %s", default)
    return default


def version_from_global_json(directory: Path, log: logging.Logger = logger) -> Optional[str]:
    """Read sdk.version from global.json; None when absent or unusable."""
    path = directory / GLOBAL_JSON
    if not path.is_file():
        return None

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable %s: %s", GLOBAL_JSON, exc)
        return None

    if not isinstance(data, dict):
        return None
    sdk = data.get("sdk")
    if not isinstance(sdk, dict):
        return None
    raw = sdk.get("version")
    if not isinstance(raw, str) or not raw.strip():
        return None

    return extract_major_minor(raw.strip()) or None


def version_from_project_files(
    directory: Path, log: logging.Logger = logger
) -> Optional[tuple[str, str]]:
    """Scan project files for a TargetFramework marker.

    Returns (file name, version) for the first hit in pattern-priority
    order, or None.
    """
    for project_file in iter_manifests(directory, PROJECT_FILE_PATTERNS):
        try:
            content = project_file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            log.debug("Skipping unreadable project file %s: %s", project_file.name, exc)
            continue
        match = TARGET_FRAMEWORK_RE.search(content)
        if match:
            return project_file.name, match.group(1)
    return None
