"""go.mod parser for Go toolchain version and module detection.

Parses go.mod with a simple line-by-line parser; no external library needed.
"""

import logging
from pathlib import Path
from typing import Optional

from dockgen.runtime.go.defaults import DEFAULT_BINARY_NAME, GO_MOD
from dockgen.runtime.versions import extract_major_minor

logger = logging.getLogger(__name__)


def parse_gomod(repo_dir: Path) -> dict:
    """Parse go.mod and return a dict with module and go_version."""
    path = Path(repo_dir) / GO_MOD
    if not path.is_file():
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to read go.mod: %s", exc)
        return {}

    module = ""
    go_version = ""
    in_block = False

    for line in text.splitlines():
        stripped = line.split("//", 1)[0].strip()

        if stripped.endswith("("):
            in_block = True
        elif stripped == ")":
            in_block = False
        elif in_block:
            continue
        elif stripped.startswith("module "):
            module = stripped[7:].strip().strip('"')
        elif stripped.startswith("go "):
            go_version = stripped[3:].strip()

    return {"module": module, "go_version": go_version}


def resolve_go_version(
    repo_dir: Path,
    default: str,
    log: Optional[logging.Logger] = None,
) -> str:
    """Return the Go toolchain major.minor version to target.

    The go directive wins ("go 1.22.3" -> "1.22"); otherwise default.
    """
    log = log or logger
    raw = parse_gomod(repo_dir).get("go_version", "")
    if raw:
        version = extract_major_minor(raw)
        log.info("Detected Go version from %s: %s", GO_MOD, version)
        return version

    log.info("No Go version detected. Using default: %s", default)
    return default


def binary_name(module: str) -> str:
    """Last path segment of the module path, skipping /vN suffixes."""
    segments = [s for s in module.split("/") if s]
    while len(segments) > 1 and _is_major_suffix(segments[-1]):
        segments.pop()
    return segments[-1] if segments else DEFAULT_BINARY_NAME


def _is_major_suffix(segment: str) -> bool:
    return segment.startswith("v") and segment[1:].isdigit()
