"""Manifest scanner: locates project-descriptor files in a project root.

Patterns are tried in the order given; the first pattern with at least one
match wins and later patterns are never consulted. Matches within a pattern
are sorted by name so the same tree always yields the same manifest.
Only the top level of the directory is scanned.
"""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional

from dockgen.runtime.types import ManifestFile

logger = logging.getLogger(__name__)


def iter_manifests(directory: Path, patterns: Sequence[str]) -> Iterator[Path]:
    """Yield every manifest file, pattern-priority first, then by name."""
    directory = Path(directory)
    for pattern in patterns:
        for match in _glob_files(directory, pattern):
            yield match


def find_manifest(directory: Path, patterns: Sequence[str]) -> Optional[ManifestFile]:
    """Return the first manifest found, or None when no pattern matches."""
    directory = Path(directory)
    for pattern in patterns:
        matches = _glob_files(directory, pattern)
        if matches:
            first = matches[0].resolve()
            logger.debug("Manifest %s matched pattern %s", first.name, pattern)
            return ManifestFile(path=first, entry_name=first.stem)
    return None


def has_manifest(directory: Path, patterns: Sequence[str]) -> bool:
    """True when any pattern matches at least one file."""
    directory = Path(directory)
    return any(_glob_files(directory, pattern) for pattern in patterns)


def _glob_files(directory: Path, pattern: str) -> list[Path]:
    if not directory.is_dir():
        return []
    try:
        return sorted(p for p in directory.glob(pattern) if p.is_file())
    except OSError as exc:
        logger.debug("Glob %s failed in %s: %s", pattern, directory, exc)
        return []
