"""Version tag ordering and source folder scanning."""

from __future__ import annotations

import os
import re
from functools import cmp_to_key
from pathlib import Path
from typing import Iterable, List, Tuple

from .config import DEFAULT_LATEST_TAG
from .files import run_blocking
from .logging import get_logger

_SEMVER_PATTERN = re.compile(r"^\D(\d+)\.(\d+)\.(\d+)$")


class VersionTagError(ValueError):
    """Raised when a directory name is neither a release tag nor the latest tag."""


def parse_semver(tag: str) -> Tuple[int, int, int]:
    """Return the integer ``(major, minor, patch)`` encoded in ``tag``."""
    match = _SEMVER_PATTERN.match(tag)
    if match is None:
        raise VersionTagError(f"Not a version tag: {tag!r}")
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def version_sort_key(tag: str, *, latest: str = DEFAULT_LATEST_TAG) -> Tuple[int, int, int, int]:
    """Sort key placing every release before the latest tag."""
    if tag == latest:
        return (1, 0, 0, 0)
    return (0, *parse_semver(tag))


def compare_version_tags(a: str, b: str, *, latest: str = DEFAULT_LATEST_TAG) -> int:
    """Three-way comparison of two version tags."""
    key_a = version_sort_key(a, latest=latest)
    key_b = version_sort_key(b, latest=latest)
    if key_a == key_b:
        return 0
    return 1 if key_a > key_b else -1


def sort_version_tags(tags: Iterable[str], *, latest: str = DEFAULT_LATEST_TAG) -> List[str]:
    """Return tags newest first: ascending order, reversed."""
    ordered = sorted(tags, key=cmp_to_key(lambda a, b: compare_version_tags(a, b, latest=latest)))
    ordered.reverse()
    return ordered


class VersionScanner:
    """Lists the release folders found directly under the source root."""

    def __init__(self, *, latest: str = DEFAULT_LATEST_TAG) -> None:
        self.latest = latest
        self.logger = get_logger("versions")

    def list_directories(self, root: Path) -> List[str]:
        with os.scandir(root) as entries:
            return [entry.name for entry in entries if entry.is_dir(follow_symlinks=False)]

    async def scan(self, root: Path) -> List[str]:
        names = await run_blocking(self.list_directories, root)
        versions = sort_version_tags(names, latest=self.latest)
        self.logger.debug("Found %d versions in %s: %s", len(versions), root, ", ".join(versions))
        return versions


__all__ = [
    "VersionScanner",
    "VersionTagError",
    "compare_version_tags",
    "parse_semver",
    "sort_version_tags",
    "version_sort_key",
]
