"""Core data models shared across releasedocs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Tuple


@dataclass(frozen=True)
class TocEntry:
    """One document listed in a version's table of contents."""

    file_name: str
    name: str
    source_file: Path
    destination_file: Path
    slug: str
    link: str
    version: str


@dataclass(frozen=True)
class PluginEntry:
    """A plugin listed in the ecosystem section."""

    name: str
    url: str
    description: str


@dataclass(frozen=True)
class DocsIndex:
    """Ordered versions and their tables of contents for a single run."""

    versions: Tuple[str, ...]
    toc: Mapping[str, Tuple[TocEntry, ...]] = field(default_factory=dict)

    def entries(self) -> List[TocEntry]:
        """Flatten the index into one worklist, version order then document order."""
        flattened: List[TocEntry] = []
        for version in self.versions:
            flattened.extend(self.toc.get(version, ()))
        return flattened
