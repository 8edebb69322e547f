"""Parse results and source layout helpers shared by the extractors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

README_NAME = "README.md"


@dataclass
class ParseIssue:
    """A line (or section) that does not have the expected shape."""

    detail: str
    line: Optional[str] = None


class ExtractionError(RuntimeError):
    """Raised when a README section cannot be parsed."""

    def __init__(self, message: str, issues: Sequence[ParseIssue], source: Path | None = None) -> None:
        super().__init__(message)
        self.issues = list(issues)
        self.source = source


class SourceLayoutError(RuntimeError):
    """Raised when a release folder does not contain the expected package directory."""


@dataclass
class ParseResult(Generic[T]):
    """Either the parsed entries or the issues that prevented parsing."""

    entries: List[T] = field(default_factory=list)
    issues: List[ParseIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @classmethod
    def failure(cls, detail: str, line: str | None = None) -> "ParseResult[T]":
        return cls(issues=[ParseIssue(detail=detail, line=line)])

    def unwrap(self, source: Path | None = None) -> List[T]:
        """Return the entries, raising :class:`ExtractionError` on any issue."""
        if self.ok:
            return self.entries
        where = f" in {source}" if source is not None else ""
        lines = [f"{len(self.issues)} parse issue(s){where}:"]
        for issue in self.issues:
            lines.append(f"  - {issue.detail}" + (f": {issue.line!r}" if issue.line is not None else ""))
        raise ExtractionError("\n".join(lines), self.issues, source)


def section_after(text: str, marker: str) -> Optional[str]:
    """Return the text after the first occurrence of ``marker``, if any."""
    _, found, rest = text.partition(marker)
    return rest if found else None


def find_package_readme(version_dir: Path, prefix: str) -> Path:
    """Return the README of the first package directory named ``prefix*``."""
    candidates = sorted(
        child for child in version_dir.iterdir() if child.is_dir() and child.name.startswith(prefix)
    )
    if not candidates:
        raise SourceLayoutError(f"No directory matching '{prefix}*' in {version_dir}")
    return candidates[0] / README_NAME


__all__ = [
    "ExtractionError",
    "ParseIssue",
    "ParseResult",
    "README_NAME",
    "SourceLayoutError",
    "find_package_readme",
    "section_after",
]
