"""Table-of-contents extraction from a release README."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..config import DEFAULT_PACKAGE_PREFIX
from ..files import read_text, run_blocking
from ..logging import get_logger
from ..models import TocEntry
from .base import ParseIssue, ParseResult, find_package_readme, section_after

DOCUMENTATION_MARKER = "## Documentation"

_ENTRY_PATTERN = re.compile(r'master/docs/([A-Za-z0-9_-]+\.md)"><code><b>(.+)</b>')
# Whitespace-only lines count as blank.
_BLANK_LINE = re.compile(r"\n[ \t]*\n")
_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\n)+")


def docs_destination(dest_root: Path, version: str) -> Path:
    return dest_root / "content" / "docs" / version


def parse_toc(text: str, *, version: str, readme_path: Path, dest_root: Path) -> ParseResult[TocEntry]:
    """Parse the Documentation section of ``text`` into ToC entries.

    The section runs from the marker to the first blank line and every
    non-blank line in it must be a link to ``master/docs/<file>.md``.
    """
    section = section_after(text.replace("\r\n", "\n"), DOCUMENTATION_MARKER)
    if section is None:
        return ParseResult.failure(f"Missing '{DOCUMENTATION_MARKER}' section")

    parts = _BLANK_LINE.split(_LEADING_BLANK_LINES.sub("", section), maxsplit=1)
    if len(parts) < 2:
        return ParseResult.failure("Documentation section is not followed by a blank line")

    lines = [line for line in parts[0].split("\n") if line.strip()]
    if not lines:
        return ParseResult.failure("Documentation section is empty")

    docs_dir = readme_path.parent / "docs"
    dest_dir = docs_destination(dest_root, version)
    result: ParseResult[TocEntry] = ParseResult()
    for line in lines:
        match = _ENTRY_PATTERN.search(line)
        if match is None:
            result.issues.append(ParseIssue(detail="Unrecognised documentation entry", line=line))
            continue
        file_name, name = match.group(1), match.group(2)
        slug = Path(file_name).stem
        result.entries.append(
            TocEntry(
                file_name=file_name,
                name=name,
                source_file=docs_dir / file_name,
                destination_file=dest_dir / file_name,
                slug=slug,
                link=f"/docs/{version}/{slug}",
                version=version,
            )
        )
    return result


class TocExtractor:
    """Reads and parses the table of contents of each release."""

    def __init__(self, source_root: Path, dest_root: Path, *, package_prefix: str = DEFAULT_PACKAGE_PREFIX) -> None:
        self.source_root = source_root
        self.dest_root = dest_root
        self.package_prefix = package_prefix
        self.logger = get_logger("extract.toc")

    async def extract(self, version: str) -> List[TocEntry]:
        readme = await run_blocking(find_package_readme, self.source_root / version, self.package_prefix)
        text = await read_text(readme)
        entries = parse_toc(text, version=version, readme_path=readme, dest_root=self.dest_root).unwrap(readme)
        self.logger.debug("Extracted %d documents for %s from %s", len(entries), version, readme)
        return entries


__all__ = ["DOCUMENTATION_MARKER", "TocExtractor", "docs_destination", "parse_toc"]
