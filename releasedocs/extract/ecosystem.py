"""Plugin listing extraction from the latest README."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from ..config import DEFAULT_LATEST_TAG, DEFAULT_PACKAGE_PREFIX
from ..files import read_text, run_blocking
from ..logging import get_logger
from ..models import PluginEntry
from .base import ParseIssue, ParseResult, find_package_readme, section_after

ECOSYSTEM_MARKER = "## Ecosystem"
ECOSYSTEM_SENTINEL = "- *More coming soon*"

_PLUGIN_PATTERN = re.compile(r"\[`([^`]+)`\]\(([^)]+)\) (.+)")


def merge_continuation_lines(lines: List[str], issues: List[ParseIssue]) -> List[str]:
    """Fold lines that do not start with ``-`` into the preceding list item."""
    merged: List[str] = []
    for line in lines:
        if line.startswith("-"):
            merged.append(line)
        elif merged:
            merged[-1] += " " + line
        else:
            issues.append(ParseIssue(detail="Continuation line before the first plugin", line=line))
    return merged


def parse_ecosystem(text: str) -> ParseResult[PluginEntry]:
    section = section_after(text.replace("\r\n", "\n"), ECOSYSTEM_MARKER)
    if section is None:
        return ParseResult.failure(f"Missing '{ECOSYSTEM_MARKER}' section")

    listing = section.split(ECOSYSTEM_SENTINEL, 1)[0]
    lines = [line for line in listing.split("\n") if line.strip()]

    result: ParseResult[PluginEntry] = ParseResult()
    for item in merge_continuation_lines(lines, result.issues):
        match = _PLUGIN_PATTERN.search(item)
        if match is None:
            result.issues.append(ParseIssue(detail="Unrecognised plugin entry", line=item))
            continue
        result.entries.append(PluginEntry(name=match.group(1), url=match.group(2), description=match.group(3)))
    return result


class EcosystemExtractor:
    """Reads the plugin listing from the latest release folder."""

    def __init__(
        self,
        source_root: Path,
        *,
        latest: str = DEFAULT_LATEST_TAG,
        package_prefix: str = DEFAULT_PACKAGE_PREFIX,
    ) -> None:
        self.source_root = source_root
        self.latest = latest
        self.package_prefix = package_prefix
        self.logger = get_logger("extract.ecosystem")

    async def extract(self) -> List[PluginEntry]:
        readme = await run_blocking(find_package_readme, self.source_root / self.latest, self.package_prefix)
        text = await read_text(readme)
        plugins = parse_ecosystem(text).unwrap(readme)
        self.logger.debug("Extracted %d plugins from %s", len(plugins), readme)
        return plugins


__all__ = [
    "ECOSYSTEM_MARKER",
    "ECOSYSTEM_SENTINEL",
    "EcosystemExtractor",
    "merge_continuation_lines",
    "parse_ecosystem",
]
