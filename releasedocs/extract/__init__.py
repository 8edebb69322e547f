"""README section extractors."""

from .base import ExtractionError, ParseIssue, ParseResult, SourceLayoutError, find_package_readme
from .ecosystem import EcosystemExtractor, parse_ecosystem
from .toc import TocExtractor, parse_toc

__all__ = [
    "EcosystemExtractor",
    "ExtractionError",
    "ParseIssue",
    "ParseResult",
    "SourceLayoutError",
    "TocExtractor",
    "find_package_readme",
    "parse_ecosystem",
    "parse_toc",
]
