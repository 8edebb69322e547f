"""Pipeline orchestration for the docs and ecosystem builds."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from .config import ReleaseDocsConfig
from .data_files import DataFileWriter
from .extract import EcosystemExtractor, TocExtractor
from .index_pages import IndexPageGenerator
from .logging import get_logger
from .models import DocsIndex, PluginEntry
from .pool import map_limit
from .transform import DocumentTransformer
from .versions import VersionScanner


class BuildError(RuntimeError):
    """Raised when both pipelines failed."""

    def __init__(self, message: str, errors: Sequence[BaseException]) -> None:
        super().__init__(message)
        self.errors = list(errors)


@dataclass
class BuildOutcome:
    """What a successful run produced."""

    index: DocsIndex
    plugins: List[PluginEntry]


class Orchestrator:
    """Runs the docs pipeline and the ecosystem pipeline side by side."""

    def __init__(self, source: Path, dest: Path, config: ReleaseDocsConfig | None = None) -> None:
        self.source = source
        self.dest = dest
        self.config = config or ReleaseDocsConfig()
        self.logger = get_logger("orchestrator")

        latest = self.config.source.latest_tag
        prefix = self.config.source.package_prefix
        workers = self.config.workers
        self.scanner = VersionScanner(latest=latest)
        self.toc_extractor = TocExtractor(source, dest, package_prefix=prefix)
        self.ecosystem_extractor = EcosystemExtractor(source, latest=latest, package_prefix=prefix)
        self.transformer = DocumentTransformer(
            latest=latest,
            upstream_docs_url=self.config.links.upstream_docs_url,
            workers=workers,
        )
        self.index_pages = IndexPageGenerator(dest, layouts_url=self.config.links.layouts_url, workers=workers)
        self.data_files = DataFileWriter(dest)

    async def build_index(self) -> DocsIndex:
        versions = await self.scanner.scan(self.source)
        tocs = await map_limit(versions, self.config.workers, self.toc_extractor.extract)
        return DocsIndex(
            versions=tuple(versions),
            toc={version: tuple(toc) for version, toc in zip(versions, tocs)},
        )

    async def build_docs(self) -> DocsIndex:
        index = await self.build_index()
        await self.data_files.write_docs(index)
        await self.transformer.transform_all(index)
        await self.index_pages.write_all(index.versions)
        return index

    async def build_ecosystem(self) -> List[PluginEntry]:
        plugins = await self.ecosystem_extractor.extract()
        await self.data_files.write_ecosystem(plugins)
        return plugins

    async def run(self) -> BuildOutcome:
        """Run both pipelines to completion and re-raise any failure afterwards."""
        self.logger.info("Processing releases from %s into %s", self.source, self.dest)
        docs, plugins = await asyncio.gather(self.build_docs(), self.build_ecosystem(), return_exceptions=True)

        errors = [outcome for outcome in (docs, plugins) if isinstance(outcome, BaseException)]
        for error in errors:
            self.logger.debug("Pipeline failed: %r", error)
        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise BuildError("Both the docs and the ecosystem pipelines failed", errors) from errors[0]

        self.logger.info("Releases processed correctly")
        return BuildOutcome(index=docs, plugins=plugins)  # type: ignore[arg-type]


__all__ = ["BuildError", "BuildOutcome", "Orchestrator"]
