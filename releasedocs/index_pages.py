"""Static landing pages for the docs section."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from .config import DEFAULT_LAYOUTS_URL, default_workers
from .extract.toc import docs_destination
from .files import ensure_dir, write_text
from .frontmatter import render_front_matter
from .logging import get_logger
from .pool import map_limit

DOCS_INDEX_LAYOUT = "docs_index.html"
VERSION_INDEX_LAYOUT = "docs_version_index.html"


class IndexPageGenerator:
    """Writes ``content/docs/index.md`` and one ``index.md`` per version."""

    def __init__(self, dest_root: Path, *, layouts_url: str = DEFAULT_LAYOUTS_URL, workers: int | None = None) -> None:
        self.dest_root = dest_root
        self.layouts_url = layouts_url
        self.workers = workers or default_workers()
        self.logger = get_logger("index_pages")

    def docs_index_fields(self) -> Dict[str, str]:
        return {
            "title": "Documentation",
            "layout": DOCS_INDEX_LAYOUT,
            "path": "/docs",
            "github_url": f"{self.layouts_url}/{DOCS_INDEX_LAYOUT}",
        }

    def version_index_fields(self, version: str) -> Dict[str, str]:
        return {
            "title": f"Documentation - {version}",
            "layout": VERSION_INDEX_LAYOUT,
            "path": f"/docs/{version}",
            "version": version,
            "github_url": f"{self.layouts_url}/{VERSION_INDEX_LAYOUT}",
        }

    async def _write(self, path: Path, fields: Dict[str, str]) -> Path:
        await ensure_dir(path.parent)
        self.logger.info("Creating %s", path)
        await write_text(path, render_front_matter(fields))
        return path

    async def write_docs_index(self) -> Path:
        return await self._write(self.dest_root / "content" / "docs" / "index.md", self.docs_index_fields())

    async def write_version_index(self, version: str) -> Path:
        path = docs_destination(self.dest_root, version) / "index.md"
        return await self._write(path, self.version_index_fields(version))

    async def write_all(self, versions: Sequence[str]) -> List[Path]:
        written = [await self.write_docs_index()]
        written.extend(await map_limit(versions, self.workers, self.write_version_index))
        return written


__all__ = ["DOCS_INDEX_LAYOUT", "IndexPageGenerator", "VERSION_INDEX_LAYOUT"]
