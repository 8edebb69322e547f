"""Rewrites upstream markdown documents into site content files."""

from __future__ import annotations

import re
from typing import Dict, List

from .config import DEFAULT_LATEST_TAG, DEFAULT_UPSTREAM_DOCS_URL, default_workers
from .files import ensure_dir, read_text, write_text
from .frontmatter import render_front_matter
from .logging import get_logger
from .models import DocsIndex, TocEntry
from .pool import map_limit

PAGE_LAYOUT = "docs_page.html"

# GitHub-only banner at the top of every upstream document.
_HEADER_PATTERN = re.compile(r'\A<h1 align="center">Fastify</h1>\n')


def strip_header(content: str) -> str:
    return _HEADER_PATTERN.sub("", content, count=1)


def rewrite_links(content: str, version: str, *, upstream_docs_url: str = DEFAULT_UPSTREAM_DOCS_URL) -> str:
    """Point absolute upstream docs links at the versioned site pages."""
    return content.replace(upstream_docs_url, f"/docs/{version}")


class DocumentTransformer:
    """Copies every ToC entry into the content tree with front matter."""

    def __init__(
        self,
        *,
        latest: str = DEFAULT_LATEST_TAG,
        upstream_docs_url: str = DEFAULT_UPSTREAM_DOCS_URL,
        workers: int | None = None,
    ) -> None:
        self.latest = latest
        self.upstream_docs_url = upstream_docs_url
        self.workers = workers or default_workers()
        self.logger = get_logger("transform")

    def front_matter(self, entry: TocEntry) -> Dict[str, str]:
        fields = {
            "title": entry.name,
            "layout": PAGE_LAYOUT,
            "path": entry.link,
            "version": entry.version,
        }
        if entry.version == self.latest:
            fields["github_url"] = f"{self.upstream_docs_url}/{entry.file_name}"
        return fields

    def render_document(self, source_text: str, entry: TocEntry) -> str:
        content = strip_header(source_text)
        content = rewrite_links(content, entry.version, upstream_docs_url=self.upstream_docs_url)
        return render_front_matter(self.front_matter(entry)) + content

    async def transform_entry(self, entry: TocEntry) -> TocEntry:
        await ensure_dir(entry.destination_file.parent)
        source_text = await read_text(entry.source_file)
        await write_text(entry.destination_file, self.render_document(source_text, entry))
        self.logger.debug("Wrote %s", entry.destination_file)
        return entry

    async def transform_all(self, index: DocsIndex) -> List[TocEntry]:
        entries = index.entries()
        self.logger.info("Transforming %d documents across %d versions", len(entries), len(index.versions))
        return await map_limit(entries, self.workers, self.transform_entry)


__all__ = ["DocumentTransformer", "PAGE_LAYOUT", "rewrite_links", "strip_header"]
