"""YAML data files consumed by the site generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from .files import ensure_dir, write_text
from .logging import get_logger
from .models import DocsIndex, PluginEntry, TocEntry


def data_dir(dest_root: Path) -> Path:
    return dest_root / "data"


def toc_entry_payload(entry: TocEntry) -> Dict[str, Any]:
    # source_file and destination_file are working data, not part of the site data.
    return {
        "fileName": entry.file_name,
        "name": entry.name,
        "slug": entry.slug,
        "link": entry.link,
        "version": entry.version,
    }


def docs_payload(index: DocsIndex) -> Dict[str, Any]:
    return {
        "versions": list(index.versions),
        "toc": {
            version: [toc_entry_payload(entry) for entry in index.toc.get(version, ())]
            for version in index.versions
        },
    }


def ecosystem_payload(plugins: Sequence[PluginEntry]) -> Dict[str, List[Dict[str, str]]]:
    return {
        "plugins": [
            {"name": plugin.name, "url": plugin.url, "description": plugin.description}
            for plugin in plugins
        ]
    }


def dump_yaml(payload: Any) -> str:
    return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False, allow_unicode=True)


class DataFileWriter:
    """Serialises payloads to YAML files under ``<dest>/data``."""

    def __init__(self, dest_root: Path) -> None:
        self.dest_root = dest_root
        self.logger = get_logger("data_files")

    @property
    def docs_path(self) -> Path:
        return data_dir(self.dest_root) / "docs.yml"

    @property
    def ecosystem_path(self) -> Path:
        return data_dir(self.dest_root) / "ecosystem.yml"

    async def write(self, path: Path, payload: Any) -> Path:
        content = dump_yaml(payload)
        await ensure_dir(path.parent)
        await write_text(path, content)
        return path

    async def write_docs(self, index: DocsIndex) -> Path:
        path = await self.write(self.docs_path, docs_payload(index))
        self.logger.info("Docs data file dumped in %s", path)
        return path

    async def write_ecosystem(self, plugins: Sequence[PluginEntry]) -> Path:
        path = await self.write(self.ecosystem_path, ecosystem_payload(plugins))
        self.logger.info("Ecosystem file dumped in %s", path)
        return path


__all__ = [
    "DataFileWriter",
    "docs_payload",
    "dump_yaml",
    "ecosystem_payload",
    "toc_entry_payload",
]
