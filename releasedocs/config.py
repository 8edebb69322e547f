"""Configuration loading for releasedocs (.releasedocs.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".releasedocs.yml"

DEFAULT_LATEST_TAG = "master"
DEFAULT_PACKAGE_PREFIX = "fastify-"
DEFAULT_UPSTREAM_DOCS_URL = "https://github.com/fastify/fastify/blob/master/docs"
DEFAULT_LAYOUTS_URL = "https://github.com/fastify/website/blob/master/src/website/layouts"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def default_workers() -> int:
    return (os.cpu_count() or 1) * 2


@dataclass
class SourceConfig:
    """Where releases live inside the source folder."""

    latest_tag: str = DEFAULT_LATEST_TAG
    package_prefix: str = DEFAULT_PACKAGE_PREFIX


@dataclass
class LinksConfig:
    """Upstream URLs rewritten into, or referenced from, generated pages."""

    upstream_docs_url: str = DEFAULT_UPSTREAM_DOCS_URL
    layouts_url: str = DEFAULT_LAYOUTS_URL


@dataclass
class ReleaseDocsConfig:
    """Represents the settings defined in .releasedocs.yml."""

    source: SourceConfig = field(default_factory=SourceConfig)
    links: LinksConfig = field(default_factory=LinksConfig)
    workers: int = field(default_factory=default_workers)


def load_config(config_path: Path | None = None) -> ReleaseDocsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path or Path.cwd())
    if not config_file.exists():
        return ReleaseDocsConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ReleaseDocsConfig()

    source_data = _as_dict(data.get("source"))
    latest_tag = _as_str(source_data.get("latest_tag"))
    if latest_tag:
        config.source.latest_tag = latest_tag
    package_prefix = _as_str(source_data.get("package_prefix"))
    if package_prefix:
        config.source.package_prefix = package_prefix

    links_data = _as_dict(data.get("links"))
    upstream_docs_url = _as_str(links_data.get("upstream_docs_url"))
    if upstream_docs_url:
        config.links.upstream_docs_url = upstream_docs_url.rstrip("/")
    layouts_url = _as_str(links_data.get("layouts_url"))
    if layouts_url:
        config.links.layouts_url = layouts_url.rstrip("/")

    workers = _as_int(data.get("workers"))
    if workers is not None and workers >= 1:
        config.workers = workers

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
