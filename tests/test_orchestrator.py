"""End-to-end tests for releasedocs.orchestrator."""

from __future__ import annotations

import asyncio

import pytest
import yaml

from releasedocs.config import ReleaseDocsConfig
from releasedocs.extract import ExtractionError
from releasedocs.orchestrator import BuildError, Orchestrator
from tests._fixtures.source_builder import UPSTREAM

ECOSYSTEM = """\
## Ecosystem
- [`fastify-cors`](https://github.com/fastify/fastify-cors) Enables the use of CORS.
- [`fastify-static`](https://github.com/fastify/fastify-static) Serve static
files.
- *More coming soon*
"""


def _populate(source_builder) -> None:
    body = f'<h1 align="center">Fastify</h1>\n## Routes\nSee [hooks]({UPSTREAM}/Hooks.md).\n'
    source_builder.add_version("master", {"Routes.md": body, "Hooks.md": "## Hooks\n"}, ecosystem=ECOSYSTEM)
    source_builder.add_version("v1.0.0", {"Routes.md": body})
    source_builder.add_version("v2.0.0", {"Routes.md": body, "Hooks.md": "## Hooks\n"})


def _run(source_builder, config: ReleaseDocsConfig | None = None):
    orchestrator = Orchestrator(source_builder.source, source_builder.dest, config)
    return asyncio.run(orchestrator.run())


def test_run_builds_content_and_data_files(source_builder) -> None:
    _populate(source_builder)

    outcome = _run(source_builder)

    dest = source_builder.dest
    docs_data = yaml.safe_load((dest / "data" / "docs.yml").read_text(encoding="utf-8"))
    assert docs_data["versions"] == ["master", "v2.0.0", "v1.0.0"]
    assert [item["slug"] for item in docs_data["toc"]["v2.0.0"]] == ["Routes", "Hooks"]
    assert outcome.index.versions == ("master", "v2.0.0", "v1.0.0")

    content = dest / "content" / "docs"
    assert (content / "index.md").exists()
    for version in ["master", "v2.0.0", "v1.0.0"]:
        assert (content / version / "index.md").exists()
        assert (content / version / "Routes.md").exists()
    routes = (content / "v2.0.0" / "Routes.md").read_text(encoding="utf-8")
    assert "(/docs/v2.0.0/Hooks.md)" in routes
    assert "<h1" not in routes
    assert "github_url" not in routes
    assert "github_url" in (content / "master" / "Routes.md").read_text(encoding="utf-8")

    ecosystem = yaml.safe_load((dest / "data" / "ecosystem.yml").read_text(encoding="utf-8"))
    assert [plugin["name"] for plugin in ecosystem["plugins"]] == ["fastify-cors", "fastify-static"]
    assert ecosystem["plugins"][1]["description"] == "Serve static files."


def test_run_twice_produces_identical_output(source_builder) -> None:
    _populate(source_builder)
    _run(source_builder)
    files = sorted(path for path in source_builder.dest.rglob("*") if path.is_file())
    first = {path: path.read_bytes() for path in files}

    _run(source_builder)

    assert {path: path.read_bytes() for path in files} == first


def test_missing_documentation_marker_skips_docs_data_file(source_builder) -> None:
    _populate(source_builder)
    source_builder.write_readme("v1.0.0", "# Fastify\n\nNothing to see.\n")

    with pytest.raises(ExtractionError):
        _run(source_builder)

    assert not (source_builder.dest / "data" / "docs.yml").exists()
    # The ecosystem pipeline is independent and still completes.
    assert (source_builder.dest / "data" / "ecosystem.yml").exists()


def test_both_pipelines_failing_raises_build_error(source_builder) -> None:
    source_builder.write_readme("master", "# Fastify\n")

    with pytest.raises(BuildError) as excinfo:
        _run(source_builder)

    assert len(excinfo.value.errors) == 2
    assert all(isinstance(error, ExtractionError) for error in excinfo.value.errors)


def test_custom_latest_tag_controls_ecosystem_source(source_builder) -> None:
    body = "## Routes\n"
    source_builder.add_version("next", {"Routes.md": body}, ecosystem=ECOSYSTEM)
    source_builder.add_version("v1.0.0", {"Routes.md": body})
    config = ReleaseDocsConfig()
    config.source.latest_tag = "next"
    config.workers = 1

    outcome = _run(source_builder, config)

    assert outcome.index.versions == ("next", "v1.0.0")
    assert len(outcome.plugins) == 2


def test_missing_ecosystem_marker_keeps_docs_output(source_builder) -> None:
    source_builder.add_version("master", {"Routes.md": "## Routes\n"})
    source_builder.add_version("v1.0.0", {"Routes.md": "## Routes\n"})

    with pytest.raises(ExtractionError) as excinfo:
        _run(source_builder)

    assert "## Ecosystem" in str(excinfo.value)
    dest = source_builder.dest
    assert not (dest / "data" / "ecosystem.yml").exists()
    assert (dest / "data" / "docs.yml").exists()
    content = dest / "content" / "docs"
    assert (content / "index.md").exists()
    for version in ["master", "v1.0.0"]:
        assert (content / version / "Routes.md").exists()
        assert (content / version / "index.md").exists()
