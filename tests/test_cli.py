"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from releasedocs.cli import _build_parser, main


def test_cli_requires_source_and_dest(capsys: pytest.CaptureFixture[str]) -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["only-source"])
    assert excinfo.value.code == 2
    assert "dest" in capsys.readouterr().err


def test_cli_accepts_verbose_and_config() -> None:
    args = _build_parser().parse_args(["src", "out", "--verbose", "--config", "site.yml"])
    assert args.source == Path("src")
    assert args.dest == Path("out")
    assert args.verbose is True
    assert args.config == Path("site.yml")


def test_main_exits_non_zero_on_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing"), str(tmp_path / "out"), "--config", str(tmp_path)])
    assert excinfo.value.code == 1
    assert "Releases processing failed" in capsys.readouterr().err


def test_main_succeeds_on_valid_tree(source_builder, capsys: pytest.CaptureFixture[str]) -> None:
    ecosystem = "## Ecosystem\n- [`fastify-cors`](https://example.com) CORS.\n- *More coming soon*\n"
    source_builder.add_version("master", {"Routes.md": "## Routes\n"}, ecosystem=ecosystem)

    main([str(source_builder.source), str(source_builder.dest), "--config", str(source_builder.source)])

    assert (source_builder.dest / "data" / "docs.yml").exists()
    assert "Releases processed correctly" in capsys.readouterr().err


def test_main_exits_non_zero_when_documentation_section_missing(
    source_builder, capsys: pytest.CaptureFixture[str]
) -> None:
    ecosystem = "## Ecosystem\n- [`fastify-cors`](https://example.com) CORS.\n- *More coming soon*\n"
    source_builder.write_readme("master", "# Fastify\n\n" + ecosystem)

    with pytest.raises(SystemExit) as excinfo:
        main([str(source_builder.source), str(source_builder.dest), "--config", str(source_builder.source)])

    assert excinfo.value.code == 1
    assert "Missing '## Documentation' section" in capsys.readouterr().err
    assert not (source_builder.dest / "data" / "docs.yml").exists()
    assert (source_builder.dest / "data" / "ecosystem.yml").exists()
