"""Front matter blocks for generated content files."""

from __future__ import annotations

from typing import Any, Mapping

import yaml


def render_front_matter(fields: Mapping[str, Any]) -> str:
    """Return a ``---`` delimited YAML block, keys kept in the given order."""
    body = yaml.safe_dump(
        dict(fields),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=1000,
    )
    return f"---\n{body}---\n"


__all__ = ["render_front_matter"]
