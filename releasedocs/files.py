"""Executor-backed file helpers used from the event loop."""

from __future__ import annotations

import asyncio
import functools
from pathlib import Path
from typing import Any, Callable, TypeVar

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking call on the loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


async def read_text(path: Path) -> str:
    return await run_blocking(path.read_text, encoding="utf-8")


async def write_text(path: Path, content: str) -> None:
    await run_blocking(path.write_text, content, encoding="utf-8")


async def ensure_dir(path: Path) -> None:
    """Create ``path`` and its parents; concurrent callers for the same path are fine."""
    await run_blocking(path.mkdir, parents=True, exist_ok=True)


__all__ = ["ensure_dir", "read_text", "run_blocking", "write_text"]
