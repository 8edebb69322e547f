"""Bounded concurrency over a worklist."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Iterable, List, Sequence, TypeVar

from .logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

_LOGGER = get_logger("pool")


class BatchError(RuntimeError):
    """Raised when more than one item of a batch failed."""

    def __init__(self, message: str, errors: Sequence[BaseException]) -> None:
        super().__init__(message)
        self.errors = list(errors)


async def map_limit(
    items: Iterable[T],
    limit: int,
    func: Callable[[T], Awaitable[R]],
) -> List[R]:
    """Apply ``func`` to every item with at most ``limit`` calls in flight.

    Results keep the input order. Every item runs to completion; failures are
    collected afterwards. A single failure is re-raised as is, several are
    wrapped in :class:`BatchError`.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")

    semaphore = asyncio.Semaphore(limit)

    async def _run(item: T) -> R:
        async with semaphore:
            return await func(item)

    outcomes = await asyncio.gather(*(_run(item) for item in items), return_exceptions=True)

    errors = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
    if len(errors) == 1:
        raise errors[0]
    if errors:
        for error in errors:
            _LOGGER.debug("Batch item failed: %r", error)
        raise BatchError(f"{len(errors)} of {len(outcomes)} items failed", errors) from errors[0]
    return list(outcomes)  # type: ignore[arg-type]


__all__ = ["BatchError", "map_limit"]
