"""Timeout Policies for Upstream Calls

Each upstream fetch is bounded by asyncio cancellation so a slow source
resumes the caller with an Err instead of hanging it. No retries: the
resolver's source chain is the only recovery path.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

from core.errors import AppError, Result, timeout_error

T = TypeVar("T")


class TimeoutPolicy(Generic[T]):
    """Timeout wrapper for async operations returning Result.

    Usage:
        policy = TimeoutPolicy(timeout_seconds=8.0, operation_name="primary_fetch")
        result = await policy.execute(lambda: client.fetch(word))
    """

    def __init__(self, timeout_seconds: float, operation_name: str = "operation"):
        self.timeout_seconds = timeout_seconds
        self.operation_name = operation_name

    async def execute(
        self,
        fn: Callable[[], Awaitable[Result[T, AppError]]],
    ) -> Result[T, AppError]:
        """Run fn, cancelling it and returning Err(E1002) once the budget is spent."""
        try:
            return await asyncio.wait_for(fn(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            return timeout_error(
                self.operation_name,
                self.timeout_seconds,
                origin="timeout_policy",
            )

