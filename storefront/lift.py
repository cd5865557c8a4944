"""
Lift — Helpers for lifting values into Results.

Re-exports from combinators.lift with storefront-specific additions.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult, Result, Ok, Error

# Re-export from combinators.lift
from combinators.lift import catching_async


# ═══════════════════════════════════════════════════════════════════════════════
# Storefront-specific helpers
# ═══════════════════════════════════════════════════════════════════════════════

def catching_result[T, E](
    fn: Callable[[], Awaitable[Result[T, E]]],
    on_error: Callable[[Exception], E],
) -> LazyCoroResult[T, E]:
    """
    Lift a Result-returning async call that may still raise.

    A raised exception becomes Error(on_error(exc)); a returned Result is
    passed through unchanged (no nesting).
    """
    caught = catching_async(fn, on_error=on_error)

    async def _run() -> Result[T, E]:
        match await caught:
            case Ok(inner):
                return inner
            case Error(e):
                return Error(e)

    return LazyCoroResult(_run)


def with_timeout[T](
    fn: Callable[[], Awaitable[T]],
    seconds: float,
) -> Callable[[], Awaitable[T]]:
    """Bound an async call; expiry raises TimeoutError."""
    async def _run() -> T:
        async with asyncio.timeout(seconds):
            return await fn()
    return _run


__all__ = (
    # From combinators.lift
    "catching_async",
    # Storefront additions
    "catching_result",
    "with_timeout",
)
