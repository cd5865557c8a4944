"""
Core types for storefront.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error, LazyCoroResult

from storefront.domain._errors import StorefrontError

# ═══════════════════════════════════════════════════════════════════════════════
# Result Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Outcome[T] = Result[T, StorefrontError]
"""Result of any port or use case call."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Outcome",
)
