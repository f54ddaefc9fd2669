"""Depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow when the
document driver recurses into deeply nested arrays and maps.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from ejsonparser.constants import MAX_DEPTH
from ejsonparser.diagnostics import EJSONError
from ejsonparser.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(EJSONError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either adversarial input designed to cause stack
    overflow or an unintentionally deep document.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard:
            result = parse_child(cursor)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each parse creates its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        clamp: Clamp max_depth against the recursion limit (default: True).
            Pass False when max_depth was already clamped by the caller.
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    clamp: bool = field(default=True, kw_only=True)
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        if self.clamp:
            self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.nesting_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth


def depth_clamp(
    requested_depth: int, reserve_frames: int = 100, frames_per_level: int = 12
) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level of an EJSON document costs several stack frames
    (child parser, dispatcher, structural combinator, comma list), so the
    safe depth is the free frame budget divided by frames_per_level.
    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 100)
        frames_per_level: Frames consumed per nesting level (default: 12)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(64)  # OK, within limit
        64
        >>> depth_clamp(500)  # Exceeds limit, clamped to (1000 - 100) // 12
        75
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
