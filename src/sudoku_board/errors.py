"""
Board errors.

Expected signals (a failed backtracking branch, an empty candidate list,
a drained pool) are plain return values; these exceptions are reserved for
bad configuration and for outcomes the caller has to handle.
"""

from typing import Optional


class BoardError(RuntimeError):
    """Base class for board errors."""


class ConfigurationError(BoardError, ValueError):
    """Raised when a side / box combination cannot form a board."""

    def __init__(
        self,
        message: str,
        *,
        side: Optional[int] = None,
        box_width: Optional[int] = None,
        box_height: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.side = side
        self.box_width = box_width
        self.box_height = box_height


class GenerationError(BoardError):
    """Raised when backtracking exhausts every option at the first cell."""


class EliminationError(BoardError):
    """
    Raised when the elimination pass exceeds its round limit.

    Every round moves at least one new cell into the pool, so hitting the
    limit means an internal invariant was broken.
    """

    def __init__(
        self,
        message: str = "Elimination did not converge",
        *,
        limit: Optional[int] = None,
        observed: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.limit = limit
        self.observed = observed
