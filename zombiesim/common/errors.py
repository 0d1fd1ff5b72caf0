from __future__ import annotations


class ZombieSimError(Exception):
    """Base class for simulation errors."""


class GridNotInitializedError(ZombieSimError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("Grid used before init(width, height)")


class CapacityExceededError(ZombieSimError):
    """Raised when random placement cannot fit the requested entities.

    ``available`` counts the Empty interior cells at the time of the request.
    """

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot place {requested} entities: only {available} empty interior cells"
        )
