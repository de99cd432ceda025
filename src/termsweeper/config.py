"""
Runtime configuration for a game session.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .difficulty import MIN_LEVEL, MAX_LEVEL


DEFAULT_FIELD_ORIGIN = (8, 9)


@dataclass
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        field_origin: Terminal (x, y) where the board is drawn.
        initial_level: Difficulty level at start-up.
        seed: Seed for the bomb placement generator (None = random).
    """

    field_origin: Tuple[int, int] = DEFAULT_FIELD_ORIGIN
    initial_level: int = MIN_LEVEL
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not MIN_LEVEL <= self.initial_level <= MAX_LEVEL:
            raise ValueError(
                f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}"
            )
        if len(self.field_origin) != 2 or min(self.field_origin) < 0:
            raise ValueError("Field origin must be a non-negative (x, y) pair")
