"""Seedable source of uniform random integers."""

import random
from typing import Optional, Protocol


class RandomIntSource(Protocol):
    """Anything able to draw an integer uniformly from an inclusive range."""

    def random_int(self, low: int, high: int) -> int:
        ...


class RandomNumbersTool:
    """Uniform random integers backed by a private ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize the generator.

        Args:
            seed: Optional seed. Without one the generator is seeded from the
                operating system.
        """
        self._seed = seed
        self._random = random.Random(seed)

    def set_seed(self, seed: Optional[int]) -> None:
        self._seed = seed
        self._random.seed(seed)

    def get_seed(self) -> Optional[int]:
        return self._seed

    def random_int(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high].

        Args:
            low: Lowest value, inclusive.
            high: Highest value, inclusive.

        Returns:
            Random integer in the range.

        Raises:
            ValueError: If ``low`` is greater than ``high``.
        """
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._random.randint(low, high)


_default_tool = RandomNumbersTool()


def get_default_tool() -> RandomNumbersTool:
    """Shared generator used when no random source is given."""
    return _default_tool


def random_int(low: int, high: int) -> int:
    return _default_tool.random_int(low, high)
