"""Injectable RNG wrapper for map generation and combat rolls."""

import random


class GameRNG:
    """Wrapper around Python's random.Random.

    All randomness in the game goes through this class so tests can supply
    a seeded or scripted source. With no seed, the underlying generator is
    seeded from OS entropy.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG.

        Args:
            seed: Optional integer seed for reproducible sequences
        """
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def coin_flip(self, probability: float = 0.5) -> bool:
        """Return True with the given probability.

        Every call is a fresh draw.

        Args:
            probability: Chance of returning True

        Returns:
            True on success, False otherwise
        """
        return self.random() < probability
