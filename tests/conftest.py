"""Shared fixtures for Galactic Wars tests."""

import pytest

from galactic_wars.engine import GameEngine
from galactic_wars.utils import GameRNG


class ScriptedRNG(GameRNG):
    """RNG whose coin flips follow a fixed script."""

    def __init__(self, hits=()):
        super().__init__(seed=0)
        self.hits = list(hits)

    def coin_flip(self, probability: float = 0.5) -> bool:
        return self.hits.pop(0)


@pytest.fixture
def make_engine():
    """Factory for engines with an empty map and scripted combat rolls."""

    def _make(hits=(), resource_map=None, players=()):
        engine = GameEngine(
            rng=ScriptedRNG(hits),
            resource_map=resource_map if resource_map is not None else [],
        )
        for name in players:
            engine.join(name)
        return engine

    return _make


@pytest.fixture
def started_engine(make_engine):
    """Two-player game (Alice, Bob) already started, empty map, no scripted hits."""
    engine = make_engine(players=("Alice", "Bob"))
    engine.start()
    return engine
