"""Shared test fixtures for Zork."""

import random

import pytest

from zork.config import Config
from zork.engine.commands import register_handlers
from zork.engine.events import EVENT_PAYLOADS, EventBus
from zork.engine.game import Game
from zork.session import GameSession


@pytest.fixture
def bus() -> EventBus:
    return EventBus(payload_types=EVENT_PAYLOADS)


@pytest.fixture
def game(bus: EventBus) -> Game:
    """A wired game with a seeded random source and no pending output."""
    game = Game(bus, rng=random.Random(42))
    register_handlers(bus, game)
    game.drain()
    return game


@pytest.fixture
def session() -> GameSession:
    session = GameSession.create(Config(seed=42))
    session.game.drain()
    return session


@pytest.fixture
def recorder():
    """Factory for a handler that records every payload it receives."""

    def make(bus: EventBus, event_name: str) -> list:
        seen: list = []
        bus.listen(event_name, seen.append)
        return seen

    return make


@pytest.fixture
def fix_roll(monkeypatch, game: Game):
    """Make every attack roll of the game fixture come up as a given value."""

    def fix(value: int) -> None:
        monkeypatch.setattr(game.rng, "randint", lambda low, high: value)

    return fix
