"""Session layer bridging the game engine and a line-oriented console."""

import random
from collections.abc import Iterable
from typing import TextIO

import structlog

from .config import Config
from .engine.commands import register_handlers
from .engine.events import EVENT_PAYLOADS, INPUT, EventBus, Words
from .engine.game import Game
from .logging import get_logger

logger = get_logger(__name__)


def tokenize(raw_input: str) -> Words:
    """Lower-case a line and split it on whitespace."""
    return Words(tuple(raw_input.strip().lower().split()))


class GameSession:
    """One bus, one game, wired together for the length of a run."""

    def __init__(self, bus: EventBus, game: Game):
        self.bus = bus
        self.game = game
        self.turns = 0

    @classmethod
    def create(
        cls, config: Config | None = None, rng: random.Random | None = None
    ) -> "GameSession":
        """Build the bus and game and attach every handler."""
        config = config or Config()
        if rng is None:
            rng = random.Random(config.seed)
        bus = EventBus(payload_types=EVENT_PAYLOADS)
        game = Game(bus, rng=rng)
        register_handlers(bus, game)
        logger.debug("session_created", seed=config.seed)
        return cls(bus, game)

    @property
    def running(self) -> bool:
        return self.bus.is_running()

    def welcome(self) -> str:
        """Text shown before the first prompt."""
        self.game.update_screen()
        return self.game.drain()

    def process_command(self, raw_input: str) -> str:
        """Dispatch one line and return everything the game said."""
        self.turns += 1
        words = tokenize(raw_input)
        with structlog.contextvars.bound_contextvars(turn=self.turns):
            logger.debug("command_received", words=list(words.words))
            self.bus.trigger(INPUT, words)
        return self.game.drain()

    def play(self, lines: Iterable[str]) -> list[str]:
        """Feed lines until the bus stops or they run out."""
        responses = []
        for line in lines:
            if not self.running:
                break
            responses.append(self.process_command(line))
        return responses

    def run(self, stdin: TextIO, stdout: TextIO, prompt: str = "> ") -> None:
        """Interactive loop: prompt, read, dispatch, print."""
        stdout.write(self.welcome() + "\n")
        while self.running:
            stdout.write(prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                logger.info("input_closed", turns=self.turns)
                self.bus.stop()
                break
            response = self.process_command(line)
            if response:
                stdout.write(response + "\n")
        logger.info("session_finished", turns=self.turns)
