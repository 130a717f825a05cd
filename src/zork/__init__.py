"""A small event-driven text adventure."""

import sys

from .config import Config
from .logging import configure_logging, get_logger
from .session import GameSession

__all__ = ["main", "Config", "GameSession"]


def main() -> None:
    """Entry point for the zork console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info("application_starting", seed=config.seed, log_level=config.log_level)

    session = GameSession.create(config)
    session.run(sys.stdin, sys.stdout, prompt=config.prompt)
