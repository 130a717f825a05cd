"""Configuration for Zork."""

import os
from dataclasses import dataclass
from pathlib import Path


def _optional_int(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    seed: int | None = None
    prompt: str = "> "

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("ZORK_LOG_FILE")

        return cls(
            log_level=os.getenv("ZORK_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("ZORK_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            seed=_optional_int(os.getenv("ZORK_SEED")),
            prompt=os.getenv("ZORK_PROMPT", cls.prompt),
        )
