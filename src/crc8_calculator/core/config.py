"""Application configuration using pydantic-settings."""

import logging
import sys
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    prefixed with CRC8_ (e.g., CRC8_API_PORT).
    """

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"
    state_dir: str = "/var/lib/crc8-calculator"
    history_size: int = 10
    persist_history: bool = True

    model_config = SettingsConfigDict(env_prefix="CRC8_")

    @property
    def history_file(self) -> Path:
        """Path to the file storing the calculation history."""
        return Path(self.state_dir) / "history.json"


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
