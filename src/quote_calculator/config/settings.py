"""
Centralized settings for the quote calculator.

Values are static for the life of the process. Each field can be
overridden through a QUOTE_* environment variable.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Automation webhook that receives submitted quotes
    webhook_url: Optional[str] = None

    # Bounds for the number of client rows on one quote
    min_clients: int = 1
    max_clients: int = 50

    # How long a status message stays on screen
    status_seconds: float = 3.0

    # Display only; never written to CSV
    currency_symbol: str = "R"

    log_level: str = "INFO"

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> 'Settings':
        """Load settings from the environment."""
        env = os.environ if environ is None else environ
        defaults = cls()

        min_clients = int(env.get('QUOTE_MIN_CLIENTS', defaults.min_clients))
        max_clients = int(env.get('QUOTE_MAX_CLIENTS', defaults.max_clients))
        if min_clients < 1 or max_clients < min_clients:
            raise ValueError(
                f"Invalid client bounds: {min_clients}..{max_clients}"
            )

        return cls(
            webhook_url=env.get('QUOTE_WEBHOOK_URL') or None,
            min_clients=min_clients,
            max_clients=max_clients,
            status_seconds=float(env.get('QUOTE_STATUS_SECONDS', defaults.status_seconds)),
            currency_symbol=env.get('QUOTE_CURRENCY_SYMBOL', defaults.currency_symbol),
            log_level=env.get('QUOTE_LOG_LEVEL', defaults.log_level).upper(),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def setup_logging(level: Optional[str] = None):
    """Configure root logging once for the API and UI entry points."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
