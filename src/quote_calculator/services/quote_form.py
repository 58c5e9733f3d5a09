"""
Form state helpers for the quote page.

Kept free of Streamlit so the row handling and status timing can be
tested directly.
"""
import time
from dataclasses import dataclass, field
from typing import Optional

from ..config.settings import Settings, get_settings
from ..engine.models import ClientEntry
from ..engine.tiers import DEFAULT_TIER


def clamp_client_count(value, settings: Optional[Settings] = None) -> int:
    """Coerce a requested row count into the configured bounds."""
    settings = settings or get_settings()
    try:
        count = int(value)
    except (TypeError, ValueError):
        count = settings.min_clients
    return max(settings.min_clients, min(settings.max_clients, count))


def resize_clients(clients: list[ClientEntry], count: int) -> list[ClientEntry]:
    """
    Return exactly ``count`` rows.

    Existing rows keep their position and values; new rows are blank
    gold-tier entries; rows past ``count`` are dropped.
    """
    resized = []
    for i in range(count):
        if i < len(clients):
            old = clients[i]
            resized.append(ClientEntry(
                name=old.name or "",
                tier=old.tier or DEFAULT_TIER.value,
                transactions=old.transactions or 0,
                statements=old.statements or 0,
            ))
        else:
            resized.append(ClientEntry())
    return resized


@dataclass
class StatusMessage:
    """A transient success/error message shown under the form."""
    text: str
    kind: str = "success"  # "success" or "error"
    created_at: float = field(default_factory=time.monotonic)

    @classmethod
    def success(cls, text: str) -> 'StatusMessage':
        return cls(text, "success")

    @classmethod
    def error(cls, text: str) -> 'StatusMessage':
        return cls(text, "error")

    def is_visible(self, now: Optional[float] = None, duration: Optional[float] = None) -> bool:
        """True until ``duration`` seconds (default from settings) have passed."""
        if duration is None:
            duration = get_settings().status_seconds
        now = time.monotonic() if now is None else now
        return now - self.created_at < duration


def format_currency(value: float, symbol: Optional[str] = None) -> str:
    """Display form of an amount, e.g. R1,234.5 (up to three decimals)."""
    symbol = get_settings().currency_symbol if symbol is None else symbol
    text = f"{abs(value):,.3f}".rstrip("0").rstrip(".")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{text}"
