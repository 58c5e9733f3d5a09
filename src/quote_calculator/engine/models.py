"""
Data models for the quote engine.

Uses dataclasses for structured, type-safe data representation.
Requests are built by the form or API; results are frozen and replaced
wholesale on every calculation.
"""
from dataclasses import dataclass, field, asdict
from typing import Union

from .tiers import Tier, DEFAULT_TIER


@dataclass
class ClientEntry:
    """One client row as entered on the form."""
    name: str = ""
    tier: Union[str, Tier] = DEFAULT_TIER.value
    transactions: int = 0
    statements: int = 0


@dataclass
class QuoteRequest:
    """Company details plus the ordered client rows to price."""
    company_name: str
    company_email: str
    clients: list[ClientEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PricedClient:
    """A client row with every cost derived from its tier."""
    name: str
    tier: str
    tier_name: str
    transactions: int
    statements: int
    transaction_cost: float
    statement_cost: float
    subtotal: float
    discount_amount: float
    total: float


@dataclass(frozen=True)
class Totals:
    """Column sums across all priced clients, in input order."""
    transactions: int = 0
    statements: int = 0
    transaction_cost: float = 0.0
    statement_cost: float = 0.0
    subtotal: float = 0.0
    discount_amount: float = 0.0
    grand_total: float = 0.0


@dataclass(frozen=True)
class QuoteResult:
    """Complete result of a quote calculation."""
    company_name: str
    company_email: str
    clients: tuple[PricedClient, ...]
    totals: Totals
    timestamp: str  # ISO-8601, UTC

    def to_dict(self) -> dict:
        """Plain dict form for JSON responses."""
        data = asdict(self)
        data["clients"] = [asdict(c) for c in self.clients]
        return data
