"""
Tier Catalog - fixed per-unit rates and discount for each pricing tier.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Union

from .errors import UnknownTier


class Tier(str, Enum):
    """Closed set of pricing tiers, valued by their identifier."""
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


@dataclass(frozen=True)
class TierSpec:
    """Economics of a single tier."""
    tier: Tier
    name: str
    transaction_rate: float
    statement_rate: float
    discount: float  # fraction of subtotal, 0..1

    @property
    def id(self) -> str:
        return self.tier.value

    @property
    def discount_percent(self) -> float:
        return self.discount * 100


# Read-only for the lifetime of the process
TIER_CATALOG = MappingProxyType({
    Tier.GOLD: TierSpec(Tier.GOLD, "Gold Tier", 26, 160, 0.20),
    Tier.SILVER: TierSpec(Tier.SILVER, "Silver Tier", 22, 160, 0.20),
    Tier.BRONZE: TierSpec(Tier.BRONZE, "Bronze Tier", 18, 160, 0.20),
})

DEFAULT_TIER = Tier.GOLD


def lookup(tier_id: Union[str, Tier]) -> TierSpec:
    """
    Resolve a tier identifier to its catalog entry.

    Accepts a Tier member or its exact string identifier ("gold", ...).
    Raises UnknownTier for anything else.
    """
    try:
        return TIER_CATALOG[Tier(tier_id)]
    except ValueError:
        raise UnknownTier(tier_id) from None


def all_tiers() -> list[TierSpec]:
    """Catalog entries in display order (gold, silver, bronze)."""
    return [TIER_CATALOG[t] for t in Tier]
