"""Engine subpackage - tier catalog, validation and quote pricing."""
from .quote_engine import calculate, validate
from .models import ClientEntry, QuoteRequest, PricedClient, Totals, QuoteResult
from .tiers import Tier, TierSpec, TIER_CATALOG, lookup
from .errors import (
    QuoteError, ValidationError, UnknownTier, ExportError, NoResultAvailable, SubmissionError,
)

__all__ = [
    'calculate', 'validate',
    'ClientEntry', 'QuoteRequest', 'PricedClient', 'Totals', 'QuoteResult',
    'Tier', 'TierSpec', 'TIER_CATALOG', 'lookup',
    'QuoteError', 'ValidationError', 'UnknownTier', 'ExportError', 'NoResultAvailable',
    'SubmissionError',
]
