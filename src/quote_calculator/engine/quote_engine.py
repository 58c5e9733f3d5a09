"""
Quote Engine - validation and cost derivation for a quote request.

Pipeline:
1. Validate company details and client rows (first failing rule wins)
2. Resolve each client's tier from the catalog
3. Price each client: counts × rates, less the tier discount
4. Sum every priced column into Totals, in input order

The engine is pure: no I/O beyond logging, no state between calls.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from .errors import ValidationError
from .models import ClientEntry, PricedClient, QuoteRequest, QuoteResult, Totals
from .tiers import lookup

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def is_valid_email(email: str) -> bool:
    """Check the simple local@domain.tld shape."""
    return bool(EMAIL_PATTERN.match(email or ""))


def validate(request: QuoteRequest):
    """
    Validate a request, raising ValidationError for the first failing rule.

    Company fields stop at the first problem. Client names are checked as a
    group so every blank row is reported at once.
    """
    if not (request.company_name or "").strip():
        raise ValidationError("companyName", "required", "Please enter a company name")

    if not (request.company_email or "").strip():
        raise ValidationError("companyEmail", "required", "Please enter an email address")

    if not is_valid_email(request.company_email):
        raise ValidationError("companyEmail", "invalidFormat", "Please enter a valid email address")

    missing = [i for i, client in enumerate(request.clients) if not (client.name or "").strip()]
    if missing:
        raise ValidationError(
            "clients", "missingNames", "Please enter names for all clients", indices=missing
        )

    if not request.clients:
        raise ValidationError("clients", "required", "Please add at least one client")

    negative = [
        i for i, client in enumerate(request.clients)
        if client.transactions < 0 or client.statements < 0
    ]
    if negative:
        raise ValidationError(
            "clients", "negativeCount",
            "Transactions and statements cannot be negative", indices=negative
        )


def price_client(client: ClientEntry) -> PricedClient:
    """Derive all costs for one client row. Raises UnknownTier."""
    spec = lookup(client.tier)

    transaction_cost = client.transactions * spec.transaction_rate
    statement_cost = client.statements * spec.statement_rate
    subtotal = transaction_cost + statement_cost
    discount_amount = subtotal * spec.discount
    total = subtotal - discount_amount

    return PricedClient(
        name=client.name,
        tier=spec.id,
        tier_name=spec.name,
        transactions=client.transactions,
        statements=client.statements,
        transaction_cost=transaction_cost,
        statement_cost=statement_cost,
        subtotal=subtotal,
        discount_amount=discount_amount,
        total=total,
    )


def sum_totals(clients) -> Totals:
    """Sum each priced column across clients in the given order."""
    transactions = statements = 0
    transaction_cost = statement_cost = subtotal = discount_amount = grand_total = 0.0
    for c in clients:
        transactions += c.transactions
        statements += c.statements
        transaction_cost += c.transaction_cost
        statement_cost += c.statement_cost
        subtotal += c.subtotal
        discount_amount += c.discount_amount
        grand_total += c.total

    return Totals(
        transactions=transactions,
        statements=statements,
        transaction_cost=transaction_cost,
        statement_cost=statement_cost,
        subtotal=subtotal,
        discount_amount=discount_amount,
        grand_total=grand_total,
    )


def calculate(request: QuoteRequest, now: Optional[datetime] = None) -> QuoteResult:
    """
    Validate and price a quote request.

    Args:
        request: company details and client rows
        now: creation time override (defaults to current UTC time)

    Returns:
        QuoteResult with one PricedClient per input row, in input order

    Raises:
        ValidationError: input problem, nothing is priced
        UnknownTier: a client tier outside the catalog
    """
    try:
        validate(request)
    except ValidationError as e:
        logger.warning("Quote rejected: %s (%s/%s)", e.message, e.field, e.reason)
        raise

    priced = tuple(price_client(client) for client in request.clients)
    totals = sum_totals(priced)
    timestamp = (now or datetime.now(timezone.utc)).isoformat()

    logger.info(
        "Quote calculated for %r: %d client(s), grand total %.2f",
        request.company_name, len(priced), totals.grand_total,
    )

    return QuoteResult(
        company_name=request.company_name,
        company_email=request.company_email,
        clients=priced,
        totals=totals,
        timestamp=timestamp,
    )
