"""
Webhook Service - submits finished quotes to the automation webhook.

One POST per submission, JSON body, any 2xx accepted. Failures are raised
as SubmissionError and never touch the quote result.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx

from ..config.settings import Settings, get_settings
from ..engine.errors import NoResultAvailable, SubmissionError
from ..engine.models import QuoteResult

logger = logging.getLogger(__name__)


@dataclass
class SubmissionAck:
    """Webhook accepted the quote."""
    status_code: int


def build_payload(result: QuoteResult, submitted_at: Optional[datetime] = None) -> dict:
    """Build the webhook JSON body for a quote result."""
    submitted_at = submitted_at or datetime.now(timezone.utc)
    totals = result.totals

    return {
        "companyName": result.company_name,
        "companyEmail": result.company_email,
        "dateSubmitted": submitted_at.isoformat(),
        "quotes": [
            {
                "quoteId": index,
                "clientName": client.name,
                "tier": client.tier,
                "tierName": client.tier_name,
                "transactions": client.transactions,
                "statements": client.statements,
                "transactionCost": client.transaction_cost,
                "statementCost": client.statement_cost,
                "subtotal": client.subtotal,
                "discountAmount": client.discount_amount,
                "totalCost": client.total,
            }
            for index, client in enumerate(result.clients, start=1)
        ],
        "totals": {
            "transactionCost": totals.transaction_cost,
            "statementCost": totals.statement_cost,
            "subtotal": totals.subtotal,
            "discountAmount": totals.discount_amount,
            "grandTotal": totals.grand_total,
        },
        "timestamp": result.timestamp,
    }


class WebhookClient:
    """Thin wrapper around an httpx client bound to one webhook URL."""

    def __init__(self, url: Optional[str], client: Optional[httpx.Client] = None):
        self.url = url
        self._client = client

    def submit(self, payload: dict) -> SubmissionAck:
        """
        POST the payload as JSON.

        Raises:
            SubmissionError: no URL configured, transport failure or non-2xx status
        """
        if not self.url:
            raise SubmissionError("Webhook URL is not configured")

        try:
            if self._client is not None:
                response = self._client.post(self.url, json=payload)
            else:
                with httpx.Client() as client:
                    response = client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            logger.error("Webhook transport error: %s", e)
            raise SubmissionError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            logger.error("Webhook rejected quote with status %s", response.status_code)
            raise SubmissionError(
                f"Webhook request failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        logger.info("Quote for %r submitted (%s)", payload.get("companyName"), response.status_code)
        return SubmissionAck(status_code=response.status_code)


def submit_quote(
    result: Optional[QuoteResult],
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> SubmissionAck:
    """Submit a calculated quote to the configured webhook."""
    if result is None:
        raise NoResultAvailable()

    settings = settings or get_settings()
    return WebhookClient(settings.webhook_url, client=client).submit(build_payload(result))
