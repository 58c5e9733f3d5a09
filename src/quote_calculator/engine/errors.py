"""
Error types raised by the quote engine, exporter and webhook client.
"""
from typing import Optional


class QuoteError(Exception):
    """Base class for all quote calculator errors."""


class ValidationError(QuoteError):
    """
    A problem with user input, scoped to one field.

    Only the first failing rule is reported, except for client rows where
    every offending index is collected in ``indices``.
    """

    def __init__(self, field: str, reason: str, message: str, indices: Optional[list[int]] = None):
        super().__init__(message)
        self.field = field
        self.reason = reason
        self.message = message
        self.indices = list(indices) if indices else []

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "reason": self.reason,
            "message": self.message,
            "indices": self.indices,
        }


class UnknownTier(QuoteError):
    """A tier identifier outside the fixed catalog."""

    def __init__(self, tier_id):
        super().__init__(f"Unknown tier: {tier_id!r}")
        self.tier_id = tier_id


class ExportError(QuoteError):
    """A CSV export could not be produced."""


class NoResultAvailable(ExportError):
    """Export or submission was requested before a successful calculation."""

    def __init__(self, message: str = "Please calculate costs first"):
        super().__init__(message)


class SubmissionError(QuoteError):
    """The webhook call failed at the transport or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
