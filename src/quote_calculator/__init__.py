"""
Quote Calculator Package

Tiered pricing quotes for bookkeeping clients.
Validates a company quote request, prices each client against the
Gold/Silver/Bronze schedule and exports or submits the result.
"""

__version__ = "1.0.0"
