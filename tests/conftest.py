"""
Shared fixtures - sample quote requests and isolated settings.
"""
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from quote_calculator.config import settings as settings_module
from quote_calculator.config.settings import Settings
from quote_calculator.engine import ClientEntry, QuoteRequest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Every test starts from default settings, ignoring the real environment."""
    monkeypatch.setattr(settings_module, "_settings", Settings())
    yield
    settings_module.reset_settings()


@pytest.fixture
def acme_request():
    """Single gold client: 10 transactions, 2 statements."""
    return QuoteRequest(
        company_name="Acme",
        company_email="a@acme.com",
        clients=[ClientEntry(name="Foo", tier="gold", transactions=10, statements=2)],
    )


@pytest.fixture
def two_client_request():
    """Silver client with activity plus an idle bronze client."""
    return QuoteRequest(
        company_name="Acme",
        company_email="a@acme.com",
        clients=[
            ClientEntry(name="Silver Co", tier="silver", transactions=5, statements=1),
            ClientEntry(name="Bronze Co", tier="bronze", transactions=0, statements=0),
        ],
    )
