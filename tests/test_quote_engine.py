"""
Quote engine tests - validation order, per-client pricing and totals.
"""
import random
from datetime import datetime, timezone

import pytest

from quote_calculator.engine import (
    ClientEntry, QuoteRequest, UnknownTier, ValidationError, calculate, validate,
)
from quote_calculator.engine.quote_engine import is_valid_email

PRICED_FIELDS = ("transaction_cost", "statement_cost", "subtotal", "discount_amount", "total")


def make_request(name="Acme", email="a@acme.com", clients=None):
    if clients is None:
        clients = [ClientEntry(name="Foo", tier="gold", transactions=1, statements=1)]
    return QuoteRequest(company_name=name, company_email=email, clients=clients)


# ----------------------------------------------------------------------------
# Pricing
# ----------------------------------------------------------------------------

def test_single_gold_client(acme_request):
    result = calculate(acme_request)

    assert len(result.clients) == 1
    foo = result.clients[0]
    assert foo.name == "Foo"
    assert foo.tier == "gold"
    assert foo.tier_name == "Gold Tier"
    assert foo.transaction_cost == 260
    assert foo.statement_cost == 320
    assert foo.subtotal == 580
    assert foo.discount_amount == pytest.approx(116)
    assert foo.total == pytest.approx(464)

    totals = result.totals
    assert totals.transaction_cost == foo.transaction_cost
    assert totals.statement_cost == foo.statement_cost
    assert totals.subtotal == foo.subtotal
    assert totals.discount_amount == foo.discount_amount
    assert totals.grand_total == foo.total


def test_silver_and_idle_bronze(two_client_request):
    result = calculate(two_client_request)
    silver, bronze = result.clients

    assert silver.transaction_cost == 110
    assert silver.statement_cost == 160
    assert silver.subtotal == 270
    assert silver.discount_amount == pytest.approx(54)
    assert silver.total == pytest.approx(216)

    for f in PRICED_FIELDS:
        assert getattr(bronze, f) == 0

    totals = result.totals
    assert totals.transaction_cost == 110
    assert totals.statement_cost == 160
    assert totals.subtotal == 270
    assert totals.discount_amount == pytest.approx(54)
    assert totals.grand_total == pytest.approx(216)
    assert totals.transactions == 5
    assert totals.statements == 1


def test_result_keeps_input_order_and_names():
    clients = [
        ClientEntry(name=f"  Client {i}  ", tier=tier, transactions=i, statements=i % 3)
        for i, tier in enumerate(["bronze", "gold", "silver", "gold"])
    ]
    result = calculate(make_request(clients=clients))

    assert [c.name for c in result.clients] == [c.name for c in clients]
    assert [c.tier for c in result.clients] == ["bronze", "gold", "silver", "gold"]


def test_priced_client_identities_hold_exactly():
    rng = random.Random(7)
    clients = [
        ClientEntry(
            name=f"C{i}",
            tier=rng.choice(["gold", "silver", "bronze"]),
            transactions=rng.randint(0, 5000),
            statements=rng.randint(0, 300),
        )
        for i in range(50)
    ]
    result = calculate(make_request(clients=clients))

    assert len(result.clients) == 50
    for p in result.clients:
        assert p.subtotal == p.transaction_cost + p.statement_cost
        assert p.total == p.subtotal - p.discount_amount


@pytest.mark.parametrize("count", [1, 2, 17, 50])
def test_totals_are_input_order_sums(count):
    rng = random.Random(count)
    clients = [
        ClientEntry(
            name=f"C{i}",
            tier=rng.choice(["gold", "silver", "bronze"]),
            transactions=rng.randint(0, 999),
            statements=rng.randint(0, 99),
        )
        for i in range(count)
    ]
    result = calculate(make_request(clients=clients))

    expected = dict.fromkeys(PRICED_FIELDS, 0.0)
    for p in result.clients:
        for f in PRICED_FIELDS:
            expected[f] += getattr(p, f)

    t = result.totals
    assert t.transaction_cost == expected["transaction_cost"]
    assert t.statement_cost == expected["statement_cost"]
    assert t.subtotal == expected["subtotal"]
    assert t.discount_amount == expected["discount_amount"]
    assert t.grand_total == expected["total"]
    assert t.transactions == sum(c.transactions for c in clients)
    assert t.statements == sum(c.statements for c in clients)


def test_calculate_is_deterministic_except_timestamp(two_client_request):
    first = calculate(two_client_request, now=datetime(2026, 1, 1, tzinfo=timezone.utc))
    second = calculate(two_client_request, now=datetime(2026, 1, 2, tzinfo=timezone.utc))

    assert first.clients == second.clients
    assert first.totals == second.totals
    assert first.timestamp != second.timestamp


def test_timestamp_is_iso_8601(acme_request):
    result = calculate(acme_request)
    parsed = datetime.fromisoformat(result.timestamp)
    assert parsed.tzinfo is not None


def test_unknown_tier_is_guarded():
    clients = [ClientEntry(name="Foo", tier="platinum", transactions=1, statements=1)]
    with pytest.raises(UnknownTier):
        calculate(make_request(clients=clients))


def test_to_dict_lists_clients(acme_request):
    data = calculate(acme_request).to_dict()
    assert data["company_name"] == "Acme"
    assert isinstance(data["clients"], list)
    assert data["clients"][0]["transaction_cost"] == 260
    assert data["totals"]["grand_total"] == pytest.approx(464)


# ----------------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------------

def test_missing_company_name_reported_first():
    request = make_request(name="   ", email="", clients=[ClientEntry()])
    with pytest.raises(ValidationError) as exc:
        calculate(request)
    assert exc.value.field == "companyName"
    assert exc.value.reason == "required"


def test_missing_email():
    with pytest.raises(ValidationError) as exc:
        validate(make_request(email="  "))
    assert (exc.value.field, exc.value.reason) == ("companyEmail", "required")
    assert exc.value.message == "Please enter an email address"


def test_invalid_email_format():
    with pytest.raises(ValidationError) as exc:
        calculate(make_request(email="not-an-email"))
    assert (exc.value.field, exc.value.reason) == ("companyEmail", "invalidFormat")


def test_email_checked_before_client_names():
    request = make_request(email="bad@", clients=[ClientEntry(name="")])
    with pytest.raises(ValidationError) as exc:
        validate(request)
    assert exc.value.field == "companyEmail"


def test_all_missing_client_names_are_collected():
    clients = [ClientEntry(name=" " * i) for i in range(6)]
    with pytest.raises(ValidationError) as exc:
        calculate(make_request(clients=clients))
    assert exc.value.field == "clients"
    assert exc.value.reason == "missingNames"
    assert exc.value.indices == [0, 1, 2, 3, 4, 5]


def test_only_blank_names_are_listed():
    clients = [ClientEntry(name="A"), ClientEntry(name=""), ClientEntry(name="C"), ClientEntry(name=" ")]
    with pytest.raises(ValidationError) as exc:
        validate(make_request(clients=clients))
    assert exc.value.indices == [1, 3]


def test_empty_client_list_rejected():
    with pytest.raises(ValidationError) as exc:
        validate(make_request(clients=[]))
    assert (exc.value.field, exc.value.reason) == ("clients", "required")


def test_negative_counts_rejected():
    clients = [
        ClientEntry(name="A", transactions=-1),
        ClientEntry(name="B"),
        ClientEntry(name="C", statements=-3),
    ]
    with pytest.raises(ValidationError) as exc:
        validate(make_request(clients=clients))
    assert exc.value.reason == "negativeCount"
    assert exc.value.indices == [0, 2]


def test_validation_error_to_dict():
    err = ValidationError("clients", "missingNames", "Please enter names for all clients", indices=[2])
    assert err.to_dict() == {
        "field": "clients",
        "reason": "missingNames",
        "message": "Please enter names for all clients",
        "indices": [2],
    }


@pytest.mark.parametrize("email,valid", [
    ("a@acme.com", True),
    ("first.last@sub.example.co.za", True),
    ("not-an-email", False),
    ("a@acme", False),
    ("a b@acme.com", False),
    ("@acme.com", False),
    (" a@acme.com", False),
])
def test_email_shape(email, valid):
    assert is_valid_email(email) is valid
