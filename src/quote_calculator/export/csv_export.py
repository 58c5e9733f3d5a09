"""
Export Formatter - CSV and table views of a quote result.

The CSV layout is fixed: a header row, one row per client in result order,
then a synthetic TOTAL row. Numbers are written bare (no currency symbol,
no thousands separator).
"""
import re
from typing import Optional

import pandas as pd

from ..engine.errors import NoResultAvailable
from ..engine.models import QuoteResult

CSV_HEADER = [
    'Client Name', 'Tier', 'Transactions', 'Supplier Statements',
    'Transaction Cost', 'Supplier Recon Cost', 'Subtotal', 'Discount Amount', 'Total',
]

TABLE_COLUMNS = [
    'Client', 'Tier', 'Transaction Cost', 'Supplier Recon Cost',
    'Subtotal', 'Discount', 'Total',
]


def format_number(value) -> str:
    """Render a number for CSV: integral floats without '.0', others in shortest form."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def _quote(text: str) -> str:
    return '"' + str(text).replace('"', '""') + '"'


def _capitalize(tier_id: str) -> str:
    return tier_id[:1].upper() + tier_id[1:]


def to_csv(result: Optional[QuoteResult]) -> str:
    """
    Serialize a quote result as CSV text.

    Raises:
        NoResultAvailable: no calculation has been run yet
    """
    if result is None:
        raise NoResultAvailable()

    lines = [','.join(CSV_HEADER)]
    for client in result.clients:
        row = [
            _quote(client.name),
            _capitalize(client.tier),
            client.transactions,
            client.statements,
            client.transaction_cost,
            client.statement_cost,
            client.subtotal,
            client.discount_amount,
            client.total,
        ]
        lines.append(','.join(row[:2] + [format_number(v) for v in row[2:]]))

    totals = result.totals
    total_row = [
        totals.transactions,
        totals.statements,
        totals.transaction_cost,
        totals.statement_cost,
        totals.subtotal,
        totals.discount_amount,
        totals.grand_total,
    ]
    lines.append(','.join(['"TOTAL"', '-'] + [format_number(v) for v in total_row]))

    return '\n'.join(lines) + '\n'


def export_filename(company_name: str) -> str:
    """Download name for a company's quote, e.g. pricing-quote-Acme-Ltd-.csv"""
    return f"pricing-quote-{re.sub(r'[^a-zA-Z0-9]', '-', company_name)}.csv"


def to_dataframe(result: Optional[QuoteResult]) -> pd.DataFrame:
    """
    Results table as a DataFrame: one row per client plus a TOTAL row.

    Monetary columns stay numeric; formatting is left to the caller.
    """
    if result is None:
        raise NoResultAvailable()

    rows = [{
        'Client': c.name,
        'Tier': c.tier,
        'Transaction Cost': c.transaction_cost,
        'Supplier Recon Cost': c.statement_cost,
        'Subtotal': c.subtotal,
        'Discount': c.discount_amount,
        'Total': c.total,
    } for c in result.clients]

    t = result.totals
    rows.append({
        'Client': 'TOTAL',
        'Tier': '-',
        'Transaction Cost': t.transaction_cost,
        'Supplier Recon Cost': t.statement_cost,
        'Subtotal': t.subtotal,
        'Discount': t.discount_amount,
        'Total': t.grand_total,
    })

    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
