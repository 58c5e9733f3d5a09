"""
Streamlit UI for the Quote Calculator.

Features:
- Company details and a resizable client table
- Tier pricing reference cards
- Results table with per-client and total costs
- CSV download and webhook submission
"""
import streamlit as st
import sys
import time
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from quote_calculator.config.settings import get_settings, setup_logging
from quote_calculator.engine import (
    ClientEntry, QuoteRequest, calculate, ValidationError, QuoteError,
)
from quote_calculator.engine.tiers import all_tiers, Tier
from quote_calculator.export.csv_export import to_csv, to_dataframe, export_filename
from quote_calculator.services.quote_form import (
    StatusMessage, clamp_client_count, resize_clients, format_currency,
)
from quote_calculator.services.webhook import submit_quote


st.set_page_config(
    page_title="Pricing Calculator",
    layout="wide",
)


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    setup_logging()
    return get_settings()


settings = get_settings_cached()
TIER_IDS = [t.value for t in Tier]


def show_status(text: str, kind: str = "success"):
    st.session_state.status = StatusMessage(text, kind)


# ============================================================================
# SESSION STATE
# ============================================================================
if 'clients' not in st.session_state:
    st.session_state.clients = [ClientEntry()]
if 'result' not in st.session_state:
    st.session_state.result = None
if 'status' not in st.session_state:
    st.session_state.status = None
if 'error_fields' not in st.session_state:
    st.session_state.error_fields = set()


# ============================================================================
# HEADER & COMPANY DETAILS
# ============================================================================
st.title("Virtual Engine Room Bookkeeping")
st.subheader("Pricing Calculator")

errors = st.session_state.error_fields

col1, col2 = st.columns(2)
with col1:
    company_name = st.text_input(
        "Company Name *", placeholder="Enter company name", key="company_name",
    )
    if 'companyName' in errors:
        st.caption(":red[Company name is required]")
with col2:
    company_email = st.text_input(
        "Email Address *", placeholder="Enter email address", key="company_email",
    )
    if 'companyEmail' in errors:
        st.caption(":red[A valid email address is required]")

num_clients = st.number_input(
    "Number of Clients",
    min_value=settings.min_clients,
    max_value=settings.max_clients,
    value=len(st.session_state.clients),
    step=1,
)
num_clients = clamp_client_count(num_clients, settings)
if num_clients != len(st.session_state.clients):
    st.session_state.clients = resize_clients(st.session_state.clients, num_clients)


# ============================================================================
# CLIENT TABLE
# ============================================================================
with st.container(border=True):
    header = st.columns([3, 2, 2, 2])
    header[0].markdown("**Client Name**")
    header[1].markdown("**Tier**")
    header[2].markdown("**Transactions**")
    header[3].markdown("**Supplier Statements**")

    missing_names = st.session_state.get('missing_names', set())
    updated = []
    for i, client in enumerate(st.session_state.clients):
        c1, c2, c3, c4 = st.columns([3, 2, 2, 2])
        name = c1.text_input(
            "Name", value=client.name, key=f"client_name_{i}",
            placeholder=f"Client {i + 1} name", label_visibility="collapsed",
        )
        if i in missing_names and not name.strip():
            c1.caption(":red[Name required]")
        tier = c2.selectbox(
            "Tier", TIER_IDS, index=TIER_IDS.index(client.tier) if client.tier in TIER_IDS else 0,
            key=f"client_tier_{i}", format_func=str.capitalize, label_visibility="collapsed",
        )
        transactions = c3.number_input(
            "Transactions", min_value=0, value=int(client.transactions), step=1,
            key=f"client_tx_{i}", label_visibility="collapsed",
        )
        statements = c4.number_input(
            "Statements", min_value=0, value=int(client.statements), step=1,
            key=f"client_stmt_{i}", label_visibility="collapsed",
        )
        updated.append(ClientEntry(name, tier, int(transactions), int(statements)))
    st.session_state.clients = updated


if st.button("Calculate", type="primary", use_container_width=True):
    st.session_state.error_fields = set()
    st.session_state.missing_names = set()
    request = QuoteRequest(company_name, company_email, list(st.session_state.clients))
    try:
        st.session_state.result = calculate(request)
        show_status("Calculation completed successfully!")
    except ValidationError as e:
        st.session_state.error_fields = {e.field}
        st.session_state.missing_names = set(e.indices)
        show_status(e.message, "error")
    except QuoteError as e:
        show_status(str(e), "error")
    st.rerun()


# ============================================================================
# TIER PRICING INFORMATION
# ============================================================================
with st.container(border=True):
    st.markdown("##### Tier Pricing Information")
    cards = st.columns(3)
    for card, spec in zip(cards, all_tiers()):
        with card:
            st.markdown(f"**{spec.name}**")
            st.caption(f"Per Transaction: {format_currency(spec.transaction_rate, settings.currency_symbol)}")
            st.caption(f"Supplier Recon to Statement: {format_currency(spec.statement_rate, settings.currency_symbol)}")
            st.markdown(f"Engine Room Fee Discount: :green[**-{spec.discount_percent:g}%**]")


# ============================================================================
# RESULTS
# ============================================================================
result = st.session_state.result
if result is not None:
    table = to_dataframe(result)
    money_columns = ['Transaction Cost', 'Supplier Recon Cost', 'Subtotal', 'Discount', 'Total']
    display = table.copy()
    for col in money_columns:
        display[col] = display[col].map(lambda v: format_currency(v, settings.currency_symbol))
    display['Discount'] = "-" + display['Discount']
    st.dataframe(display, use_container_width=True, hide_index=True)

btn_col1, btn_col2 = st.columns(2)
with btn_col1:
    if result is not None:
        if st.download_button(
            "Download CSV",
            data=to_csv(result),
            file_name=export_filename(result.company_name),
            mime="text/csv",
            use_container_width=True,
        ):
            show_status("CSV downloaded successfully!")
    elif st.button("Download CSV", use_container_width=True):
        show_status("Please calculate costs first", "error")
with btn_col2:
    if st.button("Submit Quote", use_container_width=True):
        try:
            with st.spinner("Submitting quote via Make automation..."):
                submit_quote(result, settings)
            show_status("Quote submitted successfully!")
        except QuoteError as e:
            text = str(e)
            if result is not None:
                text = f"Error submitting via Make: {e}"
            show_status(text, "error")


# ============================================================================
# STATUS MESSAGE
# ============================================================================
status = st.session_state.status
if status is not None and status.is_visible(duration=settings.status_seconds):
    placeholder = st.empty()
    if status.kind == "error":
        placeholder.error(status.text)
    else:
        placeholder.success(status.text)
    remaining = settings.status_seconds - (time.monotonic() - status.created_at)
    time.sleep(max(0.0, remaining))
    placeholder.empty()
    st.session_state.status = None
