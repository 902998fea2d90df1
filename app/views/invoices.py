from __future__ import annotations

import asyncio
from dataclasses import asdict

import pandas as pd
import streamlit as st

from config import AppConfig
from data.connection import SupabaseAuthError
from data.errors import DataFetchError
from data.formatting import format_currency, format_date_to_local
from data.models import InvoiceLookup
from data.service import (
    fetch_customers,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
    open_data_client,
)


async def _load_page(cfg: AppConfig, use_mock: bool, query: str, page: int):
    async with open_data_client(cfg, use_mock) as client:
        total = await fetch_invoices_pages(client, query)
        page = min(page, max(total, 1))
        rows = await fetch_filtered_invoices(client, query, page)
    return total, page, rows


async def _lookup(cfg: AppConfig, use_mock: bool, invoice_id: str):
    async with open_data_client(cfg, use_mock) as client:
        lookup, customers = await asyncio.gather(
            fetch_invoice_by_id(client, invoice_id),
            fetch_customers(client),
            return_exceptions=True,
        )
    if isinstance(lookup, BaseException):
        raise lookup
    return lookup, customers


def _render_lookup(lookup: InvoiceLookup, customers) -> None:
    if lookup.status == "remote_error":
        st.error(str(lookup.error))
        return
    if not lookup.found:
        st.info("No invoice with that id.")
        return

    inv = lookup.invoice
    customer_name = inv.customer_id
    if isinstance(customers, DataFetchError):
        st.warning(str(customers))
    else:
        names = {c.id: c.name for c in customers}
        customer_name = names.get(inv.customer_id, inv.customer_id)

    c1, c2, c3 = st.columns(3)
    c1.metric("Customer", customer_name)
    c2.metric("Amount", format_currency(round(inv.amount * 100)))
    c3.metric("Status", inv.status.title())


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Invoices")

    query = st.text_input("Search invoices", key="invoice_query", placeholder="Search invoices...")
    if st.session_state.get("invoice_query_prev") != query:
        # New search starts at the first page
        st.session_state["invoice_query_prev"] = query
        st.session_state["invoice_page"] = 1
    page = int(st.session_state.get("invoice_page", 1))

    try:
        total, page, rows = asyncio.run(_load_page(cfg, use_mock, query, page))
    except SupabaseAuthError as e:
        st.error(str(e))
        return
    except DataFetchError as e:
        st.error(str(e))
        return

    if not rows:
        st.info("No invoices match this search.")
    else:
        df = pd.DataFrame([asdict(r) for r in rows])
        df["date"] = df["date"].map(format_date_to_local)
        df["status"] = df["status"].str.title()
        st.dataframe(
            df[["name", "email", "amount", "date", "status", "id"]],
            hide_index=True,
            use_container_width=True,
        )

    st.session_state["invoice_page"] = page
    st.number_input("Page", min_value=1, max_value=max(total, 1), step=1, key="invoice_page")
    st.caption(f"Page {page} of {max(total, 1)}")

    with st.expander("Look up an invoice", expanded=False):
        invoice_id = st.text_input("Invoice id", key="invoice_lookup_id").strip()
        if invoice_id:
            try:
                lookup, customers = asyncio.run(_lookup(cfg, use_mock, invoice_id))
            except SupabaseAuthError as e:
                st.error(str(e))
                return
            _render_lookup(lookup, customers)
