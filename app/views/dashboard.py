from __future__ import annotations

import asyncio
from dataclasses import asdict

import pandas as pd
import streamlit as st

from components.metrics import Kpi, bar_chart, render_kpi_row
from config import AppConfig
from data.connection import SupabaseAuthError
from data.errors import DataFetchError
from data.service import fetch_card_data, fetch_latest_invoices, fetch_revenue, open_data_client


async def _load(cfg: AppConfig, use_mock: bool):
    async with open_data_client(cfg, use_mock) as client:
        # Each section fails on its own
        return await asyncio.gather(
            fetch_card_data(client),
            fetch_revenue(client, delay_seconds=cfg.simulated_latency_seconds),
            fetch_latest_invoices(client),
            return_exceptions=True,
        )


def _raise_unexpected(*results) -> None:
    for r in results:
        if isinstance(r, BaseException) and not isinstance(r, DataFetchError):
            raise r


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Dashboard")

    try:
        with st.spinner("Loading dashboard..."):
            cards, revenue, latest = asyncio.run(_load(cfg, use_mock))
    except SupabaseAuthError as e:
        st.error(str(e))
        return
    _raise_unexpected(cards, revenue, latest)

    # --- KPI cards ---
    if isinstance(cards, DataFetchError):
        st.error(str(cards))
    else:
        render_kpi_row(
            [
                Kpi("Collected", cards.total_paid_invoices, help="Sum of paid invoices"),
                Kpi("Pending", cards.total_pending_invoices, help="Sum of invoices awaiting payment"),
                Kpi("Total Invoices", f"{cards.number_of_invoices:,}"),
                Kpi("Total Customers", f"{cards.number_of_customers:,}"),
            ]
        )

    st.divider()
    left, right = st.columns([3, 2])

    # --- Revenue chart ---
    with left:
        st.subheader("Recent Revenue")
        if isinstance(revenue, DataFetchError):
            st.error(str(revenue))
        elif not revenue:
            st.info("No data available.")
        else:
            df = pd.DataFrame([asdict(r) for r in revenue])
            bar_chart(df, x="month", y="revenue", title="Revenue by month", y_format="currency")

    # --- Latest invoices ---
    with right:
        st.subheader("Latest Invoices")
        if isinstance(latest, DataFetchError):
            st.error(str(latest))
        elif not latest:
            st.info("No invoices yet.")
        else:
            df = pd.DataFrame([asdict(i) for i in latest])
            st.dataframe(
                df[["name", "email", "amount"]],
                hide_index=True,
                use_container_width=True,
            )
