from __future__ import annotations

import asyncio
from dataclasses import asdict

import pandas as pd
import streamlit as st

from config import AppConfig
from data.connection import SupabaseAuthError
from data.errors import DataFetchError
from data.service import fetch_filtered_customers, open_data_client


async def _load(cfg: AppConfig, use_mock: bool, query: str):
    async with open_data_client(cfg, use_mock) as client:
        return await fetch_filtered_customers(client, query)


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Customers")

    query = st.text_input("Search customers", key="customer_query", placeholder="Search customers...")

    try:
        customers = asyncio.run(_load(cfg, use_mock, query))
    except (SupabaseAuthError, DataFetchError) as e:
        st.error(str(e))
        return

    if not customers:
        st.info("No customers match this search.")
        return

    df = pd.DataFrame([asdict(c) for c in customers])
    st.dataframe(
        df[["name", "email", "total_invoices", "total_pending", "total_paid"]].rename(
            columns={
                "name": "Name",
                "email": "Email",
                "total_invoices": "Total Invoices",
                "total_pending": "Total Pending",
                "total_paid": "Total Paid",
            }
        ),
        hide_index=True,
        use_container_width=True,
    )
