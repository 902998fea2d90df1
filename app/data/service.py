from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Union

from config import AppConfig
from data import queries
from data.connection import SupabaseClient, get_supabase_client
from data.errors import (
    CardDataFetchError,
    CustomerSearchError,
    CustomersFetchError,
    InvoiceByIdFetchError,
    InvoicesFetchError,
    InvoicesPageCountError,
    LatestInvoicesFetchError,
    RevenueFetchError,
)
from data.formatting import format_currency
from data.mock_data import MockClient, placeholder_tables
from data.models import (
    CardData,
    CustomerField,
    CustomersTable,
    InvoiceForm,
    InvoiceLookup,
    InvoicesTable,
    LatestInvoice,
    Revenue,
)


logger = logging.getLogger(__name__)

DataClient = Union[SupabaseClient, MockClient]


async def get_data_client(cfg: AppConfig, use_mock: bool) -> DataClient:
    if use_mock:
        return MockClient(tables=placeholder_tables())
    return await get_supabase_client(cfg)


@asynccontextmanager
async def open_data_client(cfg: AppConfig, use_mock: bool) -> AsyncIterator[DataClient]:
    """
    Client scoped to one event loop (one page render). Always closed on exit,
    including when a fetch fails.
    """
    client = await get_data_client(cfg, use_mock)
    try:
        yield client
    finally:
        await client.aclose()


async def fetch_revenue(client: DataClient, delay_seconds: float = 0.0) -> list[Revenue]:
    try:
        logger.info("Fetching revenue data...")
        if delay_seconds > 0:
            # Artificial delay to demo loading states
            await asyncio.sleep(delay_seconds)

        rows = await client.revenue_rows()

        logger.info("Data fetch completed after %s seconds.", delay_seconds)
        return [Revenue(month=str(r["month"]), revenue=int(r["revenue"])) for r in rows]
    except Exception as e:
        logger.error("Database Error: %s", e)
        raise RevenueFetchError() from e


async def fetch_latest_invoices(client: DataClient) -> list[LatestInvoice]:
    try:
        rows = await client.latest_invoice_rows()
        return [
            LatestInvoice(
                id=str(r["id"]),
                name=r["name"],
                image_url=r["image_url"],
                email=r["email"],
                amount=format_currency(r["amount"]),
            )
            for r in rows[: queries.LATEST_INVOICES_LIMIT]
        ]
    except Exception as e:
        logger.error("Database Error: %s", e)
        raise LatestInvoicesFetchError() from e


async def fetch_card_data(client: DataClient) -> CardData:
    # Settle-all: every sub-request finishes before success/failure is decided
    invoice_count, customer_count, invoice_status = await asyncio.gather(
        client.count_invoices(),
        client.count_customers(),
        client.invoice_status_rows(),
        return_exceptions=True,
    )

    failures = []
    for label, outcome in (
        ("Invoice Count", invoice_count),
        ("Customer Count", customer_count),
        ("Invoice Status", invoice_status),
    ):
        if isinstance(outcome, BaseException):
            failures.append(f"{label} Error: {outcome}")

    if failures:
        for failure in failures:
            logger.error("Database Error: %s", failure)
        raise CardDataFetchError(failures)

    try:
        status: dict[str, Any] = invoice_status[0] if invoice_status else {}
        return CardData(
            number_of_invoices=int(invoice_count or 0),
            number_of_customers=int(customer_count or 0),
            total_paid_invoices=format_currency(status.get("paid") or 0),
            total_pending_invoices=format_currency(status.get("pending") or 0),
        )
    except Exception as e:
        logger.error("Database Error: %s", e)
        raise CardDataFetchError() from e


def _invoices_table_row(row: dict[str, Any]) -> InvoicesTable:
    # Flatten the embedded customer onto the invoice
    customer = row.get("customers") or {}
    return InvoicesTable(
        id=str(row["id"]),
        customer_id=row.get("customer_id"),
        name=customer.get("name", ""),
        email=customer.get("email", ""),
        image_url=customer.get("image_url", ""),
        date=str(row["date"]),
        amount=format_currency(row["amount"]),
        status=row["status"],
    )


async def fetch_filtered_invoices(client: DataClient, query: str, current_page: int) -> list[InvoicesTable]:
    try:
        offset = queries.page_offset(current_page)
        rows = await client.filtered_invoice_rows(query, offset, queries.ITEMS_PER_PAGE)
        return [_invoices_table_row(r) for r in rows[: queries.ITEMS_PER_PAGE]]
    except Exception as e:
        logger.error("Database Error: %s", e)
        raise InvoicesFetchError() from e


async def fetch_invoices_pages(client: DataClient, query: str) -> int:
    try:
        count = await client.count_filtered_invoices(query)
        return queries.total_pages(count)
    except Exception as e:
        logger.error("Database Error: %s", e)
        raise InvoicesPageCountError() from e


async def fetch_invoice_by_id(client: DataClient, invoice_id: str) -> InvoiceLookup:
    try:
        rows = await client.invoice_rows_by_id(invoice_id)
        invoices = [
            InvoiceForm(
                id=str(r["id"]),
                customer_id=str(r["customer_id"]),
                # Convert amount from cents to dollars
                amount=int(r["amount"]) / 100,
                status=r["status"],
            )
            for r in rows
        ]
    except Exception as e:
        logger.error("Database Error: %s", e)
        err = InvoiceByIdFetchError()
        err.__cause__ = e
        return InvoiceLookup(status="remote_error", error=err)

    if not invoices:
        return InvoiceLookup(status="not_found")
    return InvoiceLookup(status="found", invoice=invoices[0])


async def fetch_customers(client: DataClient) -> list[CustomerField]:
    try:
        rows = await client.customer_field_rows()
        return [CustomerField(id=str(r["id"]), name=r["name"]) for r in rows]
    except Exception as err:
        logger.error("Database Error: %s", err)
        raise CustomersFetchError() from err


async def fetch_filtered_customers(client: DataClient, query: str) -> list[CustomersTable]:
    try:
        rows = await client.customer_search_rows(query)
        return [
            CustomersTable(
                id=str(c["id"]),
                name=c["name"],
                email=c["email"],
                image_url=c["image_url"],
                total_invoices=int(c.get("total_invoices") or 0),
                total_pending=format_currency(c.get("total_pending") or 0),
                total_paid=format_currency(c.get("total_paid") or 0),
            )
            for c in rows
        ]
    except Exception as err:
        logger.error("Database Error: %s", err)
        raise CustomerSearchError() from err
