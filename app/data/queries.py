from __future__ import annotations

import math
from typing import Optional


ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5

# Tables
REVENUE_TABLE = "revenue"
INVOICES_TABLE = "invoices"
CUSTOMERS_TABLE = "customers"

# Server-side procedures (see sql/dashboard_schema.sql)
RPC_LATEST_INVOICES = "get_latest_invoices"
RPC_INVOICE_STATUS = "get_invoice_status"
RPC_CUSTOMERS_FOR_SEARCH = "get_customers_for_search"

# Embedded join: `!inner` so the search filter on customer columns drops non-matching invoices
INVOICE_TABLE_COLUMNS = "id, customer_id, amount, date, status, customers!inner(name, email, image_url)"
INVOICE_COUNT_COLUMNS = "id, customers!inner(name, email)"
INVOICE_FORM_COLUMNS = "id, customer_id, amount, status"
CUSTOMER_FIELD_COLUMNS = "id, name"

INVOICE_SEARCH_COLUMNS = (
    "customers.name",
    "customers.email",
    "amount::text",
    "date::text",
    "status",
)


def _quote(value: str) -> str:
    # PostgREST reserved chars (, . : ( ) ") are only safe inside double quotes
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def invoice_search_filter(query: str) -> Optional[str]:
    """
    PostgREST `or` expression matching `query` as a case-insensitive substring
    of any searchable invoice column. Returns None for an empty query (no filter).
    """
    if not query:
        return None
    pattern = _quote(f"%{query}%")
    return ",".join(f"{col}.ilike.{pattern}" for col in INVOICE_SEARCH_COLUMNS)


def page_offset(current_page: int) -> int:
    return (max(int(current_page), 1) - 1) * ITEMS_PER_PAGE


def total_pages(count: Optional[int]) -> int:
    return math.ceil(int(count or 0) / ITEMS_PER_PAGE)
