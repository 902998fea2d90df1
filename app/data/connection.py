from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from supabase import AsyncClient, acreate_client

from config import AppConfig
from data import queries


class SupabaseAuthError(RuntimeError):
    pass


Row = dict[str, Any]


@dataclass(frozen=True)
class SupabaseClient:
    """
    Raw reads against the hosted database (PostgREST tables + RPCs).
    Returns rows exactly as the backend sends them; shaping happens in data.service.
    """

    client: AsyncClient

    async def revenue_rows(self) -> list[Row]:
        resp = await self.client.table(queries.REVENUE_TABLE).select("*").execute()
        return resp.data or []

    async def latest_invoice_rows(self) -> list[Row]:
        resp = await self.client.rpc(queries.RPC_LATEST_INVOICES, {}).execute()
        return resp.data or []

    async def count_invoices(self) -> Optional[int]:
        resp = await (
            self.client.table(queries.INVOICES_TABLE)
            .select("*", count="exact", head=True)
            .execute()
        )
        return resp.count

    async def count_customers(self) -> Optional[int]:
        resp = await (
            self.client.table(queries.CUSTOMERS_TABLE)
            .select("*", count="exact", head=True)
            .execute()
        )
        return resp.count

    async def invoice_status_rows(self) -> list[Row]:
        resp = await self.client.rpc(queries.RPC_INVOICE_STATUS, {}).execute()
        return resp.data or []

    async def filtered_invoice_rows(self, query: str, offset: int, limit: int) -> list[Row]:
        req = self.client.table(queries.INVOICES_TABLE).select(queries.INVOICE_TABLE_COLUMNS)
        search = queries.invoice_search_filter(query)
        if search:
            req = req.or_(search)
        resp = await req.order("date", desc=True).range(offset, offset + limit - 1).execute()
        return resp.data or []

    async def count_filtered_invoices(self, query: str) -> Optional[int]:
        req = self.client.table(queries.INVOICES_TABLE).select(
            queries.INVOICE_COUNT_COLUMNS, count="exact", head=True
        )
        search = queries.invoice_search_filter(query)
        if search:
            req = req.or_(search)
        resp = await req.execute()
        return resp.count

    async def invoice_rows_by_id(self, invoice_id: str) -> list[Row]:
        resp = await (
            self.client.table(queries.INVOICES_TABLE)
            .select(queries.INVOICE_FORM_COLUMNS)
            .eq("id", invoice_id)
            .execute()
        )
        return resp.data or []

    async def customer_field_rows(self) -> list[Row]:
        resp = await (
            self.client.table(queries.CUSTOMERS_TABLE)
            .select(queries.CUSTOMER_FIELD_COLUMNS)
            .order("name", desc=False)
            .execute()
        )
        return resp.data or []

    async def customer_search_rows(self, query: str) -> list[Row]:
        resp = await self.client.rpc(queries.RPC_CUSTOMERS_FOR_SEARCH, {"search_text": query}).execute()
        return resp.data or []

    async def aclose(self) -> None:
        # Releases the PostgREST httpx pool; it is bound to the loop that created it
        await self.client.postgrest.aclose()


async def get_supabase_client(cfg: AppConfig) -> SupabaseClient:
    if not cfg.supabase_url:
        raise SupabaseAuthError("Missing SUPABASE_URL. Set it in the environment or .env, or use mock data.")
    if not cfg.supabase_anon_key:
        raise SupabaseAuthError(
            "Missing SUPABASE_ANON_KEY for Supabase authentication. "
            "Set it in the environment or .env, or use mock data."
        )
    client = await acreate_client(cfg.supabase_url, cfg.supabase_anon_key)
    return SupabaseClient(client=client)
