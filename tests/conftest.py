from __future__ import annotations

import asyncio

import pandas as pd
import pytest

from config import AppConfig
from data.mock_data import MockClient, PlaceholderTables


CUSTOMERS = [
    {"id": "c1", "name": "Alice", "email": "a@x.com", "image_url": "/customers/alice.png"},
    {"id": "c2", "name": "Bob Stone", "email": "bob@stone.io", "image_url": "/customers/bob.png"},
    {"id": "c3", "name": "Carla Diaz", "email": "carla@diaz.dev", "image_url": "/customers/carla.png"},
    {"id": "c4", "name": "Aaron Lee", "email": "aaron@lee.org", "image_url": "/customers/aaron.png"},
]


def _invoices() -> list[dict]:
    rows = []
    for i in range(14):
        customer = CUSTOMERS[i % 3]  # c4 has no invoices
        rows.append(
            {
                "id": f"inv-{i:02d}",
                "customer_id": customer["id"],
                "amount": 1500 + i * 250,
                "status": "paid" if i % 2 else "pending",
                "date": f"2024-03-{i + 1:02d}",
            }
        )
    return rows


INVOICES = _invoices()
REVENUE = [{"month": m, "revenue": 1000 + 100 * n} for n, m in enumerate(["Jan", "Feb", "Mar"])]


def make_tables(customers, invoices, revenue=()) -> PlaceholderTables:
    return PlaceholderTables(
        customers=pd.DataFrame(list(customers), columns=["id", "name", "email", "image_url"]),
        invoices=pd.DataFrame(list(invoices), columns=["id", "customer_id", "amount", "status", "date"]),
        revenue=pd.DataFrame(list(revenue), columns=["month", "revenue"]),
    )


@pytest.fixture
def client() -> MockClient:
    return MockClient(tables=make_tables(CUSTOMERS, INVOICES, REVENUE))


@pytest.fixture
def alice_client() -> MockClient:
    return MockClient(
        tables=make_tables(
            [{"id": "c1", "name": "Alice", "email": "a@x.com", "image_url": "/customers/alice.png"}],
            [{"id": "1", "customer_id": "c1", "amount": 1000, "date": "2024-01-01", "status": "pending"}],
        )
    )


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
        default_use_mock=True,
        simulated_latency_seconds=0.0,
        log_level="INFO",
    )


class FailingClient:
    """Every read fails the way a PostgREST error would surface."""

    def __getattr__(self, name):
        async def fail(*args, **kwargs):
            raise RuntimeError(f"boom: {name}")

        return fail


class PartlyFailingClient:
    """Counts succeed slowly, the status RPC fails immediately."""

    def __init__(self):
        self.finished = []

    async def count_invoices(self):
        await asyncio.sleep(0.01)
        self.finished.append("count_invoices")
        return 14

    async def count_customers(self):
        await asyncio.sleep(0.01)
        self.finished.append("count_customers")
        return 4

    async def invoice_status_rows(self):
        raise RuntimeError("permission denied for function get_invoice_status")


# --- recording fake of the PostgREST builder chain ---


class FakeResponse:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, log: list, response: FakeResponse):
        self.log = log
        self.response = response

    def _record(self, name, *args, **kwargs):
        self.log.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def or_(self, *args, **kwargs):
        return self._record("or_", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def range(self, *args, **kwargs):
        return self._record("range", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    async def execute(self):
        self.log.append(("execute", (), {}))
        return self.response


class FakePostgrest:
    def __init__(self):
        self.closed = False

    async def aclose(self):
        self.closed = True


class FakeSupabase:
    def __init__(self, response: FakeResponse | None = None):
        self.log: list = []
        self.response = response or FakeResponse(data=[])
        self.postgrest = FakePostgrest()

    def table(self, name):
        self.log.append(("table", (name,), {}))
        return FakeQuery(self.log, self.response)

    def rpc(self, fn, params=None):
        self.log.append(("rpc", (fn, params), {}))
        return FakeQuery(self.log, self.response)

    def calls(self, name):
        return [(args, kwargs) for n, args, kwargs in self.log if n == name]
