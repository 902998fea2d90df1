from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Optional

import pandas as pd
from faker import Faker

from data import queries
from data.models import INVOICE_STATUSES


fake = Faker()


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

Row = dict[str, Any]


@dataclass(frozen=True)
class PlaceholderTables:
    customers: pd.DataFrame  # id, name, email, image_url
    invoices: pd.DataFrame  # id, customer_id, amount, status, date (ISO text)
    revenue: pd.DataFrame  # month, revenue


def placeholder_tables(n_customers: int = 6, n_invoices: int = 15, seed: int = 7) -> PlaceholderTables:
    random.seed(seed)
    fake.seed_instance(seed)

    customers = []
    for _ in range(n_customers):
        name = fake.unique.name()
        slug = name.lower().replace(" ", "-").replace(".", "")
        customers.append(
            {
                "id": fake.uuid4(),
                "name": name,
                "email": f"{slug.replace('-', '')}@{fake.free_email_domain()}",
                "image_url": f"/customers/{slug}.png",
            }
        )
    fake.unique.clear()

    today = date.today()
    invoices = []
    for _ in range(n_invoices):
        c = random.choice(customers)
        invoices.append(
            {
                "id": fake.uuid4(),
                "customer_id": c["id"],
                # Minor units; a handful of small invoices keeps search-by-amount interesting
                "amount": random.choice([random.randint(500, 9999), random.randint(10000, 500000)]),
                "status": random.choice(INVOICE_STATUSES),
                "date": (today - timedelta(days=random.randint(0, 365))).isoformat(),
            }
        )

    revenue = [{"month": m, "revenue": random.randint(1000, 5000) // 100 * 100} for m in MONTHS]

    return PlaceholderTables(
        customers=pd.DataFrame(customers, columns=["id", "name", "email", "image_url"]),
        invoices=pd.DataFrame(invoices, columns=["id", "customer_id", "amount", "status", "date"]),
        revenue=pd.DataFrame(revenue, columns=["month", "revenue"]),
    )


def _contains(series: pd.Series, needle: str) -> pd.Series:
    return series.astype(str).str.lower().str.contains(needle, regex=False)


@dataclass(frozen=True)
class MockClient:
    """
    In-process stand-in for data.connection.SupabaseClient over placeholder tables.
    Mirrors the row shapes the tables and RPCs return.
    """

    tables: PlaceholderTables

    def _joined(self) -> pd.DataFrame:
        customers = self.tables.customers.rename(columns={"id": "customer_id"})
        joined = self.tables.invoices.merge(customers, on="customer_id", how="inner")
        return joined.sort_values("date", ascending=False, kind="stable")

    def _matching(self, query: str) -> pd.DataFrame:
        joined = self._joined()
        if not query:
            return joined
        q = query.lower()
        mask = (
            _contains(joined["name"], q)
            | _contains(joined["email"], q)
            | _contains(joined["amount"], q)
            | _contains(joined["date"], q)
            | _contains(joined["status"], q)
        )
        return joined[mask]

    async def revenue_rows(self) -> list[Row]:
        return self.tables.revenue.to_dict("records")

    async def latest_invoice_rows(self) -> list[Row]:
        latest = self._joined().head(queries.LATEST_INVOICES_LIMIT)
        return latest[["id", "name", "image_url", "email", "amount"]].to_dict("records")

    async def count_invoices(self) -> Optional[int]:
        return len(self.tables.invoices)

    async def count_customers(self) -> Optional[int]:
        return len(self.tables.customers)

    async def invoice_status_rows(self) -> list[Row]:
        inv = self.tables.invoices
        return [
            {
                "paid": int(inv.loc[inv["status"] == "paid", "amount"].sum()),
                "pending": int(inv.loc[inv["status"] == "pending", "amount"].sum()),
            }
        ]

    async def filtered_invoice_rows(self, query: str, offset: int, limit: int) -> list[Row]:
        page = self._matching(query).iloc[offset : offset + limit]
        return [
            {
                "id": r["id"],
                "customer_id": r["customer_id"],
                "amount": r["amount"],
                "date": r["date"],
                "status": r["status"],
                "customers": {"name": r["name"], "email": r["email"], "image_url": r["image_url"]},
            }
            for r in page.to_dict("records")
        ]

    async def count_filtered_invoices(self, query: str) -> Optional[int]:
        return len(self._matching(query))

    async def invoice_rows_by_id(self, invoice_id: str) -> list[Row]:
        inv = self.tables.invoices
        hit = inv[inv["id"] == invoice_id]
        return hit[["id", "customer_id", "amount", "status"]].to_dict("records")

    async def customer_field_rows(self) -> list[Row]:
        return self.tables.customers.sort_values("name", kind="stable")[["id", "name"]].to_dict("records")

    async def customer_search_rows(self, query: str) -> list[Row]:
        customers = self.tables.customers
        q = query.lower()
        matched = customers[_contains(customers["name"], q) | _contains(customers["email"], q)]
        inv = self.tables.invoices

        rows = []
        for c in matched.sort_values("name", kind="stable").to_dict("records"):
            mine = inv[inv["customer_id"] == c["id"]]
            pending = mine.loc[mine["status"] == "pending", "amount"]
            paid = mine.loc[mine["status"] == "paid", "amount"]
            rows.append(
                {
                    **c,
                    "total_invoices": len(mine),
                    # SUM over no rows is NULL on the backend
                    "total_pending": int(pending.sum()) if len(pending) else None,
                    "total_paid": int(paid.sum()),
                }
            )
        return rows

    async def aclose(self) -> None:
        pass
