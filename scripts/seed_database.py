#!/usr/bin/env python3
"""
Seed the Supabase tables with the same Faker placeholder data mock mode shows.

Apply sql/dashboard_schema.sql first. Reads SUPABASE_URL / SUPABASE_ANON_KEY
through app/config.py (the anon key needs insert rights on the three tables).

Usage:
  python scripts/seed_database.py --customers 6 --invoices 15
  python scripts/seed_database.py --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

# Make `app/` importable as a flat module path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
APP_DIR = os.path.join(REPO_ROOT, "app")
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import get_config  # noqa: E402
from data import queries  # noqa: E402
from data.connection import get_supabase_client  # noqa: E402
from data.mock_data import PlaceholderTables, placeholder_tables  # noqa: E402
from logger import configure_logging  # noqa: E402


logger = logging.getLogger("seed_database")


async def seed(tables: PlaceholderTables) -> None:
    sb = await get_supabase_client(get_config())
    # Customers before invoices (foreign key)
    for name, df, conflict in (
        (queries.CUSTOMERS_TABLE, tables.customers, "id"),
        (queries.INVOICES_TABLE, tables.invoices, "id"),
        (queries.REVENUE_TABLE, tables.revenue, "month"),
    ):
        records = df.to_dict("records")
        await sb.client.table(name).upsert(records, on_conflict=conflict).execute()
        logger.info("Seeded %s rows into %s", len(records), name)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--customers", type=int, default=6)
    ap.add_argument("--invoices", type=int, default=15)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--dry-run", action="store_true", help="Generate data and print counts only")
    args = ap.parse_args()

    configure_logging(get_config().log_level)
    tables = placeholder_tables(n_customers=args.customers, n_invoices=args.invoices, seed=args.seed)

    if args.dry_run:
        print(f"customers={len(tables.customers)} invoices={len(tables.invoices)} revenue={len(tables.revenue)}")
        return

    asyncio.run(seed(tables))


if __name__ == "__main__":
    main()
