"""Display shapes returned by the data layer. Views render these directly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from data.errors import DataFetchError


INVOICE_STATUSES = ("pending", "paid")


@dataclass(frozen=True)
class Revenue:
    month: str
    revenue: int


@dataclass(frozen=True)
class LatestInvoice:
    id: str
    name: str
    image_url: str
    email: str
    amount: str  # formatted currency


@dataclass(frozen=True)
class CardData:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


@dataclass(frozen=True)
class InvoicesTable:
    id: str
    customer_id: Optional[str]
    name: str
    email: str
    image_url: str
    date: str
    amount: str  # formatted currency
    status: str


@dataclass(frozen=True)
class InvoiceForm:
    id: str
    customer_id: str
    amount: float  # major units
    status: str


@dataclass(frozen=True)
class CustomerField:
    id: str
    name: str


@dataclass(frozen=True)
class CustomersTable:
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


@dataclass(frozen=True)
class InvoiceLookup:
    """Outcome of a lookup by id: found, no match, or a failed remote call."""

    status: str  # "found" | "not_found" | "remote_error"
    invoice: Optional[InvoiceForm] = None
    error: Optional[DataFetchError] = None

    @property
    def found(self) -> bool:
        return self.status == "found"

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
