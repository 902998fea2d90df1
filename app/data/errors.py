from __future__ import annotations

from typing import Optional, Sequence


class DataFetchError(RuntimeError):
    """Coarse failure of one data-layer operation. Detail goes to the log only."""

    default_message = "Failed to fetch data."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class RevenueFetchError(DataFetchError):
    default_message = "Failed to fetch revenue data."


class LatestInvoicesFetchError(DataFetchError):
    default_message = "Failed to fetch the latest invoices."


class CardDataFetchError(DataFetchError):
    default_message = "Failed to fetch card data."

    def __init__(self, failures: Sequence[str] = ()):
        self.failures = tuple(failures)
        message = self.default_message
        if self.failures:
            message = f"{message} {' | '.join(self.failures)}"
        super().__init__(message)


class InvoicesFetchError(DataFetchError):
    default_message = "Failed to fetch invoices."


class InvoicesPageCountError(DataFetchError):
    default_message = "Failed to fetch total number of invoices."


class InvoiceByIdFetchError(DataFetchError):
    default_message = "Failed to fetch invoice."


class CustomersFetchError(DataFetchError):
    default_message = "Failed to fetch all customers."


class CustomerSearchError(DataFetchError):
    default_message = "Failed to fetch customer table."
