"""
Use case: Fetch an invoice by bindle id.

Input: GetInvoiceQuery (bindle_id, include_yanked)
Output: Invoice
Side effects: None.
Failure cases: InvalidIdError, NotFoundError, YankedError.
"""

from bindle.application.invoice.dtos import GetInvoiceQuery
from bindle.domain.invoice.entities import Invoice
from bindle.domain.storage.ports import InvoiceStorage


class GetInvoiceUseCase:
    """Reads an invoice from storage."""

    def __init__(self, storage: InvoiceStorage) -> None:
        self._storage = storage

    def execute(self, query: GetInvoiceQuery) -> Invoice:
        return self._storage.get_invoice(
            query.bindle_id, include_yanked=query.include_yanked
        )
