"""
Use case: Store a new invoice.

Input: CreateInvoiceCommand (invoice)
Output: CreateInvoiceResult
Side effects: Persists the invoice.
Failure cases: InvalidIdError, CreateYankedError, ExistsError.
"""

import logging

from bindle.application.invoice.dtos import CreateInvoiceCommand, CreateInvoiceResult
from bindle.domain.storage.ports import InvoiceStorage

logger = logging.getLogger(__name__)


class CreateInvoiceUseCase:
    """Stores an invoice and reports which of its parcels are missing."""

    def __init__(self, storage: InvoiceStorage) -> None:
        self._storage = storage

    def execute(self, command: CreateInvoiceCommand) -> CreateInvoiceResult:
        """Run the invoice creation use case.

        Args:
            command: The invoice to store.

        Returns:
            The stored invoice and its missing parcel labels.
        """
        logger.info("Creating invoice %s", command.invoice.bindle_id)
        missing = self._storage.create_invoice(command.invoice)
        return CreateInvoiceResult(invoice=command.invoice, missing=missing)
