"""
Use case: Yank an invoice.

Yanked invoices stay stored but are only served on explicit request.

Input: YankInvoiceCommand (bindle_id)
Output: Invoice (with yanked = true)
Side effects: Updates the stored invoice.
Failure cases: InvalidIdError, NotFoundError.
"""

import logging

from bindle.application.invoice.dtos import YankInvoiceCommand
from bindle.domain.invoice.entities import Invoice
from bindle.domain.storage.ports import InvoiceStorage

logger = logging.getLogger(__name__)


class YankInvoiceUseCase:
    """Marks an invoice as yanked."""

    def __init__(self, storage: InvoiceStorage) -> None:
        self._storage = storage

    def execute(self, command: YankInvoiceCommand) -> Invoice:
        logger.info("Yanking invoice %s", command.bindle_id)
        return self._storage.yank_invoice(command.bindle_id)
