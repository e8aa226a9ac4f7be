"""
Port interface (ABC) for invoice and parcel storage.

Storage adapters implement this interface and signal failures
with StorageError subclasses only.
"""

from abc import ABC, abstractmethod

from bindle.domain.invoice.entities import Invoice, Label


class InvoiceStorage(ABC):
    """Port for persisting invoices and the parcels they reference."""

    @abstractmethod
    def create_invoice(self, invoice: Invoice) -> list[Label]:
        """Store a new invoice.

        Returns:
            Labels of referenced parcels that are not stored yet,
            in invoice order. Empty if the invoice is complete.
        """
        raise NotImplementedError

    @abstractmethod
    def get_invoice(self, bindle_id: str, *, include_yanked: bool = False) -> Invoice:
        """Return the invoice stored under bindle_id."""
        raise NotImplementedError

    @abstractmethod
    def yank_invoice(self, bindle_id: str) -> Invoice:
        """Mark an invoice as yanked and return the updated invoice."""
        raise NotImplementedError

    @abstractmethod
    def create_parcel(self, bindle_id: str, sha256: str, data: bytes) -> Label:
        """Store parcel data for a label referenced by the invoice."""
        raise NotImplementedError
