"""
Adapter: In-memory invoice and parcel storage.

Implements the InvoiceStorage port with process-local dicts.
Suitable for development and tests; nothing survives a restart.
"""

import hashlib
import logging
import threading

from bindle.domain.invoice.entities import Invoice, Label, parse_bindle_id
from bindle.domain.storage.errors import (
    CreateYankedError,
    DigestMismatchError,
    ExistsError,
    NotFoundError,
    YankedError,
)
from bindle.domain.storage.ports import InvoiceStorage

logger = logging.getLogger(__name__)


class MemoryStorage(InvoiceStorage):
    """Concrete storage adapter keeping invoices and parcels in memory.

    Invoices are keyed by their normalized "name/version" id,
    parcels by the SHA-256 of their data.
    """

    def __init__(self) -> None:
        self._invoices: dict[str, Invoice] = {}
        self._parcels: dict[str, bytes] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(bindle_id: str) -> str:
        name, version = parse_bindle_id(bindle_id)
        return f"{name}/{version}"

    def create_invoice(self, invoice: Invoice) -> list[Label]:
        key = self._key(invoice.bindle_id)
        if invoice.yanked:
            raise CreateYankedError()
        with self._lock:
            if key in self._invoices:
                raise ExistsError()
            self._invoices[key] = invoice
            missing = [
                label for label in invoice.labels() if label.sha256 not in self._parcels
            ]
        logger.info("Stored invoice %s (%d missing parcels)", key, len(missing))
        return missing

    def get_invoice(self, bindle_id: str, *, include_yanked: bool = False) -> Invoice:
        key = self._key(bindle_id)
        with self._lock:
            invoice = self._invoices.get(key)
        if invoice is None:
            raise NotFoundError()
        if invoice.yanked and not include_yanked:
            raise YankedError()
        return invoice

    def yank_invoice(self, bindle_id: str) -> Invoice:
        key = self._key(bindle_id)
        with self._lock:
            invoice = self._invoices.get(key)
            if invoice is None:
                raise NotFoundError()
            yanked = invoice.model_copy(update={"yanked": True})
            self._invoices[key] = yanked
        logger.info("Yanked invoice %s", key)
        return yanked

    def create_parcel(self, bindle_id: str, sha256: str, data: bytes) -> Label:
        invoice = self.get_invoice(bindle_id)
        label = next((lb for lb in invoice.labels() if lb.sha256 == sha256), None)
        if label is None:
            raise NotFoundError()
        if hashlib.sha256(data).hexdigest() != sha256:
            raise DigestMismatchError()
        with self._lock:
            if sha256 in self._parcels:
                raise ExistsError()
            self._parcels[sha256] = data
        logger.info("Stored parcel %s for invoice %s", sha256, bindle_id)
        return label
