"""
Dependency injection for the invoice routes.

Provides FastAPI dependency functions that wire the storage
adapter into use cases via constructor injection.
"""

from functools import lru_cache

from fastapi import Depends

from bindle.application.invoice.create_invoice import CreateInvoiceUseCase
from bindle.application.invoice.get_invoice import GetInvoiceUseCase
from bindle.application.invoice.upload_parcel import UploadParcelUseCase
from bindle.application.invoice.yank_invoice import YankInvoiceUseCase
from bindle.domain.storage.ports import InvoiceStorage
from bindle.infrastructure.storage.memory_storage import MemoryStorage


@lru_cache
def get_storage() -> InvoiceStorage:
    """Return the process-wide storage adapter."""
    return MemoryStorage()


def get_create_invoice_use_case(
    storage: InvoiceStorage = Depends(get_storage),
) -> CreateInvoiceUseCase:
    return CreateInvoiceUseCase(storage=storage)


def get_get_invoice_use_case(
    storage: InvoiceStorage = Depends(get_storage),
) -> GetInvoiceUseCase:
    return GetInvoiceUseCase(storage=storage)


def get_yank_invoice_use_case(
    storage: InvoiceStorage = Depends(get_storage),
) -> YankInvoiceUseCase:
    return YankInvoiceUseCase(storage=storage)


def get_upload_parcel_use_case(
    storage: InvoiceStorage = Depends(get_storage),
) -> UploadParcelUseCase:
    return UploadParcelUseCase(storage=storage)
