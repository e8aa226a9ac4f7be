"""
Data Transfer Objects for the invoice application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from bindle.domain.invoice.entities import Invoice, Label


@dataclass(frozen=True)
class CreateInvoiceCommand:
    """Input DTO for storing a new invoice."""

    invoice: Invoice


@dataclass(frozen=True)
class CreateInvoiceResult:
    """Output DTO for invoice creation.

    Attributes:
        invoice: The stored invoice.
        missing: Labels of parcels not yet uploaded, in invoice order.
    """

    invoice: Invoice
    missing: list[Label]


@dataclass(frozen=True)
class GetInvoiceQuery:
    """Input DTO for fetching an invoice.

    Attributes:
        bindle_id: The "name/version" id of the bindle.
        include_yanked: Return the invoice even if it was yanked.
    """

    bindle_id: str
    include_yanked: bool = False


@dataclass(frozen=True)
class YankInvoiceCommand:
    """Input DTO for yanking an invoice."""

    bindle_id: str


@dataclass(frozen=True)
class UploadParcelCommand:
    """Input DTO for uploading parcel data.

    Attributes:
        bindle_id: The invoice that references the parcel.
        sha256: The parcel's label digest.
        data: Raw parcel bytes.
    """

    bindle_id: str
    sha256: str
    data: bytes
