"""
Pydantic schemas for invoice endpoints.

Invoices can be created before their parcels are uploaded, so the
creation reply tells the client which parcels are still missing.
"""

from pydantic import ConfigDict, field_validator

from bindle.domain.invoice.entities import BindleModel, Invoice, Label
from bindle.shared.serialization import decode_toml


class InvoiceCreateResponse(BindleModel):
    """Reply for invoice creation.

    Attributes:
        invoice: The invoice as stored.
        missing: Labels of referenced parcels that are not stored yet.
            None when the invoice is complete; an empty list is read
            the same way.
    """

    model_config = ConfigDict(extra="forbid")

    invoice: Invoice
    missing: list[Label] | None = None

    @field_validator("missing")
    @classmethod
    def _empty_is_absent(cls, value: list[Label] | None) -> list[Label] | None:
        return value or None

    @classmethod
    def from_toml(cls, data: bytes | str) -> "InvoiceCreateResponse":
        """Decode a TOML reply. Unknown top-level fields are rejected."""
        return cls.model_validate(decode_toml(data))
