"""
FastAPI router for invoices and parcels.

All routes delegate to use cases and answer with TOML replies.
Storage errors propagate to the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.responses import Response

from bindle.application.invoice.create_invoice import CreateInvoiceUseCase
from bindle.application.invoice.dtos import (
    CreateInvoiceCommand,
    GetInvoiceQuery,
    UploadParcelCommand,
    YankInvoiceCommand,
)
from bindle.application.invoice.get_invoice import GetInvoiceUseCase
from bindle.application.invoice.upload_parcel import UploadParcelUseCase
from bindle.application.invoice.yank_invoice import YankInvoiceUseCase
from bindle.domain.invoice.entities import Invoice
from bindle.domain.storage.errors import MalformedError
from bindle.interfaces.invoice.dependencies import (
    get_create_invoice_use_case,
    get_get_invoice_use_case,
    get_upload_parcel_use_case,
    get_yank_invoice_use_case,
)
from bindle.interfaces.invoice.schemas import InvoiceCreateResponse
from bindle.interfaces.reply import reply
from bindle.shared.errors.mapping import describe_validation_errors
from bindle.shared.serialization import TomlDecodeError, decode_toml

router = APIRouter(prefix="/_i", tags=["invoices"])

HTTP_200 = 200
HTTP_201 = 201
HTTP_202 = 202


def _parse_invoice(body: bytes) -> Invoice:
    try:
        return Invoice.model_validate(decode_toml(body))
    except TomlDecodeError as exc:
        raise MalformedError(str(exc)) from exc
    except ValidationError as exc:
        raise MalformedError(describe_validation_errors(exc.errors())) from exc


@router.post(
    "",
    summary="Create an invoice",
    description=(
        "Store a TOML invoice. Answers 201 when every parcel is already "
        "stored, 202 with the missing labels otherwise."
    ),
)
async def create_invoice(
    request: Request,
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
) -> Response:
    """Create an invoice from the TOML request body."""
    invoice = _parse_invoice(await request.body())
    result = use_case.execute(CreateInvoiceCommand(invoice=invoice))
    body = InvoiceCreateResponse(invoice=result.invoice, missing=result.missing)
    return reply(body, HTTP_202 if result.missing else HTTP_201)


@router.post(
    "/{bindle_id:path}@{sha256}",
    summary="Upload a parcel",
    description="Store the raw request body as the parcel with the given SHA-256.",
)
async def upload_parcel(
    bindle_id: str,
    sha256: str,
    request: Request,
    use_case: UploadParcelUseCase = Depends(get_upload_parcel_use_case),
) -> Response:
    """Upload parcel data for a label of an existing invoice."""
    command = UploadParcelCommand(
        bindle_id=bindle_id, sha256=sha256, data=await request.body()
    )
    return reply(use_case.execute(command), HTTP_200)


@router.get(
    "/{bindle_id:path}",
    summary="Get an invoice",
    description="Fetch an invoice. Yanked invoices require yanked=true.",
)
def get_invoice(
    bindle_id: str,
    yanked: bool = False,
    use_case: GetInvoiceUseCase = Depends(get_get_invoice_use_case),
) -> Response:
    """Fetch an invoice by bindle id."""
    invoice = use_case.execute(
        GetInvoiceQuery(bindle_id=bindle_id, include_yanked=yanked)
    )
    return reply(invoice, HTTP_200)


@router.delete(
    "/{bindle_id:path}",
    summary="Yank an invoice",
    description="Mark an invoice as yanked and return it.",
)
def yank_invoice(
    bindle_id: str,
    use_case: YankInvoiceUseCase = Depends(get_yank_invoice_use_case),
) -> Response:
    """Yank an invoice by bindle id."""
    invoice = use_case.execute(YankInvoiceCommand(bindle_id=bindle_id))
    return reply(invoice, HTTP_200)
