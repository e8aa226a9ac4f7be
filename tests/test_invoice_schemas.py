"""
Tests for the invoice model and the invoice creation reply.

No HTTP or storage involved.
"""

import pytest
from pydantic import ValidationError

from bindle.domain.invoice.entities import (
    BindleSpec,
    Invoice,
    Label,
    Parcel,
    parse_bindle_id,
)
from bindle.domain.storage.errors import InvalidIdError
from bindle.interfaces.invoice.schemas import InvoiceCreateResponse
from bindle.shared.serialization import decode_toml, encode_toml

LABEL_A = Label(sha256="aaaa", name="a.txt", size=1, media_type="text/plain")
LABEL_B = Label(sha256="bbbb", name="b.txt", size=2)

INVOICE = Invoice(
    bindle=BindleSpec(id="example.com/weather/1.0.0", authors=["Matt"]),
    annotations={"team": "storm"},
    parcel=[Parcel(label=LABEL_A), Parcel(label=LABEL_B)],
)

MINIMAL_INVOICE_TOML = """
[invoice]
bindleVersion = "1.0.0"

[invoice.bindle]
id = "example.com/weather/1.0.0"
"""


class TestParseBindleId:
    """Tests for parse_bindle_id()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("weather/1.0.0", ("weather", "1.0.0")),
            ("example.com/weather/1.2.3", ("example.com/weather", "1.2.3")),
            ("weather/1.0.0-rc.1+build.5", ("weather", "1.0.0-rc.1+build.5")),
            ("/weather/1.0.0/", ("weather", "1.0.0")),
        ],
    )
    def test_valid_ids(self, raw: str, expected: tuple[str, str]) -> None:
        assert parse_bindle_id(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "weather", "1.0.0", "/1.0.0", "weather/latest", "weather/1.0"]
    )
    def test_invalid_ids(self, raw: str) -> None:
        with pytest.raises(InvalidIdError):
            parse_bindle_id(raw)


class TestInvoiceModel:
    """Tests for the invoice wire format."""

    def test_fields_are_camel_case(self) -> None:
        data = decode_toml(encode_toml(INVOICE))

        assert data["bindleVersion"] == "1.0.0"
        assert data["bindle"]["id"] == "example.com/weather/1.0.0"
        assert data["parcel"][0]["label"]["mediaType"] == "text/plain"
        assert "yanked" not in data

    def test_decodes_snake_or_camel_case(self) -> None:
        camel = Invoice.model_validate(
            {"bindleVersion": "1.0.0", "bindle": {"id": "w/1.0.0"}}
        )
        snake = Invoice(bindle_version="1.0.0", bindle=BindleSpec(id="w/1.0.0"))
        assert camel == snake

    def test_labels_in_invoice_order(self) -> None:
        assert INVOICE.labels() == [LABEL_A, LABEL_B]
        assert Invoice(bindle=BindleSpec(id="w/1.0.0")).labels() == []


class TestInvoiceCreateResponse:
    """Tests for the invoice creation reply."""

    def test_encodes_invoice_and_missing_fields(self) -> None:
        response = InvoiceCreateResponse(invoice=INVOICE, missing=[LABEL_A, LABEL_B])

        data = decode_toml(encode_toml(response))

        assert set(data) == {"invoice", "missing"}
        assert data["invoice"]["bindle"]["id"] == "example.com/weather/1.0.0"
        assert [m["sha256"] for m in data["missing"]] == ["aaaa", "bbbb"]

    def test_invoice_is_not_flattened(self) -> None:
        data = decode_toml(encode_toml(InvoiceCreateResponse(invoice=INVOICE)))

        assert "bindle" not in data
        assert "bindle" in data["invoice"]

    @pytest.mark.parametrize("missing", [None, []])
    def test_complete_invoice_omits_missing(self, missing) -> None:
        response = InvoiceCreateResponse(invoice=INVOICE, missing=missing)

        assert response.missing is None
        assert set(decode_toml(encode_toml(response))) == {"invoice"}

    def test_round_trip(self) -> None:
        response = InvoiceCreateResponse(invoice=INVOICE, missing=[LABEL_B])
        assert InvoiceCreateResponse.from_toml(encode_toml(response)) == response

    def test_absent_and_empty_missing_are_equivalent(self) -> None:
        absent = InvoiceCreateResponse.from_toml(MINIMAL_INVOICE_TOML)
        empty = InvoiceCreateResponse.from_toml("missing = []\n" + MINIMAL_INVOICE_TOML)

        assert absent.missing is None
        assert empty.missing is None
        assert absent == empty

    def test_unknown_field_is_rejected(self) -> None:
        payload = 'surprise = "field"\n' + MINIMAL_INVOICE_TOML

        with pytest.raises(ValidationError):
            InvoiceCreateResponse.from_toml(payload)
