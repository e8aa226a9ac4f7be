"""
TOML reply envelope.

Wraps any serializable value into an HTTP response carrying a TOML
body and the TOML content type. Encoding failures never reach the
client: they are logged once and answered with a bare 500.
"""

import logging
from dataclasses import dataclass
from typing import Any

from starlette.responses import Response

from bindle.shared.serialization import TOML_MIME_TYPE, TomlEncodeError, encode_toml

logger = logging.getLogger(__name__)

HTTP_500 = 500


@dataclass(frozen=True)
class SerializedReply:
    """A TOML-encoded body, or None if encoding failed."""

    body: bytes | None

    @property
    def ok(self) -> bool:
        return self.body is not None

    def into_response(self, status_code: int) -> Response:
        """Build the HTTP response for this reply with the given status.

        A failed reply always becomes an empty 500, whatever status
        the caller asked for.
        """
        if self.body is None:
            return Response(status_code=HTTP_500)
        return Response(
            content=self.body, status_code=status_code, media_type=TOML_MIME_TYPE
        )


def wrap(value: Any, *, log: logging.Logger | None = None) -> SerializedReply:
    """Encode a value as TOML, absorbing encoding failures.

    Args:
        value: A pydantic model, dataclass instance or mapping, possibly
            nesting one another.
        log: Diagnostic sink for encoding failures. Defaults to
            this module's logger.

    Returns:
        The encoded reply, or a failed reply after logging exactly
        one error record.
    """
    try:
        body = encode_toml(value)
    except TomlEncodeError as exc:
        (log or logger).error("Error while serializing TOML: %s", exc)
        return SerializedReply(body=None)
    return SerializedReply(body=body)


def reply(
    value: Any, status_code: int, *, log: logging.Logger | None = None
) -> Response:
    """Build a TOML success response for value with an explicit status."""
    return wrap(value, log=log).into_response(status_code)
