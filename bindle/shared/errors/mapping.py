"""
Storage error to HTTP reply mapping.

Every storage error kind resolves to exactly one status code.
Client-caused and state-conflict failures are 4xx; only unexpected
IO failures are 5xx. Error bodies are TOML documents of the form:

    error = "bindle is yanked"
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, assert_never

from starlette.responses import Response

from bindle.domain.storage.errors import (
    NotFoundError,
    StorageError,
    StorageErrorKind,
    is_missing_resource,
)
from bindle.interfaces.reply import wrap
from bindle.interfaces.schemas import ErrorResponse

HTTP_400 = 400
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500


def classify(error: StorageError) -> tuple[StorageError, int]:
    """Resolve a storage error to the error to report and its status code.

    An IO error whose cause is a missing file is reported as
    NotFoundError, so the message matches the 404 status.
    """
    match error.kind:
        case StorageErrorKind.YANKED:
            return error, HTTP_400
        case StorageErrorKind.CREATE_YANKED:
            return error, HTTP_422
        case StorageErrorKind.NOT_FOUND:
            return error, HTTP_404
        case StorageErrorKind.IO:
            if is_missing_resource(error):
                return NotFoundError(), HTTP_404
            return error, HTTP_500
        case StorageErrorKind.EXISTS:
            return error, HTTP_400
        case StorageErrorKind.MALFORMED:
            return error, HTTP_400
        case StorageErrorKind.UNSERIALIZABLE:
            return error, HTTP_400
        case StorageErrorKind.DIGEST_MISMATCH:
            return error, HTTP_400
        case StorageErrorKind.INVALID_ID:
            return error, HTTP_400
    assert_never(error.kind)


def reply_from_error(
    error: object, status_code: int, *, log: logging.Logger | None = None
) -> Response:
    """Build a TOML error reply from anything with a string form.

    The message goes through the TOML encoder, so quotes and control
    characters are escaped rather than corrupting the body.
    """
    return wrap(ErrorResponse(error=str(error)), log=log).into_response(status_code)


def into_reply(error: StorageError, *, log: logging.Logger | None = None) -> Response:
    """Build the TOML error reply for a storage error."""
    reported, status_code = classify(error)
    return reply_from_error(reported, status_code, log=log)


def describe_validation_errors(errors: Sequence[Mapping[str, Any]]) -> str:
    """Join pydantic-style validation errors into one line.

    Each error renders as "<dotted location>: <message>".
    """
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in errors
    )
