"""
TOML serialization for request and response bodies.

Wraps tomli-w (encoding) and tomllib (decoding) behind two
functions with their own error types, so callers never depend
on the codec libraries' exceptions.
"""

import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w
from pydantic_core import to_jsonable_python

TOML_MIME_TYPE = "application/toml"


class TomlEncodeError(ValueError):
    """Raised when a value cannot be encoded as a TOML document."""


class TomlDecodeError(ValueError):
    """Raised when a payload is not a valid UTF-8 TOML document."""


def to_table(value: Any) -> Mapping[str, Any]:
    """Convert a serializable value into a TOML table.

    Accepts anything pydantic can serialize: models, dataclasses and
    mappings, nested in any combination. Model fields that are None
    are omitted, since TOML has no null.

    Raises:
        TomlEncodeError: If the value does not convert to a mapping.
    """
    data = to_jsonable_python(value, by_alias=True, exclude_none=True)
    if not isinstance(data, Mapping):
        raise TomlEncodeError(
            f"TOML documents must be tables, got {type(value).__name__}"
        )
    return data


def encode_toml(value: Any) -> bytes:
    """Encode a serializable value as a UTF-8 TOML document.

    Raises:
        TomlEncodeError: If the value or any nested value is not
            representable in TOML.
    """
    try:
        return tomli_w.dumps(to_table(value)).encode("utf-8")
    except TomlEncodeError:
        raise
    except (TypeError, ValueError) as exc:
        raise TomlEncodeError(str(exc)) from exc


def decode_toml(data: bytes | str) -> dict[str, Any]:
    """Decode a TOML document into a dict.

    Raises:
        TomlDecodeError: If the payload is not UTF-8 or not valid TOML.
    """
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        return tomllib.loads(text)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise TomlDecodeError(str(exc)) from exc
