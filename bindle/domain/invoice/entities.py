"""
Invoice model for the bindle server.

An invoice describes a bindle (name, version, authors) and the
parcels it is made of. Parcels are identified by the SHA-256 in
their label. Field names are camelCase on the wire.
"""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bindle.domain.storage.errors import InvalidIdError

BINDLE_VERSION = "1.0.0"
DEFAULT_MEDIA_TYPE = "application/octet-stream"

SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


class BindleModel(BaseModel):
    """Base for all invoice models: camelCase aliases, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class BindleSpec(BindleModel):
    """Identifying metadata of a bindle."""

    id: str
    description: str | None = None
    authors: list[str] | None = None


class Label(BindleModel):
    """Identifying metadata for a parcel.

    Attributes:
        sha256: Hex SHA-256 of the parcel data. This is the parcel's address.
        media_type: MIME type of the parcel data.
        name: Human readable parcel name.
        size: Parcel size in bytes.
        annotations: Free-form string annotations.
        feature: Nested feature flags, keyed by feature group.
    """

    sha256: str
    media_type: str = DEFAULT_MEDIA_TYPE
    name: str
    size: int = Field(..., ge=0)
    annotations: dict[str, str] | None = None
    feature: dict[str, dict[str, str]] | None = None


class Condition(BindleModel):
    """Group membership and requirements of a parcel."""

    member_of: list[str] | None = None
    requires: list[str] | None = None


class Parcel(BindleModel):
    """A parcel reference inside an invoice."""

    label: Label
    conditions: Condition | None = None


class Group(BindleModel):
    """A named group of parcels."""

    name: str
    required: bool | None = None
    satisfied_by: Literal["allOf", "oneOf", "optional"] | None = None


class Invoice(BindleModel):
    """The top-level description of a bindle."""

    bindle_version: str = BINDLE_VERSION
    yanked: bool | None = None
    bindle: BindleSpec
    annotations: dict[str, str] | None = None
    parcel: list[Parcel] | None = None
    group: list[Group] | None = None

    @property
    def bindle_id(self) -> str:
        return self.bindle.id

    def labels(self) -> list[Label]:
        """Return the labels of all referenced parcels, in invoice order."""
        return [p.label for p in self.parcel or []]


def parse_bindle_id(raw: str) -> tuple[str, str]:
    """Split a bindle id into (name, version).

    The version is the last path segment and must be a semantic
    version. The name may itself contain slashes.

    Raises:
        InvalidIdError: If the id has no name or no valid version.
    """
    name, sep, version = raw.strip("/").rpartition("/")
    if not sep or not name or not SEMVER_PATTERN.match(version):
        raise InvalidIdError()
    return name, version
