"""
Storage errors for the bindle server.

The storage layer fails with exactly one of the kinds listed in
StorageErrorKind. Every subclass of StorageError maps to one kind.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

import errno
from enum import Enum


class StorageErrorKind(Enum):
    """Closed set of storage failure kinds."""

    YANKED = "yanked"
    CREATE_YANKED = "create_yanked"
    NOT_FOUND = "not_found"
    IO = "io"
    EXISTS = "exists"
    MALFORMED = "malformed"
    UNSERIALIZABLE = "unserializable"
    DIGEST_MISMATCH = "digest_mismatch"
    INVALID_ID = "invalid_id"


class StorageError(Exception):
    """Base error for all storage failures.

    Only the subclasses are raised; each one declares its kind.
    """

    kind: StorageErrorKind

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "kind", None), StorageErrorKind):
            raise TypeError(f"{cls.__name__} must declare a StorageErrorKind")

    def __new__(cls, *args, **kwargs):
        if cls is StorageError:
            raise TypeError("StorageError cannot be raised directly")
        return super().__new__(cls, *args, **kwargs)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class YankedError(StorageError):
    """Raised when a yanked bindle is requested without opting in."""

    kind = StorageErrorKind.YANKED

    def __init__(self) -> None:
        super().__init__("bindle is yanked")


class CreateYankedError(StorageError):
    """Raised when an invoice is submitted already marked as yanked."""

    kind = StorageErrorKind.CREATE_YANKED

    def __init__(self) -> None:
        super().__init__("bindle cannot be created as yanked")


class NotFoundError(StorageError):
    """Raised when an invoice or parcel does not exist."""

    kind = StorageErrorKind.NOT_FOUND

    def __init__(self) -> None:
        super().__init__("resource not found")


class StorageIOError(StorageError):
    """Raised when the backing store fails with an OS-level error."""

    kind = StorageErrorKind.IO

    def __init__(self, source: OSError) -> None:
        super().__init__(f"resource could not be loaded: {source!r}")
        self.source = source


class ExistsError(StorageError):
    """Raised when creating a resource that is already stored."""

    kind = StorageErrorKind.EXISTS

    def __init__(self) -> None:
        super().__init__("resource already exists")


class MalformedError(StorageError):
    """Raised when a submitted resource cannot be decoded."""

    kind = StorageErrorKind.MALFORMED

    def __init__(self, detail: str) -> None:
        super().__init__(f"resource is malformed: {detail}")
        self.detail = detail


class UnserializableError(StorageError):
    """Raised when a resource cannot be encoded for storage."""

    kind = StorageErrorKind.UNSERIALIZABLE

    def __init__(self, detail: str) -> None:
        super().__init__(f"resource cannot be stored: {detail}")
        self.detail = detail


class DigestMismatchError(StorageError):
    """Raised when uploaded parcel data does not hash to its label's SHA-256."""

    kind = StorageErrorKind.DIGEST_MISMATCH

    def __init__(self) -> None:
        super().__init__("digest does not match")


class InvalidIdError(StorageError):
    """Raised when a bindle id is not of the form name/semver."""

    kind = StorageErrorKind.INVALID_ID

    def __init__(self) -> None:
        super().__init__("invalid ID given")


def is_missing_resource(error: StorageError) -> bool:
    """Return True if an IO storage error means the resource is absent.

    This is the only place where OS error details leak into the
    storage taxonomy.
    """
    if not isinstance(error, StorageIOError):
        return False
    return (
        isinstance(error.source, FileNotFoundError)
        or error.source.errno == errno.ENOENT
    )
