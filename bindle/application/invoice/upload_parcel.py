"""
Use case: Upload the data of a parcel referenced by an invoice.

Input: UploadParcelCommand (bindle_id, sha256, data)
Output: Label of the stored parcel
Side effects: Persists the parcel data.
Failure cases: NotFoundError, YankedError, ExistsError, DigestMismatchError.
"""

import logging

from bindle.application.invoice.dtos import UploadParcelCommand
from bindle.domain.invoice.entities import Label
from bindle.domain.storage.ports import InvoiceStorage

logger = logging.getLogger(__name__)


class UploadParcelUseCase:
    """Stores parcel data after checking it against the invoice label."""

    def __init__(self, storage: InvoiceStorage) -> None:
        self._storage = storage

    def execute(self, command: UploadParcelCommand) -> Label:
        """Run the parcel upload use case.

        Args:
            command: The parcel address and its data.

        Returns:
            The label the parcel was stored under.
        """
        logger.info(
            "Uploading parcel %s for bindle %s (%d bytes)",
            command.sha256,
            command.bindle_id,
            len(command.data),
        )
        return self._storage.create_parcel(
            command.bindle_id, command.sha256, command.data
        )
