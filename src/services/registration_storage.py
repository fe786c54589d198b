"""Persistence gateway that appends registrations to the document store."""
import logging
from typing import Callable

from src.models.registration import RegistrationRecord
from src.utils.config import DEFAULT_COLLECTION
from src.utils.date_utils import utc_now_iso
from src.utils.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class RegistrationStorage:
    """
    Append-only writer for registration documents.

    Args:
        store: Document store client exposing collection(name).add(document)
        collection_name: Collection that receives every registration
        clock: Returns the server-side createdAt timestamp (ISO 8601)
    """

    def __init__(
        self,
        store,
        collection_name: str = DEFAULT_COLLECTION,
        clock: Callable[[], str] = utc_now_iso
    ):
        self._store = store
        self.collection_name = collection_name
        self._clock = clock

    def append(self, record: RegistrationRecord) -> None:
        """
        Store one registration as a new document.

        The document holds the record's six fields verbatim plus a
        createdAt stamp taken at write time. The generated document id
        is not returned.

        Raises:
            PersistenceError: If the store is unreachable or rejects the write
        """
        document = record.to_document()
        document["createdAt"] = self._clock()

        try:
            self._store.collection(self.collection_name).add(document)
        except Exception as e:
            logger.error(
                f"Error saving registration to {self.collection_name} "
                f"(name={record.name!r}, rollNumber={record.roll_number!r}, "
                f"email={record.email!r}): {e}",
                exc_info=True
            )
            raise PersistenceError("Failed to save registration") from e
