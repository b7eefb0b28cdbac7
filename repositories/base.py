"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from abc import ABC
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
import logging

from bson import ObjectId
from bson.errors import BSONError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import (
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
    WriteError,
)

from app.exceptions import ErrorKind, StoreError

logger = logging.getLogger("foodapi.repositories")

Document = Dict[str, Any]

# Server error code for a write rejected by the collection's $jsonSchema validator
DOCUMENT_VALIDATION_FAILURE = 121


def classify_store_error(exc: Exception) -> ErrorKind:
    """Map a driver exception onto the error kind the HTTP layer understands."""
    if isinstance(exc, (BSONError, WriteError)):
        return ErrorKind.VALIDATION
    # Schema validator rejections from findAndModify arrive as command errors.
    if isinstance(exc, OperationFailure) and exc.code == DOCUMENT_VALIDATION_FAILURE:
        return ErrorKind.VALIDATION
    if isinstance(exc, ConnectionFailure):
        return ErrorKind.CONNECTIVITY
    # Remaining PyMongoErrors (auth failures, server errors) mean the store
    # could not do the work, not that the data was wrong.
    return ErrorKind.CONNECTIVITY


class BaseRepository(ABC):
    """
    Base repository over a single MongoDB collection.
    All driver exceptions leaving a repository method are StoreError.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    @contextmanager
    def translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise driver errors from the wrapped block as StoreError."""
        try:
            yield
        except (BSONError, PyMongoError) as exc:
            kind = classify_store_error(exc)
            logger.warning(
                "%s on %s failed (%s): %s",
                operation,
                self.collection.name,
                kind.value,
                exc,
            )
            raise StoreError(str(exc), kind=kind) from exc

    @staticmethod
    def to_object_id(entity_id: str) -> ObjectId:
        """Parse a path id; raises bson.errors.InvalidId for malformed input."""
        return ObjectId(entity_id)

    async def get_all(self) -> List[Document]:
        """Get all documents in natural (insertion) order"""
        with self.translate_errors("find"):
            return [doc async for doc in self.collection.find()]

    async def get_by_id(self, entity_id: str) -> Optional[Document]:
        """
        Get document by ID.

        Returns:
            Document or None if not found
        """
        with self.translate_errors("find_one"):
            return await self.collection.find_one({"_id": self.to_object_id(entity_id)})
