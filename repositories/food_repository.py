"""
Food Repository - Data access layer for food item operations
"""

from typing import Any, Dict, Optional

from pymongo import ReturnDocument

from repositories.base import BaseRepository, Document


class FoodRepository(BaseRepository):
    """Repository for food item data access"""

    async def create(self, document: Document) -> Document:
        """Insert a new food document and return it with its generated _id"""
        to_insert = dict(document)
        with self.translate_errors("insert_one"):
            result = await self.collection.insert_one(to_insert)
        to_insert["_id"] = result.inserted_id
        return to_insert

    async def update(self, food_id: str, fields: Dict[str, Any]) -> Optional[Document]:
        """
        Set the given fields on a food item.

        Returns:
            The document after the update, or None if no item has this id
        """
        with self.translate_errors("find_one_and_update"):
            return await self.collection.find_one_and_update(
                {"_id": self.to_object_id(food_id)},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )

    async def delete(self, food_id: str) -> Optional[Document]:
        """Delete food item by ID, returning the removed document or None"""
        with self.translate_errors("find_one_and_delete"):
            return await self.collection.find_one_and_delete(
                {"_id": self.to_object_id(food_id)}
            )
