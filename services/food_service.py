from typing import List, Optional
import logging

from domain.schemas.food_schemas import FoodCreate, FoodUpdate
from repositories import FoodRepository
from repositories.base import Document
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("foodapi.food")

NOT_FOUND_MESSAGE = "Food not found"
NO_UPDATE_DATA_MESSAGE = "No update data provided"


class FoodService:
    """Business logic for food items. StoreError from the repository propagates unchanged."""

    @staticmethod
    async def list_foods(repo: FoodRepository) -> List[Document]:
        """Return every food item in insertion order (no pagination)."""
        return await repo.get_all()

    @staticmethod
    async def get_food(repo: FoodRepository, food_id: str) -> Document:
        food = await repo.get_by_id(food_id)
        if food is None:
            logger.warning(f"food_not_found food_id={food_id}")
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return food

    @staticmethod
    async def create_food(repo: FoodRepository, payload: Optional[FoodCreate]) -> Document:
        """
        Persist a new food item.

        Missing fields are accepted and left out of the stored document; an
        absent body creates an item with only an id and schema version.
        """
        payload = payload or FoodCreate()
        created = await repo.create(payload.to_document())
        logger.info(f"food_created food_id={created['_id']}")
        return created

    @staticmethod
    async def update_food(
        repo: FoodRepository, food_id: str, payload: Optional[FoodUpdate]
    ) -> Document:
        """
        Apply the fields present in the body to an existing food item.

        Raises:
            ServiceValidationError: no recognized field is truthy; the store is not called
            NotFoundError: no item has this id
        """
        if payload is None or not payload.has_update_data():
            raise ServiceValidationError(NO_UPDATE_DATA_MESSAGE)

        updated = await repo.update(food_id, payload.provided_fields())
        if updated is None:
            logger.warning(f"food_update_not_found food_id={food_id}")
            raise NotFoundError(NOT_FOUND_MESSAGE)

        logger.info(f"food_updated food_id={food_id}")
        return updated

    @staticmethod
    async def delete_food(repo: FoodRepository, food_id: str) -> Document:
        """Delete a food item and return the removed document."""
        deleted = await repo.delete(food_id)
        if deleted is None:
            logger.warning(f"food_delete_not_found food_id={food_id}")
            raise NotFoundError(NOT_FOUND_MESSAGE)

        logger.info(f"food_deleted food_id={food_id}")
        return deleted
