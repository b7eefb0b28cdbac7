"""Food item routes"""

from fastapi import APIRouter, Body, Depends, status
from typing import List, Optional

from api.dependencies import get_food_repository
from domain.schemas.food_schemas import (
    FoodCreate,
    FoodUpdate,
    FoodResponse,
    MessageResponse,
)
from repositories import FoodRepository
from services.food_service import FoodService

router = APIRouter(prefix="/api/foods", tags=["Foods"])

DELETED_MESSAGE = "Food deleted successfully"


@router.get("", response_model=List[FoodResponse], response_model_exclude_unset=True)
async def list_foods(repo: FoodRepository = Depends(get_food_repository)):
    """Return every food item in insertion order"""
    return await FoodService.list_foods(repo)


@router.get(
    "/{food_id}", response_model=FoodResponse, response_model_exclude_unset=True
)
async def get_food(food_id: str, repo: FoodRepository = Depends(get_food_repository)):
    """Get a single food item by id"""
    return await FoodService.get_food(repo, food_id)


@router.post(
    "",
    response_model=FoodResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_food(
    payload: Optional[FoodCreate] = Body(None),
    repo: FoodRepository = Depends(get_food_repository),
):
    """
    Create a food item.

    Every field is optional; missing fields are not stored.

    Example:
    - {"name": "Apple", "category": "Fruit", "quantity": 10,
       "expirationDate": "2024-05-01", "price": 2.5}
    """
    return await FoodService.create_food(repo, payload)


@router.put(
    "/{food_id}", response_model=FoodResponse, response_model_exclude_unset=True
)
async def update_food(
    food_id: str,
    payload: Optional[FoodUpdate] = Body(None),
    repo: FoodRepository = Depends(get_food_repository),
):
    """
    Update some or all fields of a food item.

    The body must contain at least one truthy recognized field; a body such
    as {"quantity": 0} alone is treated as empty and rejected with 400.
    """
    return await FoodService.update_food(repo, food_id, payload)


@router.delete("/{food_id}", response_model=MessageResponse)
async def delete_food(food_id: str, repo: FoodRepository = Depends(get_food_repository)):
    """Delete a food item"""
    await FoodService.delete_food(repo, food_id)
    return {"message": DELETED_MESSAGE}
