"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.food_schemas import (
    FOOD_FIELDS,
    FoodCreate,
    FoodUpdate,
    FoodResponse,
    MessageResponse,
)

__all__ = [
    "FOOD_FIELDS",
    "FoodCreate",
    "FoodUpdate",
    "FoodResponse",
    "MessageResponse",
]
