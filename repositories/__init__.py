"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.food_repository import FoodRepository

__all__ = [
    "BaseRepository",
    "FoodRepository",
]
