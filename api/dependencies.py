"""
API dependencies for dependency injection
"""

from typing import Optional

from fastapi import Depends, Request

from adapters.mongo_adapter import MongoStore
from app.config import settings
from repositories import FoodRepository


def get_optional_store(request: Request) -> Optional[MongoStore]:
    """The MongoStore opened by the application lifespan, or None before startup."""
    return getattr(request.app.state, "store", None)


def get_store(store: Optional[MongoStore] = Depends(get_optional_store)) -> MongoStore:
    """
    The MongoStore opened by the application lifespan.

    Usage:
        @router.get("/example")
        async def example(store: MongoStore = Depends(get_store)):
            ...
    """
    if store is None:
        raise RuntimeError("MongoDB store is not initialized")
    return store


def get_food_repository(store: MongoStore = Depends(get_store)) -> FoodRepository:
    """Food repository bound to the configured collection."""
    return FoodRepository(store.collection(settings.foods_collection))
