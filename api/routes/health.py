"""Health check and utility routes"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
import logging

from adapters.mongo_adapter import MongoStore
from api.dependencies import get_optional_store
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("foodapi.api.health")


@router.get("/", response_class=PlainTextResponse)
async def home():
    return "Home Page"


@router.get("/health-check")
async def health_check(store: Optional[MongoStore] = Depends(get_optional_store)):
    """Basic health check endpoint; reports whether MongoDB answers a ping"""
    database_up = store is not None and await store.ping()
    if not database_up:
        logger.warning("Health check: MongoDB is not reachable")
    return {
        "status": "ok",
        "service": settings.app_name,
        "database": "up" if database_up else "down",
    }
