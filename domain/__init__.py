"""
Domain layer - Request and response schemas for food items.
"""

from domain import schemas

__all__ = ["schemas"]
