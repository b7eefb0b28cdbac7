"""API routes package"""

from . import foods, health

__all__ = ["foods", "health"]
