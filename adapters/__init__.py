"""
Adapters package - External service connections.
"""

from adapters.mongo_adapter import MongoStore

__all__ = [
    "MongoStore",
]
