"""
Repository implementations
"""

from .memory_room_repository import MemoryRoomRepository
from .sqlalchemy_room_repository import SQLAlchemyRoomRepository

__all__ = ["MemoryRoomRepository", "SQLAlchemyRoomRepository"]
