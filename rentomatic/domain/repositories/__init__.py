"""
Domain repository interfaces

Contains abstract repository interfaces that define contracts for data access.
These follow the Repository pattern and Dependency Inversion principle.
"""

from .room_repository import RoomRepository

__all__ = [
    'RoomRepository'
]
