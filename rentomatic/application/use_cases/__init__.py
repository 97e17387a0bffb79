"""
Use Cases

Contains the business use cases of the application.
Each use case represents a single business operation.
"""

from .room_detail_use_case import RoomDetailUseCase
from .room_list_use_case import RoomListUseCase

__all__ = [
    'RoomDetailUseCase',
    'RoomListUseCase',
]
