"""
Use case requests

Request objects are built from raw, untyped input and are either valid
(carrying the parsed arguments) or invalid (carrying field-level errors).
"""

from .request import InvalidRequest, RequestError
from .room_detail_request import RoomDetailValidRequest, build_room_detail_request
from .room_list_request import RoomListValidRequest, build_room_list_request

__all__ = [
    "InvalidRequest",
    "RequestError",
    "RoomDetailValidRequest",
    "RoomListValidRequest",
    "build_room_detail_request",
    "build_room_list_request",
]
