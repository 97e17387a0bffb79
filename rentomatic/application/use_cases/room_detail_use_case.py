"""
Room detail use case
"""

from rentomatic.application.requests.room_detail_request import RoomDetailValidRequest
from rentomatic.application.use_cases.base_use_case import UseCase
from rentomatic.domain.entities.room_entity import Room
from rentomatic.domain.exceptions import ResourceNotFoundError
from rentomatic.domain.repositories.room_repository import RoomRepository


class RoomDetailUseCase(UseCase):
    """Use case for retrieving a single room by code"""

    def __init__(self, room_repository: RoomRepository):
        super().__init__()
        self._room_repository = room_repository

    def process_request(self, request: RoomDetailValidRequest) -> Room:
        room = self._room_repository.find_by_code(request.code)
        if room is None:
            raise ResourceNotFoundError("Room", request.code)
        return room
